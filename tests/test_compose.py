"""Tests for message text composition."""

import pytest

from slack_notify.channels.compose import (
    compose_fallback,
    compose_text,
    default_fallback,
    default_message,
    detect_ref,
)
from slack_notify.config import Settings
from slack_notify.errors import TemplateFileReadError, TemplateRenderError
from slack_notify.pipeline import Build, Commit
from slack_notify.providers.jinja import JinjaRenderer


@pytest.fixture
def renderer():
    return JinjaRenderer()


class TestDetectRef:
    def test_long_sha_is_truncated(self):
        assert detect_ref(Build(tag="v1"), Commit(sha="0123456789abcdef")) == "01234567"

    def test_exactly_eight(self):
        assert detect_ref(Build(), Commit(sha="01234567")) == "01234567"

    def test_short_sha_is_kept_whole(self):
        assert detect_ref(Build(tag="v1"), Commit(sha="abc")) == "abc"

    def test_empty_sha_uses_tag(self):
        assert detect_ref(Build(tag="v1.2.0"), Commit()) == "v1.2.0"

    def test_empty_sha_and_tag(self):
        assert detect_ref(Build(), Commit()) == ""


def test_default_message(pipeline):
    assert default_message(pipeline) == "*success* <http://x|o/r#abcdef12> (main) by Al"


def test_default_fallback(pipeline):
    assert default_fallback(pipeline) == "success o/r#abcdef12 (main) by Al"


def test_no_templates_use_defaults(pipeline, renderer):
    settings = Settings(webhook="http://hook")
    assert compose_text(settings, pipeline, renderer) == "*success* <http://x|o/r#abcdef12> (main) by Al"
    assert compose_fallback(settings, pipeline, renderer) == "success o/r#abcdef12 (main) by Al"


def test_inline_template_is_rendered(pipeline, renderer):
    settings = Settings(template="{{ build.status }} on {{ repo.owner }}/{{ repo.name }}")
    assert compose_text(settings, pipeline, renderer) == "success on o/r"


def test_template_file_overrides_inline_template(tmp_path, pipeline, renderer):
    path = tmp_path / "message.tmpl"
    path.write_text("{{build.status}}\n")
    settings = Settings(template="ignored {{ repo.name }}", template_file=str(path))

    assert compose_text(settings, pipeline, renderer) == "success"
    # settings are left untouched
    assert settings.template == "ignored {{ repo.name }}"


def test_missing_template_file(tmp_path, pipeline, renderer):
    settings = Settings(template_file=str(tmp_path / "nope.tmpl"))
    with pytest.raises(TemplateFileReadError, match="could not read template file"):
        compose_text(settings, pipeline, renderer)


def test_bad_template_is_wrapped(pipeline, renderer):
    settings = Settings(template="{{ build.status ")
    with pytest.raises(TemplateRenderError, match="could not create template message"):
        compose_text(settings, pipeline, renderer)


def test_bad_fallback_is_wrapped(pipeline, renderer):
    settings = Settings(fallback="{% if %}")
    with pytest.raises(TemplateRenderError, match="could not create fallback message"):
        compose_fallback(settings, pipeline, renderer)


def test_fallback_template_is_independent_of_message_template(pipeline, renderer):
    settings = Settings(fallback="{{ commit.author }} built {{ build.branch }}")
    assert compose_text(settings, pipeline, renderer) == default_message(pipeline)
    assert compose_fallback(settings, pipeline, renderer) == "Al built main"


def test_blank_fallback_render_uses_default(pipeline, renderer):
    settings = Settings(fallback="{{ build.missing }}  ")
    assert compose_fallback(settings, pipeline, renderer) == default_fallback(pipeline)


def test_runtime_failure_in_template_is_wrapped(pipeline, renderer):
    settings = Settings(template="{{ build.status | since }}")
    with pytest.raises(TemplateRenderError, match="could not create template message"):
        compose_text(settings, pipeline, renderer)


def test_runtime_failure_in_fallback_is_wrapped(pipeline, renderer):
    settings = Settings(fallback="{{ build.branch | regex_replace('(', 'x') }}")
    with pytest.raises(TemplateRenderError, match="could not create fallback message"):
        compose_fallback(settings, pipeline, renderer)
