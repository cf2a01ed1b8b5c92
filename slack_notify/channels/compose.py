"""Primary and fallback text for the notification."""

import logging
from pathlib import Path

from slack_notify.config import Settings
from slack_notify.errors import TemplateFileReadError, TemplateRenderError
from slack_notify.pipeline import Build, Commit, Pipeline
from slack_notify.providers.base import TemplateRenderer

logger = logging.getLogger(__name__)

SHORT_SHA_LENGTH = 8


def detect_ref(build: Build, commit: Commit) -> str:
    """Short commit SHA, or the build tag when there is no commit."""
    if commit.sha:
        return commit.sha[:SHORT_SHA_LENGTH]
    return build.tag


def default_message(pipeline: Pipeline) -> str:
    build, repo, commit = pipeline.build, pipeline.repo, pipeline.commit
    return (
        f"*{build.status}* <{build.link}|{repo.owner}/{repo.name}#{detect_ref(build, commit)}>"
        f" ({build.branch}) by {commit.author}"
    )


def default_fallback(pipeline: Pipeline) -> str:
    build, repo, commit = pipeline.build, pipeline.repo, pipeline.commit
    return (
        f"{build.status} {repo.owner}/{repo.name}#{detect_ref(build, commit)}"
        f" ({build.branch}) by {commit.author}"
    )


def load_template_file(path: str) -> str:
    try:
        data = Path(path).read_bytes().decode("utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise TemplateFileReadError(f"could not read template file: {exc}") from exc
    logger.info("loaded template file %s", path)
    logger.debug("template_raw=%r", data)
    return data


def compose_text(settings: Settings, pipeline: Pipeline, renderer: TemplateRenderer) -> str:
    """
    Build the primary message text.

    A template file takes precedence over the inline template. Without
    either, the default one-line summary with a build link is used.
    """
    template = settings.template
    if settings.template_file:
        template = load_template_file(settings.template_file)

    if not template:
        return default_message(pipeline)

    logger.info("parsed template")
    logger.debug("template=%r", template)
    try:
        text = renderer.render(template, pipeline)
    except TemplateRenderError as exc:
        raise TemplateRenderError(f"could not create template message: {exc}") from exc
    logger.info("completed message: %s", text)
    return text


def compose_fallback(settings: Settings, pipeline: Pipeline, renderer: TemplateRenderer) -> str:
    """Plain-text fallback. Never empty."""
    if not settings.fallback:
        return default_fallback(pipeline)

    try:
        text = renderer.render(settings.fallback, pipeline)
    except TemplateRenderError as exc:
        raise TemplateRenderError(f"could not create fallback message: {exc}") from exc
    return text or default_fallback(pipeline)
