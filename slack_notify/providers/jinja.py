"""Jinja2-backed template renderer."""

import re
import time

from jinja2 import TemplateError
from jinja2.sandbox import SandboxedEnvironment

from slack_notify.errors import TemplateRenderError
from slack_notify.pipeline import Pipeline
from slack_notify.providers.base import TemplateRenderer


def uppercasefirst(value: str) -> str:
    value = str(value)
    return value[:1].upper() + value[1:]


def short_sha(value: str) -> str:
    return str(value)[:8]


def format_duration(seconds: int) -> str:
    """Compact duration such as ``1h2m3s`` or ``45s``."""
    seconds = max(int(seconds), 0)
    hours, rest = divmod(seconds, 3600)
    minutes, secs = divmod(rest, 60)
    if hours:
        return f"{hours}h{minutes}m{secs}s"
    if minutes:
        return f"{minutes}m{secs}s"
    return f"{secs}s"


def duration(start: int, end: int) -> str:
    return format_duration(int(end) - int(start))


def since(timestamp: int) -> str:
    """Time elapsed from a unix timestamp until now."""
    return format_duration(int(time.time()) - int(timestamp))


def regex_replace(value: str, pattern: str, replacement: str) -> str:
    return re.sub(pattern, replacement, str(value))


class JinjaRenderer(TemplateRenderer):
    """
    Render templates with a sandboxed Jinja2 environment.

    The context exposes ``build``, ``repo`` and ``commit``, so templates read
    like ``{{ build.status }} {{ repo.owner }}/{{ repo.name }}``. Output is
    stripped of surrounding whitespace.
    """

    def __init__(self):
        self.env = SandboxedEnvironment(autoescape=False)
        self.env.filters.update(
            uppercasefirst=uppercasefirst,
            short_sha=short_sha,
            since=since,
            regex_replace=regex_replace,
        )
        self.env.globals["duration"] = duration

    def render(self, template: str, pipeline: Pipeline) -> str:
        try:
            compiled = self.env.from_string(template)
            return compiled.render(**pipeline.template_context()).strip()
        except TemplateError as exc:
            raise TemplateRenderError(str(exc)) from exc
        except Exception as exc:
            # filters and expressions fail at render time with plain errors
            raise TemplateRenderError(f"{type(exc).__name__}: {exc}") from exc
