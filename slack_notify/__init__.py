"""Chat webhook notifications for CI pipelines."""

from slack_notify.config import Settings
from slack_notify.dispatcher import Dispatcher
from slack_notify.errors import (
    DeliveryError,
    MissingWebhook,
    NotifyError,
    TemplateFileReadError,
    TemplateRenderError,
)
from slack_notify.pipeline import Build, Commit, Pipeline, Repo

__all__ = [
    "Build",
    "Commit",
    "DeliveryError",
    "Dispatcher",
    "MissingWebhook",
    "NotifyError",
    "Pipeline",
    "Repo",
    "Settings",
    "TemplateFileReadError",
    "TemplateRenderError",
]
