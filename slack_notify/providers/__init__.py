"""Template engine and webhook transport implementations."""

from slack_notify.providers.base import TemplateRenderer, WebhookSender
from slack_notify.providers.jinja import JinjaRenderer
from slack_notify.providers.webhook import HttpWebhookSender

__all__ = [
    "HttpWebhookSender",
    "JinjaRenderer",
    "TemplateRenderer",
    "WebhookSender",
]
