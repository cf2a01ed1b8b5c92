"""Validate settings, compose the notification and hand it to the sender."""

import logging

from slack_notify.channels.compose import compose_fallback, compose_text
from slack_notify.channels.slack import build_message
from slack_notify.config import Settings
from slack_notify.errors import DeliveryError, MissingWebhook
from slack_notify.pipeline import Pipeline
from slack_notify.providers.base import TemplateRenderer, WebhookSender

logger = logging.getLogger(__name__)


class Dispatcher:
    """
    Sends one notification for one pipeline run.

    Composition happens completely before the send, so any template or file
    error means no request is made. Exactly one send is attempted.
    """

    def __init__(
        self,
        settings: Settings,
        pipeline: Pipeline,
        renderer: TemplateRenderer,
        sender: WebhookSender,
    ):
        self.settings = settings
        self.pipeline = pipeline
        self.renderer = renderer
        self.sender = sender

    def validate(self) -> None:
        if not self.settings.webhook:
            raise MissingWebhook()

    async def execute(self) -> None:
        text = compose_text(self.settings, self.pipeline, self.renderer)
        fallback = compose_fallback(self.settings, self.pipeline, self.renderer)
        message = build_message(self.settings, self.pipeline, text, fallback)

        logger.info(
            "sending message channel=%s username=%s text=%s",
            message.channel,
            message.username,
            text,
        )
        try:
            await self.sender.send(self.settings.webhook, message)
        except DeliveryError:
            raise
        except Exception as exc:
            raise DeliveryError(f"could not send webhook: {exc}") from exc
