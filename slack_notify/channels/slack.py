"""Slack webhook message assembly."""

from slack_notify.channels import Attachment, NotificationMessage
from slack_notify.channels.address import resolve_address
from slack_notify.channels.color import resolve_color
from slack_notify.config import Settings
from slack_notify.pipeline import Pipeline


def build_message(settings: Settings, pipeline: Pipeline, text: str, fallback: str) -> NotificationMessage:
    """Combine the composed texts with the appearance settings into one message."""
    attachment = Attachment(
        color=resolve_color(settings.color, pipeline.build.status),
        text=text,
        fallback=fallback,
        image_url=settings.image_url,
    )
    return NotificationMessage(
        attachments=(attachment,),
        channel=resolve_address(settings.recipient, settings.channel),
        username=settings.username,
        icon_url=settings.icon_url,
        icon_emoji=settings.icon_emoji,
    )
