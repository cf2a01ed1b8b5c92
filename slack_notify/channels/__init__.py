"""Message types for the chat webhook payload."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Attachment:
    """A single coloured section of a chat message."""
    color: str
    text: str
    fallback: str
    image_url: str = ""
    mrkdwn_in: tuple[str, ...] = ("text", "fallback")

    def to_payload(self) -> dict:
        payload = {
            "color": self.color,
            "text": self.text,
            "fallback": self.fallback,
            "mrkdwn_in": list(self.mrkdwn_in),
        }
        if self.image_url:
            payload["image_url"] = self.image_url
        return payload


@dataclass(frozen=True)
class NotificationMessage:
    """The complete webhook message. Empty optional fields are left off the wire."""
    attachments: tuple[Attachment, ...]
    channel: str = ""
    username: str = ""
    icon_url: str = ""
    icon_emoji: str = ""

    def to_payload(self) -> dict:
        payload = {
            key: value
            for key, value in (
                ("channel", self.channel),
                ("username", self.username),
                ("icon_url", self.icon_url),
                ("icon_emoji", self.icon_emoji),
            )
            if value
        }
        payload["attachments"] = [a.to_payload() for a in self.attachments]
        return payload
