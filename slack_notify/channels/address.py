"""Destination resolution for the webhook message."""


def prepend(prefix: str, value: str) -> str:
    if not value.startswith(prefix):
        return prefix + value
    return value


def resolve_address(recipient: str, channel: str) -> str:
    """
    Pick the message destination.

    A direct recipient wins over a channel. With neither set the result is
    empty and the webhook's default channel is used.
    """
    if recipient:
        return prepend("@", recipient)
    if channel:
        return prepend("#", channel)
    return ""
