"""Detection of the webhook flavour from its URL."""


def is_slack_webhook(url: str) -> bool:
    """
    True for Slack incoming webhooks.

    Slack answers a successful post with the literal body ``ok``; other
    Slack-compatible services (Mattermost, Rocket.Chat) do not, so the body
    is only checked when this returns True.
    """
    return "hooks.slack.com/" in url.lower()
