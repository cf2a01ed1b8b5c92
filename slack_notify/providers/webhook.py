"""HTTP webhook sender."""

import logging
from typing import Optional

import httpx

from slack_notify.channels import NotificationMessage
from slack_notify.channels.detect import is_slack_webhook
from slack_notify.errors import DeliveryError
from slack_notify.providers.base import WebhookSender

logger = logging.getLogger(__name__)


class HttpWebhookSender(WebhookSender):
    """Post the message as JSON with httpx."""

    def __init__(self, timeout: float = 15, client: Optional[httpx.AsyncClient] = None):
        self.timeout = timeout
        self.client = client

    async def send(self, url: str, message: NotificationMessage) -> None:
        if self.client is not None:
            await self._post(self.client, url, message)
            return
        async with httpx.AsyncClient(timeout=self.timeout, follow_redirects=True) as client:
            await self._post(client, url, message)

    async def _post(self, client: httpx.AsyncClient, url: str, message: NotificationMessage) -> None:
        try:
            resp = await client.post(url, json=message.to_payload())
        except httpx.HTTPError as exc:
            raise DeliveryError(f"could not send webhook: {exc}") from exc

        if resp.status_code >= 400:
            raise DeliveryError(
                f"could not send webhook: status {resp.status_code}: {resp.text[:200]}"
            )

        if is_slack_webhook(url) and resp.text.strip() != "ok":
            raise DeliveryError(f"could not send webhook: unexpected response {resp.text[:200]!r}")

        logger.debug("Webhook accepted message (status %s)", resp.status_code)
