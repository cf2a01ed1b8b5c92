"""Interfaces for the template engine and the webhook transport."""

from abc import ABC, abstractmethod

from slack_notify.channels import NotificationMessage
from slack_notify.pipeline import Pipeline


class TemplateRenderer(ABC):
    """
    Renders message templates against pipeline data.
    Implementations raise TemplateRenderError on failure.
    """

    @abstractmethod
    def render(self, template: str, pipeline: Pipeline) -> str:
        ...


class WebhookSender(ABC):
    """
    Delivers a message to a webhook URL.
    Implementations raise DeliveryError on failure. Cancelling the awaiting
    task aborts the in-flight request.
    """

    @abstractmethod
    async def send(self, url: str, message: NotificationMessage) -> None:
        ...
