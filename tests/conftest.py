"""
Shared pytest fixtures.

Provides a sample pipeline, a clean environment for settings tests and
in-memory webhook senders that record what they were asked to deliver.
"""

import os

import pytest

from slack_notify.channels import NotificationMessage
from slack_notify.errors import DeliveryError
from slack_notify.pipeline import Build, Commit, Pipeline, Repo
from slack_notify.providers.base import WebhookSender


class RecordingSender(WebhookSender):
    def __init__(self):
        self.calls: list[tuple[str, NotificationMessage]] = []

    async def send(self, url: str, message: NotificationMessage) -> None:
        self.calls.append((url, message))


class FailingSender(WebhookSender):
    def __init__(self, exc: Exception):
        self.exc = exc
        self.attempts = 0

    async def send(self, url: str, message: NotificationMessage) -> None:
        self.attempts += 1
        raise self.exc


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Keep the runner's own PLUGIN_/SLACK_/DRONE_ variables out of the tests."""
    for name in list(os.environ):
        if name.startswith(("PLUGIN_", "SLACK_", "DRONE_")):
            monkeypatch.delenv(name, raising=False)


@pytest.fixture
def pipeline() -> Pipeline:
    return Pipeline(
        build=Build(status="success", link="http://x", branch="main"),
        repo=Repo(owner="o", name="r"),
        commit=Commit(sha="abcdef1234", author="Al"),
    )


@pytest.fixture
def recording_sender() -> RecordingSender:
    return RecordingSender()


@pytest.fixture
def failing_sender() -> FailingSender:
    return FailingSender(DeliveryError("could not send webhook: status 500: boom"))
