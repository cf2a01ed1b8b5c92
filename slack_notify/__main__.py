"""Command-line entry point: ``python -m slack_notify``."""

import asyncio
import logging
import sys

from pydantic import ValidationError

from slack_notify.config import Settings
from slack_notify.dispatcher import Dispatcher
from slack_notify.errors import NotifyError
from slack_notify.pipeline import Pipeline
from slack_notify.providers import HttpWebhookSender, JinjaRenderer

logger = logging.getLogger("slack_notify")


def main() -> int:
    try:
        settings = Settings()
    except ValidationError as exc:
        logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")
        logger.error("FATAL: invalid settings: %s", exc)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    dispatcher = Dispatcher(
        settings=settings,
        pipeline=Pipeline.from_env(),
        renderer=JinjaRenderer(),
        sender=HttpWebhookSender(timeout=settings.timeout),
    )
    try:
        dispatcher.validate()
        asyncio.run(dispatcher.execute())
    except NotifyError as exc:
        logger.error("FATAL: %s failed: %s", exc.stage, exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
