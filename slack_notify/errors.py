"""Error taxonomy for the notifier.

Every failure surfaces as a single :class:`NotifyError` subclass. The
``stage`` attribute names the step that failed so callers can report it
without parsing the message.
"""


class NotifyError(Exception):
    """Base class for all notifier failures."""

    stage = "notify"


class MissingWebhook(NotifyError):
    stage = "validate"

    def __init__(self, message: str = "missing webhook"):
        super().__init__(message)


class TemplateFileReadError(NotifyError):
    stage = "template_file"


class TemplateRenderError(NotifyError):
    stage = "render"


class DeliveryError(NotifyError):
    stage = "delivery"
