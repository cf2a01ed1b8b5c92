"""Build status to attachment colour."""

from enum import Enum


class Color(str, Enum):
    GOOD = "good"
    DANGER = "danger"
    WARNING = "warning"


_STATUS_COLORS = {
    "success": Color.GOOD,
    "failure": Color.DANGER,
    "error": Color.DANGER,
    "killed": Color.DANGER,
}


def select_color(status: str) -> Color:
    """Map a build status to a colour. Unknown statuses are a warning."""
    return _STATUS_COLORS.get(status, Color.WARNING)


def resolve_color(override: str, status: str) -> str:
    if override:
        return override
    return select_color(status).value
