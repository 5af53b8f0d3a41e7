"""Length classification and truncation helpers for meta tag fields."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

ELLIPSIS = "..."


class LengthStatus(str, Enum):
    EMPTY = "empty"
    TOO_SHORT = "too_short"
    TOO_LONG = "too_long"
    GOOD = "good"


@dataclass(frozen=True)
class LengthReport:
    status: LengthStatus
    ratio: float  # 0.0-1.0, fill of the progress bar


def classify_length(length: int, minimum: int, maximum: int) -> LengthReport:
    """Classify a text length against its (minimum, maximum) bounds.

    Checks run in a fixed order: empty, too long, too short, good. An empty
    field is never reported as too short.
    """
    if length == 0:
        status = LengthStatus.EMPTY
    elif length > maximum:
        status = LengthStatus.TOO_LONG
    elif length < minimum:
        status = LengthStatus.TOO_SHORT
    else:
        status = LengthStatus.GOOD

    ratio = min(length / maximum, 1.0) if maximum > 0 else 0.0
    return LengthReport(status=status, ratio=ratio)


def truncate(text: str, limit: int) -> str:
    """Cap text at `limit` characters, appending an ellipsis when cut.

    Cuts mid-word if that is where the limit falls.
    """
    if len(text) <= limit:
        return text
    return text[:limit] + ELLIPSIS
