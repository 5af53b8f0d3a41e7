"""Length constraints for the two editable meta tag fields."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from meta_optimizer.utils.text_metrics import LengthReport, classify_length


class FieldKind(str, Enum):
    TITLE = "title"
    DESCRIPTION = "description"


@dataclass(frozen=True)
class LengthConstraint:
    minimum: int
    maximum: int

    def __post_init__(self) -> None:
        if self.minimum < 0 or self.maximum < 0:
            raise ValueError("length bounds must be non-negative")
        if self.minimum > self.maximum:
            raise ValueError(
                f"minimum ({self.minimum}) must not exceed maximum ({self.maximum})"
            )

    def classify(self, text: str) -> LengthReport:
        return classify_length(len(text), self.minimum, self.maximum)


META_TITLE = LengthConstraint(minimum=50, maximum=60)
META_DESCRIPTION = LengthConstraint(minimum=150, maximum=160)

CONSTRAINTS: dict[FieldKind, LengthConstraint] = {
    FieldKind.TITLE: META_TITLE,
    FieldKind.DESCRIPTION: META_DESCRIPTION,
}
