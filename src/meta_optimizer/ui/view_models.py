"""View models for the Streamlit page.

Plain frozen dataclasses built from controller state, so the rendering code
only lays out widgets and stays free of length or state logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from meta_optimizer.models.constraints import (
    META_DESCRIPTION,
    META_TITLE,
    FieldKind,
    LengthConstraint,
)
from meta_optimizer.models.state import RequestState, RequestStatus
from meta_optimizer.utils.text_metrics import LengthStatus, truncate

TITLE_PLACEHOLDER = "Your Meta Title Will Appear Here"
DESCRIPTION_PLACEHOLDER = (
    "Your meta description will appear here. Write a compelling summary "
    "to attract users from the search results page."
)
EMPTY_PANEL_TEXT = "Your AI suggestions will appear here."

# Streamlit markdown color names
STATUS_COLORS: dict[LengthStatus, str] = {
    LengthStatus.EMPTY: "gray",
    LengthStatus.TOO_SHORT: "orange",
    LengthStatus.TOO_LONG: "red",
    LengthStatus.GOOD: "green",
}

STATUS_LABELS: dict[LengthStatus, str] = {
    LengthStatus.EMPTY: "Empty",
    LengthStatus.TOO_SHORT: "Too short",
    LengthStatus.TOO_LONG: "Too long",
    LengthStatus.GOOD: "Good length",
}


@dataclass(frozen=True)
class FieldView:
    label: str
    value: str
    length: int
    maximum: int
    status: LengthStatus
    ratio: float
    multiline: bool = False

    @property
    def counter(self) -> str:
        return f"{self.length}/{self.maximum}"

    @property
    def is_over_limit(self) -> bool:
        return self.length > self.maximum

    @property
    def color(self) -> str:
        return STATUS_COLORS[self.status]

    @property
    def status_label(self) -> str:
        return STATUS_LABELS[self.status]


@dataclass(frozen=True)
class SerpPreview:
    url: str
    title: str
    description: str


class PanelMode(str, Enum):
    SKELETON = "skeleton"
    ERROR = "error"
    EMPTY = "empty"
    RESULTS = "results"


@dataclass(frozen=True)
class SuggestionCard:
    heading: str
    content: str
    target: FieldKind


@dataclass(frozen=True)
class SuggestionsPanel:
    mode: PanelMode
    message: str = ""
    analysis: str = ""
    cards: tuple[SuggestionCard, ...] = ()


def build_field_view(
    label: str,
    value: str,
    constraint: LengthConstraint,
    multiline: bool = False,
) -> FieldView:
    report = constraint.classify(value)
    return FieldView(
        label=label,
        value=value,
        length=len(value),
        maximum=constraint.maximum,
        status=report.status,
        ratio=report.ratio,
        multiline=multiline,
    )


def build_preview(title: str, description: str, url: str) -> SerpPreview:
    """Search-result preview with placeholders for empty fields."""
    return SerpPreview(
        url=url,
        title=truncate(title or TITLE_PLACEHOLDER, META_TITLE.maximum),
        description=truncate(description or DESCRIPTION_PLACEHOLDER, META_DESCRIPTION.maximum),
    )


def build_panel(request: RequestState) -> SuggestionsPanel:
    if request.status is RequestStatus.LOADING:
        return SuggestionsPanel(mode=PanelMode.SKELETON)
    if request.status is RequestStatus.FAILED:
        return SuggestionsPanel(mode=PanelMode.ERROR, message=request.error or "")
    if request.status is RequestStatus.SUCCEEDED and request.result is not None:
        result = request.result
        return SuggestionsPanel(
            mode=PanelMode.RESULTS,
            analysis=result.analysis,
            cards=(
                SuggestionCard("Optimized Title", result.optimized_title, FieldKind.TITLE),
                SuggestionCard(
                    "Optimized Description", result.optimized_description, FieldKind.DESCRIPTION
                ),
            ),
        )
    return SuggestionsPanel(mode=PanelMode.EMPTY, message=EMPTY_PANEL_TEXT)


def optimize_button_label(request: RequestState) -> str:
    return "Optimizing..." if request.is_loading else "Optimize with AI"
