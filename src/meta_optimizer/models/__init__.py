"""Data models for the meta tag optimizer."""

from meta_optimizer.models.constraints import (
    CONSTRAINTS,
    META_DESCRIPTION,
    META_TITLE,
    FieldKind,
    LengthConstraint,
)
from meta_optimizer.models.state import AppState, RequestState, RequestStatus
from meta_optimizer.models.suggestion import SuggestionResult

__all__ = [
    "AppState",
    "CONSTRAINTS",
    "FieldKind",
    "LengthConstraint",
    "META_DESCRIPTION",
    "META_TITLE",
    "RequestState",
    "RequestStatus",
    "SuggestionResult",
]
