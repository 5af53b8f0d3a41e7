"""Request lifecycle and application state snapshots."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from meta_optimizer.models.suggestion import SuggestionResult


class RequestStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


@dataclass(frozen=True)
class RequestState:
    status: RequestStatus
    result: SuggestionResult | None = None
    error: str | None = None

    @classmethod
    def idle(cls) -> RequestState:
        return cls(RequestStatus.IDLE)

    @classmethod
    def loading(cls) -> RequestState:
        return cls(RequestStatus.LOADING)

    @classmethod
    def succeeded(cls, result: SuggestionResult) -> RequestState:
        return cls(RequestStatus.SUCCEEDED, result=result)

    @classmethod
    def failed(cls, message: str) -> RequestState:
        if not message:
            raise ValueError("a failed request needs a message")
        return cls(RequestStatus.FAILED, error=message)

    @property
    def is_loading(self) -> bool:
        return self.status is RequestStatus.LOADING


@dataclass(frozen=True)
class AppState:
    """Snapshot handed to observers after every change."""

    title: str
    description: str
    request: RequestState
