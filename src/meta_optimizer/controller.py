"""Application state controller - owns the form fields and the request lifecycle."""

from __future__ import annotations

import logging
from collections.abc import Callable

from meta_optimizer.errors import UNKNOWN_ERROR_MESSAGE, SuggestionError
from meta_optimizer.models.constraints import FieldKind
from meta_optimizer.models.state import AppState, RequestState, RequestStatus
from meta_optimizer.pipeline.meta_suggester import MetaSuggester

logger = logging.getLogger(__name__)

Listener = Callable[[AppState], None]


class AppController:
    """Holds the title/description values and drives one suggestion request at a time.

    Every change is published to subscribers as an AppState snapshot. Field
    edits never touch the request state, so an earlier suggestion stays
    visible next to newer edits.
    """

    def __init__(self, suggester: MetaSuggester, title: str = "", description: str = ""):
        self.suggester = suggester
        self._fields: dict[FieldKind, str] = {
            FieldKind.TITLE: title,
            FieldKind.DESCRIPTION: description,
        }
        self._request = RequestState.idle()
        self._generation = 0
        self._listeners: list[Listener] = []

    @property
    def state(self) -> AppState:
        return AppState(
            title=self._fields[FieldKind.TITLE],
            description=self._fields[FieldKind.DESCRIPTION],
            request=self._request,
        )

    @property
    def title(self) -> str:
        return self._fields[FieldKind.TITLE]

    @property
    def description(self) -> str:
        return self._fields[FieldKind.DESCRIPTION]

    @property
    def request(self) -> RequestState:
        return self._request

    @property
    def can_optimize(self) -> bool:
        if self._request.is_loading:
            return False
        return bool(self.title or self.description)

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a listener; returns a callable that removes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        snapshot = self.state
        for listener in list(self._listeners):
            listener(snapshot)

    def _set_request(self, request: RequestState) -> None:
        logger.info("Request state: %s -> %s", self._request.status.value, request.status.value)
        self._request = request
        self._notify()

    def set_field(self, kind: FieldKind, value: str) -> None:
        if self._fields[kind] == value:
            return
        self._fields[kind] = value
        self._notify()

    def apply_suggestion(self, kind: FieldKind, value: str) -> None:
        """Overwrite a field with a suggested value. The request state is left as is."""
        logger.debug("Applying suggestion to %s", kind.value)
        self.set_field(kind, value)

    def apply_result_field(self, kind: FieldKind) -> None:
        """Apply the matching field of the current result, if there is one."""
        result = self._request.result
        if result is None:
            return
        value = result.optimized_title if kind is FieldKind.TITLE else result.optimized_description
        self.apply_suggestion(kind, value)

    async def optimize(self) -> None:
        """Request suggestions for the current field values.

        Never raises: failures end in a FAILED state carrying a message. A
        reply that arrives after a newer request started (or after cancel())
        is dropped.
        """
        if not self.can_optimize:
            logger.debug("Optimize ignored: request in flight or both fields empty")
            return

        self._generation += 1
        generation = self._generation
        title, description = self.title, self.description
        self._set_request(RequestState.loading())

        try:
            result = await self.suggester.request_suggestions(title, description)
        except SuggestionError as exc:
            logger.warning("Suggestion request failed [%s]", exc.code)
            outcome = RequestState.failed(exc.message or UNKNOWN_ERROR_MESSAGE)
        except Exception:
            logger.exception("Unexpected error while requesting suggestions")
            outcome = RequestState.failed(UNKNOWN_ERROR_MESSAGE)
        else:
            outcome = RequestState.succeeded(result)

        if generation != self._generation:
            logger.info("Discarding stale response for request #%d", generation)
            return
        self._set_request(outcome)

    def cancel(self) -> None:
        """Abandon any in-flight request; its reply will be ignored."""
        self._generation += 1
        if self._request.status is RequestStatus.LOADING:
            self._set_request(RequestState.idle())
