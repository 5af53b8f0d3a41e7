"""Exception types raised by the optimizer."""

from __future__ import annotations

GENERIC_FAILURE_MESSAGE = "Failed to generate suggestions. Please try again."
UNKNOWN_ERROR_MESSAGE = "An unknown error occurred."


class MetaOptimizerError(Exception):
    """Base class for all optimizer errors."""


class ConfigurationError(MetaOptimizerError):
    """Required configuration is missing; raised once at startup."""


class SuggestionError(MetaOptimizerError):
    """A single suggestion request failed. Recoverable; the user may retry."""

    code = "suggestion_error"

    def __init__(self, message: str = GENERIC_FAILURE_MESSAGE):
        super().__init__(message)
        self.message = message


class UpstreamError(SuggestionError):
    """The call to the generative text service failed."""

    code = "upstream"


class MalformedResponseError(SuggestionError):
    """The service replied, but not with the expected JSON object."""

    code = "malformed_response"
