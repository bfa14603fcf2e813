"""
Domain-level error types.

The loading layer knows a single failure kind. Whether a failure came
from the network, a timeout or decoding is the client's business; the
message is all that reaches the screen.
"""

from __future__ import annotations


class FetchError(Exception):
    """Raised into the result channel when a fetch fails."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FetchError):
            return NotImplemented
        return type(self) is type(other) and self.message == other.message

    def __hash__(self) -> int:
        return hash((type(self), self.message))


class ServiceDisabledError(FetchError):
    """Failure reported by a service that is switched off."""

    def __init__(self, message: str = "service disabled") -> None:
        super().__init__(message)
