"""
Null Items Service - Fallback That Is Switched Off.

Used where a composition has a fallback slot but the fallback must not
run, e.g. the friends cache for non-premium users. It keeps the shape of
the composition uniform and fails fast without touching any
collaborator.
"""

from __future__ import annotations

from account_dashboard.domain.errors import ServiceDisabledError
from account_dashboard.domain.result import LoadResult
from account_dashboard.interfaces.items_service import ItemsCompletion


class NullItemsService:
    """ItemsService that always fails with ServiceDisabledError."""

    def __init__(self, reason: str = "service disabled") -> None:
        self.reason = reason

    def load_items(self, completion: ItemsCompletion) -> None:
        completion(LoadResult.failure(ServiceDisabledError(self.reason)))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.reason!r})"
