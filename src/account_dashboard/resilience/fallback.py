"""
Fallback Decorator - Secondary Source After a Failure.

Wraps two ItemsService values into one. The fallback service only runs
after the primary's completion reported a failure, so only one of the
two ever performs its side effects (such as a cache write) per load.

Design Notes:
    - Decorator/Wrapper pattern
    - Nested fallbacks evaluate strictly left to right
    - Holds no per-call state; safe to reuse across loads
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from account_dashboard.interfaces.items_service import ItemsCompletion, ItemsService

if TYPE_CHECKING:
    from account_dashboard.domain.result import LoadResult


class ItemsServiceWithFallback:
    """
    ItemsService that falls back to a secondary service on failure.

    Usage:
        service = ItemsServiceWithFallback(api_adapter, cache_adapter)

        # api_adapter succeeds: its items are delivered, cache untouched
        # api_adapter fails: cache_adapter's result is delivered as-is
        service.load_items(completion)
    """

    def __init__(self, primary: ItemsService, fallback: ItemsService) -> None:
        """
        Initialize fallback decorator.

        Args:
            primary: Service tried first
            fallback: Service tried only if primary fails
        """
        self.primary = primary
        self.fallback = fallback

    def load_items(self, completion: ItemsCompletion) -> None:
        """Load from primary, then from fallback if primary failed."""

        def on_primary_result(result: LoadResult) -> None:
            if result.is_success:
                completion(result)
            else:
                self.fallback.load_items(completion)

        self.primary.load_items(on_primary_result)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.primary!r}, {self.fallback!r})"


def with_fallback(primary: ItemsService, fallback: ItemsService) -> ItemsService:
    """Compose `primary` with `fallback`."""
    return ItemsServiceWithFallback(primary, fallback)
