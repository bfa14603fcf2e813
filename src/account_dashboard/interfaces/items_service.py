"""
Items Service Protocol.

Defines the capability every list screen consumes. Adapters implement
it on top of concrete clients; decorators implement it on top of other
ItemsService values, so any composition is again an ItemsService.

Contract:
    - load_items(completion) returns nothing
    - completion receives exactly one LoadResult per call
    - completion may fire synchronously or later, on the UI context
    - callers must not start a new load before the previous completion
      fired; this is not enforced here

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - Errors are delivered as failed results, never raised
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, List, Protocol, runtime_checkable

from account_dashboard.domain.result import LoadResult

if TYPE_CHECKING:
    from account_dashboard.presentation.item_view_model import ItemViewModel

ItemsCompletion = Callable[[LoadResult["List[ItemViewModel]"]], None]


@runtime_checkable
class ItemsService(Protocol):
    """Abstract interface for loading display-ready items."""

    def load_items(self, completion: ItemsCompletion) -> None:
        """
        Load items and deliver the outcome exactly once.

        Args:
            completion: Receives the success-with-items or
                failure-with-error result
        """
        ...
