"""
Collaborator Protocols.

The remote clients, the friends cache and the UI dispatcher live outside
the loading layer. These protocols are the only thing adapters know
about them.

Design Notes:
    - Clients may complete on any thread, at most once per call
    - The cache is addressable only by "replace all" and "load all"
    - The dispatcher runs work inline when already on the UI context
"""

from __future__ import annotations

from typing import Callable, List, Protocol, runtime_checkable

from account_dashboard.domain.entities import Card, Friend, Transfer
from account_dashboard.domain.result import LoadResult

FriendsCompletion = Callable[[LoadResult[List[Friend]]], None]
CardsCompletion = Callable[[LoadResult[List[Card]]], None]
TransfersCompletion = Callable[[LoadResult[List[Transfer]]], None]


@runtime_checkable
class FriendsAPI(Protocol):
    """Remote client for the user's friends."""

    def load_friends(self, completion: FriendsCompletion) -> None:
        ...


@runtime_checkable
class CardsAPI(Protocol):
    """Remote client for the user's cards."""

    def load_cards(self, completion: CardsCompletion) -> None:
        ...


@runtime_checkable
class TransfersAPI(Protocol):
    """Remote client for the transfer feed (sent and received mixed)."""

    def load_transfers(self, completion: TransfersCompletion) -> None:
        ...


@runtime_checkable
class FriendsCache(Protocol):
    """Local store of friend records."""

    def save(self, friends: List[Friend]) -> None:
        """Replace all cached friends. Fire-and-forget."""
        ...

    def load(self, completion: FriendsCompletion) -> None:
        """Load all cached friends."""
        ...


@runtime_checkable
class UIDispatcher(Protocol):
    """Marshals work onto the UI-owned execution context."""

    def run_on_ui_context(self, work: Callable[[], None]) -> None:
        """
        Run `work` on the UI context.

        Runs immediately when the caller is already on the UI context,
        otherwise schedules it.
        """
        ...
