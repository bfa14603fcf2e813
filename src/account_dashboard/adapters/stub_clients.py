"""
Scripted API Clients.

Fake remote clients for development and testing. Each call replays the
next scripted result; once the script is exhausted the last result is
repeated. Completions can be delivered on a background thread to
exercise UI-context marshaling the way real network callbacks would.
"""

from __future__ import annotations

import threading
import time
from typing import Callable, Generic, List, Sequence, TypeVar, Union

from account_dashboard.domain.entities import Card, Friend, Transfer
from account_dashboard.domain.result import LoadResult

T = TypeVar("T")


class ScriptedClient(Generic[T]):
    """Replays scripted results, one per call."""

    def __init__(
        self,
        results: Sequence[LoadResult[List[T]]],
        background: bool = False,
        delay_seconds: float = 0.0,
    ) -> None:
        """
        Initialize scripted client.

        Args:
            results: Results to deliver, in call order
            background: Complete on a new thread instead of inline
            delay_seconds: Artificial latency before completing
        """
        if not results:
            raise ValueError("at least one scripted result is required")
        self._results = list(results)
        self._background = background
        self._delay = delay_seconds
        self._lock = threading.Lock()
        self.call_count = 0

    @classmethod
    def once(
        cls,
        outcome: Union[List[T], Exception],
        background: bool = False,
    ) -> "ScriptedClient[T]":
        """Client that always answers with the same records or error."""
        if isinstance(outcome, Exception):
            return cls([LoadResult.failure(outcome)], background=background)
        return cls([LoadResult.success(list(outcome))], background=background)

    def _complete(self, completion: Callable[[LoadResult[List[T]]], None]) -> None:
        with self._lock:
            index = min(self.call_count, len(self._results) - 1)
            self.call_count += 1
            result = self._results[index]

        if self._background:
            thread = threading.Thread(
                target=self._deliver, args=(completion, result), daemon=True
            )
            thread.start()
        else:
            self._deliver(completion, result)

    def _deliver(
        self,
        completion: Callable[[LoadResult[List[T]]], None],
        result: LoadResult[List[T]],
    ) -> None:
        if self._delay > 0:
            time.sleep(self._delay)
        completion(result)


class ScriptedFriendsAPI(ScriptedClient[Friend]):
    """Scripted FriendsAPI."""

    def load_friends(self, completion: Callable[[LoadResult[List[Friend]]], None]) -> None:
        self._complete(completion)


class ScriptedCardsAPI(ScriptedClient[Card]):
    """Scripted CardsAPI."""

    def load_cards(self, completion: Callable[[LoadResult[List[Card]]], None]) -> None:
        self._complete(completion)


class ScriptedTransfersAPI(ScriptedClient[Transfer]):
    """Scripted TransfersAPI."""

    def load_transfers(
        self, completion: Callable[[LoadResult[List[Transfer]]], None]
    ) -> None:
        self._complete(completion)
