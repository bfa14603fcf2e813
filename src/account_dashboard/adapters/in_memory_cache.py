"""
In-Memory Friends Cache.

Process-local FriendsCache implementation. Stands in for the on-device
store in development, demos and tests.

Design Notes:
    - Thread-safe with Lock
    - save() replaces everything, load() returns everything
    - Tracks save/load counts for inspection
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Callable, List, Optional

from account_dashboard.domain.entities import Friend
from account_dashboard.domain.errors import FetchError
from account_dashboard.domain.result import LoadResult

logger = logging.getLogger(__name__)


class InMemoryFriendsCache:
    """Simple in-memory friends store."""

    def __init__(self, friends: Optional[List[Friend]] = None) -> None:
        """
        Initialize the cache.

        Args:
            friends: Initial content (empty cache if None)
        """
        self._friends: Optional[List[Friend]] = (
            list(friends) if friends is not None else None
        )
        self._lock = Lock()
        self.save_count = 0
        self.load_count = 0

    def save(self, friends: List[Friend]) -> None:
        """Replace all cached friends."""
        with self._lock:
            self._friends = list(friends)
            self.save_count += 1
        logger.debug(f"Cached {len(friends)} friends")

    def load(self, completion: Callable[[LoadResult[List[Friend]]], None]) -> None:
        """Deliver all cached friends, or a failure if nothing was saved."""
        with self._lock:
            self.load_count += 1
            friends = list(self._friends) if self._friends is not None else None

        if friends is None:
            completion(LoadResult.failure(FetchError("cache is empty")))
        else:
            completion(LoadResult.success(friends))

    @property
    def friends(self) -> Optional[List[Friend]]:
        """Snapshot of the cached friends (None if never saved)."""
        with self._lock:
            return list(self._friends) if self._friends is not None else None

    def clear(self) -> None:
        """Forget all cached friends."""
        with self._lock:
            self._friends = None
