"""
Friends Adapters - FriendsAPI and FriendsCache as ItemsService.

The API adapter is the only component that writes the friends cache:
once per successful fetch, on the UI context, before items are built.
The cache adapter only reads, so a cache-served fallback never echoes
stale records back into the cache.
"""

from __future__ import annotations

import logging
from typing import Callable, List, Optional

from account_dashboard.domain.entities import Friend
from account_dashboard.domain.result import LoadResult
from account_dashboard.interfaces.clients import FriendsAPI, FriendsCache, UIDispatcher
from account_dashboard.interfaces.items_service import ItemsCompletion
from account_dashboard.presentation.item_view_model import ItemViewModel

logger = logging.getLogger(__name__)

FriendSelection = Callable[[Friend], None]


def _friend_items(friends: List[Friend], select: FriendSelection) -> List[ItemViewModel]:
    return [
        ItemViewModel.for_friend(friend, selection=lambda friend=friend: select(friend))
        for friend in friends
    ]


class FriendsAPIItemsServiceAdapter:
    """ItemsService backed by the remote friends API."""

    def __init__(
        self,
        api: FriendsAPI,
        select: FriendSelection,
        dispatcher: UIDispatcher,
        cache: Optional[FriendsCache] = None,
    ) -> None:
        """
        Initialize adapter.

        Args:
            api: Remote friends client
            select: Sink called with the friend of a selected row
            dispatcher: Marshals the completion onto the UI context
            cache: Store refreshed after each successful fetch (None
                disables caching entirely)
        """
        self.api = api
        self.select = select
        self.dispatcher = dispatcher
        self.cache = cache

    def load_items(self, completion: ItemsCompletion) -> None:
        def on_friends(result: LoadResult[List[Friend]]) -> None:
            self.dispatcher.run_on_ui_context(
                lambda: completion(result.map(self._save_and_map))
            )

        self.api.load_friends(on_friends)

    def _save_and_map(self, friends: List[Friend]) -> List[ItemViewModel]:
        logger.debug(f"Fetched {len(friends)} friends from API")
        if self.cache is not None:
            self._save(friends)
        return _friend_items(friends, self.select)

    def _save(self, friends: List[Friend]) -> None:
        # Cache writes are fire-and-forget; items are delivered either way.
        try:
            self.cache.save(friends)
        except Exception as e:
            logger.warning(f"Saving {len(friends)} friends to cache failed: {e}")


class FriendsCacheItemsServiceAdapter:
    """ItemsService backed by the local friends cache. Read-only."""

    def __init__(
        self,
        cache: FriendsCache,
        select: FriendSelection,
        dispatcher: UIDispatcher,
    ) -> None:
        self.cache = cache
        self.select = select
        self.dispatcher = dispatcher

    def load_items(self, completion: ItemsCompletion) -> None:
        def on_friends(result: LoadResult[List[Friend]]) -> None:
            if result.is_failure:
                logger.debug(f"Friends cache load failed: {result.error}")
            self.dispatcher.run_on_ui_context(
                lambda: completion(
                    result.map(lambda friends: _friend_items(friends, self.select))
                )
            )

        self.cache.load(on_friends)
