"""
Dashboard Composer - Composition Root of the List Screens.

Builds one composed ItemsService per list screen. Every collaborator is
passed in explicitly; nothing is looked up through shared instances.

Compositions:
    friends (premium)     with_fallback(retry(api, n), cache)
    friends (non-premium) with_fallback(retry(api, n), NullItemsService)
    sent / received       retry(transfers(direction), n)
    cards                 retry(cards, n)
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Optional

from account_dashboard.adapters.cards import CardsAPIItemsServiceAdapter
from account_dashboard.adapters.friends import (
    FriendsAPIItemsServiceAdapter,
    FriendsCacheItemsServiceAdapter,
)
from account_dashboard.adapters.null_service import NullItemsService
from account_dashboard.adapters.transfers import TransfersAPIItemsServiceAdapter
from account_dashboard.config.models import DashboardConfig
from account_dashboard.domain.entities import Card, Friend, Transfer, User
from account_dashboard.interfaces.clients import (
    CardsAPI,
    FriendsAPI,
    FriendsCache,
    TransfersAPI,
    UIDispatcher,
)
from account_dashboard.interfaces.items_service import ItemsService
from account_dashboard.presentation.list_presenter import ListPresenter
from account_dashboard.resilience.fallback import with_fallback
from account_dashboard.resilience.retry import retry

logger = logging.getLogger(__name__)


class DashboardComposer:
    """
    Wires adapters and decorators for every list screen.

    Usage:
        composer = DashboardComposer(
            config=load_config("config/default.yaml"),
            user=current_user,
            friends_api=friends_api,
            friends_cache=cache,
            transfers_api=transfers_api,
            cards_api=cards_api,
            dispatcher=UIContext(),
        )
        friends = composer.make_friends_service(select=show_friend)
    """

    def __init__(
        self,
        config: DashboardConfig,
        user: Optional[User],
        friends_api: FriendsAPI,
        friends_cache: FriendsCache,
        transfers_api: TransfersAPI,
        cards_api: CardsAPI,
        dispatcher: UIDispatcher,
    ) -> None:
        """
        Initialize composer.

        Args:
            config: Retry counts and display options
            user: Signed-in user (None is treated as non-premium)
            friends_api: Remote friends client
            friends_cache: Local friends store
            transfers_api: Remote transfers client
            cards_api: Remote cards client
            dispatcher: UI context shared by every adapter
        """
        self.config = config
        self.user = user
        self.friends_api = friends_api
        self.friends_cache = friends_cache
        self.transfers_api = transfers_api
        self.cards_api = cards_api
        self.dispatcher = dispatcher

    @property
    def is_premium(self) -> bool:
        return self.user is not None and self.user.is_premium

    @property
    def uses_friends_cache(self) -> bool:
        return self.is_premium and self.config.friends.use_cache_for_premium

    def make_friends_service(self, select: Callable[[Friend], None]) -> ItemsService:
        """
        Compose the friends service.

        The remote source is exhausted first. Only premium users fall
        back to the cache, and only their API adapter refreshes it.
        """
        settings = self.config.friends

        if self.uses_friends_cache:
            api = FriendsAPIItemsServiceAdapter(
                self.friends_api, select, self.dispatcher, cache=self.friends_cache
            )
            fallback: ItemsService = FriendsCacheItemsServiceAdapter(
                self.friends_cache, select, self.dispatcher
            )
        else:
            api = FriendsAPIItemsServiceAdapter(self.friends_api, select, self.dispatcher)
            fallback = NullItemsService(settings.disabled_cache_message)

        logger.debug(
            f"Friends: {settings.max_retry_count} retries, "
            f"cache fallback {'on' if self.uses_friends_cache else 'off'}"
        )
        return with_fallback(retry(api, settings.max_retry_count), fallback)

    def make_sent_transfers_service(
        self, select: Callable[[Transfer], None]
    ) -> ItemsService:
        return self._make_transfers_service(
            show_sent=True,
            select=select,
            long_date_style=self.config.transfers.long_date_style_for_sent,
        )

    def make_received_transfers_service(
        self, select: Callable[[Transfer], None]
    ) -> ItemsService:
        return self._make_transfers_service(
            show_sent=False,
            select=select,
            long_date_style=self.config.transfers.long_date_style_for_received,
        )

    def make_cards_service(self, select: Callable[[Card], None]) -> ItemsService:
        adapter = CardsAPIItemsServiceAdapter(self.cards_api, select, self.dispatcher)
        return retry(adapter, self.config.cards.max_retry_count)

    def make_list_presenters(
        self,
        select_friend: Callable[[Friend], None],
        select_transfer: Callable[[Transfer], None],
        select_card: Callable[[Card], None],
    ) -> Dict[str, ListPresenter]:
        """
        Build the presenters of all dashboard tabs.

        Returns:
            Presenters keyed by "friends", "sent", "received" and "cards"
        """
        presenters = {
            "friends": ListPresenter("Friends", self.make_friends_service(select_friend)),
            "sent": ListPresenter("Sent", self.make_sent_transfers_service(select_transfer)),
            "received": ListPresenter(
                "Received", self.make_received_transfers_service(select_transfer)
            ),
            "cards": ListPresenter("Cards", self.make_cards_service(select_card)),
        }
        logger.info(
            f"Composed {len(presenters)} list screens "
            f"({'premium' if self.is_premium else 'standard'} user)"
        )
        return presenters

    def _make_transfers_service(
        self,
        show_sent: bool,
        select: Callable[[Transfer], None],
        long_date_style: bool,
    ) -> ItemsService:
        adapter = TransfersAPIItemsServiceAdapter(
            self.transfers_api,
            show_sent=show_sent,
            select=select,
            dispatcher=self.dispatcher,
            long_date_style=long_date_style,
        )
        return retry(adapter, self.config.transfers.max_retry_count)
