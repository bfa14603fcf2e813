"""
Cards Adapter - CardsAPI as ItemsService.
"""

from __future__ import annotations

import logging
from typing import Callable, List

from account_dashboard.domain.entities import Card
from account_dashboard.domain.result import LoadResult
from account_dashboard.interfaces.clients import CardsAPI, UIDispatcher
from account_dashboard.interfaces.items_service import ItemsCompletion
from account_dashboard.presentation.item_view_model import ItemViewModel

logger = logging.getLogger(__name__)


class CardsAPIItemsServiceAdapter:
    """ItemsService backed by the remote cards API."""

    def __init__(
        self,
        api: CardsAPI,
        select: Callable[[Card], None],
        dispatcher: UIDispatcher,
    ) -> None:
        self.api = api
        self.select = select
        self.dispatcher = dispatcher

    def load_items(self, completion: ItemsCompletion) -> None:
        def on_cards(result: LoadResult[List[Card]]) -> None:
            self.dispatcher.run_on_ui_context(
                lambda: completion(result.map(self._map))
            )

        self.api.load_cards(on_cards)

    def _map(self, cards: List[Card]) -> List[ItemViewModel]:
        logger.debug(f"Fetched {len(cards)} cards from API")
        return [
            ItemViewModel.for_card(card, selection=lambda card=card: self.select(card))
            for card in cards
        ]
