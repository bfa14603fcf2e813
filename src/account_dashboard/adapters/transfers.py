"""
Transfers Adapter - One Direction of the Transfer Feed as ItemsService.

The API returns sent and received transfers mixed in one feed. Two
adapter instances over the same client split it: one keeps the
transfers the user sent, the other the ones the user received. Relative
order is preserved, so the two outputs interleave back into the feed.
"""

from __future__ import annotations

import logging
from typing import Callable, List

from account_dashboard.domain.entities import Transfer
from account_dashboard.domain.result import LoadResult
from account_dashboard.interfaces.clients import TransfersAPI, UIDispatcher
from account_dashboard.interfaces.items_service import ItemsCompletion
from account_dashboard.presentation.item_view_model import ItemViewModel

logger = logging.getLogger(__name__)


class TransfersAPIItemsServiceAdapter:
    """
    ItemsService over one direction of the transfers feed.

    Usage:
        sent = TransfersAPIItemsServiceAdapter(api, True, select, ui)
        received = TransfersAPIItemsServiceAdapter(api, False, select, ui)
    """

    def __init__(
        self,
        api: TransfersAPI,
        show_sent: bool,
        select: Callable[[Transfer], None],
        dispatcher: UIDispatcher,
        long_date_style: bool = True,
    ) -> None:
        """
        Initialize adapter.

        Args:
            api: Remote transfers client
            show_sent: Keep sent transfers if True, received otherwise
            select: Sink called with the transfer of a selected row
            dispatcher: Marshals the completion onto the UI context
            long_date_style: Date style used in row subtitles
        """
        self.api = api
        self.show_sent = show_sent
        self.select = select
        self.dispatcher = dispatcher
        self.long_date_style = long_date_style

    @property
    def direction(self) -> str:
        return "sent" if self.show_sent else "received"

    def load_items(self, completion: ItemsCompletion) -> None:
        def on_transfers(result: LoadResult[List[Transfer]]) -> None:
            self.dispatcher.run_on_ui_context(
                lambda: completion(result.map(self._filter_and_map))
            )

        self.api.load_transfers(on_transfers)

    def _filter_and_map(self, transfers: List[Transfer]) -> List[ItemViewModel]:
        kept = [t for t in transfers if t.is_sender == self.show_sent]
        logger.debug(
            f"Kept {len(kept)} of {len(transfers)} transfers as {self.direction}"
        )
        return [
            ItemViewModel.for_transfer(
                transfer,
                long_date_style=self.long_date_style,
                selection=lambda transfer=transfer: self.select(transfer),
            )
            for transfer in kept
        ]
