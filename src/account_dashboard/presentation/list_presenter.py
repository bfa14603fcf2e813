"""
List Presenter - Headless State of a List Screen.

The presenter is the consumer side of the ItemsService contract. It
owns the state a list screen renders (items, error message, loading
indicator) and must only be touched from the UI context; adapters
guarantee completions arrive there.

Design Notes:
    - One composed ItemsService per presenter
    - Overlapping loads are refused while a load is in flight
    - Rendering is left to the host toolkit
"""

from __future__ import annotations

import logging
from typing import List, Optional

from account_dashboard.domain.result import LoadResult
from account_dashboard.interfaces.items_service import ItemsService
from account_dashboard.presentation.item_view_model import ItemViewModel

logger = logging.getLogger(__name__)


class ListPresenter:
    """
    Loads items for one list screen and keeps the renderable state.

    Usage:
        presenter = ListPresenter("Friends", composer.make_friends_service(select))
        presenter.load()
        ui.wait_for(lambda: not presenter.is_loading)
        for item in presenter.items:
            render(item.title, item.subtitle)
    """

    def __init__(self, title: str, service: ItemsService) -> None:
        """
        Initialize presenter.

        Args:
            title: Screen title, used in log messages
            service: Composed service providing the items
        """
        self.title = title
        self.service = service
        self.items: List[ItemViewModel] = []
        self.error_message: Optional[str] = None
        self.is_loading = False
        self.load_count = 0

    def load(self) -> bool:
        """
        Start a load.

        Returns:
            False if a load is already in flight and nothing was started
        """
        if self.is_loading:
            logger.debug(f"{self.title}: load ignored, previous load in flight")
            return False

        self.is_loading = True
        self.error_message = None
        self.load_count += 1
        self.service.load_items(self._on_result)
        return True

    def refresh(self) -> bool:
        """Pull-to-refresh. Same as load()."""
        return self.load()

    def select_item(self, index: int) -> None:
        """Fire the selection action of the item at `index`."""
        self.items[index].select()

    @property
    def number_of_items(self) -> int:
        return len(self.items)

    def _on_result(self, result: LoadResult) -> None:
        if not self.is_loading:
            logger.warning(f"{self.title}: unexpected completion ignored")
            return

        self.is_loading = False
        if result.is_success:
            self.items = list(result.value)
            logger.debug(f"{self.title}: showing {len(self.items)} items")
        else:
            self.error_message = str(result.error)
            logger.warning(f"{self.title}: load failed: {self.error_message}")
