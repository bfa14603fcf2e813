"""
Presentation Package - Item View Models and List Presenter.

Items are the display-ready projection the loading layer produces; the
presenter is the headless screen that consumes it.

Components:
    - ItemViewModel: Title, subtitle and selection action of a row
    - ListPresenter: Loads, refreshes and exposes renderable state
    - formatting: Deterministic amount and date formatting
"""

from account_dashboard.presentation.item_view_model import ItemViewModel
from account_dashboard.presentation.list_presenter import ListPresenter

__all__ = ["ItemViewModel", "ListPresenter"]
