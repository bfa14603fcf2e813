"""
Interfaces Layer - Abstract Protocols for Dependencies.

This package defines the abstract interfaces (using typing.Protocol) for
the loading layer and its collaborators. Following the Dependency
Inversion Principle, screens depend on ItemsService, never on concrete
clients or caches.

Protocols:
    - ItemsService: The uniform async load-items capability
    - FriendsAPI, CardsAPI, TransfersAPI: Remote clients per resource
    - FriendsCache: Local store for friend records
    - UIDispatcher: Marshals work onto the UI-owned context

Design Principles:
    - Use typing.Protocol (not ABC) for Pythonic interfaces
    - Interface Segregation: one operation per capability
    - Completions fire at most once per call
"""

from account_dashboard.interfaces.clients import (
    CardsAPI,
    FriendsAPI,
    FriendsCache,
    TransfersAPI,
    UIDispatcher,
)
from account_dashboard.interfaces.items_service import (
    ItemsCompletion,
    ItemsService,
)

__all__ = [
    "CardsAPI",
    "FriendsAPI",
    "FriendsCache",
    "TransfersAPI",
    "UIDispatcher",
    "ItemsCompletion",
    "ItemsService",
]
