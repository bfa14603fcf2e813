"""
Adapters Package - Infrastructure Implementations.

This package translates concrete clients and stores into the
ItemsService capability, following the Hexagonal Architecture (Ports &
Adapters) pattern.

Items Services:
    - FriendsAPIItemsServiceAdapter: Remote friends, refreshes the cache
    - FriendsCacheItemsServiceAdapter: Cached friends, read-only
    - CardsAPIItemsServiceAdapter: Remote cards
    - TransfersAPIItemsServiceAdapter: Sent or received transfers
    - NullItemsService: Disabled fallback, fails fast

Collaborators:
    - ScriptedFriendsAPI, ScriptedCardsAPI, ScriptedTransfersAPI: Fakes
    - InMemoryFriendsCache: Process-local friends store

Design Principles:
    - Each adapter wraps exactly one client or store
    - Collaborators are passed in, never reached through globals
    - Completions are marshaled onto the UI context
"""

from account_dashboard.adapters.cards import CardsAPIItemsServiceAdapter
from account_dashboard.adapters.friends import (
    FriendsAPIItemsServiceAdapter,
    FriendsCacheItemsServiceAdapter,
)
from account_dashboard.adapters.in_memory_cache import InMemoryFriendsCache
from account_dashboard.adapters.null_service import NullItemsService
from account_dashboard.adapters.stub_clients import (
    ScriptedCardsAPI,
    ScriptedFriendsAPI,
    ScriptedTransfersAPI,
)
from account_dashboard.adapters.transfers import TransfersAPIItemsServiceAdapter

__all__ = [
    "CardsAPIItemsServiceAdapter",
    "FriendsAPIItemsServiceAdapter",
    "FriendsCacheItemsServiceAdapter",
    "InMemoryFriendsCache",
    "NullItemsService",
    "ScriptedCardsAPI",
    "ScriptedFriendsAPI",
    "ScriptedTransfersAPI",
    "TransfersAPIItemsServiceAdapter",
]
