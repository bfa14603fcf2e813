"""
Domain Layer - Records, Results and Errors.

This package contains the core domain model of the dashboard. Records
are owned by the remote API and cache collaborators; the loading layer
only reads them.

Entities:
    - Friend, Card, Transfer: Resource records shown in list screens
    - User: Current identity (premium or not)

Value Objects:
    - LoadResult: Success-with-value or failure-with-error outcome

Errors:
    - FetchError: Single opaque fetch failure kind
    - ServiceDisabledError: Raised into the result channel by null services

Design Principles:
    - Immutable records (frozen pydantic models)
    - Errors travel through LoadResult, never raised at callers
    - No infrastructure dependencies
"""

from account_dashboard.domain.entities import Card, Friend, Transfer, User
from account_dashboard.domain.errors import FetchError, ServiceDisabledError
from account_dashboard.domain.result import LoadResult

__all__ = [
    "Card",
    "Friend",
    "Transfer",
    "User",
    "FetchError",
    "ServiceDisabledError",
    "LoadResult",
]
