"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic. Retry
counts fix the static depth of each screen's fallback chain.
"""

from __future__ import annotations

from pydantic import BaseModel, Field


class FriendsListConfig(BaseModel):
    """Configuration for the friends list."""

    max_retry_count: int = Field(default=2, ge=0, le=10)
    use_cache_for_premium: bool = True
    disabled_cache_message: str = Field(
        default="Offline friends are available to premium users only",
        min_length=1,
    )


class TransfersListConfig(BaseModel):
    """Configuration for the sent and received transfers lists."""

    max_retry_count: int = Field(default=1, ge=0, le=10)
    long_date_style_for_sent: bool = True
    long_date_style_for_received: bool = False


class CardsListConfig(BaseModel):
    """Configuration for the cards list."""

    max_retry_count: int = Field(default=0, ge=0, le=10)


class DashboardConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    friends: FriendsListConfig = Field(default_factory=FriendsListConfig)
    transfers: TransfersListConfig = Field(default_factory=TransfersListConfig)
    cards: CardsListConfig = Field(default_factory=CardsListConfig)

    model_config = {"populate_by_name": True}
