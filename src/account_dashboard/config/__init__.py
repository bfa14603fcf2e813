"""
Configuration Package - Models and Loaders.

This package handles the configuration of the dashboard's list screens:
    - Pydantic models for type-safe configuration
    - YAML loader with validation
    - Support for configuration profiles

Configuration Structure:
    - DashboardConfig: Root configuration object
    - FriendsListConfig: Retry count and premium cache fallback
    - TransfersListConfig: Retry count and date styles
    - CardsListConfig: Retry count

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Support for profiles (e.g. flaky-network)
"""

from account_dashboard.config.loader import ConfigLoader, load_config
from account_dashboard.config.models import (
    CardsListConfig,
    DashboardConfig,
    FriendsListConfig,
    TransfersListConfig,
)

__all__ = [
    "ConfigLoader",
    "load_config",
    "CardsListConfig",
    "DashboardConfig",
    "FriendsListConfig",
    "TransfersListConfig",
]
