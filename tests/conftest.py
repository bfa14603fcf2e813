"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from datetime import datetime
from pathlib import Path
from typing import List

import pytest

from account_dashboard.config.models import DashboardConfig
from account_dashboard.dispatch.ui_context import ImmediateDispatcher, UIContext
from account_dashboard.domain.entities import Friend, Transfer, User
from tests.fixtures.doubles import a_friend, a_transfer


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return Path(__file__).parent / "fixtures" / "sample_config.yaml"


@pytest.fixture
def default_config() -> DashboardConfig:
    """Create default dashboard configuration."""
    return DashboardConfig()


@pytest.fixture
def immediate_dispatcher() -> ImmediateDispatcher:
    """Dispatcher running work inline."""
    return ImmediateDispatcher()


@pytest.fixture
def ui_context() -> UIContext:
    """UI context owned by the test thread."""
    return UIContext()


@pytest.fixture
def premium_user() -> User:
    return User(name="Premium", is_premium=True)


@pytest.fixture
def standard_user() -> User:
    return User(name="Standard", is_premium=False)


@pytest.fixture
def sample_friends() -> List[Friend]:
    """Two friends with known display fields."""
    return [
        a_friend(name="a name", phone="a phone"),
        a_friend(name="another name", phone="another phone"),
    ]


@pytest.fixture
def mixed_transfers() -> List[Transfer]:
    """Transfer feed with sent and received records interleaved."""
    return [
        a_transfer(
            sent=True,
            description="a description",
            amount="10.75",
            currency_code="USD",
            date=datetime(1976, 4, 1, 0, 0),
        ),
        a_transfer(sent=False, description="first received"),
        a_transfer(
            sent=True,
            description="another description",
            amount="99.99",
            currency_code="GBP",
            date=datetime(2007, 6, 29, 9, 41),
        ),
        a_transfer(sent=False, description="second received"),
        a_transfer(sent=False, description="third received"),
    ]
