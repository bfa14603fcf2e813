"""
Account Dashboard - Resilient Items Loading for List Screens.

The dashboard (friends, transfers, cards) is built from generic list
screens. Every screen consumes one composed ItemsService that may retry
its remote source and fall back to a local cache without the screen
knowing any of that happened.

Architecture:
    - Hexagonal Architecture (Ports & Adapters)
    - Dependency Injection, no process-wide singletons
    - Decorator Pattern for resilience (fallback, retry)
    - Configuration-driven retry counts via YAML

Main Components:
    - domain: Records (Friend, Card, Transfer, User), LoadResult, errors
    - interfaces: ItemsService and collaborator protocols
    - resilience: Fallback and retry decorators
    - adapters: Client/cache to ItemsService translators
    - dispatch: UI-context marshaling
    - presentation: Item view models and the headless list presenter
    - composition: Premium-aware wiring of every list screen
    - config: Configuration models and loaders

Example:
    >>> from account_dashboard.composition.dashboard import DashboardComposer
    >>> composer = DashboardComposer(config, user, friends_api, cache, ...)
    >>> service = composer.make_friends_service(select=show_details)
    >>> service.load_items(print)

"""

import logging

__version__ = "0.2.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Account Dashboard.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import account_dashboard
        >>> account_dashboard.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("account_dashboard").setLevel(level)
