"""
Retry Decorator - Fallback Against the Same Service.

retry(service, n) builds the chain

    Fallback(...Fallback(Fallback(service, service), service)..., service)

with n links, giving up to n + 1 attempts against the same service. The
failure surfaced after the last attempt is that attempt's own failure,
not the first one.
"""

from __future__ import annotations

from account_dashboard.interfaces.items_service import ItemsService
from account_dashboard.resilience.fallback import ItemsServiceWithFallback


def retry(service: ItemsService, retry_count: int) -> ItemsService:
    """
    Wrap `service` so that failures are re-attempted.

    Args:
        service: Service to re-attempt
        retry_count: Number of extra attempts after the first one

    Returns:
        The composed service, or `service` itself when retry_count is 0

    Raises:
        ValueError: If retry_count is negative
    """
    if retry_count < 0:
        raise ValueError(f"retry_count must be >= 0, got {retry_count}")

    chain = service
    for _ in range(retry_count):
        chain = ItemsServiceWithFallback(chain, service)
    return chain
