"""
Resilience Package - Fallback and Retry Decorators.

This package provides resilience patterns that keep the ItemsService
interface intact:
    - ItemsServiceWithFallback: Try a secondary service after a failure
    - retry: Fallback chained against the same service N times

Design Principles:
    - Strictly sequential, never concurrent
    - Exactly one result per load, whatever the chain depth
    - The last link's failure is surfaced verbatim
    - No backoff, no budgets, no cancellation
"""

from account_dashboard.resilience.fallback import (
    ItemsServiceWithFallback,
    with_fallback,
)
from account_dashboard.resilience.retry import retry

__all__ = ["ItemsServiceWithFallback", "with_fallback", "retry"]
