"""
Composition Package - Wiring of the Dashboard.

The composition root is the only place that knows which adapters and
decorators make up each screen's ItemsService.
"""

from account_dashboard.composition.dashboard import DashboardComposer

__all__ = ["DashboardComposer"]
