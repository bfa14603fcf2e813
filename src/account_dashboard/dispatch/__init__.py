"""
Dispatch Package - UI Context Marshaling.

Clients complete on arbitrary threads. Every adapter hands its final
completion to a UIDispatcher so that selection capture, cache writes and
screen state changes of a whole fallback chain happen on one context.

Dispatchers:
    - UIContext: Owner-thread bound queue, drained by the host loop
    - ImmediateDispatcher: Runs work inline (synchronous hosts, tests)
"""

from account_dashboard.dispatch.ui_context import ImmediateDispatcher, UIContext

__all__ = ["ImmediateDispatcher", "UIContext"]
