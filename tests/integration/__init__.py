"""
Integration Tests - Composed List Screens.

These tests wire the DashboardComposer with scripted clients that
complete on background threads, and drive the UI context until each
presenter settles.

Test Files:
    - test_friends_list.py: Retry, premium cache fallback, caching
    - test_transfers_lists.py: Sent/received partitions, retry once
    - test_cards_list.py: No retry
"""
