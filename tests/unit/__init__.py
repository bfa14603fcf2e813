"""
Unit Tests - Testing Individual Components in Isolation.

Each component is tested in isolation with test doubles.
Unit tests should be fast, deterministic, and focused.

Test Files:
    - test_fallback.py / test_retry.py: Resilience decorators
    - test_*_adapter.py: Client to ItemsService translation
    - test_ui_context.py: UI-context marshaling
    - test_config_loader.py: Configuration loading/validation
"""
