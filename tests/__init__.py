"""
Test Suite for Account Dashboard.

Test organization:
    - unit/: Unit tests for individual components
    - integration/: Composed list screens end to end
    - fixtures/: Shared test doubles and sample data

Running Tests:
    pytest tests/                           # All tests
    pytest tests/unit/                      # Unit tests only
    pytest tests/integration/               # Integration tests only
    pytest --cov=src/account_dashboard      # With coverage
"""
