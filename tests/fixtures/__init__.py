"""
Test Fixtures - Shared Test Data and Doubles.

This package contains reusable test fixtures:
    - sample_config.yaml: Sample configuration for testing
    - doubles.py: Record factories, service spies and recording dispatchers

Usage:
    Import doubles directly, e.g. ``from tests.fixtures.doubles import a_friend``.
"""
