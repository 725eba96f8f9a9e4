# Tests Package
"""
Test suite for the streak rule engine.

- unit/: Component-level tests
- test_config.py: Settings loading
"""
