"""Test package for Homework Chat.

Structure:
    - unit/: Controller, config, error classification and view adapter tests
    - integration/: HTTP host and controller-through-Agno workflow tests

Leverages pytest with pytest-check for soft assertions.
"""
