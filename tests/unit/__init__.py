"""Unit tests for individual components in isolation.

Coverage:
    - ui/: ChatController lifecycle, keyboard and template commands, view adapter
    - agent/: Config validation, error classification, Agno adapter

Uses test doubles for the view and the inference client.
"""
