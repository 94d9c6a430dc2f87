"""Integration tests for components working together.

Coverage:
    - API endpoints with real HTTP requests
    - Chat controller driving the Agno client (Agno model patched)
    - Live inference when HF_API_KEY is set
"""
