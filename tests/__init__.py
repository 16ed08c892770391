"""Test suite for apicommon.

- unit/: Unit tests for builders, translation, config and logging
- api/: End-to-end tests through FastAPI TestClient
"""
