"""API tests package.

End-to-end tests using TestClient. Covers the complete request/response
cycle: routing failures, request validation, business errors and envelope
formatting.
"""
