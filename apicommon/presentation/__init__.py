"""Presentation layer - response envelopes and HTTP error translation.

Structure:
- responses/: success/error envelopes, empty sentinel, builders
- errors/: condition shapes, translator, FastAPI exception handlers

The presentation layer turns handler outcomes into HTTP responses and
contains NO business logic.
"""
