"""Core layer - configuration, error taxonomy and argument checks.

Shared by every other layer. Only the container reaches into infrastructure,
to build the logger.
"""
