"""Outcome kind carried by every response envelope.

- SUCCESS: request handled, payload in ``data`` (2xx/3xx)
- FAILURE: client-side problem (4xx)
- ERROR: server-side problem (5xx)
"""

from enum import Enum


class ApiStatus(str, Enum):
    """Outcome kind of a response envelope."""

    SUCCESS = "SUCCESS"
    FAILURE = "FAILURE"
    ERROR = "ERROR"
