"""Core enums package.

Usage:
    from apicommon.core.enums import Environment
"""

from apicommon.core.enums.environment import Environment

__all__ = ["Environment"]
