"""Domain protocols.

Exports:
    LoggerProtocol: Structured logging contract
"""

from apicommon.domain.protocols.logger_protocol import LoggerProtocol

__all__ = ["LoggerProtocol"]
