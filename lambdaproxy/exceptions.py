"""
Custom exception classes.

Represent errors raised while translating between generic HTTP messages
and API Gateway proxy envelopes.
"""

from typing import Optional


class LambdaProxyError(Exception):
    """Base exception class for envelope translation."""

    pass


class EncodingError(LambdaProxyError):
    """Raised when an outgoing envelope cannot be built or serialized."""

    def __init__(self, envelope: str, cause: Exception):
        self.envelope = envelope
        self.cause = cause
        super().__init__(f"Error encoding {envelope}: {cause}")


class DecodingError(LambdaProxyError):
    """Raised when an incoming envelope cannot be parsed or its body decoded."""

    def __init__(self, reason: str, cause: Optional[Exception] = None):
        self.reason = reason
        self.cause = cause
        if cause is not None:
            super().__init__(f"{reason}: {cause}")
        else:
            super().__init__(reason)
