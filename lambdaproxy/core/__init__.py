"""
Core logic package.

Provides the envelope codec, header adapter and status helpers.
"""

from .codec import decode_response, encode_request, encode_response
from .headers import from_envelope_headers, to_envelope_headers
from .status import client_error, server_error, status_text

__all__ = [
    "encode_request",
    "encode_response",
    "decode_response",
    "to_envelope_headers",
    "from_envelope_headers",
    "server_error",
    "client_error",
    "status_text",
]
