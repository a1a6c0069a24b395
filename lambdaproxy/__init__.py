"""
lambdaproxy

Translates generic HTTP requests/responses to and from API Gateway
Lambda proxy integration envelopes.
"""

from .core import (
    client_error,
    decode_response,
    encode_request,
    encode_response,
    server_error,
)
from .exceptions import DecodingError, EncodingError, LambdaProxyError
from .models import (
    APIGatewayProxyRequest,
    APIGatewayProxyResponse,
    DecodeOptions,
    EncodeOptions,
    HTTPRequest,
    HTTPResponse,
)

__all__ = [
    "encode_request",
    "encode_response",
    "decode_response",
    "server_error",
    "client_error",
    "LambdaProxyError",
    "EncodingError",
    "DecodingError",
    "APIGatewayProxyRequest",
    "APIGatewayProxyResponse",
    "HTTPRequest",
    "HTTPResponse",
    "EncodeOptions",
    "DecodeOptions",
]
