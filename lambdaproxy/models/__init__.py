"""
Data model definitions package.

Aggregates Pydantic models for use in other modules.
"""

from .aws_v1 import APIGatewayProxyRequest, APIGatewayProxyResponse
from .http import HTTPRequest, HTTPResponse
from .options import DecodeOptions, EncodeOptions

__all__ = [
    "APIGatewayProxyRequest",
    "APIGatewayProxyResponse",
    "HTTPRequest",
    "HTTPResponse",
    "EncodeOptions",
    "DecodeOptions",
]
