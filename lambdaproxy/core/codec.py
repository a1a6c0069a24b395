"""
Envelope codec.

Request encoding: HTTPRequest -> API Gateway Lambda Proxy Integration request JSON.
Response decoding: Lambda proxy response JSON -> HTTPResponse.
"""

import base64
import binascii
import json
import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import parse_qsl

from pydantic import BaseModel, ValidationError

from ..config import config
from ..exceptions import DecodingError, EncodingError
from ..models.aws_v1 import APIGatewayProxyRequest, APIGatewayProxyResponse
from ..models.http import HTTPRequest, HTTPResponse
from ..models.options import DecodeOptions, EncodeOptions
from .headers import from_envelope_headers, group_headers, to_envelope_headers

logger = logging.getLogger("lambdaproxy.codec")


def _split_resource(
    resource: str,
) -> Tuple[str, Optional[Dict[str, str]], Optional[Dict[str, List[str]]]]:
    path, sep, query = resource.partition("?")
    if not sep or not query:
        return path, None, None

    multi_query = group_headers(parse_qsl(query, keep_blank_values=True))
    query_params = {name: values[-1] for name, values in multi_query.items()}
    return path, query_params, multi_query


def _dump(envelope: BaseModel) -> bytes:
    payload: Dict[str, Any] = envelope.model_dump(exclude_none=True)
    if not payload.get("isBase64Encoded"):
        payload.pop("isBase64Encoded", None)
    # Raw UTF-8 output; json never HTML-escapes.
    return json.dumps(payload, ensure_ascii=False).encode("utf-8")


def encode_request(request: HTTPRequest, options: Optional[EncodeOptions] = None) -> bytes:
    """
    Encode a generic HTTP request as an API Gateway proxy request envelope.

    Args:
        request: request to forward
        options: reserved; no options are recognized yet

    Returns:
        UTF-8 JSON bytes of the envelope

    Raises:
        EncodingError: the envelope could not be built or serialized
    """
    logger.debug(
        f"Encoding request {request.method} {request.resource}",
        extra={"body_size": len(request.body), "header_count": len(request.headers)},
    )

    try:
        path, query_params, multi_query_params = _split_resource(request.resource)
        headers, multi_headers = to_envelope_headers(request.headers)

        envelope = APIGatewayProxyRequest(
            resource=request.resource,
            path=path,
            httpMethod=request.method,
            headers=headers,
            multiValueHeaders=multi_headers,
            queryStringParameters=query_params,
            multiValueQueryStringParameters=multi_query_params,
            body=request.body,
        )
        return _dump(envelope)
    except (TypeError, ValueError) as e:
        raise EncodingError("APIGatewayProxyRequest", e) from e


def encode_response(
    response: APIGatewayProxyResponse, options: Optional[EncodeOptions] = None
) -> bytes:
    """
    Serialize a proxy response envelope, e.g. one built by the status helpers.
    """
    try:
        return _dump(response)
    except (TypeError, ValueError) as e:
        raise EncodingError("APIGatewayProxyResponse", e) from e


def _decode_body(envelope: APIGatewayProxyResponse) -> Tuple[str, Optional[bytes]]:
    body = envelope.body or ""
    if not envelope.isBase64Encoded:
        return body, None

    # Line breaks are ignored, as in MIME-wrapped output (base64.encodebytes).
    body = body.replace("\r", "").replace("\n", "")
    try:
        raw = base64.b64decode(body, validate=True)
    except (binascii.Error, ValueError) as e:
        raise DecodingError("Invalid base64 body", e) from e
    return raw.decode("utf-8", "replace"), raw


def _warn(reason: str, payload: bytes) -> None:
    snippet = payload[: config.LOG_SNIPPET_LENGTH].decode("utf-8", "replace")
    logger.warning(
        f"Failed to decode Lambda proxy response: {reason}",
        extra={"snippet": snippet, "payload_size": len(payload)},
    )


def decode_response(payload: bytes, options: Optional[DecodeOptions] = None) -> HTTPResponse:
    """
    Decode an API Gateway proxy response envelope into a generic HTTP response.

    Args:
        payload: raw envelope bytes returned by the Lambda function
        options: reserved; no options are recognized yet

    Returns:
        HTTPResponse with a plain (non-base64) body

    Raises:
        DecodingError: payload is not JSON, does not match the envelope
            shape, or carries a malformed base64 body
    """
    try:
        data = json.loads(payload)
    except (ValueError, RecursionError) as e:
        _warn("invalid JSON", payload)
        raise DecodingError("Invalid JSON payload", e) from e

    try:
        envelope = APIGatewayProxyResponse.model_validate(data)
    except ValidationError as e:
        _warn("envelope shape mismatch", payload)
        raise DecodingError("Payload is not a proxy response envelope", e) from e

    try:
        body, raw_body = _decode_body(envelope)
    except DecodingError:
        _warn("invalid base64 body", payload)
        raise

    return HTTPResponse(
        status_code=envelope.statusCode,
        headers=from_envelope_headers(envelope.headers, envelope.multiValueHeaders),
        body=body,
        raw_body=raw_body,
    )
