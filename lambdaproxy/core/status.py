"""
Ready-made proxy responses for failures.

Used by a hosting layer to turn an error into a response API Gateway
understands. These helpers never raise.
"""

import logging
from http import HTTPStatus
from typing import Optional

from ..models.aws_v1 import APIGatewayProxyResponse

logger = logging.getLogger("lambdaproxy.status")


def status_text(status: int) -> str:
    """Standard reason phrase for a status code, or "" when unknown."""
    try:
        return HTTPStatus(status).phrase
    except ValueError:
        return ""


def server_error(
    err: BaseException, error_logger: Optional[logging.Logger] = None
) -> APIGatewayProxyResponse:
    """
    Log the error and return a 500 Internal Server Error response.

    Args:
        err: failure to report
        error_logger: diagnostic sink; defaults to the "lambdaproxy.status" logger
    """
    sink = error_logger or logger
    sink.error(
        str(err),
        exc_info=(type(err), err, err.__traceback__) if err.__traceback__ else None,
        extra={"error_type": type(err).__name__},
    )

    status = HTTPStatus.INTERNAL_SERVER_ERROR
    return APIGatewayProxyResponse(statusCode=status.value, body=status.phrase)


def client_error(status: int) -> APIGatewayProxyResponse:
    """
    Return a response for a client-side failure with the status's reason phrase.

    The status code is not range-checked.
    """
    return APIGatewayProxyResponse(statusCode=status, body=status_text(status))
