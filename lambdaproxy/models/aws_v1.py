# lambdaproxy/models/aws_v1.py

"""
Pydantic models for the AWS API Gateway v1 (REST API) proxy envelopes.

Reference: https://docs.aws.amazon.com/apigateway/latest/developerguide/set-up-lambda-proxy-integrations.html

Field names are the JSON keys of the Lambda proxy integration contract and
must not be renamed.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, Field


class APIGatewayProxyRequest(BaseModel):
    """
    AWS API Gateway Proxy Integration (v1) request envelope.

    Use model_dump(exclude_none=True) to convert to a dict.
    """

    resource: str
    path: str
    httpMethod: str
    headers: Dict[str, str] = Field(default_factory=dict)
    multiValueHeaders: Dict[str, List[str]] = Field(default_factory=dict)
    queryStringParameters: Optional[Dict[str, str]] = None
    multiValueQueryStringParameters: Optional[Dict[str, List[str]]] = None
    body: str = ""
    isBase64Encoded: bool = False


class APIGatewayProxyResponse(BaseModel):
    """
    AWS API Gateway Proxy Integration (v1) response envelope.

    Lambda functions commonly return null for headers, body and
    isBase64Encoded, so those fields are optional here and read as empty (or false).
    """

    statusCode: int
    headers: Optional[Dict[str, str]] = None
    multiValueHeaders: Optional[Dict[str, List[str]]] = None
    body: Optional[str] = None
    isBase64Encoded: Optional[bool] = None
