"""
Generic HTTP message models.

Caller-facing request/response shapes, independent of the gateway envelope.
Headers are explicit (name, value) pairs so repeated names are never merged.
"""

from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, SecretStr


class HTTPRequest(BaseModel):
    """
    Request to be forwarded through the gateway.

    username/password are carried for the caller and never written to the envelope.
    """

    method: str
    resource: str
    headers: List[Tuple[str, str]] = Field(default_factory=list)
    body: str = ""
    username: Optional[str] = None
    password: Optional[SecretStr] = None

    model_config = ConfigDict(frozen=True)


class HTTPResponse(BaseModel):
    """
    Response decoded from a gateway envelope. body is never base64.

    raw_body keeps the exact bytes of a base64 body, which may not be valid UTF-8.
    """

    status_code: int
    headers: List[Tuple[str, str]] = Field(default_factory=list)
    body: str = ""
    raw_body: Optional[bytes] = Field(default=None, repr=False)

    model_config = ConfigDict(frozen=True)

    @property
    def body_bytes(self) -> bytes:
        """Exact body bytes, including non-UTF-8 content from base64 bodies."""
        if self.raw_body is not None:
            return self.raw_body
        return self.body.encode("utf-8")

    def get_all(self, name: str) -> List[str]:
        """Returns every value sent for a header name, in order."""
        return [value for key, value in self.headers if key == name]
