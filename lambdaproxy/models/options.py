"""
Codec option models.

No options are recognized yet. The models stay in the encode/decode
signatures so toggles (e.g. escaping policy) can be added without breaking callers.
"""

from pydantic import BaseModel, ConfigDict


class EncodeOptions(BaseModel):
    model_config = ConfigDict(frozen=True)


class DecodeOptions(BaseModel):
    model_config = ConfigDict(frozen=True)
