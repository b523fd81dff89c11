"""Shared pydantic plumbing for wire contracts."""

import base64
from typing import Annotated, Union

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel


def _decode_base64(value: Union[str, bytes]) -> bytes:
    if isinstance(value, str):
        return base64.b64decode(value, validate=True)
    return value


# 64-bit integers travel as decimal strings
AmountStr = Annotated[
    int, PlainSerializer(lambda value: str(value), return_type=str, when_used="json")
]

# Binary payloads travel as standard base64
Base64Bytes = Annotated[
    bytes,
    BeforeValidator(_decode_base64),
    PlainSerializer(
        lambda value: base64.b64encode(value).decode("ascii"),
        return_type=str,
        when_used="json",
    ),
]

# Base58 encoded account address
Pubkey = str


class JupiterModel(BaseModel):
    """Base model: camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    def to_wire(self) -> dict:
        """Dump to the JSON-compatible dict the service expects."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
