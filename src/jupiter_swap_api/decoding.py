"""Status check and body decoding shared by every endpoint.

Works against anything shaped like an httpx response, so tests can
feed it synthetic responses.
"""

import logging
from typing import Optional, Protocol, TypeVar

from pydantic import BaseModel, ValidationError

from jupiter_swap_api.errors import DecodeError, StatusError, TransportError

logger = logging.getLogger(__name__)

ModelT = TypeVar("ModelT", bound=BaseModel)


class ResponseLike(Protocol):
    """Minimal response surface: a status code and a fallible body read."""

    @property
    def status_code(self) -> int: ...

    async def aread(self) -> bytes: ...


def is_success(status_code: int) -> bool:
    return 200 <= status_code < 300


async def read_text(response: ResponseLike) -> tuple[Optional[str], Optional[Exception]]:
    """Best-effort body read.

    Returns (text, None) on success, including an empty body, and
    (None, error) when the read itself failed.
    """
    try:
        content = await response.aread()
    except Exception as e:
        logger.debug(f"Could not read error body: {e!r}")
        return None, e
    return content.decode("utf-8", errors="replace"), None


async def check_is_success(response: ResponseLike) -> ResponseLike:
    """Raise StatusError unless the response has a 2xx status."""
    if is_success(response.status_code):
        return response

    body, body_error = await read_text(response)
    logger.debug(f"Jupiter API error: {response.status_code} - {body}")
    raise StatusError(response.status_code, body=body, body_error=body_error)


def decode_body(content: bytes, model: type[ModelT]) -> ModelT:
    """Parse a JSON body into model, wrapping any failure in DecodeError."""
    try:
        return model.model_validate_json(content)
    except ValidationError as e:
        raise DecodeError(model.__name__, e) from e


async def check_status_code_and_deserialize(
    response: ResponseLike, model: type[ModelT]
) -> ModelT:
    """Validate the status first, then decode the body.

    A failed status always wins over an unparseable body.
    """
    await check_is_success(response)
    try:
        content = await response.aread()
    except Exception as e:
        raise TransportError(e) from e
    return decode_body(content, model)
