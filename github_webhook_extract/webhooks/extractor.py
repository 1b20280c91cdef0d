"""
Typed extraction of verified webhook bodies.

The target type is anything pydantic can validate: a BaseModel subclass such as
PushEvent, a plain ``dict``, a ``typing_extensions.TypedDict`` (``typing.TypedDict``
only on Python 3.12+), and so on. Targets pydantic cannot build a schema for are
refused when the extractor is created, not when the first delivery arrives.
"""

import threading
from typing import Any, Generic, TypeVar

import structlog
from cachetools import LRUCache, cached
from pydantic import TypeAdapter, ValidationError

from github_webhook_extract.core.errors import PayloadDecodeError
from github_webhook_extract.webhooks.signature import VerifiedPayload

logger = structlog.get_logger(__name__)

T = TypeVar("T")


@cached(cache=LRUCache(maxsize=128), lock=threading.Lock())
def _type_adapter(target: Any) -> TypeAdapter[Any]:
    return TypeAdapter(target)


def _format_location(loc: tuple[int | str, ...]) -> str:
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        else:
            path += f".{part}" if path else str(part)
    return path or "."


def _format_errors(errors: list[dict[str, Any]]) -> str:
    return "; ".join(f"{_format_location(tuple(err['loc']))}: {err['msg']}" for err in errors)


def _decode(adapter: TypeAdapter[T], payload: VerifiedPayload, target: Any) -> T:
    try:
        return adapter.validate_json(payload.body)
    except ValidationError as e:
        errors = e.errors(include_url=False)
        message = _format_errors(errors)
        logger.error("webhook_payload_decode_failed", target=getattr(target, "__name__", repr(target)), error=message)
        raise PayloadDecodeError(message, errors=errors) from e


def extract_payload(payload: VerifiedPayload, target: type[T]) -> T:
    """
    Decode a verified body into ``target``.

    Raises:
        PayloadDecodeError: If the body is not valid JSON or does not match ``target``.
        PydanticUserError: If pydantic cannot build a schema for ``target``.
    """
    return _decode(_type_adapter(target), payload, target)


class PayloadExtractor(Generic[T]):
    """
    Decodes verified payloads into one fixed event type.

    The pydantic adapter is built up front, so an unusable target fails here
    rather than on the first request.
    """

    def __init__(self, target: type[T]):
        self.target = target
        self._adapter: TypeAdapter[T] = _type_adapter(target)

    def __call__(self, payload: VerifiedPayload) -> T:
        return _decode(self._adapter, payload, self.target)
