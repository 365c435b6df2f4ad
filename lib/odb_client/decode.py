from __future__ import annotations

import functools
from typing import Any, TypeVar, get_args

import pydantic
from pydantic import TypeAdapter

from .errors import DecodeError

T = TypeVar("T")


@functools.lru_cache(maxsize=None)
def _adapter(target: Any) -> TypeAdapter:
    return TypeAdapter(target)


def decode(raw: bytes, target: type[T]) -> T:
    """Parse ``raw`` JSON into ``target`` (a model, ``list[Model]``, ``dict`` ...)."""
    try:
        return _adapter(target).validate_json(raw)
    except pydantic.ValidationError as e:
        raise DecodeError(f"cannot decode response as {_type_name(target)}: {e}") from e


def _type_name(target: Any) -> str:
    if get_args(target):
        return repr(target)
    return getattr(target, "__name__", repr(target))
