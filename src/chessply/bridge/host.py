"""Host-callback bridge: hand serialized values to an embedding application."""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from typing import Any, Generic, TypeVar

from chessply.core.types import Position

_LOGGER = logging.getLogger(__name__)

T = TypeVar("T")

HostValue = Any  # None | bool | int | float | str | list[HostValue] | dict[str, HostValue]


class HostCallError(Exception):
    """A host call failed; ``error`` carries whatever the host raised."""

    def __init__(self, message: str, error: object = None) -> None:
        super().__init__(message)
        self.error = error


def to_host_value(value: object) -> HostValue:
    """Translate *value* into plain data the host understands."""
    if value is None or isinstance(value, (bool, str, float)):
        return value
    if isinstance(value, Enum):
        return value.name
    if isinstance(value, int):
        return value
    if isinstance(value, Position):
        return value.name
    to_dict = getattr(value, "to_dict", None)
    if callable(to_dict):
        return to_host_value(to_dict())
    if isinstance(value, (list, tuple)):
        return [to_host_value(item) for item in value]
    if isinstance(value, dict):
        return {str(key): to_host_value(item) for key, item in value.items()}
    raise HostCallError(f"Cannot serialize {type(value).__name__} for host", value)


class HostFunction(Generic[T]):
    """Opaque host callable that accepts values of type ``T``."""

    __slots__ = ("_fn",)

    def __init__(self, fn: Callable[[HostValue], Any]) -> None:
        self._fn = fn

    def call(self, value: T) -> Any:
        """Invoke the host with *value*; returns its response.

        Raises :class:`HostCallError` when *value* cannot be serialized or
        the host raises.
        """
        host_value = to_host_value(value)
        try:
            return self._fn(host_value)
        except Exception as exc:
            _LOGGER.warning("Host call failed: %s", exc)
            raise HostCallError(f"Host call failed: {exc}", exc) from exc
