"""Typed, self-documenting value holder used for every configurable field."""

from __future__ import annotations

import copy
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

T = TypeVar("T")

COMMENT_PLACEHOLDER = "{comment}"


class ConfigEntry(BaseModel, Generic[T]):
    """A value of type ``T`` plus the documentation emitted above it.

    Assignment to ``value`` is validated against ``T``. Comparisons only look
    at ``value``; two entries with different documentation but equal values
    are equal.
    """

    model_config = ConfigDict(validate_assignment=True)

    value: T
    documentation: str = Field(default="", repr=False)

    def get(self) -> T:
        return self.value

    def set(self, value: T) -> None:
        self.value = value

    def render_documentation(self, comment: str = "#") -> str:
        return self.documentation.replace(COMMENT_PLACEHOLDER, comment)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ConfigEntry):
            return bool(self.value == other.value)
        return NotImplemented

    def __lt__(self, other: ConfigEntry[T]) -> bool:
        return self.value < other.value  # type: ignore[operator]

    def __le__(self, other: ConfigEntry[T]) -> bool:
        return self.value <= other.value  # type: ignore[operator]

    def __gt__(self, other: ConfigEntry[T]) -> bool:
        return self.value > other.value  # type: ignore[operator]

    def __ge__(self, other: ConfigEntry[T]) -> bool:
        return self.value >= other.value  # type: ignore[operator]


def entry(value_type: Any, default: Any, documentation: str) -> Any:
    """Field declaration for a model attribute holding a ``ConfigEntry``."""
    entry_type = ConfigEntry[value_type]
    return Field(
        default_factory=lambda: entry_type(value=copy.deepcopy(default), documentation=documentation)
    )
