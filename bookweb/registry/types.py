"""Common type aliases for registry structures."""

from __future__ import annotations

from typing import TypeVar, Union

# Opaque payload produced by the content loader.
ContentT = TypeVar("ContentT")

Completion = Union[str, int, float]
StrList = list[str]
