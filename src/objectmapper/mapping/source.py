# Copyright 2026 Firefly Software Solutions Inc.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
"""Source normalisation: JSON text, attribute objects and mappings become a FieldBag."""

from __future__ import annotations

import json
import types
from collections.abc import Iterator, Mapping
from enum import IntFlag, StrEnum
from typing import Any

from objectmapper.kernel.exceptions import DecodeError
from objectmapper.mapping.values import kind_of

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


class SourceKind(StrEnum):
    """Where a FieldBag came from; named in binding error messages."""

    JSON = "JSON"
    OBJECT = "object"
    MAPPING = "mapping"


class DecodeFlag(IntFlag):
    """Decode options for JSON text. Unknown bits are ignored."""

    NONE = 0
    BIGINT_AS_STRING = 2
    """Integers outside the signed 64-bit range are kept as their string literal."""
    REJECT_CONSTANTS = 4
    """``NaN``, ``Infinity`` and ``-Infinity`` are decode errors."""


class FieldBag(Mapping[str, Any]):
    """Read-only view of the normalised input: field name to raw value."""

    __slots__ = ("_fields", "source")

    def __init__(self, fields: Mapping[str, Any], source: SourceKind) -> None:
        self._fields: dict[str, Any] = dict(fields)
        self.source = source

    def __getitem__(self, key: str) -> Any:
        return self._fields[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._fields)

    def __len__(self) -> int:
        return len(self._fields)

    def __repr__(self) -> str:
        return f"FieldBag(source={self.source.value!r}, fields={sorted(self._fields)!r})"


class _ConstantRejected(ValueError):
    pass


def _reject_constant(name: str) -> float:
    raise _ConstantRejected(f"Constant {name} is not allowed")


def _int_or_literal(literal: str) -> int | str:
    value = int(literal)
    if _INT64_MIN <= value <= _INT64_MAX:
        return value
    return literal


def _exceeds_depth(value: Any, limit: int) -> bool:
    """True if arrays/objects in *value* nest deeper than *limit*."""
    stack: list[tuple[Any, int]] = [(value, 0)]
    while stack:
        current, level = stack.pop()
        if isinstance(current, dict):
            children = current.values()
        elif isinstance(current, list):
            children = current
        else:
            continue
        level += 1
        if level > limit:
            return True
        stack.extend((child, level) for child in children)
    return False


def from_text(text: str | bytes, depth: int = 512, flags: int = 0) -> FieldBag:
    """Decode JSON text into a FieldBag.

    Args:
        text: JSON document; it must decode to an object.
        depth: Maximum nesting of arrays and objects, at least 1.
        flags: Bitmask of DecodeFlag values.

    Raises:
        ValueError: If *depth* is lower than 1.
        DecodeError: If the text is not valid JSON, nests deeper than
            *depth*, or decodes to anything but an object.
    """
    if depth < 1:
        raise ValueError(f"depth must be greater than 0, got {depth}")

    options: dict[str, Any] = {}
    if flags & DecodeFlag.BIGINT_AS_STRING:
        options["parse_int"] = _int_or_literal
    if flags & DecodeFlag.REJECT_CONSTANTS:
        options["parse_constant"] = _reject_constant

    try:
        decoded = json.loads(text, **options)
    except json.JSONDecodeError as exc:
        raise DecodeError(exc.msg, context={"line": exc.lineno, "column": exc.colno}) from exc
    except UnicodeDecodeError as exc:
        raise DecodeError("Malformed UTF-8 characters") from exc
    except _ConstantRejected as exc:
        raise DecodeError(str(exc)) from exc
    except RecursionError as exc:
        raise DecodeError("Maximum stack depth exceeded") from exc

    if _exceeds_depth(decoded, depth):
        raise DecodeError("Maximum stack depth exceeded", context={"depth": depth})
    if not isinstance(decoded, dict):
        kind = kind_of(decoded).value
        raise DecodeError(f"decoded value is {kind}, expected an object", context={"kind": kind})

    return FieldBag(decoded, SourceKind.JSON)


def _copy_structure(value: Any) -> Any:
    """Copy the dict, list, tuple and SimpleNamespace containers of *value*.

    Any other value, subclasses of those containers included, is shared as
    is; it may not support copying at all (locks, file handles, generators).
    """
    if type(value) is dict:
        return {key: _copy_structure(item) for key, item in value.items()}
    if type(value) is list:
        return [_copy_structure(item) for item in value]
    if type(value) is tuple:
        return tuple(_copy_structure(item) for item in value)
    if type(value) is types.SimpleNamespace:
        return types.SimpleNamespace(**_copy_structure(vars(value)))
    return value


def from_object(obj: Any) -> FieldBag:
    """Build a FieldBag from the attributes of *obj* (e.g. a SimpleNamespace).

    Nested containers are copied so the mapped instance shares no mutable
    structure with *obj*.
    """
    try:
        fields = vars(obj)
    except TypeError as exc:
        raise TypeError(f"Expected an object with attributes, got {type(obj).__name__}") from exc
    return FieldBag(_copy_structure(dict(fields)), SourceKind.OBJECT)


def from_mapping(mapping: Mapping[Any, Any]) -> FieldBag:
    """Build a FieldBag from a mapping; keys are converted to strings.

    Nested containers are copied so the mapped instance shares no mutable
    structure with *mapping*.
    """
    if not isinstance(mapping, Mapping):
        raise TypeError(f"Expected a mapping, got {type(mapping).__name__}")
    return FieldBag({str(key): _copy_structure(value) for key, value in mapping.items()}, SourceKind.MAPPING)
