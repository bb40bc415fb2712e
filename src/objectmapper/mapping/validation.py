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
"""Validation of field values against type constraints."""

from __future__ import annotations

from typing import Any

from objectmapper.kernel.exceptions import UnsupportedConstraintError
from objectmapper.mapping.values import ValueKind, kind_of, type_name_of
from objectmapper.metadata.constraints import (
    BOOL,
    FALSE,
    FLOAT,
    INT,
    TRUE,
    AnyType,
    NamedType,
    TypeConstraint,
    UnionType,
    UnsupportedType,
)

_PRIMITIVE_KINDS = {
    BOOL: ValueKind.BOOL,
    INT: ValueKind.INT,
    FLOAT: ValueKind.FLOAT,
}


def is_valid(constraint: TypeConstraint, value: Any, *, field: str | None = None) -> bool:
    """Check *value* against *constraint*.

    Kinds are never widened: an ``int`` does not satisfy ``float`` and a
    whole-number ``float`` such as ``89.0`` does not satisfy ``int``.

    Raises:
        UnsupportedConstraintError: If the constraint cannot be checked.
    """
    if isinstance(constraint, AnyType):
        return True
    if isinstance(constraint, UnsupportedType):
        raise UnsupportedConstraintError(constraint.description, field=field)
    if constraint.nullable and value is None:
        return True
    if isinstance(constraint, NamedType):
        return _matches(constraint, value)
    if isinstance(constraint, UnionType):
        return any(_matches(member, value) for member in constraint.members)
    raise TypeError(f"Not a type constraint: {constraint!r}")


def _matches(named: NamedType, value: Any) -> bool:
    primitive = _PRIMITIVE_KINDS.get(named.name)
    if primitive is not None:
        return kind_of(value) is primitive
    if named.name == TRUE:
        return value is True
    if named.name == FALSE:
        return value is False
    return type_name_of(value) == named.name
