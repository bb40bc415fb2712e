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
"""Type constraints declared on constructor parameters, attributes and setters.

A constraint is one of four shapes:

- ``AnyType`` — no annotation, every value is accepted
- ``NamedType`` — a single named type, optionally nullable
- ``UnionType`` — several named types, optionally nullable
- ``UnsupportedType`` — an annotation that cannot be checked against a value

Constraints are plain frozen data so descriptors can be built by hand in
tests or by any reflection facility.
"""

from __future__ import annotations

from dataclasses import dataclass

BOOL = "bool"
INT = "int"
FLOAT = "float"
TRUE = "true"
FALSE = "false"


@dataclass(frozen=True)
class AnyType:
    """Absent constraint."""

    def __str__(self) -> str:
        return "Any"


@dataclass(frozen=True)
class NamedType:
    """A single named type.

    ``bool``, ``int`` and ``float`` are checked by strict value kind;
    ``true`` and ``false`` stand for ``Literal[True]`` and ``Literal[False]``;
    any other name is compared with the runtime class name of the value.
    """

    name: str
    nullable: bool = False

    def __str__(self) -> str:
        return f"{self.name} | None" if self.nullable else self.name


@dataclass(frozen=True)
class UnionType:
    """A union of named types, in declaration order."""

    members: tuple[NamedType, ...]
    nullable: bool = False

    def __post_init__(self) -> None:
        if len(self.members) < 2:
            raise ValueError("UnionType needs at least two members")

    def __str__(self) -> str:
        names = [member.name for member in self.members]
        if self.nullable:
            names.append("None")
        return " | ".join(names)


@dataclass(frozen=True)
class UnsupportedType:
    """An annotation that has no validation semantics."""

    description: str

    def __str__(self) -> str:
        return f"<unsupported {self.description}>"


TypeConstraint = AnyType | NamedType | UnionType | UnsupportedType
