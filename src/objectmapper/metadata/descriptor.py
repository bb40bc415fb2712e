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
"""TypeDescriptor — the reflected shape of a mapping target.

A descriptor is pure data: the binder and the setter applier only ever
read it, so it can come from ``TypeIntrospector`` or be written by hand.

Setter naming convention
------------------------
A class attribute ``name`` is populated after construction through the
method ``setter_name("name")``, i.e. ``"set"`` followed by the attribute
name with its first letter upper-cased (``valueType`` -> ``setValueType``,
``id`` -> ``setId``). The convention is defined here and nowhere else.
"""

from __future__ import annotations

import copy
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any

from objectmapper.metadata.constraints import AnyType, TypeConstraint

SETTER_PREFIX = "set"


def setter_name(property_name: str) -> str:
    """Return the conventional setter name for *property_name*."""
    return SETTER_PREFIX + property_name[:1].upper() + property_name[1:]


class _NoDefault:
    __slots__ = ()

    def __repr__(self) -> str:
        return "NO_DEFAULT"


NO_DEFAULT: Any = _NoDefault()


@dataclass(frozen=True)
class ParameterInfo:
    """One constructor parameter.

    Attributes:
        name: Declared parameter name.
        constraint: Declared type constraint.
        keyword_only: Passed by name instead of by position.
        default: Declared default, ``NO_DEFAULT`` when required.
        default_factory: Produces the default per call (dataclass fields).
        alias: Input key override carried by the parameter itself.
        declared: The parameter declares its own field (dataclass fields,
            or a parameter carrying its own alias). Otherwise its alias is
            read from the same-named class attribute.
    """

    name: str
    constraint: TypeConstraint = AnyType()
    keyword_only: bool = False
    default: Any = NO_DEFAULT
    default_factory: Callable[[], Any] | None = None
    alias: str | None = None
    declared: bool = False

    @property
    def optional(self) -> bool:
        return self.default is not NO_DEFAULT or self.default_factory is not None

    def default_value(self) -> Any:
        """A fresh copy of the default, so instances never share it."""
        if self.default_factory is not None:
            return self.default_factory()
        if self.default is NO_DEFAULT:
            raise LookupError(f"Parameter '{self.name}' has no default")
        return copy.deepcopy(self.default)


@dataclass(frozen=True)
class PropertyInfo:
    """One declared instance attribute."""

    name: str
    constraint: TypeConstraint = AnyType()
    alias: str | None = None

    @property
    def resolution_name(self) -> str:
        return self.alias or self.name


@dataclass(frozen=True)
class MethodInfo:
    """One method: its name and the constraints of its positional parameters.

    ``self`` and keyword-only parameters are excluded, so a method whose
    parameters are all keyword-only has ``parameter_count == 0``.
    """

    name: str
    parameters: tuple[TypeConstraint, ...] = ()

    @property
    def parameter_count(self) -> int:
        return len(self.parameters)

    @property
    def first_parameter(self) -> TypeConstraint | None:
        return self.parameters[0] if self.parameters else None


@dataclass(frozen=True)
class TypeDescriptor:
    """Constructor parameters, attributes and methods of a mapping target.

    ``factory`` is called with the bound constructor arguments; for
    introspected classes it is the class itself.
    """

    type_name: str
    factory: Callable[..., Any]
    parameters: tuple[ParameterInfo, ...] = ()
    properties: tuple[PropertyInfo, ...] = ()
    methods: Mapping[str, MethodInfo] = field(default_factory=dict)

    def find_property(self, name: str) -> PropertyInfo | None:
        for prop in self.properties:
            if prop.name == name:
                return prop
        return None

    def find_method(self, name: str) -> MethodInfo | None:
        return self.methods.get(name)

    def find_setter(self, prop: PropertyInfo) -> MethodInfo | None:
        """Return the conventional setter of *prop*, if the type has one."""
        return self.find_method(setter_name(prop.name))
