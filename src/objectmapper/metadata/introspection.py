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
"""Type-hint based introspection producing TypeDescriptors."""

from __future__ import annotations

import collections.abc
import dataclasses
import importlib
import inspect
import types
import typing
from typing import (
    Annotated,
    Any,
    ClassVar,
    Literal,
    NewType,
    Protocol,
    Union,
    get_args,
    get_origin,
    runtime_checkable,
)

import structlog

from objectmapper.kernel.exceptions import UnknownTypeError
from objectmapper.metadata.alias import Alias
from objectmapper.metadata.constraints import (
    FALSE,
    TRUE,
    AnyType,
    NamedType,
    TypeConstraint,
    UnionType,
    UnsupportedType,
)
from objectmapper.metadata.descriptor import (
    NO_DEFAULT,
    MethodInfo,
    ParameterInfo,
    PropertyInfo,
    TypeDescriptor,
)

logger = structlog.get_logger("objectmapper.metadata")

_NONE_TYPE = type(None)
_EMPTY = inspect.Parameter.empty
_POSITIONAL_KINDS = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
    inspect.Parameter.VAR_POSITIONAL,
)


@runtime_checkable
class DescriptorProvider(Protocol):
    """Anything able to describe a class as a TypeDescriptor."""

    def describe(self, cls: type) -> TypeDescriptor: ...


def resolve_target(target: Any) -> type:
    """Resolve a mapping target to a class.

    Accepts a class, an instance (its class is used), or an import path
    written ``"package.module.Class"`` or ``"package.module:Outer.Inner"``.
    """
    if isinstance(target, str):
        return _import_class(target)
    if isinstance(target, type):
        return target
    return type(target)


def _import_class(path: str) -> type:
    module_name, sep, attr_path = path.partition(":")
    if not sep:
        module_name, _, attr_path = path.rpartition(".")
    if not module_name or not attr_path:
        raise UnknownTypeError(path)

    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as exc:
        raise UnknownTypeError(path) from exc

    for part in attr_path.split("."):
        try:
            obj = getattr(obj, part)
        except AttributeError as exc:
            raise UnknownTypeError(path) from exc

    if not isinstance(obj, type):
        raise UnknownTypeError(path)
    return obj


def alias_of(annotation: Any) -> str | None:
    """Return the Alias carried by an ``Annotated`` annotation, if any."""
    if get_origin(annotation) is not Annotated:
        return None
    for metadata in get_args(annotation)[1:]:
        if isinstance(metadata, Alias):
            return metadata.name
    return None


def constraint_for(annotation: Any) -> TypeConstraint:
    """Translate a resolved type annotation into a TypeConstraint."""
    if annotation is _EMPTY or annotation is Any:
        return AnyType()
    if get_origin(annotation) is Annotated:
        return constraint_for(get_args(annotation)[0])

    if get_origin(annotation) is Union or isinstance(annotation, types.UnionType):
        options = get_args(annotation)
    else:
        options = (annotation,)

    nullable = False
    members: list[NamedType] = []
    for option in options:
        if option is None or option is _NONE_TYPE:
            nullable = True
            continue
        named = _named_types(option)
        if named is None:
            return AnyType()
        if isinstance(named, UnsupportedType):
            return named
        for member in named:
            if member not in members:
                members.append(member)

    if not members:
        return NamedType(_NONE_TYPE.__name__, nullable=True)
    if len(members) == 1:
        return NamedType(members[0].name, nullable=nullable)
    return UnionType(tuple(members), nullable=nullable)


def _named_types(option: Any) -> list[NamedType] | UnsupportedType | None:
    """Named types for one union member; ``None`` means "accepts anything"."""
    if option is Any:
        return None

    origin = get_origin(option)
    if origin is Annotated:
        return _named_types(get_args(option)[0])
    if origin is Literal:
        values = get_args(option)
        if all(isinstance(value, bool) for value in values):
            return [NamedType(TRUE if value else FALSE) for value in dict.fromkeys(values)]
        return UnsupportedType(repr(option))
    if origin is collections.abc.Callable or option is collections.abc.Callable:
        return UnsupportedType(repr(option))
    if isinstance(option, NewType):
        return _named_types(option.__supertype__)
    if isinstance(origin, type):
        return [NamedType(origin.__name__)]
    if isinstance(option, type):
        return [NamedType(option.__name__)]
    return UnsupportedType(repr(option))


class TypeIntrospector:
    """DescriptorProvider built on ``inspect`` and ``typing.get_type_hints``.

    - Constructor parameters come from ``__init__``; a class whose
      ``__init__`` is not a Python function (``object.__init__``, C types)
      has none and is built with zero arguments.
    - Properties are the class-level annotations over the MRO, base
      classes first, ``ClassVar`` and ``InitVar`` excluded.
    - Methods are the public functions, static and class methods.

    Nothing is cached: every call reflects the class again.
    """

    def describe(self, cls: type) -> TypeDescriptor:
        descriptor = TypeDescriptor(
            type_name=cls.__qualname__,
            factory=cls,
            parameters=self._parameters(cls),
            properties=self._properties(cls),
            methods=self._methods(cls),
        )
        logger.debug(
            "type_described",
            type=descriptor.type_name,
            parameters=len(descriptor.parameters),
            properties=len(descriptor.properties),
            methods=len(descriptor.methods),
        )
        return descriptor

    @staticmethod
    def _hints(obj: Any, owner: type) -> dict[str, Any]:
        try:
            return typing.get_type_hints(obj, include_extras=True)
        except (NameError, TypeError) as exc:
            raise UnknownTypeError(owner.__qualname__, f"unresolvable annotation ({exc})") from exc

    def _parameters(self, cls: type) -> tuple[ParameterInfo, ...]:
        init = cls.__init__  # type: ignore[misc]
        if not inspect.isfunction(init):
            return ()

        hints = self._hints(init, cls)
        hints.pop("return", None)
        fields = {f.name: f for f in dataclasses.fields(cls)} if dataclasses.is_dataclass(cls) else {}

        parameters: list[ParameterInfo] = []
        # First parameter is self
        for param in list(inspect.signature(init).parameters.values())[1:]:
            if param.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
                continue

            annotation = hints.get(param.name, _EMPTY)
            alias = alias_of(annotation)
            default = NO_DEFAULT if param.default is _EMPTY else param.default
            default_factory = None

            dc_field = fields.get(param.name)
            if dc_field is not None and dc_field.default_factory is not dataclasses.MISSING:
                default, default_factory = NO_DEFAULT, dc_field.default_factory

            parameters.append(
                ParameterInfo(
                    name=param.name,
                    constraint=constraint_for(annotation),
                    keyword_only=param.kind is inspect.Parameter.KEYWORD_ONLY,
                    default=default,
                    default_factory=default_factory,
                    alias=alias,
                    declared=dc_field is not None or alias is not None,
                )
            )
        return tuple(parameters)

    def _properties(self, cls: type) -> tuple[PropertyInfo, ...]:
        properties: list[PropertyInfo] = []
        for name, annotation in self._hints(cls, cls).items():
            if get_origin(annotation) is ClassVar or annotation is ClassVar:
                continue
            if isinstance(annotation, dataclasses.InitVar):
                continue
            properties.append(PropertyInfo(name, constraint_for(annotation), alias_of(annotation)))
        return tuple(properties)

    def _methods(self, cls: type) -> dict[str, MethodInfo]:
        methods: dict[str, MethodInfo] = {}
        for name in dir(cls):
            if name.startswith("__"):
                continue
            raw = inspect.getattr_static(cls, name)
            if isinstance(raw, staticmethod):
                func, bound = raw.__func__, False
            elif isinstance(raw, classmethod):
                func, bound = raw.__func__, True
            elif inspect.isfunction(raw):
                func, bound = raw, True
            else:
                continue
            methods[name] = MethodInfo(name, self._method_parameters(func, bound))
        return methods

    @staticmethod
    def _method_parameters(func: Any, bound: bool) -> tuple[TypeConstraint, ...]:
        params = list(inspect.signature(func).parameters.values())
        if bound:
            params = params[1:]
        # Setters are called with one positional argument
        params = [p for p in params if p.kind in _POSITIONAL_KINDS]
        try:
            hints = typing.get_type_hints(func, include_extras=True)
        except (NameError, TypeError) as exc:
            # Only fails the mapping if this method is actually used as a setter
            unresolved = UnsupportedType(f"unresolvable annotation ({exc})")
            return tuple(unresolved for _ in params)
        return tuple(constraint_for(hints.get(p.name, _EMPTY)) for p in params)
