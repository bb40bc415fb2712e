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
"""ObjectMapper — maps JSON text, attribute objects and mappings onto classes."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any, TypeVar, overload

import structlog

from objectmapper.core.config import Config
from objectmapper.core.properties import MapperProperties
from objectmapper.kernel.exceptions import ObjectMapperException
from objectmapper.mapping import source
from objectmapper.mapping.binder import Binder
from objectmapper.mapping.setters import SetterApplier
from objectmapper.metadata.descriptor import TypeDescriptor
from objectmapper.metadata.introspection import DescriptorProvider, TypeIntrospector, resolve_target

T = TypeVar("T")

logger = structlog.get_logger("objectmapper.mapping")


class ObjectMapper:
    """Maps semi-structured data onto an instance of a target class.

    Every entry point runs the same pipeline: the input is normalised into
    a FieldBag, constructor arguments are bound and the instance is built,
    then conventional setters populate the remaining attributes.

    The target is a class, an instance of it, or an import path such as
    ``"myapp.models.Product"``. Each call is independent: no reflected
    metadata is kept between calls, and on any failure the error is raised
    and the partially built instance is dropped.

    Usage::

        mapper = ObjectMapper()
        product = mapper.from_json('{"name": "Lamp", "price": 12.5}', Product)
    """

    def __init__(
        self,
        provider: DescriptorProvider | None = None,
        properties: MapperProperties | None = None,
    ) -> None:
        self._provider: DescriptorProvider = provider or TypeIntrospector()
        self._properties = properties or MapperProperties()
        self._binder = Binder()
        self._setters = SetterApplier()

    @classmethod
    def from_config(cls, config: Config, provider: DescriptorProvider | None = None) -> ObjectMapper:
        """Build a mapper whose defaults come from ``objectmapper.mapper`` in *config*."""
        return cls(provider=provider, properties=config.bind(MapperProperties))

    @property
    def properties(self) -> MapperProperties:
        return self._properties

    @overload
    def from_json(self, text: str | bytes, target: type[T], depth: int | None = ..., flags: int | None = ...) -> T: ...

    @overload
    def from_json(self, text: str | bytes, target: Any, depth: int | None = ..., flags: int | None = ...) -> Any: ...

    def from_json(
        self,
        text: str | bytes,
        target: Any,
        depth: int | None = None,
        flags: int | None = None,
    ) -> Any:
        """Map a JSON object document onto *target*.

        Args:
            text: JSON text; it must decode to an object.
            target: Class, instance or import path of the class to build.
            depth: Maximum nesting depth, defaults to ``properties.depth`` (512).
            flags: DecodeFlag bitmask, defaults to ``properties.decode_flags`` (0).

        Raises:
            UnknownTypeError: If the target cannot be resolved.
            DecodeError: If the text is invalid or not a JSON object.
            BindError: If the data does not fit the target class.
        """
        cls = resolve_target(target)
        depth = self._properties.depth if depth is None else depth
        flags = self._properties.decode_flags if flags is None else flags
        return self._map(cls, lambda: source.from_text(text, depth, flags))

    def from_object(self, obj: Any, target: Any) -> Any:
        """Map the attributes of *obj* (e.g. a ``SimpleNamespace``) onto *target*."""
        cls = resolve_target(target)
        return self._map(cls, lambda: source.from_object(obj))

    def from_mapping(self, mapping: Mapping[str, Any], target: Any) -> Any:
        """Map the items of *mapping* onto *target*."""
        cls = resolve_target(target)
        return self._map(cls, lambda: source.from_mapping(mapping))

    def describe(self, target: Any) -> TypeDescriptor:
        """Return the TypeDescriptor used to map onto *target*."""
        return self._provider.describe(resolve_target(target))

    def _map(self, cls: type, normalize: Callable[[], source.FieldBag]) -> Any:
        log = logger.bind(type=cls.__qualname__)
        try:
            bag = normalize()
            log.debug("mapping_started", source=str(bag.source), fields=len(bag))
            descriptor = self._provider.describe(cls)
            result = self._binder.bind(descriptor, bag)
            instance = self._setters.apply(result.instance, descriptor, bag, result.consumed)
        except ObjectMapperException as exc:
            log.debug("mapping_failed", code=exc.code, error=exc.message, **exc.context)
            raise
        log.debug("mapping_completed", consumed=sorted(result.consumed))
        return instance


_default_mapper = ObjectMapper()


def from_json(text: str | bytes, target: Any, depth: int = 512, flags: int = 0) -> Any:
    """Map JSON text onto *target* with a default ObjectMapper."""
    return _default_mapper.from_json(text, target, depth=depth, flags=flags)


def from_object(obj: Any, target: Any) -> Any:
    """Map the attributes of *obj* onto *target* with a default ObjectMapper."""
    return _default_mapper.from_object(obj, target)


def from_mapping(mapping: Mapping[str, Any], target: Any) -> Any:
    """Map *mapping* onto *target* with a default ObjectMapper."""
    return _default_mapper.from_mapping(mapping, target)
