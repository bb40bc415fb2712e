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
"""Binder — resolves constructor arguments from a FieldBag and builds the instance."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import structlog

from objectmapper.kernel.exceptions import (
    MissingPropertyError,
    MissingRequiredError,
    TypeMismatchError,
)
from objectmapper.mapping.source import FieldBag
from objectmapper.mapping.validation import is_valid
from objectmapper.metadata.descriptor import ParameterInfo, TypeDescriptor

logger = structlog.get_logger("objectmapper.mapping")


@dataclass(frozen=True)
class BindResult:
    """The constructed instance and the parameters whose value came from the input."""

    instance: Any
    consumed: frozenset[str]


class Binder:
    """Constructor-argument binding.

    For every constructor parameter, in declaration order:

    1. Resolve the input key (alias or declared name).
    2. A present key is validated against the parameter's constraint and
       bound; the parameter is recorded as consumed.
    3. An absent key binds the declared default when there is one.
    4. Otherwise the required field is missing.
    """

    def bind(self, descriptor: TypeDescriptor, bag: FieldBag) -> BindResult:
        args: list[Any] = []
        kwargs: dict[str, Any] = {}
        consumed: set[str] = set()

        for param in descriptor.parameters:
            field = self.resolution_name(descriptor, param)

            if field in bag:
                value = bag[field]
                if not is_valid(param.constraint, value, field=field):
                    raise TypeMismatchError(
                        field=field,
                        type_name=descriptor.type_name,
                        source=str(bag.source),
                        value=value,
                    )
                consumed.add(param.name)
            elif param.optional:
                value = param.default_value()
            else:
                raise MissingRequiredError(
                    field=field,
                    type_name=descriptor.type_name,
                    source=str(bag.source),
                )

            if param.keyword_only:
                kwargs[param.name] = value
            else:
                args.append(value)

        instance = descriptor.factory(*args, **kwargs)
        logger.debug(
            "constructor_bound",
            type=descriptor.type_name,
            arguments=len(args) + len(kwargs),
            consumed=sorted(consumed),
        )
        return BindResult(instance=instance, consumed=frozenset(consumed))

    @staticmethod
    def resolution_name(descriptor: TypeDescriptor, param: ParameterInfo) -> str:
        """Input key of *param*.

        A parameter that declares its own field uses its own alias; any
        other parameter reads the alias of the same-named class attribute.

        Raises:
            MissingPropertyError: If no class attribute has the parameter's name.
        """
        if param.declared:
            return param.alias or param.name
        prop = descriptor.find_property(param.name)
        if prop is None:
            raise MissingPropertyError(parameter=param.name, type_name=descriptor.type_name)
        return prop.resolution_name
