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
"""SetterApplier — populates the remaining attributes through conventional setters."""

from __future__ import annotations

from collections.abc import Set
from typing import Any

import structlog

from objectmapper.kernel.exceptions import SetterTypeMismatchError
from objectmapper.mapping.source import FieldBag
from objectmapper.mapping.validation import is_valid
from objectmapper.metadata.descriptor import TypeDescriptor

logger = structlog.get_logger("objectmapper.mapping")


class SetterApplier:
    """Calls ``set<Name>(value)`` for every attribute present in the input.

    Attributes already bound through the constructor are skipped, as are
    attributes whose class has no such setter or a setter without
    parameters. The setter's return value is discarded.
    """

    def apply(
        self,
        instance: Any,
        descriptor: TypeDescriptor,
        bag: FieldBag,
        consumed: Set[str],
    ) -> Any:
        for prop in descriptor.properties:
            field = prop.resolution_name
            if field not in bag or prop.name in consumed:
                continue

            setter = descriptor.find_setter(prop)
            if setter is None or setter.parameter_count < 1:
                continue

            value = bag[field]
            if not is_valid(setter.parameters[0], value, field=field):
                raise SetterTypeMismatchError(
                    setter=setter.name,
                    field=field,
                    type_name=descriptor.type_name,
                    source=str(bag.source),
                    value=value,
                )

            getattr(instance, setter.name)(value)
            logger.debug("setter_applied", type=descriptor.type_name, setter=setter.name, field=field)

        return instance
