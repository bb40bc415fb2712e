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
"""ObjectMapper Metadata — aliases, type constraints and type descriptors."""

from objectmapper.metadata.alias import Alias
from objectmapper.metadata.constraints import (
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
    setter_name,
)
from objectmapper.metadata.introspection import (
    DescriptorProvider,
    TypeIntrospector,
    constraint_for,
    resolve_target,
)

__all__ = [
    "Alias",
    "AnyType",
    "DescriptorProvider",
    "MethodInfo",
    "NO_DEFAULT",
    "NamedType",
    "ParameterInfo",
    "PropertyInfo",
    "TypeConstraint",
    "TypeDescriptor",
    "TypeIntrospector",
    "UnionType",
    "UnsupportedType",
    "constraint_for",
    "resolve_target",
    "setter_name",
]
