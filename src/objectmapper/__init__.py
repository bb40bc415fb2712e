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
"""ObjectMapper — map JSON text, attribute objects and mappings onto Python classes."""

from objectmapper.kernel.exceptions import (
    BindError,
    DecodeError,
    MappingConfigurationException,
    MappingException,
    MissingPropertyError,
    MissingRequiredError,
    ObjectMapperException,
    SetterTypeMismatchError,
    TypeMismatchError,
    UnknownTypeError,
    UnsupportedConstraintError,
)
from objectmapper.mapping import DecodeFlag, ObjectMapper, from_json, from_mapping, from_object
from objectmapper.metadata import Alias, TypeDescriptor, TypeIntrospector

__version__ = "0.1.0"

__all__ = [
    "Alias",
    "BindError",
    "DecodeError",
    "DecodeFlag",
    "MappingConfigurationException",
    "MappingException",
    "MissingPropertyError",
    "MissingRequiredError",
    "ObjectMapper",
    "ObjectMapperException",
    "SetterTypeMismatchError",
    "TypeDescriptor",
    "TypeIntrospector",
    "TypeMismatchError",
    "UnknownTypeError",
    "UnsupportedConstraintError",
    "__version__",
    "from_json",
    "from_mapping",
    "from_object",
]
