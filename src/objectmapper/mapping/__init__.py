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
"""ObjectMapper Mapping — normalisation, binding and setter application."""

from objectmapper.mapping.binder import Binder, BindResult
from objectmapper.mapping.mapper import ObjectMapper, from_json, from_mapping, from_object
from objectmapper.mapping.setters import SetterApplier
from objectmapper.mapping.source import DecodeFlag, FieldBag, SourceKind
from objectmapper.mapping.validation import is_valid
from objectmapper.mapping.values import ValueKind, kind_of

__all__ = [
    "BindResult",
    "Binder",
    "DecodeFlag",
    "FieldBag",
    "ObjectMapper",
    "SetterApplier",
    "SourceKind",
    "ValueKind",
    "from_json",
    "from_mapping",
    "from_object",
    "is_valid",
    "kind_of",
]
