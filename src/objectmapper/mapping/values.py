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
"""Value kinds of decoded input data."""

from __future__ import annotations

import types
from collections.abc import Mapping
from enum import Enum
from typing import Any


class ValueKind(Enum):
    """Closed set of shapes a field value can take."""

    NULL = "null"
    BOOL = "bool"
    INT = "int"
    FLOAT = "float"
    STRING = "string"
    ARRAY = "array"
    OBJECT = "object"
    OTHER = "other"


def kind_of(value: Any) -> ValueKind:
    """Classify *value*. ``bool`` is checked before ``int`` since it subclasses it."""
    if value is None:
        return ValueKind.NULL
    if isinstance(value, bool):
        return ValueKind.BOOL
    if isinstance(value, int):
        return ValueKind.INT
    if isinstance(value, float):
        return ValueKind.FLOAT
    if isinstance(value, str):
        return ValueKind.STRING
    if isinstance(value, (list, tuple)):
        return ValueKind.ARRAY
    if isinstance(value, (Mapping, types.SimpleNamespace)):
        return ValueKind.OBJECT
    return ValueKind.OTHER


def type_name_of(value: Any) -> str:
    """Runtime class name of *value*, as compared against named constraints."""
    return type(value).__name__
