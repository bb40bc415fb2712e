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
"""Alias marker for reading a field under a different input key."""

from __future__ import annotations


class Alias:
    """Used with typing.Annotated to read a field from a differently named input key.

    Usage::

        class Product:
            value_type: Annotated[str, Alias("valueType")]

            def __init__(self, value_type: str) -> None:
                self.value_type = value_type

    Only the alias is accepted as input key; the attribute name itself is
    no longer looked up.
    """

    __slots__ = ("name",)

    def __init__(self, name: str) -> None:
        if not name:
            raise ValueError("Alias name must be a non-empty string")
        self.name = name

    def __repr__(self) -> str:
        return f"Alias({self.name!r})"

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Alias) and other.name == self.name

    def __hash__(self) -> int:
        return hash(("Alias", self.name))
