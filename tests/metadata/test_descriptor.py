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
"""Tests for TypeDescriptor and the setter naming convention."""

import pytest

from objectmapper.metadata import (
    NO_DEFAULT,
    MethodInfo,
    NamedType,
    ParameterInfo,
    PropertyInfo,
    TypeDescriptor,
    UnionType,
    setter_name,
)


class TestSetterName:
    @pytest.mark.parametrize(
        ("prop", "expected"),
        [("a", "setA"), ("id", "setId"), ("valueType", "setValueType"), ("value_type", "setValue_type")],
    )
    def test_prefix_and_capitalised_first_letter(self, prop, expected):
        assert setter_name(prop) == expected


class TestParameterInfo:
    def test_required_without_default(self):
        param = ParameterInfo("id")
        assert not param.optional
        with pytest.raises(LookupError):
            param.default_value()

    def test_none_is_a_valid_default(self):
        param = ParameterInfo("id", default=None)
        assert param.optional
        assert param.default_value() is None

    def test_default_is_copied(self):
        default = {"tags": ["a"]}
        param = ParameterInfo("meta", default=default)
        value = param.default_value()
        assert value == default
        assert value is not default
        assert value["tags"] is not default["tags"]

    def test_no_default_sentinel_repr(self):
        assert repr(NO_DEFAULT) == "NO_DEFAULT"


class TestTypeDescriptor:
    def test_lookups(self):
        descriptor = TypeDescriptor(
            type_name="Thing",
            factory=dict,
            properties=(PropertyInfo("id", alias="ident"), PropertyInfo("name")),
            methods={"setName": MethodInfo("setName", (NamedType("str"),))},
        )
        assert descriptor.find_property("id").resolution_name == "ident"
        assert descriptor.find_property("missing") is None
        assert descriptor.find_setter(descriptor.find_property("name")).name == "setName"
        assert descriptor.find_setter(descriptor.find_property("id")) is None


class TestConstraintRendering:
    def test_str(self):
        assert str(NamedType("int", nullable=True)) == "int | None"
        assert str(UnionType((NamedType("str"), NamedType("int")), nullable=True)) == "str | int | None"

    def test_union_needs_two_members(self):
        with pytest.raises(ValueError):
            UnionType((NamedType("int"),))
