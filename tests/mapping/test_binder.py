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
"""Tests for constructor binding against hand-built descriptors."""

import pytest

from objectmapper.kernel.exceptions import (
    MissingPropertyError,
    MissingRequiredError,
    TypeMismatchError,
    UnsupportedConstraintError,
)
from objectmapper.mapping.binder import Binder
from objectmapper.mapping.source import FieldBag, SourceKind
from objectmapper.metadata import (
    NamedType,
    ParameterInfo,
    PropertyInfo,
    TypeDescriptor,
    UnionType,
    UnsupportedType,
)


def _capture(*args, **kwargs):
    return {"args": args, "kwargs": kwargs}


def _descriptor(*parameters, properties=()):
    return TypeDescriptor(
        type_name="Sample",
        factory=_capture,
        parameters=tuple(parameters),
        properties=tuple(properties),
    )


def _bag(source=SourceKind.JSON, **fields):
    return FieldBag(fields, source)


@pytest.fixture
def binder():
    return Binder()


class TestBinding:
    def test_positional_in_declaration_order(self, binder):
        descriptor = _descriptor(
            ParameterInfo("a", NamedType("str"), declared=True),
            ParameterInfo("b", NamedType("int"), declared=True),
        )
        result = binder.bind(descriptor, _bag(b=2, a="x"))
        assert result.instance == {"args": ("x", 2), "kwargs": {}}
        assert result.consumed == frozenset({"a", "b"})

    def test_keyword_only_by_name(self, binder):
        descriptor = _descriptor(
            ParameterInfo("a", declared=True),
            ParameterInfo("label", keyword_only=True, declared=True),
        )
        result = binder.bind(descriptor, _bag(a=1, label="L"))
        assert result.instance == {"args": (1,), "kwargs": {"label": "L"}}

    def test_no_parameters(self, binder):
        result = binder.bind(_descriptor(), _bag(extra=1))
        assert result.instance == {"args": (), "kwargs": {}}
        assert result.consumed == frozenset()

    def test_unknown_fields_are_ignored(self, binder):
        descriptor = _descriptor(ParameterInfo("a", declared=True))
        assert binder.bind(descriptor, _bag(a=1, b=2)).consumed == frozenset({"a"})


class TestDefaults:
    def test_absent_field_uses_default(self, binder):
        descriptor = _descriptor(ParameterInfo("id", NamedType("int"), default=10, declared=True))
        result = binder.bind(descriptor, _bag())
        assert result.instance["args"] == (10,)
        assert result.consumed == frozenset()

    def test_default_is_not_validated(self, binder):
        descriptor = _descriptor(ParameterInfo("id", NamedType("int"), default="n/a", declared=True))
        assert binder.bind(descriptor, _bag()).instance["args"] == ("n/a",)

    def test_default_is_fresh_per_call(self, binder):
        default: list = []
        descriptor = _descriptor(ParameterInfo("tags", default=default, declared=True))
        first = binder.bind(descriptor, _bag()).instance["args"][0]
        second = binder.bind(descriptor, _bag()).instance["args"][0]
        assert first == [] and first is not default and first is not second

    def test_default_factory(self, binder):
        descriptor = _descriptor(ParameterInfo("tags", default_factory=list, declared=True))
        assert binder.bind(descriptor, _bag()).instance["args"] == ([],)

    def test_missing_required(self, binder):
        descriptor = _descriptor(ParameterInfo("id", NamedType("int"), declared=True))
        with pytest.raises(MissingRequiredError) as exc_info:
            binder.bind(descriptor, _bag())
        exc = exc_info.value
        assert exc.message == "Required parameter 'id' is not found from JSON."
        assert exc.context == {"field": "id", "type": "Sample", "source": "JSON"}


class TestValidation:
    def test_wrong_type(self, binder):
        descriptor = _descriptor(ParameterInfo("id", NamedType("int"), default=10, declared=True))
        with pytest.raises(TypeMismatchError) as exc_info:
            binder.bind(descriptor, _bag(SourceKind.MAPPING, id="valueTest"))
        assert exc_info.value.message == "Parameter 'id' has the wrong type from mapping."
        assert exc_info.value.value == "valueTest"

    def test_explicit_null_for_nullable(self, binder):
        descriptor = _descriptor(ParameterInfo("id", NamedType("int", nullable=True), default=3, declared=True))
        result = binder.bind(descriptor, _bag(id=None))
        assert result.instance["args"] == (None,)
        assert result.consumed == frozenset({"id"})

    def test_union(self, binder):
        descriptor = _descriptor(ParameterInfo("v", UnionType((NamedType("str"), NamedType("int"))), declared=True))
        assert binder.bind(descriptor, _bag(v=20)).instance["args"] == (20,)
        with pytest.raises(TypeMismatchError):
            binder.bind(descriptor, _bag(v=89.0))

    def test_first_violation_wins(self, binder):
        descriptor = _descriptor(
            ParameterInfo("a", NamedType("int"), declared=True),
            ParameterInfo("b", NamedType("int"), declared=True),
        )
        with pytest.raises(MissingRequiredError, match="'a'"):
            binder.bind(descriptor, _bag(b="wrong"))

    def test_unsupported_constraint_only_when_present(self, binder):
        descriptor = _descriptor(ParameterInfo("cb", UnsupportedType("typing.Callable"), default=None, declared=True))
        assert binder.bind(descriptor, _bag()).instance["args"] == (None,)
        with pytest.raises(UnsupportedConstraintError, match="on 'cb'"):
            binder.bind(descriptor, _bag(cb=1))


class TestResolutionNames:
    def test_declared_parameter_uses_its_own_alias(self, binder):
        descriptor = _descriptor(ParameterInfo("valueType", alias="value_type", declared=True))
        result = binder.bind(descriptor, _bag(value_type="data", valueType="ignored"))
        assert result.instance["args"] == ("data",)
        assert result.consumed == frozenset({"valueType"})

    def test_declared_parameter_without_alias(self, binder):
        descriptor = _descriptor(ParameterInfo("valueType", declared=True))
        with pytest.raises(MissingRequiredError, match="'valueType'"):
            binder.bind(descriptor, _bag(value_type="data"))

    def test_plain_parameter_reads_property_alias(self, binder):
        descriptor = _descriptor(
            ParameterInfo("valueType", NamedType("str")),
            properties=[PropertyInfo("valueType", NamedType("str"), alias="value_type")],
        )
        assert binder.bind(descriptor, _bag(value_type="data")).instance["args"] == ("data",)
        assert Binder.resolution_name(descriptor, descriptor.parameters[0]) == "value_type"

    def test_plain_parameter_without_property(self, binder):
        descriptor = _descriptor(
            ParameterInfo("valuetype"),
            properties=[PropertyInfo("valueType", alias="value_type")],
        )
        with pytest.raises(MissingPropertyError) as exc_info:
            binder.bind(descriptor, _bag(value_type="data"))
        assert exc_info.value.message == "Argument name valuetype does not have its property"
        assert exc_info.value.parameter == "valuetype"
