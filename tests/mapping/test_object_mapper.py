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
"""End-to-end mapping of generic objects and mappings onto classes."""

import threading
from dataclasses import dataclass, field
from types import SimpleNamespace
from typing import Annotated, Any

import pytest

from objectmapper import (
    Alias,
    MissingRequiredError,
    ObjectMapper,
    SetterTypeMismatchError,
    TypeMismatchError,
    from_mapping,
    from_object,
)


@dataclass
class Pair:
    a: str
    b: int


@dataclass
class Inventory:
    name: str
    items: list = field(default_factory=list)


@dataclass
class Guarded:
    lock: Any
    name: str = ""


class Account:
    owner: Annotated[str, Alias("owner_name")]
    balance: int = 0

    def __init__(self, owner: str):
        self.owner = owner

    def setBalance(self, value: int):
        self.balance = value


@pytest.fixture
def mapper():
    return ObjectMapper()


class TestFromObject:
    def test_namespace(self, mapper):
        assert mapper.from_object(SimpleNamespace(a="x", b=1), Pair) == Pair("x", 1)

    def test_alias_and_setter(self, mapper):
        account = mapper.from_object(SimpleNamespace(owner_name="Ada", balance=20), Account)
        assert account.owner == "Ada"
        assert account.balance == 20

    def test_missing_names_source(self, mapper):
        with pytest.raises(MissingRequiredError, match=r"Required parameter 'b' is not found from object\."):
            mapper.from_object(SimpleNamespace(a="x"), Pair)

    def test_input_is_not_shared(self, mapper):
        source = SimpleNamespace(name="shelf", items=["a"])
        inventory = mapper.from_object(source, Inventory)
        inventory.items.append("b")
        assert source.items == ["a"]

    def test_plain_instance_as_input(self, mapper):
        assert mapper.from_object(Pair("x", 1), Pair) == Pair("x", 1)

    def test_module_function(self):
        assert from_object(SimpleNamespace(a="x", b=1), Pair) == Pair("x", 1)


class TestFromMapping:
    def test_dict(self, mapper):
        assert mapper.from_mapping({"a": "x", "b": 1}, Pair) == Pair("x", 1)

    def test_wrong_type_names_source(self, mapper):
        with pytest.raises(TypeMismatchError, match=r"Parameter 'b' has the wrong type from mapping\."):
            mapper.from_mapping({"a": "x", "b": "1"}, Pair)

    def test_setter_mismatch_discards_instance(self, mapper):
        with pytest.raises(SetterTypeMismatchError) as exc_info:
            mapper.from_mapping({"owner_name": "Ada", "balance": "lots"}, Account)
        assert exc_info.value.context["source"] == "mapping"
        assert exc_info.value.setter == "setBalance"

    def test_uncopyable_value_is_passed_through(self, mapper):
        lock = threading.Lock()
        assert mapper.from_mapping({"lock": lock, "name": "db"}, Guarded).lock is lock
        assert mapper.from_object(SimpleNamespace(lock=lock), Guarded).lock is lock

    def test_non_string_keys(self, mapper):
        assert mapper.from_mapping({"a": "x", "b": 1, 3: "ignored"}, Pair) == Pair("x", 1)

    def test_module_function_is_idempotent(self):
        data = {"name": "shelf", "items": [["nested"]]}
        first = from_mapping(data, Inventory)
        second = from_mapping(data, Inventory)
        assert first == second
        assert first.items[0] is not second.items[0]
        assert data["items"][0] is not first.items[0]
