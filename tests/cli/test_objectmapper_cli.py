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
"""Tests for the objectmapper command line."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from click.testing import CliRunner

from objectmapper.cli.main import cli

MODELS = '''
from dataclasses import dataclass, field
from typing import Annotated

from objectmapper import Alias


@dataclass
class Product:
    name: str
    price: float = 0.0
    sku: Annotated[str, Alias("sku_code")] = ""


class Account:
    owner: str
    balance: int = 0

    def __init__(self, owner: str):
        self.owner = owner

    def setBalance(self, value: int):
        self.balance = value
'''


@pytest.fixture
def app_dir(tmp_path: Path) -> Path:
    (tmp_path / "cli_sample_models.py").write_text(MODELS)
    return tmp_path


def _write(path: Path, content: str) -> str:
    path.write_text(content)
    return str(path)


class TestCLI:
    def test_help(self):
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "map" in result.output
        assert "describe" in result.output


class TestMapCommand:
    def test_map_as_json(self, app_dir: Path):
        runner = CliRunner()
        data = _write(app_dir / "product.json", '{"name": "Lamp", "price": 12.5, "sku_code": "L-1"}')
        result = runner.invoke(
            cli, ["map", data, "cli_sample_models:Product", "--app-dir", str(app_dir), "--json"]
        )
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == {"name": "Lamp", "price": 12.5, "sku": "L-1"}

    def test_map_applies_setters(self, app_dir: Path):
        runner = CliRunner()
        result = runner.invoke(
            cli,
            ["map", "-", "cli_sample_models:Account", "--app-dir", str(app_dir), "--json"],
            input='{"owner": "Ada", "balance": 20}',
        )
        assert result.exit_code == 0, result.output
        assert json.loads(result.output) == {"owner": "Ada", "balance": 20}

    def test_map_table(self, app_dir: Path):
        runner = CliRunner()
        data = _write(app_dir / "product.json", '{"name": "Lamp"}')
        result = runner.invoke(cli, ["map", data, "cli_sample_models:Product", "--app-dir", str(app_dir)])
        assert result.exit_code == 0, result.output
        assert "Lamp" in result.output
        assert "price" in result.output

    def test_invalid_json_exits_with_error(self, app_dir: Path):
        runner = CliRunner()
        data = _write(app_dir / "broken.json", "not a json")
        result = runner.invoke(cli, ["map", data, "cli_sample_models:Product", "--app-dir", str(app_dir)])
        assert result.exit_code == 1
        assert "Expecting value" in result.output

    def test_missing_field_exits_with_error(self, app_dir: Path):
        runner = CliRunner()
        data = _write(app_dir / "empty.json", "{}")
        result = runner.invoke(cli, ["map", data, "cli_sample_models:Product", "--app-dir", str(app_dir)])
        assert result.exit_code == 1
        assert "MISSING_REQUIRED" in result.output

    def test_unknown_target(self, app_dir: Path):
        runner = CliRunner()
        data = _write(app_dir / "product.json", '{"name": "Lamp"}')
        result = runner.invoke(cli, ["map", data, "cli_sample_models:Nope", "--app-dir", str(app_dir)])
        assert result.exit_code == 1
        assert "UNKNOWN_TYPE" in result.output

    def test_depth_from_config(self, app_dir: Path):
        runner = CliRunner()
        config = _write(app_dir / "objectmapper.yaml", "objectmapper:\n  mapper:\n    depth: 1\n")
        data = _write(app_dir / "product.json", '{"name": "Lamp", "extra": [1]}')
        args = ["map", data, "cli_sample_models:Product", "--app-dir", str(app_dir), "--config", config]
        result = runner.invoke(cli, args)
        assert result.exit_code == 1
        assert "Maximum stack depth exceeded" in result.output

        result = runner.invoke(cli, [*args, "--depth", "2", "--json"])
        assert result.exit_code == 0, result.output


    def test_depth_must_be_positive(self, app_dir: Path):
        runner = CliRunner()
        data = _write(app_dir / "product.json", '{"name": "Lamp"}')
        args = ["map", data, "cli_sample_models:Product", "--app-dir", str(app_dir), "--depth", "0"]
        result = runner.invoke(cli, args)
        assert result.exit_code == 2
        assert "Invalid value for '--depth'" in result.output

    def test_invalid_config_is_a_usage_error(self, app_dir: Path):
        runner = CliRunner()
        config = _write(app_dir / "invalid.yaml", "objectmapper:\n  mapper:\n    depth: 0\n")
        data = _write(app_dir / "product.json", '{"name": "Lamp"}')
        args = ["map", data, "cli_sample_models:Product", "--app-dir", str(app_dir), "--config", config]
        result = runner.invoke(cli, args)
        assert result.exit_code == 2
        assert "Configuration validation failed" in result.output
        assert not isinstance(result.exception, ValueError)

    def test_unparseable_config_is_a_usage_error(self, app_dir: Path):
        runner = CliRunner()
        config = _write(app_dir / "broken.yaml", "objectmapper: [unclosed\n")
        data = _write(app_dir / "product.json", '{"name": "Lamp"}')
        args = ["map", data, "cli_sample_models:Product", "--app-dir", str(app_dir), "--config", config]
        result = runner.invoke(cli, args)
        assert result.exit_code == 2

    def test_stdlib_log_backend(self, app_dir: Path):
        runner = CliRunner()
        data = _write(app_dir / "product.json", '{"name": "Lamp"}')
        args = ["--log-backend", "stdlib", "map", data, "cli_sample_models:Product", "--app-dir", str(app_dir)]
        result = runner.invoke(cli, [*args, "--json"])
        assert result.exit_code == 0, result.output
        assert json.loads(result.output)["name"] == "Lamp"

    def test_unknown_log_backend(self):
        result = CliRunner().invoke(cli, ["--log-backend", "loguru", "describe", "x"])
        assert result.exit_code == 2


class TestDescribeCommand:
    def test_describe(self, app_dir: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["describe", "cli_sample_models:Account", "--app-dir", str(app_dir)])
        assert result.exit_code == 0, result.output
        assert "Constructor" in result.output
        assert "Attributes" in result.output
        assert "setBalance" in result.output

    def test_describe_unknown(self, app_dir: Path):
        runner = CliRunner()
        result = runner.invoke(cli, ["describe", "cli_sample_models:Nope", "--app-dir", str(app_dir)])
        assert result.exit_code == 1
