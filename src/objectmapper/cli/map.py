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
"""'objectmapper map' — Map a JSON document onto a class and show the result."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, TextIO

import click
import yaml  # type: ignore[import-untyped]
from rich.markup import escape
from rich.table import Table

from objectmapper.cli.console import console, ensure_app_dir_on_path, print_error
from objectmapper.core.config import Config
from objectmapper.kernel.exceptions import ObjectMapperException
from objectmapper.mapping.mapper import ObjectMapper


def instance_attributes(instance: Any) -> dict[str, Any]:
    """Attributes set on *instance*; attributes never initialised are absent."""
    try:
        return dict(vars(instance))
    except TypeError:
        return {}


def _load_mapper(config_path: Path | None) -> ObjectMapper:
    """Build the mapper, reporting unreadable or invalid configuration as a usage error."""
    try:
        config = Config.from_file(config_path) if config_path else Config()
        return ObjectMapper.from_config(config)
    except (ValueError, yaml.YAMLError) as exc:
        raise click.BadParameter(str(exc), param_hint="'--config' or OBJECTMAPPER_* environment") from exc


@click.command()
@click.argument("input_file", type=click.File("r"))
@click.argument("target")
@click.option(
    "--depth", type=click.IntRange(min=1), default=None, help="Maximum nesting depth (default: from config or 512)."
)
@click.option(
    "--flags", type=click.IntRange(min=0), default=None, help="DecodeFlag bitmask (default: from config or 0)."
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="YAML or TOML configuration file.",
)
@click.option("--app-dir", default=".", show_default=True, help="Directory the target is imported from.")
@click.option("--json", "as_json", is_flag=True, help="Print the attributes as JSON.")
def map_command(
    input_file: TextIO,
    target: str,
    depth: int | None,
    flags: int | None,
    config_path: Path | None,
    app_dir: str,
    as_json: bool,
) -> None:
    """Map the JSON object in INPUT_FILE ('-' for stdin) onto TARGET (e.g. 'myapp.models:Product')."""
    ensure_app_dir_on_path(app_dir)
    mapper = _load_mapper(config_path)

    try:
        instance = mapper.from_json(input_file.read(), target, depth=depth, flags=flags)
    except ObjectMapperException as exc:
        print_error(exc)
        raise SystemExit(1) from None

    attributes = instance_attributes(instance)
    if as_json:
        click.echo(json.dumps(attributes, indent=2, default=repr))
        return

    table = Table(title=f"[objectmapper]{type(instance).__qualname__}[/objectmapper]", border_style="dim")
    table.add_column("Attribute", style="info")
    table.add_column("Value")
    table.add_column("Type", style="dim")
    for name, value in attributes.items():
        table.add_row(name, escape(repr(value)), type(value).__name__)
    console.print(table)
