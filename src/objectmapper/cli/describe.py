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
"""'objectmapper describe' — Show how input keys map onto a class."""

from __future__ import annotations

import click
from rich.markup import escape
from rich.table import Table

from objectmapper.cli.console import console, ensure_app_dir_on_path, print_error
from objectmapper.kernel.exceptions import ObjectMapperException
from objectmapper.mapping.binder import Binder
from objectmapper.metadata.descriptor import NO_DEFAULT, TypeDescriptor
from objectmapper.metadata.introspection import TypeIntrospector, resolve_target


def _parameter_table(descriptor: TypeDescriptor) -> Table:
    table = Table(title="Constructor", border_style="dim")
    table.add_column("Parameter", style="info")
    table.add_column("Input key")
    table.add_column("Type")
    table.add_column("Default", style="dim")
    for param in descriptor.parameters:
        try:
            key = Binder.resolution_name(descriptor, param)
        except ObjectMapperException as exc:
            key = f"[error]{escape(exc.message)}[/error]"
        if param.default_factory is not None:
            default = f"{getattr(param.default_factory, '__name__', 'factory')}()"
        elif param.default is NO_DEFAULT:
            default = "required"
        else:
            default = repr(param.default)
        table.add_row(param.name, key, escape(str(param.constraint)), escape(default))
    return table


def _property_table(descriptor: TypeDescriptor) -> Table:
    table = Table(title="Attributes", border_style="dim")
    table.add_column("Attribute", style="info")
    table.add_column("Input key")
    table.add_column("Type")
    table.add_column("Setter", style="dim")
    for prop in descriptor.properties:
        setter = descriptor.find_setter(prop)
        if setter is None or setter.parameter_count < 1:
            setter_desc = "-"
        else:
            setter_desc = f"{setter.name}({setter.parameters[0]})"
        table.add_row(prop.name, prop.resolution_name, escape(str(prop.constraint)), escape(setter_desc))
    return table


@click.command()
@click.argument("target")
@click.option("--app-dir", default=".", show_default=True, help="Directory the target is imported from.")
def describe_command(target: str, app_dir: str) -> None:
    """Show the constructor parameters, attributes and setters of TARGET."""
    ensure_app_dir_on_path(app_dir)
    try:
        descriptor = TypeIntrospector().describe(resolve_target(target))
    except ObjectMapperException as exc:
        print_error(exc)
        raise SystemExit(1) from None

    console.print(f"\n[objectmapper]{descriptor.type_name}[/objectmapper]\n")
    console.print(_parameter_table(descriptor))
    console.print(_property_table(descriptor))
