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
"""ObjectMapper CLI — map JSON documents onto classes from the shell."""

from __future__ import annotations

import click

from objectmapper.core.config import Config
from objectmapper.logging import backend_names, configure_logging


@click.group()
@click.version_option(package_name="objectmapper")
@click.option("--log-level", default="WARNING", show_default=True, help="Root log level.")
@click.option("--log-format", type=click.Choice(["console", "json"]), default="console", show_default=True)
@click.option(
    "--log-backend",
    type=click.Choice(backend_names()),
    default="structlog",
    show_default=True,
    help="Where mapping events go: rendered by structlog, or handed to stdlib logging handlers.",
)
def cli(log_level: str, log_format: str, log_backend: str) -> None:
    """ObjectMapper — map JSON onto Python classes."""
    config = Config({
        "objectmapper": {
            "logging": {"backend": log_backend, "format": log_format, "level": {"root": log_level}},
        }
    })
    configure_logging(config)


# Import and register commands
from objectmapper.cli.describe import describe_command  # noqa: E402
from objectmapper.cli.map import map_command  # noqa: E402

cli.add_command(map_command, name="map")
cli.add_command(describe_command, name="describe")
