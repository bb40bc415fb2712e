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
"""Configuration properties for the mapper and its logging."""

from __future__ import annotations

from pydantic import BaseModel, Field

from objectmapper.core.config import config_properties


@config_properties(prefix="objectmapper.mapper")
class MapperProperties(BaseModel):
    """Defaults applied by ObjectMapper when a call does not override them."""

    depth: int = Field(default=512, ge=1)
    decode_flags: int = Field(default=0, ge=0)


@config_properties(prefix="objectmapper.logging")
class LoggingProperties(BaseModel):
    """Logging output settings.

    ``backend`` names a registered LoggingPort (``structlog`` or ``stdlib``);
    ``level`` maps logger names to levels; the ``root`` key sets the root level.
    """

    backend: str = "structlog"
    format: str = Field(default="console", pattern="^(console|json)$")
    level: dict[str, str] = Field(default_factory=lambda: {"root": "INFO"})
