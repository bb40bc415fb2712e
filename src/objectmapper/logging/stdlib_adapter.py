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
"""StdlibLoggingAdapter — mapper events as plain stdlib log records.

structlog still collects the events, but instead of rendering them it hands
the event name to ``logging`` as the message and the key/value context as
record attributes, so hosts with their own ``logging`` handlers receive
ordinary records they can filter and format.
"""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import MutableMapping
from typing import Any

import structlog

from objectmapper.core.config import Config
from objectmapper.core.properties import LoggingProperties

_RECORD_ATTRIBUTES = frozenset(logging.LogRecord("", 0, "", 0, "", (), None).__dict__) | {"message", "asctime"}


def record_fields(record: logging.LogRecord) -> dict[str, Any]:
    """Event context carried by *record*, i.e. its non-standard attributes."""
    return {key: value for key, value in record.__dict__.items() if key not in _RECORD_ATTRIBUTES}


def _event_to_record(logger: Any, method_name: str, event_dict: MutableMapping[str, Any]) -> dict[str, Any]:
    event = event_dict.pop("event")
    return {"msg": event, "extra": dict(event_dict)}


class EventFormatter(logging.Formatter):
    """Formats records as ``time [LEVEL] logger: event | k=v`` or one JSON object per line."""

    def __init__(self, output: str = "console") -> None:
        super().__init__("%(asctime)s [%(levelname)s] %(name)s: %(message)s")
        self._output = output

    def format(self, record: logging.LogRecord) -> str:
        fields = record_fields(record)
        if self._output == "json":
            payload = {
                "timestamp": self.formatTime(record),
                "level": record.levelname,
                "logger": record.name,
                "event": record.getMessage(),
                **fields,
            }
            return json.dumps(payload, default=repr)
        line = super().format(record)
        if fields:
            line += " | " + " ".join(f"{key}={value}" for key, value in fields.items())
        return line


class StdlibLoggingAdapter:
    """LoggingPort delivering mapper events to stdlib ``logging`` handlers."""

    def __init__(self) -> None:
        self._root_level: str = "INFO"
        self._format: str = "console"
        self._module_levels: dict[str, str] = {}

    def configure(self, config: Config) -> None:
        """Configure from the ``objectmapper.logging`` section of config."""
        properties = config.bind(LoggingProperties)
        levels = dict(properties.level)
        self._root_level = str(levels.pop("root", "INFO")).upper()
        self._module_levels = {k: str(v).upper() for k, v in levels.items()}
        self._format = properties.format

        structlog.configure(
            processors=[structlog.contextvars.merge_contextvars, _event_to_record],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=False,
        )

        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(EventFormatter(self._format))
        logging.basicConfig(
            handlers=[handler],
            level=getattr(logging, self._root_level, logging.INFO),
            force=True,
        )

        for module, level in self._module_levels.items():
            self.set_level(module, level)

    def get_logger(self, name: str) -> Any:
        return structlog.get_logger(name)

    def set_level(self, name: str, level: str) -> None:
        logging.getLogger(name).setLevel(getattr(logging, level.upper(), logging.INFO))
