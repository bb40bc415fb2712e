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
"""LoggingPort and the selection of a logging backend."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol, runtime_checkable

from objectmapper.core.config import Config


@runtime_checkable
class LoggingPort(Protocol):
    """A logging backend the mapper's structlog events can be routed through."""

    def configure(self, config: Config) -> None: ...
    def get_logger(self, name: str) -> Any: ...
    def set_level(self, name: str, level: str) -> None: ...


_BACKENDS: dict[str, Callable[[], LoggingPort]] = {}


def register_backend(name: str, factory: Callable[[], LoggingPort]) -> None:
    """Make *factory* selectable as ``objectmapper.logging.backend: <name>``."""
    _BACKENDS[name] = factory


def backend_names() -> list[str]:
    return sorted(_BACKENDS)


def create_backend(name: str) -> LoggingPort:
    """Instantiate the backend registered as *name*.

    Raises:
        ValueError: If no backend is registered under *name*.
    """
    try:
        factory = _BACKENDS[name]
    except KeyError:
        raise ValueError(f"Unknown logging backend '{name}' (available: {', '.join(backend_names())})") from None
    return factory()
