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
"""ObjectMapper Logging — structlog events routed through a selectable backend.

The mapper itself only ever calls ``structlog.get_logger``; until the host
configures structlog, structlog's defaults print every event, debug ones
included, to stdout. Call :func:`configure_logging` (or configure structlog
yourself) to choose levels, format and backend.
"""

from objectmapper.core.config import Config
from objectmapper.core.properties import LoggingProperties
from objectmapper.logging.port import LoggingPort, backend_names, create_backend, register_backend
from objectmapper.logging.stdlib_adapter import StdlibLoggingAdapter
from objectmapper.logging.structlog_adapter import StructlogAdapter

register_backend("structlog", StructlogAdapter)
register_backend("stdlib", StdlibLoggingAdapter)


def configure_logging(config: Config | None = None) -> LoggingPort:
    """Configure the backend named by ``objectmapper.logging.backend`` and return it."""
    config = config or Config()
    adapter = create_backend(config.bind(LoggingProperties).backend)
    adapter.configure(config)
    return adapter


__all__ = [
    "LoggingPort",
    "StdlibLoggingAdapter",
    "StructlogAdapter",
    "backend_names",
    "configure_logging",
    "create_backend",
    "register_backend",
]
