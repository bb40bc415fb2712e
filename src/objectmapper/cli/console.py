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
"""Shared Rich console for CLI output."""

from __future__ import annotations

import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.theme import Theme

from objectmapper.kernel.exceptions import ObjectMapperException

OBJECTMAPPER_THEME = Theme({
    "info": "cyan",
    "success": "bold green",
    "warning": "bold yellow",
    "error": "bold red",
    "objectmapper": "bold magenta",
    "dim": "dim",
})

console = Console(theme=OBJECTMAPPER_THEME)


def print_error(exc: ObjectMapperException) -> None:
    """Print a mapping error with its code and context."""
    console.print(f"[error]{escape(exc.message)}[/error]", markup=True, highlight=False)
    if exc.code is not None:
        console.print(f"  [dim]code:[/dim] {exc.code}", highlight=False)
    for key, value in exc.context.items():
        console.print(f"  [dim]{key}:[/dim] {escape(str(value))}", highlight=False)


def ensure_app_dir_on_path(app_dir: str) -> None:
    """Make target classes importable from *app_dir* and its ``src/`` layout.

    This allows mapping onto a project's classes without ``pip install -e .``
    first, mirroring how ``uvicorn --app-dir src`` works.
    """
    base = Path(app_dir).resolve()
    for candidate in (base / "src", base):
        candidate_str = str(candidate)
        if candidate.is_dir() and candidate_str not in sys.path:
            sys.path.insert(0, candidate_str)
