"""Value types shared by the scaffolder modules."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

Manifest = dict[str, Any]


@dataclass(frozen=True)
class FileSpec:
    """A file to materialise: POSIX path relative to the project root, plus content."""

    path: str
    content: str


@dataclass(frozen=True)
class TemplateLayout:
    """Everything that distinguishes one template from another.

    Source files come from the Jinja2 templates under ``templates/<name>/``.
    ``manifests`` maps ``(project_name, author)`` to the ``package.json``
    records keyed by their relative path.  ``description``,
    ``run_instructions`` and ``structure`` feed the shared README.
    """

    name: str
    description: str
    run_instructions: str
    directories: tuple[str, ...]
    structure: str
    manifests: Callable[[str, str], dict[str, Manifest]]
