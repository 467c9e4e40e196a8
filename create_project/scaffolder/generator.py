"""Template generator.

Maps ``(template, project_name, author, date)`` to a deterministic list of
:class:`FileSpec` values and writes them under a project root.  Building the
file list is pure; only :meth:`TemplateGenerator.generate` touches disk.
"""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path, PurePosixPath
from typing import Any

from ..errors import GenerationError, UnknownTemplateError
from .layouts import TEMPLATES
from .models import FileSpec, TemplateLayout
from .readme import render_readme
from .templates import TemplateRenderer


class TemplateGenerator:
    """Generates one of the registered project layouts.

    Usage::

        generator = TemplateGenerator()
        generator.generate(Path("demo-app"), "api", "demo-app", author="Ada")
    """

    def __init__(self, renderer: TemplateRenderer | None = None) -> None:
        self.renderer = renderer or TemplateRenderer()

    # -- Public API --------------------------------------------------------

    def layout(self, template: str) -> TemplateLayout:
        """Return the registered layout called *template*."""
        try:
            return TEMPLATES[template]
        except KeyError:
            raise UnknownTemplateError(template, tuple(TEMPLATES)) from None

    def build_files(
        self,
        template: str,
        project_name: str,
        author: str = "",
        today: date | None = None,
    ) -> list[FileSpec]:
        """Return every file *template* produces, README and manifests included.

        Raises:
            UnknownTemplateError: *template* is not registered.
            GenerationError: Two files share a path or a path escapes the root.
        """
        layout = self.layout(template)
        today = today or date.today()
        context = _build_context(project_name, author, today)

        specs = self.renderer.render_tree(layout.name, context)
        for path, manifest in layout.manifests(project_name, author).items():
            specs.append(FileSpec(path, _dump_manifest(manifest)))
        specs.append(render_readme(self.renderer, layout, project_name, author, today))

        _check_specs(specs)
        return specs

    def generate(
        self,
        root_path: str | Path,
        template: str,
        project_name: str,
        author: str = "",
        today: date | None = None,
    ) -> list[Path]:
        """Create the layout's directories, then write its files under *root_path*.

        Writes happen in order and are not rolled back: if one fails, files
        written before it stay on disk.  Callers that need all-or-nothing
        behaviour generate into a staging directory.

        Returns:
            The written file paths, in write order.

        Raises:
            GenerationError: A directory or file could not be written.
        """
        root = Path(root_path)
        layout = self.layout(template)
        specs = self.build_files(template, project_name, author, today)

        try:
            for directory in layout.directories:
                (root / directory).mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise GenerationError(f"Could not create {directory}: {exc}") from exc

        written: list[Path] = []
        for spec in specs:
            destination = root / spec.path
            try:
                destination.parent.mkdir(parents=True, exist_ok=True)
                destination.write_text(spec.content, encoding="utf-8")
            except OSError as exc:
                raise GenerationError(f"Could not write {spec.path}: {exc}") from exc
            written.append(destination)

        return written


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _build_context(project_name: str, author: str, today: date) -> dict[str, Any]:
    """Build the Jinja2 template context shared by every source template."""
    return {
        "project_name": project_name,
        "author": author,
        "year": today.year,
    }


def _dump_manifest(manifest: dict[str, Any]) -> str:
    return json.dumps(manifest, indent=2, ensure_ascii=False) + "\n"


def _check_specs(specs: list[FileSpec]) -> None:
    """Reject duplicate paths and paths that would leave the project root."""
    seen: set[str] = set()
    for spec in specs:
        path = PurePosixPath(spec.path)
        if path.is_absolute() or ".." in path.parts or not path.parts:
            raise GenerationError(f"Refusing to write outside the project root: {spec.path}")
        key = path.as_posix()
        if key in seen:
            raise GenerationError(f"Duplicate file in layout: {spec.path}")
        seen.add(key)
