"""Jinja2 template rendering for project scaffolding.

Provides the TemplateRenderer class which loads Jinja2 templates from the
``create_project/scaffolder/templates/`` directory and renders them with
project-specific context data.  Rendering never touches the target project:
results come back as :class:`FileSpec` values that the generator writes.

Template files end in ``.j2``.  A leading ``dot_`` in a template's file name
stands for ``.`` in the output (``dot_gitignore.j2`` -> ``.gitignore``).
"""

from __future__ import annotations

from pathlib import Path, PurePosixPath
from typing import Any

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from ..errors import GenerationError
from .models import FileSpec

# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"

_TEMPLATE_SUFFIX = ".j2"
_DOTFILE_PREFIX = "dot_"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders Jinja2 templates for project scaffolding.

    The renderer discovers ``.j2`` template files under a configurable
    template directory.  Templates are rendered with a context dictionary that
    typically contains ``project_name``, ``author`` and ``year``.  Undefined
    variables raise instead of rendering as empty strings.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.template_dir)),
            autoescape=select_autoescape([]),
            keep_trailing_newline=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

    # -- Single template rendering -----------------------------------------

    def render(self, template_path: str, context: dict[str, Any]) -> str:
        """Render a single template with the provided context.

        Args:
            template_path: Path relative to the template directory (e.g.
                ``"api/src/server.js.j2"``).
            context: Dictionary of variables available inside the template.

        Returns:
            The rendered template content as a string.
        """
        template = self.env.get_template(template_path)
        return template.render(**context)

    # -- Tree rendering ----------------------------------------------------

    def render_tree(self, template_prefix: str, context: dict[str, Any]) -> list[FileSpec]:
        """Render every ``*.j2`` file under *template_prefix*.

        The directory structure is preserved: a template at
        ``api/src/routes/index.js.j2`` rendered with ``template_prefix="api"``
        becomes ``FileSpec("src/routes/index.js", ...)``.

        Returns:
            One ``FileSpec`` per rendered template, sorted by template path.

        Raises:
            GenerationError: *template_prefix* is not a directory under the
                template root.
        """
        prefix_path = self.template_dir / template_prefix
        if not prefix_path.is_dir():
            raise GenerationError(f"Template directory not found: {prefix_path}")

        specs: list[FileSpec] = []
        for template_file in sorted(prefix_path.rglob(f"*{_TEMPLATE_SUFFIX}")):
            rel = template_file.relative_to(prefix_path).as_posix()
            template_key = f"{template_prefix}/{rel}"
            specs.append(FileSpec(output_name(rel), self.render(template_key, context)))

        return specs


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def output_name(template_rel_path: str) -> str:
    """Map a template path to the path it is written to.

    ``src/index.js.j2`` -> ``src/index.js``; ``backend/dot_env.j2`` ->
    ``backend/.env``.
    """
    path = PurePosixPath(template_rel_path)
    name = path.name
    if name.endswith(_TEMPLATE_SUFFIX):
        name = name[: -len(_TEMPLATE_SUFFIX)]
    if name.startswith(_DOTFILE_PREFIX):
        name = "." + name[len(_DOTFILE_PREFIX):]
    return str(path.with_name(name))
