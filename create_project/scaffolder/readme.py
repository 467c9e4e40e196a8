"""README generation shared by every template."""

from __future__ import annotations

from datetime import date

from .models import FileSpec, TemplateLayout
from .templates import TemplateRenderer

README_TEMPLATE = "README.md.j2"


def render_readme(
    renderer: TemplateRenderer,
    layout: TemplateLayout,
    project_name: str,
    author: str,
    today: date,
) -> FileSpec:
    """Render ``README.md`` for *layout*.

    The layout contributes its one-line description, run instructions and
    directory tree; the tree is rooted at *project_name*.
    """
    context = {
        "project_name": project_name,
        "author": author,
        "template": layout.name,
        "description": layout.description,
        "run_instructions": layout.run_instructions,
        "structure": f"{project_name}/\n{layout.structure}",
        "created": today.isoformat(),
    }
    return FileSpec("README.md", renderer.render(README_TEMPLATE, context))
