"""create-project-cli scaffolder -- generates project structures.

Five fixed layouts (``basic``, ``web``, ``api``, ``cli``, ``fullstack``) are
registered in :data:`TEMPLATES`.  Each one is a set of Jinja2 templates
under ``templates/<name>/`` plus ``package.json`` manifests and the shared
README.

Quick usage::

    from create_project.scaffolder import TemplateGenerator

    generator = TemplateGenerator()
    specs = generator.build_files("cli", "my-tool", author="Ada")
    generator.generate("/tmp/my-tool", "cli", "my-tool", author="Ada")
"""

from create_project.scaffolder.generator import TemplateGenerator
from create_project.scaffolder.layouts import TEMPLATES
from create_project.scaffolder.models import FileSpec, TemplateLayout
from create_project.scaffolder.readme import render_readme
from create_project.scaffolder.templates import TemplateRenderer

__all__ = [
    "FileSpec",
    "TEMPLATES",
    "TemplateGenerator",
    "TemplateLayout",
    "TemplateRenderer",
    "render_readme",
]
