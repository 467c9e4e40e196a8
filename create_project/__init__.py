"""create-project-cli: scaffold new projects from pre-configured templates."""

from create_project.config import TEMPLATE_NAMES, Config, ProjectConfig
from create_project.pipeline import ProjectCreator, main

__all__ = [
    "TEMPLATE_NAMES",
    "Config",
    "ProjectConfig",
    "ProjectCreator",
    "main",
]

__version__ = "1.0.0"
