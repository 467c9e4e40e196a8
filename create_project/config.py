"""create-project-cli configuration.

Typed models for the per-invocation project description (``ProjectConfig``)
and for the tool's own settings (``Config``).  Both use Pydantic v2 so values
are checked at construction time.  Project-name and template rules live in
the orchestrator, which checks name, directory and template in that order.
"""

from __future__ import annotations

import re
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

TEMPLATE_NAMES: tuple[str, ...] = ("web", "api", "cli", "basic", "fullstack")
DEFAULT_TEMPLATE = "basic"

PROJECT_NAME_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")

DEFAULT_COMMIT_MESSAGE = "Initial commit: Project scaffolded by create-project-cli"


class ProjectConfig(BaseModel):
    """What the user asked for on the command line.

    Built once by :func:`create_project.arguments.parse_args` and never
    mutated afterwards.
    """

    model_config = ConfigDict(frozen=True)

    project_name: str = Field(..., min_length=1, description="Directory and package name")
    template: str = Field(default=DEFAULT_TEMPLATE, description="Layout to generate")
    git_init: bool = Field(default=False, description="Run git init + initial commit")
    author: str = Field(default="", description="Author written into manifests and README")


class Config(BaseModel):
    """Settings for one run of the tool.

    ``base_dir`` is where new projects are created; it defaults to the
    current working directory at construction time.
    """

    base_dir: Path = Field(default_factory=Path.cwd)
    git_executable: str = Field(default="git")
    commit_message: str = Field(default=DEFAULT_COMMIT_MESSAGE)
    git_timeout: int = Field(default=60, ge=1, description="Per git step timeout in seconds")
    template_dir: Path | None = Field(
        default=None, description="Override for the Jinja2 template root"
    )
