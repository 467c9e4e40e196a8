"""create-project-cli orchestrator.

Runs one invocation end to end:

Start -> help? -> Parse -> Validate -> CreateDirectory -> GenerateFiles
      -> (git? -> InitGit, best effort) -> PrintSuccess

Any :class:`ScaffoldError` before the git step prints ``✗ Error: <message>``
on stderr and yields exit code 1.  A failed git step only prints a warning.

Usage::

    create-proj my-app --template api --git --author "Ada Lovelace"
    python -m create_project my-app -t cli
"""

from __future__ import annotations

import shutil
import sys
import tempfile
from collections.abc import Sequence
from pathlib import Path

from create_project.arguments import parse_args, wants_help
from create_project.config import PROJECT_NAME_PATTERN, TEMPLATE_NAMES, Config, ProjectConfig
from create_project.errors import (
    DirectoryExistsError,
    GenerationError,
    GitInitError,
    InvalidProjectNameError,
    ScaffoldError,
    UnknownTemplateError,
)
from create_project.scaffolder import TemplateGenerator, TemplateRenderer
from create_project.utils import (
    print_error,
    print_info,
    print_plain,
    print_success,
    print_warning,
    run_command,
)

HELP_TEXT = """
╔═══════════════════════════════════════════════════════════════╗
║               CREATE-PROJECT-CLI v1.0.0                       ║
║  Quickly scaffold new projects with pre-configured templates  ║
╚═══════════════════════════════════════════════════════════════╝

USAGE:
  create-proj <project-name> [options]

OPTIONS:
  --template, -t <type>    Project template type (default: basic)
                           Options: web, api, cli, basic, fullstack

  --git, -g                Initialize Git repository

  --author, -a <name>      Author name for package.json

  --help, -h               Show this help message

EXAMPLES:
  # Create a basic project
  create-proj my-app

  # Create a web project with Git initialization
  create-proj my-website --template web --git

  # Create an API project with author info
  create-proj my-api -t api -g -a "John Doe"

TEMPLATES:
  basic     - Simple project with src/, utils/, and README
  web       - Web project with HTML/CSS/JS structure
  api       - REST API project structure with routes/controllers
  cli       - Command-line tool structure
  fullstack - Full-stack app with a vanilla JS frontend & Node.js backend
"""

# Templates whose next steps are ``npm install`` / ``npm start``.
_NPM_TEMPLATES = frozenset({"web", "api"})


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


def validate_config(project: ProjectConfig, base_dir: Path) -> Path:
    """Check *project* against the filesystem and return its target path.

    Checks run in a fixed order and the first failure is raised: name
    pattern, then directory existence, then template membership.
    """
    if not PROJECT_NAME_PATTERN.fullmatch(project.project_name):
        raise InvalidProjectNameError(project.project_name)

    target = base_dir / project.project_name
    if target.exists():
        raise DirectoryExistsError(project.project_name)

    if project.template not in TEMPLATE_NAMES:
        raise UnknownTemplateError(project.template, TEMPLATE_NAMES)

    return target


# ---------------------------------------------------------------------------
# Git
# ---------------------------------------------------------------------------


def init_git(project_path: Path, config: Config) -> None:
    """Initialise a repository in *project_path* and commit everything.

    The commands run with ``cwd=project_path``; the current process never
    changes directory.

    Raises:
        GitInitError: git is missing or one of init / add / commit failed.
    """
    steps = [
        ("init", [config.git_executable, "init"]),
        ("add", [config.git_executable, "add", "."]),
        ("commit", [config.git_executable, "commit", "-m", config.commit_message]),
    ]
    for step, cmd in steps:
        try:
            returncode, _, stderr = run_command(cmd, cwd=project_path, timeout=config.git_timeout)
        except OSError as exc:
            raise GitInitError(step, str(exc)) from exc
        if returncode != 0:
            raise GitInitError(step, stderr)


# ---------------------------------------------------------------------------
# Orchestrator
# ---------------------------------------------------------------------------


class ProjectCreator:
    """Drives a single ``create-proj`` invocation.

    Attributes:
        config: Tool settings (base directory, git options).
        generator: Template generator used to write the project files.
    """

    def __init__(
        self,
        config: Config | None = None,
        generator: TemplateGenerator | None = None,
    ) -> None:
        self.config = config or Config()
        self.generator = generator or TemplateGenerator(
            TemplateRenderer(self.config.template_dir)
        )

    def run(self, argv: Sequence[str]) -> int:
        """Run the whole workflow for *argv* and return the exit code."""
        if wants_help(argv):
            print_plain(HELP_TEXT)
            return 0

        try:
            project = parse_args(argv)
            target = validate_config(project, self.config.base_dir)
            self.create_project(project, target)
        except ScaffoldError as exc:
            print_error(f"\n✗ Error: {exc}")
            return 1

        self._print_next_steps(project)
        return 0

    def create_project(self, project: ProjectConfig, target: Path) -> Path:
        """Generate *project* at *target*, then optionally initialise git.

        Files are generated into a staging directory next to *target* and
        moved into place only once every write succeeded, so a failure
        leaves nothing behind.
        """
        print_info(f"\nCreating {project.template} project: {project.project_name}...")

        self._generate_staged(project, target)

        if project.git_init:
            self._init_git(target)

        print_success("✓ Project structure created")

        return target

    # -- Internals ---------------------------------------------------------

    def _generate_staged(self, project: ProjectConfig, target: Path) -> None:
        try:
            staging = Path(tempfile.mkdtemp(prefix=f".{project.project_name}-", dir=target.parent))
        except OSError as exc:
            raise GenerationError(f"Could not create project directory: {exc}") from exc

        try:
            staged_root = staging / project.project_name
            try:
                staged_root.mkdir()
            except OSError as exc:
                raise GenerationError(f"Could not create project directory: {exc}") from exc

            self.generator.generate(
                staged_root,
                project.template,
                project.project_name,
                author=project.author,
            )

            # The target may have appeared since validation.
            if target.exists():
                raise DirectoryExistsError(project.project_name)
            try:
                staged_root.rename(target)
            except OSError as exc:
                raise GenerationError(f"Could not move project into place: {exc}") from exc
        finally:
            shutil.rmtree(staging, ignore_errors=True)

    def _init_git(self, target: Path) -> None:
        print_info("Initializing Git repository...")
        try:
            init_git(target, self.config)
        except GitInitError:
            print_warning("⚠ Git initialization failed. Make sure Git is installed.")
            return
        print_success("✓ Git repository initialized")

    def _print_next_steps(self, project: ProjectConfig) -> None:
        print_success(f'\n✓ Project "{project.project_name}" created successfully!')
        print_info("\nNext steps:")
        print_info(f"  cd {project.project_name}")
        if project.template in _NPM_TEMPLATES:
            print_info("  npm install")
            print_info("  npm start")
        else:
            print_info("  Start coding!")


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------


def main(argv: Sequence[str] | None = None) -> None:
    """CLI entry point for ``create-proj`` and ``python -m create_project``."""
    args = list(sys.argv[1:] if argv is None else argv)
    sys.exit(ProjectCreator().run(args))


if __name__ == "__main__":
    main()
