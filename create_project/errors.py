"""Exception types raised while parsing, validating and generating projects.

Every fatal condition derives from :class:`ScaffoldError` so the orchestrator
can report it as ``✗ Error: <message>`` and exit with status 1.
:class:`GitInitError` is the one non-fatal member: the orchestrator catches it
and downgrades it to a warning.
"""

from __future__ import annotations


class ScaffoldError(Exception):
    """Base class for every error the CLI reports to the user."""


# ---------------------------------------------------------------------------
# Argument parsing
# ---------------------------------------------------------------------------


class MissingProjectNameError(ScaffoldError):
    """Raised when no positional project name was supplied."""

    def __init__(self) -> None:
        super().__init__(
            "Project name is required. Usage: create-proj <project-name> [options]"
        )


class MissingFlagValueError(ScaffoldError):
    """Raised when a value flag is last or followed by another flag."""

    def __init__(self, flag: str) -> None:
        self.flag = flag
        super().__init__(f"{flag} flag requires a value")


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class InvalidProjectNameError(ScaffoldError):
    """Raised when the project name contains characters outside ``[A-Za-z0-9_-]``."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            "Project name can only contain letters, numbers, hyphens, and underscores"
        )


class DirectoryExistsError(ScaffoldError):
    """Raised when the target project directory is already present."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            f'Directory "{name}" already exists. Please choose a different name.'
        )


class UnknownTemplateError(ScaffoldError):
    """Raised when the requested template is not registered."""

    def __init__(self, template: str, valid: tuple[str, ...]) -> None:
        self.template = template
        self.valid = valid
        super().__init__(
            f'Invalid template "{template}". Valid templates: {", ".join(valid)}'
        )


# ---------------------------------------------------------------------------
# Generation
# ---------------------------------------------------------------------------


class GenerationError(ScaffoldError):
    """Raised when a layout cannot be materialised on disk."""


class GitInitError(ScaffoldError):
    """Raised when ``git init`` / ``add`` / ``commit`` fails."""

    def __init__(self, step: str, detail: str = "") -> None:
        self.step = step
        self.detail = detail
        message = f"git {step} failed"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
