"""Command-line token parsing.

A single pass over the tokens.  The project name is the first token that
does not start with ``-``; unknown flags are ignored.
"""

from __future__ import annotations

from collections.abc import Sequence

from .config import DEFAULT_TEMPLATE, ProjectConfig
from .errors import MissingFlagValueError, MissingProjectNameError

HELP_FLAGS = frozenset({"--help", "-h"})

_TEMPLATE_FLAGS = ("--template", "-t")
_GIT_FLAGS = ("--git", "-g")
_AUTHOR_FLAGS = ("--author", "-a")


def wants_help(tokens: Sequence[str]) -> bool:
    """Return ``True`` when help should be shown instead of creating a project."""
    return not tokens or any(token in HELP_FLAGS for token in tokens)


def _flag_value(tokens: Sequence[str], index: int, flag: str) -> str:
    if index + 1 >= len(tokens) or not tokens[index + 1] or tokens[index + 1].startswith("-"):
        raise MissingFlagValueError(flag)
    return tokens[index + 1]


def parse_args(tokens: Sequence[str]) -> ProjectConfig:
    """Turn raw command-line tokens into a :class:`ProjectConfig`.

    Raises:
        MissingProjectNameError: No token without a leading ``-`` was found.
        MissingFlagValueError: ``--template`` or ``--author`` has no value.
    """
    project_name = next((token for token in tokens if not token.startswith("-")), None)
    if not project_name:
        raise MissingProjectNameError()

    template = DEFAULT_TEMPLATE
    git_init = False
    author = ""

    i = 0
    while i < len(tokens):
        token = tokens[i]
        if token in _TEMPLATE_FLAGS:
            template = _flag_value(tokens, i, "--template").lower()
            i += 1
        elif token in _GIT_FLAGS:
            git_init = True
        elif token in _AUTHOR_FLAGS:
            author = _flag_value(tokens, i, "--author")
            i += 1
        i += 1

    return ProjectConfig(
        project_name=project_name,
        template=template,
        git_init=git_init,
        author=author,
    )
