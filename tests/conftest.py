"""Shared pytest fixtures for the create-project-cli test suite.

Provides reusable fixtures for:
- A base directory to create projects in
- A ``Config`` / ``ProjectCreator`` pointed at that directory
- A generator and a fixed creation date for deterministic output
- Expected directory and file sets per template
"""

from __future__ import annotations

import shutil
from datetime import date
from pathlib import Path

import pytest

from create_project.config import Config
from create_project.pipeline import ProjectCreator
from create_project.scaffolder import TemplateGenerator


# ---------------------------------------------------------------------------
# Paths & configuration
# ---------------------------------------------------------------------------


@pytest.fixture
def base_dir(tmp_path: Path) -> Path:
    """Directory new projects are created in (auto-cleanup)."""
    workspace = tmp_path / "workspace"
    workspace.mkdir()
    return workspace


@pytest.fixture
def config(base_dir: Path) -> Config:
    return Config(base_dir=base_dir)


@pytest.fixture
def creator(config: Config) -> ProjectCreator:
    return ProjectCreator(config)


@pytest.fixture
def generator() -> TemplateGenerator:
    return TemplateGenerator()


@pytest.fixture
def fixed_date() -> date:
    return date(2026, 10, 18)


@pytest.fixture
def git_available() -> bool:
    return shutil.which("git") is not None


# ---------------------------------------------------------------------------
# Expected layouts
# ---------------------------------------------------------------------------

EXPECTED_DIRECTORIES: dict[str, set[str]] = {
    "basic": {"src", "utils", "tests"},
    "web": {"src", "src/css", "src/js", "public", "assets"},
    "api": {
        "src",
        "src/routes",
        "src/controllers",
        "src/models",
        "src/middleware",
        "utils",
        "config",
    },
    "cli": {"src", "utils", "commands"},
    "fullstack": {
        "frontend",
        "frontend/src",
        "frontend/src/components",
        "frontend/src/pages",
        "frontend/src/styles",
        "frontend/src/services",
        "frontend/public",
        "backend",
        "backend/routes",
        "backend/controllers",
        "backend/models",
        "backend/middleware",
        "backend/config",
    },
}

EXPECTED_FILES: dict[str, set[str]] = {
    "basic": {
        "src/index.js",
        "utils/helpers.js",
        "package.json",
        ".gitignore",
        "README.md",
    },
    "web": {
        "src/index.html",
        "src/css/style.css",
        "src/js/app.js",
        "package.json",
        ".gitignore",
        "README.md",
    },
    "api": {
        "src/server.js",
        "src/routes/index.js",
        "src/controllers/index.js",
        "config/config.js",
        "package.json",
        ".gitignore",
        "README.md",
    },
    "cli": {
        "src/cli.js",
        "commands/index.js",
        "package.json",
        ".gitignore",
        "README.md",
    },
    "fullstack": {
        "frontend/package.json",
        "frontend/server.js",
        "frontend/public/index.html",
        "frontend/src/App.js",
        "frontend/src/services/api.js",
        "frontend/src/components/Header.js",
        "frontend/src/pages/UsersPage.js",
        "frontend/src/styles/main.css",
        "backend/package.json",
        "backend/server.js",
        "backend/.env",
        "backend/routes/index.js",
        "backend/controllers/userController.js",
        "backend/models/User.js",
        "backend/config/db.js",
        "README.md",
        ".gitignore",
    },
}


def tree_snapshot(root: Path) -> tuple[set[str], set[str]]:
    """Return ``(directories, files)`` under *root* as POSIX relative paths."""
    directories: set[str] = set()
    files: set[str] = set()
    for path in root.rglob("*"):
        rel = path.relative_to(root).as_posix()
        if rel == ".git" or rel.startswith(".git/"):
            continue
        if path.is_dir():
            directories.add(rel)
        else:
            files.add(rel)
    return directories, files


@pytest.fixture
def expected_directories() -> dict[str, set[str]]:
    return EXPECTED_DIRECTORIES


@pytest.fixture
def expected_files() -> dict[str, set[str]]:
    return EXPECTED_FILES


@pytest.fixture
def snapshot():
    """The :func:`tree_snapshot` helper, for tests that inspect generated trees."""
    return tree_snapshot
