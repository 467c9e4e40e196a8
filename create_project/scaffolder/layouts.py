"""The five project layouts and their ``package.json`` manifests.

``TEMPLATES`` is the single dispatch point: the generator looks a layout up
by name and never branches on template names itself.
"""

from __future__ import annotations

from .models import Manifest, TemplateLayout

# ---------------------------------------------------------------------------
# Manifest helpers
# ---------------------------------------------------------------------------


def _manifest(
    name: str,
    description: str,
    main: str,
    scripts: dict[str, str],
    keywords: list[str],
    author: str,
    **extra: object,
) -> Manifest:
    """Build a manifest with the field order ``npm init`` produces."""
    manifest: Manifest = {
        "name": name,
        "version": "1.0.0",
        "description": description,
        "main": main,
    }
    manifest.update(extra)
    manifest.update(
        {
            "scripts": scripts,
            "keywords": keywords,
            "author": author or "",
            "license": "MIT",
        }
    )
    return manifest


def _basic_manifests(project_name: str, author: str) -> dict[str, Manifest]:
    return {
        "package.json": _manifest(
            project_name,
            f"{project_name} - A basic project",
            "src/index.js",
            {
                "start": "node src/index.js",
                "test": 'echo "Error: no test specified" && exit 1',
            },
            [],
            author,
        )
    }


def _web_manifests(project_name: str, author: str) -> dict[str, Manifest]:
    return {
        "package.json": _manifest(
            project_name,
            f"{project_name} - A web application",
            "src/index.html",
            {"start": 'echo "Open src/index.html in your browser"'},
            ["web", "html", "css", "javascript"],
            author,
        )
    }


def _api_manifests(project_name: str, author: str) -> dict[str, Manifest]:
    return {
        "package.json": _manifest(
            project_name,
            f"{project_name} - REST API",
            "src/server.js",
            {"start": "node src/server.js", "dev": "node src/server.js"},
            ["api", "rest", "backend"],
            author,
        )
    }


def _cli_manifests(project_name: str, author: str) -> dict[str, Manifest]:
    return {
        "package.json": _manifest(
            project_name,
            f"{project_name} - Command-line tool",
            "src/cli.js",
            {"start": "node src/cli.js"},
            ["cli", "command-line", "tool"],
            author,
            bin={project_name: "./src/cli.js"},
        )
    }


def _fullstack_manifests(project_name: str, author: str) -> dict[str, Manifest]:
    server_scripts = {"dev": "node server.js", "start": "node server.js"}
    return {
        "frontend/package.json": _manifest(
            f"{project_name}-frontend",
            f"{project_name} - Frontend Application",
            "server.js",
            dict(server_scripts),
            ["frontend", "fullstack"],
            author,
        ),
        "backend/package.json": _manifest(
            f"{project_name}-backend",
            f"{project_name} - Backend API",
            "server.js",
            dict(server_scripts),
            ["backend", "api", "fullstack"],
            author,
        ),
    }


# ---------------------------------------------------------------------------
# Layouts
# ---------------------------------------------------------------------------

BASIC = TemplateLayout(
    name="basic",
    description="A simple project structure with source code and utilities.",
    run_instructions="```bash\nnode src/index.js\n```",
    directories=("src", "utils", "tests"),
    structure=(
        "├── src/\n"
        "│   └── index.js\n"
        "├── utils/\n"
        "│   └── helpers.js\n"
        "├── tests/\n"
        "├── package.json\n"
        "├── .gitignore\n"
        "└── README.md"
    ),
    manifests=_basic_manifests,
)

WEB = TemplateLayout(
    name="web",
    description="A web application with HTML, CSS, and JavaScript.",
    run_instructions=(
        "```bash\n"
        "# Open the page directly\n"
        "open src/index.html\n"
        "```"
    ),
    directories=("src", "src/css", "src/js", "public", "assets"),
    structure=(
        "├── src/\n"
        "│   ├── index.html\n"
        "│   ├── css/\n"
        "│   │   └── style.css\n"
        "│   └── js/\n"
        "│       └── app.js\n"
        "├── public/\n"
        "├── assets/\n"
        "├── package.json\n"
        "├── .gitignore\n"
        "└── README.md"
    ),
    manifests=_web_manifests,
)

API = TemplateLayout(
    name="api",
    description="A REST API server with routes and controllers.",
    run_instructions=(
        "```bash\n"
        "node src/server.js\n"
        "# API will be available at http://localhost:3000\n"
        "```"
    ),
    directories=(
        "src",
        "src/routes",
        "src/controllers",
        "src/models",
        "src/middleware",
        "utils",
        "config",
    ),
    structure=(
        "├── src/\n"
        "│   ├── server.js\n"
        "│   ├── routes/\n"
        "│   │   └── index.js\n"
        "│   ├── controllers/\n"
        "│   │   └── index.js\n"
        "│   ├── models/\n"
        "│   └── middleware/\n"
        "├── config/\n"
        "│   └── config.js\n"
        "├── utils/\n"
        "├── package.json\n"
        "├── .gitignore\n"
        "└── README.md"
    ),
    manifests=_api_manifests,
)

CLI = TemplateLayout(
    name="cli",
    description="A command-line tool for terminal usage.",
    run_instructions="```bash\nnode src/cli.js --help\n```",
    directories=("src", "utils", "commands"),
    structure=(
        "├── src/\n"
        "│   └── cli.js\n"
        "├── commands/\n"
        "│   └── index.js\n"
        "├── utils/\n"
        "├── package.json\n"
        "├── .gitignore\n"
        "└── README.md"
    ),
    manifests=_cli_manifests,
)

FULLSTACK = TemplateLayout(
    name="fullstack",
    description="A full-stack application with a vanilla JavaScript frontend and Node.js backend.",
    run_instructions=(
        "```bash\n"
        "# Terminal 1 - start the backend (http://localhost:5000)\n"
        "cd backend\n"
        "npm run dev\n"
        "\n"
        "# Terminal 2 - start the frontend (http://localhost:3000)\n"
        "cd frontend\n"
        "npm run dev\n"
        "```\n"
        "\n"
        "Then open http://localhost:3000 in your browser."
    ),
    directories=(
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
    ),
    structure=(
        "├── frontend/\n"
        "│   ├── src/\n"
        "│   │   ├── components/\n"
        "│   │   │   └── Header.js\n"
        "│   │   ├── pages/\n"
        "│   │   │   └── UsersPage.js\n"
        "│   │   ├── styles/\n"
        "│   │   │   └── main.css\n"
        "│   │   ├── services/\n"
        "│   │   │   └── api.js\n"
        "│   │   └── App.js\n"
        "│   ├── public/\n"
        "│   │   └── index.html\n"
        "│   ├── server.js\n"
        "│   └── package.json\n"
        "├── backend/\n"
        "│   ├── routes/\n"
        "│   ├── controllers/\n"
        "│   ├── models/\n"
        "│   ├── middleware/\n"
        "│   ├── config/\n"
        "│   ├── server.js\n"
        "│   ├── .env\n"
        "│   └── package.json\n"
        "├── .gitignore\n"
        "└── README.md"
    ),
    manifests=_fullstack_manifests,
)

TEMPLATES: dict[str, TemplateLayout] = {
    layout.name: layout for layout in (WEB, API, CLI, BASIC, FULLSTACK)
}
