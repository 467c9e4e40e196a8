"""Tests for the Jinja2 renderer, the layout registry and README rendering.

Covers:
- TemplateRenderer.render / render_tree
- output_name (``.j2`` suffix and ``dot_`` prefix handling)
- Manifest contents for every layout
- The shared README: structure tree, run instructions, author, date
"""

from __future__ import annotations

import json
from datetime import date
from pathlib import Path

import pytest
from jinja2 import UndefinedError

from create_project.errors import GenerationError
from create_project.scaffolder import TEMPLATES, TemplateRenderer, render_readme
from create_project.scaffolder.templates import output_name

pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def renderer() -> TemplateRenderer:
    return TemplateRenderer()


@pytest.fixture
def tmp_renderer(tmp_path: Path) -> TemplateRenderer:
    """Renderer over a small throwaway template tree."""
    root = tmp_path / "templates"
    (root / "demo" / "src").mkdir(parents=True)
    (root / "demo" / "src" / "main.js.j2").write_text(
        "// {{ project_name }}\n", encoding="utf-8"
    )
    (root / "demo" / "dot_gitignore.j2").write_text("node_modules/\n", encoding="utf-8")
    (root / "demo" / "notes.txt").write_text("not a template", encoding="utf-8")
    return TemplateRenderer(root)


# ---------------------------------------------------------------------------
# output_name
# ---------------------------------------------------------------------------


class TestOutputName:
    @pytest.mark.parametrize(
        "template_path, expected",
        [
            ("src/index.js.j2", "src/index.js"),
            ("dot_gitignore.j2", ".gitignore"),
            ("backend/dot_env.j2", "backend/.env"),
            ("README.md", "README.md"),
            ("src/dot_in_middle_dot_x.js.j2", "src/.in_middle_dot_x.js"),
            ("docs/not_dot_file.md.j2", "docs/not_dot_file.md"),
        ],
    )
    def test_mapping(self, template_path, expected):
        assert output_name(template_path) == expected


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TestTemplateRenderer:
    def test_default_template_dir_exists(self, renderer):
        assert renderer.template_dir.is_dir()
        assert (renderer.template_dir / "README.md.j2").is_file()

    def test_render(self, tmp_renderer):
        assert tmp_renderer.render("demo/src/main.js.j2", {"project_name": "x"}) == "// x\n"

    def test_file_templates_are_not_html_escaped(self, tmp_renderer):
        (tmp_renderer.template_dir / "raw.html.j2").write_text("{{ value }}", encoding="utf-8")
        assert tmp_renderer.render("raw.html.j2", {"value": "<a & b>"}) == "<a & b>"

    def test_undefined_variable_raises(self, tmp_renderer):
        with pytest.raises(UndefinedError):
            tmp_renderer.render("demo/src/main.js.j2", {})

    def test_keeps_trailing_newline(self, tmp_renderer):
        content = tmp_renderer.render("demo/dot_gitignore.j2", {})
        assert content == "node_modules/\n"

    def test_render_tree(self, tmp_renderer):
        specs = tmp_renderer.render_tree("demo", {"project_name": "demo-app"})
        by_path = {spec.path: spec.content for spec in specs}
        assert by_path == {
            ".gitignore": "node_modules/\n",
            "src/main.js": "// demo-app\n",
        }

    def test_render_tree_missing_layout_directory(self, tmp_renderer):
        with pytest.raises(GenerationError, match="Template directory not found"):
            tmp_renderer.render_tree("nope", {})

    @pytest.mark.parametrize("template", sorted(TEMPLATES))
    def test_every_layout_has_a_gitignore(self, renderer, template):
        assert (renderer.template_dir / template / "dot_gitignore.j2").is_file()


# ---------------------------------------------------------------------------
# Manifests
# ---------------------------------------------------------------------------


class TestManifests:
    def test_registry(self):
        assert set(TEMPLATES) == {"basic", "web", "api", "cli", "fullstack"}
        for name, layout in TEMPLATES.items():
            assert layout.name == name

    @pytest.mark.parametrize("template", ["basic", "web", "api", "cli"])
    def test_single_manifest_fields(self, template):
        manifests = TEMPLATES[template].manifests("demo", "Ada")
        assert list(manifests) == ["package.json"]
        manifest = manifests["package.json"]
        assert manifest["name"] == "demo"
        assert manifest["version"] == "1.0.0"
        assert manifest["author"] == "Ada"
        assert manifest["license"] == "MIT"
        assert "start" in manifest["scripts"]

    def test_field_order(self):
        manifest = TEMPLATES["cli"].manifests("demo", "")["package.json"]
        assert list(manifest) == [
            "name",
            "version",
            "description",
            "main",
            "bin",
            "scripts",
            "keywords",
            "author",
            "license",
        ]

    def test_cli_bin_entry(self):
        manifest = TEMPLATES["cli"].manifests("my-tool", "")["package.json"]
        assert manifest["bin"] == {"my-tool": "./src/cli.js"}

    def test_api_scripts(self):
        scripts = TEMPLATES["api"].manifests("demo", "")["package.json"]["scripts"]
        assert scripts == {"start": "node src/server.js", "dev": "node src/server.js"}

    def test_empty_author(self):
        manifest = TEMPLATES["basic"].manifests("demo", "")["package.json"]
        assert manifest["author"] == ""

    def test_fullstack_manifests(self):
        manifests = TEMPLATES["fullstack"].manifests("shop", "Ada")
        assert set(manifests) == {"frontend/package.json", "backend/package.json"}
        assert manifests["frontend/package.json"]["name"] == "shop-frontend"
        assert manifests["backend/package.json"]["name"] == "shop-backend"
        for manifest in manifests.values():
            assert manifest["main"] == "server.js"
            assert manifest["scripts"]["dev"] == "node server.js"

    def test_generated_manifest_is_indented_json(self, generator, fixed_date):
        specs = {s.path: s.content for s in generator.build_files("api", "demo", today=fixed_date)}
        content = specs["package.json"]
        assert content.endswith("}\n")
        assert '\n  "name": "demo",' in content
        assert json.loads(content)["main"] == "src/server.js"


# ---------------------------------------------------------------------------
# README
# ---------------------------------------------------------------------------


class TestReadme:
    def _render(self, template: str, author: str = "") -> str:
        spec = render_readme(
            TemplateRenderer(), TEMPLATES[template], "demo-app", author, date(2026, 10, 18)
        )
        assert spec.path == "README.md"
        return spec.content

    @pytest.mark.parametrize("template", sorted(TEMPLATES))
    def test_common_sections(self, template):
        content = self._render(template)
        assert content.startswith("# demo-app\n")
        assert TEMPLATES[template].description in content
        assert "## Project Structure" in content
        assert "demo-app/\n├──" in content
        assert "### Running the Project" in content
        assert "## License" in content
        assert "*Created on 2026-10-18*" in content

    def test_author_fallback(self):
        assert "## Author\n\nYour Name\n" in self._render("basic")

    def test_author_given(self):
        assert "## Author\n\nAda Lovelace\n" in self._render("basic", "Ada Lovelace")

    def test_fullstack_only_sections(self):
        assert "## API Endpoints" in self._render("fullstack")
        for template in ("basic", "web", "api", "cli"):
            assert "## API Endpoints" not in self._render(template)

    def test_run_instructions(self):
        assert "node src/server.js" in self._render("api")
        assert "node src/cli.js --help" in self._render("cli")
        assert "open src/index.html" in self._render("web")
        assert "npm run dev" in self._render("fullstack")
