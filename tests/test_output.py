"""Tests for output formatting."""

import json
from pathlib import Path

import pytest

from ddev_explain.models import Command
from ddev_explain.models import Database
from ddev_explain.models import DevPath
from ddev_explain.models import DevPathKind
from ddev_explain.models import OutputFormat
from ddev_explain.models import Project
from ddev_explain.models import Service
from ddev_explain.output import format_json
from ddev_explain.output import format_markdown
from ddev_explain.output import format_text
from ddev_explain.output import render
from ddev_explain.output import render_all


@pytest.fixture
def project():
    root = Path("/srv/site")
    return Project(
        name="site",
        path=root,
        type="typo3",
        php_version="8.2",
        webserver="nginx-fpm",
        database=Database(type="mariadb", version="10.11"),
        urls=["https://site.ddev.site"],
        nodejs="20",
        services=[Service(name="solr", type="solr")],
        dev_paths=[
            DevPath(
                path=root / "packages" / "my-ext",
                kind=DevPathKind.PACKAGE_REFERENCE,
                source="composer.json",
                packages=("my-ext",),
            ),
            DevPath(
                path=Path("/srv/shared"),
                kind=DevPathKind.MOUNT,
                source="docker-compose.shared.yaml",
                mount_target="/var/www/shared",
            ),
        ],
        commands=[
            Command(
                name="deploy",
                description="Deploy the site",
                path=root / ".ddev" / "commands" / "host" / "deploy",
                location="host",
            )
        ],
        hooks={"post-start": ["composer install", "(host) echo hi"]},
    )


class TestFormatText:
    """Tests for format_text()."""

    def test_includes_configuration(self, project):
        """Test that the basic settings are listed."""
        output = format_text(project)

        assert "DDEV Project: site" in output
        assert "typo3" in output
        assert "mariadb 10.11" in output
        assert "https://site.ddev.site" in output

    def test_includes_dev_paths_with_tags(self, project):
        """Test that development paths are tagged by kind."""
        output = format_text(project)

        assert "[pkg] /srv/site/packages/my-ext" in output
        assert "Type: package-reference | Source: composer.json" in output
        assert "Packages: my-ext" in output
        assert "[mnt] /srv/shared" in output
        assert "Target: /var/www/shared" in output

    def test_commands_and_hooks_only_when_verbose(self, project):
        """Test that verbose mode adds commands and hooks."""
        quiet = format_text(project)
        verbose = format_text(project, verbose=True)

        assert "Custom Commands" not in quiet
        assert "Hooks" not in quiet
        assert "* deploy (host) - Deploy the site" in verbose
        assert "    - (host) echo hi" in verbose

    def test_omits_empty_sections(self):
        """Test that a bare project has no section headings."""
        output = format_text(Project(name="bare", path=Path("/srv/bare")))

        assert "Development Paths" not in output
        assert "Services" not in output
        assert "Node.js" not in output


class TestFormatMarkdown:
    """Tests for format_markdown()."""

    def test_structure(self, project):
        """Test headings, table and dev path entries."""
        output = format_markdown(project)

        assert output.startswith("# DDEV Project: site")
        assert "| PHP | 8.2 |" in output
        assert "| Database | mariadb 10.11 |" in output
        assert "### `/srv/site/packages/my-ext`" in output
        assert "- **Mount target:** `/var/www/shared`" in output
        assert "- **solr** (solr)" in output

    def test_verbose_sections(self, project):
        """Test that verbose mode adds commands and hooks."""
        output = format_markdown(project, verbose=True)

        assert "- `deploy` - Deploy the site" in output
        assert "  - `composer install`" in output


class TestFormatJson:
    """Tests for format_json()."""

    def test_is_valid_json(self, project):
        """Test that the output parses back to the project dict."""
        data = json.loads(format_json(project))

        assert data == project.to_dict()
        assert data["dev_paths"][1]["mount_target"] == "/var/www/shared"


class TestRender:
    """Tests for render() and render_all()."""

    def test_dev_paths_only_json(self, project):
        """Test that --dev-paths JSON is a list of dev paths."""
        data = json.loads(render(project, OutputFormat.JSON, dev_paths_only=True))

        assert [d["type"] for d in data] == ["package-reference", "mount"]

    def test_dev_paths_only_text(self, project):
        """Test that --dev-paths text omits the configuration."""
        output = render(project, OutputFormat.TEXT, dev_paths_only=True)

        assert "[pkg] /srv/site/packages/my-ext" in output
        assert "PHP" not in output

    def test_dev_paths_only_markdown(self, project):
        """Test that --dev-paths Markdown is just the dev path section."""
        output = render(project, OutputFormat.MARKDOWN, dev_paths_only=True)

        assert output.startswith("## Development Paths")
        assert "Configuration" not in output

    def test_render_all_json_is_one_document(self, project):
        """Test that several projects render as one JSON array."""
        data = json.loads(render_all([project, project], OutputFormat.JSON))

        assert [p["name"] for p in data] == ["site", "site"]

    def test_render_all_text(self, project):
        """Test that text summaries are concatenated."""
        output = render_all([project, project], OutputFormat.TEXT)

        assert output.count("DDEV Project: site") == 2
