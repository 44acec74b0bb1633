"""Output formatting for project summaries."""

import json
from pathlib import Path

import typer

from ddev_explain.models import DevPath
from ddev_explain.models import DevPathKind
from ddev_explain.models import OutputFormat
from ddev_explain.models import Project

RULE = "-" * 50

KIND_TAGS = {
    DevPathKind.PACKAGE_REFERENCE: "[pkg]",
    DevPathKind.SYMLINK: "[lnk]",
    DevPathKind.MOUNT: "[mnt]",
    DevPathKind.CONVENTION: "[dir]",
}


def render(
    project: Project,
    output_format: OutputFormat = OutputFormat.TEXT,
    verbose: bool = False,
    dev_paths_only: bool = False,
) -> str:
    """Render a project summary.

    Args:
        project: Project to render
        output_format: Text, JSON or Markdown
        verbose: If True, include custom commands and hooks
        dev_paths_only: If True, render only the development paths
    """
    if output_format == OutputFormat.JSON:
        if dev_paths_only:
            return json.dumps([d.to_dict() for d in project.dev_paths], indent=2)
        return format_json(project)
    if output_format == OutputFormat.MARKDOWN:
        if dev_paths_only:
            return "\n".join(_markdown_dev_paths(project.dev_paths))
        return format_markdown(project, verbose=verbose)
    if dev_paths_only:
        return "\n".join(_text_dev_paths(project.dev_paths))
    return format_text(project, verbose=verbose)


def render_all(
    projects: list[Project],
    output_format: OutputFormat = OutputFormat.TEXT,
    verbose: bool = False,
    dev_paths_only: bool = False,
) -> str:
    """Render several project summaries.

    JSON output is a single array so it stays one valid document.
    """
    if output_format == OutputFormat.JSON:
        items = [
            [d.to_dict() for d in p.dev_paths] if dev_paths_only else p.to_dict()
            for p in projects
        ]
        return json.dumps(items, indent=2)
    return "\n\n".join(
        render(p, output_format, verbose=verbose, dev_paths_only=dev_paths_only)
        for p in projects
    )


def format_json(project: Project) -> str:
    """Format a project as an indented JSON document."""
    return json.dumps(project.to_dict(), indent=2)


def _title(text: str) -> str:
    return typer.style(text, fg=typer.colors.CYAN, bold=True)


def _field(label: str, value: str) -> str:
    return typer.style(f"{label + ':':<12}", fg=typer.colors.YELLOW) + value


def _section(title: str) -> list[str]:
    return ["", _title(title), RULE]


def _text_dev_paths(dev_paths: list[DevPath]) -> list[str]:
    lines = []
    for dev_path in dev_paths:
        tag = KIND_TAGS.get(dev_path.kind, "*")
        lines.append(f"{tag} {_display_path(dev_path.path)}")
        details = f"   Type: {dev_path.kind.value} | Source: {dev_path.source}"
        if dev_path.mount_target:
            details += f" | Target: {dev_path.mount_target}"
        lines.append(details)
        if dev_path.packages:
            lines.append(f"   Packages: {', '.join(dev_path.packages)}")
    return lines


def format_text(project: Project, verbose: bool = False) -> str:
    """Format a project for the terminal.

    Args:
        project: Project to format
        verbose: If True, include custom commands and hooks
    """
    lines = [_title(f"DDEV Project: {project.name}"), RULE, ""]
    lines.append(_field("Type", project.type))
    lines.append(_field("Path", _display_path(project.path)))
    lines.append(_field("PHP", project.php_version))
    lines.append(_field("Webserver", project.webserver))
    lines.append(_field("Database", str(project.database)))
    if project.nodejs:
        lines.append(_field("Node.js", project.nodejs))
    if project.urls:
        lines.append(_field("URLs", ", ".join(project.urls)))

    if project.dev_paths:
        lines += _section("Development Paths")
        lines += _text_dev_paths(project.dev_paths)

    if project.services:
        lines += _section("Services")
        for service in project.services:
            lines.append(f"* {service.name} ({service.type})")

    if verbose and project.commands:
        lines += _section("Custom Commands")
        for command in project.commands:
            lines.append(
                f"* {command.name} ({command.location}) - {command.description}"
            )

    if verbose and project.hooks:
        lines += _section("Hooks")
        for event, commands in project.hooks.items():
            lines.append(f"* {event}:")
            lines += [f"    - {command}" for command in commands]

    return "\n".join(lines)


def _markdown_dev_paths(dev_paths: list[DevPath]) -> list[str]:
    lines = ["## Development Paths", ""]
    for dev_path in dev_paths:
        lines += [f"### `{dev_path.path}`", ""]
        lines.append(f"- **Type:** {dev_path.kind.value}")
        lines.append(f"- **Source:** {dev_path.source}")
        if dev_path.mount_target:
            lines.append(f"- **Mount target:** `{dev_path.mount_target}`")
        if dev_path.packages:
            lines.append(f"- **Packages:** {', '.join(dev_path.packages)}")
        lines.append("")
    return lines


def format_markdown(project: Project, verbose: bool = False) -> str:
    """Format a project as a Markdown document.

    Args:
        project: Project to format
        verbose: If True, include custom commands and hooks
    """
    lines = [f"# DDEV Project: {project.name}", "", "## Configuration", ""]
    lines += ["| Setting | Value |", "|---------|-------|"]
    lines.append(f"| Type | {project.type} |")
    lines.append(f"| Path | `{project.path}` |")
    lines.append(f"| PHP | {project.php_version} |")
    lines.append(f"| Webserver | {project.webserver} |")
    lines.append(f"| Database | {project.database} |")
    if project.nodejs:
        lines.append(f"| Node.js | {project.nodejs} |")
    for url in project.urls:
        lines.append(f"| URL | {url} |")
    lines.append("")

    if project.dev_paths:
        lines += _markdown_dev_paths(project.dev_paths)

    if project.services:
        lines += ["## Services", ""]
        for service in project.services:
            lines.append(f"- **{service.name}** ({service.type})")
        lines.append("")

    if verbose and project.commands:
        lines += ["## Custom Commands", ""]
        for command in project.commands:
            lines.append(f"- `{command.name}` - {command.description}")
        lines.append("")

    if verbose and project.hooks:
        lines += ["## Hooks", ""]
        for event, commands in project.hooks.items():
            lines.append(f"- **{event}**")
            lines += [f"  - `{command}`" for command in commands]
        lines.append("")

    return "\n".join(lines)


def _display_path(path: Path) -> str:
    """Format path for display, using ~ for home directory.

    Args:
        path: Path to format

    Returns:
        String representation with ~ substitution if applicable
    """
    try:
        rel_path = path.relative_to(Path.home())
        return f"~/{rel_path}"
    except ValueError:
        return str(path)
