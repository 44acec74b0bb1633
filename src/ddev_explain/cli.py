"""Command-line interface for ddev-explain."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from ddev_explain import __version__
from ddev_explain.ddev import parse_config
from ddev_explain.ddev.commands import install_host_command
from ddev_explain.detect import detect_dev_paths
from ddev_explain.exceptions import ConfigError
from ddev_explain.exceptions import ProjectListError
from ddev_explain.exceptions import ProjectNotFoundError
from ddev_explain.finder import find_all_projects
from ddev_explain.finder import find_project_upward
from ddev_explain.finder import global_ddev_dir
from ddev_explain.logging_utils import configure_logging
from ddev_explain.models import OutputFormat
from ddev_explain.models import Project
from ddev_explain.output import render
from ddev_explain.output import render_all

app = typer.Typer(help="Summarize DDEV project configuration")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"ddev-explain {__version__}")
        raise typer.Exit()


def _fail(message: str) -> typer.Exit:
    typer.secho(f"✗ {message}", fg=typer.colors.RED, bold=True, err=True)
    return typer.Exit(1)


def _warn(message: str) -> None:
    typer.secho(f"Warning: {message}", fg=typer.colors.YELLOW, err=True)


def load_project(project_root: Path) -> Project:
    """Read a project's config and detect its development paths.

    Raises:
        ConfigError: If the project config is missing or malformed
        FileNotFoundError: If project_root does not exist
        NotADirectoryError: If project_root is not a directory
    """
    project = parse_config(project_root)
    project.dev_paths = detect_dev_paths(project_root)
    return project


@app.command()
def explain(
    path: Annotated[
        Path | None,
        typer.Argument(help="Directory inside the project (default: current directory)"),
    ] = None,
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format", "-f", envvar="DDEV_EXPLAIN_FORMAT", help="Output format"
        ),
    ] = OutputFormat.TEXT,
    all_projects: Annotated[
        bool, typer.Option("--all", "-a", help="Show all known DDEV projects")
    ] = False,
    dev_paths: Annotated[
        bool, typer.Option("--dev-paths", help="Show only development paths")
    ] = False,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Show additional details")
    ] = False,
    install_command: Annotated[
        bool,
        typer.Option("--install-command", help="Install as DDEV custom command"),
    ] = False,
    version: Annotated[
        bool | None,
        typer.Option(
            "--version", callback=version_callback, is_eager=True, help="Show version"
        ),
    ] = None,
) -> None:
    """Summarize a DDEV project, focusing on its development paths."""
    configure_logging(logging.DEBUG if verbose else logging.WARNING)

    if install_command:
        try:
            command_path = install_host_command(global_ddev_dir())
        except OSError as e:
            raise _fail(f"Cannot install command: {e}") from None
        typer.secho(f"✓ DDEV command installed: {command_path}", fg=typer.colors.GREEN)
        typer.echo("You can now use: ddev explain")
        return

    try:
        if all_projects:
            project_roots = find_all_projects()
        else:
            project_roots = [find_project_upward(path or Path.cwd())]
    except (ProjectListError, ProjectNotFoundError) as e:
        raise _fail(str(e)) from None

    projects = []
    for project_root in project_roots:
        try:
            projects.append(load_project(project_root))
        except (ConfigError, FileNotFoundError, NotADirectoryError) as e:
            if not all_projects:
                raise _fail(str(e)) from None
            _warn(f"failed to read {project_root}: {e}")

    if not all_projects:
        typer.echo(
            render(
                projects[0], output_format, verbose=verbose, dev_paths_only=dev_paths
            )
        )
    else:
        typer.echo(
            render_all(
                projects, output_format, verbose=verbose, dev_paths_only=dev_paths
            )
        )


def main() -> None:
    """Main entry point for the ddev-explain CLI."""
    app()


if __name__ == "__main__":
    main()
