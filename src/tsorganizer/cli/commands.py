"""
Organize commands: organize, organize-all, init.
"""

from pathlib import Path
from typing import List, Optional

import typer

from tsorganizer.config.loader import discover_configuration, write_default_configuration
from tsorganizer.exceptions import ConfigurationError
from tsorganizer.host.workspace import OrganizeReport, WorkspaceOrganizer
from tsorganizer.logging_config import logger
from .config import CLIConfig
from .output import get_console, print_error, print_json, print_report

console = get_console()

# Exit codes: 0 nothing to do, 1 files changed (with --check), 2 errors
EXIT_CHANGED = 1
EXIT_ERROR = 2


def _workspace(root: Path, config_path: Optional[Path], check: bool, json_output: bool) -> WorkspaceOrganizer:
    try:
        configuration = discover_configuration(root, config_path)
    except ConfigurationError as e:
        print_error(str(e), code="CONFIGURATION_ERROR", input_value=e.source,
                    actionable_fix="tsorganizer init --force", json_output=json_output)
        raise typer.Exit(code=EXIT_ERROR)
    return WorkspaceOrganizer(root, configuration, check_only=check)


def _finish(report: OrganizeReport, check: bool, title: str, json_output: bool) -> None:
    print_report(report.to_dict(), title, json_output)
    if report.failed:
        raise typer.Exit(code=EXIT_ERROR)
    if check and report.organized:
        raise typer.Exit(code=EXIT_CHANGED)


def organize_cmd(
    files: List[Path] = typer.Argument(..., help="TypeScript files to organize", exists=True, dir_okay=False),
    check: bool = typer.Option(False, "--check", help="Report files that would change without writing"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to tsorganizer.json"),
    workspace: Path = typer.Option(Path("."), "--workspace", "-w", help="Workspace root for configuration discovery and file patterns", file_okay=False),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Organize the given files.
    """
    organizer = _workspace(workspace, config_path, check, json_output)
    report = organizer.organize_files(files)
    _finish(report, check, "tsorganizer organize", json_output)


def organize_all_cmd(
    directory: Path = typer.Argument(Path("."), help="Directory to organize", exists=True, file_okay=False),
    check: bool = typer.Option(False, "--check", help="Report files that would change without writing"),
    config_path: Optional[Path] = typer.Option(None, "--config", "-c", help="Path to tsorganizer.json"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Organize every TypeScript file under DIRECTORY (node_modules excluded).
    """
    organizer = _workspace(directory, config_path, check, json_output)
    report = organizer.organize_all()
    _finish(report, check, "tsorganizer organize-all", json_output)


def init_cmd(
    directory: Path = typer.Argument(Path("."), help="Directory for tsorganizer.json", exists=True, file_okay=False),
    force: bool = typer.Option(False, "--force", help="Overwrite an existing configuration file"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Write the default configuration to DIRECTORY/tsorganizer.json.
    """
    try:
        path = write_default_configuration(directory, force=force)
    except FileExistsError as e:
        logger.warning(f"Configuration file already exists at {e}")
        print_error(f"configuration file already exists at {e}", code="CONFIGURATION_EXISTS",
                    input_value=str(e), actionable_fix="tsorganizer init --force", json_output=json_output)
        raise typer.Exit(code=EXIT_ERROR)

    if CLIConfig.is_machine_mode() or json_output:
        print_json({"status": "ok", "path": str(path)})
    else:
        console.print(f"[green]Created default configuration at {path}[/green]")
