"""
CLI Output Utilities

Machine-aware output functions that adapt based on machine mode.
"""

import json
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from tsorganizer.cli.config import CLIConfig

_console = Console()

STATUS_STYLES = {
    "organized": "green",
    "unchanged": "dim",
    "skipped": "yellow",
    "failed": "red",
}


def get_console() -> Console:
    return _console


def print_json(data: dict, minified: bool = None) -> None:
    """
    Print JSON data respecting machine mode.
    In machine mode, always minifies. In human mode, pretty prints.
    """
    if minified is None:
        minified = CLIConfig.is_machine_mode()

    if minified:
        typer.echo(json.dumps(data, separators=(',', ':')))
    else:
        typer.echo(json.dumps(data, indent=2))


def structured_error(code: str, message: str, input_value: Optional[str] = None,
                     actionable_fix: Optional[str] = None) -> dict:
    """
    Create a structured error object for machine mode.

    Args:
        code: Error code (e.g., "CONFIGURATION_ERROR")
        message: Human-readable error message
        input_value: The input that caused the error
        actionable_fix: Command to fix the issue

    Returns:
        Structured error dictionary
    """
    error_obj = {
        "status": "error",
        "code": code,
        "message": message
    }
    if input_value:
        error_obj["input"] = input_value
    if actionable_fix:
        error_obj["actionable_fix"] = actionable_fix
    return error_obj


def print_error(message: str, code: str, input_value: Optional[str] = None,
                actionable_fix: Optional[str] = None, json_output: bool = False) -> None:
    """Print an error as JSON in machine mode, as text otherwise."""
    if CLIConfig.is_machine_mode() or json_output:
        print_json(structured_error(code, message, input_value, actionable_fix))
    else:
        typer.echo(f"Error: {message}", err=True)
        if actionable_fix:
            typer.echo(f"Try: {actionable_fix}", err=True)


def print_report(report_dict: dict, title: str, json_output: bool = False) -> None:
    """Print an organize report as JSON (machine mode) or a rich table."""
    if CLIConfig.is_machine_mode() or json_output:
        print_json(report_dict)
        return

    table = Table(title=title)
    table.add_column("File", style="cyan")
    table.add_column("Status")
    table.add_column("Reason", style="magenta")
    for outcome in report_dict["outcomes"]:
        style = STATUS_STYLES.get(outcome["status"], "white")
        table.add_row(outcome["path"], f"[{style}]{outcome['status']}[/]", outcome["reason"] or "")
    _console.print(table)

    if report_dict["organized"] > 0:
        _console.print(f"Organized {report_dict['organized']} of {report_dict['files']} files.")
    else:
        _console.print("Did not find any files in need of organizing.")
