import typer

from tsorganizer import __version__
from tsorganizer.logging_config import setup_logging
from tsorganizer.cli import commands
from tsorganizer.cli.config import CLIConfig

app = typer.Typer(help="Group TypeScript declarations and class members into counted #region sections.")


# Global CLI callback for flags that apply to all commands
@app.callback()
def global_options(
    human: bool = typer.Option(
        False,
        "--human",
        "-H",
        help="Enable human mode: pretty output with tables and colors (also via TSORGANIZER_HUMAN_MODE env var)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug details to stderr"),
):
    """
    tsorganizer: TypeScript class organizer.

    Machine mode is DEFAULT (JSON output, no console logging).
    Use --human/-H for pretty output.
    """
    if human:
        CLIConfig.set_machine_mode(False)

    if CLIConfig.is_machine_mode() and not verbose:
        setup_logging(suppress_console=True, force=True)
    else:
        setup_logging(level="DEBUG" if verbose else "INFO", suppress_console=False, force=True)


app.command(name="organize")(commands.organize_cmd)
app.command(name="organize-all")(commands.organize_all_cmd)
app.command(name="init")(commands.init_cmd)


@app.command()
def version():
    """
    Prints the current version of tsorganizer.
    """
    typer.echo(f"tsorganizer v{__version__}")


if __name__ == "__main__":
    app()
