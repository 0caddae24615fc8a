"""
Command-line interface for redpill
"""
import logging
from typing import List, Optional

import typer

from .lib import ui
from .lib.cmd import (
    # Command implementations
    check_command,
    free_command,
    list_command
)

EPILOG = """
Examples:

  redpill 3000              Check port 3000 and offer to kill its process

  redpill free 3000-3010    Kill everything listening on ports 3000 to 3010

  redpill free 3000 8080    Kill everything listening on ports 3000 and 8080

  redpill list              Show every listening port
"""

app = typer.Typer(
    help="redpill - see what's holding your ports and free them",
    epilog=EPILOG,
    context_settings={"help_option_names": ["-h", "--help"]},
    add_completion=False
)

def _version_callback(value: bool):
    if value:
        ui.show_version()
        raise typer.Exit()

@app.callback(invoke_without_command=True)
def callback(
    ctx: typer.Context,
    version: Optional[bool] = typer.Option(
        None, '--version', '-v', callback=_version_callback, is_eager=True, help='Show version and exit'
    ),
    debug: bool = typer.Option(False, '--debug', '-d', help='Enable debug logging')
):
    """redpill - see what's holding your ports and free them"""
    if debug:
        logging.getLogger().setLevel(logging.DEBUG)
    ctx.obj = {"debug": debug}

    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()

@app.command()
def check(
    ctx: typer.Context,
    port: int = typer.Argument(..., help='Port to check'),
    yes: bool = typer.Option(False, '--yes', '-y', help='Kill without confirmation')
):
    """Check a port and offer to kill the process holding it"""
    return check_command(port=port, yes=yes, debug=ctx.obj["debug"])

@app.command()
def free(
    ctx: typer.Context,
    ports: Optional[List[str]] = typer.Argument(None, help='Ports or ranges, e.g. 3000 8080 5000-5010')
):
    """Free ports and ranges without asking"""
    return free_command(specs=ports or [], debug=ctx.obj["debug"])

@app.command("list")
def list_ports(ctx: typer.Context):
    """List all listening ports (alias: ls)"""
    return list_command(debug=ctx.obj["debug"])

@app.command("ls", hidden=True)
def ls_ports(ctx: typer.Context):
    """Alias for list"""
    return list_command(debug=ctx.obj["debug"])

def normalize_args(args: List[str]) -> List[str]:
    """Treat a bare port number as the check command"""
    for i, arg in enumerate(args):
        # Global options take no values
        if arg.startswith("-"):
            continue
        if arg.isdigit():
            return [*args[:i], "check", *args[i:]]
        break
    return args

def main():
    """Main entry point"""
    import sys

    # Set up basic logging
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    # Run the app
    app(args=normalize_args(sys.argv[1:]), prog_name="redpill")

if __name__ == "__main__":
    main()
