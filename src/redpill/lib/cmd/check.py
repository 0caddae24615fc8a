"""
Check command implementation for redpill
"""
import logging

import typer

from ..config import Config, ConfigError
from ..factory import InspectorFactory
from ..process.terminator import ProcessTerminator
from .. import ui
from .port import is_valid_port

logger = logging.getLogger(__name__)

def check_command(
    port: int,
    yes: bool = False,
    debug: bool = False
) -> None:
    """
    Check a single port and offer to kill its processes

    Shows every process listening on the port and asks before killing each one.
    """
    if not is_valid_port(port):
        ui.show_error(f"Invalid port: {port}. Must be between 1 and 65535.")
        raise typer.Exit(code=1)

    try:
        logger.debug(f"Checking port {port}")
        config = Config.load()
        inspector = InspectorFactory.create(config=config)
        terminator = ProcessTerminator.from_config(config)

        procs = inspector.find_processes(port)
        if not procs:
            ui.show_port_free(port)
            return

        for proc in procs:
            ui.show_process_info(port, proc)

            if not yes and not ui.confirm("Kill this process?"):
                ui.show_skipped()
                continue

            if terminator.kill(proc.pid):
                ui.show_kill_success(port, proc.pid)
            else:
                ui.show_kill_failed(proc.pid)

    except ConfigError as e:
        ui.show_error(f"Configuration error: {str(e)}")
        raise typer.Exit(code=1)
    except Exception as e:
        ui.show_error(f"Error: {str(e)}")
        if debug:
            import traceback
            ui.console.print(traceback.format_exc())
        raise typer.Exit(code=1)
