"""
Free command implementation for redpill
"""
import logging
from typing import List

import typer

from ..config import Config, ConfigError
from ..factory import InspectorFactory
from ..process.terminator import ProcessTerminator
from .. import ui
from .port import parse_ports

logger = logging.getLogger(__name__)

def free_command(
    specs: List[str],
    debug: bool = False
) -> None:
    """
    Free ports without asking

    Kills every process listening on the given ports and ranges.
    """
    if not specs:
        ui.show_error("Please specify a port or range. Example: redpill free 3000-3010")
        raise typer.Exit(code=1)

    ports = parse_ports(specs)
    if not ports:
        ui.show_error("No valid ports in the specified range.")
        raise typer.Exit(code=1)

    try:
        config = Config.load()
        inspector = InspectorFactory.create(config=config)
        terminator = ProcessTerminator.from_config(config)

        freed = 0
        total = 0
        for port in ports:
            for proc in inspector.find_processes(port):
                total += 1
                if terminator.kill(proc.pid):
                    freed += 1
                    ui.show_kill_success(port, proc.pid)
                else:
                    ui.show_kill_failed(proc.pid)

        logger.info(f"Freed {freed} of {total} process(es) across {len(ports)} port(s)")
        ui.show_freeing_summary(freed, total)

    except ConfigError as e:
        ui.show_error(f"Configuration error: {str(e)}")
        raise typer.Exit(code=1)
    except Exception as e:
        ui.show_error(f"Error: {str(e)}")
        if debug:
            import traceback
            ui.console.print(traceback.format_exc())
        raise typer.Exit(code=1)
