"""
List command implementation for redpill
"""
import logging

import typer

from ..config import Config, ConfigError
from ..factory import InspectorFactory
from .. import ui

logger = logging.getLogger("redpill.lib.cmd.manage")

def list_command(debug: bool = False) -> None:
    """
    List all listening ports

    Shows every listening TCP port on the host with its owning process.
    """
    try:
        config = Config.load()
        inspector = InspectorFactory.create(config=config)

        entries = inspector.list_all_listening()
        logger.info(f"Found {len(entries)} listening port(s)")

        if not entries:
            ui.show_list_empty()
            return

        ui.show_listing(entries, command_width=config.command_width)

    except ConfigError as e:
        ui.show_error(f"Configuration error: {str(e)}")
        raise typer.Exit(code=1)
    except Exception as e:
        ui.show_error(f"Error: {str(e)}")
        if debug:
            import traceback
            ui.console.print(traceback.format_exc())
        raise typer.Exit(code=1)
