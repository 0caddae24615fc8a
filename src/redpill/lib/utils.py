"""
Utility functions for redpill
"""
import logging
import subprocess
from typing import List, Optional

logger = logging.getLogger(__name__)

def run_command(cmd: List[str]) -> Optional[str]:
    """
    Run an external command and capture its output

    Args:
        cmd: Command and arguments

    Returns:
        Standard output, or None if the command is missing, fails or prints nothing
    """
    try:
        result = subprocess.run(
            cmd,
            capture_output=True,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False
        )
    except (OSError, ValueError, subprocess.SubprocessError) as e:
        logger.debug(f"Could not run {cmd[0]}: {e}")
        return None

    if result.returncode != 0:
        logger.debug(f"{' '.join(cmd)} exited with code {result.returncode}")
        return None

    if not result.stdout or not result.stdout.strip():
        logger.debug(f"{' '.join(cmd)} produced no output")
        return None

    return result.stdout

def truncate(text: str, width: int) -> str:
    """Shorten text to width characters, marking the cut with an ellipsis"""
    if len(text) <= width:
        return text
    return text[:width - 1] + "…"
