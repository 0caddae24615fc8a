"""
Process termination for redpill
"""
import logging
import os
import signal
import time
from typing import Callable, Optional

from ..config import Config

logger = logging.getLogger(__name__)

class ProcessTerminator:
    """Stops processes with SIGTERM, escalating to SIGKILL"""

    def __init__(
        self,
        attempts: int = 10,
        interval: float = 0.1,
        send_signal: Optional[Callable[[int, int], None]] = None,
        sleep: Optional[Callable[[float], None]] = None
    ):
        """
        Initialize process terminator

        Args:
            attempts: Number of liveness probes after SIGTERM
            interval: Seconds to wait between probes
            send_signal: Signal delivery function, os.kill by default
            sleep: Delay function, time.sleep by default
        """
        self.attempts = attempts
        self.interval = interval
        self._send_signal = send_signal or os.kill
        self._sleep = sleep or time.sleep

    @classmethod
    def from_config(cls, config: Config) -> 'ProcessTerminator':
        """Create a terminator using the configured poll budget"""
        return cls(attempts=config.kill_poll_attempts, interval=config.kill_poll_interval)

    def _is_alive(self, pid: int) -> bool:
        """Check if a process exists by sending it signal 0"""
        try:
            self._send_signal(pid, 0)
            return True
        except OSError:
            return False

    def kill(self, pid: int) -> bool:
        """
        Kill a process by PID

        Args:
            pid: Process ID

        Returns:
            True if SIGTERM was delivered, False if the process could not be signalled
        """
        try:
            logger.info(f"Sending SIGTERM to process {pid}")
            self._send_signal(pid, signal.SIGTERM)
        except OSError as e:
            logger.error(f"Failed to send SIGTERM to process {pid}: {e}")
            return False

        alive = True
        for _ in range(self.attempts):
            if not self._is_alive(pid):
                alive = False
                break
            self._sleep(self.interval)

        if alive:
            logger.warning(f"Process {pid} didn't terminate gracefully, using SIGKILL")
            try:
                self._send_signal(pid, signal.SIGKILL)
            except OSError:
                # Already gone
                logger.debug(f"SIGKILL to process {pid} failed, assuming it exited")
        else:
            logger.info(f"Process {pid} terminated gracefully")

        return True

def kill_process(pid: int, config: Optional[Config] = None) -> bool:
    """Kill a process by PID with SIGTERM, falling back to SIGKILL"""
    terminator = ProcessTerminator.from_config(config) if config else ProcessTerminator()
    return terminator.kill(pid)
