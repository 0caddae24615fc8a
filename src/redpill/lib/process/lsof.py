"""
lsof based process inspector for redpill
"""
import logging
import re
from typing import List, Optional, Set, Tuple

from ..config import Config
from ..utils import run_command
from .base import PortListing, ProcessInspector, ProcessRecord

logger = logging.getLogger(__name__)

# lsof rows: COMMAND PID USER FD TYPE DEVICE SIZE/OFF NODE NAME
MIN_FIELDS = 9
ADDRESS_FIELD = 8
PORT_PATTERN = re.compile(r":(\d+)$")

class LsofInspector(ProcessInspector):
    """Resolves listening ports to processes using lsof and ps"""

    def __init__(self, config: Optional[Config] = None):
        """
        Initialize lsof inspector

        Args:
            config: Application configuration
        """
        self.config = config or Config()

    def _listening_rows(self, port: Optional[int] = None) -> List[List[str]]:
        """Run lsof for listening TCP sockets and split its rows into fields"""
        cmd = [self.config.lsof_path, "-i"]
        if port is not None:
            cmd.append(f":{port}")
        cmd.extend(["-P", "-n", "-sTCP:LISTEN"])

        output = run_command(cmd)
        if output is None:
            return []

        rows = []
        # First line is the lsof header
        for line in output.strip().splitlines()[1:]:
            parts = line.split()
            if len(parts) < MIN_FIELDS:
                logger.debug(f"Skipping short lsof row: {line!r}")
                continue
            rows.append(parts)
        return rows

    @staticmethod
    def _parse_pid(value: str) -> Optional[int]:
        try:
            return int(value)
        except ValueError:
            logger.debug(f"Skipping lsof row with non-numeric PID: {value!r}")
            return None

    def _make_record(self, pid: int, name: str, user: str) -> ProcessRecord:
        command = self.get_command(pid) or name
        return ProcessRecord(pid=pid, name=name, user=user, command=command)

    def find_processes(self, port: int) -> List[ProcessRecord]:
        """Find processes listening on a port"""
        seen: Set[int] = set()
        results: List[ProcessRecord] = []

        for parts in self._listening_rows(port):
            name, pid_str, user = parts[0], parts[1], parts[2]
            pid = self._parse_pid(pid_str)
            if pid is None or pid in seen:
                continue
            seen.add(pid)
            results.append(self._make_record(pid, name, user))

        logger.debug(f"Found {len(results)} process(es) on port {port}")
        return results

    def list_all_listening(self) -> List[PortListing]:
        """List every listening port with its owning process"""
        seen: Set[Tuple[int, int]] = set()
        results: List[PortListing] = []

        for parts in self._listening_rows():
            name, pid_str, user = parts[0], parts[1], parts[2]
            pid = self._parse_pid(pid_str)
            if pid is None:
                continue

            # e.g. *:3000, 127.0.0.1:8080 or [::1]:5432
            match = PORT_PATTERN.search(parts[ADDRESS_FIELD])
            if not match:
                logger.debug(f"Skipping lsof row without a port: {parts[ADDRESS_FIELD]!r}")
                continue

            port = int(match.group(1))
            key = (pid, port)
            if key in seen:
                continue
            seen.add(key)
            results.append(PortListing(port=port, process=self._make_record(pid, name, user)))

        # sort() is stable, processes sharing a port keep discovery order
        results.sort(key=lambda listing: listing.port)
        return results

    def get_command(self, pid: int) -> str:
        """Get the full command line of a process"""
        output = run_command([self.config.ps_path, "-p", str(pid), "-o", "command="])
        if output is None:
            return ""
        return output.strip()
