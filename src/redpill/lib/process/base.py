"""
Base class for process inspection backends
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import List

@dataclass(frozen=True)
class ProcessRecord:
    """Process bound to a listening port"""
    pid: int
    name: str
    user: str
    command: str

@dataclass(frozen=True)
class PortListing:
    """Listening port paired with its owning process"""
    port: int
    process: ProcessRecord

class ProcessInspector(ABC):
    """Abstract base class for process inspection backends"""

    @abstractmethod
    def find_processes(self, port: int) -> List[ProcessRecord]:
        """
        Find processes listening on a port

        Args:
            port: Port number

        Returns:
            Processes in discovery order, one per PID (empty on failure)
        """
        pass

    @abstractmethod
    def list_all_listening(self) -> List[PortListing]:
        """
        List every listening port with its owning process

        Returns:
            Listings sorted by port, one per (PID, port) pair (empty on failure)
        """
        pass

    @abstractmethod
    def get_command(self, pid: int) -> str:
        """
        Get the full command line of a process

        Args:
            pid: Process ID

        Returns:
            Command line, or empty string if unavailable
        """
        pass
