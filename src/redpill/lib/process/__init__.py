"""
Process inspection and termination module initialization
"""
from .base import ProcessInspector, ProcessRecord, PortListing
from .lsof import LsofInspector
from .terminator import ProcessTerminator, kill_process

__all__ = [
    "ProcessInspector",
    "ProcessRecord",
    "PortListing",
    "LsofInspector",
    "ProcessTerminator",
    "kill_process"
]
