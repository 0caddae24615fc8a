"""
Command implementations for redpill
"""

# Port utilities
from .port import (
    is_valid_port,
    parse_ports,
    MIN_PORT,
    MAX_PORT
)

# Command implementations
from .check import check_command
from .free import free_command
from .manage import list_command

__all__ = [
    # Port utilities
    'is_valid_port',
    'parse_ports',
    'MIN_PORT',
    'MAX_PORT',

    # Command implementations
    'check_command',
    'free_command',
    'list_command'
]
