"""
Core library for redpill
"""

from .config import Config, ConfigError
from .factory import InspectorFactory

# Import utils module, not individual functions
import redpill.lib.utils as utils

__all__ = [
    "Config",
    "ConfigError",
    "InspectorFactory",
    "utils"
]
