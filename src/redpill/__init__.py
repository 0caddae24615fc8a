"""
redpill - find and free processes holding TCP ports
"""

__version__ = "0.1.0"
