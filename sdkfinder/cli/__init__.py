"""
sdkfinder command-line interface.
"""

from sdkfinder.cli.parser import CLI, main

__all__ = ["CLI", "main"]
