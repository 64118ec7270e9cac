"""
Shared compute infrastructure for pyhtest.

Submodules:
    timing: Execution timing utilities
"""

from pyhtest.core.compute.timing import Timer, timed

__all__ = [
    "Timer",
    "timed",
]
