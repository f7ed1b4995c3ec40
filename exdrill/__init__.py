"""Compile, run and check the state of course exercises, with worked drills."""

__version__ = "5.1.1"