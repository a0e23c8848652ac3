"""
Terminal-facing services: draw sinks and the terminal session.

The curses modules are imported on demand by the CLI; only the in-memory
canvas is exported here so headless code never initialises a terminal.
"""

from .canvas import Canvas, TextCanvas, ROLE_CHARS

__all__ = [
    'Canvas',
    'TextCanvas',
    'ROLE_CHARS',
]
