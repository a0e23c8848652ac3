"""Command-line entry points for termsnake."""
