"""
Helper functions for CLI commands.

Date: 2026-10-18

Last updated: 2026-10-18
"""


def set_verbosity(quiet: bool):
    """Return the opposite of quiet."""
    if quiet:
        return False
    return True
