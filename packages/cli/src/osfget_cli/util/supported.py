"""
Settings for supported CLI options.

Date: 2026-10-18

Last updated: 2026-10-18
"""


def log_map() -> dict[str, int]:
    """Return mapping between log levels as text and their corresponding int values."""
    return {
        "notset": 0,
        "debug": 10,
        "info": 20,
        "warning": 30,
        "error": 40,
        "critical": 50,
    }
