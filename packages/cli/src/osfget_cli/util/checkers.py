"""
Checker functions for the osfget CLI.

Date: 2026-10-18

Last updated: 2026-10-18
"""

from osfget_core.util.supported import supported

from osfget_cli.util.supported import log_map


def check_loglevel(level: int | str) -> int:
    """Return the int logging level for a level name or int."""
    if isinstance(level, int):
        if level not in log_map().values():
            raise ValueError(
                f"Expected level in {list(log_map().values())}, got {level}."
            )
        return level

    _level = level.lower()
    if _level not in supported("log_levels"):
        raise ValueError(f"Expected level in {supported('log_levels')}, got {level}.")

    return log_map()[_level]


def check_server(server: str) -> str:
    if server not in supported("servers"):
        raise ValueError(f"Expected server in {supported('servers')}, got {server}.")
    return server
