"""
Definition of common arguments across CLI commands.

Date: 2026-10-18

Last updated: 2026-10-18
"""

from functools import wraps

import click
from osfget_core.util.supported import supported

LOGLEVEL_OPT = click.Choice(supported("log_levels"))
SERVER_OPT = click.Choice(supported("servers"))


def logging_args(command):
    """Decorator to assign logging arguments across CLI commands."""

    @click.option(
        "--log-level", type=LOGLEVEL_OPT, default="info", help="Logging level."
    )
    @click.option(
        "--quiet",
        is_flag=True,
        default=False,
        help="No log or console output if applied.",
    )
    @wraps(command)
    def wrapper(*args, **kwargs):
        return command(*args, **kwargs)

    return wrapper
