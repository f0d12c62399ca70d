"""
Command to set up the osfget CLI.

Date: 2026-10-18

Last updated: 2026-10-18
"""

import click
from osfget_core.util.io import checkdir
from osfget_core.util.progress import console
from osfget_core.util.supported import DEFAULT_SERVER, get_default_log_dir

from osfget_cli.logger import setup_logger
from osfget_cli.setup.config import Config
from osfget_cli.util.common_args import SERVER_OPT, logging_args
from osfget_cli.util.helpers import set_verbosity


@click.command
@click.option(
    "--server",
    type=SERVER_OPT,
    default=DEFAULT_SERVER,
    help=f"OSF server to download from. Default is `{DEFAULT_SERVER}`.",
)
@click.option(
    "--pat",
    type=str,
    default=None,
    help="OSF personal access token. The OSF_PAT environment variable takes precedence.",
)
@click.option(
    "--log-dir",
    type=click.Path(),
    default="default",
    help="Path to directory storing logs. Default is `~/.osfget/logs`.",
)
@logging_args
def setup(server: str, pat: str | None, log_dir: str, log_level: str, quiet: bool):
    """Configures the osfget CLI."""
    if log_dir == "default":
        log_dir = str(get_default_log_dir())
    checkdir(log_dir)

    logger = setup_logger(__name__, level=log_level, log_dir=log_dir, console=console)
    verbose = set_verbosity(quiet)

    if verbose:
        logger.info("Configuring osfget...")
    config = Config(server, pat, log_dir, logger=logger, verbose=verbose)
    config.setup()
