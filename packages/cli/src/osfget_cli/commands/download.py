"""
Command to download a file or directory from OSF.

Date: 2026-10-18

Last updated: 2026-10-18
"""

import click
import requests
from osfget_core.api import OsfClient
from osfget_core.download import download as osf_download
from osfget_core.util.exceptions import OsfError
from osfget_core.util.progress import console

from osfget_cli.logger import setup_logger
from osfget_cli.util.common_args import logging_args
from osfget_cli.util.helpers import set_verbosity
from osfget_cli.util.messages import error


@click.command
@click.argument("file_id", type=str)
@click.option(
    "--path",
    type=click.Path(),
    default=None,
    help="Local path to save to. Default is the file's name on OSF. Directories are saved as .zip.",
)
@click.option(
    "--overwrite",
    is_flag=True,
    default=False,
    help="Replace the file at `--path` if it exists.",
)
@logging_args
def download(file_id: str, path: str | None, overwrite: bool, log_level: str, quiet: bool):
    """Download the OSF file or directory FILE_ID."""
    try:
        logger = setup_logger(__name__, level=log_level, console=console)
    except OsfError as e:
        error(str(e))
    verbose = set_verbosity(quiet)

    try:
        client = OsfClient(logger=logger, progress=verbose)
        file = client.retrieve_file(file_id)

        if verbose:
            kind = "directory" if file.is_dir else "file"
            logger.info("Downloading OSF %s %s (%s)...", kind, file.name, file.id)

        file = osf_download(
            file,
            path=path,
            overwrite=overwrite,
            verbose=verbose,
            client=client,
            logger=logger,
        )

    except OsfError as e:
        logger.debug("Download of %s failed: %r", file_id, e)
        error(str(e))

    except requests.exceptions.ConnectionError:
        error("Could not connect to OSF. Check your internet connection.")

    except requests.exceptions.Timeout:
        error("Download timed out. The server may be slow or unreachable.")

    except requests.exceptions.RequestException as e:
        logger.debug("Download of %s failed: %r", file_id, e)
        error(f"Download failed: {e}")

    except ValueError as e:
        error(str(e))

    if not quiet:
        click.echo(file.local_path)
