"""
Download files and directories from OSF.

Files are downloaded to the current working directory with their OSF
name unless a `path` is given. Directories are downloaded as a zip
archive of their contents. The directory portion of `path` must
already exist.

Date: 2026-10-18

Last updated: 2026-10-18
"""

from __future__ import annotations

import logging
import os

from osfget_core.api import OsfClient
from osfget_core.files import OsfFileTable
from osfget_core.logger import setup_logger
from osfget_core.util.alltypes import TransferType
from osfget_core.util.exceptions import (
    DestinationDirectoryMissingError,
    OverwriteRefusedError,
)
from osfget_core.util.io import parent_dir, path_ext_set
from osfget_core.util.supported import get_log_dir


def resolve_destination(
    name: str, is_dir: bool, path: str | None = None
) -> tuple[str, TransferType]:
    """Resolve the local destination and transfer type of an OSF file.

    Arguments:
        name (str):
            Name of the file on OSF. Used when `path` is None.
        is_dir (bool):
            Indicates if the file is a directory.
        path (str | None):
            Caller supplied destination.

    Returns:
        The destination path and the transfer type. Directories always
        resolve to a `.zip` path with the `folder` transfer type.
    """
    if path is None:
        path = name

    if is_dir:
        return path_ext_set(path, "zip"), "folder"

    return str(path), "file"


def check_destination(path: str, overwrite: bool = False):
    """Check that `path` can be written to without creating directories."""
    if not os.path.isdir(parent_dir(path)):
        raise DestinationDirectoryMissingError(
            f"The directory specified in `path` does not exist: {parent_dir(path)}"
        )

    if os.path.exists(path) and not overwrite:
        raise OverwriteRefusedError(
            f"A file exists at {path} and `overwrite` is `False`."
        )


def download(
    x: OsfFileTable,
    path: str | None = None,
    overwrite: bool = False,
    verbose: bool = False,
    client: OsfClient | None = None,
    logger: logging.Logger | None = None,
) -> OsfFileTable:
    """
    Download a file or directory from OSF.

    Parameters
    ----------
    x: OsfFileTable
        Table containing a single OSF file or directory.

    path: str | None
        Local path where the downloaded file will be saved. The default
        is the remote file's name. Directories are always saved with a
        `.zip` extension.

    overwrite: bool
        If the local path already exists, should it be replaced?

    verbose: bool
        Log a message once the download completes.

    client: OsfClient | None
        Client performing the transfer. A default client is created if None.

    logger: logging.Logger | None
        Logger for process transparency.

    Returns
    -------
    `x` with its `local_path` set to the downloaded file's path.

    Raises
    ------
    AmbiguousInputError
        If `x` does not contain exactly one file.

    DestinationDirectoryMissingError
        If the directory portion of `path` does not exist.

    OverwriteRefusedError
        If a file exists at `path` and `overwrite` is False.

    Example
    -------
    >>> from osfget_core.api import OsfClient
    >>> from osfget_core.download import download
    >>> plan = OsfClient().retrieve_file("2ryha")
    >>> plan = download(plan, path="plan_wave1.docx")
    >>> plan.local_path
    'plan_wave1.docx'

    """
    x = x.make_single()

    path, transfer_type = resolve_destination(x.name, x.is_dir, path)
    check_destination(path, overwrite)

    if client is None:
        client = OsfClient(logger=logger)

    client.wb_download(
        x.parent_id,
        x.id,
        path,
        transfer_type,
        zip=transfer_type == "folder",
    )

    if verbose:
        if logger is None:
            logger = setup_logger(__name__, log_dir=get_log_dir())
        logger.info("Downloaded OSF %s to %s", transfer_type, path)

    return x.set_local_path(path)
