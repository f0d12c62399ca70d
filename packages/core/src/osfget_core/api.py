"""
Client for the OSF API and the WaterButler file service.

WaterButler serves the bytes of files stored on OSF. The OSF API
serves their metadata.

Date: 2026-10-18

Last updated: 2026-10-18
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

import requests

from osfget_core.files import OsfFileTable
from osfget_core.logger import setup_logger
from osfget_core.util.alltypes import FilePath, TransferType
from osfget_core.util.exceptions import OsfHttpError, OsfNotFoundError
from osfget_core.util.progress import progress_bar
from osfget_core.util.supported import (
    VERSION,
    get_log_dir,
    get_pat,
    get_server,
    server_urls,
    supported,
)

CHUNK_SIZE: int = 8192


class OsfClient:
    """Client for retrieving and downloading OSF files.

    Attributes
    ----------
    server: str
        Name of the OSF server. One of `production` or `test`.

    api_url: str
        Base URL of the OSF API v2.

    files_url: str
        Base URL of WaterButler.

    timeout: float
        Seconds to wait for the server before giving up.

    session: requests.Session
        Session carrying the user agent and authorization headers.

    logger: logging.Logger
        Logger for process transparency.

    progress: bool
        Indicates if a progress bar is shown while downloading.

    Methods
    -------
    retrieve_file()
        Retrieve a file or directory from the OSF API by its ID.

    wb_download()
        Download a file, or a directory as a zip archive, from WaterButler.

    wb_path()
        Return the WaterButler path of a file or directory.

    Example
    -------
    >>> from osfget_core.api import OsfClient
    >>> client = OsfClient()
    >>> plan = client.retrieve_file("2ryha")
    >>> client.wb_download(plan.parent_id, plan.id, "plan.docx", "file")

    """

    def __init__(
        self,
        server: str | None = None,
        pat: str | None = None,
        timeout: float = 30,
        logger=None,
        loglevel=20,
        logdir=None,
        progress: bool = False,
    ):
        self.server: str = server or get_server()
        urls = server_urls(self.server)
        self.api_url: str = urls["api"]
        self.files_url: str = urls["files"]
        self.timeout = timeout
        self.progress = progress
        if logger is None:
            logger = setup_logger(
                __name__, level=loglevel, log_dir=logdir or get_log_dir()
            )
        self.logger: logging.Logger = logger

        if pat is None:
            pat = get_pat()
        self.session: requests.Session = self._make_session(pat)

    def retrieve_file(self, file_id: str) -> OsfFileTable:
        """Retrieve a single OSF file or directory.

        Arguments:
            file_id (str):
                OSF GUID or WaterButler ID of the file.

        Returns:
            A single-row OsfFileTable.
        """
        url = f"{self.api_url}/files/{file_id}/"
        self.logger.debug("Retrieving OSF file from %s", url)

        with self.session.get(url, timeout=self.timeout) as response:
            if response.status_code == 404:
                raise OsfNotFoundError(f"The requested file ({file_id}) could not be found")
            self._raise_for_status(response)
            entity = response.json()["data"]

        return OsfFileTable.from_api([entity])

    def wb_download(
        self,
        node_id: str,
        file_id: str,
        path: FilePath,
        transfer_type: TransferType,
        zip: bool = False,
    ) -> str:
        """Download a file or directory from WaterButler to `path`.

        The response is written to `<path>.part` and moved onto `path` once
        complete, so a failed transfer leaves any existing file untouched.

        Arguments:
            node_id (str):
                ID of the OSF node holding the file.
            file_id (str):
                ID of the file or directory.
            path (str | Path):
                Local destination path.
            transfer_type (str):
                `file` or `folder`.
            zip (bool):
                Request the contents as a zip archive. Required for folders.

        Returns:
            The destination path as a string.
        """
        if transfer_type not in supported("transfer_types"):
            raise ValueError(
                f"Expected transfer_type in {supported('transfer_types')}, got {transfer_type}."
            )

        url = f"{self.files_url}/{self.wb_path(node_id, file_id, transfer_type)}"
        params = {"zip": ""} if zip else None
        self.logger.debug("Downloading from URL: %s", url)

        with self.session.get(
            url, params=params, stream=True, timeout=self.timeout
        ) as response:
            if response.status_code == 404:
                raise OsfNotFoundError(
                    f"The requested {transfer_type} ({file_id}) could not be found in node `{node_id}`"
                )
            self._raise_for_status(response)

            filesize = int(response.headers.get("content-length", 0))
            self.logger.debug("File size: %s bytes", filesize)
            self._write(response, path, filesize)

        return str(path)

    def wb_path(self, node_id: str, file_id: str, transfer_type: TransferType) -> str:
        """Return the WaterButler path of an osfstorage file or directory."""
        path = f"v1/resources/{node_id}/providers/osfstorage/{file_id}"
        if transfer_type == "folder":
            path += "/"
        return path

    # ========================================
    # ======  helpers
    # ========================================

    def _make_session(self, pat: str | None) -> requests.Session:
        session = requests.Session()
        session.headers.update({"User-Agent": f"osfget/{VERSION}"})

        if pat:
            session.headers.update({"Authorization": f"Bearer {pat}"})
        else:
            self.logger.debug("No OSF personal access token found. Using public access.")

        return session

    def _raise_for_status(self, response: requests.Response):
        if response.ok:
            return

        self.logger.debug("Request status: %s", response.status_code)
        raise OsfHttpError(response.status_code, self._error_message(response))

    def _error_message(self, response: requests.Response) -> str:
        # OSF API errors look like {"errors": [{"detail": ...}]},
        # WaterButler errors look like {"message": ...}
        try:
            body = response.json()
        except ValueError:
            return response.reason or "Unknown error"

        if isinstance(body, dict):
            if body.get("errors"):
                return "; ".join(str(e.get("detail", e)) for e in body["errors"])
            if body.get("message"):
                return str(body["message"])

        return response.reason or "Unknown error"

    def _write(self, response: requests.Response, path: FilePath, filesize: int):
        partial = Path(f"{path}.part")

        try:
            with open(partial, "wb") as f:
                if self.progress and filesize > 0:
                    with progress_bar(padding="    ") as progress:
                        task = progress.add_task("Downloading", total=filesize)
                        for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                            f.write(chunk)
                            progress.update(task, advance=len(chunk))
                else:
                    for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                        f.write(chunk)

            os.replace(partial, path)

        except BaseException:
            partial.unlink(missing_ok=True)
            raise
