"""
Exceptions raised by osfget.

Date: 2026-10-18

Last updated: 2026-10-18
"""


class OsfError(Exception):
    """Base class for all osfget errors."""


class OsfDownloadError(OsfError):
    """Raised when a download request is rejected before any transfer."""


class AmbiguousInputError(OsfDownloadError):
    """Raised when a file table does not contain exactly one file."""


class DestinationDirectoryMissingError(OsfDownloadError):
    """Raised when the directory portion of a destination path does not exist."""


class OverwriteRefusedError(OsfDownloadError):
    """Raised when the destination exists and overwriting is disabled."""


class OsfConfigError(OsfError):
    """Raised when the osfget config file cannot be read."""


class OsfMetadataError(OsfError):
    """Raised when an OSF entity is missing a required field."""


class OsfHttpError(OsfError):
    """Raised when OSF or WaterButler responds with a non-2xx status.

    Attributes:
        status_code (int):
            HTTP status code of the failed response.
    """

    def __init__(self, status_code: int, message: str):
        self.status_code = status_code
        super().__init__(f"HTTP {status_code}: {message}")


class OsfNotFoundError(OsfHttpError):
    """Raised on a 404 from OSF or WaterButler."""

    def __init__(self, message: str):
        super().__init__(404, message)
