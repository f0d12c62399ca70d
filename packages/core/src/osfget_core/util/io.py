"""
Input/output functions.

Date: 2026-10-18

Last updated: 2026-10-18
"""

import os
from pathlib import Path
from typing import Any

import yaml

from osfget_core.util.alltypes import FilePath
from osfget_core.util.exceptions import OsfConfigError


def checkdir(path: FilePath, is_file: bool = False) -> Path:
    """Check if directory exists. If not, creates it.

    Arguments:
        path (str | Path):
            A path to a directory or file.
        is_file (bool):
            If `True` will check the parent of the file path.

    Returns:
        A `pathlib.Path` object of `path`.
    """
    if isinstance(path, str):
        path = Path(path)
    if is_file:
        path = path.resolve().parents[0]

    if not path.exists():
        path.mkdir(parents=True, exist_ok=True)

    return path


def parent_dir(path: FilePath) -> str:
    """Return the directory portion of `path`. An empty directory is `.`."""
    return os.path.dirname(str(path)) or os.curdir


def path_ext_set(path: FilePath, ext: str) -> str:
    """Replace the last extension of a path.

    A path without an extension gets `ext` appended. The directory portion
    of `path` is left exactly as given.

    Arguments:
        path (str | Path):
            Path to re-extension.
        ext (str):
            New extension, with or without the leading dot.

    Returns:
        The re-extensioned path as a string.

    Examples:
        >>> path_ext_set("data_folder", "zip")
        'data_folder.zip'
        >>> path_ext_set("out/archive.tar.gz", ".zip")
        'out/archive.tar.zip'
    """
    path = str(path)
    stripped = path.rstrip("/\\") or path
    root, _ = os.path.splitext(stripped)

    return f"{root}.{ext.lstrip('.')}"


def load_yaml(file: FilePath, encoding: str = "utf-8") -> dict[str, Any]:
    """Load a yaml dictionary.

    Arguments:
        file (str | Path):
            Path to .yaml file to load.
        encoding (str):
            Text encoding format.

    Raises:
        OsfConfigError: if `file` is not valid yaml.
    """
    with open(file, "r", encoding=encoding) as stream:
        try:
            return yaml.safe_load(stream)
        except yaml.YAMLError as e:
            raise OsfConfigError(f"Could not parse {file}: {e}") from e
