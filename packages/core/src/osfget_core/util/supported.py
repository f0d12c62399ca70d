"""
This script stores OSF server settings, config file paths, and functions
to retrieve them.

Functions beginning with an underscore are intended to be called through the
`supported` function or are just helpers.

Date: 2026-10-18

Last updated: 2026-10-18
"""

import os
from pathlib import Path
from typing import Any

from osfget_core.util.io import checkdir, load_yaml

VERSION: str = "0.1.0"

# environment variables that take precedence over the config file
PAT_ENVVAR: str = "OSF_PAT"
SERVER_ENVVAR: str = "OSF_SERVER"

DEFAULT_SERVER: str = "production"


# =======================================================
# ==== hard-coded supported items
# =======================================================


def _servers() -> dict[str, dict[str, str]]:
    """Return base URLs of the OSF API and WaterButler for each server."""
    return {
        "production": {
            "api": "https://api.osf.io/v2",
            "files": "https://files.osf.io",
        },
        "test": {
            "api": "https://api.test.osf.io/v2",
            "files": "https://files.us.test.osf.io",
        },
    }


def _log_levels() -> list[str]:
    """Return supported logger levels."""
    return ["notset", "debug", "info", "warning", "error", "critical"]


def _transfer_types() -> list[str]:
    """Return supported WaterButler transfer types."""
    return ["file", "folder"]


def _supported() -> dict[str, list[str]]:
    return {
        "log_levels": _log_levels(),
        "servers": list(_servers().keys()),
        "transfer_types": _transfer_types(),
    }


def supported(entity: str) -> list[str]:
    """Returns supported items for a specified entity."""
    if entity in _supported():
        return _supported()[entity]
    raise ValueError(f"Expected entity in {list(_supported().keys())}, got {entity}.")


def server_urls(server: str) -> dict[str, str]:
    """Return the `api` and `files` base URLs for an OSF server."""
    servers = _servers()
    if server not in servers:
        raise ValueError(f"Expected server in {list(servers.keys())}, got {server}.")

    return servers[server]


# =======================================================
# ==== config file
# =======================================================


def get_osfget_home() -> Path:
    """Returns the home directory for osfget.

    Makes the directory if it doesn't exist.
    """
    return checkdir(Path.home() / ".osfget")


def get_config_file() -> Path:
    """Returns the path to the osfget config file. It may not exist."""
    return get_osfget_home() / "config.yaml"


def get_config() -> dict[str, Any]:
    """Loads the osfget config file. Returns an empty dict if not configured."""
    file = get_config_file()
    if not file.exists():
        return {}

    return load_yaml(file) or {}


def get_default_log_dir() -> Path:
    """Returns path to default logging directory."""
    return checkdir(get_osfget_home() / "logs")


def get_log_dir() -> Path:
    """Return log directory defined in config, or the default."""
    logs = get_config().get("logs")
    if logs is None:
        return get_default_log_dir()

    return checkdir(Path(logs))


def get_server() -> str:
    """Return the configured OSF server name.

    `OSF_SERVER` takes precedence over the config file.
    """
    server = os.environ.get(SERVER_ENVVAR) or get_config().get("server")

    return server or DEFAULT_SERVER


def get_pat() -> str | None:
    """Return the OSF personal access token, if any.

    `OSF_PAT` takes precedence over the config file.
    """
    return os.environ.get(PAT_ENVVAR) or get_config().get("pat")
