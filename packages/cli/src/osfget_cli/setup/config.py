"""
Class to set up the osfget configuration file.

Date: 2026-10-18

Last updated: 2026-10-18
"""

import sys
from pathlib import Path
from typing import TYPE_CHECKING

import yaml
from osfget_core.util.progress import console
from osfget_core.util.supported import (
    DEFAULT_SERVER,
    get_config_file,
    get_default_log_dir,
)

from osfget_cli.logger import setup_logger
from osfget_cli.util.checkers import check_server

if TYPE_CHECKING:
    import logging


CONFIG_FILE: Path = get_config_file()


class Config:
    """Class to store, assess and create the osfget configuration file.

    Attributes:
        server (str):
            Name of the OSF server (`production` or `test`).

        pat (str | None):
            OSF personal access token. If None, a token already in the
            config is kept.

        logs (str):
            Path to where the osfget logs are stored.

        ok_keys (list[str]):
            Acceptable keys in the config.
    """

    def __init__(
        self,
        server,
        pat,
        logs,
        logger=None,
        loglevel=20,
        verbose=True,
    ):
        self.server: str = check_server(server)
        self.pat: str | None = pat
        self.logs: str = logs

        if logger is None:
            logger = setup_logger(
                __name__, level=loglevel, log_dir=logs, console=console
            )
        self.logger: logging.Logger = logger
        self.verbose = verbose

        self.ok_keys: list[str] = ["server", "pat", "logs"]

    def check(self):
        """Checks if the osfget config exists. Initializes if not."""
        if not CONFIG_FILE.exists():
            if self.verbose:
                self.logger.debug("Initializing new config file %s", CONFIG_FILE)
            CONFIG_FILE.touch()

        else:
            if self.verbose:
                self.logger.debug("Config file exists: %s", CONFIG_FILE)
                self.logger.debug("Running config check...")
            # check existing
            if not self.is_acceptable_config():
                if self.verbose:
                    self.logger.warning(
                        "Incorrect configuration detected. Resetting with defaults."
                    )
                self.set_default()

    def is_acceptable_config(self):
        """Checks if config has correct structure."""
        config = self.load_config()

        if config is None:
            if self.verbose:
                self.logger.debug("Existing config is empty.")
            return False

        return sorted(list(config.keys())) == sorted(self.ok_keys)

    def load_config(self) -> dict[str, str | None]:
        """Loads the osfget config file."""
        with open(CONFIG_FILE, "r", encoding="utf-8") as stream:
            try:
                return yaml.safe_load(stream)
            except yaml.YAMLError as e:
                sys.exit(str(e))

    def make_config(self) -> dict[str, str | None]:
        """Creates the config dictionary"""
        return {
            "server": self.server,
            "pat": self.pat,
            "logs": self.logs,
        }

    def save_config(self, config: dict[str, str | None]):
        """Saves a config file.

        Arguments:
            config (dict[str, str | None]):
                A config with acceptable keys.

        """
        self.logger.info("Saving osfget config to %s", CONFIG_FILE)
        with open(CONFIG_FILE, "w", encoding="utf-8") as stream:
            try:
                yaml.safe_dump(config, stream)
            except yaml.YAMLError as e:
                sys.exit(str(e))
        self.logger.info("Done!")

    def setup(self):
        """Main setup function."""
        self.check()
        new = self.initialize_config()
        self.save_config(new)

    def set_default(self):
        """Overwrites the config with default arguments."""
        self.logger.info("Making config with default arguments.")
        self.save_config(
            {
                "server": DEFAULT_SERVER,
                "pat": None,
                "logs": str(get_default_log_dir()),
            }
        )

    def initialize_config(self):
        """Initialize the osfget config, keeping a stored token if none was given."""
        config = self.make_config()
        config["logs"] = str(Path(self.logs).resolve())

        if config["pat"] is None and self.is_acceptable_config():
            config["pat"] = self.load_config()["pat"]

        if self.verbose:
            # never log the token itself
            shown = {**config, "pat": "***" if config["pat"] else None}
            self.logger.debug("New configuration: %s", shown)

        return config

    @property
    def path(self) -> str:
        """Returns `/path/to/config.yaml`"""
        return str(CONFIG_FILE)
