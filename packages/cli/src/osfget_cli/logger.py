"""
Logger setup.

Date: 2026-10-18

Last updated: 2026-10-18
"""

from __future__ import annotations

import logging
from datetime import datetime
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import TYPE_CHECKING

from osfget_core.util.supported import get_log_dir
from rich.logging import RichHandler

from osfget_cli.util.checkers import check_loglevel

if TYPE_CHECKING:
    from rich.console import Console


class ColoredFormatter(logging.Formatter):
    """Console color logger formatter."""

    COLORS = {
        "DEBUG": "cyan",
        "INFO": "green",
        "WARNING": "yellow",
        "ERROR": "red",
        "CRITICAL": "bold red",
    }

    def format(self, record):
        levelname = record.levelname
        color = self.COLORS.get(levelname, "white")
        record.levelname = f"[{color}][{levelname}][/{color}]"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def setup_logger(
    name: str,
    console: Console,
    level: int | str = logging.INFO,
    log_dir: str | Path | None = None,
) -> logging.Logger:
    """
    Sets up a logger.

    Parameters
    ----------
    name: str
        Logger name.

    console: rich.console.Console
        Console the rich handler writes to.

    level: int | str
        Logging level.

    log_dir: str | Path | None
        Path to logging directory. Default is the `logs` entry of the
        config, or ~/.osfget/logs

    Returns
    -------
        Configured logger.

    """
    logger = logging.getLogger(name)
    _level = check_loglevel(level)

    if logger.hasHandlers():
        return logger

    logger.setLevel(_level)

    # rich console handler
    console_handler = RichHandler(
        console=console,
        rich_tracebacks=True,
        markup=True,
        show_level=False,
        show_time=True,
        show_path=False,
        log_time_format="[%x %X]",
        omit_repeated_times=False,
    )

    console_formatter = ColoredFormatter(
        fmt="{levelname} {message}",
        style="{",
    )
    console_handler.setFormatter(console_formatter)
    logger.addHandler(console_handler)

    # file handler
    if log_dir is None:
        log_dir = get_log_dir()
    # one log per command, e.g. download__10-18-2026__14hr_05min.log
    command = name.rsplit(".", maxsplit=1)[-1]
    date_time = datetime.now().strftime("%m-%d-%Y__%Hhr_%Mmin")
    file_handler = TimedRotatingFileHandler(
        Path(log_dir) / f"{command}__{date_time}.log",
        when="midnight",
        interval=1,
        backupCount=30,
        encoding="utf-8",
    )
    # file formatter
    file_formatter = logging.Formatter(
        fmt="[{asctime}] [{levelname}] {message}",
        style="{",
        datefmt="%Y-%m-%d %H:%M",
    )
    file_handler.setFormatter(file_formatter)
    logger.addHandler(file_handler)

    return logger
