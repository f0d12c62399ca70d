"""
Rich progress displays.

Date: 2026-10-18

Last updated: 2026-10-18
"""

from rich.console import Console
from rich.progress import (
    BarColumn,
    DownloadColumn,
    Progress,
    TextColumn,
    TimeRemainingColumn,
    TransferSpeedColumn,
)

console = Console()


def progress_bar(padding: str = ""):
    """
    Creates a custom rich progress bar for byte transfers.

    Taken from Timothy Gebhard:
    https://timothygebhard.de/posts/richer-progress-bars-for-rich/

    """
    return Progress(
        TextColumn(
            padding + "{task.description} [progress.percentage]{task.percentage:>3.0f}%"
        ),
        BarColumn(),
        TextColumn("•"),
        DownloadColumn(),
        TextColumn("•"),
        TransferSpeedColumn(),
        TextColumn("•"),
        TimeRemainingColumn(),
        console=console,
        transient=True,
    )
