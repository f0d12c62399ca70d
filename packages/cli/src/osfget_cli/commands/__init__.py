from osfget_cli.commands.download import download
from osfget_cli.commands.setup import setup

__all__ = ["download", "setup"]
