"""
CLI entry point for osfget.

Date: 2026-10-18

Last updated: 2026-10-18
"""

import click

from osfget_cli.commands import download, setup


@click.group()
def main():
    pass


main.add_command(setup)
main.add_command(download)

if __name__ == "__main__":
    main()
