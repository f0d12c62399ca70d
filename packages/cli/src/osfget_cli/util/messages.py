"""
Templates for CLI errors.

Date: 2026-10-18

Last updated: 2026-10-18
"""

import sys

import click


def error(message):
    click.secho(f"ERROR: {message}", fg="red", err=True)
    sys.exit(1)
