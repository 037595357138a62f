"""Diagnostics for CLI commands: logging setup and error exits.

Everything here writes to stderr; stdout is reserved for command results.
"""
from __future__ import annotations

import logging
import sys
from typing import NoReturn

import click
from rich.console import Console
from rich.logging import RichHandler

from .exit_codes import exit_code_description

LOGGER = logging.getLogger("stone_cli")


def configure_logging(level: str) -> None:
    handler = RichHandler(console=Console(stderr=True), show_path=False, show_time=False)
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format="%(message)s",
        handlers=[handler],
        force=True,
    )


def fail(stage: str, error: BaseException, code: int) -> NoReturn:
    """Report ``error`` as a one-line diagnostic and exit with ``code``."""
    LOGGER.debug("%s stage failed (%s)", stage, exit_code_description(code), exc_info=error)
    click.echo(f"Error: {stage}: {error}", err=True)
    sys.exit(code)
