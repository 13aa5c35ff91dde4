# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""
connstring CLI Commands.

Provides a command line interface to parse, build and sanitize connection
strings.
"""

from __future__ import annotations

import logging
from typing import NoReturn

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from connstring.cli.model_connstring_config import ModelConnstringConfig
from connstring.errors import ConnectionStringError
from connstring.types import ModelConnectionString
from connstring.utils import (
    build_connection_string,
    parse_connection_string,
    sanitize_connection_string,
)

console = Console()
err_console = Console(stderr=True)


@click.group()
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Parse, build and sanitize connection strings."""
    config = ModelConnstringConfig.from_env()
    logging.basicConfig(level=getattr(logging, config.log_level, logging.WARNING))
    ctx.obj = config


@cli.command("parse")
@click.argument("value")
@click.option(
    "--defaults",
    "defaults_value",
    default=None,
    help="Connection string whose values fill the gaps (default: CONNSTRING_DEFAULTS)",
)
@click.option(
    "--no-env-defaults",
    is_flag=True,
    default=False,
    help="Ignore CONNSTRING_DEFAULTS.",
)
@click.pass_obj
def parse_cmd(
    config: ModelConnstringConfig,
    value: str,
    defaults_value: str | None,
    no_env_defaults: bool,
) -> None:
    """Parse VALUE and print its components as JSON."""
    # An explicit --defaults wins over the environment
    if defaults_value is None and not no_env_defaults:
        defaults_value = config.defaults or None

    try:
        defaults = (
            parse_connection_string(defaults_value) if defaults_value else None
        )
        record = parse_connection_string(value, defaults)
    except ConnectionStringError as e:
        _fail(str(e))

    console.print_json(data=record.to_dict(), highlight=False)


@cli.command("build")
@click.argument("record_json")
def build_cmd(record_json: str) -> None:
    """Build a connection string from RECORD_JSON ("-" reads stdin)."""
    if record_json == "-":
        record_json = click.get_text_stream("stdin").read()

    try:
        record = ModelConnectionString.model_validate_json(record_json)
    except ValidationError as e:
        # Only field locations; input values may contain a password
        locations = sorted(
            {
                ".".join(str(part) for part in item["loc"]) or "<root>"
                for item in e.errors()
            }
        )
        _fail(f"Invalid record: {e.error_count()} error(s) in {', '.join(locations)}")

    _print_text(build_connection_string(record))


@cli.command("sanitize")
@click.argument("value")
def sanitize_cmd(value: str) -> None:
    """Print VALUE with its password masked."""
    _print_text(sanitize_connection_string(value))


def _print_text(text: str) -> None:
    console.print(text, markup=False, highlight=False, soft_wrap=True)


def _fail(message: str) -> NoReturn:
    err_console.print(
        f"[bold red]Error:[/bold red] {escape(message)}",
        highlight=False,
        soft_wrap=True,
    )
    raise SystemExit(1)


__all__: list[str] = ["cli"]
