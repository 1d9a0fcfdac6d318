"""Helpers shared by the command modules."""

from __future__ import annotations

from typing import Any, NoReturn

import click

from ..config import Settings
from ..errors import NetworkConfigError
from ..log import fatal
from ..utils import marshal_json


def rpc_url_or_fatal(settings: Settings) -> str:
    try:
        return settings.rpc_url()
    except NetworkConfigError as exc:
        fatal(str(exc), exc.exit_code)


def echo_json(data: Any) -> None:
    try:
        text = marshal_json(data)
    except (TypeError, ValueError) as exc:
        fatal(f"Cannot marshal json: {exc}")
    click.echo(text)


def fail(context: str, exc: BaseException) -> NoReturn:
    fatal(f"{context}: {exc}", getattr(exc, "exit_code", 1))
