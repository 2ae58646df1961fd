# src/optionkit/cli.py
"""
optionkit Command Line Interface (CLI).

A small terminal front-end over the adapters, built with `typer` and `rich`.
Every command computes a `Maybe` and renders it; an absent result prints
`<Nothing>` and exits with code 1 so the commands compose in shell scripts.

Usage
-----
    # Query a JSON document by dotted path
    $ optionkit get config.json services.0.port --default 8080

    # Parse text without tracebacks
    $ optionkit parse "0x1f" --as int --base 16
"""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Annotated, Any

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape

from optionkit import __version__
from optionkit.adapters.mapping import lookup_path
from optionkit.adapters.parsing import parse_bool, parse_float, parse_int
from optionkit.core.errors import InvalidArgumentError
from optionkit.core.maybe import NOTHING_LITERAL, Maybe
from optionkit.core.settings import get_logger

# Ensure env vars (like LOG_LEVEL) are loaded before any logic runs
load_dotenv()

app = typer.Typer(
    help="optionkit: query JSON and parse text as explicit optional values.",
    rich_markup_mode="markdown",
)
console = Console()
logger = get_logger("optionkit.cli")


class ParseKind(str, Enum):
    """Target types accepted by `optionkit parse --as`."""

    INT = "int"
    FLOAT = "float"
    BOOL = "bool"


# --------------------------------------------------------------------------- #
# Helpers: Rendering
# --------------------------------------------------------------------------- #


def _render(result: Maybe[Any]) -> str:
    """Containers render as JSON; scalars use the option's own string form."""
    if result.has_value() and isinstance(result.unwrap(), dict | list):
        return json.dumps(result.unwrap(), indent=2, ensure_ascii=False)
    return str(result)


def _emit(result: Maybe[Any], default: str | None = None) -> None:
    """Print `result` (or `default`), exiting with code 1 when nothing is left."""
    if result.has_value():
        console.print(_render(result), markup=False, highlight=False, soft_wrap=True)
        return
    if default is not None:
        console.print(default, markup=False, highlight=False, soft_wrap=True)
        return
    console.print(NOTHING_LITERAL, style="dim", markup=False, highlight=False)
    raise typer.Exit(code=1)


# --------------------------------------------------------------------------- #
# Commands
# --------------------------------------------------------------------------- #


@app.command()  # type: ignore[misc]
def get(
    file: Annotated[
        Path,
        typer.Argument(
            exists=True,
            file_okay=True,
            dir_okay=False,
            readable=True,
            help="Path to a JSON document.",
        ),
    ],
    path: Annotated[
        str,
        typer.Argument(help="Dotted path such as 'users.0.name'. Empty selects the document."),
    ] = "",
    default: Annotated[
        str | None,
        typer.Option("--default", "-d", help="Printed instead of <Nothing> when the path is absent."),
    ] = None,
    sep: Annotated[
        str,
        typer.Option("--sep", help="Path separator."),
    ] = ".",
) -> None:
    """
    Print the value found at PATH inside a JSON document.

    Missing keys, out-of-range indexes and `null` values are all absent.
    """
    try:
        data = json.loads(file.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        console.print(f"[bold red]❌ Cannot read {escape(file.name)}:[/bold red] {escape(str(e))}")
        raise typer.Exit(code=2) from e

    result = lookup_path(data, path, sep=sep)
    logger.debug("get %s %r -> %r", file.name, path, result)
    _emit(result, default)


@app.command()  # type: ignore[misc]
def parse(
    text: Annotated[str, typer.Argument(help="Text to parse.")],
    kind: Annotated[
        ParseKind,
        typer.Option("--as", help="Target type.", case_sensitive=False),
    ] = ParseKind.INT,
    base: Annotated[
        int,
        typer.Option("--base", help="Radix for integers (0 honours 0x/0o/0b prefixes)."),
    ] = 10,
) -> None:
    """Parse TEXT as an int, float or bool and print the value or <Nothing>."""
    result: Maybe[Any]
    if kind is ParseKind.INT:
        try:
            result = parse_int(text, base=base)
        except InvalidArgumentError as e:
            raise typer.BadParameter(str(e), param_hint="--base") from e
    elif kind is ParseKind.FLOAT:
        result = parse_float(text)
    else:
        result = parse_bool(text)
    logger.debug("parse %r as %s -> %r", text, kind.value, result)
    _emit(result)


@app.command()  # type: ignore[misc]
def version() -> None:
    """Print the installed optionkit version."""
    console.print(__version__, highlight=False)


if __name__ == "__main__":
    app()
