"""
smartinit CLI

Thin layer: resolve target -> call library -> print.
"""

from __future__ import annotations

from typing import Optional

import typer

from smartinit.cli.commands import call, describe
from smartinit.version import VERSION

app = typer.Typer(help="smartinit CLI - inspect and call declarative classes")


@app.callback(invoke_without_command=True)
def _version(
    version: Optional[bool] = typer.Option(
        None, "--version", help="Show the smartinit version and exit.", is_eager=True
    )
) -> None:
    if version:
        typer.echo(f"smartinit {VERSION}")
        raise typer.Exit(code=0)


describe.register(app)
call.register(app)


def main() -> None:
    app()


if __name__ == "__main__":
    main()
