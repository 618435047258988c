"""Describe command for smartinit CLI."""

from __future__ import annotations

import json
from typing import Any, Dict

import typer

from smartinit.cli.constants import (
    EXIT_CONFIG_ERROR,
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    OutputFormat,
)


def render_text(description: Dict[str, Any]) -> str:
    lines = [description["class"]]
    for attr in description["attributes"]:
        if attr["required"]:
            lines.append(f"  {attr['name']}  (required)")
        else:
            lines.append(f"  {attr['name']}  = {attr['default']!r}")
    if description["callable"]:
        lines.append(f"  call -> {description['primary_operation']}()")
    return "\n".join(lines)


def register(app: typer.Typer) -> None:
    """Register the describe command with the app."""

    @app.command("describe")
    def describe(
        target: str = typer.Argument(..., help="Class to inspect, as 'module:Class'."),
        output_format: OutputFormat = typer.Option(
            OutputFormat.TEXT, "--output-format", "-o", help="Output format."
        ),
    ) -> None:
        """
        Print the declared attributes of a class.

        Examples:
            smartinit describe myapp.services:SendWelcome
            smartinit describe myapp.services:SendWelcome -o json
        """
        import smartinit
        from smartinit.cli.loader import TargetError, load_class
        from smartinit.errors import DeclarationError, format_error_for_cli

        try:
            cls = load_class(target)
            description = smartinit.describe(cls)
        except (TargetError, DeclarationError) as e:
            typer.secho(f"Error: {format_error_for_cli(e)}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=EXIT_CONFIG_ERROR)
        except Exception as e:
            typer.secho(f"Error: {format_error_for_cli(e)}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=EXIT_RUNTIME_ERROR)

        if output_format is OutputFormat.JSON:
            typer.echo(json.dumps(description, indent=2, default=repr))
        elif output_format is OutputFormat.YAML:
            import yaml

            typer.echo(yaml.safe_dump(json.loads(json.dumps(description, default=repr)), sort_keys=False))
        else:
            typer.echo(render_text(description))
        raise typer.Exit(code=EXIT_SUCCESS)
