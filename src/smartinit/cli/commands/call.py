"""Call command for smartinit CLI."""

from __future__ import annotations

import json
from typing import List, Optional

import typer

from smartinit.cli.constants import (
    EXIT_CONFIG_ERROR,
    EXIT_CONTRACT_VIOLATION,
    EXIT_RUNTIME_ERROR,
    EXIT_SUCCESS,
    OutputFormat,
)


def register(app: typer.Typer) -> None:
    """Register the call command with the app."""

    @app.command("call")
    def call(
        target: str = typer.Argument(..., help="Callable class, as 'module:Class'."),
        attr: Optional[List[str]] = typer.Option(
            None,
            "--attr",
            "-a",
            help="Attribute as key=value (repeatable). Values are passed as strings.",
        ),
        output_format: OutputFormat = typer.Option(
            OutputFormat.TEXT, "--output-format", "-o", help="Output format."
        ),
        config_path: Optional[str] = typer.Option(
            None, "--config", help="Path to a smartinit config.yml."
        ),
        verbose: bool = typer.Option(
            False, "--verbose", "-v", help="Enable verbose output."
        ),
    ) -> None:
        """
        Construct a class from key=value attributes and run its primary operation.

        Examples:
            smartinit call myapp.services:SendWelcome -a user_id=42
            smartinit call myapp.services:Report -a month=2024-01 -o json
        """
        import smartinit
        from smartinit.cli.loader import TargetError, load_class, parse_assignments
        from smartinit.config.settings import resolve_effective_config
        from smartinit.errors import (
            AttributeContractError,
            ConfigError,
            DeclarationError,
            UnsupportedOperationError,
            format_error_for_cli,
        )
        from smartinit.logging import configure_logging, get_logger, log_exception

        # --- LOAD CONFIG ---
        try:
            config = resolve_effective_config(
                config_path=config_path,
                cli_overrides={"verbose": verbose or None},
            )
        except ConfigError as e:
            typer.secho(f"Config error: {format_error_for_cli(e)}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=EXIT_CONFIG_ERROR)
        configure_logging(level=config.log_level, verbose=config.verbose)

        # --- RESOLVE TARGET ---
        try:
            cls = load_class(target)
            kwargs = parse_assignments(attr or [])
        except TargetError as e:
            typer.secho(f"Error: {format_error_for_cli(e)}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=EXIT_CONFIG_ERROR)

        # --- RUN ---
        try:
            result = smartinit.call(cls, **kwargs)
        except (AttributeContractError, UnsupportedOperationError) as e:
            typer.secho(f"Contract violation: {format_error_for_cli(e)}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=EXIT_CONTRACT_VIOLATION)
        except DeclarationError as e:
            typer.secho(f"Error: {format_error_for_cli(e)}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=EXIT_CONFIG_ERROR)
        except Exception as e:
            log_exception(get_logger(__name__), f"{target} failed", e, verbose=config.verbose)
            typer.secho(f"Error: {format_error_for_cli(e)}", fg=typer.colors.RED, err=True)
            raise typer.Exit(code=EXIT_RUNTIME_ERROR)

        if output_format is OutputFormat.JSON:
            typer.echo(json.dumps(result, indent=2, default=repr))
        elif output_format is OutputFormat.YAML:
            import yaml

            typer.echo(yaml.safe_dump(json.loads(json.dumps(result, default=repr)), sort_keys=False))
        else:
            typer.echo(result if isinstance(result, str) else repr(result))
        raise typer.Exit(code=EXIT_SUCCESS)
