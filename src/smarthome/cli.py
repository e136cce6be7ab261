"""Command-line interface for SmartHome Rules.

This module provides the CLI commands for running the API server and
trying out trigger conditions and action scripts locally.
"""

import json
import sys

import click

from smarthome import __version__
from smarthome.core.config import get_settings
from smarthome.core.logging import configure_logging, get_logger
from smarthome.core.rules import evaluate_expression
from smarthome.core.scripting import ActionScriptParser
from smarthome.domain.services.variable_parser import coerce_variables


@click.group()
@click.version_option(version=__version__, prog_name="SmartHome Rules")
def cli() -> None:
    """SmartHome Rules - automation rule engine.

    Settings are read from SMARTHOME_* environment variables or a .env file.
    """


@cli.command()
@click.option("--host", type=str, default=None, help="Host to bind to (overrides config)")
@click.option("--port", type=int, default=None, help="Port to bind to (overrides config)")
@click.option(
    "--reload",
    is_flag=True,
    default=False,
    help="Enable auto-reload for development",
)
def serve(host: str | None, port: int | None, reload: bool) -> None:
    """Start the SmartHome Rules API server."""
    import uvicorn

    settings = get_settings()
    bind_host = host or settings.host
    bind_port = port or settings.port

    configure_logging(settings)

    logger = get_logger(__name__)
    logger.info(
        "Starting SmartHome Rules server",
        host=bind_host,
        port=bind_port,
        reload=reload,
        environment=settings.environment,
    )

    uvicorn.run(
        "smarthome.infrastructure.api.app:app",
        host=bind_host,
        port=bind_port,
        reload=reload,
        log_level=settings.log_level.lower(),
        access_log=True,
    )


def _split_var(ctx: click.Context, param: click.Parameter, values: tuple[str, ...]) -> dict:
    pairs = {}
    for value in values:
        key, sep, raw = value.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"expected KEY=VALUE, got '{value}'")
        pairs[key.strip()] = raw
    return pairs


@cli.command()
@click.argument("rule", required=False)
@click.option(
    "--var",
    "variables",
    multiple=True,
    callback=_split_var,
    help="Variable as KEY=VALUE; may be repeated",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    default="WARNING",
    help="Log level for messages written to stderr",
)
def evaluate(rule: str | None, variables: dict, log_level: str) -> None:
    """Evaluate a trigger condition and print the result as JSON.

    Example:

        smarthome evaluate "motion AND hour >= 18" --var motion=true --var hour=20
    """
    configure_logging(get_settings(), level_name=log_level, stream=sys.stderr)

    detail = evaluate_expression(rule, coerce_variables(variables))
    click.echo(json.dumps(detail, indent=2))


@cli.command("parse-script")
@click.argument("script")
def parse_script(script: str) -> None:
    """Show how an action script splits into statements."""
    statements = ActionScriptParser().parse(script)
    if not statements:
        click.echo("No statements")
        return

    for statement in statements:
        if statement.is_valid:
            click.echo(f"{statement.function}({statement.argument})")
        else:
            click.echo(f"ignored: {statement.text} ({statement.error})")


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
