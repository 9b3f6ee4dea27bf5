from __future__ import annotations

import json

import anyio
import click
from mcp.shared.exceptions import McpError
from rich.console import Console

from . import __version__
from .dispatcher import Dispatcher
from .logutil import init_logging
from .settings import settings
from .server import serve
from .tools.results import render_text

console = Console()


def _parse_value(raw: str):
    lowered = raw.strip().lower()
    if lowered in {"true", "false"}:
        return lowered == "true"
    return raw


def _parse_arguments(items: tuple[str, ...]) -> dict:
    args: dict = {}
    for item in items:
        if "=" not in item:
            raise click.ClickException(f"Invalid --arg value '{item}'. Expected key=value")
        key, value = item.split("=", 1)
        args[key.strip()] = _parse_value(value)
    return args


@click.group()
@click.version_option(version=__version__)
@click.option(
    "--log-level",
    default=lambda: settings.log_level,
    help="Logging level: DEBUG|INFO|WARNING|ERROR",
)
@click.pass_context
def cli_main(ctx: click.Context, log_level: str) -> None:
    """avalanche-installer: MCP server that installs and maintains Avalanche CLI."""
    ctx.ensure_object(dict)
    init_logging(settings, level=log_level)
    ctx.obj["dispatcher"] = Dispatcher()


@cli_main.command("serve")
@click.pass_context
def serve_cmd(ctx: click.Context) -> None:
    """Run the MCP server on stdio."""
    dispatcher: Dispatcher = ctx.obj["dispatcher"]
    try:
        anyio.run(serve, dispatcher)
    except KeyboardInterrupt:
        # Ctrl+C is the normal way to stop a stdio server.
        return


@cli_main.command("tools")
@click.option("--json", "as_json", is_flag=True, help="Print the raw tool descriptors")
@click.pass_context
def tools_cmd(ctx: click.Context, as_json: bool) -> None:
    """List the operations the server advertises."""
    dispatcher: Dispatcher = ctx.obj["dispatcher"]
    if as_json:
        payload = [op.model_dump() for op in dispatcher.registry]
        click.echo(json.dumps(payload, indent=2))
        return
    for op in dispatcher.registry:
        console.print(f"[bold]{op.name}[/bold]: {op.description}")


@cli_main.command("call")
@click.argument("name")
@click.option(
    "--arg",
    "-a",
    "arg_items",
    multiple=True,
    help="Operation argument, format: key=value (can be given multiple times)",
)
@click.pass_context
def call_cmd(ctx: click.Context, name: str, arg_items: tuple[str, ...]) -> None:
    """Run a single operation locally and print its JSON result."""
    dispatcher: Dispatcher = ctx.obj["dispatcher"]
    arguments = _parse_arguments(arg_items)
    try:
        result = dispatcher.call(name, arguments)
    except McpError as exc:
        raise click.ClickException(f"[{exc.error.code}] {exc.error.message}") from exc
    click.echo(render_text(result))


if __name__ == "__main__":
    cli_main()
