"""CLI: ray-debug log|text|color|confetti|clear"""

import json
from typing import Callable, Optional

import click
from rich.console import Console

from ray_debug.client import Ray

console = Console()


def _get_client(host: Optional[str], port: Optional[int]) -> Ray:
    from ray_debug.cli.main import _get_client
    return _get_client(host, port)


def _server_options(fn: Callable) -> Callable:
    fn = click.option("--json-output", "--json", is_flag=True, help="Echo the sent request as JSON.")(fn)
    fn = click.option("--port", default=None, type=int, help="Ray server port.")(fn)
    fn = click.option("--host", default=None, help="Ray server host.")(fn)
    return fn


def _report(client: Ray, json_output: bool) -> None:
    if json_output:
        click.echo(json.dumps(client.request.to_json(), indent=2))
        return
    entry = client.request.payloads[-1]
    console.print(f"[green]Sent[/green] {entry.type} [dim]({client.uuid})[/dim]")


@click.command("log")
@click.argument("values", nargs=-1, required=True)
@_server_options
def log_cmd(values: tuple[str, ...], host: Optional[str], port: Optional[int], json_output: bool):
    """Log one or more values."""
    client = _get_client(host, port).log(list(values))
    _report(client, json_output)


@click.command("text")
@click.argument("content")
@_server_options
def text_cmd(content: str, host: Optional[str], port: Optional[int], json_output: bool):
    """Send a text entry."""
    client = _get_client(host, port).text(content)
    _report(client, json_output)


@click.command("color")
@click.argument("color")
@_server_options
def color_cmd(color: str, host: Optional[str], port: Optional[int], json_output: bool):
    """Send a color entry (e.g. red, green, blue)."""
    client = _get_client(host, port).color(color)
    _report(client, json_output)


@click.command("confetti")
@_server_options
def confetti_cmd(host: Optional[str], port: Optional[int], json_output: bool):
    """Fire confetti."""
    client = _get_client(host, port).confetti()
    _report(client, json_output)


@click.command("clear")
@_server_options
def clear_cmd(host: Optional[str], port: Optional[int], json_output: bool):
    """Clear everything on the Ray screen."""
    client = _get_client(host, port).clear_all()
    _report(client, json_output)
