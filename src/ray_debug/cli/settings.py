"""CLI: ray-debug config show|set"""

import json

import click
from rich.console import Console
from rich.table import Table

from ray_debug import config as ray_config
from ray_debug.config import RayConfig, load_config, save_config
from ray_debug.errors import ConfigError

console = Console()


@click.group()
def config():
    """Client configuration."""


@config.command("show")
@click.option("--json-output", "--json", is_flag=True)
def config_show(json_output: bool):
    """Show the effective configuration."""
    try:
        cfg = load_config()
    except ConfigError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)
    if json_output:
        click.echo(json.dumps(cfg.model_dump(mode="json"), indent=2))
        return
    click.echo(f"Config file: {ray_config.CONFIG_FILE}")
    table = Table(title="Ray config")
    table.add_column("Key", style="bold")
    table.add_column("Value")
    for key, value in cfg.model_dump(mode="json").items():
        table.add_row(key, str(value))
    table.add_row("url", cfg.url)
    console.print(table)


@config.command("set")
@click.argument("key", type=click.Choice(sorted(RayConfig.model_fields)))
@click.argument("value")
def config_set(key: str, value: str):
    """Persist one setting to the config file."""
    try:
        current = load_config(environ={})
        updated = RayConfig.model_validate({**current.model_dump(), key: value})
    except (ConfigError, ValueError) as e:
        console.print(f"[red]Invalid value for {key}: {e}[/red]")
        raise SystemExit(1)
    path = save_config(updated)
    console.print(f"[green]Saved[/green] {key}={updated.model_dump(mode='json')[key]} to {path}")
