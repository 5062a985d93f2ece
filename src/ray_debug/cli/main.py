"""
Ray debug CLI — `ray-debug` command.

Commands:
  ray-debug log <value>...       Log one or more values
  ray-debug text <content>       Send a text entry
  ray-debug color <color>        Send a color entry
  ray-debug confetti             Fire confetti
  ray-debug clear                Clear the Ray screen
  ray-debug config show|set      Inspect or edit ~/.ray/config.json
"""

from typing import Optional

try:
    import click
    from rich.console import Console
except ImportError:
    raise SystemExit("CLI requires extras: pip install ray-debug[cli]")

from ray_debug import __version__
from ray_debug.client import Ray
from ray_debug.config import load_config
from ray_debug.dispatch import DispatchMode
from ray_debug.errors import ConfigError

console = Console()


def _get_client(host: Optional[str] = None, port: Optional[int] = None) -> Ray:
    # The process may exit right after the command, so always send inline.
    try:
        config = load_config(host=host, port=port, mode=DispatchMode.BLOCKING)
    except ConfigError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)
    return Ray(config=config)


@click.group()
@click.version_option(__version__)
def main():
    """Ray debug CLI: send debug events to a local Ray server."""


# Register subcommands from separate modules
from ray_debug.cli.events import log_cmd, text_cmd, color_cmd, confetti_cmd, clear_cmd
from ray_debug.cli.settings import config

main.add_command(log_cmd)
main.add_command(text_cmd)
main.add_command(color_cmd)
main.add_command(confetti_cmd)
main.add_command(clear_cmd)
main.add_command(config)


if __name__ == "__main__":
    main()
