"""Command-line interface for the Friend Watch Configurator.

Main entry point for the application.
"""
# Created: 2026-10-19

import sys
import logging
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from . import __version__
from .config.settings import load_settings, save_settings
from .errors import FriendWatchError
from .export import ConfigExporter
from .filters import FilterMode, filter_friends
from .importers import load_config_file, load_friends_file
from .models import WatchConfig


console = Console()


def setup_logging(verbose: bool = False, log_file: Optional[str] = None) -> None:
    """Configure logging with rich handler, or a plain file handler."""
    level = logging.DEBUG if verbose else logging.INFO

    if log_file:
        handler: logging.Handler = logging.FileHandler(log_file, encoding='utf-8')
        handler.setFormatter(logging.Formatter(
            "%(asctime)s %(levelname)s %(name)s: %(message)s"
        ))
    else:
        handler = RichHandler(console=console, rich_tracebacks=True)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[handler],
        force=True,
    )


@click.group(invoke_without_command=True)
@click.option('--version', is_flag=True, help='Show version and exit')
@click.option('-v', '--verbose', is_flag=True, help='Enable verbose logging')
@click.option('--config-dir', type=click.Path(file_okay=False),
              default=None, help='Configurator settings directory')
@click.option('--log-file', type=click.Path(dir_okay=False),
              default=None, help='Write logs to this file instead of the terminal')
@click.pass_context
def cli(ctx: click.Context, version: bool, verbose: bool,
        config_dir: Optional[str], log_file: Optional[str]):
    """Friend Watch Configurator - edit SwitchFriendWatch settings.

    Load a configuration.yaml and a friends list dump, pick friends to
    watch, give them aliases and save the result.
    """
    if version:
        click.echo(f"Friend Watch Configurator v{__version__}")
        sys.exit(0)

    setup_logging(verbose, log_file)

    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose
    ctx.obj['config_dir'] = Path(config_dir) if config_dir else None

    # If no subcommand, run the main TUI
    if ctx.invoked_subcommand is None:
        ctx.invoke(run)


@cli.command()
@click.option('--config', 'config_path', type=click.Path(exists=True, dir_okay=False),
              help='Settings YAML to load on startup')
@click.option('--friends', 'friends_path', type=click.Path(exists=True, dir_okay=False),
              help='Friends list JSON to load on startup')
@click.option('--output-dir', type=click.Path(file_okay=False),
              help='Directory to save configuration.yaml into')
@click.pass_context
def run(ctx: click.Context, config_path: Optional[str] = None,
        friends_path: Optional[str] = None, output_dir: Optional[str] = None):
    """Run the configurator TUI."""
    # Import here to defer loading textual
    from .app import FriendWatchApp

    config_dir = ctx.obj.get('config_dir') if ctx.obj else None

    app = FriendWatchApp(
        config_path=Path(config_path) if config_path else None,
        friends_path=Path(friends_path) if friends_path else None,
        output_dir=Path(output_dir) if output_dir else None,
        settings=load_settings(config_dir),
    )
    app.run()


@cli.command()
@click.argument('config_file', type=click.Path(exists=True, dir_okay=False))
@click.option('--output-dir', '-o', type=click.Path(file_okay=False),
              help='Directory to save configuration.yaml into')
@click.pass_context
def export(ctx: click.Context, config_file: str, output_dir: Optional[str]):
    """Normalize a settings file and save it as configuration.yaml.

    Missing ntfy fields are filled in with their defaults.

    Examples:
        fwconfig export old-config.yaml -o ~/SwitchFriendWatch
    """
    config_dir = ctx.obj.get('config_dir') if ctx.obj else None
    settings = load_settings(config_dir)
    exporter = ConfigExporter(settings.export)

    try:
        config = load_config_file(config_file)
        output_path = exporter.export(config, output_dir)
    except FriendWatchError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)

    console.print(f"[green]✓[/green] Saved {output_path}")
    console.print(f"  Aliases: {len(config.alias_map)}")
    console.print(f"  Watched: {len(config.watched_ids)}")


@cli.command()
@click.argument('friends_file', type=click.Path(exists=True, dir_okay=False))
@click.option('--config', 'config_path', type=click.Path(exists=True, dir_okay=False),
              help='Settings YAML providing watched ids and aliases')
@click.option('--search', '-s', default='', help='Only friends whose name contains this text')
@click.option('--filter', '-f', 'filter_mode',
              type=click.Choice([m.value for m in FilterMode], case_sensitive=False),
              default=FilterMode.ALL.value, help='Filter mode')
def friends(friends_file: str, config_path: Optional[str], search: str, filter_mode: str):
    """List friends with their status, watch flag and alias."""
    try:
        friend_list = load_friends_file(friends_file)
        config = load_config_file(config_path) if config_path else WatchConfig()
    except FriendWatchError as e:
        console.print(f"[red]Error:[/red] {escape(str(e))}")
        sys.exit(1)

    shown = filter_friends(friend_list, config, search, FilterMode(filter_mode.upper()))

    table = Table(title=f"Friends ({len(shown)} of {len(friend_list)})")
    table.add_column("Status")
    table.add_column("Name", style="bold")
    table.add_column("ID", style="dim")
    table.add_column("Watched", justify="center")
    table.add_column("Alias", style="cyan")
    table.add_column("Playing", style="italic")

    for friend in shown:
        table.add_row(
            friend.status,
            escape(friend.name or ""),
            escape(friend.nsa_id),
            "✓" if config.is_watched(friend.nsa_id) else "",
            escape(config.alias_for(friend.nsa_id)),
            escape(friend.playing or ""),
        )

    console.print(table)


@cli.command()
@click.option('--save', is_flag=True, help='Write the effective settings to the config file')
@click.pass_context
def settings(ctx: click.Context, save: bool):
    """Show the configurator's own settings."""
    config_dir = ctx.obj.get('config_dir') if ctx.obj else None
    current = load_settings(config_dir)

    for section, values in current.to_dict().items():
        console.print(f"[bold]{section}[/bold]")
        for key, value in values.items():
            console.print(f"  {key}: {value}")

    if save:
        path = save_settings(current, config_dir)
        console.print(f"\n[green]✓[/green] Saved {path}")


def main():
    """Main entry point."""
    try:
        cli()
    except KeyboardInterrupt:
        console.print("\n[yellow]Interrupted by user[/yellow]")
        sys.exit(0)
    except Exception as e:
        console.print(f"\n[red]Unexpected error:[/red] {e}")
        console.print_exception()
        sys.exit(1)


if __name__ == '__main__':
    main()
