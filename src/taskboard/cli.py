"""Taskboard CLI - grouped ticket board."""

import json
import logging
import sys

import click

from .adapters.quicksell_api import FetchFailure, QuicksellAdapter
from .board import open_board
from .config import load_config
from .core.board import GROUP_BY_CHOICES, SORT_BY_CHOICES, build_user_index
from .core.cards import board_to_dict, format_board


@click.group()
@click.version_option()
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """Taskboard - grouped ticket board."""
    if debug:
        logging.basicConfig(
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
            level=logging.DEBUG,
        )


@main.command()
@click.option(
    "--group-by",
    type=click.Choice(GROUP_BY_CHOICES),
    default=None,
    help="Group columns by status, priority or user",
)
@click.option(
    "--sort-by",
    type=click.Choice(SORT_BY_CHOICES),
    default=None,
    help="Sort cards by priority or title",
)
@click.option(
    "--collapse",
    "collapsed",
    multiple=True,
    help="Collapse a column by its key (e.g. in-progress, priority-3)",
)
@click.option("--display", is_flag=True, help="Show the display settings panel")
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def board(group_by: str | None, sort_by: str | None, collapsed: tuple[str, ...], display: bool, as_json: bool):
    """Show the ticket board."""
    state = open_board(load_config(), group_by=group_by, sort_by=sort_by)
    columns = state.columns()

    if as_json:
        click.echo(json.dumps(board_to_dict(columns), indent=2, default=str))
        return

    if display:
        click.echo(f"Grouping: {state.snapshot.group_by}")
        click.echo(f"Ordering: {state.snapshot.sort_by}\n")

    if not columns:
        click.echo("No tickets.")
        return

    click.echo(format_board(columns, collapsed=set(collapsed)))


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
def users(as_json: bool):
    """List users and their availability."""
    state = open_board(load_config())
    index = build_user_index(state.snapshot.data.users)

    if as_json:
        click.echo(
            json.dumps(
                [
                    {"id": user_id, "name": info.name, "available": info.available}
                    for user_id, info in index.items()
                ],
                indent=2,
                default=str,
            )
        )
        return

    if not index:
        click.echo("No users.")
        return

    for user_id, info in index.items():
        marker = "●" if info.available else "○"
        click.echo(f"{marker} {info.name} ({user_id})")


@main.command()
def raw():
    """Dump the raw API response for debugging."""
    try:
        data = QuicksellAdapter(load_config()).fetch_raw()
    except FetchFailure as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    tickets = data.get("tickets") or []
    user_list = data.get("users") or []
    click.echo(json.dumps(data, indent=2, default=str))
    click.echo(f"\n{len(tickets)} tickets, {len(user_list)} users", err=True)


if __name__ == "__main__":
    main()
