"""Interactive numbered menu over a Cookbook.

All input goes through click.prompt and all plain output through click.echo,
so the loop runs the same under click.testing.CliRunner as on a terminal.
End of input at any prompt leaves the menu.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from cookbook.models import InvalidRecipeId, Outcome, parse_recipe_id, usable_title

if TYPE_CHECKING:
    from cookbook.book import Cookbook

logger = logging.getLogger("cookbook.menu")

MENU_TEXT = """\
--- MENU ---
1. Display all
2. Add receipt
3. View receipt
4. Update receipt
5. Delete receipt
Q. Exit"""

_DISPLAY_ALL, _ADD, _VIEW, _UPDATE, _DELETE = "1", "2", "3", "4", "5"


def recipe_table(rows: list[tuple[int, str]]) -> Table:
    table = Table(show_header=True, header_style="bold", box=None, pad_edge=False)
    table.add_column("ID", justify="right", style="dim", no_wrap=True)
    table.add_column("Receipt name")
    for recipe_id, title in rows:
        table.add_row(Text(f"[{recipe_id}]"), Text(title))
    return table


def show_all(book: Cookbook, console: Console) -> bool:
    """Print the listing. False when there is nothing to show."""
    rows = book.list()
    if not rows:
        logger.info("The cookbook is empty!")
        return False
    console.print(recipe_table(rows))
    return True


def show_recipe(book: Cookbook, recipe_id: int, console: Console) -> bool:
    if not len(book):
        logger.warning("Receipt list is empty, nothing to view.")
        return False
    recipe = book.view(recipe_id)
    if recipe is None:
        logger.error("Receipt ID '%d' not found.", recipe_id)
        return False
    console.print(Panel(Text(recipe.body), title=Text(f"[{recipe.id}] {recipe.title}"), title_align="left"))
    return True


def _ask_id() -> int | None:
    raw = click.prompt("ID of the receipt (int)", default="", show_default=False)
    try:
        return parse_recipe_id(raw)
    except InvalidRecipeId:
        logger.warning("Invalid input.")
        return None


def _add(book: Cookbook) -> None:
    logger.info("Adding a new receipt...")
    title = click.prompt("Name", default="", show_default=False)
    body = click.prompt("Receipt", default="", show_default=False)
    if not usable_title(title):
        return
    result = book.create(title, body)
    if result.saved:
        logger.info("New receipt saved!")


def _update(book: Cookbook, console: Console) -> None:
    logger.info("Update receipt...")
    show_all(book, console)
    recipe_id = _ask_id()
    if recipe_id is None:
        return
    title = click.prompt("Name (Press 'Enter' to keep current)", default="", show_default=False)
    body = click.prompt("Receipt (Press 'Enter' to keep current)", default="", show_default=False)
    result = book.update(recipe_id, title, body)
    if result.outcome in (Outcome.UPDATED, Outcome.RESORTED):
        logger.info("Receipt '%d' is updated.", recipe_id)


def _delete(book: Cookbook, console: Console) -> None:
    logger.info("Delete receipt...")
    show_all(book, console)
    recipe_id = _ask_id()
    if recipe_id is None:
        return
    result = book.delete(recipe_id)
    if result.outcome is Outcome.DELETED:
        logger.info("Receipt '%d' is deleted.", recipe_id)


def run_menu(book: Cookbook, *, title: str = "Diego's Cookbook", console: Console | None = None) -> None:
    """Loop until the user picks Q or input runs out."""
    console = console or Console(highlight=False)
    click.echo(f"===== {title} =====")

    while True:
        click.echo(f"\n{MENU_TEXT}")
        try:
            choice = click.prompt("Choice", default="", show_default=False).strip()
            click.echo("")

            if choice[:1] in ("q", "Q"):
                break
            if choice == _DISPLAY_ALL:
                logger.info("Displaying all receipts...")
                show_all(book, console)
            elif choice == _ADD:
                _add(book)
            elif choice == _VIEW:
                show_all(book, console)
                recipe_id = _ask_id()
                if recipe_id is not None:
                    show_recipe(book, recipe_id, console)
            elif choice == _UPDATE:
                _update(book, console)
            elif choice == _DELETE:
                _delete(book, console)
            else:
                click.echo("Invalid option.")
        except click.Abort:
            break

    click.echo("Saving and exiting... Goodbye!")
