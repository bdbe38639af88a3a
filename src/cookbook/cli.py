"""cookbook CLI: recipes kept in a flat text file.

Commands:
    cookbook                         interactive menu (same as `cookbook menu`)
    cookbook init [NAME]             write a default cookbook.toml
    cookbook list                    list recipes in title order
    cookbook show ID                 print one recipe
    cookbook add TITLE [BODY]        add a recipe (appended to the file)
    cookbook update ID [-t T] [-b B] change title and/or body (file rewritten)
    cookbook delete ID               remove a recipe (file rewritten)
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import click

from cookbook.book import Cookbook
from cookbook.config import LOG_LEVELS, ConfigError, CookbookConfig, init_config, load_config, normalize_level
from cookbook.logs import setup_logging
from cookbook.models import InvalidRecipeId, Outcome, parse_recipe_id, usable_title

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


@dataclass
class _State:
    cfg: CookbookConfig
    file: Path

    def open_book(self) -> Cookbook:
        return Cookbook.open(self.file)


def _load_cfg() -> CookbookConfig:
    try:
        return load_config()
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc


class RecipeIdType(click.ParamType):
    """Click parameter for a recipe ID (non-negative, fits 16 bits)."""

    name = "id"

    def convert(self, value: object, param: click.Parameter | None, ctx: click.Context | None) -> int:
        if isinstance(value, int):
            return value
        try:
            return parse_recipe_id(str(value))
        except InvalidRecipeId as exc:
            self.fail(str(exc), param, ctx)


RECIPE_ID = RecipeIdType()


def _warn_unsaved(saved: bool) -> None:
    if not saved:
        click.echo("Warning: change kept in memory but the file could not be written", err=True)


# ---------------------------------------------------------------------------
# Root group
# ---------------------------------------------------------------------------


@click.group(invoke_without_command=True)
@click.version_option(package_name="cookbook")
@click.option(
    "--file", "file_", default=None, type=click.Path(dir_okay=False, path_type=Path),
    help="Recipe file (default: from cookbook.toml, else ./receipts.txt)",
)
@click.option(
    "--log-level", default=None, type=click.Choice(LOG_LEVELS + ["WARN"], case_sensitive=False),
    help="Minimum level for console log records",
)
@click.pass_context
def cli(ctx: click.Context, file_: Path | None, log_level: str | None) -> None:
    """cookbook: recipes in a flat text file."""
    cfg = _load_cfg()
    setup_logging(normalize_level(log_level) if log_level else cfg.log.level)
    ctx.obj = _State(cfg=cfg, file=file_ or cfg.file)
    if ctx.invoked_subcommand is None:
        ctx.invoke(menu)


# ---------------------------------------------------------------------------
# cookbook init
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("name", required=False)
@click.option("--dir", "root", default=".", show_default=True, help="Project root")
def init(name: str | None, root: str) -> None:
    """Write a default cookbook.toml in the given directory."""
    root_path = Path(root).resolve()
    try:
        config_path = init_config(root_path, name=name)
        click.echo(f"Created {config_path}")
    except FileExistsError:
        click.echo("cookbook.toml already exists, skipping init")


# ---------------------------------------------------------------------------
# cookbook menu
# ---------------------------------------------------------------------------


@cli.command()
@click.pass_obj
def menu(state: _State) -> None:
    """Interactive menu: display, add, view, update, delete."""
    from cookbook.menu import run_menu

    run_menu(state.open_book(), title=state.cfg.name)


# ---------------------------------------------------------------------------
# cookbook list / show
# ---------------------------------------------------------------------------


@cli.command("list")
@click.pass_obj
def list_(state: _State) -> None:
    """List recipes in title order."""
    book = state.open_book()
    rows = book.list()
    if not rows:
        click.echo("(no recipes)")
        return
    for recipe_id, title in rows:
        click.echo(f"[{recipe_id}] {title}")


@cli.command()
@click.argument("recipe_id", type=RECIPE_ID)
@click.pass_obj
def show(state: _State, recipe_id: int) -> None:
    """Print one recipe."""
    recipe = state.open_book().view(recipe_id)
    if recipe is None:
        raise click.ClickException(f"Recipe not found: {recipe_id}")
    click.echo(f"[{recipe.id}] {recipe.title}")
    click.echo("")
    click.echo(recipe.body)


# ---------------------------------------------------------------------------
# cookbook add / update / delete
# ---------------------------------------------------------------------------


@cli.command()
@click.argument("title")
@click.argument("body", required=False, default="")
@click.pass_obj
def add(state: _State, title: str, body: str) -> None:
    """Add a recipe.

    \b
    cookbook add "Pancakes" "Flour, milk, eggs. Whisk and fry."
    """
    if not usable_title(title):
        raise click.BadParameter("title must not be empty", param_hint="TITLE")
    result = state.open_book().create(title, body)
    recipe = result.recipe
    if recipe is None:
        raise click.ClickException(f"Could not create recipe: {title}")
    click.echo(f"Created [{recipe.id}] {recipe.title}")
    _warn_unsaved(result.saved)


@cli.command()
@click.argument("recipe_id", type=RECIPE_ID)
@click.option("--title", "-t", default=None, help="New title (empty keeps current)")
@click.option("--body", "-b", default=None, help="New body (empty keeps current)")
@click.pass_obj
def update(state: _State, recipe_id: int, title: str | None, body: str | None) -> None:
    """Change the title and/or body of a recipe."""
    result = state.open_book().update(recipe_id, title, body)
    if result.outcome is Outcome.NO_CHANGES:
        click.echo("No changes were made.")
        return
    if result.outcome is Outcome.NOT_FOUND:
        raise click.ClickException(f"Recipe not found: {recipe_id}")
    note = "re-sorted" if result.outcome is Outcome.RESORTED else "order unchanged"
    click.echo(f"Updated [{recipe_id}] ({note})")
    _warn_unsaved(result.saved)


@cli.command()
@click.argument("recipe_id", type=RECIPE_ID)
@click.pass_obj
def delete(state: _State, recipe_id: int) -> None:
    """Remove a recipe."""
    result = state.open_book().delete(recipe_id)
    if result.outcome is Outcome.EMPTY:
        raise click.ClickException("Cookbook is empty, nothing to delete")
    if result.outcome is Outcome.NOT_FOUND:
        raise click.ClickException(f"Recipe not found: {recipe_id}")
    recipe = result.recipe
    if recipe is None:
        raise click.ClickException(f"Recipe not found: {recipe_id}")
    click.echo(f"Deleted [{recipe_id}] {recipe.title}")
    _warn_unsaved(result.saved)
