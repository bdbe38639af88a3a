"""Cookbook: a catalog plus the file that mirrors it.

Every mutation goes through here so the file follows memory:
create appends one recipe, update and delete rewrite the whole file.
A failed write is logged and reported in ChangeResult.saved; the in-memory
change stands and the file catches up on the next successful rewrite.
"""

from __future__ import annotations

import logging
from pathlib import Path

from cookbook.catalog import Catalog
from cookbook.models import BODY_MAX, ChangeResult, Outcome, Recipe, clip, usable_title
from cookbook.store import RecipeFile

logger = logging.getLogger("cookbook.book")


class Cookbook:
    def __init__(self, store: RecipeFile, catalog: Catalog | None = None) -> None:
        self.store = store
        self.catalog = catalog if catalog is not None else Catalog()

    @classmethod
    def open(cls, path: Path | str) -> Cookbook:
        """Load the cookbook stored at path (empty if the file is missing)."""
        store = RecipeFile(path)
        return cls(store, store.load().catalog)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def list(self) -> list[tuple[int, str]]:
        return list(self.catalog.enumerate())

    def view(self, recipe_id: int) -> Recipe | None:
        return self.catalog.find_by_id(recipe_id)

    def __len__(self) -> int:
        return len(self.catalog)

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def create(self, title: str, body: str = "") -> ChangeResult:
        """Add a recipe and append it to the file.

        The title must keep some non-whitespace text after clipping.
        """
        clean_title = usable_title(title)
        if not clean_title:
            msg = f"Recipe title must not be empty: {title!r}"
            raise ValueError(msg)

        recipe = Recipe.new(self.catalog.assign_new_id(), clean_title, body)
        self.catalog.insert(recipe)

        saved = self.store.append(recipe)
        if not saved:
            logger.error("Failed to save receipt %s to the file.", recipe.title)
        return ChangeResult(Outcome.CREATED, recipe, saved=saved)

    def update(
        self,
        recipe_id: int,
        title: str | None = None,
        body: str | None = None,
    ) -> ChangeResult:
        """Change title and/or body of a recipe.

        None leaves a field alone; so does an empty string, or a title with
        nothing but whitespace left after clipping. The title counts
        as changed on any exact-string difference, including case only, and
        then the recipe is moved to its new sorted position. Any update of a
        recipe that exists rewrites the file, even if nothing actually differs.
        """
        if title is None and body is None:
            logger.info("No changes were made.")
            return ChangeResult(Outcome.NO_CHANGES)

        logger.debug("Searching for ID: %d...", recipe_id)
        recipe = self.catalog.find_by_id(recipe_id)
        if recipe is None:
            logger.warning("Receipt ID %d not found.", recipe_id)
            return ChangeResult(Outcome.NOT_FOUND)

        title_changed = False
        new_title = usable_title(title) if title else ""
        if new_title and new_title != recipe.title:
            recipe.title = new_title
            title_changed = True
        if body:
            recipe.body = clip(body, BODY_MAX)

        if title_changed:
            self.catalog.reinsert(recipe)
            logger.info("Receipt updated and re-sorted.")
            outcome = Outcome.RESORTED
        else:
            logger.info("Receipt updated (order unchanged).")
            outcome = Outcome.UPDATED

        saved = self.store.rewrite_all(self.catalog)
        return ChangeResult(outcome, recipe, saved=saved)

    def delete(self, recipe_id: int) -> ChangeResult:
        if not self.catalog:
            logger.warning("List is empty, nothing to delete.")
            return ChangeResult(Outcome.EMPTY)

        recipe = self.catalog.find_by_id(recipe_id)
        if recipe is None:
            logger.warning("Receipt ID %d not found.", recipe_id)
            return ChangeResult(Outcome.NOT_FOUND)

        self.catalog.detach(recipe)
        saved = self.store.rewrite_all(self.catalog)
        return ChangeResult(Outcome.DELETED, recipe, saved=saved)
