"""Read and write the flat recipe file.

RecipeFile is the public API:
    store = RecipeFile("receipts.txt")
    result = store.load()            # LoadResult(catalog, loaded, discarded)
    store.append(recipe)             # after create
    store.rewrite_all(catalog)       # after update / delete

File layout (two lines per recipe, no separators, no escaping):
    Name: <title>
    Receipt: <body>
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from cookbook.catalog import Catalog
from cookbook.models import BODY_MAX, TITLE_MAX, Recipe, clip

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = logging.getLogger("cookbook.store")

TITLE_PREFIX = "Name: "
BODY_PREFIX = "Receipt: "


@dataclass
class LoadResult:
    catalog: Catalog
    loaded: int = 0
    discarded: int = 0     # title lines that never got a body


def format_recipe(recipe: Recipe) -> str:
    return f"{TITLE_PREFIX}{recipe.title}\n{BODY_PREFIX}{recipe.body}\n"


def parse_lines(lines: Iterable[str]) -> LoadResult:
    """Build a catalog from file lines.

    A title line opens a pending recipe; the next body line completes it and
    gives it the next ID in file order, starting at 0. A second title line
    before any body drops the pending one. Other lines are skipped.
    """
    catalog = Catalog()
    result = LoadResult(catalog=catalog)
    pending: str | None = None

    for raw in lines:
        line = raw.rstrip("\r\n")
        if line.startswith(TITLE_PREFIX):
            if pending is not None:
                logger.warning("Partial receipt data discarded: %r", pending)
                result.discarded += 1
            pending = clip(line[len(TITLE_PREFIX):], TITLE_MAX)
        elif pending is not None and line.startswith(BODY_PREFIX):
            body = clip(line[len(BODY_PREFIX):], BODY_MAX)
            catalog.insert(Recipe(id=result.loaded, title=pending, body=body))
            result.loaded += 1
            pending = None

    if pending is not None:
        logger.warning("Partial receipt data discarded.")
        result.discarded += 1

    return result


class RecipeFile:
    """Flat-file backing store for a catalog."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    def load(self) -> LoadResult:
        """Load the file into a new catalog. Missing file means empty catalog."""
        try:
            with self.path.open(encoding="utf-8", errors="replace") as f:
                result = parse_lines(f)
        except OSError:
            logger.warning("File does not exist, or could not be opened: %s", self.path)
            return LoadResult(catalog=Catalog())

        logger.info("%d receipt(s) loaded successfully!", result.loaded)
        return result

    # ------------------------------------------------------------------
    # Write
    # ------------------------------------------------------------------

    def append(self, recipe: Recipe) -> bool:
        """Append one recipe. Creates the file if needed."""
        try:
            with self.path.open("a", encoding="utf-8") as f:
                f.write(format_recipe(recipe))
        except OSError as exc:
            logger.error("Could not open file for writing: %s (%s)", self.path, exc)
            return False
        return True

    def rewrite_all(self, catalog: Catalog) -> bool:
        """Overwrite the file with every recipe in catalog order."""
        try:
            with self.path.open("w", encoding="utf-8") as f:
                f.writelines(format_recipe(r) for r in catalog)
        except OSError as exc:
            logger.error("Could not rewrite file: %s (%s)", self.path, exc)
            return False
        logger.info("File updated.")
        return True
