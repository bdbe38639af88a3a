"""Flat-file cookbook: a sorted recipe catalog mirrored to a text file.

Layout:
    cookbook.toml        # optional config (name, file, log level)
    receipts.txt         # recipes, two lines each:
        Name: <title>
        Receipt: <body>

Writes: create appends one recipe; update and delete rewrite the whole file
from the in-memory catalog, which stays the source of truth for the session.
"""

from cookbook.book import Cookbook
from cookbook.catalog import Catalog, IdCounter
from cookbook.config import CookbookConfig, init_config, load_config
from cookbook.models import ChangeResult, Outcome, Recipe, compare_titles
from cookbook.store import LoadResult, RecipeFile

__all__ = [
    "Catalog",
    "ChangeResult",
    "Cookbook",
    "CookbookConfig",
    "IdCounter",
    "LoadResult",
    "Outcome",
    "Recipe",
    "RecipeFile",
    "compare_titles",
    "init_config",
    "load_config",
]
