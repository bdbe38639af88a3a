"""Sorted in-memory catalog of recipes.

Recipes are kept in case-insensitive title order. Equal titles keep the order
they were inserted in, so loading a file in order reproduces file order for
duplicates.

    catalog = Catalog()
    catalog.insert(Recipe(catalog.assign_new_id(), "Banana", "..."))
    for recipe_id, title in catalog.enumerate():
        ...
"""

from __future__ import annotations

from bisect import bisect_right
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

    from cookbook.models import Recipe


class IdCounter:
    """Hands out recipe IDs for one catalog.

    Unseeded until first use. The first call to next() seeds from the highest
    ID present (max + 1, or 0 when empty); after that it only counts up, so
    deleting recipes never makes an ID reusable.
    """

    def __init__(self) -> None:
        self._next: int | None = None

    @property
    def seeded(self) -> bool:
        return self._next is not None

    def next(self, existing: Iterable[Recipe]) -> int:
        if self._next is None:
            self._next = max((r.id for r in existing), default=-1) + 1
        value = self._next
        self._next += 1
        return value


class Catalog:
    """Owns the recipes and keeps them sorted by folded title."""

    def __init__(self, recipes: Iterable[Recipe] = ()) -> None:
        self._recipes: list[Recipe] = []
        self._keys: list[str] = []       # parallel to _recipes, for bisect
        self.ids = IdCounter()
        for recipe in recipes:
            self.insert(recipe)

    # ------------------------------------------------------------------
    # Container protocol
    # ------------------------------------------------------------------

    def __len__(self) -> int:
        return len(self._recipes)

    def __bool__(self) -> bool:
        return bool(self._recipes)

    def __iter__(self) -> Iterator[Recipe]:
        return iter(list(self._recipes))

    def __contains__(self, recipe: object) -> bool:
        return any(r is recipe for r in self._recipes)

    @property
    def first(self) -> Recipe | None:
        return self._recipes[0] if self._recipes else None

    # ------------------------------------------------------------------
    # Ordering
    # ------------------------------------------------------------------

    def insert(self, recipe: Recipe) -> int:
        """Insert after any run of equal titles. Returns the new position."""
        key = recipe.sort_key
        pos = bisect_right(self._keys, key)
        self._keys.insert(pos, key)
        self._recipes.insert(pos, recipe)
        return pos

    def detach(self, recipe: Recipe | None) -> Recipe | None:
        """Remove recipe without discarding it. None if there was nothing to do."""
        if recipe is None or not self._recipes:
            return None
        pos = self._index_of(recipe)
        if pos is None:
            return None
        del self._keys[pos]
        return self._recipes.pop(pos)

    def reinsert(self, recipe: Recipe) -> int:
        """Move a recipe whose title changed back to its sorted position."""
        self.detach(recipe)
        return self.insert(recipe)

    def _index_of(self, recipe: Recipe) -> int | None:
        for i, r in enumerate(self._recipes):
            if r is recipe:
                return i
        return None

    # ------------------------------------------------------------------
    # Lookup
    # ------------------------------------------------------------------

    def find_by_id(self, recipe_id: int) -> Recipe | None:
        for r in self._recipes:
            if r.id == recipe_id:
                return r
        return None

    def assign_new_id(self) -> int:
        return self.ids.next(self._recipes)

    def enumerate(self) -> Iterator[tuple[int, str]]:
        """(id, title) pairs in catalog order."""
        return ((r.id, r.title) for r in list(self._recipes))
