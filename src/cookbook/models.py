"""Data models for the flat-file recipe store."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

# Usable characters per field; longer input is truncated, never rejected.
TITLE_MAX = 29
BODY_MAX = 999

# parse_recipe_id accepts what fits an unsigned 16-bit id
_MAX_RECIPE_ID = 0xFFFF


class InvalidRecipeId(ValueError):
    """Raised when user input cannot be read as a recipe ID."""


def clip(text: str, limit: int) -> str:
    """Cut text at the first line terminator, then to at most `limit` chars."""
    for i, ch in enumerate(text):
        if ch in "\r\n":
            text = text[:i]
            break
    return text[:limit]


def usable_title(title: str) -> str:
    """Clip a title; "" when nothing but whitespace survives the clip."""
    clipped = clip(title, TITLE_MAX)
    return clipped if clipped.strip() else ""


def title_key(title: str) -> str:
    """Sort key: every character folded to lower case."""
    return title.lower()


def compare_titles(a: str, b: str) -> int:
    """Case-insensitive three-way comparison of two titles.

    Negative if a sorts first, zero if equal ignoring case, positive otherwise.
    """
    ka, kb = title_key(a), title_key(b)
    return (ka > kb) - (ka < kb)


def parse_recipe_id(text: str) -> int:
    """Parse a recipe ID typed by the user.

    Leading/trailing whitespace is ignored. Anything else that is not a
    non-negative integer below 65536 raises InvalidRecipeId.
    """
    raw = text.strip()
    if not (raw.isascii() and raw.isdigit()):
        msg = f"Invalid recipe ID: {text.strip()!r}"
        raise InvalidRecipeId(msg)
    value = int(raw)
    if value > _MAX_RECIPE_ID:
        msg = f"Recipe ID out of range: {value}"
        raise InvalidRecipeId(msg)
    return value


@dataclass
class Recipe:
    """One titled entry of the cookbook."""

    id: int
    title: str
    body: str = ""

    @classmethod
    def new(cls, recipe_id: int, title: str, body: str = "") -> Recipe:
        """Build a recipe with both fields clipped to their capacity."""
        return cls(id=recipe_id, title=clip(title, TITLE_MAX), body=clip(body, BODY_MAX))

    @property
    def sort_key(self) -> str:
        return title_key(self.title)


class Outcome(StrEnum):
    CREATED = "created"
    UPDATED = "updated"          # fields changed, position kept
    RESORTED = "resorted"        # title changed, record re-inserted
    DELETED = "deleted"
    NO_CHANGES = "no_changes"    # neither title nor body supplied
    NOT_FOUND = "not_found"
    EMPTY = "empty"              # nothing to delete


@dataclass
class ChangeResult:
    """What a create/update/delete did, and whether the file caught up."""

    outcome: Outcome
    recipe: Recipe | None = None
    saved: bool = False
