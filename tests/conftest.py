"""Shared fixtures: a recipe file under tmp_path and a cookbook opened on it."""

from __future__ import annotations

from pathlib import Path

import pytest

from cookbook.book import Cookbook


def write_recipes(path: Path, *pairs: tuple[str, str]) -> Path:
    path.write_text("".join(f"Name: {t}\nReceipt: {b}\n" for t, b in pairs), encoding="utf-8")
    return path


@pytest.fixture
def recipe_path(tmp_path: Path) -> Path:
    return tmp_path / "receipts.txt"


@pytest.fixture
def book(recipe_path: Path) -> Cookbook:
    """Cookbook on a file holding Soup(0), apple pie(1), Bread(2)."""
    write_recipes(
        recipe_path,
        ("Soup", "Boil water."),
        ("apple pie", "Bake apples."),
        ("Bread", "Knead dough."),
    )
    return Cookbook.open(recipe_path)
