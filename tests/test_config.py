from __future__ import annotations

from pathlib import Path

import pytest

from cookbook.config import ConfigError, init_config, load_config, normalize_level


def test_defaults_without_config_file(tmp_path: Path) -> None:
    cfg = load_config(tmp_path)
    assert cfg.root == tmp_path
    assert cfg.file == tmp_path / "receipts.txt"
    assert cfg.name == "Diego's Cookbook"
    assert cfg.log.level == "INFO"


def test_reads_config_file(tmp_path: Path) -> None:
    (tmp_path / "cookbook.toml").write_text(
        '[cookbook]\nname = "Test Kitchen"\nfile = "data/recipes.txt"\n\n[log]\nlevel = "warn"\n'
    )
    cfg = load_config(tmp_path)
    assert cfg.name == "Test Kitchen"
    assert cfg.file == tmp_path / "data" / "recipes.txt"
    assert cfg.log.level == "WARNING"


def test_finds_config_in_parent(tmp_path: Path) -> None:
    (tmp_path / "cookbook.toml").write_text('[cookbook]\nname = "Parent"\n')
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)
    cfg = load_config(nested)
    assert cfg.root == tmp_path
    assert cfg.name == "Parent"


def test_searches_from_cwd_by_default(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / "cookbook.toml").write_text('[cookbook]\nfile = "mine.txt"\n')
    monkeypatch.chdir(tmp_path)
    assert load_config().file == tmp_path / "mine.txt"


def test_invalid_toml_raises(tmp_path: Path) -> None:
    (tmp_path / "cookbook.toml").write_text("[cookbook\n")
    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_unknown_log_level_raises(tmp_path: Path) -> None:
    (tmp_path / "cookbook.toml").write_text('[log]\nlevel = "LOUD"\n')
    with pytest.raises(ConfigError, match="LOUD"):
        load_config(tmp_path)


def test_normalize_level() -> None:
    assert normalize_level("debug") == "DEBUG"
    assert normalize_level("WARN") == "WARNING"


def test_init_config_writes_loadable_file(tmp_path: Path) -> None:
    path = init_config(tmp_path, name="Grandma's Recipes")
    assert path == tmp_path / "cookbook.toml"
    cfg = load_config(tmp_path)
    assert cfg.name == "Grandma's Recipes"
    assert cfg.file == tmp_path / "receipts.txt"
    with pytest.raises(FileExistsError):
        init_config(tmp_path)
