# tests/test_config_logging.py

from __future__ import annotations

from pathlib import Path

import pytest

from drevo import config as config_module
from drevo.config import PROJECT_ROOT, DrevoConfig, get_config, load_config, reset_config
from drevo.logging import get_logger, module_log_filename


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    monkeypatch.delenv(config_module.CONFIG_ENV_VAR, raising=False)
    reset_config()
    yield
    reset_config()


def test_load_explicit_file(tmp_path: Path):
    path = tmp_path / "drevo.yml"
    path.write_text(
        "paths:\n  data_csv: /data/fam.csv\nlimits:\n  favorites_capacity: 5\ndebug: true\n",
        encoding="utf-8",
    )
    cfg = load_config(path)

    assert cfg.resolve_path("data_csv") == Path("/data/fam.csv")
    assert cfg.favorites_capacity == 5
    assert cfg.tree_max_depth == 13
    assert cfg.debug is True


def test_env_override_must_exist(tmp_path: Path, monkeypatch):
    monkeypatch.setenv(config_module.CONFIG_ENV_VAR, str(tmp_path / "missing.yml"))
    with pytest.raises(FileNotFoundError):
        load_config()


def test_missing_default_file_gives_defaults(tmp_path: Path, monkeypatch):
    monkeypatch.setattr(config_module, "CONFIG_PATH", tmp_path / "absent.yml")
    cfg = load_config()
    assert cfg.paths == {}
    assert cfg.favorites_capacity == 20


def test_relative_paths_anchor_at_project_root():
    cfg = DrevoConfig({"paths": {"media_dir": "data/media"}})
    assert cfg.resolve_path("media_dir") == PROJECT_ROOT / "data" / "media"
    assert cfg.resolve_path("info_dir") is None


def test_get_config_is_cached():
    assert get_config() is get_config()


def test_module_loggers_are_children_of_base():
    logger = get_logger("test_module")
    assert logger.name == "drevo.test_module"
    assert logger.parent is get_logger()
    assert get_logger("drevo.test_module") is logger


def test_module_logger_gets_one_file_handler():
    get_logger("test_files")
    logger = get_logger("test_files")
    files = [Path(h.baseFilename).name for h in logger.handlers if hasattr(h, "baseFilename")]
    assert files == [module_log_filename("test_files")] == ["drevo_test_files.log"]
