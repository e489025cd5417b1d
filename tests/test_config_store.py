import json
from pathlib import Path

from admin_console.app.config_store import AppConfig, CONFIG_VERSION, load_config, save_config


def test_load_returns_defaults_when_missing(tmp_path: Path):
    cfg = load_config(tmp_path)
    assert cfg.version == CONFIG_VERSION
    assert cfg.last_screen == "users"
    assert cfg.window_x is None


def test_save_and_reload(tmp_path: Path):
    cfg = AppConfig(window_x=10, window_y=20, window_w=800, window_h=600, last_screen="roles")
    save_config(cfg, tmp_path)
    loaded = load_config(tmp_path)
    assert loaded.to_dict() == cfg.to_dict()
    assert loaded.is_geometry_complete()


def test_corrupt_file_graceful_fallback(tmp_path: Path):
    (tmp_path / "app_state.json").write_text("not json", encoding="utf-8")
    cfg = load_config(tmp_path)
    assert isinstance(cfg, AppConfig)
    assert cfg.window_x is None


def test_non_object_file_graceful_fallback(tmp_path: Path):
    (tmp_path / "app_state.json").write_text("[1, 2]", encoding="utf-8")
    assert load_config(tmp_path) == AppConfig()


def test_version_mismatch_resets(tmp_path: Path):
    data = {"version": CONFIG_VERSION + 1, "window_x": 1, "last_screen": "roles"}
    (tmp_path / "app_state.json").write_text(json.dumps(data), encoding="utf-8")
    cfg = load_config(tmp_path)
    assert cfg.window_x is None
    assert cfg.last_screen == "users"
