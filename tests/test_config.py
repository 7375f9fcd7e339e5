from pathlib import Path

import pytest

from screenshot_cli.config import (
    config_defaults,
    config_to_dict,
    load_config,
    validate_config_dict,
    validate_config_file,
)


def test_defaults(tmp_path):
    config = load_config(config_path=tmp_path / "none.yaml")

    assert config.recent_paths_limit == 3
    assert config.filename_prefix == "screenshot"
    assert config.default_type is None
    assert config.emit_events is False
    assert config.cache_dir == tmp_path / "cache"
    assert config.recent_paths_file == tmp_path / "cache" / "recent-paths.json"


def test_file_then_env_then_overrides(tmp_path, monkeypatch):
    path = tmp_path / "config.yaml"
    path.write_text("filename_prefix: shot\nrecent_paths_limit: 5\ndefault_type: window\n")
    monkeypatch.setenv("SCREENSHOT_CLI_RECENT_PATHS_LIMIT", "7")
    monkeypatch.setenv("SCREENSHOT_CLI_EMIT_EVENTS", "yes")

    config = load_config(config_path=path, overrides={"default_type": "full", "filename_prefix": None})

    assert config.filename_prefix == "shot"
    assert config.recent_paths_limit == 7
    assert config.emit_events is True
    assert config.default_type == "full"


def test_config_path_from_env(tmp_path, monkeypatch):
    path = tmp_path / "elsewhere.yaml"
    path.write_text("filename_prefix: env-file\n")
    monkeypatch.setenv("SCREENSHOT_CLI_CONFIG", str(path))

    assert load_config().filename_prefix == "env-file"


def test_bad_env_integer_is_ignored(monkeypatch, tmp_path):
    monkeypatch.setenv("SCREENSHOT_CLI_RECENT_PATHS_LIMIT", "lots")
    assert load_config(config_path=tmp_path / "none.yaml").recent_paths_limit == 3


def test_unparseable_file_is_ignored_unless_strict(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("filename_prefix: [unclosed\n")

    assert load_config(config_path=path).filename_prefix == "screenshot"
    with pytest.raises(ValueError):
        load_config(config_path=path, strict=True)


def test_unknown_file_keys_do_not_break_loading(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("legacy_option: foo\nfilename_prefix: x\n")
    assert load_config(config_path=path).filename_prefix == "x"


def test_validate_config_dict():
    assert validate_config_dict(config_defaults()) == []
    errors = validate_config_dict({
        "bogus": 1,
        "recent_paths_limit": -1,
        "default_type": "region",
        "emit_events": "yes",
        "filename_prefix": "a/b",
    })
    assert "Unknown config key: bogus" in errors
    assert "recent_paths_limit must be >= 0" in errors
    assert "default_type must be one of: full, window" in errors
    assert "emit_events must be a boolean" in errors
    assert "filename_prefix must not contain path separators" in errors
    assert validate_config_dict(["not", "a", "mapping"]) == ["Config must be a mapping/object"]


def test_validate_config_file(tmp_path):
    assert validate_config_file(tmp_path / "missing.yaml") == []

    bad = tmp_path / "bad.yaml"
    bad.write_text("- just\n- a list\n")
    assert validate_config_file(bad) == [f"Config file {bad} must be a mapping"]


def test_config_to_dict_round_trips_through_load(tmp_path):
    config = load_config(config_path=tmp_path / "none.yaml")
    data = config_to_dict(config)
    assert data["cache_dir"] == str(tmp_path / "cache")
    assert Path(data["cache_dir"]) == config.cache_dir


def test_wrongly_typed_file_values_fall_back_to_defaults(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text('recent_paths_limit: "3"\ncache_dir:\nfilename_prefix: shot\n')

    config = load_config(config_path=path)

    assert config.recent_paths_limit == 3
    assert config.cache_dir == tmp_path / "cache"
    assert config.recent_paths_file == tmp_path / "cache" / "recent-paths.json"
    assert config.filename_prefix == "shot"
