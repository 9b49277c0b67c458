from __future__ import annotations

import json
import logging

import pytest

from richhdr.config import Config
from richhdr.config_schemas import (
    GeneralConfig,
    LoggingConfig,
    OutputConfig,
    RichHdrConfig,
    ScanConfig,
)
from richhdr.config_store import ConfigStore


def test_defaults(isolated_config):
    config = Config()
    assert config.config_path == str(isolated_config)
    assert config.max_scan_bytes == 0
    assert config.max_file_size_mb == 512
    assert config.require_mz is True
    assert config.json_indent == 2
    assert config.aggregate is False
    assert not isolated_config.exists()


def test_load_partial_file(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"scan": {"max_scan_bytes": 4096}, "output": {"aggregate": True}}))

    config = Config(str(path))

    assert config.max_scan_bytes == 4096
    assert config.aggregate is True
    assert config.require_mz is True
    assert config.get("output", "json_indent") == 2


def test_unknown_section_is_ignored(tmp_path, caplog):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"plugins": {"x": 1}, "scan": {"require_mz": False}}))

    with caplog.at_level(logging.WARNING, logger="richhdr"):
        config = Config(str(path))

    assert config.require_mz is False
    assert "plugins" not in config
    assert "unknown config section" in caplog.text


def test_invalid_value_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"scan": {"max_scan_bytes": -1}}))
    with pytest.raises(ValueError):
        Config(str(path))


def test_unknown_key_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"scan": {"max_scan_kb": 1}}))
    with pytest.raises(TypeError):
        Config(str(path))


def test_non_dict_section_raises(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"scan": 5}))
    with pytest.raises(TypeError):
        Config(str(path))


def test_malformed_json_keeps_defaults(tmp_path):
    path = tmp_path / "config.json"
    path.write_text("{not json")
    config = Config(str(path))
    assert config.config == RichHdrConfig().to_dict()


def test_set_get_and_save(tmp_path):
    path = tmp_path / "nested" / "config.json"
    config = Config(str(path))
    config.set("output", "json_indent", 4)
    config.save_config()

    assert config.json_indent == 4
    assert config["output"]["json_indent"] == 4
    assert Config(str(path)).json_indent == 4


def test_apply_overrides_keeps_other_keys():
    config = Config()
    config.apply_overrides({"output": {"aggregate": True}})
    assert config.aggregate is True
    assert config.json_indent == 2


def test_get_section_and_default():
    config = Config()
    assert config.get("scan")["require_mz"] is True
    assert config.get("missing", default="x") == "x"
    assert config.get("scan", "missing", 3) == 3


def test_env_var_selects_path(tmp_path, monkeypatch):
    path = tmp_path / "env.json"
    path.write_text(json.dumps({"scan": {"max_file_size_mb": 8}}))
    monkeypatch.setenv("RICHHDR_CONFIG", str(path))
    assert Config().max_file_size_mb == 8


def test_section_validation():
    with pytest.raises(ValueError):
        ScanConfig(max_file_size_mb=0)
    with pytest.raises(ValueError):
        OutputConfig(json_indent=-1)
    with pytest.raises(ValueError):
        LoggingConfig(level="LOUD")
    assert LoggingConfig(level="debug").numeric_level == logging.DEBUG
    assert GeneralConfig().verbose is False


def test_from_dict_and_merge():
    config = RichHdrConfig.from_dict({"general": {"verbose": True}})
    assert config.general.verbose is True
    merged = config.merge({"logging": {"level": "INFO"}})
    assert merged.general.verbose is True
    assert merged.logging.level == "INFO"
    with pytest.raises(TypeError):
        RichHdrConfig.from_dict([])  # type: ignore[arg-type]


def test_config_store_round_trip(tmp_path):
    store = ConfigStore(tmp_path / "a" / "b.json")
    assert not store.exists()
    assert store.save({"scan": {"require_mz": False}})
    assert store.exists()
    assert store.load() == {"scan": {"require_mz": False}}


def test_config_store_rejects_non_object(tmp_path):
    path = tmp_path / "list.json"
    path.write_text("[1, 2]")
    assert ConfigStore(path).load() is None
    assert ConfigStore(tmp_path / "missing.json").load() is None


def test_config_store_save_failure(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("")
    assert ConfigStore(blocker / "config.json").save({}) is False
