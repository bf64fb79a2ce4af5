# -*- coding: utf-8 -*-
import json
import logging

from angie.math import Vec3
from angie.utils import Config, DEFAULT_CONFIG, init_logger, logger


def test_logger_name():
    assert logger.name == "angie"
    assert init_logger() is logger


def test_config_creates_default_file(tmp_path):
    path = tmp_path / "angie.json"
    cfg = Config(path)
    assert path.is_file()
    assert json.loads(path.read_text(encoding="utf-8")) == DEFAULT_CONFIG
    assert cfg.separator == ","
    assert cfg.normalized_epsilon == 1e-9


def test_config_loads_existing_file(tmp_path):
    path = tmp_path / "angie.json"
    path.write_text(json.dumps({"math": {"separator": ";"}}), encoding="utf-8")
    cfg = Config(path)
    assert cfg.separator == ";"
    # недостающий ключ берётся из DEFAULT_CONFIG
    assert cfg.normalized_epsilon == 1e-9
    assert cfg["logging"] == DEFAULT_CONFIG["logging"]

    v = Vec3().from_string("[1; 2; 3]", cfg.separator)
    assert v.to_array() == [1, 2, 3]


def test_config_broken_file_falls_back_to_defaults(tmp_path, caplog):
    path = tmp_path / "angie.json"
    path.write_text("{not json", encoding="utf-8")
    with caplog.at_level(logging.ERROR, logger="angie"):
        cfg = Config(path)
    assert "Cannot parse" in caplog.text
    assert cfg.data == DEFAULT_CONFIG
    assert json.loads(path.read_text(encoding="utf-8")) == DEFAULT_CONFIG


def test_config_setitem_saves(tmp_path):
    path = tmp_path / "angie.json"
    cfg = Config(path)
    cfg["math"] = {"separator": "|", "normalized_epsilon": 1e-6}
    assert Config(path).separator == "|"
    assert cfg.get("missing", 42) == 42
    # умолчания не меняются через экземпляр
    assert DEFAULT_CONFIG["math"]["separator"] == ","


def test_config_normalized_epsilon_used_by_vec3(tmp_path):
    path = tmp_path / "angie.json"
    path.write_text(json.dumps({"math": {"normalized_epsilon": 0.1}}), encoding="utf-8")
    cfg = Config(path)
    v = Vec3(1.05, 0, 0)
    assert not v.is_normalized()
    assert v.is_normalized(cfg.normalized_epsilon)


def test_config_apply_logging(tmp_path, restore_logger_level):
    path = tmp_path / "angie.json"
    path.write_text(json.dumps({"logging": {"level": "ERROR"}}), encoding="utf-8")
    assert Config(path).apply_logging() is logger
    assert logger.level == logging.ERROR


def test_config_null_sections_use_defaults(tmp_path, restore_logger_level):
    path = tmp_path / "angie.json"
    path.write_text(json.dumps({"math": None, "logging": None}), encoding="utf-8")
    cfg = Config(path)
    assert cfg.separator == ","
    assert cfg.normalized_epsilon == 1e-9
    cfg.apply_logging()
    assert logger.level == logging.INFO


def test_config_non_object_file_falls_back_to_defaults(tmp_path, caplog):
    path = tmp_path / "angie.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    with caplog.at_level(logging.ERROR, logger="angie"):
        cfg = Config(path)
    assert "JSON object" in caplog.text
    assert cfg.data == DEFAULT_CONFIG
