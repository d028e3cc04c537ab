import json
import logging

import pytest

from table_rotate.src.core.grid import Grid
from table_rotate.src.transforms import rotate as rotate_mod
from table_rotate.src.transforms.rotate import Rotate, apply_rotation
from table_rotate.src.utils import config_loader
from table_rotate.src.utils.config_loader import load_config, load_rotate_config
from table_rotate.src.utils.logger import get_logger


class BrokenGrid(Grid):
    """Grid whose row swap silently does nothing."""

    def swap_row(self, r1, r2):
        return None


@pytest.fixture
def verify_enabled():
    previous = config_loader.VERIFY_ROTATION
    config_loader.set_verify_rotation(True)
    yield
    config_loader.set_verify_rotation(previous)


def test_packaged_config_defaults():
    cfg = load_rotate_config()
    assert cfg["verify_rotation"] is False
    assert cfg["default_direction"] == "left"
    assert cfg["log_level"] == "INFO"


def test_missing_config_is_empty(tmp_path):
    assert load_rotate_config(tmp_path / "absent.yaml") == {}


def test_load_json_and_yaml(tmp_path):
    j = tmp_path / "c.json"
    j.write_text(json.dumps({"verify_rotation": True}))
    y = tmp_path / "c.yaml"
    y.write_text("default_direction: right\n")
    assert load_config(str(j)) == {"verify_rotation": True}
    assert load_config(str(y)) == {"default_direction": "right"}


def test_unsupported_config_format(tmp_path):
    p = tmp_path / "c.ini"
    p.write_text("x=1")
    with pytest.raises(ValueError):
        load_config(str(p))


def test_verified_rotation_passes(verify_enabled):
    grid = Grid([[1, 2, 3], [4, 5, 6]])
    apply_rotation(Rotate.RIGHT, grid)
    assert grid.to_list() == [[4, 1], [5, 2], [6, 3]]


def test_verification_flags_broken_primitive(verify_enabled, caplog):
    grid = BrokenGrid([[1, 2], [3, 4]])
    with caplog.at_level(logging.ERROR, logger=rotate_mod.__name__):
        with pytest.raises(AssertionError):
            apply_rotation(Rotate.LEFT, grid)
    assert any("expected" in rec.message for rec in caplog.records)


def test_rotation_logs_shapes(caplog):
    grid = Grid([[1, 2, 3]])
    with caplog.at_level(logging.DEBUG, logger=rotate_mod.__name__):
        apply_rotation(Rotate.LEFT, grid)
    assert any("1x3 -> 3x1" in rec.message for rec in caplog.records)


def test_get_logger_file_handler(tmp_path):
    log_file = tmp_path / "logs" / "rotate.log"
    logger = get_logger("table_rotate.test_file_logger", file_path=str(log_file))
    logger.info("hello")
    for handler in logger.handlers:
        handler.flush()
    assert "hello" in log_file.read_text(encoding="utf-8")


def test_runtime_setters(capsys):
    previous = config_loader.DEFAULT_DIRECTION
    config_loader.set_default_direction("bottom")
    try:
        config_loader.print_runtime_config()
        out = capsys.readouterr().out
        assert "default_direction: bottom" in out
    finally:
        config_loader.set_default_direction(previous)


@pytest.fixture
def restore_logging():
    log_file = config_loader.LOG_FILE
    level = config_loader.LOG_LEVEL
    yield
    config_loader.set_log_file(log_file)
    config_loader.set_log_level(level)


def _read_log(path):
    for handler in config_loader.package_logger.handlers:
        handler.flush()
    return path.read_text(encoding="utf-8")


def test_set_log_file_receives_rotation_lines(tmp_path, restore_logging):
    log_file = tmp_path / "rot.log"
    config_loader.set_log_file(str(log_file))
    config_loader.set_log_level("debug")
    apply_rotation(Rotate.LEFT, Grid([[1, 2]]))
    rotate_mod.logger.warning("marker")
    text = _read_log(log_file)
    assert "rotate left: 1x2 -> 2x1" in text
    assert "marker" in text


def test_log_level_filters_debug_lines(tmp_path, restore_logging):
    log_file = tmp_path / "rot.log"
    config_loader.set_log_file(str(log_file))
    config_loader.set_log_level("INFO")
    apply_rotation(Rotate.RIGHT, Grid([[1, 2]]))
    rotate_mod.logger.warning("marker")
    text = _read_log(log_file)
    assert "rotate right" not in text
    assert "marker" in text


def test_set_log_file_replaces_previous_file(tmp_path, restore_logging):
    first = tmp_path / "first.log"
    second = tmp_path / "second.log"
    config_loader.set_log_file(str(first))
    config_loader.set_log_file(str(second))
    rotate_mod.logger.warning("only second")
    assert "only second" in _read_log(second)
    assert "only second" not in first.read_text(encoding="utf-8")
