import logging

import pytest

from tilt_space.logging_config import setup_logging


@pytest.fixture(autouse=True)
def restore_root_logger():
    root = logging.getLogger()
    level, handlers = root.level, list(root.handlers)
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


def test_level_by_name():
    setup_logging("warning")
    assert logging.getLogger().level == logging.WARNING


def test_unknown_level_name():
    with pytest.raises(ValueError):
        setup_logging("LOUD")


def test_log_file(tmp_path):
    path = tmp_path / "game.log"
    setup_logging(logging.INFO, log_file=str(path))
    logging.getLogger("tilt_space.test").info("回合開始")
    for handler in logging.getLogger().handlers:
        handler.flush()
    assert "回合開始" in path.read_text(encoding="utf-8")
