import logging

import pytest

from log import get_logger


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    handlers = list(root.handlers)
    yield root
    for handler in list(root.handlers):
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_get_logger_writes_file(tmp_path, restore_root_logger):
    log_file = tmp_path / "logs" / "run.log"
    logger = get_logger("debug", str(log_file))
    assert logger.level == logging.DEBUG
    logging.getLogger("particle_filter").debug("cycle done")
    for handler in logger.handlers:
        handler.flush()
    assert "[DEBUG]: cycle done" in log_file.read_text()


def test_get_logger_does_not_stack_handlers(restore_root_logger):
    before = len(restore_root_logger.handlers)
    get_logger("INFO")
    get_logger("INFO")
    assert len(restore_root_logger.handlers) == before + 1


def test_level_from_environment(monkeypatch, restore_root_logger):
    monkeypatch.setenv("LOGLEVEL", "WARNING")
    assert get_logger().level == logging.WARNING
