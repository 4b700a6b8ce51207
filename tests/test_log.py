import re

import pytest

from nirsviz import log


@pytest.fixture
def log_file(tmp_path):
    path = tmp_path / "NVIZ.log"
    logger = log.init(path)
    yield path
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def test_init_returns_core_logger(log_file):
    assert log.get_core_logger() is log.init(log_file)
    assert log.get_core_logger().name == "NVIZ"


def test_messages_written_to_file_with_level(log_file):
    logger = log.get_core_logger()
    assert logger.name == "NVIZ"
    logger.info("hello probes")
    content = log_file.read_text(encoding="utf-8")
    assert re.search(r"^\[\d\d:\d\d:\d\d\] \[info\] NVIZ: hello probes$", content, re.M)


def test_reinit_truncates_file(log_file):
    log.get_core_logger().warning("first run")
    log.init(log_file)
    log.get_core_logger().warning("second run")
    content = log_file.read_text(encoding="utf-8")
    assert "first run" not in content
    assert "[warning] NVIZ: second run" in content


def test_reinit_does_not_duplicate_handlers(log_file):
    before = len(log.get_core_logger().handlers)
    log.init(log_file)
    assert len(log.get_core_logger().handlers) == before


def test_check_failure_raises_and_logs(log_file):
    with pytest.raises(AssertionError, match="Assertion failed: bad index"):
        log.check(False, "bad index")
    assert "[error] NVIZ: Assertion failed: bad index" in log_file.read_text(encoding="utf-8")


def test_check_passing_logs_nothing(log_file):
    log.check(1 < 2, "ordering")
    assert "Assertion" not in log_file.read_text(encoding="utf-8")