import logging

from pyLocalMin.utils import clearLoggers, getQuickLogger


def test_quick_logger_writes_file(tmp_path):
    logger = getQuickLogger("pyLocalMin_quick", str(tmp_path))
    try:
        logger.info("hello minimizer")
        for handler in logger.handlers:
            handler.flush()
        text = (tmp_path / "pyLocalMin_quick.log").read_text()
        assert "hello minimizer" in text
        assert logger.level == logging.DEBUG
    finally:
        clearLoggers("pyLocalMin_quick")


def test_quick_logger_reuses_handler(tmp_path):
    first = getQuickLogger("pyLocalMin_reuse", str(tmp_path))
    second = getQuickLogger("pyLocalMin_reuse", str(tmp_path))
    try:
        assert first is second
        assert len(second.handlers) == 1
    finally:
        clearLoggers("pyLocalMin_reuse")
    assert logging.getLogger("pyLocalMin_reuse").handlers == []
