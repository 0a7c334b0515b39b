import logging

from rich.logging import RichHandler

from object2code.logging_config import PACKAGE_LOGGER, get_logger, setup_logging


def test_get_logger_prefixes_package_name():
    assert get_logger("walker").name == "object2code.walker"
    assert get_logger("object2code.cli").name == "object2code.cli"
    assert get_logger(PACKAGE_LOGGER).name == PACKAGE_LOGGER


def test_setup_logging_installs_rich_handler(tmp_path):
    log_file = tmp_path / "run.log"

    logger = setup_logging("INFO", log_file)
    try:
        handlers = [h for h in logger.handlers if not isinstance(h, logging.NullHandler)]
        assert logger.level == logging.INFO
        assert any(isinstance(h, RichHandler) for h in handlers)
        assert any(isinstance(h, logging.FileHandler) for h in handlers)

        get_logger("test").info("hello file")
        for handler in handlers:
            handler.flush()
        assert "hello file" in log_file.read_text(encoding="utf-8")

        # Repeated setup replaces handlers instead of stacking them
        setup_logging("WARNING")
        handlers = [h for h in logger.handlers if not isinstance(h, logging.NullHandler)]
        assert len(handlers) == 1
    finally:
        setup_logging("WARNING")
