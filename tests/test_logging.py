import logging
import pathlib
import sys
from pathlib import Path

# Ensure src package is on path
sys.path.append(str(pathlib.Path(__file__).resolve().parents[1] / "src"))

from seat_randomizer.logging_setup import LOG_DATE_FORMAT, LOG_FORMAT, setup_logging


class TestSetupLogging:
    def test_configures_stdout_handler(self):
        assert setup_logging() is None
        root = logging.getLogger()

        assert root.level == logging.INFO
        assert len(root.handlers) == 1

        handler = root.handlers[0]
        assert isinstance(handler, logging.StreamHandler)
        assert handler.stream is sys.stderr
        assert handler.formatter._fmt == LOG_FORMAT
        assert handler.formatter.datefmt == LOG_DATE_FORMAT

    def test_configures_file_handler_in_log_dir(self, tmp_path):
        log_dir = tmp_path / "runs"
        file_path = setup_logging(log_dir=log_dir, level=logging.DEBUG)
        root = logging.getLogger()

        assert root.level == logging.DEBUG
        assert len(root.handlers) == 2
        file_handler = root.handlers[1]
        assert isinstance(file_handler, logging.FileHandler)
        assert Path(file_handler.baseFilename) == file_path
        assert file_path.parent == log_dir

        logging.getLogger("seat_randomizer.test").debug("planned seats")
        file_handler.flush()
        assert "planned seats" in file_path.read_text()

    def test_repeated_calls_do_not_duplicate_handlers(self):
        setup_logging()
        setup_logging()
        assert len(logging.getLogger().handlers) == 1
