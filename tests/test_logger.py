"""
Unit tests for logger setup.
"""

import json
import logging
import os
import tempfile

from word_translator.core.logger import JsonFormatter, get_logger


class TestJsonFormatter:
    """Test JSON log output."""

    def _record(self, msg, *args):
        return logging.LogRecord(
            name="word_translator", level=logging.WARNING, pathname=__file__,
            lineno=1, msg=msg, args=args, exc_info=None
        )

    def test_quotes_and_newlines_stay_valid_json(self):
        formatter = JsonFormatter(datefmt="%Y-%m-%d %H:%M:%S")
        message = 'Error translating cell 2: provider said "bad request"\nsee \\logs'

        entry = json.loads(formatter.format(self._record(message)))

        assert entry["message"] == message
        assert entry["level"] == "WARNING"
        assert entry["name"] == "word_translator"

    def test_message_args_are_interpolated(self):
        formatter = JsonFormatter()
        entry = json.loads(formatter.format(self._record('cell "%s" failed', "Name")))
        assert entry["message"] == 'cell "Name" failed'


class TestGetLogger:
    """Test logger configuration from the environment."""

    def setup_method(self):
        self.temp_dir = tempfile.mkdtemp()

    def teardown_method(self):
        import shutil
        logging.getLogger("word_translator.test_json").handlers.clear()
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_json_format_writes_parseable_file_lines(self, monkeypatch):
        log_file = os.path.join(self.temp_dir, "logs", "translator.log")
        monkeypatch.setenv("WORD_TRANSLATOR_LOG_FORMAT", "json")
        monkeypatch.setenv("WORD_TRANSLATOR_LOG_FILE", log_file)

        logger = get_logger("word_translator.test_json", level="INFO")
        logger.info('Translated "Annual report"')
        for handler in logger.handlers:
            handler.flush()
            handler.close()

        with open(log_file, encoding="utf-8") as f:
            entry = json.loads(f.readline())
        assert entry["message"] == 'Translated "Annual report"'
        assert entry["level"] == "INFO"

    def test_repeated_setup_does_not_stack_handlers(self, monkeypatch):
        monkeypatch.delenv("WORD_TRANSLATOR_LOG_FILE", raising=False)
        get_logger("word_translator.test_json")
        logger = get_logger("word_translator.test_json")
        assert len(logger.handlers) == 1
