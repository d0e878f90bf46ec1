"""Logging setup tests against an isolated root logger."""
import logging
import os
import tempfile
import unittest
from logging.handlers import RotatingFileHandler
from pathlib import Path
from unittest import mock

from core import logging_setup


class LoggingSetupTests(unittest.TestCase):
    def setUp(self):
        self.temp_dir = tempfile.TemporaryDirectory()
        self.addCleanup(self.temp_dir.cleanup)
        self.root = logging.getLogger()
        self.saved_handlers = self.root.handlers[:]
        self.saved_level = self.root.level
        self.root.handlers = []
        self.log_file = Path(self.temp_dir.name) / "Logs" / "profile.log"

    def tearDown(self):
        for handler in self.root.handlers:
            handler.close()
        self.root.handlers = self.saved_handlers
        self.root.setLevel(self.saved_level)

    def test_creates_rotating_file_handler(self):
        """The log file lives under its directory, which is created on demand."""
        logging_setup.setup_logging(self.log_file)
        file_handlers = [h for h in self.root.handlers if isinstance(h, RotatingFileHandler)]
        self.assertEqual(len(file_handlers), 1)
        self.assertEqual(file_handlers[0].baseFilename, os.path.abspath(self.log_file))
        self.assertEqual(file_handlers[0].maxBytes, logging_setup.LOG_MAX_BYTES)
        self.assertTrue(self.log_file.parent.is_dir())
        self.assertEqual(self.root.level, logging.INFO)

    def test_second_call_adds_nothing(self):
        logging_setup.setup_logging(self.log_file)
        count = len(self.root.handlers)
        logging_setup.setup_logging(self.log_file)
        self.assertEqual(len(self.root.handlers), count)

    def test_level_from_environment(self):
        with mock.patch.dict(os.environ, {"APP_LOG_LEVEL": "debug"}):
            logging_setup.setup_logging(self.log_file)
        self.assertEqual(self.root.level, logging.DEBUG)

    def test_unknown_level_falls_back_to_info(self):
        with mock.patch.dict(os.environ, {"APP_LOG_LEVEL": "chatty"}):
            logging_setup.setup_logging(self.log_file)
        self.assertEqual(self.root.level, logging.INFO)
