import logging
import os
import tempfile
import unittest

from logging_config import setup_logging, LOGS_DIR


class TestLoggingConfig(unittest.TestCase):
    def test_setup_logging_creates_rotating_and_stream_handlers(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            log_file = f"{tmpdir}/test.log"

            logger = setup_logging(name="test_logger", log_file=log_file)

            self.assertIsInstance(logger, logging.Logger)
            self.assertEqual(logger.name, "test_logger")
            self.assertEqual(len(logger.handlers), 2)

            logger.warning("hello")
            for h in logger.handlers:
                h.flush()

            with open(log_file, "r", encoding="utf-8") as f:
                content = f.read()
                self.assertIn("hello", content)

            for h in logger.handlers:
                h.close()

    def test_default_log_goes_to_logs_dir(self):
        """Default log_file should be routed to the project's logs/ directory."""
        logger = setup_logging(name="test_default_dir")
        file_handler = [h for h in logger.handlers if hasattr(h, "baseFilename")][0]
        self.assertIn(os.sep + "logs" + os.sep, file_handler.baseFilename)
        self.assertTrue(file_handler.baseFilename.endswith("moonshot_app.log"))

    def test_relative_path_with_dirs_stripped(self):
        """A relative path like 'subdir/foo.log' should be stripped to 'foo.log' in logs/."""
        logger = setup_logging(name="test_strip_dirs", log_file="subdir/foo.log")
        file_handler = [h for h in logger.handlers if hasattr(h, "baseFilename")][0]
        self.assertEqual(file_handler.baseFilename, os.path.join(LOGS_DIR, "foo.log"))

    def test_level_defaults_to_settings(self):
        """Without an explicit level the logger uses [env] log_level from settings.toml."""
        from settings_service import SettingsService

        logger = setup_logging(name="test_settings_level")
        expected = logging.getLevelName(SettingsService().log_level.upper())
        self.assertEqual(logger.level, expected)

    def test_explicit_level_wins(self):
        logger = setup_logging(name="test_explicit_level", level=logging.DEBUG)
        self.assertEqual(logger.level, logging.DEBUG)

    def test_repeated_setup_does_not_stack_handlers(self):
        setup_logging(name="test_rerun")
        logger = setup_logging(name="test_rerun")
        self.assertEqual(len(logger.handlers), 2)


if __name__ == "__main__":
    unittest.main()
