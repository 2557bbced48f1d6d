import importlib
import logging
import os
import unittest

from metadata_gate.config import logging_config
from metadata_gate.config.config import Config


class TestConfig(unittest.TestCase):
    def test_config_defaults(self):
        self.assertEqual(Config.METADATA_URL, "http://169.254.169.254/metadata/instance")
        self.assertEqual(Config.METADATA_API_VERSION, "2017-08-01")
        self.assertIsInstance(Config.METADATA_TIMEOUT_SECONDS, float)
        self.assertGreater(Config.METADATA_TIMEOUT_SECONDS, 0)

    def test_config_env_override(self):
        os.environ["METADATA_API_VERSION"] = "2021-02-01"
        os.environ["METADATA_TIMEOUT_SECONDS"] = "0.5"
        import metadata_gate.config.config as config_mod

        try:
            importlib.reload(config_mod)
            self.assertEqual(config_mod.Config.METADATA_API_VERSION, "2021-02-01")
            self.assertEqual(config_mod.Config.METADATA_TIMEOUT_SECONDS, 0.5)
        finally:
            del os.environ["METADATA_API_VERSION"]
            del os.environ["METADATA_TIMEOUT_SECONDS"]
            importlib.reload(config_mod)


class TestLoggingConfig(unittest.TestCase):
    def test_logging_setup(self):
        # Should not raise
        try:
            logging_config.setup_logging()
        except Exception as e:
            self.fail(f"setup_logging() raised {e}")
        logger = logging.getLogger()
        self.assertTrue(logger.hasHandlers())

    def test_file_handler_only_when_log_file_set(self):
        cfg = logging_config.build_logging_config(level="DEBUG", log_file="")
        self.assertEqual(list(cfg["handlers"]), ["console"])
        self.assertEqual(cfg["root"]["level"], "DEBUG")

        cfg = logging_config.build_logging_config(level="INFO", log_file="gate.log")
        self.assertEqual(cfg["handlers"]["file"]["filename"], "gate.log")
        self.assertEqual(cfg["root"]["handlers"], ["console", "file"])


if __name__ == "__main__":
    unittest.main()
