import os
import unittest
from pathlib import Path
from unittest.mock import patch

from rednote.settings import DEFAULT_USER_AGENT, load_settings


class SettingsTests(unittest.TestCase):
    @patch.dict(os.environ, {}, clear=True)
    def test_defaults(self):
        settings = load_settings()
        self.assertEqual(settings.port, 8080)
        self.assertFalse(settings.debug)
        self.assertEqual(settings.log_file, Path("logs") / "rednote.log")
        self.assertEqual(settings.fetcher.timeout, 30)
        self.assertEqual(settings.fetcher.max_redirects, 10)
        self.assertEqual(settings.fetcher.user_agent, DEFAULT_USER_AGENT)

    @patch.dict(
        os.environ,
        {
            "PORT": "9000",
            "DEBUG": "true",
            "REDNOTE_TIMEOUT": "5",
            "REDNOTE_MAX_REDIRECTS": "abc",
            "REDNOTE_LOG_FILE": "",
        },
        clear=True,
    )
    def test_env_overrides_and_invalid_values(self):
        settings = load_settings()
        self.assertEqual(settings.port, 9000)
        self.assertTrue(settings.debug)
        self.assertIsNone(settings.log_file)
        self.assertEqual(settings.fetcher.timeout, 5)
        self.assertEqual(settings.fetcher.max_redirects, 10)


if __name__ == "__main__":
    unittest.main()
