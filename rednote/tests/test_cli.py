import json
import unittest
from unittest.mock import patch

from click.testing import CliRunner

import cli
from rednote.exceptions import FetchError

NOTE_HTML = '<meta name="og:url" content="https://www.xiaohongshu.com/explore/64abc123">'


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self.runner = CliRunner()

    @patch("cli.PageFetcher")
    def test_scrape_prints_result_json(self, mock_fetcher_cls):
        mock_fetcher_cls.return_value.fetch.return_value = NOTE_HTML

        result = self.runner.invoke(cli.cli, ["scrape", "https://www.xiaohongshu.com/explore/64abc123"])

        self.assertEqual(result.exit_code, 0, result.output)
        data = json.loads(result.output)
        self.assertIs(data["status"], True)
        self.assertEqual(data["noteId"], "64abc123")
        mock_fetcher_cls.return_value.close.assert_called_once()

    @patch("cli.PageFetcher")
    def test_scrape_timeout_override(self, mock_fetcher_cls):
        mock_fetcher_cls.return_value.fetch.return_value = ""

        self.runner.invoke(cli.cli, ["scrape", "--timeout", "5", "http://xhslink.com/a/x"])

        settings = mock_fetcher_cls.call_args[0][0]
        self.assertEqual(settings.timeout, 5)

    @patch("cli.PageFetcher")
    def test_scrape_rejects_non_positive_timeout(self, mock_fetcher_cls):
        result = self.runner.invoke(cli.cli, ["scrape", "--timeout", "0", "http://xhslink.com/a/x"])

        self.assertEqual(result.exit_code, 2)
        self.assertIn("--timeout", result.output)
        mock_fetcher_cls.assert_not_called()

    @patch("cli.PageFetcher")
    def test_scrape_errors_exit_nonzero(self, mock_fetcher_cls):
        result = self.runner.invoke(cli.cli, ["scrape", "https://example.com/x"])
        self.assertEqual(result.exit_code, 1)
        self.assertEqual(json.loads(result.output), {"status": False, "error": "Invalid Xiaohongshu URL"})
        mock_fetcher_cls.return_value.fetch.assert_not_called()

        mock_fetcher_cls.return_value.fetch.side_effect = FetchError("Request failed: boom")
        result = self.runner.invoke(cli.cli, ["scrape", "http://xhslink.com/a/x"])
        self.assertEqual(result.exit_code, 1)
        self.assertEqual(json.loads(result.output)["error"], "Request failed: boom")

    def test_validate(self):
        self.assertEqual(self.runner.invoke(cli.cli, ["validate", "https://xiaohongshu.com/x"]).output.strip(), "true")
        self.assertEqual(self.runner.invoke(cli.cli, ["validate", "https://xiaohongshu.com/"]).output.strip(), "false")


if __name__ == "__main__":
    unittest.main()
