import unittest

from rednote.validator import is_valid_rednote_url


class ValidatorTests(unittest.TestCase):
    def test_accepts_note_links(self):
        for url in (
            "https://xiaohongshu.com/x",
            "https://www.xhslink.com/y",
            "http://xhslink.com/a/AbCdEf",
            "https://www.xiaohongshu.com/explore/64abc123?xsec_token=ABC&xsec_source=pc_feed",
            "HTTPS://WWW.XIAOHONGSHU.COM/discovery/item/64abc123",
        ):
            with self.subTest(url=url):
                self.assertTrue(is_valid_rednote_url(url))

    def test_rejects_other_schemes_and_hosts(self):
        for url in (
            "ftp://xiaohongshu.com/abc",
            "https://example.com/abc",
            "https://notxiaohongshu.com/abc",
            "https://evil.com/?xiaohongshu.com/abc",
            "xiaohongshu.com/abc",
        ):
            with self.subTest(url=url):
                self.assertFalse(is_valid_rednote_url(url))

    def test_rejects_missing_path(self):
        self.assertFalse(is_valid_rednote_url("https://xiaohongshu.com/"))
        self.assertFalse(is_valid_rednote_url("https://xiaohongshu.com"))

    def test_rejects_whitespace(self):
        self.assertFalse(is_valid_rednote_url("https://xiaohongshu.com/a b"))
        self.assertFalse(is_valid_rednote_url("https://xiaohongshu.com/abc\n"))
        self.assertFalse(is_valid_rednote_url(" https://xiaohongshu.com/abc"))

    def test_rejects_non_strings(self):
        self.assertFalse(is_valid_rednote_url(None))
        self.assertFalse(is_valid_rednote_url(123))


if __name__ == "__main__":
    unittest.main()
