import unittest

from app.config import Settings
from run_server import warn_on_missing_keys


class TestRunServer(unittest.TestCase):
    def test_reports_both_missing_keys(self):
        config = Settings(news_api_key=None, tmdb_api_key=None, _env_file=None)
        with self.assertLogs("run_server", level="WARNING") as logs:
            missing = warn_on_missing_keys(config)
        self.assertEqual(missing, ["NEWS_API_KEY", "TMDB_API_KEY"])
        self.assertEqual(len(logs.records), 2)

    def test_no_warning_when_keys_configured(self):
        config = Settings(news_api_key="n", tmdb_api_key="t", _env_file=None)
        self.assertEqual(warn_on_missing_keys(config), [])


if __name__ == "__main__":
    unittest.main()
