import unittest

from src.config.limits import DEFAULT_BATCH_TIMEOUT, DEFAULT_MAX_CONCURRENCY, DEFAULT_REQUEST_TIMEOUT
from src.config.settings import TrelloSettings


class TestTrelloSettings(unittest.TestCase):
    def test_defaults_from_empty_environment(self):
        settings = TrelloSettings.from_env({})

        self.assertIsNone(settings.api_key)
        self.assertEqual(settings.target_list_name, "Nadcházející tréninky")
        self.assertEqual(settings.unknown_host, "Unknown")
        self.assertEqual(settings.no_status, "N/A")
        self.assertEqual(settings.unknown_list, "Unknown list")
        self.assertEqual(settings.request_timeout, DEFAULT_REQUEST_TIMEOUT)
        self.assertEqual(settings.batch_timeout, DEFAULT_BATCH_TIMEOUT)
        self.assertEqual(settings.max_concurrency, DEFAULT_MAX_CONCURRENCY)
        self.assertEqual(
            settings.missing_fields(),
            ["TRELLO_API_KEY", "TRELLO_API_TOKEN", "TRELLO_BOARD_ID"],
        )

    def test_reads_values_and_strips_credentials(self):
        settings = TrelloSettings.from_env(
            {
                "TRELLO_API_KEY": " key ",
                "TRELLO_API_TOKEN": "token",
                "TRELLO_BOARD_ID": "board",
                "TRELLO_TARGET_LIST_NAME": "Upcoming",
                "TRELLO_REQUEST_TIMEOUT": "5",
                "TRELLO_MAX_CONCURRENCY": "4",
            }
        )

        self.assertEqual(settings.api_key, "key")
        self.assertEqual(settings.target_list_name, "Upcoming")
        self.assertEqual(settings.request_timeout, 5.0)
        self.assertEqual(settings.max_concurrency, 4)
        self.assertEqual(settings.missing_fields(), [])

    def test_blank_credentials_count_as_missing(self):
        settings = TrelloSettings.from_env({"TRELLO_API_KEY": "k", "TRELLO_API_TOKEN": "  ", "TRELLO_BOARD_ID": "b"})
        self.assertEqual(settings.missing_fields(), ["TRELLO_API_TOKEN"])

    def test_invalid_and_out_of_range_numbers(self):
        settings = TrelloSettings.from_env(
            {
                "TRELLO_REQUEST_TIMEOUT": "soon",
                "TRELLO_BATCH_TIMEOUT": "100000",
                "TRELLO_MAX_CONCURRENCY": "0",
            }
        )

        self.assertEqual(settings.request_timeout, DEFAULT_REQUEST_TIMEOUT)
        self.assertEqual(settings.batch_timeout, 120.0)
        self.assertEqual(settings.max_concurrency, 1)


if __name__ == "__main__":
    unittest.main()
