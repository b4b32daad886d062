import asyncio
import unittest

import httpx

from src.config.settings import TrelloSettings
from src.models.session import TrelloCard, TrelloLabel
from src.services.session_enrichment import (
    derive_label_status,
    enrich_card,
    parse_card_description,
    resolve_list_name,
)


SETTINGS = TrelloSettings(api_key="k", api_token="t", board_id="B1")


def _labels(*names):
    return [TrelloLabel(name=n) for n in names]


class TestParseCardDescription(unittest.TestCase):
    def test_host_and_co_host(self):
        result = parse_card_description("Host: Alice\nCo-Host: Bob")
        self.assertEqual(result, {"host": "Alice", "coHost": "Bob"})

    def test_label_case_insensitive_value_case_preserved(self):
        result = parse_card_description("HOST:   McDonald  \nco-host:\tvan Dyke")
        self.assertEqual(result["host"], "McDonald")
        self.assertEqual(result["coHost"], "van Dyke")

    def test_co_host_line_first_does_not_leak_into_host(self):
        result = parse_card_description("Co-Host: Bob\nHost: Alice")
        self.assertEqual(result["host"], "Alice")
        self.assertEqual(result["coHost"], "Bob")

    def test_only_co_host(self):
        result = parse_card_description("Co-Host: Bob")
        self.assertEqual(result["host"], "Unknown")
        self.assertEqual(result["coHost"], "Bob")

    def test_missing_and_empty_values_use_placeholder(self):
        self.assertEqual(parse_card_description("", "N/A"), {"host": "N/A", "coHost": "N/A"})
        self.assertEqual(parse_card_description(None), {"host": "Unknown", "coHost": "Unknown"})
        self.assertEqual(parse_card_description("Host:   \nnotes"), {"host": "Unknown", "coHost": "Unknown"})

    def test_value_stops_at_line_end(self):
        result = parse_card_description("Intro text\r\n  Host: Alice Smith\r\nLevel: beginner")
        self.assertEqual(result["host"], "Alice Smith")


class TestDeriveLabelStatus(unittest.TestCase):
    def test_joinable_removed_from_status(self):
        self.assertEqual(derive_label_status(_labels("JOINABLE", "Beginner")), ("Beginner", True))

    def test_joinable_any_case(self):
        self.assertEqual(derive_label_status(_labels("Advanced", "joinable")), ("Advanced", True))

    def test_only_joinable_uses_placeholder(self):
        self.assertEqual(derive_label_status(_labels("Joinable")), ("N/A", True))

    def test_first_label_is_status(self):
        self.assertEqual(derive_label_status(_labels("Open", "Beginner")), ("Open", False))

    def test_no_labels(self):
        self.assertEqual(derive_label_status([], "-"), ("-", False))


class TestResolveListName(unittest.TestCase):
    def _run(self, handler, list_id="L1"):
        async def run():
            async with httpx.AsyncClient(transport=httpx.MockTransport(handler)) as client:
                return await resolve_list_name(client, list_id, SETTINGS)

        return asyncio.run(run())

    def test_returns_list_name(self):
        seen = []

        def handler(request):
            seen.append(request)
            return httpx.Response(200, json={"id": "L1", "name": "Sessions"})

        self.assertEqual(self._run(handler), "Sessions")
        self.assertEqual(seen[0].url.path, "/1/lists/L1")
        self.assertEqual(seen[0].url.params.get("key"), "k")
        self.assertEqual(seen[0].url.params.get("token"), "t")

    def test_non_success_falls_back(self):
        self.assertEqual(self._run(lambda r: httpx.Response(404, text="not found")), "Unknown list")

    def test_transport_error_falls_back(self):
        def handler(request):
            raise httpx.ConnectError("connection refused", request=request)

        self.assertEqual(self._run(handler), "Unknown list")

    def test_malformed_body_falls_back(self):
        self.assertEqual(self._run(lambda r: httpx.Response(200, text="<html>")), "Unknown list")
        self.assertEqual(self._run(lambda r: httpx.Response(200, json={"id": "L1"})), "Unknown list")

    def test_missing_list_id_skips_request(self):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(200, json={"name": "x"})

        self.assertEqual(self._run(handler, list_id=None), "Unknown list")
        self.assertEqual(calls, [])


class TestEnrichCard(unittest.TestCase):
    def test_builds_session_record(self):
        async def run():
            card = TrelloCard.model_validate(
                {
                    "id": "C1",
                    "name": "Clinic",
                    "desc": "Host: Alice\nCo-Host: Bob",
                    "due": "2024-06-01T00:00:00Z",
                    "labels": [{"name": "JOINABLE"}, {"name": "Beginner"}],
                    "idList": "L1",
                }
            )
            transport = httpx.MockTransport(lambda r: httpx.Response(200, json={"name": "Sessions"}))
            async with httpx.AsyncClient(transport=transport) as client:
                return await enrich_card(client, card, 3, SETTINGS)

        record = asyncio.run(run())
        self.assertEqual(
            record.to_public_dict(),
            {
                "id": "C1",
                "order": 3,
                "name": "Clinic",
                "status": "Beginner",
                "dueDate": "2024-06-01T00:00:00Z",
                "host": "Alice",
                "coHost": "Bob",
                "listName": "Sessions",
                "isJoinable": True,
            },
        )


if __name__ == "__main__":
    unittest.main()
