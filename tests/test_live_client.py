import json
import unittest

import requests

from lol_overlay.errors import DecodeError, TransportError
from lol_overlay.live_client import LiveClient
from lol_overlay.schemas import EventList, GameInfo

from payloads import GAME_STATS, ME, all_game_data, as_text


class _StubResponse:
    def __init__(self, status_code=200, text=""):
        self.status_code = status_code
        self.content = text.encode("utf-8")


class _StubSession:
    def __init__(self, routes=None, error=None):
        self.routes = routes or {}
        self.error = error
        self.calls = []
        self.closed = False

    def get(self, url, **kwargs):
        self.calls.append((url, kwargs))
        if self.error is not None:
            raise self.error
        for suffix, response in self.routes.items():
            if url.endswith(suffix):
                return response
        return _StubResponse(404, "")

    def close(self):
        self.closed = True


def _client(**kwargs):
    return LiveClient(base_url="https://127.0.0.1:2999/liveclientdata", session=_StubSession(**kwargs))


class TestLiveClientTransport(unittest.TestCase):
    def test_requests_use_timeout_and_relaxed_tls(self):
        client = _client(routes={"/gamestats": _StubResponse(200, json.dumps(GAME_STATS))})
        client.get_game_stats()
        url, kwargs = client.session.calls[0]
        self.assertEqual(url, "https://127.0.0.1:2999/liveclientdata/gamestats")
        self.assertEqual(kwargs["timeout"], 5.0)
        self.assertFalse(kwargs["verify"])

    def test_non_success_status_is_transport_error(self):
        client = _client(routes={"/allgamedata": _StubResponse(503, "")})
        with self.assertRaises(TransportError) as ctx:
            client.fetch_snapshot_raw()
        self.assertEqual(ctx.exception.status, 503)
        self.assertEqual(ctx.exception.endpoint, "/allgamedata")

    def test_network_failure_is_transport_error_without_status(self):
        client = _client(error=requests.ConnectionError("refused"))
        with self.assertRaises(TransportError) as ctx:
            client.fetch_snapshot_raw()
        self.assertIsNone(ctx.exception.status)
        self.assertIn("refused", str(ctx.exception))

    def test_fetch_snapshot_raw_returns_text(self):
        body = as_text(all_game_data())
        client = _client(routes={"/allgamedata": _StubResponse(200, body)})
        self.assertEqual(client.fetch_snapshot_raw(), body)

    def test_request_decodes_with_context(self):
        client = _client(routes={"/eventdata": _StubResponse(200, '{\n"Events": [\n{"EventID": }\n]\n}')})
        with self.assertRaises(DecodeError) as ctx:
            client.get_events()
        self.assertEqual(ctx.exception.line, 3)
        self.assertEqual(ctx.exception.endpoint, "/eventdata")

    def test_typed_reads(self):
        client = _client(routes={
            "/allgamedata": _StubResponse(200, as_text(all_game_data())),
            "/eventdata": _StubResponse(200, json.dumps(all_game_data()["events"])),
            "/activeplayername": _StubResponse(200, json.dumps(ME)),
        })
        self.assertIsInstance(client.get_game_info(), GameInfo)
        self.assertIsInstance(client.get_events(), EventList)
        self.assertEqual(client.get_active_player_name(), ME)

    def test_player_scores_passes_riot_id(self):
        score = all_game_data()["allPlayers"][0]["scores"]
        client = _client(routes={"/playerscores": _StubResponse(200, json.dumps(score))})
        self.assertEqual(client.get_player_scores(ME).creep_score, 120)
        self.assertEqual(client.session.calls[0][1]["params"], {"riotId": ME})

    def test_close_closes_session(self):
        with _client() as client:
            pass
        self.assertTrue(client.session.closed)


class TestLivenessCheck(unittest.TestCase):
    def test_active_when_gamestats_decodes(self):
        client = _client(routes={"/gamestats": _StubResponse(200, json.dumps(GAME_STATS))})
        self.assertTrue(client.is_game_active())

    def test_inactive_on_network_failure(self):
        client = _client(error=requests.Timeout("timed out"))
        self.assertFalse(client.is_game_active())

    def test_inactive_on_http_error(self):
        client = _client(routes={"/gamestats": _StubResponse(404, "")})
        self.assertFalse(client.is_game_active())

    def test_inactive_when_loading_screen_payload(self):
        client = _client(routes={"/gamestats": _StubResponse(200, '{"errorCode": "RESOURCE_NOT_FOUND"}')})
        self.assertFalse(client.is_game_active())

    def test_inactive_on_malformed_body(self):
        client = _client(routes={"/gamestats": _StubResponse(200, "<html>")})
        self.assertFalse(client.is_game_active())

    def test_inactive_on_deeply_nested_body(self):
        body = "[" * 100000 + "]" * 100000
        client = _client(routes={"/gamestats": _StubResponse(200, body)})
        self.assertFalse(client.is_game_active())


if __name__ == "__main__":
    unittest.main()
