"""HTTP client for the in-game Live Client Data API.

The game serves it on loopback over TLS with a self-signed certificate, so
verification is off by default. Responses are read as text and decoded
separately so that decode failures can point at the offending line.
"""

import logging
from typing import Any, Dict, Optional

import requests
import urllib3

from .config import DEFAULT_BASE_URL
from .decoding import decode, describe
from .errors import DecodeError, LiveClientError, TransportError
from .schemas import EventList, GameData, GameInfo, Score

GAME_STATS = "/gamestats"
ALL_GAME_DATA = "/allgamedata"
EVENT_DATA = "/eventdata"
PLAYER_SCORES = "/playerscores"
ACTIVE_PLAYER_NAME = "/activeplayername"

logger = logging.getLogger(__name__)


class LiveClient:
    def __init__(self, base_url: str = DEFAULT_BASE_URL, timeout: float = 5.0,
                 session: Optional[requests.Session] = None, verify: bool = False):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.verify = verify
        if not verify:
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)
        self.session = session if session is not None else requests.Session()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def close(self):
        self.session.close()

    def fetch_text(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> str:
        url = f"{self.base_url}{endpoint}"
        try:
            r = self.session.get(url, params=params, timeout=self.timeout, verify=self.verify)
        except requests.RequestException as e:
            raise TransportError(endpoint, message=str(e)) from e
        if not 200 <= r.status_code < 300:
            raise TransportError(endpoint, r.status_code)
        return r.content.decode("utf-8", errors="replace")

    def request(self, endpoint: str, target: Any = None,
                params: Optional[Dict[str, Any]] = None) -> Any:
        text = self.fetch_text(endpoint, params)
        try:
            return decode(text, target, endpoint)
        except DecodeError as e:
            logger.debug("%s", describe(e))
            raise

    def is_game_active(self) -> bool:
        """Liveness check: True iff /gamestats answers with session metadata."""
        try:
            self.request(GAME_STATS, GameData)
        except LiveClientError as e:
            logger.debug("liveness check negative: %s", e)
            return False
        return True

    def fetch_snapshot_raw(self) -> str:
        return self.fetch_text(ALL_GAME_DATA)

    def get_game_info(self) -> GameInfo:
        return self.request(ALL_GAME_DATA, GameInfo)

    def get_game_stats(self) -> GameData:
        return self.request(GAME_STATS, GameData)

    def get_events(self) -> EventList:
        return self.request(EVENT_DATA, EventList)

    def get_player_scores(self, riot_id: str) -> Score:
        return self.request(PLAYER_SCORES, Score, params={"riotId": riot_id})

    def get_active_player_name(self) -> str:
        return self.request(ACTIVE_PLAYER_NAME, str)
