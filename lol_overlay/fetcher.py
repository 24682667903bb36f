"""Background polling of the live client.

The loop re-checks liveness every cycle. While no game answers it backs off
for IDLE_BACKOFF_SECONDS; once a game is up it fetches /allgamedata right away
and then every ACTIVE_INTERVAL_SECONDS. Fetch and decode failures are logged
and retried at the active cadence; only a negative liveness check puts it back
to idle.
It returns when the receiving side of the channel has been closed.
"""

import logging
import threading
import time
from typing import Callable

from .channel import SnapshotSender
from .decoding import decode
from .errors import ChannelClosed, DecodeError, TransportError
from .live_client import ALL_GAME_DATA, LiveClient
from .schemas import GameInfo

IDLE_BACKOFF_SECONDS = 5
ACTIVE_INTERVAL_SECONDS = 1

logger = logging.getLogger(__name__)


def game_data_fetcher(client: LiveClient, sender: SnapshotSender,
                      sleep: Callable[[float], None] = time.sleep) -> None:
    logger.info("starting live client polling")
    while True:
        if not client.is_game_active():
            logger.info("no active game detected, waiting")
            sleep(IDLE_BACKOFF_SECONDS)
            continue

        try:
            text = client.fetch_snapshot_raw()
            info = decode(text, GameInfo, ALL_GAME_DATA)
        except TransportError as e:
            logger.warning("error fetching game data: %s", e)
        except DecodeError as e:
            logger.warning("failed to parse game data: %s\n%s", e, e.format_context())
        else:
            try:
                sender.send(info)
            except ChannelClosed:
                logger.info("snapshot receiver closed, stopping fetcher")
                return

        sleep(ACTIVE_INTERVAL_SECONDS)


def start_fetcher(client: LiveClient, sender: SnapshotSender,
                  name: str = "live-client-fetcher") -> threading.Thread:
    """Run the fetcher on a daemon thread; it dies with the process."""

    def _run():
        try:
            game_data_fetcher(client, sender)
        except Exception:
            logger.exception("game data fetcher stopped unexpectedly")

    thread = threading.Thread(target=_run, name=name, daemon=True)
    thread.start()
    return thread
