"""Live Client Data API polling for a League of Legends stats overlay."""

from .channel import LatestSnapshot, SnapshotReceiver, SnapshotSender, snapshot_channel
from .decoding import decode
from .errors import ChannelClosed, DecodeError, LiveClientError, TransportError
from .fetcher import game_data_fetcher, start_fetcher
from .live_client import LiveClient
from .schemas import GameInfo
from .stats import summarize

__all__ = [
    "ChannelClosed", "DecodeError", "GameInfo", "LatestSnapshot", "LiveClient",
    "LiveClientError", "SnapshotReceiver", "SnapshotSender", "TransportError",
    "decode", "game_data_fetcher", "snapshot_channel", "start_fetcher", "summarize",
]
