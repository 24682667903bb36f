"""Producer -> consumer handoff for snapshots.

``snapshot_channel()`` gives an unbounded FIFO whose send side never blocks and
fails with ChannelClosed once the receiver is closed. ``LatestSnapshot`` is the
lock-guarded slot a consumer keeps the newest snapshot in.
"""

import queue
import threading
from typing import Any, Optional, Tuple

from .errors import ChannelClosed


class _Channel:
    def __init__(self):
        self.items = queue.SimpleQueue()
        self.closed = threading.Event()


class SnapshotSender:
    def __init__(self, channel: _Channel):
        self._channel = channel

    def send(self, item: Any) -> None:
        if self._channel.closed.is_set():
            raise ChannelClosed("receiver closed")
        self._channel.items.put(item)


class SnapshotReceiver:
    def __init__(self, channel: _Channel):
        self._channel = channel

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    @property
    def closed(self) -> bool:
        return self._channel.closed.is_set()

    def try_recv(self) -> Any:
        """Next item in FIFO order; raises queue.Empty when nothing is pending."""
        return self._channel.items.get_nowait()

    def recv(self, timeout: Optional[float] = None) -> Any:
        return self._channel.items.get(timeout=timeout)

    def drain_latest(self) -> Any:
        """Consume everything pending and return the newest item (None if none)."""
        latest = None
        while True:
            try:
                latest = self._channel.items.get_nowait()
            except queue.Empty:
                return latest

    def close(self) -> None:
        self._channel.closed.set()
        self.drain_latest()


def snapshot_channel() -> Tuple[SnapshotSender, SnapshotReceiver]:
    channel = _Channel()
    return SnapshotSender(channel), SnapshotReceiver(channel)


class LatestSnapshot:
    """Single slot shared between threads; values are replaced whole, never mutated."""

    def __init__(self, value: Any = None):
        self._lock = threading.Lock()
        self._value = value

    def set(self, value: Any) -> None:
        with self._lock:
            self._value = value

    def get(self) -> Any:
        with self._lock:
            return self._value

    def update_from(self, receiver: SnapshotReceiver) -> bool:
        newest = receiver.drain_latest()
        if newest is None:
            return False
        self.set(newest)
        return True
