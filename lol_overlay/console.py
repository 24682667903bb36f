"""Text stand-in for the overlay window: keeps the newest snapshot and renders it."""

import logging
import queue
import time
from typing import Callable, List, Optional

from .channel import LatestSnapshot, SnapshotReceiver
from .stats import overlay_rows, summarize

WAITING = "Waiting for game data..."

logger = logging.getLogger(__name__)


class ConsoleOverlay:
    """Consumer side of the snapshot channel.

    ``toggles`` is any queue the hotkey side puts opaque signals on; each one
    flips visibility.
    """

    def __init__(self, receiver: SnapshotReceiver, toggles: Optional[queue.Queue] = None,
                 slot: Optional[LatestSnapshot] = None):
        self.receiver = receiver
        self.toggles = toggles
        self.slot = slot if slot is not None else LatestSnapshot()
        self.visible = True

    def _consume_toggles(self) -> bool:
        pressed = False
        while self.toggles is not None:
            try:
                self.toggles.get_nowait()
            except queue.Empty:
                break
            self.visible = not self.visible
            pressed = True
            logger.info("toggling overlay visibility to: %s", self.visible)
        return pressed

    def refresh(self) -> List[str]:
        self._consume_toggles()
        self.slot.update_from(self.receiver)
        if not self.visible:
            return []
        info = self.slot.get()
        summary = summarize(info) if info is not None else None
        if summary is None:
            return [WAITING]
        lines = [f"{summary.name} | {summary.champion_name} (lvl {summary.level})"]
        lines += [f"{label + ':':<15}{value:>18}" for label, value in overlay_rows(summary)]
        return lines

    def run(self, interval: float = 1.0, emit: Callable[[str], None] = print) -> None:
        """Render every ``interval`` seconds until the receiver is closed."""
        while not self.receiver.closed:
            lines = self.refresh()
            if lines:
                emit("\n".join(lines))
            time.sleep(interval)
