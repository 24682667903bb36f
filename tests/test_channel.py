import queue
import threading
import unittest

from lol_overlay.channel import LatestSnapshot, snapshot_channel
from lol_overlay.errors import ChannelClosed


class TestSnapshotChannel(unittest.TestCase):
    def test_fifo_order(self):
        sender, receiver = snapshot_channel()
        for i in range(3):
            sender.send(i)
        self.assertEqual([receiver.try_recv() for _ in range(3)], [0, 1, 2])
        with self.assertRaises(queue.Empty):
            receiver.try_recv()

    def test_send_never_blocks(self):
        sender, receiver = snapshot_channel()
        for i in range(10000):
            sender.send(i)
        self.assertEqual(receiver.drain_latest(), 9999)

    def test_drain_latest_keeps_newest(self):
        sender, receiver = snapshot_channel()
        self.assertIsNone(receiver.drain_latest())
        sender.send("old")
        sender.send("new")
        self.assertEqual(receiver.drain_latest(), "new")
        self.assertIsNone(receiver.drain_latest())

    def test_send_after_close_fails(self):
        sender, receiver = snapshot_channel()
        sender.send("pending")
        receiver.close()
        self.assertTrue(receiver.closed)
        with self.assertRaises(ChannelClosed):
            sender.send("late")

    def test_context_exit_closes(self):
        sender, receiver = snapshot_channel()
        with receiver:
            sender.send(1)
        with self.assertRaises(ChannelClosed):
            sender.send(2)


class TestLatestSnapshot(unittest.TestCase):
    def test_update_from_receiver(self):
        sender, receiver = snapshot_channel()
        slot = LatestSnapshot()
        self.assertFalse(slot.update_from(receiver))
        self.assertIsNone(slot.get())
        sender.send("a")
        sender.send("b")
        self.assertTrue(slot.update_from(receiver))
        self.assertEqual(slot.get(), "b")
        # nothing new keeps the previous value
        self.assertFalse(slot.update_from(receiver))
        self.assertEqual(slot.get(), "b")

    def test_concurrent_writers_and_readers_see_whole_values(self):
        slot = LatestSnapshot((0, 0))
        seen = []

        def write():
            for i in range(2000):
                slot.set((i, i))

        def read():
            for _ in range(2000):
                seen.append(slot.get())

        threads = [threading.Thread(target=write), threading.Thread(target=read)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        self.assertTrue(all(a == b for a, b in seen))


if __name__ == "__main__":
    unittest.main()
