"""
Unit tests for cvdemo.cv.frame_buffer.
"""

import threading

import numpy as np

from cvdemo.cv.frame_buffer import FrameBuffer


class TestFrameBuffer:

    def test_empty(self):
        buf = FrameBuffer()
        assert buf.get_latest() is None
        assert not buf.has_frame()
        assert buf.count == 0

    def test_update_and_get(self):
        buf = FrameBuffer()
        frame = np.full((4, 6, 3), 7, dtype=np.uint8)
        meta = buf.update(frame, timestamp=123.0)

        assert meta.width == 6
        assert meta.height == 4
        assert meta.channels == 3
        assert meta.index == 1
        assert meta.timestamp == 123.0

        latest, latest_meta = buf.get_latest()
        np.testing.assert_array_equal(latest, frame)
        assert latest_meta is meta

    def test_copies_on_update_and_get(self):
        buf = FrameBuffer()
        frame = np.zeros((2, 2, 3), dtype=np.uint8)
        buf.update(frame)
        frame[:] = 255

        latest, _ = buf.get_latest()
        assert latest.max() == 0
        latest[:] = 9
        assert buf.get_latest()[0].max() == 0

    def test_single_channel(self):
        buf = FrameBuffer()
        meta = buf.update(np.zeros((3, 5), dtype=np.uint8))
        assert meta.channels == 1

    def test_clear_keeps_count(self):
        buf = FrameBuffer()
        buf.update(np.zeros((2, 2, 3), dtype=np.uint8))
        buf.clear()
        assert not buf.has_frame()
        assert buf.count == 1
        assert buf.update(np.zeros((2, 2, 3), dtype=np.uint8)).index == 2

    def test_concurrent_updates(self):
        buf = FrameBuffer()

        def publish():
            for i in range(200):
                buf.update(np.full((8, 8, 3), i % 256, dtype=np.uint8))

        threads = [threading.Thread(target=publish) for _ in range(4)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert buf.count == 800
        frame, meta = buf.get_latest()
        assert frame.shape == (8, 8, 3)
        # Every frame is uniform, so a torn write would show mixed values
        assert len(np.unique(frame)) == 1
