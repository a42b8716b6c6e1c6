"""
Live capture window: one background thread reads frames, the main thread paints them.
"""

import logging
import threading
from typing import Optional

import cv2
import numpy as np

from ..utils.config import SETTINGS
from .frame_buffer import FrameBuffer
from .source import FrameSize, Source, frame_size, parse_source

logger = logging.getLogger(__name__)


class CaptureUI:
    """
    Show frames from a camera index or URL in an OpenCV window.

    This class manages:
    - The capture handle for the source
    - A single worker thread that reads and converts frames
    - The display loop, which exits on [Esc], window close, or end of source
    """

    def __init__(self, url: Source, window_name: Optional[str] = None):
        """
        Open the capture source.

        Args:
            url: Camera index (e.g. "0", "-1") or file path/URL
            window_name: Title of the display window
        """
        self.url = url
        self.window_name = window_name or SETTINGS.window_name
        self.frame_buffer = FrameBuffer()

        self._capture: Optional[cv2.VideoCapture] = cv2.VideoCapture(parse_source(url))
        self._frame_size = frame_size(self._capture)
        self._capture_thread: Optional[threading.Thread] = None
        self._stop_event = threading.Event()
        self._frames_captured = 0

        logger.info(f"OpenCV {cv2.__version__}")
        logger.info("Press [Esc] to exit")
        logger.info(f"URL: {url}")
        logger.info(f"Resolution: {self._frame_size}")

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.stop()

    @property
    def frame_size(self) -> FrameSize:
        return self._frame_size

    @property
    def is_open(self) -> bool:
        """
        Whether the source delivers frames.

        Some backends report a successful open for devices that do not exist,
        and read() then blocks; a zero frame size is the reliable signal.
        """
        return self._capture is not None and not self._frame_size.is_empty

    @property
    def is_running(self) -> bool:
        return self._capture_thread is not None and self._capture_thread.is_alive()

    @property
    def frames_captured(self) -> int:
        return self._frames_captured

    def start(self) -> None:
        """Create the frame acquisition thread and start it."""
        if self._capture_thread is not None:
            return
        self._stop_event.clear()
        self._capture_thread = threading.Thread(target=self.run, daemon=True, name="CV-Capture")
        self._capture_thread.start()
        logger.debug("Capture thread started")

    def stop(self, timeout: float = 5.0) -> None:
        """Stop frame acquisition and release the capture handle."""
        self._stop_event.set()
        if self._capture_thread is not None:
            self._capture_thread.join(timeout=timeout)
            if self._capture_thread.is_alive():
                # Releasing under a blocked read() crashes some backends
                logger.warning("Capture thread did not stop within %.1f seconds", timeout)
                return
            self._capture_thread = None

        if self._capture is not None:
            self._capture.release()
            self._capture = None
        self.frame_buffer.clear()

    def run(self) -> None:
        """Read a frame, convert it, publish it for painting; repeat until the source stops."""
        logger.info("Capture loop started")
        while not self._stop_event.is_set():
            ret, frame = self._capture.read()
            if not ret or frame is None:
                break
            self.frame_buffer.update(self.convert(frame))
            self._frames_captured += 1
        logger.info(f"Capture loop stopped after {self._frames_captured} frames")

    def convert(self, frame: np.ndarray) -> np.ndarray:
        """
        Prepare a captured frame for display.

        Add image processing here. The default only guarantees a contiguous
        3-channel uint8 BGR image.
        """
        if frame.ndim == 2:
            frame = cv2.cvtColor(frame, cv2.COLOR_GRAY2BGR)
        if frame.dtype != np.uint8:
            frame = cv2.convertScaleAbs(frame)
        return np.ascontiguousarray(frame)

    def paint(self) -> bool:
        """Draw the latest frame; returns False if nothing has been captured yet."""
        latest = self.frame_buffer.get_latest()
        if latest is None:
            return False
        frame, _ = latest
        cv2.imshow(self.window_name, frame)
        return True

    def _window_closed(self) -> bool:
        return cv2.getWindowProperty(self.window_name, cv2.WND_PROP_VISIBLE) < 1

    def show(self) -> None:
        """Run the display loop on the calling thread until [Esc], window close, or end of source."""
        window_created = False
        try:
            cv2.namedWindow(self.window_name, cv2.WINDOW_NORMAL)
            window_created = True
            # Set window size based on image size
            cv2.resizeWindow(self.window_name, self._frame_size.width, self._frame_size.height)
            while True:
                self.paint()
                key = cv2.waitKey(SETTINGS.paint_interval_ms) & 0xFF
                if key == SETTINGS.esc_key:
                    logger.info("Esc pressed")
                    break
                if self._window_closed():
                    logger.info("Window closed")
                    break
                if not self.is_running:
                    # The worker may have published frames since the last paint
                    self.paint()
                    cv2.waitKey(SETTINGS.paint_interval_ms)
                    logger.info("Source exhausted")
                    break
        finally:
            self.stop()
            if window_created:
                cv2.destroyWindow(self.window_name)


def main(url: Source) -> int:
    """
    Open url and display it until the user exits.

    Returns:
        Process exit status, 1 if the source could not be opened
    """
    window = CaptureUI(url)
    # Deal with VideoCapture opening nonexistent devices, otherwise read() hangs
    if not window.is_open:
        logger.error("Unable to open device")
        window.stop()
        return 1
    window.start()
    window.show()
    return 0
