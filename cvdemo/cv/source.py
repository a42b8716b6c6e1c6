"""
Capture source helpers: source parsing, scoped VideoCapture handles and frame iteration.
"""

import logging
import re
from contextlib import contextmanager
from typing import Iterator, NamedTuple, Union

import cv2
import numpy as np

from .errors import CaptureError

logger = logging.getLogger(__name__)

# Optional sign followed by one or more digits
_CAMERA_INDEX = re.compile(r"-?\d+")

Source = Union[int, str]


class FrameSize(NamedTuple):
    width: int
    height: int

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def __str__(self):
        return f"{self.width}x{self.height}"


def parse_source(url) -> Source:
    """
    Interpret a command line source.

    A purely numeric value (optionally negative) is a camera index, anything
    else is handed to OpenCV as a file path or URL.
    """
    if isinstance(url, int):
        return url
    text = str(url).strip()
    if _CAMERA_INDEX.fullmatch(text):
        return int(text)
    return text


def frame_size(capture: cv2.VideoCapture) -> FrameSize:
    """Frame dimensions reported by the capture backend."""
    return FrameSize(
        int(capture.get(cv2.CAP_PROP_FRAME_WIDTH)),
        int(capture.get(cv2.CAP_PROP_FRAME_HEIGHT)),
    )


def frame_rate(capture: cv2.VideoCapture) -> float:
    return float(capture.get(cv2.CAP_PROP_FPS))


@contextmanager
def open_capture(source: Source, require_open: bool = True) -> Iterator[cv2.VideoCapture]:
    """
    Open a cv2.VideoCapture and release it when the block exits.

    Args:
        source: Camera index or file path/URL (see parse_source)
        require_open: Raise CaptureError if OpenCV could not open the source

    Raises:
        CaptureError: If the source did not open and require_open is set
    """
    capture = cv2.VideoCapture(parse_source(source))
    try:
        if require_open and not capture.isOpened():
            raise CaptureError(f"Unable to open source: {source}")
        yield capture
    finally:
        capture.release()
        logger.debug(f"Released capture {source}")


def read_frames(capture: cv2.VideoCapture) -> Iterator[np.ndarray]:
    """Yield frames until the capture stops returning them."""
    while True:
        ret, frame = capture.read()
        if not ret or frame is None:
            return
        yield frame
