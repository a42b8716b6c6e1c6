"""
Thread-safe frame buffer holding the latest captured frame in memory.
"""

import threading
import time
from typing import Optional, Tuple
from dataclasses import dataclass

import numpy as np


@dataclass
class FrameMetadata:
    """Metadata for a captured frame."""
    timestamp: float
    width: int
    height: int
    channels: int
    # Sequence number of the frame since the buffer was created
    index: int = 0


class FrameBuffer:
    """
    Thread-safe in-memory storage for the latest captured frame.

    The capture worker publishes frames with update(); the display path
    reads them with get_latest(). Both sides take the same lock, so a frame
    is never shown while it is being replaced.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._frame: Optional[np.ndarray] = None
        self._metadata: Optional[FrameMetadata] = None
        self._count = 0

    def update(self, frame: np.ndarray, timestamp: Optional[float] = None) -> FrameMetadata:
        """
        Replace the buffered frame.

        Args:
            frame: BGR (or single-channel) frame; stored as a copy
            timestamp: Optional precomputed timestamp to associate with the frame

        Returns:
            Metadata recorded for the frame
        """
        height, width = frame.shape[:2]
        channels = frame.shape[2] if frame.ndim == 3 else 1

        with self._lock:
            self._count += 1
            metadata = FrameMetadata(
                timestamp=timestamp if timestamp is not None else time.time(),
                width=width,
                height=height,
                channels=channels,
                index=self._count,
            )
            self._frame = frame.copy()
            self._metadata = metadata
        return metadata

    def get_latest(self) -> Optional[Tuple[np.ndarray, FrameMetadata]]:
        """
        Retrieve the latest frame and its metadata.

        Returns:
            Tuple of (frame copy, metadata) or None if no frame available
        """
        with self._lock:
            if self._frame is None or self._metadata is None:
                return None
            return (self._frame.copy(), self._metadata)

    def clear(self) -> None:
        """Clear the frame buffer."""
        with self._lock:
            self._frame = None
            self._metadata = None

    def has_frame(self) -> bool:
        """Check if a frame is available."""
        with self._lock:
            return self._frame is not None

    @property
    def count(self) -> int:
        """Number of frames published so far."""
        with self._lock:
            return self._count
