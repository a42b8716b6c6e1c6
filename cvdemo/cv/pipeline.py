"""
File-to-file frame loop: read a frame, optionally transform it, write it.
"""

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

import cv2
import numpy as np

from .errors import CaptureError
from .fourcc import FourCC
from .source import Source, frame_rate, frame_size, open_capture, read_frames
from .writer import open_writer

logger = logging.getLogger(__name__)

Transform = Callable[[np.ndarray], np.ndarray]


@dataclass
class PipelineStats:
    """Result of a frame loop run."""
    frames: int
    elapsed: float

    @property
    def fps(self) -> float:
        if self.elapsed <= 0:
            return 0.0
        return self.frames / self.elapsed


def run_pipeline(
    capture: cv2.VideoCapture,
    writer: cv2.VideoWriter,
    transform: Optional[Transform] = None,
) -> PipelineStats:
    """
    Pull frames from capture until it is exhausted and push them to writer.

    Args:
        capture: Opened capture handle
        writer: Opened writer handle
        transform: Optional per-frame function; frames are written unchanged if None

    Returns:
        PipelineStats with the number of frames written and the wall-clock time taken
    """
    frames = 0
    start_time = time.time()
    for frame in read_frames(capture):
        if transform is not None:
            frame = transform(frame)
        writer.write(frame)
        frames += 1
    return PipelineStats(frames=frames, elapsed=time.time() - start_time)


def transcode(
    source: Source,
    output: Union[str, Path],
    fourcc: FourCC,
    transform: Optional[Transform] = None,
) -> PipelineStats:
    """
    Copy a video source into a new container, optionally transforming each frame.

    The writer uses the source's reported frame rate and dimensions. Both
    handles are released on every exit path.

    Raises:
        CaptureError: If the source cannot be opened or reports no frame size
        WriterError: If the output cannot be opened
    """
    logger.info(f"OpenCV {cv2.__version__}")
    logger.info(f"Input file: {source}")
    logger.info(f"Output file: {output}")

    with open_capture(source) as capture:
        size = frame_size(capture)
        logger.info(f"Resolution: {size}")
        logger.info(f"Source codec: {FourCC.from_int(capture.get(cv2.CAP_PROP_FOURCC))}")
        if size.is_empty:
            raise CaptureError(f"Source reports an empty frame size: {source}")

        with open_writer(output, fourcc, frame_rate(capture), size) as writer:
            stats = run_pipeline(capture, writer, transform)

    logger.info(f"{stats.frames} frames")
    logger.info(f"Elapsed time: {stats.elapsed:4.2f} seconds")
    return stats
