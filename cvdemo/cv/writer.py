"""
Scoped cv2.VideoWriter handles.
"""

import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Tuple, Union

import cv2

from .errors import WriterError
from .fourcc import FourCC

logger = logging.getLogger(__name__)


@contextmanager
def open_writer(
    path: Union[str, Path],
    fourcc: FourCC,
    fps: float,
    size: Tuple[int, int],
    is_color: bool = True,
) -> Iterator[cv2.VideoWriter]:
    """
    Open a cv2.VideoWriter and release it when the block exits.

    Args:
        path: Output container path; missing parent directories are created
        fourcc: Codec identifier
        fps: Output frame rate, normally the source's reported rate
        size: (width, height) of the frames that will be written
        is_color: Whether frames are 3-channel BGR

    Raises:
        WriterError: If OpenCV could not open the output
    """
    path = Path(path)
    if path.parent != path and not path.parent.exists():
        path.parent.mkdir(parents=True, exist_ok=True)

    width, height = int(size[0]), int(size[1])
    writer = cv2.VideoWriter(str(path), fourcc.to_int(), fps, (width, height), is_color)
    try:
        if not writer.isOpened():
            raise WriterError(f"Unable to open writer: {path} (fourcc={fourcc}, fps={fps}, size={width}x{height})")
        yield writer
    finally:
        writer.release()
        logger.debug(f"Released writer {path}")
