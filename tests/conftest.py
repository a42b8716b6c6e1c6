"""Shared fixtures: small synthetic clips written with OpenCV."""

from types import SimpleNamespace

import cv2
import numpy as np
import pytest

SAMPLE_FRAMES = 12
SAMPLE_SIZE = (96, 64)  # width, height
SAMPLE_FPS = 10.0


def make_frame(index: int, size=SAMPLE_SIZE) -> np.ndarray:
    """Dark frame with a bright square that moves a few pixels per frame."""
    width, height = size
    frame = np.full((height, width, 3), 20, dtype=np.uint8)
    x = 8 + (index * 3) % (width - 40)
    cv2.rectangle(frame, (x, 16), (x + 24, 40), (40, 200, 240), -1)
    return frame


def write_clip(path, frames=SAMPLE_FRAMES, size=SAMPLE_SIZE, fps=SAMPLE_FPS, codec="MJPG"):
    writer = cv2.VideoWriter(str(path), cv2.VideoWriter_fourcc(*codec), fps, size, True)
    assert writer.isOpened(), f"could not create test clip {path}"
    try:
        for i in range(frames):
            writer.write(make_frame(i, size))
    finally:
        writer.release()
    return path


@pytest.fixture
def sample_video(tmp_path):
    """A short MJPG clip and the properties it was written with."""
    path = write_clip(tmp_path / "sample.avi")
    return SimpleNamespace(path=str(path), frames=SAMPLE_FRAMES, size=SAMPLE_SIZE, fps=SAMPLE_FPS)


@pytest.fixture
def sample_frame():
    return make_frame(0)


@pytest.fixture
def mjpg():
    from cvdemo.cv.fourcc import FourCC
    return FourCC("MJPG")
