"""
Canny edge detection on BGR frames.
"""

from dataclasses import dataclass
from typing import Optional, Tuple

import cv2
import numpy as np


@dataclass
class CannyParams:
    """Parameters for the gray -> blur -> Canny chain."""
    threshold1: float = 100
    threshold2: float = 200
    aperture_size: int = 3
    l2_gradient: bool = False
    # Reduce noise with a 3x3 kernel before detection
    blur_ksize: Tuple[int, int] = (3, 3)
    blur_sigma: float = 0


DEFAULT_PARAMS = CannyParams()


def detect_edges(frame: np.ndarray, params: Optional[CannyParams] = None) -> np.ndarray:
    """
    Compute a single-channel edge mask for a frame.

    Args:
        frame: BGR frame (grayscale frames are accepted as-is)
        params: Detector parameters, DEFAULT_PARAMS if omitted

    Returns:
        uint8 mask, 255 on edges and 0 elsewhere
    """
    params = params or DEFAULT_PARAMS
    if frame.ndim == 3:
        gray = cv2.cvtColor(frame, cv2.COLOR_BGR2GRAY)
    else:
        gray = frame
    blur = cv2.GaussianBlur(gray, params.blur_ksize, params.blur_sigma)
    return cv2.Canny(
        blur,
        params.threshold1,
        params.threshold2,
        apertureSize=params.aperture_size,
        L2gradient=params.l2_gradient,
    )


def colour_edges(frame: np.ndarray, params: Optional[CannyParams] = None) -> np.ndarray:
    """Keep the original colour on edge pixels and black out everything else."""
    edges = detect_edges(frame, params)
    return cv2.bitwise_and(frame, frame, mask=edges)
