"""OpenCV demo programs: Canny edge video, raw video writer and live capture window."""

__version__ = "1.0.0"
