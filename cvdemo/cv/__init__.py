"""
OpenCV video helpers for the demo programs.

This module provides:
- Source parsing and scoped capture/writer handles
- FourCC codec identifiers
- Canny edge colouring
- The file-to-file frame loop
- A live capture window backed by a worker thread
"""

from .capture_ui import CaptureUI
from .edges import CannyParams, colour_edges, detect_edges
from .errors import CaptureError, FourCCError, VideoIOError, WriterError
from .fourcc import FourCC
from .frame_buffer import FrameBuffer, FrameMetadata
from .pipeline import PipelineStats, run_pipeline, transcode
from .source import FrameSize, frame_rate, frame_size, open_capture, parse_source, read_frames
from .writer import open_writer

__all__ = [
    # Errors
    "VideoIOError",
    "CaptureError",
    "WriterError",
    "FourCCError",

    # Sources and sinks
    "FrameSize",
    "parse_source",
    "frame_size",
    "frame_rate",
    "open_capture",
    "read_frames",
    "open_writer",
    "FourCC",

    # Processing
    "CannyParams",
    "detect_edges",
    "colour_edges",
    "PipelineStats",
    "run_pipeline",
    "transcode",

    # Live display
    "CaptureUI",
    "FrameBuffer",
    "FrameMetadata",
]
