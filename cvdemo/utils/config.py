import os
from dataclasses import dataclass, field
from pathlib import Path

DEFAULT_SOURCE = os.environ.get("CVDEMO_SOURCE", "resources/traffic.mp4")
DEFAULT_CAMERA = os.environ.get("CVDEMO_CAMERA", "-1")
DEFAULT_OUTPUT_DIR = Path(os.environ.get("CVDEMO_OUTPUT_DIR", "output"))

# Codecs tested with the FFmpeg and GStreamer backends: DIVX (avi), XVID (avi)
CANNY_FOURCC = os.environ.get("CVDEMO_CANNY_FOURCC", "DIVX")
WRITER_FOURCC = os.environ.get("CVDEMO_WRITER_FOURCC", "XVID")

DEFAULT_LOGGING_CONFIG = Path(
    os.environ.get("CVDEMO_LOGGING_CONFIG", str(Path(__file__).parent.parent / "logging.ini"))
)


@dataclass
class Settings:
    default_source: str = DEFAULT_SOURCE
    default_camera: str = DEFAULT_CAMERA
    output_dir: Path = DEFAULT_OUTPUT_DIR
    canny_fourcc: str = CANNY_FOURCC
    writer_fourcc: str = WRITER_FOURCC
    log_level: str = os.environ.get("CVDEMO_LOGLEVEL", "INFO")
    logging_config: Path = DEFAULT_LOGGING_CONFIG
    window_name: str = "cvdemo"
    esc_key: int = 27
    paint_interval_ms: int = 10
    canny_output: Path = field(init=False)
    writer_output: Path = field(init=False)

    def __post_init__(self):
        self.output_dir = Path(self.output_dir)
        self.canny_output = self.output_dir / "canny-python.avi"
        self.writer_output = self.output_dir / "writer-python.avi"


SETTINGS = Settings()


def resolve_input(value, default: str) -> str:
    """Return the command line source, or the program default when none was given."""
    if value is None or not str(value).strip():
        return default
    return str(value)
