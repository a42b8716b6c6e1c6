import argparse
import logging

from .core.logging_setup import setup_logger
from .cv.capture_ui import main as capture_main
from .cv.edges import colour_edges
from .cv.errors import VideoIOError
from .cv.fourcc import FourCC
from .cv.pipeline import transcode
from .utils.config import SETTINGS, resolve_input

logger = logging.getLogger(__name__)


# ---------- programs ----------

def cmd_canny(args):
    """Write a copy of the source where only Canny edges keep their colour."""
    url = resolve_input(args.source, SETTINGS.default_source)
    transcode(url, SETTINGS.canny_output, FourCC(SETTINGS.canny_fourcc), colour_edges)
    return 0


def cmd_writer(args):
    """Write the source frames unchanged into a new container."""
    url = resolve_input(args.source, SETTINGS.default_source)
    transcode(url, SETTINGS.writer_output, FourCC(SETTINGS.writer_fourcc))
    return 0


def cmd_capture(args):
    """Show a camera index or URL in a window until [Esc] is pressed."""
    url = resolve_input(args.source, SETTINGS.default_camera)
    return capture_main(url)


# ---------- arg parsing ----------

def build_parser():
    ap = argparse.ArgumentParser(
        prog="cvdemo", description="OpenCV video demos: Canny edges, video writer, live capture"
    )
    ap.add_argument("--log-config", help="logging configuration file (fileConfig format)")
    sub = ap.add_subparsers(dest="cmd", required=True)

    c = sub.add_parser("canny", help="Canny edge detection into an AVI file")
    c.add_argument("source", nargs="?", help=f"file or URL (default {SETTINGS.default_source})")
    c.set_defaults(func=cmd_canny)

    w = sub.add_parser("writer", help="Copy frames into an AVI file")
    w.add_argument("source", nargs="?", help=f"file or URL (default {SETTINGS.default_source})")
    w.set_defaults(func=cmd_writer)

    u = sub.add_parser("capture", help="Display a camera or URL in a window")
    u.add_argument("source", nargs="?", help=f"camera index or URL (default {SETTINGS.default_camera})")
    u.set_defaults(func=cmd_capture)

    return ap


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    setup_logger(args.log_config)
    try:
        return args.func(args)
    except VideoIOError as e:
        logger.error(str(e))
        return 1
