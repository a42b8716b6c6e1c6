"""Logging configuration for the cvdemo programs."""
import configparser
import logging
import logging.config
import os
import sys
import traceback
from pathlib import Path
from typing import Optional, Union

from ..utils.config import SETTINGS

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def _load_config_file(path: Path) -> bool:
    """Apply a fileConfig-style logging configuration, reporting failures on stderr."""
    try:
        logging.config.fileConfig(str(path), disable_existing_loggers=False)
    except (OSError, KeyError, ValueError, RuntimeError, configparser.Error) as e:
        print(f"Unable to read logging configuration {path}: {e}", file=sys.stderr)
        traceback.print_exc()
        return False
    return True


def setup_logger(config_path: Optional[Union[str, Path]] = None) -> logging.Logger:
    """Setup and configure logging for the cvdemo programs."""
    explicit_level = os.environ.get("CVDEMO_LOGLEVEL", "").strip()
    lvl_name = (explicit_level or getattr(SETTINGS, "log_level", None) or "INFO").upper()
    level = getattr(logging, lvl_name, logging.INFO)

    path = Path(config_path) if config_path else SETTINGS.logging_config
    configured = False
    if config_path or (path and path.exists()):
        configured = _load_config_file(path)

    # Configure ROOT logger so ALL child loggers (cvdemo.cv.*, etc.) inherit the level
    root_logger = logging.getLogger()
    if not root_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
        root_logger.addHandler(handler)
    # An explicit CVDEMO_LOGLEVEL wins over levels set by the config file
    if not configured or explicit_level:
        root_logger.setLevel(level)
    if configured and explicit_level:
        logging.getLogger("cvdemo").setLevel(level)

    return logging.getLogger("cvdemo")
