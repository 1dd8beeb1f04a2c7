"""Demo application entry point."""

import sys
import time
from asyncio import run
from datetime import UTC, datetime
from logging import Formatter, StreamHandler, getLogger
from pathlib import Path
from typing import NoReturn

import numpy as np
from PySide6.QtWidgets import QApplication

from chronaxis.common import PACKAGE_NAME, PACKAGE_PATH, PACKAGE_VERSION
from chronaxis.utility import AxisSettings, read_axis_settings
from chronaxis.widget import TimePlot

SETTINGS_FILE = PACKAGE_PATH / "axis_settings.json"

logger = getLogger(__name__)


def setup_logging() -> None:
    """Print package logs to the console in UTC time."""
    log_format = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s - %(message)s"
    date_format = "%Y-%m-%d %H:%M:%S"
    log_formatter = Formatter(log_format, datefmt=date_format)
    log_formatter.converter = time.gmtime

    log_handler = StreamHandler()
    log_handler.setFormatter(log_formatter)

    package_logger = getLogger(PACKAGE_NAME)
    package_logger.addHandler(log_handler)
    package_logger.setLevel("DEBUG")


def make_random_walk(point_count: int = 2000) -> tuple[np.ndarray, np.ndarray]:
    """Synthetic series of one point per minute, ending now."""
    now = datetime.now(UTC).timestamp()
    timestamps = now - 60.0 * np.arange(point_count)[::-1]
    values = 100 + np.cumsum(np.random.default_rng().normal(0, 1, point_count))
    return timestamps, values


def show_demo(settings_path: Path = SETTINGS_FILE) -> NoReturn:
    """Open a window with a random walk plotted against adaptive time axes."""
    setup_logging()

    axis_settings = run(read_axis_settings(settings_path))
    if axis_settings is None:
        axis_settings = AxisSettings()

    app = QApplication()
    time_plot = TimePlot(axis_settings)
    time_plot.set_series(*make_random_walk())
    time_plot.widget.setWindowTitle(f"{PACKAGE_NAME} {PACKAGE_VERSION}")
    time_plot.widget.resize(1200, 500)
    time_plot.widget.show()
    logger.info("Started up")

    sys.exit(app.exec())
