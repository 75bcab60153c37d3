"""Entry point for the pan/zoom demo viewer."""
from __future__ import annotations

import logging
import os
from pathlib import Path
import sys

from PyQt5 import QtWidgets

from pan_zoom.config import load_settings
from pan_zoom.model import PanZoomStore, ViewBoxModel
from pan_zoom.ui.canvas_widget import ViewBoxCanvas

logger = logging.getLogger(__name__)


def configure_logging(level: str = "INFO") -> None:
    base_dir = os.path.dirname(sys.argv[0])
    log_path = os.path.join(base_dir, "pan_zoom_log.txt")

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        handlers=[
            logging.FileHandler(log_path, mode="a", encoding="utf-8"),
            logging.StreamHandler(sys.stdout),
        ],
    )


def main() -> None:
    settings = load_settings(Path(sys.argv[0]) if sys.argv[0] else None)
    configure_logging(settings.log_level)
    logger.info("Starting pan/zoom viewer")

    app = QtWidgets.QApplication(sys.argv)

    store = PanZoomStore(ViewBoxModel(verify_invariants=settings.verify_invariants))
    window = QtWidgets.QMainWindow()
    window.setWindowTitle("Pan/Zoom")
    window.setCentralWidget(ViewBoxCanvas(store, settings))
    window.resize(800, 600)
    window.show()

    sys.exit(app.exec_())


if __name__ == "__main__":
    main()
