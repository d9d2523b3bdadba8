from __future__ import annotations

import logging
import sys
import threading

from island.qt_env import prepare_qt_environment

prepare_qt_environment()

from PySide6.QtWidgets import QApplication

from island.bridge.control_dispatch import ControlDispatcher
from island.bridge.event_reader import EventReader
from island.core.controller import IslandController
from island.island_window.window import IslandWindow
from island.settings import IslandSettings
from island.utils.fluent_compat import init_fluent_theme

logger = logging.getLogger("island")


def _configure_logging(level: str) -> None:
    # stdout carries the control channel, so logs go to stderr.
    logging.basicConfig(
        level=getattr(logging, level, logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def main() -> None:
    app = QApplication(sys.argv)
    app.setApplicationName("Dynamic Island")
    app.setApplicationDisplayName("Dynamic Island")
    app.setOrganizationName("DynamicIsland")

    settings = IslandSettings.load()
    _configure_logging(settings.log_level)
    init_fluent_theme()

    window = IslandWindow(settings)
    dispatcher = ControlDispatcher(sys.stdout)
    controller = IslandController(
        resize_fn=window.resize_island,
        dispatch_control_fn=dispatcher.dispatch,
        settings=settings,
        parent=app,
    )
    window.bind(controller)

    reader = EventReader(sys.stdin)
    reader.received.connect(controller.post)
    reader.finished.connect(lambda: logger.info("Event stream ended; island stays at last state"))

    def _shutdown() -> None:
        controller.shutdown()
        reader.stop()

    app.aboutToQuit.connect(_shutdown)

    controller.start()
    window.show()
    # Daemon: a blocking stdin read must not keep the process alive after quit.
    threading.Thread(target=reader.run, name="island-events", daemon=True).start()
    logger.info("Island ready; reading events from stdin")
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
