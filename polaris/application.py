"""Application base class and the command that starts it."""

from __future__ import annotations

import argparse
from typing import Optional, Sequence

import pygame

from polaris.engine import Engine
from polaris.logger import DEFAULT_LOG_FILE, Logger


def _show(window: pygame.Surface) -> pygame.Surface:
    """Make the display window visible; other surfaces are returned as they are."""
    if pygame.display.get_init() and window is pygame.display.get_surface():
        return pygame.display.set_mode(window.get_size(), pygame.RESIZABLE | pygame.SHOWN)
    return window


class Application:
    """Base application driven by an :class:`Engine`.

    Subclasses override :meth:`on_created` and :meth:`on_destroy` to hook
    into the window's lifetime.
    """

    def __init__(self, engine: Optional[Engine] = None) -> None:
        self._window: Optional[pygame.Surface] = None
        self._engine = engine if engine is not None else Engine()
        Logger.get_instance().info("Application constructed")

    @property
    def window(self) -> Optional[pygame.Surface]:
        return self._window

    @property
    def engine(self) -> Engine:
        return self._engine

    def initialize(self) -> None:
        """Attach to the engine and initialize it; errors are logged and re-raised."""
        log = Logger.get_instance()
        log.info("Application initializing...")
        try:
            self._engine.set_application(self)
            self._engine.initialize()
        except Exception:
            log.error("Application initialization failed")
            raise

    def run(self) -> None:
        """Run the engine's event loop until it quits."""
        Logger.get_instance().info("Application Running...")
        self._engine.run()

    def set_window(self, window: Optional[pygame.Surface]) -> None:
        """Take the engine's window, call :meth:`on_created`, then show it.

        Raises ValueError if ``window`` is None.
        """
        if window is None:
            Logger.get_instance().error("Cannot set null window")
            raise ValueError("Cannot set null window")
        self._window = window
        self.on_created()
        self._window = _show(self._window)

    def on_created(self) -> None:
        """Called once the window exists and before it is shown."""
        Logger.get_instance().info("Application OnCreated: Window is now available.")

    def on_destroy(self) -> None:
        """Called by the engine before it shuts down."""
        Logger.get_instance().info(
            "Application onDestroy: Cleaning up application resources."
        )


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the logger, run an application until it quits and return an exit code."""
    parser = argparse.ArgumentParser(prog="polaris", description="Run the engine.")
    parser.add_argument(
        "--log-file", default=DEFAULT_LOG_FILE, help="file that log lines are appended to"
    )
    args = parser.parse_args(argv)

    logger = Logger.get_instance()
    logger.initialize(args.log_file)
    try:
        app = Application()
        app.initialize()
        app.run()
    except RuntimeError:
        return 1
    finally:
        logger.shutdown()
    return 0