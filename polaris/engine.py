"""Engine that owns the window, the event loop and the renderer."""

from __future__ import annotations

from typing import TYPE_CHECKING, Callable, Optional, Tuple

import pygame

from polaris.logger import Logger
from polaris.renderer import PlatformRenderer, SurfaceRenderer

if TYPE_CHECKING:
    from polaris.application import Application

WINDOW_TITLE = "Vega42"
WINDOW_SIZE = (800, 600)
WINDOW_FLAGS = pygame.HIDDEN | pygame.RESIZABLE

_RESIZE_EVENTS = frozenset({pygame.VIDEORESIZE, pygame.WINDOWRESIZED})


class Engine:
    """Creates the window, runs the event loop and renders a frame per pass.

    The window is created hidden; the application shows it once it has been
    told about it.
    """

    def __init__(
        self,
        renderer_factory: Callable[[], PlatformRenderer] = SurfaceRenderer,
        title: str = WINDOW_TITLE,
        size: Tuple[int, int] = WINDOW_SIZE,
    ) -> None:
        self._renderer_factory = renderer_factory
        self._title = title
        self._size = size
        self._window: Optional[pygame.Surface] = None
        self._renderer: Optional[PlatformRenderer] = None
        self._application: Optional["Application"] = None
        Logger.get_instance().info("Engine constructed")

    @property
    def window(self) -> Optional[pygame.Surface]:
        return self._window

    @property
    def renderer(self) -> Optional[PlatformRenderer]:
        return self._renderer

    @property
    def application(self) -> Optional["Application"]:
        return self._application

    def set_application(self, app: Optional["Application"]) -> None:
        """Attach the application that receives window and shutdown notices."""
        self._application = app
        Logger.get_instance().debug("Application set on Engine")

    def initialize(self) -> None:
        """Start the video system, create the window and set up the renderer.

        Raises RuntimeError if the video system or the window cannot be created.
        """
        log = Logger.get_instance()
        log.info("Engine initializing...")

        try:
            pygame.display.init()
        except pygame.error as exc:
            log.error(f"SDL initialization failed: {exc}")
            raise RuntimeError(f"SDL initialization failed: {exc}") from exc

        try:
            window = pygame.display.set_mode(self._size, WINDOW_FLAGS)
            pygame.display.set_caption(self._title)
        except pygame.error as exc:
            log.error(f"Window creation failed: {exc}")
            pygame.quit()
            raise RuntimeError(f"Window creation failed: {exc}") from exc
        self._window = window

        log.info("Engine initialized successfully")

        self._renderer = self._renderer_factory()

        if self._application is not None:
            self._application.set_window(self._window)
            # Showing the window may hand back a fresh display surface.
            self._window = pygame.display.get_surface() or self._window
        else:
            log.warn("No application set, skipping setWindow call")

        self._renderer.create_renderer(self._window)

    def run(self) -> None:
        """Process events and render until a quit or key press, then shut down.

        Raises RuntimeError if called before :meth:`initialize`.
        """
        log = Logger.get_instance()
        if self._window is None or self._renderer is None:
            log.error("Cannot run engine: window not initialized")
            raise RuntimeError("Cannot run engine: window not initialized")

        log.info("Engine running...")

        running = True
        while running:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    log.info("Quit event received")
                    running = False
                elif event.type == pygame.KEYDOWN:
                    log.debug("Key pressed, quitting")
                    running = False
                elif event.type in _RESIZE_EVENTS:
                    log.debug("Window resized")
            self._renderer.render_frame()

        self.shutdown()

    def shutdown(self) -> None:
        """Notify the application, close the window and stop the video system."""
        log = Logger.get_instance()
        log.info("Engine shutting down...")

        if self._application is not None:
            self._application.on_destroy()
        else:
            log.warn("No application set, skipping onDestroy call")

        if self._window is not None:
            pygame.display.quit()
            self._window = None

        pygame.quit()
        log.info("Engine shutdown complete")