"""Renderers that draw frames onto a window surface."""

from __future__ import annotations

from typing import Any, ClassVar, Optional

import pygame

CLEAR_COLOR = (255, 0, 0, 255)


class PlatformRenderer:
    """Base renderer. Subclasses draw into a window; this one draws nothing."""

    _instance: ClassVar[Optional["PlatformRenderer"]] = None

    def render_frame(self) -> None:
        """Render one frame. The base renderer has nothing to draw."""

    def create_renderer(self, window: Any) -> None:
        """Set up rendering for ``window`` and register a shared base renderer."""
        PlatformRenderer._instance = PlatformRenderer()

    @classmethod
    def get_instance(cls) -> Optional["PlatformRenderer"]:
        """Return the shared renderer registered by :meth:`create_renderer`, if any."""
        return PlatformRenderer._instance


class SurfaceRenderer(PlatformRenderer):
    """Renderer that clears a pygame surface to red on every frame."""

    def __init__(self) -> None:
        self._surface: Optional[pygame.Surface] = None

    @property
    def surface(self) -> Optional[pygame.Surface]:
        return self._surface

    def create_renderer(self, window: Optional[pygame.Surface]) -> None:
        """Attach to ``window``; raise RuntimeError if there is no window."""
        if not isinstance(window, pygame.Surface):
            raise RuntimeError("Failed to create renderer")
        self._surface = window

    def render_frame(self) -> None:
        """Clear the surface to red and present it if it is the display."""
        if self._surface is None:
            raise RuntimeError("Renderer has not been created")
        self._surface.fill(CLEAR_COLOR)
        if pygame.display.get_init() and pygame.display.get_surface() is self._surface:
            pygame.display.flip()

    def destroy(self) -> None:
        """Release the surface and shut pygame down."""
        self._surface = None
        pygame.quit()