"""A small pygame-based application engine with renderers and a leveled logger."""

__version__ = "0.1.0"
__all__ = ["application", "engine", "logger", "renderer"]