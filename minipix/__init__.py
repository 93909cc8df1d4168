"""Windows with framebuffers, pixel drawing, XPM images and event hooks for small graphical programs."""

__version__ = "0.1.0"

__all__ = ["colors", "textscan", "image", "xpm", "events", "display", "examples"]