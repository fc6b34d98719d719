"""Rendering for flapper."""

from .primitives import fill, draw_image
from .renderer import Renderer

__all__ = ["fill", "draw_image", "Renderer"]
