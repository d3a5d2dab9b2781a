"""
draw_manager.py
---------------
Centralized rendering manager for batching and layered draw calls.

Responsibilities:
- Load and cache images
- Maintain layered draw queue
- Render queued surfaces and shapes
"""

import pygame

from gameshell.core.debug.debug_logger import DebugLogger
from gameshell.core.runtime.game_settings import Display


class DrawManager:
    """Handles all rendering operations with layered batching."""

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self):
        """Initialize draw manager with empty queues."""
        self.images = {}

        # Layer queues
        self.surface_layers = {}  # {layer: [(surface, rect), ...]}
        self.shape_layers = {}    # {layer: [(shape_type, rect, color, kwargs), ...]}
        self._layer_keys_cache = []
        self._layers_dirty = False

        self.background_color = Display.BACKGROUND_COLOR

        DebugLogger.init_entry("DrawManager")

    # ===========================================================
    # Image Loading
    # ===========================================================

    def load_image(self, key, path, scale=1.0) -> bool:
        """
        Load and cache an image.

        Missing or unreadable files are replaced by a white placeholder.

        Args:
            key: Cache identifier
            path: File path to image
            scale: Scaling factor (default 1.0)

        Returns:
            True if the file loaded, False if a placeholder was cached
        """
        loaded = True
        try:
            img = pygame.image.load(path).convert_alpha()
        except (FileNotFoundError, pygame.error):
            DebugLogger.warn(f"Missing image at {path}", category="loading")
            img = pygame.Surface((40, 40))
            img.fill((255, 255, 255))
            loaded = False

        if scale != 1.0:
            w, h = img.get_size()
            img = pygame.transform.scale(img, (int(w * scale), int(h * scale)))
            DebugLogger.state(f"Scaled '{key}' to {img.get_size()} ({scale:.2f}x)", category="loading")

        self.images[key] = img
        return loaded

    def get_image(self, key):
        """
        Retrieve cached image by key.

        Returns:
            pygame.Surface or None
        """
        img = self.images.get(key)
        if img is None:
            DebugLogger.warn(f"No cached image for key '{key}'")
        return img

    # ===========================================================
    # Queue Management
    # ===========================================================

    def clear(self):
        """Clear all draw queues for new frame."""
        for layer_items in self.surface_layers.values():
            layer_items.clear()
        for layer_items in self.shape_layers.values():
            layer_items.clear()

    def queue_draw(self, surface, rect, layer=0):
        """
        Queue a surface for drawing.

        Args:
            surface: pygame.Surface to draw
            rect: Position rectangle
            layer: Render layer (lower = first)
        """
        if surface is None or rect is None:
            DebugLogger.warn(f"Skipped invalid draw call at layer {layer}")
            return

        if layer not in self.surface_layers:
            self.surface_layers[layer] = []
            self._layers_dirty = True

        self.surface_layers[layer].append((surface, rect))

    def queue_shape(self, shape_type, rect, color, layer=0, **kwargs):
        """
        Queue a primitive shape ("rect" or "line") for drawing.

        Args:
            shape_type: Shape identifier
            rect: pygame.Rect (for "line", kwargs carry start/end)
            color: RGB tuple
            layer: Render layer
            **kwargs: Shape options (width, border_radius, start, end)
        """
        if layer not in self.shape_layers:
            self.shape_layers[layer] = []
            self._layers_dirty = True

        self.shape_layers[layer].append((shape_type, rect, color, kwargs))

    def queued_count(self) -> int:
        """Number of surfaces and shapes queued this frame."""
        surfaces = sum(len(items) for items in self.surface_layers.values())
        shapes = sum(len(items) for items in self.shape_layers.values())
        return surfaces + shapes

    # ===========================================================
    # Rendering
    # ===========================================================

    def render(self, target_surface, debug=False):
        """
        Render all queued items to target surface.

        Args:
            target_surface: Game surface
            debug: Log render stats if True
        """
        target_surface.fill(self.background_color)

        if self._layers_dirty:
            all_layers = set(self.surface_layers.keys()) | set(self.shape_layers.keys())
            self._layer_keys_cache = sorted(all_layers)
            self._layers_dirty = False

        for layer in self._layer_keys_cache:
            if self.surface_layers.get(layer):
                target_surface.blits(self.surface_layers[layer])

            for shape_type, rect, color, kwargs in self.shape_layers.get(layer, ()):
                self._draw_shape(target_surface, shape_type, rect, color, **kwargs)

        if debug:
            DebugLogger.state(f"Rendered {self.queued_count()} items", category="drawing")

    def _draw_shape(self, surface, shape_type, rect, color, **kwargs):
        """Draw a queued primitive."""
        if shape_type == "rect":
            pygame.draw.rect(
                surface, color, rect,
                kwargs.get("width", 0),
                border_radius=kwargs.get("border_radius", 0),
            )
        elif shape_type == "line":
            pygame.draw.line(
                surface, color, kwargs["start"], kwargs["end"], kwargs.get("width", 1)
            )
        else:
            DebugLogger.warn(f"Unknown shape type: {shape_type}")
