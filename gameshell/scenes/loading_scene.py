"""
loading_scene.py
----------------
Preloads images from the asset manifest, one per frame, with a progress bar.
"""

import pygame

from gameshell.core.debug.debug_logger import DebugLogger
from gameshell.core.runtime.base_scene import BaseScene
from gameshell.core.runtime.game_settings import Display, Layers, MenuStyle
from gameshell.graphics.text import render_text
from gameshell.scenes.transitions import FadeTransition


class LoadingScene(BaseScene):
    """Loads queued assets, then fades into the main menu."""

    NEXT_SCENE = "Menu"
    BAR_SIZE = (Display.WIDTH // 2, 24)
    BAR_COLOR = (255, 255, 0)
    FRAME_COLOR = (255, 255, 255)

    def on_load(self, **scene_data):
        manifest = self.services.get_global("asset_manifest", {})
        self.pending = list(manifest.get("images", []))
        self.total = len(self.pending)
        self.loaded = 0
        self.failed = 0
        self.finished = False

        self.bar_rect = pygame.Rect((0, 0), self.BAR_SIZE)
        self.bar_rect.center = (Display.WIDTH // 2, Display.HEIGHT // 2)
        self.label = render_text("Loading...", MenuStyle.INSTRUCTION)

    @property
    def progress(self) -> float:
        if self.total == 0:
            return 1.0
        return (self.loaded + self.failed) / self.total

    def update(self, dt: float):
        if self.pending:
            self._load_next()
            return

        if not self.finished:
            self.finished = True
            DebugLogger.system(
                f"Loaded {self.loaded}/{self.total} assets ({self.failed} missing)",
                category="loading",
            )
            self.scene_manager.set_scene(self.NEXT_SCENE, transition=FadeTransition(0.4))

    def _load_next(self):
        item = self.pending.pop(0)
        key = item.get("key")
        path = item.get("path")
        if not key or not path:
            DebugLogger.warn(f"Skipping malformed asset entry: {item}", category="loading")
            self.failed += 1
            return

        if self.draw_manager.load_image(key, path, item.get("scale", 1.0)):
            self.loaded += 1
        else:
            self.failed += 1

    def draw(self, draw_manager):
        fill = self.bar_rect.copy()
        fill.width = int(self.bar_rect.width * self.progress)

        draw_manager.queue_shape("rect", fill, self.BAR_COLOR, layer=Layers.UI)
        draw_manager.queue_shape("rect", self.bar_rect, self.FRAME_COLOR, layer=Layers.UI, width=2)

        label_rect = self.label.get_rect(midbottom=(self.bar_rect.centerx, self.bar_rect.top - 12))
        draw_manager.queue_draw(self.label, label_rect, layer=Layers.UI)

    def handle_event(self, event):
        pass
