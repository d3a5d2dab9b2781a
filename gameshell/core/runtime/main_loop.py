"""
main_loop.py
------------
Core game loop orchestrating timing, events, updates, and rendering.

Responsibilities:
- Initialize pygame and core systems
- Maintain fixed timestep update loop
- Coordinate event handling, updates, and rendering
"""

import time

import pygame

from gameshell.core.debug.debug_logger import DebugLogger
from gameshell.core.runtime.game_settings import Debug, Display, Physics
from gameshell.core.services.config_manager import load_config
from gameshell.core.services.display_manager import DisplayManager
from gameshell.core.services.input_manager import InputManager
from gameshell.core.services.scene_manager import SceneManager
from gameshell.graphics.draw_manager import DrawManager
from gameshell.scenes.boot_scene import DEFAULT_GAME_OPTIONS


class MainLoop:
    """
    Core runtime controller managing the game's main loop.

    Implements a fixed timestep for logic with variable rendering.
    """

    # ===========================================================
    # Initialization
    # ===========================================================

    def __init__(self):
        """Initialize pygame and all core systems."""
        DebugLogger.section("Initializing MainLoop")

        self.options = load_config("game_options.json", DEFAULT_GAME_OPTIONS)

        self._init_pygame()
        self._init_core_systems()
        self._init_scene_manager()

    def _init_pygame(self):
        """Initialize pygame subsystems and window caption."""
        pygame.init()
        pygame.font.init()
        pygame.display.set_caption(self.options.get("title", Display.CAPTION))

        DebugLogger.init_entry("Pygame")
        DebugLogger.init_sub("Configured Window Caption")

    def _init_core_systems(self):
        """Initialize display, input and drawing systems."""
        self.display = DisplayManager(
            Display.WIDTH,
            Display.HEIGHT,
            self.options.get("window_size", Display.DEFAULT_WINDOW_SIZE)
        )
        self.input_manager = InputManager(display_manager=self.display)
        self.draw_manager = DrawManager()

    def _init_scene_manager(self):
        """Initialize scene management and runtime state."""
        self.scenes = SceneManager(
            self.display,
            self.input_manager,
            self.draw_manager,
        )

        self.clock = pygame.time.Clock()
        self.fps = self.options.get("fps", Display.FPS)
        self.running = True
        self._last_perf_warn_time = 0.0

        DebugLogger.init_entry("Main Loop Runtime")
        DebugLogger.init_sub("Game Clock Initialized", level=1)

    # ===========================================================
    # Main Loop
    # ===========================================================

    def run(self):
        """
        Execute main game loop until quit.

        Uses fixed timestep for updates with accumulator pattern.
        Rendering happens once per frame after all updates.
        """
        DebugLogger.section("Game Loop")

        fixed_dt = Physics.FIXED_DT
        accumulator = 0.0

        try:
            while self.running:
                frame_time = self.clock.tick(self.fps) / 1000.0
                frame_time = min(frame_time, Physics.MAX_FRAME_TIME)
                accumulator += frame_time

                self._handle_events()

                while accumulator >= fixed_dt:
                    self.scenes.update(fixed_dt)
                    accumulator -= fixed_dt

                self._draw()
        finally:
            pygame.quit()
            DebugLogger.system("Pygame terminated")

    # ===========================================================
    # Event Handling
    # ===========================================================

    def _handle_events(self):
        """
        Process all pending pygame events serially.

        Routes events to:
        1. Quit handling
        2. System input (F11)
        3. Active scene
        """
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self.running = False
                DebugLogger.action("Quit signal received")
                break

            if self.input_manager.handle_system_input(event, self.display):
                continue

            self.scenes.handle_event(event)

    # ===========================================================
    # Rendering
    # ===========================================================

    def _draw(self):
        """Execute rendering pipeline."""
        start = time.perf_counter()

        self.draw_manager.clear()
        self.scenes.draw(self.draw_manager)
        self.draw_manager.render(self.display.get_game_surface(), debug=Debug.PROFILING_ENABLED)
        self.display.render()

        if Debug.PROFILING_ENABLED:
            self._check_slow_frame((time.perf_counter() - start) * 1000)

    def _check_slow_frame(self, frame_time_ms: float):
        """Log warning for slow frames (throttled to 1/second)."""
        if frame_time_ms <= Debug.FRAME_TIME_WARNING:
            return

        now = time.perf_counter()
        if now - self._last_perf_warn_time > 1.0:
            self._last_perf_warn_time = now
            DebugLogger.warn(f"Slow frame: {frame_time_ms:.2f}ms")
