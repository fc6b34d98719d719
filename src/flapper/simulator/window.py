"""
Desktop window using pygame.

Runs the frame loop, feeds key presses to the engine keyboard and
draws the rendered buffer plus the score label.

Keyboard Mapping:
    SPACE: Jump (configurable through FLAPPER_JUMP_KEY)
    D: Toggle debug overlay
    ESC / Q: Exit
"""

import asyncio
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

import pygame

from flapper.config.settings import GameSettings, hex_to_rgb
from flapper.core.events import EventBus
from flapper.engine.input import KEY_NAMES
from flapper.engine.text import Label
from flapper.game.lifecycle import MainState
from flapper.graphics.renderer import Renderer

logger = logging.getLogger(__name__)

# Longest frame the simulation will take in one step
MAX_FRAME_MS = 100.0


@dataclass
class WindowConfig:
    """Window configuration."""
    title: str = "Flapper"
    scale: int = 1
    fps: int = 60
    debug_color: Tuple[int, int, int] = (20, 20, 30)


class GameWindow:
    """Main window driving a MainState."""

    def __init__(
        self,
        main_state: MainState,
        settings: GameSettings,
        events: EventBus,
        config: Optional[WindowConfig] = None,
    ) -> None:
        self.main_state = main_state
        self.game = main_state.game
        self.settings = settings
        self.events = events
        self.config = config or WindowConfig(scale=settings.window_scale, fps=settings.fps)

        self.renderer = Renderer()
        self._buffer = self.renderer.create_buffer(self.game)

        self._screen: Optional[pygame.Surface] = None
        self._clock: Optional[pygame.time.Clock] = None
        self._running = False
        self._frame_count = 0
        self._show_debug = settings.debug
        self._fonts: Dict[Tuple[str, int], pygame.font.Font] = {}

        logger.info("GameWindow created")

    def _init_pygame(self) -> None:
        """Initialize pygame and create window."""
        pygame.init()
        pygame.display.set_caption(self.config.title)

        size = (self.game.width * self.config.scale, self.game.height * self.config.scale)
        self._screen = pygame.display.set_mode(size, pygame.DOUBLEBUF)
        self._clock = pygame.time.Clock()
        pygame.font.init()

        logger.info(f"Pygame initialized: {size[0]}x{size[1]}")

    def _font(self, family: str, size: int) -> pygame.font.Font:
        key = (family, size)
        font = self._fonts.get(key)
        if font is None:
            font = pygame.font.SysFont(family or None, size)
            self._fonts[key] = font
        return font

    def _handle_events(self) -> None:
        """Process pygame events."""
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                self._running = False

            elif event.type == pygame.KEYDOWN:
                self._handle_keydown(event)

            elif event.type == pygame.KEYUP:
                name = KEY_NAMES.get(event.key)
                if name:
                    self.game.keyboard.key_up(name)

    def _handle_keydown(self, event: pygame.event.Event) -> None:
        key = event.key

        if key in (pygame.K_ESCAPE, pygame.K_q):
            self._running = False
            return
        if key == pygame.K_d:
            self._show_debug = not self._show_debug
            return

        name = KEY_NAMES.get(key)
        if name is not None:
            self.game.keyboard.key_down(name)

    def _render(self) -> None:
        if not self._screen:
            return

        self.renderer.render(self._buffer, self.game)
        surface = pygame.surfarray.make_surface(self._buffer.swapaxes(0, 1))
        if self.config.scale != 1:
            surface = pygame.transform.scale(surface, self._screen.get_size())
        self._screen.blit(surface, (0, 0))

        for label in self.game.world.labels:
            self._render_label(label)

        if self._show_debug:
            self._render_debug()

        pygame.display.flip()

    def _render_label(self, label: Label) -> None:
        if not label.visible or not label.text:
            return
        scale = self.config.scale
        font = self._font(label.font_family, label.font_size * scale)
        color = hex_to_rgb(label.style.get("fill", "#ffffff"))
        text_surface = font.render(label.text, True, color)
        self._screen.blit(text_surface, (label.x * scale, label.y * scale))

    def debug_lines(self) -> List[str]:
        """Overlay text: loop timing, lifecycle, live entities and the latest game event."""
        run = self.main_state.run
        pipes_alive = run.pipes.count_living() if run and run.pipes else 0
        fps = self._clock.get_fps() if self._clock else 0.0
        last = self.events.get_history(limit=1)
        last_name = getattr(last[-1].type, "name", last[-1].type) if last else "-"
        return [
            f"FPS {fps:.0f}",
            f"FRAME {self._frame_count}",
            f"STATE {self.main_state.state_machine.state.name}",
            f"PIPES {pipes_alive}",
            f"TWEENS {self.game.tweens.active_count}",
            f"BEST {self.main_state.state_machine.context.best_score}",
            f"EVENT {last_name}",
        ]

    def _render_debug(self) -> None:
        font = self._font("", 16)
        x = self._screen.get_width() - 140
        for i, line in enumerate(self.debug_lines()):
            text_surface = font.render(line, True, (255, 255, 255), self.config.debug_color)
            self._screen.blit(text_surface, (x, 10 + i * 18))

    async def run(self) -> None:
        """Main loop."""
        self._init_pygame()
        self._running = True

        logger.info("Window loop started")

        try:
            while self._running:
                self._handle_events()

                delta_ms = min(float(self._clock.get_time()), MAX_FRAME_MS)
                self.game.step(delta_ms)
                self._render()

                self._clock.tick(self.config.fps)
                self._frame_count += 1

                # Yield to other tasks
                await asyncio.sleep(0)
        finally:
            self._cleanup()

    def _cleanup(self) -> None:
        pygame.quit()
        logger.info("Window closed")
