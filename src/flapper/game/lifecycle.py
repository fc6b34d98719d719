"""
The main game state: preload, create, per-frame update and restart.

Lifecycle:
    1. preload() - validate and decode the embedded sprites
    2. create()  - build a fresh RunContext: pipe pool, spawn timer,
                   bird, jump key, score label
    3. update()  - per-frame logic while the state is current
    4. restart() - enter OVER and ask the engine to start the state
                   again, which discards every entity of the run
"""

import logging
import random
from typing import Mapping, Optional

from flapper.config.settings import GameSettings, clamp_spawn_interval, validate_config
from flapper.core.errors import SetupComponent, SetupError
from flapper.core.events import Event, EventBus, EventType
from flapper.core.state import State, StateMachine
from flapper.engine.game import Game
from flapper.game import body, frame, spawner
from flapper.game.assets import DEFAULT_ASSETS, load_assets
from flapper.game.context import RunContext

logger = logging.getLogger(__name__)

STATE_KEY = "main"


class MainState:
    """Drives one run after another on a Game."""

    def __init__(
        self,
        game: Game,
        settings: GameSettings,
        events: Optional[EventBus] = None,
        state_machine: Optional[StateMachine] = None,
        rng: Optional[random.Random] = None,
        assets: Optional[Mapping[str, str]] = None,
    ) -> None:
        self.game = game
        self.settings = settings
        self.events = events or EventBus()
        self.state_machine = state_machine or StateMachine()
        self.rng = rng or random.Random()
        self.assets = dict(assets if assets is not None else DEFAULT_ASSETS)
        self.run: Optional[RunContext] = None

        self.events.subscribe(EventType.BIRD_DIED, self._on_bird_died)

    @property
    def score(self) -> int:
        if self.run is None:
            return 0
        return spawner.coerce_score(self.run.score)

    # Lifecycle methods
    def preload(self) -> None:
        """Validate and decode the sprites. Malformed payloads raise AssetError."""
        if self.state_machine.state != State.PRELOADING:
            self.state_machine.transition(State.PRELOADING)

        self.game.stage_color = self.settings.background_color
        load_assets(self.game.load, self.assets)

    def create(self) -> None:
        """Build every entity of a new run.

        Raises:
            SetupError: naming the engine object that could not be built
        """
        settings = self.settings
        game = self.game
        run = RunContext(game=game, settings=settings, events=self.events, rng=self.rng)

        pipes = game.add.group()
        if pipes is None:
            raise SetupError(SetupComponent.GROUP, "could not create the pipe group")
        pipes.create_multiple(settings.pool_size, "pipe")
        run.pipes = pipes

        interval = clamp_spawn_interval(settings.spawn_interval_ms)
        run.timer = game.time.loop(interval, lambda: spawner.add_row_of_pipes(run))

        bird = game.add.sprite(settings.bird_x, settings.bird_y, "bird")
        if bird is None:
            raise SetupError(SetupComponent.SPRITE, "could not create the bird sprite")
        if not game.physics.enable(bird) or bird.body is None:
            raise SetupError(SetupComponent.PHYSICS, "could not enable physics on the bird")
        bird.body.gravity.y = settings.gravity
        bird.set_anchor(*settings.bird_anchor)
        run.bird = bird

        key = game.keyboard.add_key(settings.jump_key)
        if key is None:
            raise SetupError(SetupComponent.KEYBOARD, f"could not bind jump key '{settings.jump_key}'")
        key.on_down.add(self.jump)

        run.score = 0
        run.label = game.add.text(
            settings.score_x,
            settings.score_y,
            "0",
            {"font": settings.score_font, "fill": settings.score_color},
        )

        self.run = run
        self.state_machine.context.runs_started += 1
        self.state_machine.transition(State.RUNNING)
        logger.info(
            f"Run {self.state_machine.context.runs_started} started "
            f"(spawn every {interval:.0f}ms, pool of {settings.pool_size})"
        )

    def update(self) -> None:
        if self.run is None:
            return
        frame.update(self.run, self.restart)

    # Actions
    def jump(self) -> None:
        if self.run is None:
            return
        body.jump(self.run)

    def restart(self) -> None:
        """End the run (if still running) and start a new one next frame."""
        self._enter_over()
        if self.game.state.has_pending:
            return

        logger.info("Restarting")
        self.events.emit(Event(EventType.RESTART, data={"score": self.score}, source="lifecycle"))
        self.game.state.start(STATE_KEY)

    def _enter_over(self) -> None:
        if self.state_machine.state != State.RUNNING:
            return
        self.state_machine.record_score(self.score)
        self.state_machine.transition(State.OVER)
        logger.info(
            f"Game over: score {self.state_machine.context.last_score}, "
            f"best {self.state_machine.context.best_score}"
        )

    def _on_bird_died(self, event: Event) -> None:
        self._enter_over()


def build_game(
    settings: GameSettings,
    events: Optional[EventBus] = None,
    rng: Optional[random.Random] = None,
) -> MainState:
    """Validate settings, create a Game and queue the first run.

    The first run begins on the first ``Game.step``.

    Raises:
        ConfigError: If the settings are rejected
    """
    validate_config(settings)

    game = Game(settings.world_width, settings.world_height)
    main_state = MainState(game, settings, events=events, rng=rng)
    game.state.add(STATE_KEY, main_state)
    game.state.start(STATE_KEY)
    return main_state
