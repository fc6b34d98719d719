"""
Run lifecycle for flapper.

    PRELOADING --create--> RUNNING --death / left world--> OVER --restart--> PRELOADING

Refused transitions are logged and reported through the return value;
they never raise.
"""

import logging
from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, FrozenSet

logger = logging.getLogger(__name__)


class State(Enum):
    PRELOADING = auto()  # sprites being validated and decoded
    RUNNING = auto()     # bird alive, pipes spawning
    OVER = auto()        # run ended, restart pending


@dataclass
class StateContext:
    """Bookkeeping that outlives a single run."""
    runs_started: int = 0
    last_score: int = 0
    best_score: int = 0


class StateMachine:
    """Tracks which lifecycle phase the game is in."""

    ALLOWED: Dict[State, FrozenSet[State]] = {
        State.PRELOADING: frozenset({State.RUNNING}),
        State.RUNNING: frozenset({State.OVER}),
        State.OVER: frozenset({State.PRELOADING}),
    }

    def __init__(self, initial_state: State = State.PRELOADING) -> None:
        self._state = initial_state
        self._context = StateContext()
        logger.debug(f"Lifecycle starts in {initial_state.name}")

    @property
    def state(self) -> State:
        return self._state

    @property
    def context(self) -> StateContext:
        return self._context

    def transition(self, to_state: State) -> bool:
        """Move to ``to_state``.

        Returns:
            False if the move is not allowed from the current state
        """
        previous = self._state
        if to_state not in self.ALLOWED.get(previous, frozenset()):
            logger.warning(f"Refusing lifecycle move {previous.name} -> {to_state.name}")
            return False

        self._state = to_state
        logger.info(f"Lifecycle: {previous.name} -> {to_state.name}")
        return True

    def record_score(self, score: int) -> None:
        """Remember the score of the run that just ended."""
        self._context.last_score = score
        if score > self._context.best_score:
            self._context.best_score = score
