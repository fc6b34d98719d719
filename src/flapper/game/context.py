"""The state of one run, passed explicitly to every game operation."""

import random
from dataclasses import dataclass, field
from typing import Any, Optional

from flapper.config.settings import GameSettings
from flapper.core.events import Event, EventBus
from flapper.engine.game import Game
from flapper.engine.group import Group
from flapper.engine.sprite import Sprite
from flapper.engine.text import Label
from flapper.engine.timer import TimerEvent


@dataclass
class RunContext:
    """Entities of the active run.

    ``bird``, ``pipes``, ``label`` and ``timer`` stay None until
    ``create`` fills them; operations treat None as "not initialized
    yet" and do nothing. A restart builds a new context rather than
    clearing this one.
    """

    game: Game
    settings: GameSettings
    events: Optional[EventBus] = None
    rng: random.Random = field(default_factory=random.Random)

    bird: Optional[Sprite] = None
    pipes: Optional[Group] = None
    label: Optional[Label] = None
    timer: Optional[TimerEvent] = None
    score: Any = 0

    def emit(self, event: Event) -> None:
        if self.events is not None:
            self.events.emit(event)
