"""Bird-versus-pipe collision handling."""

import logging

from flapper.core.events import Event, EventType, sound_event
from flapper.engine.sprite import Sprite
from flapper.game.context import RunContext

logger = logging.getLogger(__name__)


def _freeze(pipe: Sprite) -> None:
    if pipe.body is not None:
        pipe.body.velocity.x = 0.0


def hit_pipe(run: RunContext) -> bool:
    """Kill the bird, stop spawning and freeze every pipe in place.

    Only the first call of a run has any effect.

    Returns:
        True if this call killed the bird
    """
    bird = run.bird
    if bird is None or run.pipes is None or not bird.alive:
        return False

    bird.alive = False

    if run.timer is not None:
        run.game.time.remove(run.timer)
        run.timer = None

    run.pipes.for_each_alive(_freeze)

    logger.info(f"Bird hit a pipe at y={bird.y:.0f}, score {run.score}")
    run.emit(Event(EventType.BIRD_DIED, data={"score": run.score}, source="collision"))
    run.emit(sound_event("hit", source="collision"))
    return True
