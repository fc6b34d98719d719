"""Player body control."""

import logging

from flapper.core.events import Event, EventType, sound_event
from flapper.game.context import RunContext

logger = logging.getLogger(__name__)


def jump(run: RunContext) -> bool:
    """Give the bird an upward kick and tilt its nose up.

    A missing or dead bird cannot jump; that is a no-op, not an error.

    Returns:
        True if the jump was applied
    """
    bird = run.bird
    if bird is None or not bird.alive or bird.body is None:
        return False

    settings = run.settings
    bird.body.velocity.y = settings.jump_velocity
    run.game.add.tween(bird).to({"angle": -settings.max_angle}, settings.jump_tween_ms).start()

    run.emit(Event(EventType.JUMP, data={"y": bird.y}, source="bird"))
    run.emit(sound_event("jump", source="bird"))
    return True


def rotate(run: RunContext) -> None:
    """Tilt a living bird one step toward its maximum nose-down angle."""
    bird = run.bird
    if bird is None or not bird.alive:
        return

    settings = run.settings
    if bird.angle < settings.max_angle:
        bird.angle += settings.rotation_step
    bird.angle = min(max(bird.angle, settings.min_angle), settings.max_angle)
