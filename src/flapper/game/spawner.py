"""Pipe spawning and scoring.

Every timer tick spawns one column of pipes with a two-row gap and
adds a point. The score counts columns spawned, not columns passed.
"""

import logging
import math
import re
from typing import Any, List, Optional

from flapper.core.events import Event, EventType
from flapper.engine.sprite import Sprite
from flapper.game.context import RunContext

logger = logging.getLogger(__name__)

_TAG_PATTERN = re.compile(r"<[^>]*>")
_UNSAFE_CHARS = re.compile(r"[<>&\"']")


def coerce_score(value: Any) -> int:
    """Turn any stored score into an int; anything non-numeric counts as 0."""
    if isinstance(value, bool) or value is None:
        return 0
    if isinstance(value, int):
        return value
    try:
        number = float(value)
    except (TypeError, ValueError, OverflowError):
        return 0
    if math.isnan(number) or math.isinf(number):
        return 0
    return int(number)


def sanitize_label_text(text: str) -> str:
    """Strip tag-like substrings and markup characters before display."""
    return _UNSAFE_CHARS.sub("", _TAG_PATTERN.sub("", text))


def add_one_pipe(run: RunContext, x: float, y: float) -> Optional[Sprite]:
    """Revive one pooled pipe at (x, y) moving left.

    Returns None when the pool is missing or exhausted.
    """
    if run.pipes is None:
        return None

    pipe = run.pipes.get_first_dead()
    if pipe is None:
        logger.warning(f"Pipe pool exhausted ({len(run.pipes)} in use), skipping pipe at y={y}")
        return None

    pipe.reset(x, y)
    if pipe.body is not None:
        pipe.body.velocity.x = run.settings.pipe_velocity
    pipe.check_world_bounds = True
    pipe.out_of_bounds_kill = True
    return pipe


def add_row_of_pipes(run: RunContext) -> List[Sprite]:
    """Spawn a column of pipes leaving a random two-row gap, then score a point.

    Returns:
        The pipes spawned by this call
    """
    if run.label is None:
        return []

    settings = run.settings
    hole = run.rng.randint(settings.gap_min, settings.gap_max)

    spawned = []
    for i in range(settings.row_count):
        if i in (hole, hole + 1):
            continue
        pipe = add_one_pipe(run, settings.world_width, i * settings.row_spacing + settings.row_offset)
        if pipe is not None:
            spawned.append(pipe)

    run.score = coerce_score(run.score) + 1
    run.label.text = sanitize_label_text(str(run.score))

    logger.debug(f"Spawned {len(spawned)} pipes with gap at rows {hole}-{hole + 1}, score {run.score}")
    run.emit(Event(EventType.PIPES_SPAWNED, data={"hole": hole, "count": len(spawned)}, source="spawner"))
    run.emit(Event(EventType.SCORE_CHANGED, data={"score": run.score}, source="spawner"))
    return spawned
