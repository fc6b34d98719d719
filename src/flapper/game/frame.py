"""Per-frame game logic.

Order within a frame is fixed: leaving the world wins over colliding,
and both come before rotation.
"""

import logging
from typing import Callable

from flapper.game.body import rotate
from flapper.game.collision import hit_pipe
from flapper.game.context import RunContext

logger = logging.getLogger(__name__)


def update(run: RunContext, restart: Callable[[], None]) -> None:
    """Run one frame of game logic.

    Args:
        run: The active run
        restart: Requests a full restart of the run
    """
    bird = run.bird
    pipes = run.pipes
    if bird is None or pipes is None:
        return

    if not bird.in_world:
        logger.info("Bird left the world")
        restart()
        return

    try:
        run.game.physics.overlap(bird, pipes, lambda _bird, _pipe: hit_pipe(run))
    except Exception:
        logger.warning("Collision query failed, ending the run", exc_info=True)
        hit_pipe(run)
        restart()
        return

    rotate(run)
