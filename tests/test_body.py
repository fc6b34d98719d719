import pytest

from flapper.core.events import EventType
from flapper.game.body import jump, rotate
from flapper.game.context import RunContext


def test_jump_sets_upward_velocity(run):
    run.bird.body.velocity.y = 250

    assert jump(run) is True
    assert run.bird.body.velocity.y == -350


def test_jump_tilts_nose_up_over_100ms(run):
    run.bird.angle = 0
    jump(run)

    run.game.tweens.update(50)
    assert run.bird.angle == pytest.approx(-10)
    run.game.tweens.update(50)
    assert run.bird.angle == pytest.approx(-20)


def test_jump_emits_events(run, events):
    jump(run)

    assert events.get_history(EventType.JUMP)
    sounds = events.get_history(EventType.SOUND_PLAY)
    assert sounds[-1].data == {"sound": "jump"}


def test_dead_bird_cannot_jump(run):
    run.bird.alive = False
    run.bird.body.velocity.y = 123

    assert jump(run) is False
    assert run.bird.body.velocity.y == 123
    assert run.game.tweens.active_count == 0


def test_jump_without_bird_is_noop(run):
    empty = RunContext(game=run.game, settings=run.settings)

    assert jump(empty) is False


def test_rotate_steps_toward_max(run):
    run.bird.angle = 0
    rotate(run)
    assert run.bird.angle == 1


@pytest.mark.parametrize("start, expected", [(19.5, 20), (20, 20), (25, 20)])
def test_rotate_clamps_to_max(run, start, expected):
    run.bird.angle = start
    rotate(run)
    assert run.bird.angle == expected


def test_rotate_clamps_to_min(run):
    run.bird.angle = -45
    rotate(run)
    assert run.bird.angle == -20


def test_dead_bird_does_not_rotate(run):
    run.bird.alive = False
    run.bird.angle = 5
    rotate(run)
    assert run.bird.angle == 5
