import pytest

from flapper.animation import AnimationEngine, PlayState, Timeline, Track
from flapper.engine.game import Game
from flapper.engine.group import Group
from flapper.engine.input import Keyboard
from flapper.engine.physics import ArcadePhysics
from flapper.engine.sprite import ArcadeBody, Sprite
from flapper.engine.text import Label
from flapper.engine.timer import TimerEvents
from flapper.engine.tween import TweenManager


def make_sprite(loader, x, y, key="pipe") -> Sprite:
    sprite = Sprite(x, y, key, loader.get_texture(key))
    sprite.body = ArcadeBody()
    return sprite


class TestGroup:
    def test_create_multiple_starts_dead(self, loader):
        group = Group(loader)
        group.create_multiple(5, "pipe")

        assert len(group) == 5
        assert group.count_living() == 0
        assert all(member.body is not None for member in group)

    def test_get_first_dead_recycles_in_order(self, loader):
        group = Group(loader)
        first, second = group.create_multiple(2, "pipe")

        assert group.get_first_dead() is first
        first.reset(10, 20)
        assert group.get_first_dead() is second
        second.reset(10, 80)
        assert group.get_first_dead() is None

    def test_reset_zeroes_motion(self, loader):
        group = Group(loader)
        (pipe,) = group.create_multiple(1, "pipe")
        pipe.reset(0, 0)
        pipe.body.velocity.x = -200

        pipe.kill()
        pipe.reset(400, 10)

        assert (pipe.x, pipe.y) == (400, 10)
        assert pipe.alive and pipe.exists
        assert pipe.body.velocity.x == 0


class TestTimerEvents:
    def test_loop_fires_every_interval(self):
        timers = TimerEvents()
        calls = []
        timers.loop(1500, lambda: calls.append(1))

        timers.update(1499)
        assert calls == []
        timers.update(1)
        assert len(calls) == 1
        timers.update(3000)
        assert len(calls) == 3

    def test_remove_is_idempotent(self):
        timers = TimerEvents()
        calls = []
        event = timers.loop(100, lambda: calls.append(1))

        assert timers.remove(event) is True
        assert timers.remove(event) is False
        assert timers.remove(None) is False

        timers.update(1000)
        assert calls == []
        assert len(timers) == 0

    def test_callback_can_remove_its_own_timer(self):
        timers = TimerEvents()
        calls = []
        holder = {}

        def once():
            calls.append(1)
            timers.remove(holder["event"])

        holder["event"] = timers.loop(100, once)
        timers.update(500)

        assert calls == [1]

    @pytest.mark.parametrize("delay", [0, -10])
    def test_rejects_non_positive_delay(self, delay):
        with pytest.raises(ValueError):
            TimerEvents().loop(delay, lambda: None)


class TestPhysics:
    def test_gravity_integrates_velocity_then_position(self, loader):
        physics = ArcadePhysics(400, 490)
        bird = make_sprite(loader, 100, 245, "bird")
        bird.body.gravity.y = 1000

        physics.step(bird, 0.1)

        assert bird.body.velocity.y == pytest.approx(100)
        assert bird.y == pytest.approx(255)

    def test_enable_without_sprite_fails(self):
        assert ArcadePhysics(400, 490).enable(None) is False

    def test_sprite_on_right_edge_is_in_world(self, loader):
        physics = ArcadePhysics(400, 490)
        pipe = make_sprite(loader, 400, 10)
        pipe.check_world_bounds = True
        pipe.out_of_bounds_kill = True

        physics.step(pipe, 0)

        assert pipe.in_world
        assert pipe.alive

    def test_out_of_bounds_kill_when_leaving_world(self, loader):
        physics = ArcadePhysics(400, 490)
        pipe = make_sprite(loader, 10, 10)
        pipe.body.velocity.x = -200
        pipe.check_world_bounds = True
        pipe.out_of_bounds_kill = True

        physics.step(pipe, 0.5)

        assert not pipe.in_world
        assert not pipe.alive
        assert not pipe.exists

    def test_bounds_flag_without_kill_keeps_sprite(self, loader):
        physics = ArcadePhysics(400, 490)
        bird = make_sprite(loader, 100, 600, "bird")

        physics.step(bird, 0)

        assert not bird.in_world
        assert bird.alive

    def test_overlap_reports_each_living_pair(self, loader):
        physics = ArcadePhysics(400, 490)
        bird = make_sprite(loader, 100, 100, "bird")
        group = Group(loader)
        near, far, dead = group.create_multiple(3, "pipe")
        near.reset(120, 120)
        far.reset(300, 400)
        # Dead members are ignored even where they overlap
        dead.x, dead.y = 100, 100

        pairs = []
        hit = physics.overlap(bird, group, lambda a, b: pairs.append((a, b)))

        assert hit is True
        assert pairs == [(bird, near)]

    def test_no_overlap_without_contact(self, loader):
        physics = ArcadePhysics(400, 490)
        bird = make_sprite(loader, 0, 0, "bird")
        group = Group(loader)
        (pipe,) = group.create_multiple(1, "pipe")
        pipe.reset(200, 200)

        assert physics.overlap(bird, group) is False


class TestKeyboard:
    def test_unknown_key_is_not_bound(self):
        assert Keyboard().add_key("f13") is None

    def test_press_dispatches_once_per_press(self):
        keyboard = Keyboard()
        presses = []
        keyboard.add_key("space").on_down.add(lambda: presses.append(1))

        keyboard.key_down("space")
        keyboard.key_down("space")  # held
        keyboard.key_up("space")
        keyboard.key_down("space")

        assert len(presses) == 2

    def test_reset_drops_bindings(self):
        keyboard = Keyboard()
        presses = []
        keyboard.add_key("SPACE").on_down.add(lambda: presses.append(1))

        keyboard.reset()

        assert keyboard.key_down("space") is False
        assert presses == []


class TestTween:
    def test_tween_reaches_target(self):
        tweens = TweenManager()
        label = Label(0, 0)
        tweens.tween(label).to({"x": -20}, 100).start()

        tweens.update(50)
        assert label.x == pytest.approx(-10)
        tweens.update(50)
        assert label.x == pytest.approx(-20)
        assert tweens.active_count == 0

    def test_remove_all_stops_tweens(self):
        tweens = TweenManager()
        label = Label(0, 0)
        tweens.tween(label).to({"y": 100}, 100).start()

        tweens.remove_all()
        tweens.update(100)

        assert label.y == 0
        assert tweens.active_count == 0


class Recorder:
    def __init__(self):
        self.calls = []

    def preload(self):
        self.calls.append("preload")

    def create(self):
        self.calls.append("create")

    def update(self):
        self.calls.append("update")


class TestGame:
    def test_state_start_is_deferred_to_next_step(self):
        game = Game(400, 490)
        state = Recorder()
        game.state.add("main", state)

        game.state.start("main")
        assert state.calls == []

        game.step(16)
        assert state.calls == ["preload", "create", "update"]

    def test_start_unknown_state_raises(self):
        with pytest.raises(KeyError):
            Game(400, 490).state.start("missing")

    def test_switch_discards_previous_world(self, loader):
        game = Game(400, 490)
        game.load = loader
        game.state.add("main", Recorder())
        game.state.start("main")
        game.step(0)

        game.add.group().create_multiple(3, "pipe")
        game.add.sprite(100, 245, "bird")
        game.add.text(20, 20, "0")
        game.time.loop(100, lambda: None)

        game.state.start("main")
        game.step(0)

        assert game.world.all_sprites() == []
        assert game.world.labels == []
        assert len(game.time) == 0

    def test_sprite_without_texture_is_none(self):
        assert Game(400, 490).add.sprite(0, 0, "bird") is None


class TestTimeline:
    def test_track_is_linear_and_clamped(self):
        track = Track("alpha", 0, 255)

        assert track.value_at(0.5) == pytest.approx(127.5)
        assert track.value_at(-1.0) == 0
        assert track.value_at(2.0) == 255

    def test_zero_duration_finishes_on_first_advance(self):
        timeline = Timeline("snap", duration=0)
        timeline.add_track("x", 10, 20)
        timeline.play()

        assert timeline.advance(0) == {"x": 20}
        assert timeline.is_finished

    def test_engine_drops_finished_timelines(self):
        engine = AnimationEngine()
        timeline = Timeline("fade", duration=100)
        timeline.add_track("alpha", 0, 255)
        seen = []
        engine.play(timeline, on_update=seen.append)

        engine.update(40)
        assert engine.animation_count == 1
        engine.update(60)

        assert seen[-1] == {"alpha": 255}
        assert engine.animation_count == 0

    def test_playing_same_name_replaces_animation(self):
        engine = AnimationEngine()
        first = Timeline("a", duration=100)
        second = Timeline("b", duration=100)

        engine.play(first, name="bird")
        engine.play(second, name="bird")

        assert engine.animation_count == 1
        assert first.state == PlayState.STOPPED
