"""Headless checks for the renderer and audio hooks."""

import numpy as np

from flapper.audio.engine import WAVES, AudioEngine, to_pcm
from flapper.config.settings import hex_to_rgb
from flapper.core.events import sound_event
from flapper.engine.text import Label
from flapper.game.body import jump
from flapper.game.spawner import add_row_of_pipes
from flapper.graphics.renderer import Renderer
from flapper.simulator.window import GameWindow


def test_render_fills_stage_and_draws_bird(main_state):
    renderer = Renderer()
    buffer = renderer.create_buffer(main_state.game)
    main_state.run.bird.angle = 0

    renderer.render(buffer, main_state.game)

    assert buffer.shape == (490, 400, 3)
    assert tuple(buffer[0, 0]) == hex_to_rgb("#FF6A5E")
    bird = main_state.run.bird
    centre = buffer[int(bird.top) + 25, int(bird.left) + 25]
    assert tuple(centre) != hex_to_rgb("#FF6A5E")


def test_rotated_bird_is_cached(main_state):
    renderer = Renderer()
    buffer = renderer.create_buffer(main_state.game)
    main_state.run.bird.angle = 15

    renderer.render(buffer, main_state.game)
    renderer.render(buffer, main_state.game)

    assert list(renderer._rotated) == [("bird", 15)]


def test_dead_sprites_are_not_drawn(main_state):
    renderer = Renderer()
    buffer = renderer.create_buffer(main_state.game)
    main_state.run.bird.kill()

    renderer.render(buffer, main_state.game)

    assert (buffer == hex_to_rgb("#FF6A5E")).all()


def test_dead_pipes_are_not_drawn(main_state):
    run = main_state.run
    renderer = Renderer()
    buffer = renderer.create_buffer(main_state.game)
    live, dead = add_row_of_pipes(run)[:2]
    live.x, dead.x = 250, 320
    dead.kill()

    renderer.render(buffer, main_state.game)

    background = hex_to_rgb("#FF6A5E")
    live_area = buffer[int(live.top):int(live.top) + 50, 250:300]
    dead_area = buffer[int(dead.top):int(dead.top) + 50, 320:370]
    assert (live_area != background).any()
    assert (dead_area == background).all()

def test_label_font_parsing():
    label = Label(20, 20, "0", {"font": "30px Arial", "fill": "#ffffff"})
    assert label.font_size == 30
    assert label.font_family == "Arial"

    assert Label(0, 0, "0").font_size == 16


def test_audio_is_silent_until_initialized():
    audio = AudioEngine()

    assert audio.play("jump") is None
    audio.handle_sound_event(sound_event("jump"))
    audio.cleanup()
    assert audio.play("hit") is None


def test_synthesized_waves_fit_16_bit_stereo():
    for name, make_wave in WAVES.items():
        pcm = to_pcm(make_wave())
        assert pcm.dtype == np.int16, name
        assert pcm.ndim == 2 and pcm.shape[1] == 2
        assert (pcm[:, 0] == pcm[:, 1]).all()
        assert np.abs(pcm).max() > 0


def test_debug_overlay_reports_live_state(main_state, settings, events):
    window = GameWindow(main_state, settings, events)
    assert window.debug_lines()[-1] == "EVENT -"

    add_row_of_pipes(main_state.run)
    lines = window.debug_lines()
    assert "STATE RUNNING" in lines
    assert "PIPES 6" in lines
    assert lines[-1] == "EVENT SCORE_CHANGED"

    jump(main_state.run)
    lines = window.debug_lines()
    assert "TWEENS 1" in lines
    assert lines[-1] == "EVENT SOUND_PLAY"
