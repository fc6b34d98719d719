import random

import pytest

from flapper.config.settings import GameSettings
from flapper.core.events import EventBus
from flapper.engine.loader import AssetLoader
from flapper.game.assets import DEFAULT_ASSETS, load_assets
from flapper.game.lifecycle import build_game


@pytest.fixture
def settings() -> GameSettings:
    return GameSettings(_env_file=None)


@pytest.fixture
def events() -> EventBus:
    return EventBus()


@pytest.fixture
def loader() -> AssetLoader:
    loader = AssetLoader()
    load_assets(loader, DEFAULT_ASSETS)
    return loader


@pytest.fixture
def main_state(settings, events):
    """A game whose first run has been created (one zero-length frame)."""
    state = build_game(settings, events=events, rng=random.Random(1234))
    state.game.step(0)
    return state


@pytest.fixture
def run(main_state):
    return main_state.run
