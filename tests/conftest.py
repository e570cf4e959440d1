import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")
os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")
os.environ.setdefault("MPLBACKEND", "Agg")

import pytest

from flocksim.core.config import FlockParameters, SimulationConfig
from flocksim.core.viewport import Viewport


@pytest.fixture
def params():
    return FlockParameters()


@pytest.fixture
def viewport():
    return Viewport.from_size(800, 600)


@pytest.fixture
def small_config(tmp_path):
    return SimulationConfig(
        screenWidth=200,
        screenHeight=150,
        statsInterval=5,
        progressInterval=10,
        stateOutputFile=str(tmp_path / "state.json"),
    )
