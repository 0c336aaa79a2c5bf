import pytest

from blockworld import config
from blockworld.grid import WorldGrid
from blockworld.sim import Simulation


@pytest.fixture(autouse=True)
def quiet_logs(monkeypatch):
    monkeypatch.setattr(config, "LOG_ENABLED", False)


@pytest.fixture
def grid():
    return WorldGrid()


@pytest.fixture
def sim():
    return Simulation(seed=7, load_radius=1)
