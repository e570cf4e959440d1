import dataclasses
import json

import pytest

from flocksim.core.config import (
    DEFAULT_CONFIG, FlockParameters, SimulationConfig, load_config,
)
from flocksim.core.flock import Flock


def test_default_parameters():
    params = FlockParameters()
    assert params.protected_range == 15.0
    assert params.avoid_factor == 0.005
    assert params.max_speed == 6.0
    assert params.min_speed == 3.0
    assert params.visual_range == 40.0


def test_parameters_are_immutable():
    params = FlockParameters()
    with pytest.raises(dataclasses.FrozenInstanceError):
        params.max_speed = 10.0


def test_default_config():
    assert DEFAULT_CONFIG.boidCount == 10
    assert DEFAULT_CONFIG.markerSize == 20
    assert DEFAULT_CONFIG.boundaryMargin == 10.0
    assert DEFAULT_CONFIG.to_parameters() == FlockParameters()


def test_dict_round_trip():
    config = SimulationConfig(boidCount=25, avoidFactor=0.01, boidColor=[10, 20, 30])
    restored = SimulationConfig.from_dict(config.to_dict())
    assert restored == config


def test_from_dict_ignores_unknown_keys():
    config = SimulationConfig.from_dict({"boidCount": 4, "predatorCount": 3})
    assert config.boidCount == 4
    assert not hasattr(config, "predatorCount")


def test_to_parameters_maps_every_tuning_value():
    config = SimulationConfig(
        turnFactor=1.0, visualRange=2.0, protectedRange=3.0, centeringFactor=4.0,
        avoidFactor=5.0, matchingFactor=6.0, maxSpeed=7.0, minSpeed=8.0,
        maxBias=9.0, biasIncrement=10.0, defaultBiasVal=11.0,
    )
    assert dataclasses.astuple(config.to_parameters()) == tuple(float(v) for v in range(1, 12))


def test_load_config(tmp_path):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"boidCount": 3, "maxSpeed": 2.5, "unknown": True}))

    config = load_config(str(path))

    assert config.boidCount == 3
    assert config.maxSpeed == 2.5
    assert config.screenWidth == SimulationConfig().screenWidth


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(str(tmp_path / "missing.json"))


def test_load_config_bad_json(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text("{not json")
    with pytest.raises(json.JSONDecodeError):
        load_config(str(path))


def test_load_config_overrides_list_fields(tmp_path):
    path = tmp_path / "layout.json"
    path.write_text(json.dumps({
        "spawnOrigin": [0, 0],
        "initialVelocity": [1, 1],
        "backgroundColor": [1, 2, 3],
        "boidColor": [10, 20, 30],
    }))

    config = load_config(str(path))
    flock = Flock.from_config(config)

    assert config.spawnOrigin == [0, 0]
    assert config.initialVelocity == [1, 1]
    assert config.backgroundColor == [1, 2, 3]
    assert config.boidColor == [10, 20, 30]
    assert tuple(flock[0].position) == (0, 0)
    assert tuple(flock[0].velocity) == (1, 1)
