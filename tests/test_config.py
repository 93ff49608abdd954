"""Tests for the engine configuration dataclass."""

import json

import pytest

from serpentine.config import SCORE_PER_FOOD, EngineConfig


class TestEngineConfig:
    def test_defaults(self):
        cfg = EngineConfig()
        assert cfg.initial_interval_ms == 200
        assert cfg.min_interval_ms == 50
        assert cfg.interval_step_ms == 5
        assert cfg.seed is None
        assert SCORE_PER_FOOD == 10

    def test_next_interval(self):
        cfg = EngineConfig()
        assert cfg.next_interval(200) == 195
        assert cfg.next_interval(53) == 50
        assert cfg.next_interval(50) == 50

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"min_interval_ms": 0},
            {"initial_interval_ms": 40},
            {"interval_step_ms": -1},
            {"max_food_attempts": 0},
        ],
    )
    def test_invalid_values(self, kwargs):
        with pytest.raises(ValueError):
            EngineConfig(**kwargs)

    def test_to_dict_serializable(self):
        d = EngineConfig(seed=3).to_dict()
        assert json.loads(json.dumps(d)) == d
        assert d["seed"] == 3

    def test_save_and_load(self, tmp_path):
        cfg = EngineConfig(initial_interval_ms=150, interval_step_ms=10, seed=7)
        path = tmp_path / "nested" / "engine.json"
        cfg.save(path)
        assert path.exists()
        assert EngineConfig.load(path) == cfg

    def test_load_rejects_unknown_keys(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"grid_size": 30}))
        with pytest.raises(TypeError):
            EngineConfig.load(path)
