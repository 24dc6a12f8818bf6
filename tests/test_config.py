from __future__ import annotations

from pathlib import Path

import pytest

from cache_manager.config import GeneratorConfig, ReplayConfig, parse_positive_int
from cache_manager.errors import ConfigError


@pytest.mark.parametrize(
    "raw,expected",
    [("5", 5), (" 12 ", 12), (7, 7), ("0", 9), ("-4", 9), ("abc", 9), ("2.5", 9), (None, 9), (True, 9)],
)
def test_parse_positive_int_falls_back_to_default(raw, expected) -> None:
    assert parse_positive_int(raw, 9) == expected


def test_parse_positive_int_default_may_be_none() -> None:
    assert parse_positive_int("nope", None) is None


def test_snapshot_names_follow_capacity(tmp_path: Path) -> None:
    assert ReplayConfig(state_dir=tmp_path).snapshot_path == tmp_path / "cache_state_unlimited.txt"
    assert ReplayConfig(capacity=8).snapshot_name == "cache_state_capacity_8.txt"


def test_replay_config_validation() -> None:
    assert ReplayConfig(iterations=3, capacity=2).validate().iterations == 3
    with pytest.raises(ConfigError):
        ReplayConfig(iterations=0).validate()
    with pytest.raises(ConfigError):
        ReplayConfig(capacity=0).validate()


def test_generator_defaults() -> None:
    cfg = GeneratorConfig().validate()
    assert cfg.operations == 1000
    assert cfg.keys == 100
    assert cfg.ops_path == Path("cache_ops.txt")
