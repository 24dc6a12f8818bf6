from __future__ import annotations

import pandas as pd

from cache_manager.generator import generate_ops
from cache_manager.metrics import replay_with_metrics
from cache_manager.oplog import ops_frame
from cache_manager.simulator import CacheSim


def _frame(*lines: str) -> pd.DataFrame:
    return ops_frame(lines)


def test_replay_counts_and_hit_ratio() -> None:
    df = _frame("PUT a 1", "GET a", "GET b", "REMOVE a", "GET a")
    sim = CacheSim()
    assert sim.replay(df) == 1 / 3
    assert (sim.puts, sim.gets, sim.hits, sim.removes) == (1, 3, 1, 1)
    assert dict(sim.cache.snapshot()) == {}


def test_replay_without_gets_has_zero_hit_ratio() -> None:
    sim = CacheSim(2)
    assert sim.replay(_frame("PUT a 1", "PUT b 2")) == 0.0


def test_replay_iterations_repeat_the_log() -> None:
    df = _frame("PUT a 1", "GET a")
    sim = CacheSim(4)
    sim.replay(df, iterations=3)
    assert sim.gets == 3
    assert sim.cache.eviction.frequency_of("a") == 6


def test_values_with_spaces_survive_replay() -> None:
    sim = CacheSim()
    sim.replay(_frame("PUT k hello big world"))
    assert sim.cache.try_get("k") == (True, "hello big world")


def test_replaying_same_log_twice_gives_same_snapshot() -> None:
    df = ops_frame(generate_ops(3000, 60, seed=42))
    for capacity in (None, 5, 25):
        first = replay_with_metrics(df, capacity, iterations=2)
        second = replay_with_metrics(df, capacity, iterations=2)
        assert first["snapshot"] == second["snapshot"]
        assert first["evictions"] == second["evictions"]


def test_metrics_report_cache_state() -> None:
    df = _frame("PUT a 1", "PUT b 2", "GET a", "PUT c 3")
    m = replay_with_metrics(df, capacity=2)
    assert m["snapshot"] == "a=1\nc=3"
    assert m["items"] == 2
    assert m["tracked"] == 2
    assert m["evictions"] == 1
    assert m["hit_ratio"] == 1.0
    assert m["inconsistencies"] == 0
    assert m["elapsed_s"] >= 0


def test_unlimited_metrics_track_nothing() -> None:
    m = replay_with_metrics(_frame("PUT a 1", "PUT b 2"))
    assert m["tracked"] == 0
    assert m["items"] == 2


def test_metrics_report_peak_memory() -> None:
    df = ops_frame(generate_ops(500, 50, seed=2))
    m = replay_with_metrics(df, capacity=10)
    assert m["peak_mb"] > 0
