# src/cache_manager/generator.py
import logging
from pathlib import Path
from typing import Iterator, Optional

import numpy as np

from .config import MAX_VALUE, SNAPSHOT_PATTERNS, GeneratorConfig
from .oplog import format_op

logger = logging.getLogger(__name__)

OPS = ("PUT", "GET", "REMOVE")


def generate_ops(operations: int, keys: int,
                 seed: Optional[int] = None) -> Iterator[str]:
    """Uniformly random PUT/GET/REMOVE lines over `key0`..`key{keys-1}`."""
    rng = np.random.default_rng(seed)
    op_idx  = rng.integers(0, len(OPS), size=operations)
    key_idx = rng.integers(0, keys, size=operations)
    values  = rng.integers(0, MAX_VALUE, size=operations)
    for o, k, v in zip(op_idx, key_idx, values):
        op = OPS[o]
        yield format_op(op, f"key{k}", f"value_{v}" if op == "PUT" else None)


def write_ops(config: GeneratorConfig) -> int:
    """
    Write a fresh op log and drop the replay baselines in
    `config.baseline_dir`, since they describe the previous log. Only the
    file names `replay` writes are matched.
    """
    config.validate()
    path = Path(config.ops_path)
    lines = list(generate_ops(config.operations, config.keys, config.seed))
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\n".join(lines) + ("\n" if lines else ""), encoding="utf-8")

    for pattern in SNAPSHOT_PATTERNS:
        for stale in config.baseline_dir.glob(pattern):
            stale.unlink()
            logger.info("removed stale snapshot %s", stale)
    return len(lines)
