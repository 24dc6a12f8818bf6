# src/cache_manager/evaluate.py
import logging
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd

from .metrics import replay_with_metrics

logger = logging.getLogger(__name__)

DEFAULT_CAPACITIES = [None, 10, 50, 100]
COLUMNS = ["capacity", "hit_ratio", "evictions", "items", "tracked", "elapsed_s"]


def evaluate_capacities(df: pd.DataFrame,
                        capacities: Iterable[Optional[int]] = DEFAULT_CAPACITIES,
                        iterations: int = 1,
                        csv_path=None) -> pd.DataFrame:
    """Replay the same log once per capacity (None = unlimited)."""
    rows = []
    for cap in capacities:
        m = replay_with_metrics(df, cap, iterations)
        logger.debug("capacity=%s hit_ratio=%.4f", cap, m["hit_ratio"])
        rows.append((cap if cap is not None else "unlimited", m["hit_ratio"], m["evictions"],
                     m["items"], m["tracked"], m["elapsed_s"]))

    res = pd.DataFrame(rows, columns=COLUMNS)
    if csv_path is not None:
        Path(csv_path).parent.mkdir(parents=True, exist_ok=True)
        res.to_csv(csv_path, index=False)
    return res
