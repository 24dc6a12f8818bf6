# src/cache_manager/snapshot.py
import enum
import logging
from pathlib import Path
from typing import Mapping

logger = logging.getLogger(__name__)


class SnapshotStatus(enum.Enum):
    CREATED      = "created"
    CONSISTENT   = "consistent"
    INCONSISTENT = "inconsistent"


def format_snapshot(snapshot: Mapping) -> str:
    """`key=value` lines sorted by key code point, newline-joined."""
    return "\n".join(f"{k}={snapshot[k]}" for k in sorted(snapshot, key=str))


def check_snapshot(path, content: str) -> SnapshotStatus:
    """
    Write `content` as the baseline if `path` does not exist yet, otherwise
    compare it byte for byte with the stored baseline.
    """
    path = Path(path)
    if not path.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8", newline="") as fh:
            fh.write(content)
        logger.info("baseline snapshot written to %s", path)
        return SnapshotStatus.CREATED

    with open(path, encoding="utf-8", newline="") as fh:
        previous = fh.read()
    if previous == content:
        return SnapshotStatus.CONSISTENT
    logger.debug("snapshot differs from baseline %s", path)
    return SnapshotStatus.INCONSISTENT
