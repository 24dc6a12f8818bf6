"""Configuration for the op generator and the replay tools.

Defaults mirror the command-line behaviour: a positional that does not parse
as a positive integer silently falls back to its default.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

from .errors import ConfigError

DEFAULT_OPS_FILE   = "cache_ops.txt"
DEFAULT_OPERATIONS = 1000
DEFAULT_KEYS       = 100
DEFAULT_ITERATIONS = 1
MAX_VALUE          = 1000
SNAPSHOT_PATTERNS  = ("cache_state_unlimited.txt", "cache_state_capacity_*.txt")


def parse_positive_int(raw: Any, default: Optional[int]) -> Optional[int]:
    """Return `raw` as a positive int, or `default` when it is not one."""
    if raw is None or isinstance(raw, bool):
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        return default
    return value if value > 0 else default


@dataclass(frozen=True)
class GeneratorConfig:
    operations: int = DEFAULT_OPERATIONS
    keys: int = DEFAULT_KEYS
    ops_path: Path = Path(DEFAULT_OPS_FILE)
    seed: Optional[int] = None
    # where `replay` keeps its baselines; defaults to the log's directory
    state_dir: Optional[Path] = None

    @property
    def baseline_dir(self) -> Path:
        if self.state_dir is not None:
            return Path(self.state_dir)
        return Path(self.ops_path).parent

    def validate(self) -> "GeneratorConfig":
        if self.operations < 0:
            raise ConfigError(f"operations must be >= 0, got {self.operations}")
        if self.keys < 1:
            raise ConfigError(f"keys must be >= 1, got {self.keys}")
        return self


@dataclass(frozen=True)
class ReplayConfig:
    ops_path: Path = Path(DEFAULT_OPS_FILE)
    state_dir: Path = Path(".")
    iterations: int = DEFAULT_ITERATIONS
    capacity: Optional[int] = None

    @property
    def snapshot_name(self) -> str:
        if self.capacity is None:
            return "cache_state_unlimited.txt"
        return f"cache_state_capacity_{self.capacity}.txt"

    @property
    def snapshot_path(self) -> Path:
        return Path(self.state_dir) / self.snapshot_name

    def validate(self) -> "ReplayConfig":
        if self.iterations < 1:
            raise ConfigError(f"iterations must be >= 1, got {self.iterations}")
        if self.capacity is not None and self.capacity < 1:
            raise ConfigError(f"capacity must be positive, got {self.capacity}")
        return self
