# src/cache_manager/oplog.py
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional

import pandas as pd

from .errors import OpLogNotFoundError

COLUMNS  = ["op", "key", "value"]
MIN_ARGS = {"PUT": 3, "GET": 2, "REMOVE": 2}
LINE_END = re.compile(r"\r?\n")


@dataclass(frozen=True)
class Operation:
    op:    str
    key:   str
    value: Optional[str] = None


def parse_line(line: str) -> Optional[Operation]:
    """
    `PUT <key> <value...>`, `GET <key>` or `REMOVE <key>`.
    Tokens are separated by single spaces only (runs collapse); a PUT value
    keeps any other whitespace it contains. Keyword is case-insensitive;
    anything else (blank, unknown, too short) gives None.
    """
    if not line.strip():
        return None
    parts = [p for p in line.split(" ") if p]
    op = parts[0].upper()
    need = MIN_ARGS.get(op)
    if need is None or len(parts) < need:
        return None
    if op == "PUT":
        return Operation(op, parts[1], " ".join(parts[2:]))
    return Operation(op, parts[1])


def format_op(op: str, key: str, value: Optional[str] = None) -> str:
    op = op.upper()
    return f"{op} {key} {value}" if op == "PUT" else f"{op} {key}"


def ops_frame(lines: Iterable[str]) -> pd.DataFrame:
    rows = []
    for line in lines:
        parsed = parse_line(line)
        if parsed is not None:
            rows.append((parsed.op, parsed.key, parsed.value))
    return pd.DataFrame(rows, columns=COLUMNS)


def load_ops(path) -> pd.DataFrame:
    path = Path(path)
    if not path.is_file():
        raise OpLogNotFoundError(path)
    # undecodable bytes become U+FFFD instead of aborting the replay
    with open(path, encoding="utf-8", errors="replace", newline="") as fh:
        text = fh.read()
    return ops_frame(LINE_END.split(text))
