from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from cache_manager import __version__
from cache_manager.config import (
    DEFAULT_ITERATIONS,
    DEFAULT_KEYS,
    DEFAULT_OPERATIONS,
    DEFAULT_OPS_FILE,
    GeneratorConfig,
    ReplayConfig,
    parse_positive_int,
)
from cache_manager.errors import ConfigError, OpLogNotFoundError
from cache_manager.evaluate import DEFAULT_CAPACITIES, evaluate_capacities
from cache_manager.generator import write_ops
from cache_manager.metrics import replay_with_metrics
from cache_manager.oplog import load_ops
from cache_manager.snapshot import SnapshotStatus, check_snapshot

EXIT_OK = 0
EXIT_INCONSISTENT = 1
EXIT_CONFIG = 2


def _capacity_arg(raw: str) -> int | None:
    if raw.strip().lower() in ("none", "unlimited"):
        return None
    return parse_positive_int(raw, None)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="cache-manager")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="More logging.")

    subparsers = parser.add_subparsers(dest="command", required=True)

    gen_p = subparsers.add_parser("generate", help="Write a random operation log.")
    gen_p.add_argument("operations", nargs="?", default=None, help="Number of operations.")
    gen_p.add_argument("keys", nargs="?", default=None, help="Size of the key space.")
    gen_p.add_argument("--seed", type=int, default=None, help="RNG seed.")
    gen_p.add_argument("--ops", default=DEFAULT_OPS_FILE, help="Operation log path.")
    gen_p.add_argument(
        "--state-dir",
        default=None,
        help="Replay baseline directory to clear (default: the log's directory).",
    )

    rep_p = subparsers.add_parser(
        "replay", help="Replay the log and compare against the stored snapshot."
    )
    rep_p.add_argument("iterations", nargs="?", default=None, help="Replay passes.")
    rep_p.add_argument("capacity", nargs="?", default=None, help="Max entries; omit for unlimited.")
    rep_p.add_argument("--ops", default=DEFAULT_OPS_FILE, help="Operation log path.")
    rep_p.add_argument("--state-dir", default=".", help="Directory holding snapshot baselines.")

    eval_p = subparsers.add_parser("evaluate", help="Replay the log across several capacities.")
    eval_p.add_argument(
        "--capacities",
        nargs="+",
        type=_capacity_arg,
        default=list(DEFAULT_CAPACITIES),
        help="Capacities to compare ('unlimited' allowed).",
    )
    eval_p.add_argument("--iterations", type=int, default=DEFAULT_ITERATIONS)
    eval_p.add_argument("--csv", default=None, help="Write the results table here.")
    eval_p.add_argument("--ops", default=DEFAULT_OPS_FILE, help="Operation log path.")

    return parser


def parse_args(argv: list[str]) -> argparse.Namespace:
    return _build_parser().parse_args(argv)


def _configure_logging(verbose: int) -> None:
    level = logging.WARNING
    if verbose == 1:
        level = logging.INFO
    elif verbose >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _print_error(e: BaseException) -> None:
    print(f"error: {e}", file=sys.stderr)


def cmd_generate(args: argparse.Namespace) -> int:
    config = GeneratorConfig(
        operations=parse_positive_int(args.operations, DEFAULT_OPERATIONS),
        keys=parse_positive_int(args.keys, DEFAULT_KEYS),
        ops_path=Path(args.ops),
        seed=args.seed,
        state_dir=Path(args.state_dir) if args.state_dir else None,
    )
    try:
        written = write_ops(config)
    except ConfigError as e:
        _print_error(e)
        return EXIT_CONFIG
    print(f"Generated {written} operations into {config.ops_path}.")
    return EXIT_OK


def cmd_replay(args: argparse.Namespace) -> int:
    config = ReplayConfig(
        ops_path=Path(args.ops),
        state_dir=Path(args.state_dir),
        iterations=parse_positive_int(args.iterations, DEFAULT_ITERATIONS),
        capacity=parse_positive_int(args.capacity, None),
    )
    try:
        config.validate()
        df = load_ops(config.ops_path)
    except OpLogNotFoundError as e:
        print(str(e))
        print("Run `cache-manager generate` first to create it.")
        return EXIT_OK
    except ConfigError as e:
        _print_error(e)
        return EXIT_CONFIG

    m = replay_with_metrics(df, config.capacity, config.iterations)
    status = check_snapshot(config.snapshot_path, m["snapshot"])
    if status is SnapshotStatus.CREATED:
        print(f"Snapshot file created: {config.snapshot_name}")
        print("Baseline cache state written.")
        return EXIT_OK

    summary = (
        f"Elapsed: {m['elapsed_s']:.2f} s, Peak memory: {m['peak_mb']:.2f} MB, "
        f"Items: {m['items']}, "
        f"Eviction entries: {m['tracked']}, Hit ratio: {m['hit_ratio']:.4f}"
    )
    if m["inconsistencies"]:
        summary += f", Inconsistencies: {m['inconsistencies']}"
    if status is SnapshotStatus.CONSISTENT:
        print(f"Cache behavior is consistent with previous run. {summary}")
        return EXIT_OK
    print(f"Cache behavior is NOT consistent with previous run. {summary}")
    return EXIT_INCONSISTENT


def cmd_evaluate(args: argparse.Namespace) -> int:
    if args.iterations < 1:
        _print_error(ConfigError(f"iterations must be >= 1, got {args.iterations}"))
        return EXIT_CONFIG
    try:
        df = load_ops(Path(args.ops))
    except OpLogNotFoundError as e:
        _print_error(e)
        return EXIT_CONFIG

    res = evaluate_capacities(df, args.capacities, args.iterations, csv_path=args.csv)
    print(res.to_string(index=False))
    return EXIT_OK


def main(argv: list[str] | None = None) -> int:
    try:
        args = parse_args(list(sys.argv[1:] if argv is None else argv))
    except SystemExit as e:
        # argparse uses SystemExit for --help/--version and parse errors.
        code = e.code
        return int(code) if isinstance(code, int) else EXIT_CONFIG

    _configure_logging(args.verbose)

    if args.command == "generate":
        return cmd_generate(args)
    if args.command == "replay":
        return cmd_replay(args)
    if args.command == "evaluate":
        return cmd_evaluate(args)

    return EXIT_CONFIG


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
