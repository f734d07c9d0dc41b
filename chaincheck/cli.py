import argparse
import json
import logging
import os
import sys
from typing import Dict, List

from .checkpoints import entries_descending
from .config import load_settings
from .index import BlockIndexNode, build_index
from .service import CheckpointService
from .utils import now_ts


def _load_json(value: str):
    if os.path.exists(value):
        with open(value, "r", encoding="utf-8") as f:
            return json.load(f)
    return json.loads(value)


def _load_index(value: str) -> Dict[str, BlockIndexNode]:
    try:
        data = _load_json(value)
    except ValueError as exc:
        raise SystemExit(f"Invalid index JSON: {exc}") from exc
    if not isinstance(data, list):
        raise SystemExit("Expected JSON list of block index nodes")
    nodes: List[BlockIndexNode] = []
    for item in data:
        try:
            nodes.append(BlockIndexNode.from_dict(item))
        except (KeyError, TypeError, ValueError) as exc:
            raise SystemExit(f"Invalid block index node {item!r}: {exc}") from exc
    return build_index(nodes)


def _service(args: argparse.Namespace) -> CheckpointService:
    settings = load_settings(
        network=args.network,
        checkpoints_enabled=False if args.no_checkpoints else None,
        checkpoints_file=args.checkpoints_file,
        log_level=args.log_level,
    )
    try:
        return CheckpointService(settings)
    except (OSError, ValueError) as exc:
        raise SystemExit(f"Cannot load checkpoints: {exc}") from exc


def cmd_check_block(args: argparse.Namespace) -> None:
    service = _service(args)
    if service.check_block(args.height, args.hash):
        print("valid")
        return
    print("invalid")
    sys.exit(1)


def cmd_progress(args: argparse.Namespace) -> None:
    service = _service(args)
    target = BlockIndexNode(height=args.height, hash="0" * 64, chain_tx=args.chain_tx, time=args.time)
    now = args.now if args.now is not None else now_ts()
    print(f"{service.guess_verification_progress(target, now):.6f}")


def cmd_total_blocks(args: argparse.Namespace) -> None:
    print(_service(args).total_blocks_estimate())


def cmd_hardened(args: argparse.Namespace) -> None:
    print(_service(args).latest_hardened_checkpoint())


def cmd_last_checkpoint(args: argparse.Namespace) -> None:
    service = _service(args)
    node = service.last_checkpoint(_load_index(args.index))
    if node is None:
        raise SystemExit("No checkpoint in index")
    print(json.dumps(node.to_dict(), indent=2))


def cmd_list(args: argparse.Namespace) -> None:
    service = _service(args)
    for entry in entries_descending(service.profile):
        print(f"{entry.height:>10} {entry.hash}")


def cmd_export(args: argparse.Namespace) -> None:
    service = _service(args)
    data = json.dumps(service.profile.to_dict(), indent=2)
    if not args.path:
        print(data)
        return
    dir_name = os.path.dirname(args.path)
    if dir_name:
        os.makedirs(dir_name, exist_ok=True)
    with open(args.path, "w", encoding="utf-8") as f:
        f.write(data + "\n")
    print("Profile exported:", args.path)


def cmd_metrics(args: argparse.Namespace) -> None:
    print(json.dumps(_service(args).metrics(), indent=2))


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="chaincheck")
    p.add_argument("--network", choices=["main", "test", "mainnet", "testnet"])
    p.add_argument("--no-checkpoints", action="store_true", help="disable checkpoint enforcement")
    p.add_argument("--checkpoints-file", help="JSON checkpoint profile(s) to use instead of the built-in table")
    p.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"])
    sub = p.add_subparsers(dest="cmd", required=True)

    s = sub.add_parser("check-block", help="check a block hash against the checkpoints")
    s.add_argument("--height", type=int, required=True)
    s.add_argument("--hash", required=True)
    s.set_defaults(func=cmd_check_block)

    s = sub.add_parser("progress", help="estimate verification progress at a block")
    s.add_argument("--chain-tx", type=int, required=True)
    s.add_argument("--time", type=int, required=True)
    s.add_argument("--height", type=int, default=0)
    s.add_argument("--now", type=int)
    s.set_defaults(func=cmd_progress)

    s = sub.add_parser("total-blocks")
    s.set_defaults(func=cmd_total_blocks)

    s = sub.add_parser("hardened")
    s.set_defaults(func=cmd_hardened)

    s = sub.add_parser("last-checkpoint")
    s.add_argument("--index", required=True, help="JSON list or file path")
    s.set_defaults(func=cmd_last_checkpoint)

    s = sub.add_parser("list")
    s.set_defaults(func=cmd_list)

    s = sub.add_parser("export")
    s.add_argument("--path")
    s.set_defaults(func=cmd_export)

    s = sub.add_parser("metrics")
    s.set_defaults(func=cmd_metrics)

    return p


def main(argv=None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=(args.log_level or load_settings().log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    args.func(args)


if __name__ == "__main__":
    main()
