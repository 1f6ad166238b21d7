"""CIDR ブロックの情報を表示するコマンド"""

import argparse
import logging
import os
import sys

from .block import CidrBlock
from .errors import NetblockError
from .normalize import netblock

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

logger = logging.getLogger(__name__)


def configure_logging(verbose: bool = False) -> None:
    # --verbose が指定されていなければ環境変数 NETBLOCK_LOG_LEVEL を見る
    level = logging.DEBUG if verbose else getattr(logging, os.environ.get("NETBLOCK_LOG_LEVEL", "").upper(), None)
    if not isinstance(level, int):
        level = logging.WARNING
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="netblock", description="IPv4 CIDR block calculator")
    parser.add_argument("block", help="A.B.C.D/P, A.B.C.D, or A.B.C.D followed by MASK")
    parser.add_argument("mask", nargs="?", help="netmask, hostmask or prefix length")
    parser.add_argument("--contains", metavar="ADDR", help="print the index of ADDR within the block")
    parser.add_argument("--nth", metavar="N", type=int, action="append", help="print the item at index N (repeatable)")
    parser.add_argument("--enumerate", action="store_true", help="print every item of the block")
    parser.add_argument("--bits", type=int, default=32, help="prefix length of the items (default: 32, single addresses)")
    parser.add_argument("--blocks", action="store_true", help="print sub-blocks instead of their base addresses")
    parser.add_argument("--next", action="store_true", help="print the following block of the same size")
    parser.add_argument("--prev", action="store_true", help="print the preceding block of the same size")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return parser


def describe_lines(block: CidrBlock) -> list[str]:
    return [
        f"network   {block.base}",
        f"broadcast {block.broadcast}",
        f"netmask   {block.netmask}",
        f"hostmask  {block.hostmask}",
        f"bits      {block.bits}",
        f"size      {block.size}",
    ]


def run(args: argparse.Namespace) -> int:
    block = netblock(args.block, args.mask)
    logger.debug("parsed %s", block)

    status = 0
    acted = False

    if args.contains is not None:
        acted = True
        index = block.contains(args.contains)
        if index is None:
            print("not contained")
            status = 1
        else:
            print(index)

    if args.nth:
        acted = True
        for item in block.nth(args.nth, args.bits, args.blocks):
            print(item)

    if args.enumerate:
        acted = True
        for item in block.enumerate(args.bits, args.blocks):
            print(item)

    if args.next:
        acted = True
        print(block.next())

    if args.prev:
        acted = True
        print(block.prev())

    if not acted:
        print("\n".join(describe_lines(block)))
    return status


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)
    try:
        return run(args)
    except NetblockError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
