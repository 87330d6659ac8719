#!/usr/bin/env python3
"""
xoshiro128 stream dumper.

Usage:
    python3 -m xoshiro128 --seed 1234 -n 5
    python3 -m xoshiro128 --name hello --kind xoshiro128plus --format random
    python3 -m xoshiro128 --state 0 1 2 3 --jump 1 --format state
    python3 -m xoshiro128 --seed 1234 -n 100000 --output draws.npy
    python3 -m xoshiro128 --list

Log level comes from XOSHIRO128_LOG_LEVEL (default WARNING), or --verbose.
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import List, Optional

import numpy as np

from xoshiro128 import config
from xoshiro128.errors import Xoshiro128Error
from xoshiro128.options import xoshiro128
from xoshiro128.registry import get_generator_info, list_available_generators

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='xoshiro128',
        description='Dump deterministic xoshiro128 output streams'
    )
    source = parser.add_mutually_exclusive_group()
    source.add_argument('--seed', type=int, default=None, help='32-bit seed')
    source.add_argument('--name', type=str, default=None, help='Name hashed into a seed')
    source.add_argument('--state', type=int, nargs=4, default=None, metavar='WORD',
                        help='Explicit 4-word state')
    parser.add_argument('--kind', choices=list_available_generators(), default=config.DEFAULT_KIND,
                        help='Generator algorithm')
    parser.add_argument('-n', '--count', type=int, default=10, help='Number of values to emit')
    parser.add_argument('--skip', type=int, default=0, help='Outputs to discard first')
    parser.add_argument('--jump', type=int, default=0, help='Number of 2^64-step jumps')
    parser.add_argument('--long-jump', type=int, default=0, help='Number of 2^96-step jumps')
    parser.add_argument('--format', choices=['next', 'random', 'state'], default='next',
                        help='next: uint32 outputs, random: floats in [0, 1), state: final state')
    parser.add_argument('--output', type=str, default=None, help='Write to .npy or JSON file')
    parser.add_argument('--list', action='store_true', help='List available generators and exit')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    return parser


def print_generators() -> None:
    print("Available generators:")
    for name in list_available_generators():
        info = get_generator_info(name)
        print(f"  {name:20} - {info['description']}")
        print(f"  {'':20}   State: {info['state_size']} bytes, seed: {info['seed_type']}")


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.get_log_level(),
        format=config.LOG_FORMAT,
    )

    if args.list:
        print_generators()
        return 0

    if args.state is not None:
        options = args.state
    elif args.seed is not None:
        options = args.seed
    else:
        options = args.name

    try:
        rng = xoshiro128(options, args.kind)
    except Xoshiro128Error as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    for _ in range(args.skip):
        rng.next()
    for _ in range(args.jump):
        rng.jump()
    for _ in range(args.long_jump):
        rng.long_jump()

    if args.format == 'next':
        values = rng.generate(args.count)
    elif args.format == 'random':
        values = np.array([rng.random() for _ in range(args.count)], dtype=np.float64)
    else:
        values = np.array(rng.save(), dtype=np.uint32)

    logger.info("Generated %d values from %r", len(values), rng)

    if args.output is None:
        for v in values.tolist():
            print(v)
        return 0

    path = Path(args.output)
    if path.suffix == '.npy':
        np.save(path, values)
    else:
        with open(path, 'w') as f:
            json.dump({
                'kind': rng.kind.value,
                'seed': rng.seed,
                'name': rng.name,
                'skip': args.skip,
                'jump': args.jump,
                'long_jump': args.long_jump,
                'format': args.format,
                'values': values.tolist(),
            }, f, indent=2)

    print(f"Saved {len(values)} values to: {path}")
    return 0


if __name__ == '__main__':
    sys.exit(main())
