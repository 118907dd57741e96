#!/usr/bin/env python3
"""Command line front end for wordcover.

Finds the shortest run of dictionary words that contains every search key,
allowing a key to start in one word and finish in the next.

    python -m wordcover lon ion --wordlist /usr/share/dict/words
"""
from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path
from typing import List, Optional

from . import find_minimum_cover
from .config import DEFAULT_MASK_BITS, DEFAULT_WORDLIST_PATH, SUPPORTED_MASK_BITS
from .dictionary.loader import load_vocabulary
from .postprocess.render_result import build_result, format_result


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("keys", nargs="+", help="Search keys that must all appear.")
    parser.add_argument(
        "--wordlist",
        type=Path,
        default=Path(DEFAULT_WORDLIST_PATH),
        help="Word-per-line text file or CSV with a 'word' column.",
    )
    parser.add_argument(
        "--mask-bits",
        type=int,
        choices=SUPPORTED_MASK_BITS,
        default=DEFAULT_MASK_BITS,
        help="Cover bitmask width; bounds the number of search keys.",
    )
    parser.add_argument(
        "--no-greedy",
        action="store_true",
        help="Start the search with an unbounded best cost.",
    )
    parser.add_argument(
        "--max-nodes",
        type=int,
        default=None,
        help="Stop after visiting this many search nodes.",
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON.")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    try:
        vocab = load_vocabulary(args.wordlist)
        result = find_minimum_cover(
            args.keys,
            vocab["word"],
            mask_bits=args.mask_bits,
            use_greedy_bound=not args.no_greedy,
            max_nodes=args.max_nodes,
        )
    except (FileNotFoundError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if args.json:
        print(json.dumps(build_result(result), indent=2))
    else:
        print(format_result(result))
    return 0 if result.covered else 1


if __name__ == "__main__":
    sys.exit(main())
