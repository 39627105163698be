# src/parley/cli/main.py
"""
parley CLI.
"""

import argparse
import logging

from parley.cli.commands import analyze, resolve, store, text
from parley.config import Settings


def main():
    parser = argparse.ArgumentParser(prog="parley", description="Lexical pipeline for chat text")
    parser.add_argument("--log-level", choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: PARLEY_LOG_LEVEL or WARNING)")
    parser.add_argument("--wordnet-dir", help="WordNet dictionary directory")
    parser.add_argument("--timeout", type=float, help="Knowledge base load timeout, seconds")
    parser.add_argument("--workers", type=int, help="Worker threads for resolution")
    subparsers = parser.add_subparsers(dest="command")

    text.add_subparser(subparsers)
    resolve.add_subparser(subparsers)
    analyze.add_subparser(subparsers)
    store.add_subparser(subparsers)

    args = parser.parse_args()

    logging.basicConfig(
        level=args.log_level or Settings.from_env().log_level,
        format="[%(levelname)s] %(name)s: %(message)s",
    )

    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
