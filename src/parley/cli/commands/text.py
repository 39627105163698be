# src/parley/cli/commands/text.py
"""
Knowledge-base-free stages: normalize, segment, tokenize.
"""

from parley.core.normalize import normalize
from parley.core.segment import segment
from parley.core.tokenize import tokenize


def add_subparser(subparsers):
    norm_p = subparsers.add_parser("normalize", help="Clean whitespace and expand contractions.")
    norm_p.add_argument("text", help="Raw text.")
    norm_p.set_defaults(func=run_normalize)

    seg_p = subparsers.add_parser("segment", help="Split text into phrases.")
    seg_p.add_argument("text", help="Raw text.")
    seg_p.add_argument("--raw", action="store_true", help="Skip normalization.")
    seg_p.set_defaults(func=run_segment)

    tok_p = subparsers.add_parser("tokenize", help="Split a phrase into tokens.")
    tok_p.add_argument("text", help="Phrase text.")
    tok_p.set_defaults(func=run_tokenize)


def run_normalize(args):
    print(normalize(args.text))


def run_segment(args):
    text = args.text if args.raw else normalize(args.text)
    phrases = segment(text)

    print(f"Found {len(phrases)} phrase(s):")
    for i, phrase in enumerate(phrases):
        print(f"  {i+1}. {phrase!r}")


def run_tokenize(args):
    for t in tokenize(args.text):
        print(f"{t.position:3d}: {t.text}")
