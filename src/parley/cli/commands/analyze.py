# src/parley/cli/commands/analyze.py
"""
Run the full pipeline on a text and print the phrases as JSON.
"""

import random
import sys

from rich import print_json

from parley.cli.deps import get_settings, get_pipeline
from parley.core.fallback import FallbackAnswers
from parley.core.lexicon import KBLoadError
from parley.core.model import relation_graph


def add_subparser(subparsers):
    parser = subparsers.add_parser("analyze", help="Normalize, segment and resolve a text.")
    parser.add_argument("text", help="Raw text.")
    parser.add_argument("--graph", action="store_true", help="Include relation graphs")
    parser.add_argument("--reply", action="store_true", help="Include a fallback answer per phrase")
    parser.add_argument("--seed", type=int, help="Seed for fallback answers")
    parser.set_defaults(func=run)


def run(args):
    pipeline = get_pipeline(get_settings(args))

    try:
        phrases = pipeline.run(args.text)
    except KBLoadError as e:
        print(f"✗ {e}")
        sys.exit(1)

    answers = FallbackAnswers(random.Random(args.seed))

    out = []
    for phrase in phrases:
        data = phrase.to_dict()
        if args.graph:
            data["graph"] = relation_graph(phrase)
        if args.reply:
            data["reply"] = answers.answer(phrase).text
        out.append(data)

    print_json(data={"normalized": pipeline.normalize(args.text), "phrases": out})
