# src/parley/cli/commands/resolve.py
"""
Resolve single words against the closed-class tables and WordNet.
"""

import sys

from rich.console import Console

from parley.cli.deps import get_settings, get_pipeline
from parley.core.lexicon import KBLoadError

console = Console()


def add_subparser(subparsers):
    parser = subparsers.add_parser("resolve", help="Show ranked senses for words.")
    parser.add_argument("words", nargs="+", help="Surface tokens.")
    parser.add_argument("-n", "--limit", type=int, default=5, help="Senses shown per word")
    parser.add_argument("-r", "--relations", action="store_true", help="Show relations")
    parser.set_defaults(func=run)


def run(args):
    pipeline = get_pipeline(get_settings(args))

    try:
        tokens = pipeline.resolver.resolve_all(args.words, pipeline.max_workers)
    except KBLoadError as e:
        console.print(f"[red]✗ {e}[/red]")
        sys.exit(1)

    for token in tokens:
        if not token.known:
            console.print(f"[bold]{token.text}[/bold] [dim]unknown[/dim]")
            continue

        console.print(f"[bold]{token.text}[/bold] [dim]{len(token.words)} sense(s)[/dim]")
        for word in token.words[:args.limit]:
            console.print(
                f"  {word.lemma:15} {word.pos.value:12} {word.lex.value:20} "
                f"{word.frequency:4d}  {word.gloss}"
            )
            if args.relations:
                for rel in word.relations:
                    console.print(f"    [dim]{rel.type.value} → {rel.target}[/dim]")
