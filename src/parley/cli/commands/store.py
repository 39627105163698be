# src/parley/cli/commands/store.py
"""
Stored texts: add, run, show, list.
"""

import sys

from rich import print_json

from parley.cli.deps import get_settings, get_pipeline, get_store
from parley.core.lexicon import KBLoadError


def add_subparser(subparsers):
    add_p = subparsers.add_parser("add-text", help="Store raw text, prints its id.")
    add_p.add_argument("text", help="The text to add.")
    add_p.add_argument("--db", type=int)
    add_p.set_defaults(func=text_add)

    run_p = subparsers.add_parser("run", help="Run the pipeline on a stored text.")
    run_p.add_argument("text_id", help="Text id.")
    run_p.add_argument("--db", type=int)
    run_p.set_defaults(func=text_run)

    show_p = subparsers.add_parser("show", help="Show a stored text and its phrases.")
    show_p.add_argument("text_id", help="Text id.")
    show_p.add_argument("--db", type=int)
    show_p.set_defaults(func=text_show)

    list_p = subparsers.add_parser("list", help="List stored text ids.")
    list_p.add_argument("--db", type=int)
    list_p.set_defaults(func=text_list)


def text_add(args):
    store = get_store(get_settings(args))
    print(store.add(args.text))


def text_run(args):
    settings = get_settings(args)
    store = get_store(settings)

    try:
        phrases = store.run(args.text_id, get_pipeline(settings))
    except (ValueError, KBLoadError) as e:
        print(f"✗ Error: {e}")
        sys.exit(1)

    for phrase in phrases:
        known = sum(1 for t in phrase.tokens if t.known)
        print(f"✓ {phrase.text!r}: {known}/{len(phrase.tokens)} known")


def text_show(args):
    store = get_store(get_settings(args))

    text = store.get_text(args.text_id)
    if text is None:
        print(f"✗ Text {args.text_id} not found")
        sys.exit(1)

    phrases = store.get_phrases(args.text_id)
    print_json(data={
        "id": args.text_id,
        "text": text,
        "phrases": [p.to_dict() for p in phrases] if phrases is not None else None,
    })


def text_list(args):
    store = get_store(get_settings(args))
    ids = store.list_ids()
    if not ids:
        print("No texts.")
        return
    for text_id in ids:
        text = store.get_text(text_id) or ""
        preview = text[:50] + "..." if len(text) > 50 else text
        print(f"{text_id}  {preview}")
