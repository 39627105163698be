# src/parley/core/segment.py
"""
Segment normalized text into phrases.

A run of terminators (. ! ?) ends a phrase unless it sits inside a single
non-blank chunk, as in "http://evil.com/pwn.you", "spam@bot.com" or "42.0".
Every phrase ends with exactly one terminator: the first character of the
run that closed it, or a synthesized "." at the end of input.
"""

import re


TERMINATORS = ".!?"
DEFAULT_TERMINATOR = "."

TERMINATOR_RUN_RE = re.compile(rf"[{re.escape(TERMINATORS)}]+")


def _is_boundary(text: str, start: int, end: int) -> bool:
    """False when the run is wedged between two non-blank characters."""
    if start == 0 or end == len(text):
        return True
    return text[start - 1].isspace() or text[end].isspace()


def segment(text: str) -> list[str]:
    """
    Returns the list of phrases, each ending with one terminator.
    """
    phrases = []
    start = 0

    for match in TERMINATOR_RUN_RE.finditer(text):
        if not _is_boundary(text, match.start(), match.end()):
            continue

        content = text[start:match.start()]
        if content:
            phrases.append(content + match.group()[0])
        start = match.end()

    tail = text[start:]
    if tail.strip():
        phrases.append(tail + DEFAULT_TERMINATOR)

    return phrases
