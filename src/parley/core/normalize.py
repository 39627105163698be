# src/parley/core/normalize.py
"""
Text normalization: whitespace cleanup and contraction expansion.

"I'M  DONE" -> "I AM DONE"
"I won't kill you!" -> "I will not kill you!"
"""

import re


APOSTROPHE = "['’]"

# Suffix contractions. The expansion takes the case of the suffix it
# replaces, never the case of the word it is attached to.
SUFFIXES = {
    "m": "am",
    "re": "are",
    "s": "is",
    "ve": "have",
    "ll": "will",
}

# Whole-word contractions that the generic n't rule gets wrong.
IRREGULAR = {
    "wo": "will",
    "ca": "can",
}

WHITESPACE_RE = re.compile(r"\s+")
IRREGULAR_RE = re.compile(
    rf"\b({'|'.join(IRREGULAR)})(n{APOSTROPHE}t)\b",
    re.IGNORECASE,
)
NOT_RE = re.compile(rf"(?<=\w)n{APOSTROPHE}t\b", re.IGNORECASE)
SUFFIX_RE = re.compile(
    rf"(?<=\w){APOSTROPHE}({'|'.join(SUFFIXES)})\b",
    re.IGNORECASE,
)


def _match_case(expansion: str, suffix: str) -> str:
    return expansion.upper() if suffix.isupper() else expansion.lower()


def _expand_irregular(match: re.Match) -> str:
    stem, suffix = match.group(1), match.group(2)
    word = _match_case(IRREGULAR[stem.lower()], suffix)
    if stem[0].isupper() and not suffix.isupper():
        word = word.capitalize()
    return f"{word} {_match_case('not', suffix)}"


def _expand_not(match: re.Match) -> str:
    return " " + _match_case("not", match.group())


def _expand_suffix(match: re.Match) -> str:
    suffix = match.group(1)
    return " " + _match_case(SUFFIXES[suffix.lower()], suffix)


def expand_contractions(text: str) -> str:
    text = IRREGULAR_RE.sub(_expand_irregular, text)
    text = NOT_RE.sub(_expand_not, text)
    return SUFFIX_RE.sub(_expand_suffix, text)


def collapse_whitespace(text: str) -> str:
    return WHITESPACE_RE.sub(" ", text).strip()


def normalize(text: str) -> str:
    return collapse_whitespace(expand_contractions(text))
