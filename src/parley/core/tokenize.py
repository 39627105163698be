# src/parley/core/tokenize.py
"""
Split a phrase into surface tokens.

URLs, email addresses and numbers stay whole; words keep inner hyphens and
apostrophes; punctuation is dropped.
"""

import re
from dataclasses import dataclass


TOKEN_RE = re.compile(
    r"""
      [A-Za-z][\w+.-]*://\S*[\w/]                          # url
    | [\w!#$%&'*+/=?`{|}~^-]+(?:\.[\w!#$%&'*+/=?`{|}~^-]+)*
      @(?:[A-Za-z0-9-]+\.)+[A-Za-z]{2,6}(?![\w-])          # email
    | (?<![\w.])[+-]?(?:\d+(?:\.\d+)?|\.\d+)(?:[eE][+-]?\d+)?(?![\w])  # number
    | \w+(?:['’-]\w+)*                                     # word
    """,
    re.VERBOSE,
)


@dataclass
class Token:
    text: str
    position: int  # character offset in the phrase


def tokenize(text: str) -> list[Token]:
    """Split text into tokens, tracking positions."""
    tokens = []
    for match in TOKEN_RE.finditer(text):
        tokens.append(Token(text=match.group(), position=match.start()))
    return tokens


def lookup_key(text: str) -> str:
    return text.lower()
