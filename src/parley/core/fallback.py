# src/parley/core/fallback.py
"""
Canned answers for phrases no dialogue rule understood.
"""

import random
from dataclasses import dataclass

from parley.core.model import Phrase


# appended to the user's own word when the input is a single token
SINGLE_WORD_SUFFIXES = [
    "?",
    "? I do not understand",
    ".. that is cool",
]

UNRESOLVED_ANSWERS = [
    "I think you should speak english",
    "PLEASE, speak english!",
    "Are you a robot too?",
]

GENERAL_ANSWERS = [
    "What a nice day to talk to a chatbot!",
    "Can you reformulate your sentence please?",
    "Tell me something interesting please.",
]


@dataclass(frozen=True)
class Answer:
    text: str
    scope: str = ""

    def __str__(self) -> str:
        return f"{self.text}({self.scope})"


class FallbackAnswers:
    def __init__(self, rng: random.Random | None = None):
        self.rng = rng or random.Random()

    def answer(self, phrase: Phrase) -> Answer:
        if len(phrase.tokens) == 1:
            return Answer(phrase.text + self.rng.choice(SINGLE_WORD_SUFFIXES))
        if any(not t.known for t in phrase.tokens):
            return Answer(self.rng.choice(UNRESOLVED_ANSWERS))
        return Answer(self.rng.choice(GENERAL_ANSWERS))
