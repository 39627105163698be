# src/parley/core/closed_class.py
"""
Closed-class words the knowledge base does not cover.

Each table maps a sub-category to its literal strings. Tables are tried in
TABLES order and, inside a table, sub-categories in listed order: the first
hit wins ("that" is RELATIVE, not DEMONSTRATIVE). Every literal is a single
token, since lookups see one token at a time.
"""

from types import MappingProxyType

from parley.core.model import POS, Lex


PRONOUNS = {
    Lex.PERSONAL_SUBJECTIVE: ("i", "you", "he", "she", "it", "we", "they"),
    Lex.PERSONAL_OBJECTIVE: ("me", "you", "him", "her", "it", "us", "them"),
    Lex.POSSESSIVE: ("mine", "yours", "his", "hers", "ours", "theirs"),
    Lex.REFLEXIVE: (
        "myself", "yourself", "himself", "herself", "itself", "oneself",
        "ourselves", "yourselves", "themselves",
    ),
    Lex.RECIPROCAL: ("each", "other", "one", "another"),
    Lex.RELATIVE: ("that", "which", "who", "whose", "whom", "where", "when"),
    Lex.DEMONSTRATIVE: ("this", "that", "these", "those"),
    Lex.INTERROGATIVE: ("who", "what", "why", "where", "when", "whatever"),
    Lex.INDEFINITE: (
        "anything", "anybody", "anyone", "something", "somebody",
        "someone", "nothing", "nobody", "none",
    ),
}

DETERMINERS = {
    Lex.INDEFINITE_ARTICLE: ("a", "an"),
    Lex.DEFINITE_ARTICLE: ("the",),
}

CONJUNCTIONS = {
    Lex.COORDINATOR: ("and", "or", "but"),
    Lex.SUBORDINATOR: (
        "while", "because", "before", "since", "till", "unless",
        "whereas", "whether",
    ),
}

INTERJECTIONS = {
    Lex.GENERIC: ("ah", "eh", "hmm", "phew", "tsk", "uhm"),
    Lex.REGARDS: ("bye", "goodbye", "hello", "farewell", "hi"),
    Lex.APOLOGIZE: ("sorry", "pardon"),
    Lex.GRATITUDE: ("thanks",),
    Lex.DISGUST: ("yuk",),
    Lex.SURPRISE: ("oh",),
    Lex.PAIN: ("ouch", "ohi"),
}

ADVERBS = {
    Lex.INTERROGATIVE: ("how",),
}

TABLES = (
    (POS.PRONOUN, PRONOUNS),
    (POS.DETERMINER, DETERMINERS),
    (POS.CONJUNCTION, CONJUNCTIONS),
    (POS.INTERJECTION, INTERJECTIONS),
    (POS.ADVERB, ADVERBS),
)


def _compile() -> MappingProxyType:
    entries: dict[str, tuple[POS, Lex]] = {}
    for pos, table in TABLES:
        for lex, literals in table.items():
            for literal in literals:
                entries.setdefault(literal, (pos, lex))
    return MappingProxyType(entries)


ENTRIES = _compile()


def lookup(key: str) -> tuple[POS, Lex] | None:
    """(POS, Lex) for a lowercase literal, or None."""
    return ENTRIES.get(key)


def gloss(pos: POS) -> str:
    return f"{pos.value} outside the knowledge base"
