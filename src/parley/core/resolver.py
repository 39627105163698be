# src/parley/core/resolver.py
"""
Lexical resolver: one surface token -> ranked Word candidates.

Stages, first hit wins:
  1. numeric literal   -> NUMBER / QUANTITY
  2. email address     -> NOUN / MAIL
  3. closed-class word -> table POS / sub-category
  4. knowledge base    -> every sense of every stem, in every category
Then duplicates are dropped and candidates sorted by frequency (stable).
"""

import logging
import re
from concurrent.futures import ThreadPoolExecutor

from parley.core import closed_class
from parley.core.lexicon import KBCategory, KBHandle, LexicalKB, SenseRecord
from parley.core.model import POS, Lex, Relation, Token, Word


logger = logging.getLogger(__name__)


NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")

# RFC 5322 dot-atom local part, dotted domain, 2-6 letter TLD
EMAIL_RE = re.compile(
    r"[\w!#$%&'*+/=?`{|}~^-]+(?:\.[\w!#$%&'*+/=?`{|}~^-]+)*"
    r"@(?:[a-zA-Z0-9-]+\.)+[a-zA-Z]{2,6}",
    re.ASCII,
)


class MalformedInputError(ValueError):
    """Empty or blank token handed to the resolver."""


def is_numeric(text: str) -> bool:
    return NUMBER_RE.fullmatch(text) is not None


def is_email(text: str) -> bool:
    return EMAIL_RE.fullmatch(text) is not None


def word_from_sense(sense: SenseRecord, category: KBCategory) -> Word:
    relations = [
        Relation(rel_type, target)
        for pointers in (sense.related_sense_lemmas, sense.related_word_lemmas)
        for rel_type, targets in pointers.items()
        for target in targets
    ]
    return Word(
        lemma=sense.lemma,
        pos=category.pos,
        lex=Lex.from_label(sense.domain_label),
        gloss=sense.gloss,
        frequency=max(sense.frequency or 0, 0),
        relations=tuple(relations),
    )


def rank(words: list[Word]) -> tuple[Word, ...]:
    """Drop repeated senses (first one kept), most frequent first."""
    unique: dict[tuple, Word] = {}
    for word in words:
        unique.setdefault(word.key, word)
    return tuple(sorted(unique.values(), key=lambda w: w.frequency, reverse=True))


class Resolver:
    def __init__(self, kb: KBHandle):
        self.kb = kb

    def resolve(self, surface: str) -> Token:
        """
        Resolve one token. Never raises for bad or unknown input; raises
        KBLoadError whenever the knowledge base failed to load, even for
        tokens the literal stages would have answered.
        """
        try:
            key = self._check(surface)
        except MalformedInputError as e:
            logger.debug("%s", e)
            return Token.unknown(surface)

        kb = self.kb.get()

        word = self._resolve_literal(key)
        if word is not None:
            return Token(text=surface, key=key, words=(word,))

        return Token(text=surface, key=key, words=rank(self._lookup(kb, key)))

    def resolve_all(self, surfaces: list[str], max_workers: int | None = None) -> list[Token]:
        if not surfaces:
            return []
        # a load failure surfaces here, before the pool starts
        self.kb.get()
        with ThreadPoolExecutor(max_workers=max_workers) as pool:
            return list(pool.map(self.resolve, surfaces))

    def _check(self, surface: str) -> str:
        if not surface or not surface.strip():
            raise MalformedInputError(f"Cannot resolve blank token {surface!r}")
        return surface.strip().lower()

    def _resolve_literal(self, key: str) -> Word | None:
        if is_numeric(key):
            return Word(lemma=key, pos=POS.NUMBER, lex=Lex.QUANTITY,
                        gloss="number outside the knowledge base")

        if is_email(key):
            return Word(lemma=key, pos=POS.NOUN, lex=Lex.MAIL,
                        gloss="mail address outside the knowledge base")

        entry = closed_class.lookup(key)
        if entry is not None:
            pos, lex = entry
            return Word(lemma=key, pos=pos, lex=lex, gloss=closed_class.gloss(pos))

        return None

    def _lookup(self, kb: LexicalKB, key: str) -> list[Word]:
        words = []
        for category in KBCategory:
            try:
                stems = kb.stem(key, category)
                for lemma in stems:
                    for sense in kb.lookup_senses(lemma, category):
                        words.append(word_from_sense(sense, category))
            except Exception as e:
                logger.warning("Lookup of %r as %s failed: %s", key, category.name.lower(), e)
        logger.debug("%r: %d senses", key, len(words))
        return words
