# src/parley/core/pipeline.py
"""
Pipeline: raw text -> normalized text -> phrases -> resolved tokens.
"""

import logging
from concurrent.futures import ThreadPoolExecutor

from parley.core.lexicon import KBHandle
from parley.core.model import Phrase
from parley.core.normalize import normalize
from parley.core.resolver import Resolver
from parley.core.segment import segment
from parley.core.tokenize import tokenize


logger = logging.getLogger(__name__)


class Pipeline:
    def __init__(self, kb: KBHandle, max_workers: int | None = None):
        self.kb = kb
        self.resolver = Resolver(kb)
        self.max_workers = max_workers

    def normalize(self, text: str) -> str:
        return normalize(text)

    def segment(self, text: str) -> list[str]:
        return segment(self.normalize(text))

    def phrase(self, text: str) -> Phrase:
        """Tokenize and resolve a single phrase."""
        tokens = tuple(self.resolver.resolve(t.text) for t in tokenize(text))
        return Phrase(text=text, tokens=tokens)

    def run(self, text: str) -> list[Phrase]:
        parts = self.segment(text)
        if not parts:
            return []

        # a load failure surfaces here, not once per worker
        self.kb.get()

        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            phrases = list(pool.map(self.phrase, parts))

        n_tokens = sum(len(p.tokens) for p in phrases)
        n_known = sum(1 for p in phrases for t in p.tokens if t.known)
        logger.debug("%d phrases, %d tokens, %d known", len(phrases), n_tokens, n_known)
        return phrases
