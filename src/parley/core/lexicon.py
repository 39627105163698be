# src/parley/core/lexicon.py
"""
Lexical knowledge base: stemmer + sense inventory.

WordNetKB reads the Princeton WordNet through NLTK. InMemoryKB holds a
hand-built inventory. KBHandle owns the one-time load shared by every
resolver in the process.
"""

import logging
import os
import threading
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from parley.core.model import POS, RelationType


logger = logging.getLogger(__name__)


class KBLoadError(Exception):
    """The knowledge base could not be opened."""


class KBCategory(Enum):
    NOUN = "n"
    VERB = "v"
    ADJECTIVE = "a"
    ADVERB = "r"

    @property
    def pos(self) -> POS:
        return CATEGORY_POS[self]


CATEGORY_POS = {
    KBCategory.NOUN: POS.NOUN,
    KBCategory.VERB: POS.VERB,
    KBCategory.ADJECTIVE: POS.ADJECTIVE,
    KBCategory.ADVERB: POS.ADVERB,
}


@dataclass(frozen=True)
class SenseRecord:
    lemma: str
    domain_label: str
    gloss: str
    frequency: int = 0
    related_sense_lemmas: dict[RelationType, tuple[str, ...]] = field(default_factory=dict)
    related_word_lemmas: dict[RelationType, tuple[str, ...]] = field(default_factory=dict)


class LexicalKB(ABC):
    """What the resolver needs from a sense inventory."""

    @abstractmethod
    def stem(self, surface: str, category: KBCategory) -> list[str]:
        """Base forms of `surface` present in the inventory, best first."""
        pass

    @abstractmethod
    def lookup_senses(self, lemma: str, category: KBCategory) -> list[SenseRecord]:
        """Every sense registered for exactly `lemma`."""
        pass


# === WordNet ===

# Pointers read off the synset: every word of every target synset.
SENSE_POINTERS = [
    (RelationType.HYPERNYM, "hypernyms"),
    (RelationType.HYPERNYM, "instance_hypernyms"),
    (RelationType.HYPONYM, "hyponyms"),
    (RelationType.HYPONYM, "instance_hyponyms"),
    (RelationType.MEMBER_HOLONYM, "member_holonyms"),
    (RelationType.MEMBER_MERONYM, "member_meronyms"),
    (RelationType.PART_HOLONYM, "part_holonyms"),
    (RelationType.PART_MERONYM, "part_meronyms"),
    (RelationType.SUBSTANCE_HOLONYM, "substance_holonyms"),
    (RelationType.SUBSTANCE_MERONYM, "substance_meronyms"),
    (RelationType.ENTAILMENT, "entailments"),
    (RelationType.CAUSE, "causes"),
    (RelationType.ATTRIBUTE, "attributes"),
    (RelationType.SEE_ALSO, "also_sees"),
    (RelationType.SIMILAR_TO, "similar_tos"),
    (RelationType.VERB_GROUP, "verb_groups"),
]

# Pointers read off the lemma itself.
WORD_POINTERS = [
    (RelationType.ANTONYM, "antonyms"),
    (RelationType.DERIVED, "derivationally_related_forms"),
    (RelationType.DERIVED, "pertainyms"),
    (RelationType.SEE_ALSO, "also_sees"),
    (RelationType.VERB_GROUP, "verb_groups"),
]


def _display(name: str) -> str:
    return name.replace("_", " ")


def _index(lemma: str) -> str:
    return lemma.replace(" ", "_")


def _collect(obj, pointers, targets: Callable) -> dict[RelationType, tuple[str, ...]]:
    related: dict[RelationType, list[str]] = {}
    for rel_type, method in pointers:
        for target in getattr(obj, method)():
            related.setdefault(rel_type, []).extend(targets(target))
    return {k: tuple(v) for k, v in related.items()}


# NLTK's reader seeks and reads shared file handles (data.*, cntlist.rev),
# so every reader call is serialized, across all readers in the process.
_READER_LOCK = threading.Lock()


def _dictionary_reader(location: str):
    """WordNetCorpusReader over a dictionary directory outside nltk_data."""
    from nltk import data
    from nltk.corpus.reader.wordnet import WordNetCorpusReader

    class DictionaryReader(WordNetCorpusReader):
        def map_wn(self, version="wordnet"):
            # no mapping onto the installed corpus; multilingual data is unused
            return None

    # current NLTK refuses corpus roots that are not registered data paths
    if location not in data.path:
        data.path.append(location)
    return DictionaryReader(location, None)


class WordNetKB(LexicalKB):
    def __init__(self, reader):
        self.reader = reader

    @classmethod
    def open(cls, location: str | None = None) -> "WordNetKB":
        """
        Open WordNet from a dictionary directory, or NLTK's installed
        corpus when `location` is None.
        """
        if location is not None:
            location = os.path.abspath(os.path.expanduser(location))
            if not os.path.isdir(location):
                raise KBLoadError(f"WordNet directory {location} does not exist")

        with _READER_LOCK:
            try:
                if location is None:
                    from nltk.corpus import wordnet as reader
                    reader.ensure_loaded()
                else:
                    reader = _dictionary_reader(location)
                # forces the index and the tag counts to load now, not on first query
                reader.lemmas("entity", "n")[0].count()
            except (LookupError, OSError, ValueError, IndexError) as e:
                raise KBLoadError(f"Failed to open WordNet at {location or 'nltk_data'}: {e}") from e
        return cls(reader)

    def stem(self, surface: str, category: KBCategory) -> list[str]:
        with _READER_LOCK:
            forms = self.reader._morphy(_index(surface.lower()), category.value)
        stems = []
        for form in forms:
            name = _display(form)
            if name not in stems:
                stems.append(name)
        return stems

    def lookup_senses(self, lemma: str, category: KBCategory) -> list[SenseRecord]:
        records = []
        with _READER_LOCK:
            for wn_lemma in self.reader.lemmas(_index(lemma), category.value):
                synset = wn_lemma.synset()
                records.append(SenseRecord(
                    lemma=lemma,
                    domain_label=synset.lexname().split(".", 1)[-1],
                    gloss=synset.definition(),
                    frequency=wn_lemma.count(),
                    related_sense_lemmas=_collect(
                        synset, SENSE_POINTERS,
                        lambda s: [_display(n) for n in s.lemma_names()],
                    ),
                    related_word_lemmas=_collect(
                        wn_lemma, WORD_POINTERS,
                        lambda l: [_display(l.name())],
                    ),
                ))
        return records


# === In-memory ===

class InMemoryKB(LexicalKB):
    """Dict-backed inventory; stems are exact matches plus explicit entries."""

    def __init__(self):
        self._senses: dict[tuple[str, KBCategory], list[SenseRecord]] = {}
        self._stems: dict[tuple[str, KBCategory], list[str]] = {}

    def add(self, category: KBCategory, record: SenseRecord) -> SenseRecord:
        self._senses.setdefault((record.lemma, category), []).append(record)
        return record

    def add_stem(self, surface: str, category: KBCategory, lemma: str) -> None:
        self._stems.setdefault((surface, category), []).append(lemma)

    def stem(self, surface: str, category: KBCategory) -> list[str]:
        candidates = [surface, *self._stems.get((surface, category), [])]
        stems = []
        for lemma in candidates:
            if (lemma, category) in self._senses and lemma not in stems:
                stems.append(lemma)
        return stems

    def lookup_senses(self, lemma: str, category: KBCategory) -> list[SenseRecord]:
        return list(self._senses.get((lemma, category), []))


# === Handle ===

class KBHandle:
    """
    Lazily loads one knowledge base for the whole process.

    The first caller of get() runs the loader; concurrent callers wait for
    the same result. A failed or timed-out load is kept and reported again
    on every later get(). A timed-out loader is left running on a daemon
    thread and never blocks interpreter exit.
    """

    def __init__(self, loader: Callable[[], LexicalKB], timeout: float | None = 60.0):
        self._loader = loader
        self._timeout = timeout
        self._lock = threading.Lock()
        self._done = threading.Event()
        self._started = False
        self._kb: LexicalKB | None = None
        self._error: KBLoadError | None = None

    @classmethod
    def wordnet(cls, location: str | None = None, timeout: float | None = 60.0) -> "KBHandle":
        return cls(lambda: WordNetKB.open(location), timeout=timeout)

    @classmethod
    def of(cls, kb: LexicalKB) -> "KBHandle":
        """Handle around an already-open knowledge base."""
        return cls(lambda: kb)

    @property
    def loaded(self) -> bool:
        return self._done.is_set() and self._kb is not None

    def get(self) -> LexicalKB:
        if not self._done.is_set():
            with self._lock:
                winner = not self._started
                self._started = True
            if winner:
                self._load()
            elif not self._done.wait(self._timeout):
                raise KBLoadError("Timed out waiting for the knowledge base to load")

        if self._error is not None:
            # fresh exception per call, so the stored traceback never grows
            raise KBLoadError(str(self._error)) from self._error.__cause__
        return self._kb

    def _load(self):
        logger.info("Loading lexical knowledge base")
        outcome = {}

        def target():
            try:
                outcome["kb"] = self._loader()
            except BaseException as e:
                outcome["error"] = e

        thread = threading.Thread(target=target, name="kb-load", daemon=True)
        thread.start()
        thread.join(self._timeout)

        try:
            if thread.is_alive():
                raise KBLoadError(f"Knowledge base load exceeded {self._timeout}s")
            if "error" in outcome:
                raise outcome["error"]
            if outcome.get("kb") is None:
                raise KBLoadError("Knowledge base loader returned nothing")
            self._kb = outcome["kb"]
            logger.info("Lexical knowledge base ready: %s", type(self._kb).__name__)
        except KBLoadError as e:
            self._error = e
        except Exception as e:
            self._error = KBLoadError(f"Knowledge base load failed: {e}")
            self._error.__cause__ = e
        finally:
            if self._kb is None and self._error is None:
                self._error = KBLoadError("Knowledge base load was interrupted")
            if self._error is not None:
                logger.error("%s", self._error)
            self._done.set()
