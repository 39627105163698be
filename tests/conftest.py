# tests/conftest.py
"""Shared fixtures: a small in-memory sense inventory and a tiny WordNet on disk."""

import pytest

from parley.core.lexicon import InMemoryKB, KBCategory, KBHandle, SenseRecord
from parley.core.model import RelationType
from parley.core.pipeline import Pipeline
from parley.core.resolver import Resolver
from wordnet_data import write_wordnet


class RecordingKB(InMemoryKB):
    """InMemoryKB that remembers every query it receives."""

    def __init__(self):
        super().__init__()
        self.calls = []

    def stem(self, surface, category):
        self.calls.append(("stem", surface, category))
        return super().stem(surface, category)

    def lookup_senses(self, lemma, category):
        self.calls.append(("lookup_senses", lemma, category))
        return super().lookup_senses(lemma, category)


def build_kb() -> RecordingKB:
    kb = RecordingKB()

    kb.add(KBCategory.NOUN, SenseRecord(
        lemma="bank",
        domain_label="noun.group",
        gloss="a financial institution",
        frequency=25,
        related_sense_lemmas={RelationType.HYPERNYM: ("financial institution",)},
    ))
    kb.add(KBCategory.NOUN, SenseRecord(
        lemma="bank",
        domain_label="noun.object",
        gloss="sloping land beside a body of water",
        frequency=25,
        related_sense_lemmas={RelationType.HYPERNYM: ("slope", "incline")},
    ))
    kb.add(KBCategory.VERB, SenseRecord(
        lemma="bank",
        domain_label="verb.possession",
        gloss="do business with a bank",
        frequency=40,
    ))
    kb.add(KBCategory.NOUN, SenseRecord(
        lemma="bank",
        domain_label="noun.artifact",
        gloss="a container for keeping money at home",
        frequency=0,
    ))

    kb.add(KBCategory.NOUN, SenseRecord(
        lemma="apple",
        domain_label="noun.food",
        gloss="fruit with red or yellow or green skin",
        frequency=3,
        related_sense_lemmas={RelationType.HYPERNYM: ("edible fruit",)},
        related_word_lemmas={RelationType.HYPERNYM: ("edible fruit",)},
    ))

    kb.add(KBCategory.ADJECTIVE, SenseRecord(
        lemma="good",
        domain_label="adj.all",
        gloss="having desirable or positive qualities",
        frequency=185,
        related_word_lemmas={RelationType.ANTONYM: ("bad",)},
    ))

    kb.add(KBCategory.NOUN, SenseRecord(
        lemma="foot",
        domain_label="noun.body",
        gloss="the extremity of the leg",
        frequency=12,
    ))
    kb.add_stem("feet", KBCategory.NOUN, "foot")

    kb.add(KBCategory.VERB, SenseRecord(
        lemma="run",
        domain_label="verb.motion",
        gloss="move fast by using one's feet",
        frequency=30,
    ))
    kb.add_stem("running", KBCategory.VERB, "run")

    kb.add(KBCategory.NOUN, SenseRecord(
        lemma="fruit",
        domain_label="noun.plant",
        gloss="the ripened reproductive body of a seed plant",
        frequency=7,
    ))
    kb.add(KBCategory.VERB, SenseRecord(
        lemma="be",
        domain_label="verb.stative",
        gloss="have the quality of being",
        frequency=10742,
    ))
    kb.add_stem("is", KBCategory.VERB, "be")

    return kb


@pytest.fixture
def kb():
    return build_kb()


@pytest.fixture
def handle(kb):
    return KBHandle.of(kb)


@pytest.fixture
def resolver(handle):
    return Resolver(handle)


@pytest.fixture
def pipeline(handle):
    return Pipeline(handle, max_workers=4)


@pytest.fixture(scope="session")
def wordnet_dir(tmp_path_factory):
    """A small WordNet dictionary directory, with filler nouns for load."""
    return write_wordnet(tmp_path_factory.mktemp("wordnet"), fillers=400)
