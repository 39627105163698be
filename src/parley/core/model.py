# src/parley/core/model.py
"""
Phrase / Token / Word - the result structures handed to dialogue logic.

A Phrase holds its Tokens in left-to-right order; each Token holds its
candidate Words ranked by corpus frequency. Everything here is built once
per pipeline run and never mutated afterwards.
"""

from dataclasses import dataclass, field
from enum import Enum


class POS(Enum):
    NOUN = "noun"
    VERB = "verb"
    ADJECTIVE = "adjective"
    ADVERB = "adverb"
    NUMBER = "number"
    PRONOUN = "pronoun"
    DETERMINER = "determiner"
    CONJUNCTION = "conjunction"
    INTERJECTION = "interjection"
    UNKNOWN = "unknown"


class Lex(Enum):
    """Lexical category of a sense."""

    # WordNet lexicographer files (noun.*, verb.*, adj.*, adv.*)
    TOPS = "tops"
    ACT = "act"
    ANIMAL = "animal"
    ARTIFACT = "artifact"
    ATTRIBUTE = "attribute"
    BODY = "body"
    COGNITION = "cognition"
    COMMUNICATION = "communication"
    EVENT = "event"
    FEELING = "feeling"
    FOOD = "food"
    GROUP = "group"
    LOCATION = "location"
    MOTIVE = "motive"
    OBJECT = "object"
    PERSON = "person"
    PHENOMENON = "phenomenon"
    PLANT = "plant"
    POSSESSION = "possession"
    PROCESS = "process"
    QUANTITY = "quantity"
    RELATION = "relation"
    SHAPE = "shape"
    STATE = "state"
    SUBSTANCE = "substance"
    TIME = "time"
    CHANGE = "change"
    COMPETITION = "competition"
    CONSUMPTION = "consumption"
    CONTACT = "contact"
    CREATION = "creation"
    EMOTION = "emotion"
    MOTION = "motion"
    PERCEPTION = "perception"
    SOCIAL = "social"
    STATIVE = "stative"
    WEATHER = "weather"
    ALL = "all"
    PERT = "pert"
    PPL = "ppl"

    # closed-class sub-categories
    PERSONAL_SUBJECTIVE = "personal_subjective"
    PERSONAL_OBJECTIVE = "personal_objective"
    POSSESSIVE = "possessive"
    REFLEXIVE = "reflexive"
    RECIPROCAL = "reciprocal"
    RELATIVE = "relative"
    DEMONSTRATIVE = "demonstrative"
    INTERROGATIVE = "interrogative"
    INDEFINITE = "indefinite"
    INDEFINITE_ARTICLE = "indefinite_article"
    DEFINITE_ARTICLE = "definite_article"
    COORDINATOR = "coordinator"
    SUBORDINATOR = "subordinator"
    GENERIC = "generic"
    REGARDS = "regards"
    APOLOGIZE = "apologize"
    GRATITUDE = "gratitude"
    DISGUST = "disgust"
    SURPRISE = "surprise"
    PAIN = "pain"

    MAIL = "mail"
    UNKNOWN = "unknown"

    @classmethod
    def from_label(cls, label: str) -> "Lex":
        """Map a domain label ("artifact", "noun.artifact", "Tops") to a member."""
        name = label.rsplit(".", 1)[-1].strip().lower()
        try:
            return cls(name)
        except ValueError:
            return cls.UNKNOWN


class RelationType(Enum):
    ANTONYM = "antonym"
    ATTRIBUTE = "attribute"
    CAUSE = "cause"
    DERIVED = "derived"
    ENTAILMENT = "entailment"
    ENTAILED_BY = "entailed-by"
    HYPERNYM = "hypernym"
    HYPONYM = "hyponym"
    MEMBER_HOLONYM = "member-holonym"
    MEMBER_MERONYM = "member-meronym"
    PART_HOLONYM = "part-holonym"
    PART_MERONYM = "part-meronym"
    PARTICIPLE_OF = "participle-of"
    SEE_ALSO = "see-also"
    SIMILAR_TO = "similar-to"
    SUBSTANCE_HOLONYM = "substance-holonym"
    SUBSTANCE_MERONYM = "substance-meronym"
    VERB_GROUP = "verb-group"


@dataclass(frozen=True)
class Relation:
    type: RelationType
    target: str  # lemma

    def to_dict(self) -> dict:
        return {"type": self.type.value, "target": self.target}

    @classmethod
    def from_dict(cls, d: dict) -> "Relation":
        return cls(RelationType(d["type"]), d["target"])


@dataclass(frozen=True)
class Word:
    """One sense of a lemma."""

    lemma: str
    pos: POS
    lex: Lex
    gloss: str = ""
    frequency: int = 0
    relations: tuple[Relation, ...] = ()

    @property
    def key(self) -> tuple[str, POS, Lex, str]:
        return (self.lemma, self.pos, self.lex, self.gloss)

    def related(self, rel_type: RelationType) -> list[str]:
        return [r.target for r in self.relations if r.type is rel_type]

    def to_dict(self) -> dict:
        return {
            "lemma": self.lemma,
            "pos": self.pos.value,
            "lex": self.lex.value,
            "gloss": self.gloss,
            "frequency": self.frequency,
            "relations": [r.to_dict() for r in self.relations],
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Word":
        return cls(
            lemma=d["lemma"],
            pos=POS(d["pos"]),
            lex=Lex(d["lex"]),
            gloss=d.get("gloss", ""),
            frequency=d.get("frequency", 0),
            relations=tuple(Relation.from_dict(r) for r in d.get("relations", [])),
        )


@dataclass(frozen=True)
class Token:
    text: str                       # surface form, original casing
    key: str                        # lowercased lookup key
    words: tuple[Word, ...] = ()    # ranked, most frequent first

    @property
    def known(self) -> bool:
        return len(self.words) > 0

    @property
    def lemma(self) -> str | None:
        return self.words[0].lemma if self.words else None

    @classmethod
    def unknown(cls, text: str) -> "Token":
        return cls(text=text, key=text.lower())

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "key": self.key,
            "known": self.known,
            "words": [w.to_dict() for w in self.words],
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Token":
        return cls(
            text=d["text"],
            key=d.get("key", d["text"].lower()),
            words=tuple(Word.from_dict(w) for w in d.get("words", [])),
        )


@dataclass(frozen=True)
class Phrase:
    text: str
    tokens: tuple[Token, ...] = ()
    question: bool = field(init=False, default=False)

    def __post_init__(self):
        object.__setattr__(self, "question", self.text.endswith("?"))

    @property
    def known_ratio(self) -> float:
        if not self.tokens:
            return 0.0
        return sum(1 for t in self.tokens if t.known) / len(self.tokens)

    def to_dict(self) -> dict:
        return {
            "text": self.text,
            "question": self.question,
            "tokens": [t.to_dict() for t in self.tokens],
        }

    @classmethod
    def from_dict(cls, d: dict) -> "Phrase":
        return cls(
            text=d["text"],
            tokens=tuple(Token.from_dict(t) for t in d.get("tokens", [])),
        )


def relation_graph(item: Phrase | Token) -> dict:
    """
    Relation graph of a token (or every token of a phrase).

    Nodes are candidate lemmas and relation targets; edges are
    (source lemma, target lemma, relation type). Duplicate edges are kept,
    since relations are a multiset.
    """
    tokens = item.tokens if isinstance(item, Phrase) else (item,)

    nodes: list[str] = []
    seen: set[str] = set()
    edges: list[dict] = []

    def add_node(lemma: str):
        if lemma not in seen:
            seen.add(lemma)
            nodes.append(lemma)

    for token in tokens:
        for word in token.words:
            add_node(word.lemma)
            for rel in word.relations:
                add_node(rel.target)
                edges.append({
                    "source": word.lemma,
                    "target": rel.target,
                    "type": rel.type.value,
                })

    return {"nodes": nodes, "edges": edges}
