# tests/wordnet_data.py
"""
A tiny WordNet dictionary in the Princeton file format, written to disk so
WordNetKB can be tested without the NLTK corpus download.
"""

import itertools
import string
from collections import defaultdict


LEXNAMES = [
    "adj.all", "adj.pert", "adv.all", "noun.Tops", "noun.act", "noun.animal",
    "noun.artifact", "noun.attribute", "noun.body", "noun.cognition",
    "noun.communication", "noun.event", "noun.feeling", "noun.food",
    "noun.group", "noun.location", "noun.motive", "noun.object", "noun.person",
    "noun.phenomenon", "noun.plant", "noun.possession", "noun.process",
    "noun.quantity", "noun.relation", "noun.shape", "noun.state",
    "noun.substance", "noun.time", "verb.body", "verb.change",
    "verb.cognition", "verb.communication", "verb.competition",
    "verb.consumption", "verb.contact", "verb.creation", "verb.emotion",
    "verb.motion", "verb.perception", "verb.possession", "verb.social",
    "verb.stative", "verb.weather", "adj.ppl",
]

FILES = {"n": "noun", "v": "verb", "a": "adj", "r": "adv"}
POS_NUMBERS = {"n": 1, "v": 2, "a": 3, "r": 4}
LEXFILE_NUMBERS = {"noun": 1, "verb": 2, "adj": 3, "adv": 4}

HEADER = "  1 parley test dictionary, not the Princeton data\n"

# (id, pos, lexname, [(word, lex_id, tag count)], [(symbol, target id, source/target)], gloss)
SYNSETS = [
    ("entity", "n", "noun.Tops", [("entity", 0, 11)],
     [("~", "canine", "0000")],
     "that which is perceived to have its own distinct existence"),
    ("canine", "n", "noun.animal", [("canine", 0, 2), ("canid", 0, 0)],
     [("@", "entity", "0000"), ("~", "dog", "0000")],
     "any of various fissiped mammals with nonretractile claws"),
    ("dog", "n", "noun.animal", [("dog", 0, 42), ("domestic_dog", 0, 0)],
     [("@", "canine", "0000"), ("#m", "pack", "0000")],
     "a member of the genus Canis"),
    ("pack", "n", "noun.group", [("pack", 0, 5)],
     [("%m", "dog", "0000")],
     "a group of hunting animals"),
    ("frump", "n", "noun.person", [("frump", 0, 0), ("dog", 1, 1)],
     [("@", "entity", "0000")],
     "a dull unattractive unpleasant girl or woman"),
    ("foot", "n", "noun.body", [("foot", 0, 12)], [],
     "the extremity of the leg"),
    ("runner", "n", "noun.person", [("runner", 0, 3)],
     [("+", "run", "0101")],
     "someone who travels on foot by running"),
    ("run", "v", "verb.motion", [("run", 0, 30)],
     [("+", "runner", "0101")],
     "move fast by using one's feet"),
    ("good", "a", "adj.all", [("good", 0, 185)],
     [("!", "bad", "0101")],
     "having desirable or positive qualities"),
    ("bad", "a", "adj.all", [("bad", 0, 60)],
     [("!", "good", "0101")],
     "having undesirable or negative qualities"),
    ("well", "r", "adv.all", [("well", 0, 20)], [],
     "in a good or proper or satisfactory manner"),
]

EXCEPTIONS = {
    "n": ["feet foot"],
    "v": ["ran run"],
    "a": ["better good"],
    "r": [],
}


def filler_names(n: int) -> list[str]:
    pairs = itertools.product(string.ascii_lowercase, repeat=2)
    return ["zq" + a + b + "x" for a, b in itertools.islice(pairs, n)]


def _fillers(n: int) -> list[tuple]:
    return [
        (name, "n", "noun.artifact", [(name, 0, i % 97 + 1)],
         [("@", "entity", "0000")], f"test filler number {i}")
        for i, name in enumerate(filler_names(n))
    ]


def _sense_key(word: str, pos: str, lexname: str, lex_id: int) -> str:
    return f"{word.lower()}%{POS_NUMBERS[pos]}:{LEXNAMES.index(lexname):02d}:{lex_id:02d}::"


def _data_line(synset: tuple, by_id: dict, offsets: dict) -> str:
    sid, pos, lexname, words, pointers, gloss = synset
    fields = [f"{offsets[sid]:08d}", f"{LEXNAMES.index(lexname):02d}", pos, f"{len(words):02x}"]
    for word, lex_id, _ in words:
        fields += [word, f"{lex_id:x}"]
    fields.append(f"{len(pointers):03d}")
    for symbol, target, source_target in pointers:
        fields += [symbol, f"{offsets[target]:08d}", by_id[target][1], source_target]
    if pos == "v":
        fields += ["01", "+", "02", "00"]
    return " ".join(fields) + f" | {gloss}  \n"


def write_wordnet(root, fillers: int = 0):
    """Write the dictionary files under `root` (a pathlib.Path)."""
    synsets = SYNSETS + _fillers(fillers)
    by_id = {s[0]: s for s in synsets}

    # offsets are fixed width, so line lengths do not depend on them
    offsets = {}
    placeholder = defaultdict(int)
    for pos in FILES:
        offset = len(HEADER)
        for synset in synsets:
            if synset[1] == pos:
                offsets[synset[0]] = offset
                offset += len(_data_line(synset, by_id, placeholder))

    index = defaultdict(list)
    symbols = defaultdict(set)
    for sid, pos, _, words, pointers, _ in synsets:
        for word, _, _ in words:
            index[word.lower(), pos].append(offsets[sid])
            symbols[word.lower(), pos].update(p[0] for p in pointers)

    senses, counts = [], []
    for sid, pos, lexname, words, _, _ in synsets:
        for word, lex_id, count in words:
            key = _sense_key(word, pos, lexname, lex_id)
            number = index[word.lower(), pos].index(offsets[sid]) + 1
            senses.append(f"{key} {offsets[sid]:08d} {number} {count}\n")
            if count:
                counts.append(f"{key} {number} {count}\n")

    def write(name, lines):
        with open(root / name, "w", encoding="utf8", newline="\n") as f:
            f.writelines(lines)

    write("lexnames", [
        f"{i:02d}\t{name}\t{LEXFILE_NUMBERS[name.split('.')[0]]}\n"
        for i, name in enumerate(LEXNAMES)
    ])
    for pos, name in FILES.items():
        write(f"data.{name}", [HEADER] + [
            _data_line(s, by_id, offsets) for s in synsets if s[1] == pos
        ])
        entries = sorted((lemma, offs) for (lemma, p), offs in index.items() if p == pos)
        write(f"index.{name}", [
            f"{lemma} {pos} {len(offs)} {len(symbols[lemma, pos])} "
            f"{' '.join(sorted(symbols[lemma, pos]))} {len(offs)} 0 "
            f"{' '.join(f'{o:08d}' for o in offs)}  \n"
            for lemma, offs in entries
        ])
        write(f"{name}.exc", [line + "\n" for line in EXCEPTIONS[pos]])
    write("index.sense", sorted(senses))
    write("cntlist.rev", sorted(counts))
    return root
