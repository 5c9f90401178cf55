# Copyright 2025 ncsuandrew12
# Modifications Copyright to their individual contributors
# Licensed under the Open Software License version 3.0
# SPDX-License-Identifier: OSL-3.0
"""
Classification of the grammatical abbreviations used in Cregeen's dictionary.

Entries carry italic abbreviation tokens such as "s. f.", "v. a." or
"s. f. or m.". A token is split into dotted atoms which are looked up in the
tables below. Classification is best-effort: an unknown token simply yields
no tags.
"""

import json
import logging
import re

from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger("cregeen")


class PartOfSpeech(Enum):
    NOUN = "Noun"
    VERB = "Verb"
    ADJECTIVE = "Adjective"
    ADVERB = "Adverb"
    PREPOSITION = "Preposition"
    PRONOUN = "Pronoun"
    CONJUNCTION = "Conjunction"
    INTERJECTION = "Interjection"
    ARTICLE = "Article"
    PARTICIPLE = "Participle"
    PREFIX = "Prefix"

    def __str__(self):
        return self.value


class Gender(Enum):
    FEMININE = "f"
    MASCULINE = "m"

    def __str__(self):
        return self.value


PART_OF_SPEECH_ATOMS = {
    "s.": PartOfSpeech.NOUN,
    "sub.": PartOfSpeech.NOUN,
    "subs.": PartOfSpeech.NOUN,
    "v.": PartOfSpeech.VERB,
    "a.": PartOfSpeech.ADJECTIVE,
    "adj.": PartOfSpeech.ADJECTIVE,
    "ad.": PartOfSpeech.ADVERB,
    "adv.": PartOfSpeech.ADVERB,
    "pre.": PartOfSpeech.PREPOSITION,
    "prep.": PartOfSpeech.PREPOSITION,
    "pro.": PartOfSpeech.PRONOUN,
    "pron.": PartOfSpeech.PRONOUN,
    "c.": PartOfSpeech.CONJUNCTION,
    "conj.": PartOfSpeech.CONJUNCTION,
    "int.": PartOfSpeech.INTERJECTION,
    "interj.": PartOfSpeech.INTERJECTION,
    "art.": PartOfSpeech.ARTICLE,
    "part.": PartOfSpeech.PARTICIPLE,
    "pref.": PartOfSpeech.PREFIX,
}

GENDER_ATOMS = {
    "f.": Gender.FEMININE,
    "m.": Gender.MASCULINE,
}

# "v. a." is verb active and "v. n." verb neuter
VERB_VOICE_ATOMS = {"a.", "n."}

# Recognised, but carry no part of speech or gender
MARKER_ATOMS = {"pl.", "comp.", "dim.", "em.", "imp.", "inf.", "sing."}

KNOWN_ATOMS = set(PART_OF_SPEECH_ATOMS) | set(GENDER_ATOMS) | VERB_VOICE_ATOMS | MARKER_ATOMS

ATOM_RE = re.compile(r"[a-z]+\.")
TOKEN_RE = re.compile(r"^(?:[a-z]{1,6}\.\s*)+(?:or\s+(?:[a-z]{1,6}\.\s*)+)*$", re.IGNORECASE)


def is_abbreviation(text):
    """Whether an italic run of text is an abbreviation token rather than prose or a "Prov." marker."""
    text = text.strip()
    if not TOKEN_RE.match(text):
        return False
    return all(atom in KNOWN_ATOMS for atom in split_atoms(text))


def split_atoms(token):
    return ATOM_RE.findall(token.lower())


@dataclass(frozen=True)
class Classification:
    parts_of_speech: frozenset
    genders: frozenset


def classify(token):
    """
    Classify a raw abbreviation token.

    Args:
        token (str): The token as it appears in the entry, e.g. "s. f. or m."

    Returns:
        Classification: The parts of speech and genders the token implies.
            Both sets are empty for unrecognised tokens.
    """
    parts = set()
    genders = set()
    # "a." and "n." are voices from a "v." up to the next part of speech: "v. n. or a."
    in_verb = False
    for atom in split_atoms(token):
        if in_verb and atom in VERB_VOICE_ATOMS:
            pass
        elif atom in PART_OF_SPEECH_ATOMS:
            parts.add(PART_OF_SPEECH_ATOMS[atom])
            in_verb = atom == "v."
        elif atom in GENDER_ATOMS:
            genders.add(GENDER_ATOMS[atom])
        elif atom not in MARKER_ATOMS and atom not in VERB_VOICE_ATOMS:
            logger.debug(f"Unknown abbreviation atom {atom} in {token}")
    return Classification(parts_of_speech=frozenset(parts), genders=frozenset(genders))


@dataclass(frozen=True)
class Abbreviation:
    token: str

    def parts_of_speech(self):
        return classify(self.token).parts_of_speech

    def genders(self):
        return classify(self.token).genders

    def __str__(self):
        return f"Abbreviation: {self.toJSON()}"

    def toJSON(self):
        return json.dumps({"token": self.token,
                           "partsOfSpeech": sorted(str(p) for p in self.parts_of_speech()),
                           "gender": sorted(str(g) for g in self.genders())}, ensure_ascii=False)
