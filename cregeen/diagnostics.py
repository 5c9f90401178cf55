# Copyright 2025 ncsuandrew12
# Modifications Copyright to their individual contributors
# Licensed under the Open Software License version 3.0
# SPDX-License-Identifier: OSL-3.0
"""
Checks over parsed entries.

The word checks are advisory: they point at entries of the source document
that probably need a manual fix, and never stop a conversion. The boundary
check is not: a wrong first or last headword means the paragraph slice is
misaligned and nothing downstream can be trusted.
"""

import logging
import re

from dataclasses import dataclass
from importlib import resources

logger = logging.getLogger("cregeen")

PAREN = "paren"
MAYBE_INVALID = "maybeInvalid"
FAILED_REGEX = "failedRegex"
SUFFIX = "suffix"
CATEGORY_ORDER = [PAREN, MAYBE_INVALID, FAILED_REGEX, SUFFIX]

# "yn nah", "aa-", "çhaghter", "cha n'aaitnagh"; the typographic ’ is not allowed
WORD_RE = re.compile(r"^[a-zA-Z\-\sçÇ']+$")
PAREN_MARKERS = ("stress", "sic", "(sc")
MAX_SPACES = 2


class BoundaryError(RuntimeError):
    """The parsed headwords do not start or end where the dictionary does."""


@dataclass(frozen=True)
class Diagnostic:
    category: str
    text: str

    def __str__(self):
        return f"{self.category}: {self.text.strip()}"


def load_allow_list(path=None):
    """
    Load the multi-word phrases that are known to be valid headwords.

    Args:
        path (str, optional): A phrase file to use instead of the packaged one.

    Returns:
        set[str]: The phrases, one per non-blank, non-comment line.
    """
    if path:
        with open(path, 'r', encoding='utf-8') as f:
            content = f.read()
    else:
        content = resources.files("cregeen").joinpath("data").joinpath("allowed_phrases.txt").read_text(encoding="utf-8")
    phrases = set()
    for line in content.splitlines():
        line = line.strip()
        if line and not line.startswith("#"):
            phrases.add(line)
    return phrases


def check_word_count(definition, allow_list):
    word = definition.word
    if word.count(" ") > MAX_SPACES and " or " not in word and word.strip() not in allow_list:
        return [Diagnostic(MAYBE_INVALID, word)]
    return []


def check_parentheses(definition):
    """Parentheses left in a word form are usually notation the expansion missed."""
    main = "\n".join(definition.possible_words)
    if "(" in main and not any(marker in main for marker in PAREN_MARKERS):
        return [Diagnostic(PAREN, main)]
    return []


def check_alphabet(definition):
    if all(WORD_RE.match(w) for w in definition.possible_words):
        return []
    return [Diagnostic(FAILED_REGEX, "\n".join(definition.possible_words))]


def check_expansion(definition):
    return [Diagnostic(SUFFIX, issue) for issue in definition.expansion_issues]


def diagnose(definition, allow_list):
    """All diagnostics for a single definition (children are not included)."""
    return (check_parentheses(definition) + check_word_count(definition, allow_list)
            + check_alphabet(definition) + check_expansion(definition))


def collect_diagnostics(definitions, allow_list):
    """
    Run every check over the definitions.

    Returns:
        list[Diagnostic]: Grouped by category, in document order within a
            category.
    """
    diagnostics = []
    for definition in definitions:
        diagnostics.extend(diagnose(definition, allow_list))
    return sorted(diagnostics, key=lambda d: CATEGORY_ORDER.index(d.category))


def report(diagnostics):
    logger.info(f"Found {len(diagnostics)} issues")
    for diagnostic in diagnostics:
        logger.warning(str(diagnostic))


def verify_headwords(headwords, first_word, last_word):
    """
    Check that the parsed slice starts and ends on the expected entries.

    Raises:
        BoundaryError: If there are no headwords, or the first or last
            headword is not the expected one.
    """
    if not headwords:
        raise BoundaryError(f"data is missing. Expected: {first_word} .. {last_word}. Got no headwords")
    first = headwords[0].definition.word
    if not first.startswith(first_word):
        raise BoundaryError(f"data is missing. Expected: {first_word}. Got: {first}")
    last = headwords[-1].definition.word
    if not last.startswith(last_word):
        raise BoundaryError(f"data is missing. Expected: {last_word}. Got: {last}")
