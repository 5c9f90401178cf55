# Copyright 2025 ncsuandrew12
# Modifications Copyright to their individual contributors
# Licensed under the Open Software License version 3.0
# SPDX-License-Identifier: OSL-3.0
"""
Expansion of the compact word-form notation used in headwords.

    ynseydagh [change -agh to -ee]  => ["ynseydagh", "ynseydee"]
    deinagh(ey)                     => ["deinagh", "deinaghey"]
    deinagh or deinaghey            => ["deinagh", "deinaghey"]

Editorial notes such as "(sic: stress)" or "[sc. yn eagh]" are not notation
and are left where they are.
"""

import re

from dataclasses import dataclass

CHANGE_RE = re.compile(r"\[\s*change\s+-(?P<old>[^\s\]]+)\s+to\s+(?P<new>-[^\]]*?)\s*\]", re.IGNORECASE)
CHANGE_TARGET_SPLIT_RE = re.compile(r"\s*(?:,|\bor\b)\s*")
OPTIONAL_SUFFIX_RE = re.compile(r"^(?P<stem>.*[^\s(])\((?P<suffix>[A-Za-zçÇ'’-]+)\)$", re.DOTALL)
VARIANT_SEPARATOR = " or "
OPENING = "([<"
CLOSING = ")]>"


class SuffixMismatchError(ValueError):
    """A change-suffix instruction names a suffix none of the forms end with."""


@dataclass(frozen=True)
class SuffixChange:
    old: str
    new: tuple

    def apply(self, forms):
        """
        Derive the changed forms from the forms ending in the old suffix.

        Raises:
            SuffixMismatchError: If no form ends with the old suffix.
        """
        matching = [f for f in forms if f.endswith(self.old)]
        if not matching:
            raise SuffixMismatchError(f"cannot change -{self.old} to {', '.join('-' + n for n in self.new)}: "
                                      f"{' / '.join(forms) or '(no form)'} does not end with -{self.old}")
        return [f[:-len(self.old)] + new for f in matching for new in self.new]


def extract_changes(word):
    """Split a headword into its text without change instructions, and the instructions."""
    changes = []
    for match in CHANGE_RE.finditer(word):
        targets = [t.strip().lstrip("-") for t in CHANGE_TARGET_SPLIT_RE.split(match.group("new"))]
        changes.append(SuffixChange(old=match.group("old"), new=tuple(t for t in targets if t)))
    return CHANGE_RE.sub("", word), changes


def split_variants(text):
    """Split on " or ", ignoring separators inside brackets."""
    variants = []
    depth = 0
    start = 0
    i = 0
    while i < len(text):
        c = text[i]
        if c in OPENING:
            depth += 1
        elif c in CLOSING and depth > 0:
            depth -= 1
        elif depth == 0 and text.startswith(VARIANT_SEPARATOR, i):
            variants.append(text[start:i])
            i += len(VARIANT_SEPARATOR)
            start = i
            continue
        i += 1
    variants.append(text[start:])
    return variants


def expand_optional_suffix(variant):
    match = OPTIONAL_SUFFIX_RE.match(variant.strip())
    if not match:
        return [variant]
    stem = match.group("stem").strip()
    return [stem, stem + match.group("suffix")]


def _clean(forms):
    result = []
    for form in forms:
        form = form.strip()
        if form and form not in result:
            result.append(form)
    return result


def base_forms(word):
    """The forms of a headword before any change-suffix instruction is applied."""
    text, _ = extract_changes(word)
    forms = []
    for variant in split_variants(text):
        forms.extend(expand_optional_suffix(variant))
    return _clean(forms)


def expand_word(word):
    """
    Expand a headword into every literal word form it denotes.

    Base forms come first, in the order they are written, followed by the
    forms derived from change-suffix instructions.

    Args:
        word (str): The raw headword.

    Returns:
        list[str]: The trimmed, de-duplicated forms. ``[word.strip()]`` when the
            headword carries no notation.

    Raises:
        SuffixMismatchError: If a change-suffix instruction does not apply to
            any base form.
    """
    _, changes = extract_changes(word)
    forms = base_forms(word)
    derived = []
    for change in changes:
        derived.extend(change.apply(forms))
    return _clean(forms + derived)
