# Copyright 2025 ncsuandrew12
# Modifications Copyright to their individual contributors
# Licensed under the Open Software License version 3.0
# SPDX-License-Identifier: OSL-3.0
"""
Parsing of dictionary paragraphs into Headword/Definition trees.

Each headword block of the source document is a single <p>. Inside it, lines
are separated by <br>; a line that opens with bold text starts a new entry and
the bold run is its headword. The first entry of the paragraph is the
headword itself, later ones are nested beneath it according to their Word
tab indentation:

    <p><b>aa-</b>, <i>pref.</i> again, re-<br>
    <span style='mso-tab-count:1'> </span><b>aa-chionnagh</b>, <i>v.</i> rebuy<br>
    <span style='mso-tab-count:2'> </span><b>aa-chionnit</b>, <i>part.</i> rebought</p>

Lines are read from the parsed tree. Wrapper tags other than <b> that hold
several lines are opened up, so each line keeps only its own nodes.
"""

import logging
import re

from dataclasses import dataclass, field
from typing import Optional

from bs4 import BeautifulSoup, Comment, Tag

from .abbreviations import Abbreviation, is_abbreviation
from .suffixes import SuffixMismatchError, base_forms, expand_word

logger = logging.getLogger("cregeen")

TAB_COUNT_RE = re.compile(r"mso-tab-count:\s*(\d+)", re.IGNORECASE)
# "Prov. xii. 4" is a Bible reference, not a proverb
PROVERB_RE = re.compile(r"\bProv\.\s+(?![ivxlcIVXLC]+\.?\s*\d)(?!\d)(?P<proverb>\S.*)$", re.DOTALL)
WORD_TRAILING_PUNCTUATION = ",;: "
GLOSS_PUNCTUATION = ",; "


def collapse_whitespace(text):
    return " ".join(text.replace("\xa0", " ").split())


def split_proverb(text):
    """
    Separate a proverb introduced by "Prov." from the gloss.

    Returns:
        tuple: (gloss, proverb), proverb being None when there is none.
    """
    match = PROVERB_RE.search(text)
    if not match:
        return text, None
    return text[:match.start()].strip(GLOSS_PUNCTUATION), match.group("proverb").strip(GLOSS_PUNCTUATION)


def read_entry_html(extra):
    """
    Pull the abbreviation tokens and the gloss out of the HTML following a headword.

    Returns:
        tuple: (list of Abbreviation, gloss text)
    """
    soup = BeautifulSoup(extra, "html.parser")
    abbreviations = []
    for italic in soup.find_all("i"):
        token = collapse_whitespace(italic.get_text())
        if token and is_abbreviation(token):
            abbreviations.append(Abbreviation(token))
            italic.extract()
    for br in soup.find_all("br"):
        br.replace_with(" ")
    gloss = collapse_whitespace(soup.get_text()).strip(GLOSS_PUNCTUATION)
    return abbreviations, gloss


@dataclass(frozen=True)
class Definition:
    word: str
    possible_words: tuple
    entry_text: str = ""
    abbreviations: tuple = ()
    proverb: Optional[str] = None
    heading: str = ""
    extra: str = ""
    children: tuple = ()
    expansion_issues: tuple = ()

    @classmethod
    def create(cls, word, heading="", extra="", children=()):
        """
        Build a Definition from its headword and the raw HTML of its line.

        Returns None for an empty headword.
        """
        word = word.strip()
        if not word:
            return None
        issues = ()
        try:
            possible_words = expand_word(word)
        except SuffixMismatchError as e:
            logger.debug(f"Could not expand {word}: {e}")
            possible_words = base_forms(word)
            issues = (str(e),)
        if not possible_words:
            possible_words = [word]
        abbreviations, gloss = read_entry_html(extra)
        gloss, proverb = split_proverb(gloss)
        return cls(word=word, possible_words=tuple(possible_words), entry_text=gloss,
                   abbreviations=tuple(abbreviations), proverb=proverb, heading=heading, extra=extra,
                   children=tuple(children), expansion_issues=issues)

    def walk(self):
        """This definition followed by all of its descendants, in document order."""
        yield self
        for child in self.children:
            yield from child.walk()

    def __str__(self):
        return f"Definition: {self.word} {list(self.possible_words)}"


@dataclass(frozen=True)
class Headword:
    definition: Definition

    @property
    def all(self):
        return self.definition.walk()

    @classmethod
    def from_html(cls, paragraph):
        """
        Parse one <p> of the dictionary.

        Args:
            paragraph (bs4.element.Tag): The paragraph node.

        Returns:
            ParseResult: Carries the Headword, or the reason the paragraph is
                not one.
        """
        lines = read_lines(paragraph)
        if not lines:
            return ParseResult(reason="no headword line")
        definition = build_tree(lines)
        if definition is None:
            return ParseResult(reason="empty headword")
        return ParseResult(headword=cls(definition))

    def __str__(self):
        return f"Headword: {self.definition.word}"


@dataclass(frozen=True)
class ParseResult:
    headword: Optional[Headword] = None
    reason: Optional[str] = None

    @property
    def ok(self):
        return self.headword is not None


@dataclass
class _Line:
    word: str
    heading: str
    extra: str
    depth: int
    children: list = field(default_factory=list)


def _text(node):
    if isinstance(node, Comment):
        return ""
    return node.get_text() if isinstance(node, Tag) else str(node)


def _is_blank(node):
    return not _text(node).strip()


def _html(nodes):
    return "".join(n.decode() if isinstance(n, Tag) else n.output_ready() for n in nodes)


def _unwrap(node):
    """Children of a node, opening up non-bold wrappers that contain line breaks."""
    for child in node.children:
        if isinstance(child, Tag) and child.name not in ("b", "br") and child.find("br") is not None:
            yield from _unwrap(child)
        else:
            yield child


def split_at_breaks(paragraph):
    """The nodes of each <br>-separated line of a paragraph."""
    lines = [[]]
    for node in _unwrap(paragraph):
        if node.name == "br":
            lines.append([])
        else:
            lines[-1].append(node)
    return lines


def split_heading(nodes):
    """
    Separate the indentation and the leading bold run of a line from the rest.

    Returns:
        tuple: (tab depth, heading nodes, remaining nodes). The heading is
            empty when the line does not open with bold text.
    """
    depth = 0
    position = 0
    while position < len(nodes) and nodes[position].name != "b" and _is_blank(nodes[position]):
        depth += sum(int(n) for n in TAB_COUNT_RE.findall(str(nodes[position])))
        position += 1
    heading = []
    while position < len(nodes) and (nodes[position].name == "b" or (heading and _is_blank(nodes[position]))):
        heading.append(nodes[position])
        position += 1
    # blanks after the last <b> belong to the rest of the line
    while heading and heading[-1].name != "b":
        heading.pop()
        position -= 1
    return depth, heading, nodes[position:]


def read_lines(paragraph):
    """
    Split a paragraph into headword lines.

    Lines that do not open with bold text continue the previous headword line.
    Returns an empty list when the first non-blank line is not a headword line.
    """
    lines = []
    for nodes in split_at_breaks(paragraph):
        if all(_is_blank(n) for n in nodes):
            continue
        depth, heading, rest = split_heading(nodes)
        word = collapse_whitespace("".join(_text(n) for n in heading)).rstrip(WORD_TRAILING_PUNCTUATION)
        if word:
            lines.append(_Line(word=word, heading=_html(heading), extra=_html(rest), depth=depth))
        elif lines:
            lines[-1].extra += "<br/>" + _html(nodes)
        else:
            return []
    return lines


def build_tree(lines):
    """Nest lines under the most recent shallower line and convert them to Definitions."""
    root = lines[0]
    root.depth = 0
    stack = [root]
    for line in lines[1:]:
        depth = max(1, line.depth)
        while stack[-1].depth >= depth:
            stack.pop()
        parent = stack[-1]
        line.depth = parent.depth + 1
        parent.children.append(line)
        stack.append(line)
    return _to_definition(root)


def _to_definition(line):
    children = [d for d in (_to_definition(c) for c in line.children) if d is not None]
    return Definition.create(line.word, heading=line.heading, extra=line.extra, children=children)


def parse_headwords(paragraphs):
    """
    Parse paragraphs into Headwords, in document order.

    Paragraphs that are not headwords are dropped.
    """
    headwords = []
    for paragraph in paragraphs:
        result = Headword.from_html(paragraph)
        if result.ok:
            headwords.append(result.headword)
        else:
            logger.debug(f"Skipping paragraph ({result.reason}): {paragraph}")
    return headwords
