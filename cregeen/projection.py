# Copyright 2025 ncsuandrew12
# Modifications Copyright to their individual contributors
# Licensed under the Open Software License version 3.0
# SPDX-License-Identifier: OSL-3.0
"""
Projection of parsed Headwords into the JSON records written to disk.
"""

import json
import logging
import os

from bs4 import BeautifulSoup
from markdownify import markdownify as md

logger = logging.getLogger("cregeen")


class EntryRecord:
    """
    One dictionary entry as written to the JSON output.

    Attributes are snake_case; JSON_KEYS gives the camelCase property name
    each one is written under.

    Attributes:
        words (list[str]): Every expanded form of the headword
        entry_html (str): Repaired HTML of the entry text
        heading_html (str): Repaired HTML of the headword
        entry_markdown (str): The entry HTML rendered as Markdown
        parts_of_speech (list[str]): e.g. "Noun", "Verb"
        gender (list[str]): "f" and/or "m"
        definition (str): The gloss
        proverb (str): Proverb attached to the entry, if any
        children (list[EntryRecord]): Nested entries
    """
    JSON_KEYS = {
        "words": "words",
        "entry_html": "entryHtml",
        "heading_html": "headingHtml",
        "entry_markdown": "entryMarkdown",
        "parts_of_speech": "partsOfSpeech",
        "gender": "gender",
        "definition": "definition",
        "proverb": "proverb",
        "children": "children",
    }

    words = None
    entry_html = None
    heading_html = None
    entry_markdown = None
    parts_of_speech = None
    gender = None
    definition = None
    proverb = None
    children = None

    def __str__(self):
        return f"EntryRecord: {self.toJSON()}"

    def to_dict(self):
        return {key: getattr(self, attribute) for attribute, key in self.JSON_KEYS.items()}

    def toJSON(self):
        return json.dumps(self.to_dict(), cls=JsonEncoder, ensure_ascii=False)


class JsonEncoder(json.JSONEncoder):
    def default(self, o):
        if isinstance(o, EntryRecord):
            return o.to_dict()
        return super().default(o)


def fix_unclosed_tags(html):
    """Close every open tag (and drop stray end tags) by round-tripping through BeautifulSoup."""
    return str(BeautifulSoup(html or "", 'html.parser'))


def _unique(values):
    result = []
    for value in values:
        if value not in result:
            result.append(value)
    return result


def project(definition):
    """
    Project a Definition, and its children, into an EntryRecord.

    Args:
        definition (Definition): The parsed entry.

    Returns:
        EntryRecord: The record, with repaired HTML and classified abbreviations.
    """
    record = EntryRecord()
    record.words = list(definition.possible_words)
    record.entry_html = fix_unclosed_tags(definition.extra)
    record.heading_html = fix_unclosed_tags(definition.heading)
    record.entry_markdown = md(record.entry_html).strip()
    record.parts_of_speech = _unique(str(p) for a in definition.abbreviations for p in sorted(a.parts_of_speech(), key=str))
    record.gender = _unique(str(g) for a in definition.abbreviations for g in sorted(a.genders(), key=str))
    record.definition = definition.entry_text
    record.proverb = definition.proverb
    record.children = [project(child) for child in definition.children]
    return record


def write_json(headwords, output_dir, output_name):
    """
    Write the projected headwords as a UTF-8 JSON array.

    Args:
        headwords (list[Headword]): The parsed headwords, in document order.
        output_dir (str): Directory to write to, created if missing.
        output_name (str): File name within output_dir.

    Returns:
        str: The path written.
    """
    records = [project(headword.definition) for headword in headwords]
    os.makedirs(output_dir, exist_ok=True)
    out_path = os.path.join(output_dir, output_name)
    with open(out_path, 'w', encoding='utf-8') as f:
        logger.info(f"Writing JSON to {f.name}")
        f.write(json.dumps(records, cls=JsonEncoder, indent=2, ensure_ascii=False) + "\n")
    return out_path
