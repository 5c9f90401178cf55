# Copyright 2025 ncsuandrew12
# Modifications Copyright to their individual contributors
# Licensed under the Open Software License version 3.0
# SPDX-License-Identifier: OSL-3.0
"""
Cregeen Dictionary Converter

This script converts the hand-corrected HTML edition of Cregeen's Manx
dictionary into a JSON tree of entries.

The script performs four main operations:
1. Loads the Windows-1252 encoded HTML and fixes a known tag misplacement
2. Parses the dictionary paragraphs into headwords, expanding suffix notation
   (ynseydagh [change -agh to -ee] => ynseydagh, ynseydee)
3. Reports entries that look malformed, for manual fixing of the HTML
4. Writes the entries, with display HTML, to a JSON file

The document has been manually modified beforehand: <br> has been converted to
<p></p> where it did not start a new word, commas were added after
definitions, and some words were expanded (deinagh(ey) -> deinagh or deinaghey).

Dependencies:
    - beautifulsoup4: For HTML parsing and repair of HTML fragments
    - markdownify: For the Markdown rendering of each entry

License: OSL-3.0
"""

import argparse
import logging
import re
import sys

from pathlib import Path
from bs4 import BeautifulSoup

from .diagnostics import collect_diagnostics, load_allow_list, report, verify_headwords
from .headwords import parse_headwords
from .projection import write_json

logger = logging.getLogger("cregeen")

DEFAULT_INPUT = "./Resources/aa-orderit.01052020-filtered.htm"
DEFAULT_OUTPUT_DIR = "./Output"
DEFAULT_OUTPUT_NAME = "cregeen-v1.json"
SOURCE_ENCODING = "cp1252"
PREAMBLE_PARAGRAPHS = 1708
DICTIONARY_PARAGRAPHS = 3451
# technically "aa‑", but the non-breaking hyphen causes issues
FIRST_WORD = "aa"
LAST_WORD = "yskid"

# An <i> opened just before a line break swallows the next line's headword
MISPLACED_ITALIC_RE = re.compile(r"<i><br>(\r?\n)")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(prog="cregeen-convert",
                                     description="Convert the HTML edition of Cregeen's Manx dictionary into a JSON tree of entries.")
    parser.add_argument('-i', '--input', type=str, help='Path to the dictionary HTML file', default=DEFAULT_INPUT)
    parser.add_argument('-o', '--output-dir', type=str, help='Directory to write the JSON file to', default=DEFAULT_OUTPUT_DIR)
    parser.add_argument('-f', '--output-name', type=str, help='Name of the JSON file', default=DEFAULT_OUTPUT_NAME)
    parser.add_argument('--skip', type=int, help='Number of preamble paragraphs to skip', default=PREAMBLE_PARAGRAPHS)
    parser.add_argument('--take', type=int, help='Number of dictionary paragraphs after the preamble', default=DICTIONARY_PARAGRAPHS)
    parser.add_argument('--first-word', type=str, help='Expected start of the first headword', default=FIRST_WORD)
    parser.add_argument('--last-word', type=str, help='Expected start of the last headword', default=LAST_WORD)
    parser.add_argument('-a', '--allow-list', type=str, help='File of multi-word headwords known to be valid (defaults to the packaged list)')
    parser.add_argument('-l', '--log-level', type=int, help='Set the logging level')
    return parser.parse_args(argv)


def configure_logging(args):
    logging.basicConfig(filename='cregeen.log', level=logging.INFO)
    logger.addHandler(logging.StreamHandler(sys.stdout))
    if args.log_level:
        logger.setLevel(args.log_level)
        print(f"Log level set to {args.log_level}")


def load_dictionary(path):
    """
    Read the dictionary HTML.

    The file is Windows-1252 encoded, not UTF-8. Line endings are preserved so
    the tag fix below sees the file as written.

    Args:
        path (str): Path to the HTML file

    Returns:
        str: The document text, with misplaced <i> tags moved after the <br>

    Raises:
        FileNotFoundError: If the file does not exist
    """
    if not Path(path).exists():
        raise FileNotFoundError(f"Dictionary not found: {path}")
    logger.info(f"Reading {path}")
    with open(path, 'r', encoding=SOURCE_ENCODING, newline='') as f:
        doc_text = f.read()
    return MISPLACED_ITALIC_RE.sub(r"<br>\1<i>", doc_text)


def select_paragraphs(doc_text, skip, take):
    """The <p> nodes holding dictionary entries: everything after the preamble, up to the suffix."""
    soup = BeautifulSoup(doc_text, 'html.parser')
    paragraphs = soup.find_all('p')
    logger.debug(f"Found {len(paragraphs)} paragraphs, using {skip}..{skip + take}")
    return paragraphs[skip:skip + take]


def convert(args):
    """
    Run the conversion end to end.

    The boundary check happens before anything is written: if the first or
    last headword is wrong, the paragraph slice is off and no output is
    produced.

    Args:
        args: Parsed command line arguments (see parse_args)

    Returns:
        str: Path of the JSON file written

    Raises:
        FileNotFoundError: If the dictionary file is missing
        BoundaryError: If the first or last headword is not the expected one
    """
    doc_text = load_dictionary(args.input)
    paragraphs = select_paragraphs(doc_text, args.skip, args.take)
    headwords = parse_headwords(paragraphs)
    logger.info(f"Parsed {len(headwords)} headwords from {len(paragraphs)} paragraphs")
    verify_headwords(headwords, args.first_word, args.last_word)

    # All words - not just headwords
    definitions = [definition for headword in headwords for definition in headword.all]
    report(collect_diagnostics(definitions, load_allow_list(args.allow_list)))

    return write_json(headwords, args.output_dir, args.output_name)


def main(argv=None):
    args = parse_args(argv)
    configure_logging(args)
    convert(args)


if __name__ == "__main__":
    main()
