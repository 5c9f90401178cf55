import json

import pytest

from cregeen.abbreviations import PartOfSpeech
from cregeen.headwords import Definition, Headword
from cregeen.projection import EntryRecord, fix_unclosed_tags, project, write_json


def _definition(word, extra="", heading=None, children=()):
    return Definition.create(word, heading=heading if heading is not None else f"<b>{word}</b>",
                             extra=extra, children=children)


def test_unclosed_tag_is_closed():
    assert fix_unclosed_tags("<i>s. f.") == "<i>s. f.</i>"


def test_stray_end_tag_is_dropped():
    assert fix_unclosed_tags("</span>, <i>a.</i> good") == ", <i>a.</i> good"


@pytest.mark.parametrize("fragment", [
    "<i>s. f.",
    "<b>aa-</b>, <i>pref.</i> again<br>",
    "</span><span style='mso-tab-count:1'> </span><b>x",
    "a &amp; b <i>c</i>",
    "",
])
def test_tag_repair_is_a_fixed_point(fragment):
    once = fix_unclosed_tags(fragment)
    assert fix_unclosed_tags(once) == once


def test_project_entry():
    record = project(_definition("booa", ", <i>s. f.</i> a cow, Prov. Ta'n booa mie"))
    assert record.words == ["booa"]
    assert record.heading_html == "<b>booa</b>"
    assert record.entry_html == ", <i>s. f.</i> a cow, Prov. Ta'n booa mie"
    assert "*s. f.*" in record.entry_markdown
    assert record.parts_of_speech == ["Noun"]
    assert record.gender == ["f"]
    assert record.definition == "a cow"
    assert record.proverb == "Ta'n booa mie"
    assert record.children == []


def test_project_deduplicates_tags():
    record = project(_definition("dooinney", ", <i>s. m.</i> <i>s. f. or m.</i> a person"))
    assert record.parts_of_speech == ["Noun"]
    assert sorted(record.gender) == ["f", "m"]


def test_project_children_recursively():
    child = _definition("aa-chionnagh", ", <i>v. a.</i> rebuy")
    record = project(_definition("aa-", ", <i>pref.</i> again", children=[child]))
    assert [c.words for c in record.children] == [["aa-chionnagh"]]
    assert record.children[0].parts_of_speech == ["Verb"]


def test_gender_and_parts_of_speech_are_from_known_values():
    record = project(_definition("x", ", <i>s. f. or m.</i> <i>v. a.</i> <i>adj.</i> <i>zz.</i> y"))
    labels = {str(p) for p in PartOfSpeech}
    assert set(record.gender) <= {"f", "m"}
    assert set(record.parts_of_speech) <= labels


def test_words_are_never_empty_for_a_word():
    record = project(_definition("ynseydee [change -agh to -ee]"))
    assert record.words == ["ynseydee"]


def test_record_to_json():
    record = project(_definition("booa", ", <i>s. f.</i> a cow"))
    data = json.loads(record.toJSON())
    assert list(data) == ["words", "entryHtml", "headingHtml", "entryMarkdown", "partsOfSpeech",
                          "gender", "definition", "proverb", "children"]
    assert isinstance(record, EntryRecord)


def test_json_keys_carry_the_record_attributes():
    child = _definition("aa-chionnagh", ", <i>v. a.</i> rebuy")
    record = project(_definition("aa-", ", <i>pref.</i> again", children=[child]))
    data = record.to_dict()
    assert data["entryHtml"] == record.entry_html
    assert data["headingHtml"] == record.heading_html
    assert data["entryMarkdown"] == record.entry_markdown
    assert data["partsOfSpeech"] == record.parts_of_speech
    assert not any(hasattr(record, key) for key in ("entryHtml", "headingHtml", "entryMarkdown", "partsOfSpeech"))
    assert json.loads(record.toJSON())["children"][0]["partsOfSpeech"] == ["Verb"]


def test_write_json_creates_directory(tmp_path):
    headwords = [Headword(_definition("aa", ", <i>s. m.</i> çhaghter"))]
    out_path = write_json(headwords, str(tmp_path / "Output"), "cregeen-v1.json")
    with open(out_path, 'r', encoding='utf-8') as f:
        data = json.load(f)
    assert data[0]["words"] == ["aa"]
    assert data[0]["definition"] == "çhaghter"
