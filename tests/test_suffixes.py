import pytest

from cregeen.suffixes import (
    SuffixMismatchError,
    base_forms,
    expand_word,
    extract_changes,
    split_variants,
)


def test_plain_word_is_kept_trimmed():
    assert expand_word("  booa ") == ["booa"]


def test_optional_suffix_gives_base_then_suffixed_form():
    assert expand_word("deinagh(ey)") == ["deinagh", "deinaghey"]


def test_optional_suffix_in_a_phrase():
    assert expand_word("dooinney mie(n)") == ["dooinney mie", "dooinney mien"]


def test_change_instruction_replaces_trailing_suffix():
    assert expand_word("ynseydagh [change -agh to -ee]") == ["ynseydagh", "ynseydee"]


def test_change_instruction_on_hyphenated_stem():
    assert expand_word("stem-agh [change -agh to -ee]") == ["stem-agh", "stem-ee"]


def test_change_instruction_with_several_targets_keeps_their_order():
    assert expand_word("ynseydagh [change -agh to -ee or -ey]") == ["ynseydagh", "ynseydee", "ynseydey"]


def test_change_instruction_that_does_not_apply_raises():
    with pytest.raises(SuffixMismatchError) as excinfo:
        expand_word("ynseydee [change -agh to -ee]")
    assert "-agh" in str(excinfo.value)


def test_base_forms_ignore_change_instructions():
    assert base_forms("ynseydee [change -agh to -ee]") == ["ynseydee"]


def test_or_separates_variants():
    assert expand_word("deinagh or deinaghey") == ["deinagh", "deinaghey"]


def test_or_inside_brackets_is_not_a_separator():
    assert split_variants("bare lhieusyn <or lhieuish>") == ["bare lhieusyn <or lhieuish>"]
    assert split_variants("nyn <maase or> maash") == ["nyn <maase or> maash"]


def test_each_variant_is_expanded():
    assert expand_word("fer(ey) or fir") == ["fer", "ferey", "fir"]


def test_duplicate_forms_are_removed():
    assert expand_word("lhong or lhong") == ["lhong"]


def test_editorial_notes_are_not_expanded():
    assert expand_word("yn cherçheen (sic: stress)") == ["yn cherçheen (sic: stress)"]
    assert expand_word("lus ny chroshey (sic)") == ["lus ny chroshey (sic)"]
    assert expand_word("yn niagh [sc. yn eagh]") == ["yn niagh [sc. yn eagh]"]


def test_extract_changes():
    text, changes = extract_changes("ynseydagh [change -agh to -ee]")
    assert text.strip() == "ynseydagh"
    assert len(changes) == 1
    assert changes[0].old == "agh"
    assert changes[0].new == ("ee",)


def test_empty_word_has_no_forms():
    assert expand_word("   ") == []
