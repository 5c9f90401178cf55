from cregeen.abbreviations import (
    Abbreviation,
    Gender,
    PartOfSpeech,
    classify,
    is_abbreviation,
)


def test_feminine_noun():
    result = classify("s. f.")
    assert result.parts_of_speech == {PartOfSpeech.NOUN}
    assert result.genders == {Gender.FEMININE}


def test_noun_of_either_gender():
    result = classify("s. f. or m.")
    assert result.parts_of_speech == {PartOfSpeech.NOUN}
    assert result.genders == {Gender.FEMININE, Gender.MASCULINE}


def test_verb_active_is_not_an_adjective():
    for token in ("v. a.", "v.a.", "v. n."):
        result = classify(token)
        assert result.parts_of_speech == {PartOfSpeech.VERB}
        assert result.genders == frozenset()


def test_adjective_on_its_own():
    assert classify("a.").parts_of_speech == {PartOfSpeech.ADJECTIVE}


def test_plural_marker_has_no_tags():
    result = classify("pl.")
    assert result.parts_of_speech == frozenset()
    assert result.genders == frozenset()


def test_unknown_token_has_no_tags():
    result = classify("xyz.")
    assert result.parts_of_speech == frozenset()
    assert result.genders == frozenset()


def test_is_abbreviation():
    assert is_abbreviation("s. f.")
    assert is_abbreviation("v.a.")
    assert is_abbreviation("s. f. or m.")
    assert not is_abbreviation("a little house")
    assert not is_abbreviation("")


def test_gender_codes():
    assert {str(g) for g in Abbreviation("s. m. f.").genders()} == {"f", "m"}


def test_part_of_speech_labels():
    assert [str(p) for p in Abbreviation("adv.").parts_of_speech()] == ["Adverb"]


def test_voices_after_verb_stay_voices_across_or():
    result = classify("v. n. or a.")
    assert result.parts_of_speech == {PartOfSpeech.VERB}
    assert result.genders == frozenset()


def test_part_of_speech_after_verb_ends_the_voices():
    assert classify("v. a. or s. f.").parts_of_speech == {PartOfSpeech.VERB, PartOfSpeech.NOUN}
    assert classify("s. or a.").parts_of_speech == {PartOfSpeech.NOUN, PartOfSpeech.ADJECTIVE}


def test_dotted_words_that_are_not_known_atoms_are_not_abbreviations():
    assert not is_abbreviation("Prov.")
    assert not is_abbreviation("idem.")
    assert not is_abbreviation("s. idem.")
