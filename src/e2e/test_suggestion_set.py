import itertools
import pytest
from wordsuggest import Candidate, Kind, SuggestionSet, EMPTY


def _set(words, **flags):
    return SuggestionSet(
        tuple(Candidate(w, 100 - i, Kind.TYPED if i == 0 else Kind.CORRECTION, "main")
              for i, w in enumerate(words)),
        **flags,
    )


@pytest.mark.parametrize("valid,has_corr", list(itertools.product([False, True], repeat=2)))
def test_will_auto_correct_is_derived_from_flags(valid, has_corr):
    s = _set(["a", "b"], typed_word_valid=valid, has_auto_correction_candidate=has_corr)
    assert s.will_auto_correct == (not valid and has_corr)


def test_will_auto_correct_cannot_be_passed_in():
    with pytest.raises(TypeError):
        SuggestionSet((), will_auto_correct=True)  # type: ignore[call-arg]


def test_has_auto_correction_word_needs_more_than_one_candidate():
    one = _set(["helo"], has_auto_correction_candidate=True)
    assert one.will_auto_correct is True
    assert one.has_auto_correction_word() is False

    two = _set(["helo", "hello"], has_auto_correction_candidate=True)
    assert two.has_auto_correction_word() is True


def test_has_auto_correction_word_false_when_typed_word_valid():
    s = _set(["hello", "help"], typed_word_valid=True, has_auto_correction_candidate=True)
    assert s.has_auto_correction_word() is False


def test_indexed_access_and_size():
    s = _set(["cat", "car", "cab"])
    assert s.size() == len(s) == 3
    assert s.word(1) == "car"
    assert s.info(2).text == "cab"
    assert s[0].kind is Kind.TYPED
    assert [c.text for c in s] == ["cat", "car", "cab"]


@pytest.mark.parametrize("pos", [-1, 3, 10])
def test_out_of_range_rank_raises(pos):
    s = _set(["cat", "car", "cab"])
    with pytest.raises(IndexError):
        s.info(pos)
    with pytest.raises(IndexError):
        s.word(pos)


def test_list_input_is_frozen_into_tuple():
    items = [Candidate("a", 1, Kind.TYPED, "x")]
    s = SuggestionSet(items)
    items.append(Candidate("b", 1, Kind.CORRECTION, "x"))
    assert len(s) == 1
    assert isinstance(s.candidates, tuple)


def test_empty_constant():
    assert len(EMPTY) == 0
    assert not any([EMPTY.typed_word_valid, EMPTY.has_auto_correction_candidate, EMPTY.will_auto_correct,
                    EMPTY.is_punctuation_suggestions, EMPTY.is_obsolete, EMPTY.is_prediction])
    with pytest.raises(IndexError):
        EMPTY.info(0)
    with pytest.raises(AttributeError):
        EMPTY.is_obsolete = True  # type: ignore[misc]


def test_str_lists_flags_and_words():
    s = _set(["cat", "car"], has_auto_correction_candidate=True)
    s.info(1).set_debug_info("d=1")
    text = str(s)
    assert text.startswith("SuggestionSet:")
    assert "has_auto_correction_candidate=True" in text
    assert "words=[cat, car (d=1)]" in text


def test_to_dict_carries_flags_and_candidates():
    d = _set(["cat", "car"], is_prediction=True).to_dict()
    assert d["size"] == 2
    assert d["is_prediction"] is True
    assert d["will_auto_correct"] is False
    assert [c["text"] for c in d["candidates"]] == ["cat", "car"]
