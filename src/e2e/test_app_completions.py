from types import SimpleNamespace
from wordsuggest import AppCompletion, Kind, from_app_completions, punctuation_candidates
from wordsuggest.config import MAX_SCORE, SOURCE_APP_DEFINED, SOURCE_HARDCODED, PUNCTUATION_SUGGESTIONS


def test_converts_non_empty_entries_and_skips_the_rest():
    entries = [
        AppCompletion("alpha", label="A", position=0),
        None,
        AppCompletion(None),
        AppCompletion(""),
        SimpleNamespace(text="beta"),
        {"text": "gamma"},
        {"label": "no text"},
        "delta",
        "",
    ]
    out = from_app_completions(entries)
    assert [c.text for c in out] == ["alpha", "beta", "gamma", "delta"]
    for c in out:
        assert c.kind is Kind.APP_DEFINED
        assert c.score == MAX_SCORE
        assert c.source == SOURCE_APP_DEFINED


def test_empty_input_gives_empty_list():
    assert from_app_completions([]) == []
    assert from_app_completions([None, None]) == []


def test_app_completions_are_not_deduplicated_here():
    out = from_app_completions(["same", "same"])
    assert len(out) == 2


def test_punctuation_defaults_and_custom_symbols():
    default = punctuation_candidates()
    assert [c.text for c in default] == [s for s in PUNCTUATION_SUGGESTIONS if s]
    assert all(c.kind is Kind.HARDCODED and c.source == SOURCE_HARDCODED for c in default)

    custom = punctuation_candidates([".", "", "!"])
    assert [c.text for c in custom] == [".", "!"]
