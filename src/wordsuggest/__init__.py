"""
Suggestion Core Module

Ranked, deduplicated word suggestions for an input method. The generation
engine (dictionaries, scoring) lives elsewhere and hands in scored
candidates; this package decides what the user finally sees:

- Candidate / SuggestionSet data models with an immutable EMPTY set
- Score-aware duplicate removal
- Merging a newly typed word into the previous suggestion set
- Conversion of application-defined completions and punctuation

Example Usage:
    from wordsuggest import Candidate, Kind, SuggestionEngine

    eng = SuggestionEngine()
    eng.update([
        Candidate("cat", 100, Kind.TYPED, "user-typed"),
        Candidate("car", 90, Kind.CORRECTION, "main"),
        Candidate("car", 95, Kind.CORRECTION, "user"),
    ], has_auto_correction_candidate=True)
    eng.retype("ca")

    for cand in eng.current:
        print(cand.score, cand)
"""

# src/wordsuggest/__init__.py
from .models import Kind, Candidate, SuggestionSet, AppCompletion, EMPTY  # re-export
from .dedup import remove_duplicates, deduplicated
from .compose import compose_with_previous
from .completions import from_app_completions, punctuation_candidates
from .engine import SuggestionEngine

__version__ = "1.0.0"
__all__ = [
    "Kind", "Candidate", "SuggestionSet", "AppCompletion", "EMPTY",
    "remove_duplicates", "deduplicated", "compose_with_previous",
    "from_app_completions", "punctuation_candidates", "SuggestionEngine",
]
