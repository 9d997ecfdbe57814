# src/wordsuggest/models.py
"""
Data models for the suggestion core.

This module defines the small containers everything else works on:

- Kind: provenance tag of a candidate (typed word, correction, ...).
- Candidate: one scored suggestion with its source id.
- SuggestionSet: the immutable, ranked result of one input cycle.
- AppCompletion: a completion record handed over by the host application.

The ranking rules themselves live in dedup.py and compose.py; these classes
only hold data and answer simple questions about it.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, Iterable, Iterator, Optional, Tuple


class Kind(IntEnum):
    """Where a candidate came from. Never used for ranking."""
    TYPED = 0          # what the user typed
    CORRECTION = 1     # simple correction/suggestion
    COMPLETION = 2     # suggestion with appended chars
    WHITELIST = 3      # whitelisted word
    BLACKLIST = 4      # blacklisted word
    HARDCODED = 5      # hardcoded suggestion, e.g. punctuation
    APP_DEFINED = 6    # suggested by the application
    SHORTCUT = 7       # a shortcut

    @property
    def label(self) -> str:
        return self.name.lower()


@dataclass(frozen=True, slots=True)
class Candidate:
    """
    One scored text suggestion.

    Attributes
    ----------
    text : str
        The suggested word, exactly as it would be committed.
    score : int
        Higher is better. config.MAX_SCORE marks candidates that must never
        be displaced by a score comparison.
    kind : Kind
        Provenance tag.
    source : str
        Id of the dictionary (or other origin) that produced the candidate.
    code_point_count : int
        Derived from ``text`` once at construction.
    debug_info : str
        Diagnostic annotation; the only field that may change after
        construction (see set_debug_info). Ignored by equality.
    """
    text: str
    score: int
    kind: Kind
    source: str
    code_point_count: int = field(init=False)
    debug_info: str = field(default="", init=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "kind", Kind(self.kind))
        object.__setattr__(self, "code_point_count", len(self.text))

    def code_point_at(self, i: int) -> int:
        if not 0 <= i < self.code_point_count:
            raise IndexError(f"code point index {i} out of range for {self.text!r}")
        return ord(self.text[i])

    def set_debug_info(self, info: str) -> None:
        if not isinstance(info, str):
            raise ValueError(f"debug info must be a string, got {info!r}")
        object.__setattr__(self, "debug_info", info)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "score": self.score,
            "kind": self.kind.label,
            "source": self.source,
            "code_point_count": self.code_point_count,
            "debug_info": self.debug_info,
        }

    def __str__(self) -> str:
        if not self.debug_info:
            return self.text
        return f"{self.text} ({self.debug_info})"


@dataclass(frozen=True, slots=True)
class SuggestionSet:
    """
    Ranked suggestions for a single input-cycle update.

    Built once from the list the generation engine hands in and never
    changed afterwards; the next update replaces it. Index 0 is the best
    entry (usually the typed word).

    ``will_auto_correct`` is derived from the two auto-correction flags at
    construction and cannot be passed in.
    """
    candidates: Tuple[Candidate, ...] = ()
    typed_word_valid: bool = False
    has_auto_correction_candidate: bool = False
    is_punctuation_suggestions: bool = False
    is_obsolete: bool = False
    is_prediction: bool = False
    will_auto_correct: bool = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "candidates", tuple(self.candidates))
        object.__setattr__(
            self, "will_auto_correct",
            not self.typed_word_valid and self.has_auto_correction_candidate,
        )

    # ------------- access -------------

    def size(self) -> int:
        return len(self.candidates)

    def __len__(self) -> int:
        return len(self.candidates)

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self.candidates)

    def info(self, pos: int) -> Candidate:
        """Return the candidate at rank ``pos``; negative ranks are not allowed."""
        if not 0 <= pos < len(self.candidates):
            raise IndexError(f"suggestion rank {pos} out of range (size={len(self.candidates)})")
        return self.candidates[pos]

    def word(self, pos: int) -> str:
        return self.info(pos).text

    def __getitem__(self, pos: int) -> Candidate:
        return self.info(pos)

    def has_auto_correction_word(self) -> bool:
        # only meaningful with a distinct alternative and an unacceptable typed word
        return self.has_auto_correction_candidate and len(self.candidates) > 1 and not self.typed_word_valid

    # ------------- rendering -------------

    def to_dict(self) -> Dict[str, Any]:
        return {
            "typed_word_valid": self.typed_word_valid,
            "has_auto_correction_candidate": self.has_auto_correction_candidate,
            "will_auto_correct": self.will_auto_correct,
            "is_punctuation_suggestions": self.is_punctuation_suggestions,
            "is_obsolete": self.is_obsolete,
            "is_prediction": self.is_prediction,
            "size": len(self.candidates),
            "candidates": [c.to_dict() for c in self.candidates],
        }

    def __str__(self) -> str:
        words = ", ".join(str(c) for c in self.candidates)
        return (
            "SuggestionSet:"
            f" typed_word_valid={self.typed_word_valid}"
            f" has_auto_correction_candidate={self.has_auto_correction_candidate}"
            f" is_punctuation_suggestions={self.is_punctuation_suggestions}"
            f" words=[{words}]"
        )


# "no suggestions"
EMPTY = SuggestionSet()


@dataclass(frozen=True, slots=True)
class AppCompletion:
    """A completion offered by the host application (text may be missing)."""
    text: Optional[str]
    label: Optional[str] = None
    position: int = 0


def freeze(candidates: Iterable[Candidate], **flags: bool) -> SuggestionSet:
    """Wrap a working list into an immutable SuggestionSet."""
    return SuggestionSet(tuple(candidates), **flags)
