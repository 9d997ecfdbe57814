# src/wordsuggest/completions.py
"""
Candidates the core creates without a dictionary: completions supplied by
the host application and the hardcoded punctuation strip.
"""
from __future__ import annotations
import logging
from typing import Any, Iterable, List, Mapping, Optional

from . import config as CFG
from .models import Candidate, Kind

log = logging.getLogger(__name__)


def _completion_text(entry: Any) -> Optional[str]:
    """Text of one host completion record, whatever shape it arrived in."""
    if entry is None:
        return None
    if isinstance(entry, str):
        return entry
    if isinstance(entry, Mapping):
        text = entry.get("text")
    else:
        text = getattr(entry, "text", None)
    return None if text is None else str(text)


def from_app_completions(completions: Iterable[Any]) -> List[Candidate]:
    """
    Convert application-defined completions to candidates.

    Entries may be AppCompletion objects, anything with a ``text``
    attribute, mappings with a "text" key or bare strings. Missing entries
    and entries without text are skipped.
    """
    out: List[Candidate] = []
    skipped = 0
    for entry in completions:
        text = _completion_text(entry)
        if not text:
            skipped += 1
            continue
        out.append(Candidate(text, CFG.MAX_SCORE, Kind.APP_DEFINED, CFG.SOURCE_APP_DEFINED))
    if skipped:
        log.debug("skipped %d empty app completions", skipped)
    return out


def punctuation_candidates(symbols: Optional[Iterable[str]] = None) -> List[Candidate]:
    if symbols is None:
        symbols = CFG.PUNCTUATION_SUGGESTIONS
    return [Candidate(s, CFG.MAX_SCORE, Kind.HARDCODED, CFG.SOURCE_HARDCODED) for s in symbols if s]
