# src/wordsuggest/dedup.py
"""
Duplicate removal over a scored candidate list.

Two candidates are duplicates when their text is identical (case-sensitive);
score, kind and source do not matter for identity. Of each group of
duplicates exactly one survives: the highest-scoring one, or the earliest
one when the top scores are equal. Survivors keep their relative order.
"""
from __future__ import annotations
import logging
from typing import Dict, Iterable, List

from .models import Candidate

log = logging.getLogger(__name__)


def _survivors(candidates: List[Candidate]) -> Dict[str, int]:
    """Map text -> index of the candidate that survives for that text."""
    best: Dict[str, int] = {}
    for i, cand in enumerate(candidates):
        j = best.get(cand.text)
        # strictly greater: on a tie the earlier index keeps its place
        if j is None or cand.score > candidates[j].score:
            best[cand.text] = i
    return best


def deduplicated(candidates: Iterable[Candidate]) -> List[Candidate]:
    """Return a new list with text duplicates removed (stable)."""
    items = list(candidates)
    if len(items) <= 1:
        return items
    best = _survivors(items)
    out: List[Candidate] = []
    for i, cand in enumerate(items):
        if best[cand.text] == i:
            out.append(cand)
        else:
            log.debug("dropping duplicate %r (score=%d, kept score=%d)",
                      cand.text, cand.score, items[best[cand.text]].score)
    return out


def remove_duplicates(candidates: List[Candidate]) -> None:
    """Remove text duplicates from ``candidates`` in place."""
    if len(candidates) <= 1:
        return
    kept = deduplicated(candidates)
    if len(kept) != len(candidates):
        candidates[:] = kept
