# src/wordsuggest/compose.py
from __future__ import annotations
import logging
from typing import List, Set

from .config import MAX_SCORE, SOURCE_USER_TYPED
from .models import Candidate, Kind, SuggestionSet

log = logging.getLogger(__name__)


def typed_candidate(typed_word: str) -> Candidate:
    return Candidate(typed_word, MAX_SCORE, Kind.TYPED, SOURCE_USER_TYPED)


def compose_with_previous(typed_word: str, previous: SuggestionSet) -> List[Candidate]:
    """
    Replace the stale head of ``previous`` with what the user typed now.

    Rank 0 of the previous set (the word typed back then) is dropped; the
    rest is carried forward in order, skipping any text already seen. The
    seen-set starts with the new typed word, so it always owns rank 0.
    No score comparison happens here, it is a plain membership filter.
    """
    out: List[Candidate] = [typed_candidate(typed_word)]
    seen: Set[str] = {typed_word}
    for pos in range(1, previous.size()):
        prev = previous.info(pos)
        if prev.text in seen:
            continue
        out.append(prev)
        seen.add(prev.text)
    log.debug("composed %r with %d previous suggestions -> %d",
              typed_word, previous.size(), len(out))
    return out
