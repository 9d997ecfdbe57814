# src/wordsuggest/engine.py
from __future__ import annotations

import os
import logging
from typing import Any, Iterable, Optional

from . import config as CFG
from .models import Candidate, SuggestionSet, EMPTY, freeze
from .dedup import remove_duplicates
from .compose import compose_with_previous
from .completions import from_app_completions, punctuation_candidates

log = logging.getLogger(__name__)


class SuggestionEngine:
    """
    Thin orchestration layer that holds the suggestion set of one input
    session and applies the core rules per input cycle:
      - update(candidates, ...):  dedup -> freeze -> current
      - retype(word):             compose with current -> obsolete set
      - show_app_completions(..): app completions -> current
      - show_punctuation(..):     hardcoded punctuation strip -> current
      - clear():                  back to EMPTY

    Candidates arrive already scored; the engine never scores or searches.
    """

    # ------------- lifecycle -------------

    def __init__(self, *, verbose: bool = False) -> None:
        if verbose or CFG.VERBOSE:
            logging.basicConfig(level=logging.INFO)
            os.environ[CFG.VERBOSE_ENV] = "1"
        self._current: SuggestionSet = EMPTY

    @property
    def current(self) -> SuggestionSet:
        return self._current

    # ------------- input cycle -------------

    # /* ~~~ Freeze a fresh list from the generation engine ~~~ */
    def update(
        self,
        candidates: Iterable[Candidate],
        *,
        typed_word_valid: bool = False,
        has_auto_correction_candidate: bool = False,
        is_prediction: bool = False,
    ) -> SuggestionSet:
        working = list(candidates)
        before = len(working)
        remove_duplicates(working)
        self._current = freeze(
            working,
            typed_word_valid=typed_word_valid,
            has_auto_correction_candidate=has_auto_correction_candidate,
            is_prediction=is_prediction,
        )
        log.info("update(): %d candidates -> %d (will_auto_correct=%s)",
                 before, len(working), self._current.will_auto_correct)
        return self._current

    # /* ~~~ User edited the word: keep old suggestions behind the new typed word ~~~ */
    def retype(self, typed_word: str) -> SuggestionSet:
        composed = compose_with_previous(typed_word, self._current)
        self._current = freeze(composed, is_obsolete=True)
        log.info("retype(%r): %d suggestions carried forward", typed_word, len(composed) - 1)
        return self._current

    def show_app_completions(self, completions: Iterable[Any]) -> SuggestionSet:
        self._current = freeze(from_app_completions(completions))
        log.info("show_app_completions(): %d completions", self._current.size())
        return self._current

    def show_punctuation(self, symbols: Optional[Iterable[str]] = None) -> SuggestionSet:
        self._current = freeze(punctuation_candidates(symbols), is_punctuation_suggestions=True)
        log.info("show_punctuation(): %d symbols", self._current.size())
        return self._current

    def clear(self) -> SuggestionSet:
        self._current = EMPTY
        return self._current

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self._current = EMPTY
        log.info("Engine shutdown complete")
