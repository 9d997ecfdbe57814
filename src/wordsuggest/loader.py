from __future__ import annotations
import json
import logging
from typing import Any, Dict, Iterable, List, Mapping, Tuple

from . import config as CFG
from .models import Candidate, Kind

log = logging.getLogger(__name__)

# Flags a candidate file (or request body) may carry next to its rows
FLAG_NAMES = ("typed_word_valid", "has_auto_correction_candidate", "is_prediction")

# Accepted aliases for kind names in addition to the enum names themselves
_KIND_ALIASES = {
    "whitelisted": Kind.WHITELIST,
    "blacklisted": Kind.BLACKLIST,
    "app": Kind.APP_DEFINED,
    "app-defined": Kind.APP_DEFINED,
}


def parse_kind(value: Any) -> Kind:
    """Kind from its name ("correction", "APP_DEFINED", "whitelisted") or int value."""
    if isinstance(value, Kind):
        return value
    if isinstance(value, int) and not isinstance(value, bool):
        try:
            return Kind(value)
        except ValueError:
            raise ValueError(f"unknown kind: {value!r}")
    if isinstance(value, str):
        key = value.strip().lower()
        if key in _KIND_ALIASES:
            return _KIND_ALIASES[key]
        try:
            return Kind[key.upper().replace("-", "_")]
        except KeyError:
            raise ValueError(f"unknown kind: {value!r}")
    raise ValueError(f"unknown kind: {value!r}")


def _parse_score(value: Any) -> int:
    if isinstance(value, str) and value.strip().lower() == "max":
        return CFG.MAX_SCORE
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"score must be an integer or 'max', got {value!r}")
    return value


def candidate_from_dict(row: Mapping[str, Any]) -> Candidate:
    """
    Parse one wire row: {"text", "score", "kind", "source"}.
    Only "text" is required; the rest fall back to config defaults.
    """
    if not isinstance(row, Mapping):
        raise ValueError(f"candidate row must be an object, got {type(row).__name__}")
    text = row.get("text")
    if not isinstance(text, str):
        raise ValueError("candidate row needs a string 'text'")
    source = row.get("source", CFG.DEFAULT_SOURCE)
    if not isinstance(source, str):
        raise ValueError(f"source must be a string, got {source!r}")
    return Candidate(
        text=text,
        score=_parse_score(row.get("score", 0)),
        kind=parse_kind(row.get("kind", CFG.DEFAULT_KIND)),
        source=source,
    )


def candidates_from_rows(rows: Iterable[Any]) -> List[Candidate]:
    out: List[Candidate] = []
    for i, row in enumerate(rows):
        try:
            out.append(candidate_from_dict(row))
        except ValueError as exc:
            raise ValueError(f"row {i}: {exc}") from exc
    return out


def parse_payload(payload: Any) -> Tuple[List[Candidate], Dict[str, bool]]:
    """
    Split a decoded JSON document into (candidates, flags).

    Either a bare list of rows or {"candidates": [...], <flag>: bool, ...}.
    """
    if isinstance(payload, list):
        return candidates_from_rows(payload), {}
    if not isinstance(payload, Mapping):
        raise ValueError("expected a list of candidates or an object with 'candidates'")
    rows = payload.get("candidates", [])
    if not isinstance(rows, list):
        raise ValueError("'candidates' must be a list")
    flags: Dict[str, bool] = {}
    for name in FLAG_NAMES:
        if name not in payload:
            continue
        if not isinstance(payload[name], bool):
            raise ValueError(f"'{name}' must be a boolean")
        flags[name] = payload[name]
    return candidates_from_rows(rows), flags


def load_json(path: str) -> Any:
    with open(path, "r", encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as exc:
            raise ValueError(f"{path}: invalid JSON ({exc})") from exc


def load_candidates(path: str) -> Tuple[List[Candidate], Dict[str, bool]]:
    """Read a UTF-8 JSON candidate file (see parse_payload for the shapes)."""
    cands, flags = parse_payload(load_json(path))
    log.info("Loaded %d candidates from %s", len(cands), path)
    return cands, flags
