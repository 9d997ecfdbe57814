import json
from pathlib import Path
import pytest
from wordsuggest.__main__ import main


def _seed(tmp: Path) -> str:
    p = tmp / "cands.json"
    p.write_text(json.dumps({
        "has_auto_correction_candidate": True,
        "candidates": [
            {"text": "cat", "score": "max", "kind": "typed", "source": "user-typed"},
            {"text": "car", "score": 90, "kind": "correction", "source": "main"},
            {"text": "car", "score": 95, "kind": "correction", "source": "user"},
        ],
    }), encoding="utf-8")
    return str(p)


@pytest.mark.e2e
def test_cli_dedups_input_and_emits_json(tmp_path: Path, capsys):
    path = _seed(tmp_path)
    assert main(["--input", path, "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert [c["text"] for c in data["candidates"]] == ["cat", "car"]
    assert data["candidates"][1]["score"] == 95
    assert data["will_auto_correct"] is True


@pytest.mark.e2e
def test_cli_retype_composes_with_input(tmp_path: Path, capsys):
    path = _seed(tmp_path)
    assert main(["--input", path, "--retype", "ca", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert [c["text"] for c in data["candidates"]] == ["ca", "car"]
    assert data["candidates"][0]["kind"] == "typed"
    assert data["is_obsolete"] is True


@pytest.mark.e2e
def test_cli_table_output(tmp_path: Path, capsys):
    path = _seed(tmp_path)
    assert main(["--input", path]) == 0
    out = capsys.readouterr().out
    assert "will_auto_correct" in out
    assert "MAX" in out and "car" in out


@pytest.mark.e2e
def test_cli_completions_file(tmp_path: Path, capsys):
    p = tmp_path / "comp.json"
    p.write_text(json.dumps(["Regards,", None, {"text": ""}, {"text": "Thanks!"}]), encoding="utf-8")
    assert main(["--completions", str(p), "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert [c["text"] for c in data["candidates"]] == ["Regards,", "Thanks!"]
    assert {c["kind"] for c in data["candidates"]} == {"app_defined"}


@pytest.mark.e2e
def test_cli_bad_input_exits_2(tmp_path: Path, capsys):
    p = tmp_path / "bad.json"
    p.write_text(json.dumps([{"text": "ok"}, {"kind": "typed"}]), encoding="utf-8")
    assert main(["--input", str(p)]) == 2
    assert "row 1" in capsys.readouterr().err


@pytest.mark.e2e
def test_cli_missing_file_exits_2(tmp_path: Path, capsys):
    assert main(["--input", str(tmp_path / "nope.json")]) == 2
    assert "error:" in capsys.readouterr().err


@pytest.mark.e2e
def test_cli_repl(tmp_path: Path, capsys, monkeypatch):
    path = _seed(tmp_path)
    lines = iter(["c", ":clear", "x", ""])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    assert main(["--input", path, "--json", "--repl"]) == 0
    out = capsys.readouterr().out
    assert "(cleared)" in out
    assert '"text": "x"' in out


@pytest.mark.e2e
def test_cli_punctuation_strip(capsys):
    assert main(["--punctuation", "--json"]) == 0
    data = json.loads(capsys.readouterr().out)
    assert data["is_punctuation_suggestions"] is True
    assert data["size"] > 0
    assert {c["kind"] for c in data["candidates"]} == {"hardcoded"}


@pytest.mark.e2e
def test_cli_repl_strips_typed_lines(capsys, monkeypatch):
    lines = iter(["  hi  ", "   "])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    assert main(["--json", "--repl"]) == 0
    out = capsys.readouterr().out
    assert '"text": "hi"' in out
    assert '"text": "  hi  "' not in out


@pytest.mark.e2e
def test_cli_non_boolean_flag_exits_2(tmp_path: Path, capsys):
    p = tmp_path / "flags.json"
    p.write_text(json.dumps({"typed_word_valid": "false", "candidates": [{"text": "a"}]}), encoding="utf-8")
    assert main(["--input", str(p)]) == 2
    assert "must be a boolean" in capsys.readouterr().err
