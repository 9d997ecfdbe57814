from __future__ import annotations
import argparse
import logging
from flask import Flask, request, jsonify, Response
from wordsuggest.engine import SuggestionEngine
from wordsuggest.loader import load_candidates, parse_payload
from wordsuggest import config as CFG

log = logging.getLogger(__name__)

app = Flask(__name__)
_engine: SuggestionEngine | None = None


def _get_engine() -> SuggestionEngine:
    global _engine
    if _engine is None:
        _engine = SuggestionEngine()
    return _engine


def _bad_request(msg: str):
    log.info("rejected request to %s: %s", request.path, msg)
    return jsonify({"error": msg}), 400


def _json_body(required: bool = True):
    body = request.get_json(silent=True)
    if body is None and not required:
        return {}
    if not isinstance(body, dict):
        raise ValueError("request body must be a JSON object")
    return body

# ---------- API ----------
@app.get("/health")
def health():
    return jsonify({"ok": True, "size": _get_engine().current.size()})

@app.get("/api/suggestions")
def api_current():
    return jsonify(_get_engine().current.to_dict())

@app.get("/api/suggestions/<int:pos>")
def api_candidate(pos: int):
    try:
        cand = _get_engine().current.info(pos)
    except IndexError as exc:
        return jsonify({"error": str(exc)}), 404
    return jsonify(cand.to_dict())

@app.post("/api/suggestions")
def api_update():
    body = request.get_json(silent=True)
    if body is None:
        return _bad_request("request body must be JSON")
    try:
        cands, flags = parse_payload(body)
    except ValueError as exc:
        return _bad_request(str(exc))
    return jsonify(_get_engine().update(cands, **flags).to_dict())

@app.post("/api/retype")
def api_retype():
    try:
        body = _json_body()
    except ValueError as exc:
        return _bad_request(str(exc))
    word = body.get("typed_word")
    if not isinstance(word, str) or not word:
        return _bad_request("'typed_word' must be a non-empty string")
    return jsonify(_get_engine().retype(word).to_dict())

@app.post("/api/completions")
def api_completions():
    try:
        body = _json_body()
    except ValueError as exc:
        return _bad_request(str(exc))
    entries = body.get("completions", [])
    if not isinstance(entries, list):
        return _bad_request("'completions' must be a list")
    return jsonify(_get_engine().show_app_completions(entries).to_dict())

@app.post("/api/punctuation")
def api_punctuation():
    try:
        body = _json_body(required=False)
    except ValueError as exc:
        return _bad_request(str(exc))
    symbols = body.get("symbols")
    if symbols is not None and not (isinstance(symbols, list) and all(isinstance(s, str) for s in symbols)):
        return _bad_request("'symbols' must be a list of strings")
    return jsonify(_get_engine().show_punctuation(symbols).to_dict())

@app.post("/api/clear")
def api_clear():
    return jsonify(_get_engine().clear().to_dict())

# ---------- UI ----------
@app.get("/")
def home():
    # Tiny page, no external deps: polls the current set and lets you retype.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Suggestions • Flask UI</title>
<style>
:root{ --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6; --accent:#6ee7ff; --border:#1c2530; }
*{box-sizing:border-box}
body{ margin:0; background:var(--bg); color:var(--ink); font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Arial; }
.container{ max-width:820px; margin:24px auto; padding:0 16px; }
.card{ background:var(--panel); border:1px solid var(--border); border-radius:16px; padding:18px; }
h1{ font-size:20px; margin:0 0 8px 0 }
input{ width:100%; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:16px; }
input:focus{ border-color:var(--accent) }
.flags{ color:var(--muted); font-size:13px; margin:8px 0 }
.strip{ display:flex; flex-wrap:wrap; gap:8px; margin-top:12px }
.chip{ padding:8px 12px; border:1px solid var(--border); border-radius:10px; background:#0b1117 }
.chip.typed{ border-color:var(--accent) }
.chip small{ color:var(--muted); margin-left:6px }
.empty{ color:var(--muted) }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Suggestions</h1>
      <input id="w" type="text" placeholder="Retype the current word…" autocomplete="off" autofocus />
      <div id="flags" class="flags">—</div>
      <div id="out" class="strip"><span class="empty">No suggestions.</span></div>
    </div>
  </div>
<script>
const w = document.querySelector("#w"), out = document.querySelector("#out"), flags = document.querySelector("#flags");
function esc(s){ return String(s).replace(/[&<>"]/g, c => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c])); }
function render(s){
  const on = ["typed_word_valid","will_auto_correct","is_punctuation_suggestions","is_obsolete","is_prediction"].filter(k => s[k]);
  flags.textContent = on.length ? on.join(" • ") : "no flags";
  if(!s.candidates.length){ out.innerHTML = '<span class="empty">No suggestions.</span>'; return; }
  out.innerHTML = s.candidates.map(c =>
    `<span class="chip ${c.kind}">${esc(c.text)}<small>${esc(c.kind)}</small></span>`).join("");
}
async function refresh(){ render(await (await fetch("/api/suggestions")).json()); }
let t;
w.addEventListener("input", () => {
  clearTimeout(t);
  t = setTimeout(async () => {
    if(!w.value){ return refresh(); }
    const resp = await fetch("/api/retype", {method:"POST", headers:{"Content-Type":"application/json"},
                                             body: JSON.stringify({typed_word: w.value})});
    render(await resp.json());
  }, 150);
});
refresh();
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of SuggestionEngine")
    ap.add_argument("--input", default=None, help="JSON file with scored candidates to start from")
    ap.add_argument("--host", default=CFG.WEB_HOST)
    ap.add_argument("--port", type=int, default=CFG.WEB_PORT)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = SuggestionEngine(verbose=args.verbose)
    if args.input:
        try:
            cands, flags = load_candidates(args.input)
        except (OSError, ValueError) as exc:
            ap.error(str(exc))
        _engine.update(cands, **flags)

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
