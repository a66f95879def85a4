from __future__ import annotations
import logging
from flask import Flask, request, jsonify, Response
from spellcore.channel import ScriptedChannel
from spellcore.config import TOP_K, DEFAULT_WEB_PORT
from spellcore.engine import Engine
from spellcore.errors import ValidationError
from spellcore.normalize import validate_word
from spellcore.suggest import suggestion_rows

app = Flask(__name__)
_engine: Engine | None = None

log = logging.getLogger(__name__)

# ---------- API ----------
@app.get("/api/health")
def api_health():
    return jsonify({"ok": True, "words": _engine.store.count()})  # type: ignore

@app.get("/api/suggest")
def api_suggest():
    w = request.args.get("w", "", type=str).strip()
    k = request.args.get("k", TOP_K, type=int)
    if not w:
        return jsonify([])
    try:
        validate_word(w)
    except ValidationError as e:
        return jsonify({"error": str(e)}), 400
    # never more slots than the interactive list offers
    k = max(1, min(k, TOP_K))
    ranked = _engine.suggest(w, top_k=k)  # type: ignore
    return jsonify(suggestion_rows(ranked))

@app.get("/api/contains")
def api_contains():
    w = request.args.get("w", "", type=str).strip().lower()
    return jsonify({"word": w, "present": bool(w) and _engine.contains(w)})  # type: ignore

@app.post("/api/correct")
def api_correct():
    """
    Non-interactive correction: the client sends the replies it would have
    typed, keyed by word. Unlisted words take the closest suggestion.
    """
    body = request.get_json(silent=True) or {}
    sentence = body.get("sentence", "")
    replies = body.get("replies") or {}
    if not isinstance(sentence, str) or not isinstance(replies, dict):
        return jsonify({"error": "expected {'sentence': str, 'replies': {word: reply}}"}), 400

    channel = ScriptedChannel(replies)
    try:
        report = _engine.correct(sentence, channel)  # type: ignore
    except ValidationError as e:
        return jsonify({"error": str(e)}), 400
    return jsonify({
        "input": report.original,
        "output": report.corrected,
        "outcomes": [
            {"position": r.position, "original": r.original, "word": r.word, "outcome": r.outcome.value}
            for r in report.resolutions
        ],
        "transcript": channel.transcript,
    })

# ---------- UI ----------
@app.get("/")
def home():
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<title>Text Analysis Server</title>
<style>
body{margin:0;background:#0b0f14;color:#cfd8e3;font:16px/1.45 system-ui,sans-serif}
.container{max-width:720px;margin:24px auto;padding:0 16px}
input{width:100%;padding:10px 12px;border-radius:10px;border:1px solid #1c2530;background:#0b1117;color:#cfd8e3}
.row{display:grid;grid-template-columns:3rem 1fr 6rem;padding:8px 12px;border-top:1px solid #1c2530}
.muted{color:#8a94a6}
</style>
</head>
<body>
  <div class="container">
    <h1>Text Analysis Server</h1>
    <input id="w" type="text" maxlength="29" placeholder="Type a word…" autocomplete="off" autofocus />
    <div id="out" class="muted">Closest dictionary words appear here.</div>
  </div>
<script>
const w = document.querySelector("#w"), out = document.querySelector("#out");
let t;
async function suggest(){
  const q = w.value.trim();
  if(!q){ out.textContent = "Closest dictionary words appear here."; return; }
  const resp = await fetch(`/api/suggest?w=${encodeURIComponent(q)}`);
  const rows = await resp.json();
  out.innerHTML = rows.map(r => `<div class="row"><div>${r.rank}</div><div>${r.word}</div><div class="muted">${r.distance ?? "inf"}</div></div>`).join("");
}
w.addEventListener("input", ()=>{ clearTimeout(t); t = setTimeout(suggest, 150); });
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def run(engine: Engine, host: str = "127.0.0.1", port: int = DEFAULT_WEB_PORT, *, debug: bool = False) -> None:
    """Serve the API with ``engine`` until interrupted."""
    global _engine
    _engine = engine
    log.info("Web API on http://%s:%d", host, port)
    app.run(host=host, port=port, debug=debug, threaded=True, use_reloader=False)
