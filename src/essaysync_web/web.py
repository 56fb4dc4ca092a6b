from __future__ import annotations
import argparse
import logging
from dataclasses import asdict

from flask import Flask, request, jsonify, Response

from essaysync import config as CFG
from essaysync.align import resolve_corresponding_handle
from essaysync.DB.api import DraftStore, make_store
from essaysync.drafts import clear_draft, get_draft, save_draft
from essaysync.engine import Comparison
from essaysync.sentences import split_sentences
from essaysync.submission import Submission, SubmissionError

app = Flask(__name__)
log = logging.getLogger(__name__)
_store: DraftStore | None = None


def _bad_request(msg: str):
    return jsonify({"error": msg}), 400


def _body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def _drafts() -> DraftStore:
    global _store
    if _store is None:
        _store = make_store(CFG.STORE_DSN)
    return _store

# ---------- API ----------
@app.get("/health")
def health():
    return jsonify({"ok": True})


@app.post("/api/split")
def api_split():
    text = _body().get("text", "")
    if not isinstance(text, str):
        return _bad_request("'text' must be a string")
    return jsonify([asdict(s) for s in split_sentences(text)])


@app.post("/api/resolve")
def api_resolve():
    data = _body()
    active = data.get("active")
    container = data.get("container_id")
    if not isinstance(container, str):
        return _bad_request("'container_id' must be a string")
    h = resolve_corresponding_handle(active, container, bool(data.get("active_on_original", True)))
    return jsonify({"handle": h.element_id if h else None})


@app.post("/api/compare")
def api_compare():
    data = _body()
    band = data.get("band")
    if band is not None and not isinstance(band, int):
        return _bad_request("'band' must be an integer")
    try:
        cmp = Comparison(Submission.from_dict(data.get("submission")), band=band)
    except (SubmissionError, ValueError) as exc:
        return _bad_request(str(exc))
    if data.get("hover"):
        cmp.hover(str(data["hover"]))
    return jsonify(cmp.to_dict())


@app.get("/api/draft")
def api_draft_get():
    d = get_draft(_drafts())
    return jsonify(asdict(d) if d else None)


@app.post("/api/draft")
def api_draft_save():
    data = _body()
    essay = data.get("essay")
    if not isinstance(essay, str):
        return _bad_request("'essay' must be a string")
    try:
        d = save_draft(
            _drafts(),
            essay=essay,
            topic_source=data.get("topic_source", "generated"),
            custom_topic=str(data.get("custom_topic", "")),
            topic=str(data.get("topic", "")),
            selected_topic_id=str(data.get("selected_topic_id", "")),
        )
    except ValueError as exc:
        return _bad_request(str(exc))
    return jsonify(asdict(d)), 201


@app.delete("/api/draft")
def api_draft_clear():
    clear_draft(_drafts())
    return jsonify({"ok": True})

# ---------- UI ----------
@app.get("/")
def home():
    # Two panels + minimal JS, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Essay comparison • Flask UI</title>
<style>
:root{
  --bg:#0b0f14;
  --panel:#0f141b;
  --ink:#cfd8e3;
  --muted:#8a94a6;
  --accent:#6ee7ff;
  --border:#1c2530;
}
*{box-sizing:border-box}
body{
  margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.55 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial;
}
.container{ max-width:1200px; margin:24px auto; padding:0 16px }
.card{
  background:var(--panel); border:1px solid var(--border);
  border-radius:16px; padding:18px; margin-bottom:16px;
}
h1{ font-size:20px; margin:0 0 8px 0 }
h2{ font-size:14px; margin:14px 0 6px 0; color:var(--muted); text-transform:uppercase; letter-spacing:.4px }
textarea{
  width:100%; min-height:120px; padding:10px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); font:13px ui-monospace,Menlo,Consolas,monospace;
}
.controls{ display:flex; gap:10px; margin-top:10px; flex-wrap:wrap }
.btn{
  padding:8px 14px; border-radius:10px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); cursor:pointer;
}
.btn.on{ border-color:var(--accent); color:var(--accent) }
.err{ display:none; margin-top:10px; color:#ffb0b0 }
.grid{ display:grid; grid-template-columns:1fr 1fr; gap:16px }
.s{
  display:inline; padding:2px 4px; border-radius:6px; color:#0b0f14; cursor:pointer;
  transition:background .2s;
}
.s.active{ color:#fff; font-weight:600 }
.empty{ color:var(--muted) }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Essay comparison</h1>
      <textarea id="sub" placeholder="Paste a submission JSON…"></textarea>
      <div class="controls" id="bands"><button id="go" class="btn">Compare</button></div>
      <div id="err" class="err"></div>
    </div>
    <div class="grid">
      <div class="card"><h1>Your essay</h1><div id="original" class="empty">Nothing yet.</div></div>
      <div class="card"><h1>Improved</h1><div id="improved" class="empty">Nothing yet.</div></div>
    </div>
  </div>

<script>
const $ = (sel) => document.querySelector(sel);
let band = null;

function esc(s){ return String(s).replace(/[&<>"]/g, c => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c])); }

function setActive(id, on){
  // highlight the sentence and whatever sits at the same position opposite; missing ids are a no-op
  const el = document.getElementById(id);
  if(!el) return;
  el.classList.toggle("active", on);
  el.style.background = on ? el.dataset.active : el.dataset.rest;
  const twin = document.getElementById(el.dataset.twin);
  if(twin){
    twin.classList.toggle("active", on);
    twin.style.background = on ? twin.dataset.active : twin.dataset.rest;
  }
}

function panel(side, p){
  if(!p.sentences.length) return `<p class="empty">—</p>`;
  return "<p>" + p.sentences.map(s => `<span class="s" tabindex="0" id="${esc(s.element_id)}"
    data-twin="${esc(s.counterpart_id)}" data-rest="${s.color}" data-active="${s.active_color}"
    style="background:${s.active ? s.active_color : s.color}">${esc(s.text)}</span>`).join(" ") + "</p>";
}

function render(data){
  const left = [], right = [];
  for(const p of data.paragraphs){
    left.push(`<h2>${esc(p.role)}</h2>` + panel("original", p.original));
    right.push(`<h2>${esc(p.role)}</h2>` + panel("improved", p.improved));
  }
  $("#original").className = ""; $("#original").innerHTML = left.join("");
  $("#improved").className = ""; $("#improved").innerHTML = right.join("");
  const bands = $("#bands");
  bands.querySelectorAll(".band").forEach(b => b.remove());
  for(const b of data.bands){
    const btn = document.createElement("button");
    btn.className = "btn band" + (b === data.band ? " on" : "");
    btn.textContent = `Band ${b}`;
    btn.onclick = () => { band = b; compare(); };
    bands.appendChild(btn);
  }
  document.querySelectorAll(".s").forEach(el => {
    el.addEventListener("mouseenter", () => setActive(el.id, true));
    el.addEventListener("mouseleave", () => setActive(el.id, false));
    el.addEventListener("focus", () => setActive(el.id, true));
    el.addEventListener("blur", () => setActive(el.id, false));
  });
}

async function compare(){
  const err = $("#err");
  err.style.display = "none";
  try{
    const submission = JSON.parse($("#sub").value);
    const resp = await fetch("/api/compare", {
      method:"POST", headers:{"Content-Type":"application/json"},
      body: JSON.stringify({submission, band})
    });
    const data = await resp.json();
    if(!resp.ok) throw new Error(data.error || `HTTP ${resp.status}`);
    render(data);
  }catch(e){
    err.style.display = "block";
    err.textContent = `Error: ${e.message ?? e}`;
  }
}

$("#go").addEventListener("click", () => { band = null; compare(); });
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")


def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI for side-by-side essay comparison")
    ap.add_argument("--db", dest="db", default=CFG.STORE_DSN)  # DSN: "sqlite:///path" or "memory://"
    ap.add_argument("--host", default=CFG.HOST)
    ap.add_argument("--port", type=int, default=CFG.PORT)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO)

    global _store
    _store = make_store(args.db)
    log.info("Draft store: %s", args.db)
    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _store.close()
        _store = None
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
