from __future__ import annotations
import argparse
import logging
import os
from flask import Flask, request, jsonify, Response
from kmptrace import config as CFG
from kmptrace.engine import match

log = logging.getLogger(__name__)

# HTTP service defaults (KMP_TRACE_HOST / KMP_TRACE_PORT, then --host/--port)
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8080

def _env_host() -> str:
    return os.environ.get("KMP_TRACE_HOST") or DEFAULT_HOST

def _env_port() -> int:
    raw = os.environ.get("KMP_TRACE_PORT")
    if not raw:
        return DEFAULT_PORT
    try:
        return int(raw)
    except ValueError:
        log.warning("Ignoring invalid KMP_TRACE_PORT=%r, using %d", raw, DEFAULT_PORT)
        return DEFAULT_PORT

app = Flask(__name__)

# ---------- API ----------
@app.post("/kmp")
def api_kmp():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        log.warning("POST /kmp: body is not a JSON object")
        return jsonify({"error": "Bad request"}), 400
    text = data.get("text", "")
    pattern = data.get("pattern", "")
    if not isinstance(text, str) or not isinstance(pattern, str):
        log.warning("POST /kmp: text/pattern must be strings")
        return jsonify({"error": "Bad request"}), 400

    # /* ~~~ cap input size: each step carries a snapshot as long as the text ~~~ */
    if len(text) > CFG.MAX_TEXT_LENGTH:
        return jsonify({"error": f"Text is too long (max {CFG.MAX_TEXT_LENGTH} characters)"}), 413
    if len(pattern) > CFG.MAX_PATTERN_LENGTH:
        return jsonify({"error": f"Pattern is too long (max {CFG.MAX_PATTERN_LENGTH} characters)"}), 413

    result = match(text, pattern)
    if not result.ok:
        return jsonify(result.to_dict()), 400
    return jsonify(result.to_dict())

@app.get("/health")
def health():
    return jsonify({"ok": True})

# ---------- UI ----------
@app.get("/")
def home():
    # Single self-contained page: CSS variables + minimal JS, no external deps.
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>KMP Trace Visualizer</title>
<style>
:root{
  --bg:#0b0f14;
  --panel:#0f141b;
  --ink:#cfd8e3;
  --muted:#8a94a6;
  --accent:#6ee7ff;
  --accent-2:#22d3ee;
  --border:#1c2530;
  --danger:#ff5d5d;
  --ok:#45d483;
}
*{box-sizing:border-box}
body{
  margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial;
}
.container{ max-width:1100px; margin:24px auto; padding:0 16px; }
.card{
  background:var(--panel); border:1px solid var(--border);
  border-radius:16px; padding:18px; box-shadow:0 10px 30px rgba(0,0,0,.25);
}
h1{ font-size:20px; margin:0 0 8px 0; letter-spacing:.3px; }
.controls{ display:flex; gap:12px; align-items:center; margin:12px 0 4px 0; flex-wrap:wrap; }
.input{ flex:1; min-width:200px; }
.input input{
  width:100%; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:16px;
}
.input input:focus{ border-color:var(--accent) }
.btn{
  padding:10px 14px; border-radius:10px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); cursor:pointer;
}
.btn:hover{ border-color:var(--accent-2) }
.meta{ display:flex; justify-content:space-between; color:var(--muted); font-size:13px; margin-top:6px; }
.err{
  display:none; margin-top:12px; padding:10px 12px; border-radius:10px;
  background:rgba(255,93,93,.12); border:1px solid rgba(255,93,93,.35); color:#ffb0b0;
}
.grid{ margin-top:16px; overflow-x:auto; font-family: ui-monospace, Menlo, Consolas, monospace; }
.line{ display:flex; align-items:center; gap:2px; margin:2px 0 }
.lbl{ width:7rem; color:var(--muted); font-size:13px; flex:none }
.cell{
  width:2rem; height:2rem; display:inline-flex; align-items:center; justify-content:center;
  border:1px solid var(--border); border-radius:6px; flex:none;
}
.cell.blank{ border-color:transparent }
.cell.hl{ border-color:var(--accent); background:rgba(110,231,255,.15) }
.cell.ok{ background:rgba(69,212,131,.2); border-color:var(--ok) }
.cell.bad{ background:rgba(255,93,93,.2); border-color:var(--danger) }
.status{ margin-top:14px; padding:10px 12px; border-radius:10px; border:1px solid var(--border); min-height:2.6rem }
.small{ color:var(--muted); font-variant-numeric:tabular-nums; font-size:13px }
footer{ margin:26px 0 6px 0; color:var(--muted); font-size:12px; text-align:center; }
kbd{ background:#111825; border:1px solid var(--border); padding:1px 6px; border-radius:6px; color:var(--ink) }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>KMP Trace Visualizer</h1>
      <div class="controls">
        <div class="input"><input id="text" type="text" placeholder="Text…" value="ABABDABACDABABCABAB" /></div>
        <div class="input"><input id="pattern" type="text" placeholder="Pattern…" value="ABABCABAB" /></div>
        <button id="run" class="btn">Run</button>
      </div>
      <div class="controls">
        <button id="first" class="btn">&laquo;</button>
        <button id="prev" class="btn">&lsaquo; Prev</button>
        <button id="play" class="btn">Play</button>
        <button id="next" class="btn">Next &rsaquo;</button>
        <button id="last" class="btn">&raquo;</button>
        <span id="pos" class="small">—</span>
      </div>
      <div class="meta">
        <div id="stats">Ready.</div>
        <div>Tip: <kbd>&larr;</kbd>/<kbd>&rarr;</kbd> to step.</div>
      </div>
      <div id="err" class="err"></div>
      <div id="grid" class="grid"></div>
      <div id="status" class="status small">Enter a text and a pattern, then press Run.</div>
    </div>
    <footer>Built with Flask • Knuth-Morris-Pratt step-by-step trace</footer>
  </div>

<script>
const $ = (sel) => document.querySelector(sel);
const textIn = $("#text"), patIn = $("#pattern"), grid = $("#grid"), err = $("#err"),
      stats = $("#stats"), status = $("#status"), pos = $("#pos"), playBtn = $("#play");

let trace = null, text = "", pattern = "", cur = 0, timer = null;

function cell(ch, cls){ return `<span class="cell ${cls||""}">${ch === "" ? "&nbsp;" : escapeHtml(ch)}</span>`; }
function escapeHtml(s){ return String(s).replace(/[&<>"]/g, c => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c])); }
function line(label, cells){ return `<div class="line"><span class="lbl">${label}</span>${cells.join("")}</div>`; }

function render(){
  if(!trace || !trace.steps.length){ grid.innerHTML = ""; pos.textContent = "—"; return; }
  const s = trace.steps[cur];
  const offset = s.textIndex - s.patternIndex;
  const width = Math.max(text.length, offset + pattern.length);
  const idx = [], txt = [], pat = [], pre = [];
  for(let k = 0; k < width; k++){
    idx.push(cell(k < text.length ? String(k) : "", "blank"));
    let cls = "";
    if(k === s.highlightPrefixIndex) cls = s.match ? "ok" : (s.shift ? "hl" : "bad");
    if(s.highlightPrefixIndex === -1 && k >= offset && k <= s.textIndex) cls = "ok";
    txt.push(k < text.length ? cell(text[k], cls) : cell("", "blank"));
    const pk = k - offset;
    pat.push(pk >= 0 && pk < pattern.length ? cell(pattern[pk], pk === s.patternIndex ? "hl" : "") : cell("", "blank"));
    pre.push(k < text.length ? cell(String(s.prefixFunction[k]), k === s.highlightPrefixIndex ? "hl" : "") : cell("", "blank"));
  }
  // full_match consults failure[patternIndex]; mismatch consults failure[patternIndex - 1]
  const failIdx = s.failureValue === undefined ? -1 : (s.kind === "full_match" ? s.patternIndex : s.patternIndex - 1);
  const fail = trace.failureFunction.map((v, k) => cell(String(v), k === failIdx ? "hl" : ""));
  grid.innerHTML = line("index", idx) + line("text", txt) + line("pattern", pat)
                 + line("prefix", pre) + line("failure", fail);
  status.textContent = s.status;
  pos.textContent = `step ${cur + 1} / ${trace.steps.length} • comparisons ${s.comparisons}`;
}

function go(k){
  if(!trace) return;
  cur = Math.max(0, Math.min(trace.steps.length - 1, k));
  render();
}

function stop(){ clearInterval(timer); timer = null; playBtn.textContent = "Play"; }
function play(){
  if(timer){ stop(); return; }
  playBtn.textContent = "Pause";
  timer = setInterval(() => {
    if(!trace || cur >= trace.steps.length - 1){ stop(); return; }
    go(cur + 1);
  }, 700);
}

async function run(){
  stop();
  err.style.display = "none";
  text = textIn.value; pattern = patIn.value;
  try{
    const resp = await fetch("/kmp", {
      method: "POST", headers: {"Content-Type": "application/json"},
      body: JSON.stringify({text, pattern}),
    });
    const data = await resp.json();
    if(!resp.ok || data.error) throw new Error(data.error || `HTTP ${resp.status}`);
    trace = data; cur = 0;
    stats.textContent = data.found
      ? `Found at ${data.positions.join(", ")} • ${data.comparisons} comparisons`
      : `Not found • ${data.comparisons} comparisons`;
    render();
  }catch(e){
    trace = null; render();
    err.style.display = "block";
    err.textContent = `Error: ${e.message ?? e}`;
    stats.textContent = "Error.";
  }
}

$("#run").addEventListener("click", run);
$("#first").addEventListener("click", () => go(0));
$("#prev").addEventListener("click", () => go(cur - 1));
$("#next").addEventListener("click", () => go(cur + 1));
$("#last").addEventListener("click", () => go(trace ? trace.steps.length - 1 : 0));
playBtn.addEventListener("click", play);
window.addEventListener("keydown", (ev) => {
  if(ev.target.tagName === "INPUT"){ if(ev.key === "Enter") run(); return; }
  if(ev.key === "ArrowRight") go(cur + 1);
  else if(ev.key === "ArrowLeft") go(cur - 1);
});
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run the KMP trace web UI")
    ap.add_argument("--host", default=_env_host())
    ap.add_argument("--port", type=int, default=_env_port())
    ap.add_argument("--max-text", type=int, default=None, help="Override MAX_TEXT_LENGTH")
    ap.add_argument("--max-pattern", type=int, default=None, help="Override MAX_PATTERN_LENGTH")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.INFO)
    if args.max_text is not None:
        CFG.MAX_TEXT_LENGTH = int(args.max_text)
    if args.max_pattern is not None:
        CFG.MAX_PATTERN_LENGTH = int(args.max_pattern)

    log.info("Serving on http://%s:%d", args.host, args.port)
    app.run(host=args.host, port=args.port, debug=args.verbose)
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
