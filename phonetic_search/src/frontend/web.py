from __future__ import annotations
import argparse
from flask import Flask, request, jsonify, Response
from backend.engine import Engine
from backend.errors import EngineNotReady
from backend.config import DEFAULT_HOST, DEFAULT_PORT

app = Flask(__name__)
_engine: Engine | None = None

# ---------- API ----------
@app.get("/api/search")
def api_search():
    terms = [t for t in request.args.getlist("q", type=str) if t.strip()]
    if not terms:
        return jsonify([])
    if _engine is None:
        return jsonify({"error": "no name library loaded"}), 503
    try:
        rows = _engine.search_many(terms)
    except EngineNotReady as exc:
        return jsonify({"error": str(exc)}), 503
    return jsonify([r.to_dict() for r in rows])

@app.get("/api/library")
def api_library():
    return jsonify({"size": _engine.size if _engine else 0})

@app.get("/health")
def health():
    return jsonify({"ok": _engine is not None and _engine.library is not None,
                    "size": _engine.size if _engine else 0})

# ---------- UI ----------
@app.get("/")
def home():
    html = r"""
<!doctype html>
<html lang="en">
<head>
<meta charset="utf-8" />
<meta name="viewport" content="width=device-width,initial-scale=1" />
<title>Phonetic Search • Flask UI</title>
<style>
:root{
  --bg:#0b0f14; --panel:#0f141b; --ink:#cfd8e3; --muted:#8a94a6;
  --accent:#6ee7ff; --border:#1c2530;
}
*{box-sizing:border-box}
body{
  margin:0; background:var(--bg); color:var(--ink);
  font:16px/1.45 system-ui,-apple-system,Segoe UI,Roboto,Ubuntu,"Helvetica Neue",Arial;
}
.container{ max-width:780px; margin:24px auto; padding:0 16px }
.card{
  background:var(--panel); border:1px solid var(--border);
  border-radius:16px; padding:18px; box-shadow:0 10px 30px rgba(0,0,0,.25);
}
h1{ font-size:20px; margin:0 0 8px 0 }
input{
  width:100%; padding:12px 14px; border-radius:12px; border:1px solid var(--border);
  background:#0b1117; color:var(--ink); outline:none; font-size:16px;
}
input:focus{ border-color:var(--accent) }
.meta{ color:var(--muted); font-size:13px; margin-top:6px }
.row{ padding:10px 14px; border-top:1px solid var(--border) }
.term{ color:var(--accent); font-weight:600 }
.empty{ padding:24px; text-align:center; color:var(--muted) }
</style>
</head>
<body>
  <div class="container">
    <div class="card">
      <h1>Phonetic Search</h1>
      <input id="q" type="text" placeholder="Names separated by spaces…" autocomplete="off" autofocus />
      <div class="meta" id="stats">Ready.</div>
      <div id="out" class="empty">Type one or more names to search the library.</div>
    </div>
  </div>
<script>
const q = document.querySelector("#q"), out = document.querySelector("#out"), stats = document.querySelector("#stats");
let t;
function esc(s){ return String(s).replace(/[&<>"]/g, c => ({"&":"&amp;","<":"&lt;",">":"&gt;",'"':"&quot;"}[c])); }
async function search(){
  const terms = q.value.split(/\s+/).filter(Boolean);
  if(terms.length === 0){ out.className = "empty"; out.textContent = "Type one or more names to search the library."; return; }
  const qs = terms.map(x => "q=" + encodeURIComponent(x)).join("&");
  try{
    const resp = await fetch(`/api/search?${qs}`);
    if(!resp.ok) throw new Error(`HTTP ${resp.status}`);
    const data = await resp.json();
    stats.textContent = `Terms: ${data.length}`;
    out.className = "";
    out.innerHTML = data.map(r => {
      const body = r.error ? "Invalid search term." : (r.matches.length ? r.matches.map(esc).join(", ") : "No results found.");
      return `<div class="row"><span class="term">${esc(r.term)}:</span> ${body}</div>`;
    }).join("");
  }catch(e){
    stats.textContent = `Error: ${e.message ?? e}`;
  }
}
q.addEventListener("input", () => { clearTimeout(t); t = setTimeout(search, 150); });
</script>
</body>
</html>
"""
    return Response(html, mimetype="text/html")

def main(argv=None) -> int:
    ap = argparse.ArgumentParser(description="Run Flask UI on top of Engine")
    ap.add_argument("--names", nargs="+", required=True, help="Name files or folders of *.txt")
    ap.add_argument("--skip-invalid", action="store_true")
    ap.add_argument("--host", default=DEFAULT_HOST)
    ap.add_argument("--port", type=int, default=DEFAULT_PORT)
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    global _engine
    _engine = Engine()
    _engine.load_files(args.names, skip_invalid=args.skip_invalid, verbose=args.verbose)

    try:
        app.run(host=args.host, port=args.port, debug=args.verbose)
    finally:
        _engine.shutdown()
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
