"""
Flask web application for the student finance calculators.

Single-file app using render_template_string.  Run via ``python main.py``
which starts the dev server on localhost:5000.  Widget state (plot window,
data set) travels in hidden form fields; nothing is kept server-side.
"""

from __future__ import annotations

import io
import logging
from typing import Any, Dict, Mapping, Optional

from flask import Flask, g, render_template_string, request, send_file, url_for

import config as cfg
import report
from assistant import AssistantChannel
from cli import fmt, idr_display_data, num, pct, stat_rows
from errors import CalculatorError, InvalidNumberError
from graphing import (
    PlotDomain,
    pan,
    plot,
    reset,
    tabulate,
    validate_function,
    zoom_in,
    zoom_out,
)
from idr import estimate, estimate_all, parse_idr_form
from scientific import FUNCTION_LABELS, ScientificCalculator
from stats import DataSet, parse_many

logger = logging.getLogger(__name__)

app = Flask(__name__)

# The Help page signals the assistant panel through this channel only.
assistant_channel = AssistantChannel("open-assistant")


@assistant_channel.connect
def _open_assistant_panel() -> None:
    g.assistant_open = True


# ═══════════════════════════════════════════════════════════════════
# Form parsing
# ═══════════════════════════════════════════════════════════════════

def _parse_float(form: Mapping[str, str], key: str, default: float) -> float:
    raw = str(form.get(key, "")).strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        raise InvalidNumberError(f"'{raw}' is not a valid number for {key.replace('_', ' ')}",
                                 details={key: raw}) from None


def parse_domain(form: Mapping[str, str]) -> PlotDomain:
    """Read the plot window; blank fields fall back to the defaults."""
    return PlotDomain(
        x_min=_parse_float(form, "x_min", cfg.DEFAULT_X_RANGE[0]),
        x_max=_parse_float(form, "x_max", cfg.DEFAULT_X_RANGE[1]),
        y_min=_parse_float(form, "y_min", cfg.DEFAULT_Y_RANGE[0]),
        y_max=_parse_float(form, "y_max", cfg.DEFAULT_Y_RANGE[1]),
    )


_DOMAIN_ACTIONS = {
    "zoom_in": zoom_in,
    "zoom_out": zoom_out,
    "reset": lambda d: reset(),
    "pan_left": lambda d: pan(d, dx=-cfg.PAN_FRACTION),
    "pan_right": lambda d: pan(d, dx=cfg.PAN_FRACTION),
    "pan_up": lambda d: pan(d, dy=cfg.PAN_FRACTION),
    "pan_down": lambda d: pan(d, dy=-cfg.PAN_FRACTION),
}


def apply_domain_action(action: str, domain: PlotDomain) -> PlotDomain:
    transform = _DOMAIN_ACTIONS.get(action)
    return transform(domain) if transform else domain


def parse_dataset(form: Mapping[str, str]) -> DataSet:
    """Rebuild the data set from its hidden field."""
    raw = str(form.get("values", "")).strip()
    return DataSet(parse_many(raw) if raw else [])


def serialize_values(data: DataSet) -> str:
    return ",".join(repr(v) for v in data.values)


# ═══════════════════════════════════════════════════════════════════
# HTML Template
# ═══════════════════════════════════════════════════════════════════

HTML_TEMPLATE = r"""
<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<meta name="viewport" content="width=device-width, initial-scale=1.0">
<title>{{ title }} | Student Finance Calculators</title>
<style>
  *{margin:0;padding:0;box-sizing:border-box}
  :root{
    --bg-deep:#050816;
    --bg-surface:rgba(15,23,42,0.55);
    --bg-input:rgba(8,11,22,0.85);
    --border-subtle:rgba(99,102,241,0.1);
    --border-hover:rgba(99,102,241,0.25);
    --text-primary:#f1f5f9;
    --text-secondary:#94a3b8;
    --indigo:#818cf8;
    --indigo-deep:#6366f1;
    --violet:#8b5cf6;
    --emerald:#34d399;
    --amber:#fbbf24;
    --radius-lg:16px;
    --radius-md:10px;
  }
  body{
    background:var(--bg-deep);color:var(--text-primary);
    font-family:'Inter',system-ui,-apple-system,sans-serif;
    line-height:1.6;min-height:100vh;
  }
  .container{max-width:1140px;margin:0 auto;padding:2rem 1.5rem}
  nav{display:flex;gap:1.2rem;justify-content:center;padding:1rem 0;font-size:.9rem}
  nav a{color:var(--text-secondary);text-decoration:none}
  nav a.active,nav a:hover{color:var(--indigo)}
  .hero{text-align:center;padding:1rem 0 2rem}
  .hero h1{
    font-size:clamp(1.5rem,4vw,2.3rem);font-weight:800;letter-spacing:-.035em;
    background:linear-gradient(135deg,#e2e8f0 0%,#818cf8 45%,#34d399 100%);
    -webkit-background-clip:text;-webkit-text-fill-color:transparent;background-clip:text;
  }
  .hero-sub{color:var(--text-secondary);margin-top:.5rem;font-size:.92rem}
  .card{
    background:var(--bg-surface);border:1px solid var(--border-subtle);
    border-radius:var(--radius-lg);padding:1.8rem;margin-bottom:1.4rem;
  }
  .card:hover{border-color:var(--border-hover)}
  h2{font-size:1.1rem;font-weight:700;margin-bottom:1rem}
  .form-grid{display:grid;grid-template-columns:repeat(auto-fill,minmax(200px,1fr));gap:1rem 1.5rem}
  .form-group{display:flex;flex-direction:column}
  .form-group label{font-size:.78rem;color:var(--text-secondary);margin-bottom:.3rem;font-weight:500}
  .form-group input,.form-group select{
    background:var(--bg-input);border:1px solid rgba(71,85,105,.35);border-radius:var(--radius-md);
    color:var(--text-primary);padding:.6rem .85rem;font-size:.88rem;font-family:inherit;
  }
  .btn-row{display:flex;flex-wrap:wrap;gap:.6rem;margin-top:1.2rem}
  .btn{
    display:inline-flex;align-items:center;justify-content:center;
    padding:.6rem 1.4rem;border:none;border-radius:var(--radius-md);
    font-size:.9rem;font-weight:600;cursor:pointer;font-family:inherit;text-decoration:none;
  }
  .btn-primary{background:linear-gradient(135deg,var(--indigo-deep),var(--violet));color:#fff}
  .btn-ghost{background:rgba(99,102,241,.08);color:var(--indigo);border:1px solid rgba(99,102,241,.2)}
  .btn-small{padding:.15rem .55rem;font-size:.75rem}
  .stat-row{display:flex;justify-content:space-between;padding:.45rem 0;border-bottom:1px solid rgba(51,65,85,.3)}
  .stat-row:last-child{border-bottom:none}
  .stat-label{color:var(--text-secondary);font-size:.86rem}
  .stat-value{font-weight:600;font-size:.86rem;font-variant-numeric:tabular-nums;color:var(--emerald)}
  .error{
    background:rgba(248,113,113,.08);border:1px solid rgba(248,113,113,.25);
    border-radius:var(--radius-md);padding:.75rem 1rem;margin-bottom:1.2rem;color:#fca5a5;font-size:.88rem;
  }
  .chips{display:flex;flex-wrap:wrap;gap:.4rem}
  .chip{background:rgba(99,102,241,.08);border:1px solid rgba(99,102,241,.18);border-radius:100px;padding:.2rem .4rem .2rem .8rem;font-size:.85rem}
  table{width:100%;border-collapse:collapse;font-size:.86rem;font-variant-numeric:tabular-nums}
  th,td{padding:.4rem .6rem;text-align:right;border-bottom:1px solid rgba(51,65,85,.3)}
  th{color:var(--text-secondary);font-weight:500}
  tr.selected td{color:var(--emerald);font-weight:600}
  .chart-img{width:100%;border-radius:var(--radius-md)}
  .tiles{display:grid;grid-template-columns:repeat(auto-fill,minmax(240px,1fr));gap:1rem}
  .tile{display:block;color:inherit;text-decoration:none}
  .tile p{color:var(--text-secondary);font-size:.86rem}
  .assistant{border-color:rgba(52,211,153,.35)}
  .footer{text-align:center;color:var(--text-secondary);font-size:.78rem;padding:2rem 0}
</style>
</head>
<body>
<div class="container">

<nav>
  <a href="/" class="{{ 'active' if page == 'home' }}">Home</a>
  <a href="/graphing" class="{{ 'active' if page == 'graphing' }}">Graphing</a>
  <a href="/scientific" class="{{ 'active' if page == 'scientific' }}">Scientific</a>
  <a href="/statistics" class="{{ 'active' if page == 'statistics' }}">Statistics</a>
  <a href="/idr" class="{{ 'active' if page == 'idr' }}">IDR Estimator</a>
  <a href="/help" class="{{ 'active' if page == 'help' }}">Help</a>
</nav>

<div class="hero">
  <h1>{{ title }}</h1>
  <p class="hero-sub">{{ subtitle }}</p>
</div>

{% if error %}<div class="error">{{ error }}</div>{% endif %}

{% if page == 'home' %}
<div class="tiles">
  <a class="card tile" href="/graphing"><h2>Graphing Calculator</h2><p>Plot functions of x, zoom and pan, and read off a value table.</p></a>
  <a class="card tile" href="/scientific"><h2>Scientific Calculator</h2><p>Trig, logs, powers and factorials, in radians or degrees.</p></a>
  <a class="card tile" href="/statistics"><h2>Statistics Calculator</h2><p>Mean, median, mode, spread and quartiles for your data.</p></a>
  <a class="card tile" href="/idr"><h2>IDR Payment Estimator</h2><p>Estimate income-driven repayment under SAVE, PAYE, REPAYE, IBR and ICR.</p></a>
</div>

{% elif page == 'graphing' %}
<form method="post" action="/graphing" class="card">
  <h2>Function</h2>
  <div class="form-grid">
    <div class="form-group" style="grid-column:1/-1">
      <label for="expr">f(x) =</label>
      <input id="expr" name="expr" value="{{ expr }}" placeholder="sin(x)+x^2">
    </div>
    <div class="form-group"><label>x min</label><input name="x_min" value="{{ num(domain.x_min, 6) }}"></div>
    <div class="form-group"><label>x max</label><input name="x_max" value="{{ num(domain.x_max, 6) }}"></div>
    <div class="form-group"><label>y min</label><input name="y_min" value="{{ num(domain.y_min, 6) }}"></div>
    <div class="form-group"><label>y max</label><input name="y_max" value="{{ num(domain.y_max, 6) }}"></div>
  </div>
  <div class="btn-row">
    <button class="btn btn-primary" name="action" value="plot">Plot</button>
    <button class="btn btn-ghost" name="action" value="zoom_in">Zoom in</button>
    <button class="btn btn-ghost" name="action" value="zoom_out">Zoom out</button>
    <button class="btn btn-ghost" name="action" value="pan_left">&larr;</button>
    <button class="btn btn-ghost" name="action" value="pan_right">&rarr;</button>
    <button class="btn btn-ghost" name="action" value="pan_up">&uarr;</button>
    <button class="btn btn-ghost" name="action" value="pan_down">&darr;</button>
    <button class="btn btn-ghost" name="action" value="reset">Reset view</button>
  </div>
</form>
{% if chart %}
<div class="card">
  <img class="chart-img" src="data:image/png;base64,{{ chart }}" alt="Graph of {{ expr }}">
  <div class="btn-row"><a class="btn btn-ghost" href="{{ download_url }}">Download PNG</a></div>
</div>
<div class="card">
  <h2>Value table</h2>
  {% if table %}
  <table>
    <tr><th>x</th><th>y</th></tr>
    {% for row in table %}<tr><td>{{ num(row.x) }}</td><td>{{ num(row.y) }}</td></tr>{% endfor %}
  </table>
  {% else %}<p class="stat-label">The function is undefined across this range.</p>{% endif %}
</div>
{% endif %}

{% elif page == 'scientific' %}
<form method="post" action="/scientific" class="card">
  <input type="hidden" name="angle" value="{{ 'rad' if calc.radians else 'deg' }}">
  {% for h in calc.history %}<input type="hidden" name="history" value="{{ h }}">{% endfor %}
  <div class="form-group">
    <label for="display">Calculation</label>
    <input id="display" name="display" value="{{ calc.display }}" placeholder="2^10 / (1 + sqrt(2))" autocomplete="off">
  </div>
  <div class="btn-row">
    <button class="btn btn-primary" name="action" value="calculate">=</button>
    {% for name, label in function_labels.items() %}<button class="btn btn-ghost" name="action" value="fn:{{ name }}">{{ label }}</button>{% endfor %}
  </div>
  <div class="btn-row">
    <button class="btn btn-ghost" name="action" value="toggle_angle">Mode: {{ 'Radians' if calc.radians else 'Degrees' }}</button>
    <button class="btn btn-ghost" name="action" value="clear">Clear</button>
    <button class="btn btn-ghost" name="action" value="clear_history">Clear history</button>
  </div>
</form>
{% if calc.history %}
<div class="card">
  <h2>History</h2>
  {% for h in calc.history|reverse %}<div class="stat-row"><span class="stat-value">{{ h }}</span></div>{% endfor %}
</div>
{% endif %}

{% elif page == 'statistics' %}
<form method="post" action="/statistics" class="card">
  <input type="hidden" name="values" value="{{ serialized }}">
  <h2>Your data ({{ values|length }})</h2>
  <div class="form-grid">
    <div class="form-group"><label for="entry">Add a number</label><input id="entry" name="entry" placeholder="42"></div>
    <div class="form-group"><label for="batch">Add many (comma or space separated)</label><input id="batch" name="batch" placeholder="1, 2, 3"></div>
  </div>
  <div class="btn-row">
    <button class="btn btn-ghost" name="action" value="add_one">Add</button>
    <button class="btn btn-ghost" name="action" value="add_many">Add all</button>
    <button class="btn btn-primary" name="action" value="calculate">Calculate</button>
    <button class="btn btn-ghost" name="action" value="clear">Clear</button>
  </div>
  {% if values %}
  <div class="chips" style="margin-top:1.2rem">
    {% for v in values %}
    <span class="chip">{{ num(v) }} <button class="btn btn-ghost btn-small" name="action" value="remove:{{ loop.index0 }}" aria-label="Remove">&times;</button></span>
    {% endfor %}
  </div>
  {% endif %}
</form>
{% if result %}
<div class="card">
  <h2>Results</h2>
  {% for label, value in rows %}
  <div class="stat-row"><span class="stat-label">{{ label }}</span><span class="stat-value">{{ value }}</span></div>
  {% endfor %}
</div>
{% if chart %}<div class="card"><img class="chart-img" src="data:image/png;base64,{{ chart }}" alt="Distribution"></div>{% endif %}
{% endif %}

{% elif page == 'idr' %}
<form method="post" action="/idr" class="card">
  <h2>Your details</h2>
  <div class="form-grid">
    <div class="form-group"><label for="balance">Total federal loan balance</label><input id="balance" name="balance" value="{{ form.get('balance', '') }}" placeholder="$50,000"></div>
    <div class="form-group"><label for="income">Annual income (AGI)</label><input id="income" name="income" value="{{ form.get('income', '') }}" placeholder="$45,000"></div>
    <div class="form-group"><label for="family_size">Family size</label><input id="family_size" name="family_size" value="{{ form.get('family_size', '1') }}"></div>
    <div class="form-group"><label for="state">State</label>
      <select id="state" name="state">
        <option value="">Select...</option>
        {% for s in states %}<option value="{{ s }}" {{ 'selected' if form.get('state') == s }}>{{ s }}</option>{% endfor %}
      </select>
    </div>
    <div class="form-group"><label for="plan">Repayment plan</label>
      <select id="plan" name="plan">
        {% for p, name in plan_names.items() %}<option value="{{ p }}" {{ 'selected' if form.get('plan', 'SAVE') == p }}>{{ p }} ({{ name }})</option>{% endfor %}
      </select>
    </div>
  </div>
  <div class="btn-row"><button class="btn btn-primary">Estimate payment</button></div>
</form>
{% if d %}
<div class="card">
  <h2>{{ d.plan }}: {{ fmt(d.monthly, 2) }}/month</h2>
  <div class="stat-row"><span class="stat-label">Poverty guideline</span><span class="stat-value">{{ fmt(d.guideline) }}</span></div>
  <div class="stat-row"><span class="stat-label">150% of guideline</span><span class="stat-value">{{ fmt(d.threshold) }}</span></div>
  <div class="stat-row"><span class="stat-label">Discretionary income</span><span class="stat-value">{{ fmt(d.discretionary) }}</span></div>
  <div class="stat-row"><span class="stat-label">Share of discretionary income</span><span class="stat-value">{{ pct(d.rate) }}</span></div>
  <div class="stat-row"><span class="stat-label">Annual payment</span><span class="stat-value">{{ fmt(d.annual, 2) }}</span></div>
</div>
<div class="card">
  <h2>All plans</h2>
  <table>
    <tr><th>Plan</th><th>Monthly</th><th>Annual</th></tr>
    {% for e in estimates.values() %}
    <tr class="{{ 'selected' if e.plan == d.plan }}"><td>{{ e.plan }}</td><td>{{ fmt(e.monthly_payment, 2) }}</td><td>{{ fmt(e.annual_payment, 2) }}</td></tr>
    {% endfor %}
  </table>
  <p class="stat-label" style="margin-top:.8rem">Lowest payment: {{ d.cheapest_plan }} at {{ fmt(d.cheapest_monthly, 2) }}/month.</p>
</div>
{% if chart %}<div class="card"><img class="chart-img" src="data:image/png;base64,{{ chart }}" alt="Plan comparison"></div>{% endif %}
{% endif %}

{% elif page == 'help' %}
<div class="card">
  <h2>Need a hand?</h2>
  <p class="stat-label">Our assistant can walk you through any of the calculators.</p>
  <form method="post" action="/help/assistant" class="btn-row">
    <button class="btn btn-primary">Ask the assistant</button>
  </form>
</div>
{% if assistant_open %}
<div class="card assistant" id="assistant-panel">
  <h2>Assistant</h2>
  <p class="stat-label">Hi! What can I help you with today?</p>
</div>
{% endif %}
{% endif %}

<div class="footer">Estimates only &middot; not financial advice</div>
</div>
</body>
</html>
"""


def _render(page: str, title: str, subtitle: str = "", **context: Any) -> str:
    return render_template_string(
        HTML_TEMPLATE,
        page=page,
        title=title,
        subtitle=subtitle,
        error=context.pop("error", None),
        fmt=fmt,
        num=num,
        pct=pct,
        **context,
    )


# ═══════════════════════════════════════════════════════════════════
# Routes
# ═══════════════════════════════════════════════════════════════════

@app.route("/")
def index():
    return _render("home", "Student Finance Calculators",
                   "Quick, private calculators for students and graduates")


@app.route("/graphing", methods=["GET", "POST"])
def graphing():
    subtitle = "Graph functions and analyze mathematical relationships"
    if request.method == "GET":
        return _render("graphing", "Graphing Calculator", subtitle,
                       expr="", domain=PlotDomain.default(), chart=None)

    form = request.form.to_dict()
    expr = form.get("expr", "").strip()
    action = form.get("action", "plot")

    try:
        domain = apply_domain_action(action, parse_domain(form))
    except CalculatorError as exc:
        logger.info("Rejected plot window: %s", exc)
        return _render("graphing", "Graphing Calculator", subtitle,
                       expr=expr, domain=PlotDomain.default(), chart=None,
                       error=exc.message)

    if not expr and action != "plot":
        return _render("graphing", "Graphing Calculator", subtitle,
                       expr=expr, domain=domain, chart=None)

    try:
        validate_function(expr)
    except CalculatorError as exc:
        return _render("graphing", "Graphing Calculator", subtitle,
                       expr=expr, domain=domain, chart=None, error=exc.message)

    logger.info("Plotting %r over x=[%g, %g]", expr, domain.x_min, domain.x_max)
    chart = report.render(report.graph_chart(expr, domain, plot(expr, domain)))
    download_url = url_for("download_plot", expr=expr,
                           x_min=domain.x_min, x_max=domain.x_max,
                           y_min=domain.y_min, y_max=domain.y_max)
    return _render("graphing", "Graphing Calculator", subtitle,
                   expr=expr, domain=domain, chart=chart,
                   table=tabulate(expr, domain), download_url=download_url)


@app.route("/graphing/plot.png")
def download_plot():
    args = request.args.to_dict()
    expr = args.get("expr", "").strip()
    try:
        domain = parse_domain(args)
        validate_function(expr)
    except CalculatorError as exc:
        return exc.message, 400

    png = report.render_png(report.graph_chart(expr, domain, plot(expr, domain)))
    return send_file(io.BytesIO(png), mimetype="image/png",
                     as_attachment=True, download_name="graph.png")


@app.route("/scientific", methods=["GET", "POST"])
def scientific():
    subtitle = "Trigonometry, logarithms, powers and factorials"
    calc = ScientificCalculator(
        display=request.form.get("display", "").strip(),
        radians=request.form.get("angle", "rad") != "deg",
        history=request.form.getlist("history"),
    )
    action = request.form.get("action", "")
    error: Optional[str] = None

    try:
        if action == "calculate":
            calc.evaluate()
        elif action.startswith("fn:"):
            calc.apply(action.split(":", 1)[1])
        elif action == "toggle_angle":
            calc.toggle_angle_mode()
        elif action == "clear":
            calc.clear()
        elif action == "clear_history":
            calc.clear_history()
    except CalculatorError as exc:
        logger.info("Rejected calculation %r: %s", calc.display, exc)
        error = exc.message

    return _render("scientific", "Scientific Calculator", subtitle,
                   calc=calc, function_labels=FUNCTION_LABELS, error=error)


@app.route("/statistics", methods=["GET", "POST"])
def statistics():
    subtitle = "Calculate descriptive statistics for your data"
    form = request.form.to_dict() if request.method == "POST" else {}
    action = form.get("action", "")
    error: Optional[str] = None
    result = None
    chart = None

    try:
        data = parse_dataset(form)
    except CalculatorError as exc:
        data = DataSet()
        error = exc.message

    if error is None:
        try:
            if action == "add_one":
                data.add_one(form.get("entry", ""))
            elif action == "add_many":
                data.add_many(form.get("batch", ""))
            elif action.startswith("remove:"):
                data.remove(int(action.split(":", 1)[1]))
            elif action == "clear":
                data.clear()
            elif action == "calculate":
                result = data.calculate()
                logger.info("Computed statistics for %d values", result.count)
        except CalculatorError as exc:
            error = exc.message
        except (IndexError, ValueError):
            error = "That value is no longer in the list"

    if result is not None:
        chart = report.render(report.stats_chart(data.values, result))

    return _render("statistics", "Statistics Calculator", subtitle,
                   values=data.values, serialized=serialize_values(data),
                   result=result, rows=stat_rows(result) if result else [],
                   chart=chart, error=error)


@app.route("/idr", methods=["GET", "POST"])
def idr_estimator():
    subtitle = "Estimate your monthly payment under income-driven repayment"
    context: Dict[str, Any] = {
        "states": cfg.US_STATES,
        "plan_names": cfg.IDR_PLAN_NAMES,
        "d": None,
        "chart": None,
    }
    if request.method == "GET":
        return _render("idr", "IDR Payment Estimator", subtitle, form={}, **context)

    form = request.form.to_dict()
    try:
        inputs = parse_idr_form(form)
        monthly = estimate(inputs.balance, inputs.annual_income,
                           inputs.family_size, inputs.plan)
        estimates = estimate_all(inputs.balance, inputs.annual_income,
                                 inputs.family_size)
    except CalculatorError as exc:
        logger.info("Rejected IDR form: %s", exc)
        return _render("idr", "IDR Payment Estimator", subtitle,
                       form=form, error=exc.message, **context)

    logger.info("IDR estimate %s: %.2f/month", inputs.plan, monthly)
    context.update(
        d=idr_display_data(estimates, inputs.plan),
        estimates=estimates,
        chart=report.render(report.idr_chart(estimates, inputs.plan)),
    )
    return _render("idr", "IDR Payment Estimator", subtitle, form=form, **context)


@app.route("/help")
def help_page():
    return _render("help", "Help Center", "Answers and guidance for every calculator",
                   assistant_open=False)


@app.route("/help/assistant", methods=["POST"])
def open_assistant():
    assistant_channel.emit()
    return _render("help", "Help Center", "Answers and guidance for every calculator",
                   assistant_open=g.get("assistant_open", False))


# ═══════════════════════════════════════════════════════════════════
# Entry point
# ═══════════════════════════════════════════════════════════════════

def run_web(debug: bool = False, open_browser: bool = True) -> None:
    """Start the Flask development server and open browser."""
    import webbrowser
    import threading

    url = f"http://{cfg.HOST}:{cfg.PORT}"
    logger.info("Starting web app at %s", url)
    if open_browser:
        threading.Timer(1.0, lambda: webbrowser.open(url)).start()
    app.run(host=cfg.HOST, port=cfg.PORT, debug=debug)


if __name__ == "__main__":
    run_web()
