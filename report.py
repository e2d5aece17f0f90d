"""
Chart rendering for the calculators.

Provides:
  - Function graph for the graphing calculator (graph_chart)
  - Histogram + box plot for the statistics calculator (stats_chart)
  - Plan comparison bars for the IDR estimator (idr_chart)
  - PNG / base64 conversion shared by the web app and CLI
"""

from __future__ import annotations

import base64
import io
from typing import Dict, Iterable, Optional, Sequence

import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
from matplotlib.ticker import FuncFormatter
import numpy as np

from graphing import PlotDomain, SamplePoint, segments
from idr import IDREstimate
from stats import StatResult

# ═══════════════════════════════════════════════════════════════════
# Style constants
# ═══════════════════════════════════════════════════════════════════

BG = "#0a101f"
CARD = "#131b2e"
TEXT = "#f1f5f9"
TEXT2 = "#cbd5e1"
INDIGO = "#818cf8"
EMERALD = "#34d399"
AMBER = "#fbbf24"
SLATE = "#94a3b8"
BORDER = "#1e293b"
INDIGO_DEEP = "#6366f1"
EMERALD_DEEP = "#10b981"

WEB_W, WEB_H = 10, 7


# ═══════════════════════════════════════════════════════════════════
# Axis formatters
# ═══════════════════════════════════════════════════════════════════

def _usd_fmt(x, _):
    if abs(x) >= 1e6:
        return f"${x / 1e6:.1f}M"
    if abs(x) >= 1e3:
        return f"${x / 1e3:.1f}k"
    return f"${x:.0f}"


USD_FMT = FuncFormatter(_usd_fmt)


# ═══════════════════════════════════════════════════════════════════
# Style helpers
# ═══════════════════════════════════════════════════════════════════

def _style(fig, *axes):
    """Apply dark theme to figure and all axes."""
    fig.patch.set_facecolor(BG)
    for ax in axes:
        ax.set_facecolor(CARD)
        ax.tick_params(colors=TEXT, labelsize=8)
        ax.xaxis.label.set_color(TEXT)
        ax.yaxis.label.set_color(TEXT)
        ax.title.set_color(TEXT)
        for spine in ax.spines.values():
            spine.set_color(BORDER)
        ax.grid(True, alpha=0.15, color=SLATE)


def _legend(ax, loc="upper left"):
    ax.legend(loc=loc, fontsize=8, facecolor=CARD, edgecolor=BORDER, labelcolor=TEXT)


# ═══════════════════════════════════════════════════════════════════
# Graphing calculator
# ═══════════════════════════════════════════════════════════════════

def graph_chart(expr: str, domain: PlotDomain, points: Iterable[SamplePoint],
                figsize=(WEB_W, WEB_H)) -> plt.Figure:
    """Plot the sampled curve; gaps in *points* stay unconnected."""
    fig, ax = plt.subplots(figsize=figsize, constrained_layout=True)
    _style(fig, ax)

    ax.set_xlim(domain.x_min, domain.x_max)
    ax.set_ylim(domain.y_min, domain.y_max)

    # Axes through the origin when visible
    if domain.y_min <= 0 <= domain.y_max:
        ax.axhline(0, color=SLATE, linewidth=1.0, alpha=0.6)
    if domain.x_min <= 0 <= domain.x_max:
        ax.axvline(0, color=SLATE, linewidth=1.0, alpha=0.6)

    runs = segments(points)
    for i, run in enumerate(runs):
        xs, ys = zip(*run)
        ax.plot(xs, ys, color=INDIGO, linewidth=2.2, solid_capstyle="round",
                label=f"y = {expr}" if i == 0 else None)

    if runs:
        _legend(ax)
    else:
        ax.annotate(
            "No visible points in this window",
            xy=(0.5, 0.5), xycoords="axes fraction",
            fontsize=11, color=AMBER, ha="center", fontweight="bold",
        )

    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_title(f"y = {expr}", fontsize=13, pad=12)
    return fig


# ═══════════════════════════════════════════════════════════════════
# Statistics calculator
# ═══════════════════════════════════════════════════════════════════

def _kde_curve(data: np.ndarray, xs: np.ndarray) -> Optional[np.ndarray]:
    """Gaussian KDE over *xs*, or None when the data cannot support one."""
    from scipy.stats import gaussian_kde

    if len(data) < 3 or np.ptp(data) == 0:
        return None
    try:
        return gaussian_kde(data)(xs)
    except np.linalg.LinAlgError:
        return None


def stats_chart(values: Sequence[float], result: StatResult,
                figsize=(WEB_W, WEB_H)) -> plt.Figure:
    """Histogram (with density overlay) above a nearest-rank box plot."""
    fig = plt.figure(figsize=figsize, constrained_layout=True)
    gs = fig.add_gridspec(2, 1, height_ratios=[3, 1])
    ax_hist = fig.add_subplot(gs[0])
    ax_box = fig.add_subplot(gs[1], sharex=ax_hist)
    _style(fig, ax_hist, ax_box)

    data = np.asarray(values, dtype=float)
    margin = result.range * 0.05 if result.range > 0 else 1.0
    lo, hi = result.min - margin, result.max + margin
    bins = np.linspace(lo, hi, min(30, max(5, result.count)) + 1)

    ax_hist.hist(data, bins=bins, color=INDIGO, alpha=0.35, density=True,
                 edgecolor=INDIGO_DEEP, linewidth=0.5)
    xs = np.linspace(lo, hi, 300)
    density = _kde_curve(data, xs)
    if density is not None:
        ax_hist.plot(xs, density, color=INDIGO, linewidth=2.2, label="Density")

    ax_hist.axvline(result.mean, color=EMERALD, linewidth=1.4, linestyle="--",
                    label=f"Mean {result.mean:,.2f}")
    ax_hist.axvline(result.median, color=AMBER, linewidth=1.4, linestyle="--",
                    label=f"Median {result.median:,.2f}")
    ax_hist.set_yticks([])
    ax_hist.set_title(f"Distribution of {result.count} values", fontsize=13, pad=12)
    _legend(ax_hist, loc="upper right")

    # Drawn from our own quartiles so the box matches the table
    box = {
        "med": result.median,
        "q1": result.q1,
        "q3": result.q3,
        "whislo": result.min,
        "whishi": result.max,
        "fliers": [],
    }
    ax_box.bxp([box], orientation="horizontal", widths=0.6, patch_artist=True,
               boxprops=dict(facecolor=INDIGO_DEEP, edgecolor=INDIGO, alpha=0.5),
               medianprops=dict(color=AMBER, linewidth=2),
               whiskerprops=dict(color=SLATE), capprops=dict(color=SLATE))
    ax_box.set_yticks([])
    ax_box.set_xlabel("Value")
    return fig


# ═══════════════════════════════════════════════════════════════════
# IDR estimator
# ═══════════════════════════════════════════════════════════════════

def idr_chart(estimates: Dict[str, IDREstimate], selected: Optional[str] = None,
              figsize=(WEB_W, WEB_H - 2)) -> plt.Figure:
    """Monthly payment under each plan, the chosen plan highlighted."""
    fig, ax = plt.subplots(figsize=figsize, constrained_layout=True)
    _style(fig, ax)

    plans = list(estimates)
    payments = [estimates[p].monthly_payment for p in plans]
    colors = [EMERALD if p == selected else INDIGO for p in plans]
    edges = [EMERALD_DEEP if p == selected else INDIGO_DEEP for p in plans]

    x = np.arange(len(plans))
    ax.bar(x, payments, 0.6, color=colors, edgecolor=edges, linewidth=0.5)
    for xi, pay in zip(x, payments):
        ax.annotate(f"${pay:,.0f}", xy=(xi, pay), xytext=(0, 4),
                    textcoords="offset points", ha="center",
                    fontsize=9, color=TEXT2, fontweight="bold")

    ax.set_xticks(x)
    ax.set_xticklabels(plans, fontsize=9)
    ax.yaxis.set_major_formatter(USD_FMT)
    ax.set_ylabel("Estimated Monthly Payment")
    ax.set_title("Monthly Payment by Repayment Plan", fontsize=13, pad=12)
    return fig


# ═══════════════════════════════════════════════════════════════════
# Public API
# ═══════════════════════════════════════════════════════════════════

def figure_to_png(fig: plt.Figure) -> bytes:
    """Render a matplotlib figure to PNG bytes."""
    buf = io.BytesIO()
    fig.savefig(buf, format="png", facecolor=fig.get_facecolor(),
                dpi=150, bbox_inches="tight")
    data = buf.getvalue()
    buf.close()
    return data


def figure_to_base64(fig: plt.Figure) -> str:
    """Convert a matplotlib figure to a base64-encoded PNG string."""
    return base64.b64encode(figure_to_png(fig)).decode()


def render(fig: plt.Figure) -> str:
    """Base64-encode *fig* for an <img> tag and release it."""
    try:
        return figure_to_base64(fig)
    finally:
        plt.close(fig)


def save_png(fig: plt.Figure, path: str) -> str:
    """Write *fig* to *path* as PNG and release it. Returns the path."""
    try:
        with open(path, "wb") as fh:
            fh.write(figure_to_png(fig))
    finally:
        plt.close(fig)
    return path


def render_png(fig: plt.Figure) -> bytes:
    """PNG bytes for a download response; releases the figure."""
    try:
        return figure_to_png(fig)
    finally:
        plt.close(fig)
