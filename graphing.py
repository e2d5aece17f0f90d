"""
Graphing calculator core: plot window, sampling, value table, zoom/pan.

Every operation is a pure function of its inputs.  The plot window is an
immutable ``PlotDomain``; zoom/pan/reset return a new one.
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple

import numpy as np

import config as cfg
from errors import InvalidDomainError, InvalidFunctionError
from expression import compile_function

logger = logging.getLogger(__name__)


# ─── Data Classes ─────────────────────────────────────────────────────

@dataclass(frozen=True)
class PlotDomain:
    """Visible window of the graph."""

    x_min: float
    x_max: float
    y_min: float
    y_max: float

    def __post_init__(self) -> None:
        bounds = (self.x_min, self.x_max, self.y_min, self.y_max)
        if not all(math.isfinite(b) for b in bounds):
            raise InvalidDomainError("Plot bounds must be finite numbers",
                                     details={"bounds": bounds})
        if self.x_min >= self.x_max:
            raise InvalidDomainError("x min must be less than x max",
                                     details={"x_min": self.x_min, "x_max": self.x_max})
        if self.y_min >= self.y_max:
            raise InvalidDomainError("y min must be less than y max",
                                     details={"y_min": self.y_min, "y_max": self.y_max})
        # bounds near +/-1e308 are finite but their difference is not
        if not (math.isfinite(self.x_span) and math.isfinite(self.y_span)):
            raise InvalidDomainError("Plot window is too wide",
                                     details={"bounds": bounds})

    @classmethod
    def default(cls) -> "PlotDomain":
        return cls(*cfg.DEFAULT_X_RANGE, *cfg.DEFAULT_Y_RANGE)

    @property
    def x_span(self) -> float:
        return self.x_max - self.x_min

    @property
    def y_span(self) -> float:
        return self.y_max - self.y_min

    def contains_y(self, y: float) -> bool:
        return self.y_min <= y <= self.y_max


@dataclass(frozen=True)
class SamplePoint:
    """One sample of the curve; ``y`` is None where the curve breaks."""

    x: float
    y: Optional[float]


@dataclass(frozen=True)
class TableRow:
    x: float
    y: float


# ─── Sampling ────────────────────────────────────────────────────────

class Plot:
    """Lazy, restartable sequence of SamplePoints for one expression.

    Iterating twice re-evaluates from scratch; nothing is cached between
    passes.
    """

    def __init__(self, expr: str, domain: PlotDomain, resolution_px: int):
        if resolution_px < 2:
            raise ValueError("resolution_px must be at least 2")
        self.expr = expr
        self.domain = domain
        self.resolution_px = int(resolution_px)

    def __len__(self) -> int:
        return self.resolution_px

    def __iter__(self) -> Iterator[SamplePoint]:
        f = compile_function(self.expr)
        d = self.domain
        for x in np.linspace(d.x_min, d.x_max, self.resolution_px):
            x = float(x)
            y = f(x)
            if y is not None and not d.contains_y(y):
                y = None
            yield SamplePoint(x, y)


def plot(expr: str, domain: PlotDomain,
         resolution_px: int = cfg.DEFAULT_RESOLUTION) -> Plot:
    """Sample *expr* at *resolution_px* evenly spaced x across the domain.

    Points where the function is undefined or leaves ``[y_min, y_max]``
    come back with ``y=None`` and break the line.
    """
    return Plot(expr, domain, resolution_px)


def segments(points: Iterable[SamplePoint]) -> List[List[Tuple[float, float]]]:
    """Group consecutive defined points into line segments.

    A ``None`` sample ends the current segment; gaps are never bridged.
    """
    runs: List[List[Tuple[float, float]]] = []
    current: List[Tuple[float, float]] = []
    for p in points:
        if p.y is None:
            if current:
                runs.append(current)
                current = []
            continue
        current.append((p.x, p.y))
    if current:
        runs.append(current)
    return runs


def tabulate(expr: str, domain: PlotDomain,
             steps: int = cfg.TABLE_STEPS) -> List[TableRow]:
    """Value table with ``steps + 1`` evenly spaced rows, rounded for display.

    Undefined points are left out rather than shown as gaps.
    """
    if steps < 1:
        raise ValueError("steps must be at least 1")
    f = compile_function(expr)
    step = domain.x_span / steps
    rows: List[TableRow] = []
    for i in range(steps + 1):
        x = domain.x_min + i * step
        y = f(x)
        if y is None:
            continue
        rows.append(TableRow(round(x, cfg.TABLE_DECIMALS),
                             round(y, cfg.TABLE_DECIMALS)))
    return rows


def validate_function(expr: str) -> None:
    """Smoke-test *expr* at x=0 before plotting.

    Raises InvalidFunctionError when the value there is undefined and the
    text mentions the variable.  Functions undefined only at 0 (``1/x``)
    are rejected too; this is a heuristic, not a syntax check.
    """
    if not expr or not expr.strip():
        raise InvalidFunctionError("Please enter a function to plot")
    if compile_function(expr)(0.0) is None and cfg.VARIABLE in expr:
        logger.debug("Rejected expression %r: undefined at x=0", expr)
        raise InvalidFunctionError(
            "Invalid function. Please check your syntax.",
            details={"expression": expr},
        )


# ─── Zoom / pan ──────────────────────────────────────────────────────

def _scale_axis(lo: float, hi: float, factor: float) -> Tuple[float, float]:
    centre = (lo + hi) / 2
    half = (hi - lo) / 2 * factor
    if 2 * half < cfg.MIN_SPAN:
        logger.debug("Zoom blocked at span %.3g", hi - lo)
        return lo, hi
    return centre - half, centre + half


def _zoom(domain: PlotDomain, factor: float) -> PlotDomain:
    x_min, x_max = _scale_axis(domain.x_min, domain.x_max, factor)
    y_min, y_max = _scale_axis(domain.y_min, domain.y_max, factor)
    return PlotDomain(x_min, x_max, y_min, y_max)


def zoom_in(domain: PlotDomain) -> PlotDomain:
    """Shrink both spans about their centres; inverse of zoom_out."""
    return _zoom(domain, 1 / (1 + cfg.ZOOM_FACTOR))


def zoom_out(domain: PlotDomain) -> PlotDomain:
    """Widen both spans by 25% about their centres."""
    return _zoom(domain, 1 + cfg.ZOOM_FACTOR)


def pan(domain: PlotDomain, dx: float = 0.0, dy: float = 0.0) -> PlotDomain:
    """Shift the window by *dx*/*dy* fractions of the current spans."""
    sx = domain.x_span * dx
    sy = domain.y_span * dy
    return PlotDomain(domain.x_min + sx, domain.x_max + sx,
                      domain.y_min + sy, domain.y_max + sy)


def reset() -> PlotDomain:
    return PlotDomain.default()
