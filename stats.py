"""
Descriptive statistics engine for the statistics calculator.

``compute_stats`` works on a sorted copy of the input.  Two conventions
are kept deliberately for output compatibility with the site:

  - variance is the *population* variance (divide by n, not n-1)
  - quartiles use nearest rank: ``sorted[n // 4]`` and ``sorted[3n // 4]``
    with no interpolation between ranks
"""

from __future__ import annotations

import logging
import math
import re
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import numpy as np

from errors import EmptyDataError, NotANumberError

logger = logging.getLogger(__name__)

_SEPARATORS = re.compile(r"[,\s]+")


@dataclass(frozen=True)
class StatResult:
    """Snapshot of every measure for one data set."""

    mean: float
    median: float
    mode: Tuple[float, ...]   # empty when no value repeats
    variance: float           # population variance
    std_dev: float
    min: float
    max: float
    range: float
    sum: float
    count: int
    q1: float
    q3: float
    iqr: float


def compute_stats(values: Sequence[float]) -> StatResult:
    """Compute central tendency and dispersion for *values*.

    Raises EmptyDataError when *values* is empty.
    """
    if len(values) == 0:
        raise EmptyDataError("Please add at least one number")

    data = np.sort(np.asarray(values, dtype=float))
    n = len(data)

    total = float(data.sum())
    mean = total / n

    mid = n // 2
    if n % 2 == 0:
        median = float((data[mid - 1] + data[mid]) / 2)
    else:
        median = float(data[mid])

    uniq, counts = np.unique(data, return_counts=True)
    top = int(counts.max())
    mode = tuple(float(v) for v in uniq[counts == top]) if top > 1 else ()

    lo, hi = float(data[0]), float(data[-1])
    if lo == hi:
        # identical values: keep float noise out of the deviations
        variance = 0.0
    else:
        variance = float(np.mean((data - mean) ** 2))

    q1 = float(data[n // 4])
    q3 = float(data[(3 * n) // 4])

    return StatResult(
        mean=mean,
        median=median,
        mode=mode,
        variance=variance,
        std_dev=math.sqrt(variance),
        min=lo,
        max=hi,
        range=hi - lo,
        sum=total,
        count=n,
        q1=q1,
        q3=q3,
        iqr=q3 - q1,
    )


# ─── Input parsing ───────────────────────────────────────────────────

def parse_number(text: str) -> float:
    """Parse one entry; NaN and infinities are rejected."""
    raw = text.strip()
    try:
        value = float(raw)
    except ValueError:
        raise NotANumberError(f"'{raw}' is not a number",
                              details={"token": raw}) from None
    if not math.isfinite(value):
        raise NotANumberError(f"'{raw}' is not a number", details={"token": raw})
    return value


def parse_many(text: str) -> List[float]:
    """Split on commas/whitespace and parse every token.

    All-or-nothing: the first bad token raises and nothing is returned.
    """
    tokens = [t for t in _SEPARATORS.split(text.strip()) if t]
    if not tokens:
        raise NotANumberError("Please enter some numbers", details={"text": text})
    return [parse_number(t) for t in tokens]


# ─── Data set ────────────────────────────────────────────────────────

class DataSet:
    """Values entered by the user, in insertion order.

    Statistics always run on a sorted copy; insertion order is kept only
    for display.
    """

    def __init__(self, values: Optional[Sequence[float]] = None):
        self._values: List[float] = list(values or [])
        self._result: Optional[StatResult] = None

    @property
    def values(self) -> List[float]:
        return list(self._values)

    @property
    def result(self) -> Optional[StatResult]:
        return self._result

    def __len__(self) -> int:
        return len(self._values)

    def add_one(self, text: str) -> float:
        value = parse_number(text)
        self._values.append(value)
        return value

    def add_many(self, text: str) -> List[float]:
        parsed = parse_many(text)
        self._values.extend(parsed)
        logger.debug("Added %d values", len(parsed))
        return parsed

    def remove(self, index: int) -> float:
        if not 0 <= index < len(self._values):
            raise IndexError(f"No value at position {index}")
        return self._values.pop(index)

    def clear(self) -> None:
        self._values.clear()
        self._result = None

    def calculate(self) -> StatResult:
        self._result = compute_stats(self._values)
        return self._result
