"""
Nutrition / wellness score for a single health entry.

Each recognised lab or lifestyle value is mapped to a sub-score between 0 and 1
using fixed clinical bands for pregnant women, and the final score is the
average of the present sub-scores scaled to 0-100.
"""
import math
from fractions import Fraction

# metric -> (slightly low band, normal band, slightly high band, else score)
# low band is [lo, hi), normal is [lo, hi], high band is (lo, hi]
SCORE_BANDS = {
    "hemoglobinLevel": ((10.0, 11.0, 0.7), (11.0, 15.0), (15.0, 16.0, 0.8), 0.3),
    "bloodSugar":      ((60, 70, 0.7),     (70, 100),    (100, 120, 0.8),   0.3),
    "bmi":             ((17.0, 18.5, 0.6), (18.5, 24.9), (24.9, 29.9, 0.7), 0.4),
    "vitaminD":        ((20, 30, 0.6),     (30, 100),    (100, 150, 0.8),   0.3),
    "calcium":         ((8.0, 8.5, 0.6),   (8.5, 10.5),  (10.5, 11.0, 0.8), 0.3),
    "serumFerritin":   ((10, 15, 0.6),     (15, 150),    (150, 200, 0.8),   0.3),
    "waterIntake":     ((2.0, 2.5, 0.7),   (2.5, 3.5),   (3.5, 4.0, 0.9),   0.4),
    "sleepHours":      ((6, 7, 0.7),       (7, 9),       (9, 10, 0.8),      0.4),
}

SCORED_METRICS = tuple(SCORE_BANDS)


def sub_score(metric: str, value: float) -> float:
    """Return the 0-1 sub-score of one metric value."""
    low, normal, high, other = SCORE_BANDS[metric]
    if normal[0] <= value <= normal[1]:
        return 1.0
    if low[0] <= value < low[1]:
        return low[2]
    if high[0] < value <= high[1]:
        return high[2]
    return other


def extract_measurements(entry) -> dict:
    """
    Pull the scored metrics out of a health entry document.

    Serum ferritin is stored nested under ironLevels; a flat serumFerritin key
    is accepted as well. Keys that are missing or None are left out.
    """
    if not entry:
        return {}
    measurements = {}
    for metric in SCORED_METRICS:
        value = entry.get(metric)
        if value is None and metric == "serumFerritin":
            value = (entry.get("ironLevels") or {}).get("serumFerritin")
        if value is not None:
            measurements[metric] = value
    return measurements


def score_breakdown(measurements) -> dict:
    return {
        metric: sub_score(metric, measurements[metric])
        for metric in SCORED_METRICS
        if measurements.get(metric) is not None
    }


def round_half_up(value) -> int:
    """Round to the nearest integer, halves up; exact for Fraction input."""
    return int(math.floor(Fraction(value) + Fraction(1, 2)))


def compute_health_score(measurements) -> int:
    """
    Average the present sub-scores and scale to a whole number in [0, 100].

    An empty measurement set scores 0. Halves round up (46.5 -> 47).
    Sub-scores are tenths, so the mean is taken as an exact fraction.
    """
    breakdown = score_breakdown(measurements or {})
    if not breakdown:
        return 0
    total = sum(Fraction(str(s)) for s in breakdown.values())
    return round_half_up(total * 100 / len(breakdown))
