"""Safety rule for reports.

A report is safe when its levels move in one direction only (the direction
of the first pair) and every step is between MIN_STEP and MAX_STEP. With a
tolerance of N the report is also safe when some order-preserving selection
of ``len(report) - N`` levels is safe.
"""
from itertools import combinations
from typing import Iterable, Iterator, Optional, Sequence, Tuple

from .types import Assessment, Report, Trend, Verdict
from ..shared.constants import MIN_STEP, MAX_STEP


def trend_of(values: Sequence[int]) -> Optional[Trend]:
    if len(values) < 2:
        return None
    return Trend.ASCENDING if values[0] < values[1] else Trend.DESCENDING


def is_step_ok(a: int, b: int, trend: Trend) -> bool:
    if not MIN_STEP <= abs(a - b) <= MAX_STEP:
        return False
    return b > a if trend is Trend.ASCENDING else b < a


def is_safe(report: Report) -> bool:
    values = report.values
    trend = trend_of(values)
    if trend is None:
        return True
    for a, b in zip(values, values[1:]):
        if not is_step_ok(a, b, trend):
            return False
    return True


def _check_tolerance(tolerance: int):
    if tolerance < 0:
        raise ValueError(f"tolerance must be >= 0, got {tolerance}")


def _candidates(report: Report, tolerance: int):
    size = max(len(report) - tolerance, 0)
    for kept in combinations(range(len(report)), size):
        yield kept, report.select(kept)


def iter_candidates(report: Report, tolerance: int) -> Iterator[Tuple[Tuple[int, ...], Report]]:
    """Yield every selection of ``len(report) - tolerance`` levels.

    Selections keep the original order and are produced lazily in
    lexicographic order of their indices. There are C(n, n - tolerance) of
    them, so the cost grows quickly with the tolerance; reports are short
    in practice. A tolerance at or above the report length yields the empty
    selection once.
    """
    _check_tolerance(tolerance)
    return _candidates(report, tolerance)


def _find_safe_selection(report: Report, tolerance: int) -> Optional[Tuple[int, ...]]:
    for kept, candidate in _candidates(report, tolerance):
        if is_safe(candidate):
            return kept
    return None


def find_safe_selection(report: Report, tolerance: int) -> Optional[Tuple[int, ...]]:
    _check_tolerance(tolerance)
    return _find_safe_selection(report, tolerance)


def _safe_with_tolerance(report: Report, tolerance: int) -> bool:
    # пустой отчёт опасен при любом допуске, хотя is_safe(пустой) == True
    if not len(report):
        return False
    if tolerance == 0:
        return is_safe(report)
    return _find_safe_selection(report, tolerance) is not None


def is_safe_with_tolerance(report: Report, tolerance: int) -> bool:
    _check_tolerance(tolerance)
    return _safe_with_tolerance(report, tolerance)


def assess(report: Report, tolerance: int) -> Assessment:
    _check_tolerance(tolerance)
    if not len(report):
        return Assessment(report, Verdict.UNSAFE)
    if is_safe(report):
        return Assessment(report, Verdict.SAFE, tuple(range(len(report))))
    if tolerance == 0:
        return Assessment(report, Verdict.UNSAFE)
    kept = _find_safe_selection(report, tolerance)
    if kept is None:
        return Assessment(report, Verdict.UNSAFE)
    return Assessment(report, Verdict.TOLERATED, kept)


def classify(report: Report, tolerance: int) -> Verdict:
    return assess(report, tolerance).verdict


def count_safe(reports: Iterable[Report], tolerance: int = 0) -> int:
    _check_tolerance(tolerance)
    return sum(1 for report in reports if _safe_with_tolerance(report, tolerance))
