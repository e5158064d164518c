from dataclasses import dataclass

from ..domain.types import ReportSet
from .recompute_metrics import recompute, Metrics


@dataclass
class ToleranceUpdatePatch:
    tolerance: int
    display_text: str
    metrics: Metrics


def format_tolerance(tolerance: int) -> str:
    return f"Допуск: {tolerance} (удалений)" if tolerance else "Допуск: 0 (строго)"


def update_tolerance(reports: ReportSet, tolerance: int) -> ToleranceUpdatePatch:
    if tolerance < 0:
        raise ValueError(f"tolerance must be >= 0, got {tolerance}")
    metrics = recompute(reports, tolerance)
    return ToleranceUpdatePatch(tolerance, format_tolerance(tolerance), metrics)
