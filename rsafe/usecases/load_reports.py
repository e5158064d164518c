import logging
from dataclasses import dataclass
from typing import Iterable, List

from ..domain.types import Report, ReportSet
from ..shared.utils import try_parse_level, fmt_level
from .recompute_metrics import recompute, Metrics


logger = logging.getLogger(__name__)


@dataclass
class LoadResult:
    reports: ReportSet
    metrics: Metrics


def parse_report(line: str) -> Report:
    levels = []
    for token in (line or "").split():
        n = try_parse_level(token)
        if n is not None:
            levels.append(n)
    return Report(tuple(levels))


def parse_reports(lines: Iterable[str]) -> ReportSet:
    return [parse_report(line) for line in lines]


def matrix_to_lines(matrix: List[List[str]]) -> List[str]:
    return [" ".join(fmt_level(v) for v in row) for row in matrix]


def load_from_lines(lines: Iterable[str], tolerance: int = 0) -> LoadResult:
    reports = parse_reports(lines)
    empty = sum(1 for r in reports if not len(r))
    if empty:
        logger.debug("%d empty report(s) will be counted as unsafe", empty)
    metrics = recompute(reports, tolerance)
    logger.info("loaded %d report(s), %d safe at tolerance %d",
                metrics.total, metrics.passed, tolerance)
    return LoadResult(reports, metrics)


def load_from_matrix(matrix: List[List[str]], tolerance: int = 0) -> LoadResult:
    return load_from_lines(matrix_to_lines(matrix), tolerance)
