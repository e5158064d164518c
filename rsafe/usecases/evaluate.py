import logging
from typing import Iterable

from ..domain.rules import count_safe
from ..infra.text_io import read_lines
from .load_reports import parse_reports


logger = logging.getLogger(__name__)


def evaluate(lines: Iterable[str], tolerance: int = 0) -> int:
    """Count reports in ``lines`` that are safe at the given tolerance."""
    return count_safe(parse_reports(lines), tolerance)


def find_safe_reports(path: str, tolerance: int = 0) -> int:
    lines = read_lines(path)
    n = evaluate(lines, tolerance)
    logger.debug("%s: %d safe report(s) at tolerance %d", path, n, tolerance)
    return n
