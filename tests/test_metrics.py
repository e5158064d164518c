import pytest

from rsafe.domain.types import Verdict
from rsafe.usecases.load_reports import parse_reports
from rsafe.usecases.recompute_metrics import recompute
from rsafe.usecases.update_tolerance import update_tolerance, format_tolerance


def test_recompute_splits_verdicts(sample_lines):
    m = recompute(parse_reports(sample_lines), 1)
    assert (m.total, m.safe, m.tolerated, m.unsafe) == (6, 2, 2, 2)
    assert [a.verdict for a in m.assessments] == [
        Verdict.SAFE, Verdict.UNSAFE, Verdict.UNSAFE,
        Verdict.TOLERATED, Verdict.TOLERATED, Verdict.SAFE,
    ]


def test_recompute_empty():
    m = recompute([], 0)
    assert m.total == m.passed == 0


def test_update_tolerance(sample_lines):
    reports = parse_reports(sample_lines)
    patch = update_tolerance(reports, 0)
    assert patch.metrics.passed == 2
    assert patch.display_text == format_tolerance(0)
    patch = update_tolerance(reports, 1)
    assert patch.metrics.passed == 4
    assert patch.tolerance == 1
    assert "1" in patch.display_text


def test_update_tolerance_rejects_negative(sample_lines):
    with pytest.raises(ValueError):
        update_tolerance(parse_reports(sample_lines), -2)
