from rsafe.domain.palette import CellState, decide_colors
from rsafe.domain.types import Verdict
from rsafe.shared.constants import GREEN, BLUE, RED, YELLOW, GREY, WHITE, TEXT
from rsafe.shared.utils import fmt_verdict


def test_verdict_colours():
    assert decide_colors(CellState(Verdict.SAFE)) == (BLUE, TEXT)
    assert decide_colors(CellState(Verdict.SAFE, is_info=True)) == (GREEN, TEXT)
    assert decide_colors(CellState(Verdict.TOLERATED)) == (YELLOW, TEXT)
    assert decide_colors(CellState(Verdict.UNSAFE)) == (RED, TEXT)


def test_dropped_and_empty_cells():
    assert decide_colors(CellState(Verdict.TOLERATED, is_dropped=True)) == (GREY, WHITE)
    assert decide_colors(CellState(Verdict.UNSAFE, is_empty=True)) == (WHITE, TEXT)


def test_fmt_verdict():
    assert fmt_verdict(Verdict.TOLERATED) == "безопасен с удалением"
