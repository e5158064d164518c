from .types import Verdict
from ..shared.constants import GREEN, RED, BLUE, WHITE, BLACK, TEXT, YELLOW, GREY


class CellState:
    # простая контейнерная структура для решения окраски
    def __init__(self, verdict: Verdict, is_info: bool = False,
                 is_dropped: bool = False, is_empty: bool = False):
        self.verdict = verdict; self.is_info = is_info
        self.is_dropped = is_dropped; self.is_empty = is_empty


def decide_colors(state: CellState):
    if state.is_empty:
        return WHITE, TEXT
    if state.is_dropped:
        return GREY, WHITE
    if state.verdict is Verdict.SAFE:
        return (GREEN if state.is_info else BLUE), TEXT
    if state.verdict is Verdict.TOLERATED:
        return YELLOW, TEXT
    if state.verdict is Verdict.UNSAFE:
        return RED, TEXT
    return WHITE, BLACK
