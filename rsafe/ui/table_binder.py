from PyQt5.QtWidgets import QTableWidget, QTableWidgetItem
from PyQt5.QtGui import QColor
from PyQt5.QtCore import Qt

from ..domain.palette import CellState, decide_colors
from ..shared.constants import INFO_COL_WIDTH, LEVEL_COL_WIDTH
from ..shared.utils import fmt_verdict


def _qcolor(hex_rgb: str) -> QColor:
    return QColor("#" + hex_rgb)


class TableBinder:
    def __init__(self, table: QTableWidget):
        self.table = table

    def bind_metrics(self, metrics):
        t = self.table
        width = max((len(a.report) for a in metrics.assessments), default=0)
        t.blockSignals(True)
        try:
            t.clearContents()
            t.setRowCount(len(metrics.assessments))
            t.setColumnCount(width + 1)
            t.setHorizontalHeaderLabels(["Итог"] + [str(i + 1) for i in range(width)])
            for r, a in enumerate(metrics.assessments):
                dropped = set(a.dropped)
                self._set(r, 0, fmt_verdict(a.verdict), CellState(a.verdict, is_info=True))
                for c in range(width):
                    if c < len(a.report):
                        state = CellState(a.verdict, is_dropped=c in dropped)
                        self._set(r, c + 1, str(a.report[c]), state)
                    else:
                        self._set(r, c + 1, "", CellState(a.verdict, is_empty=True))
            t.setColumnWidth(0, INFO_COL_WIDTH)
            for c in range(1, width + 1):
                t.setColumnWidth(c, LEVEL_COL_WIDTH)
        finally:
            t.blockSignals(False)

    def _set(self, r: int, c: int, text: str, state: CellState):
        it = self.table.item(r, c) or QTableWidgetItem("")
        it.setTextAlignment(Qt.AlignCenter)
        it.setFlags(it.flags() & ~Qt.ItemIsEditable)
        it.setText(text)
        bg, fg = decide_colors(state)
        it.setBackground(_qcolor(bg)); it.setForeground(_qcolor(fg))
        self.table.setItem(r, c, it)
