from openpyxl import Workbook, load_workbook
from openpyxl.styles import PatternFill, Font, Alignment, Border, Side
from openpyxl.utils import get_column_letter

from ..domain.palette import CellState, decide_colors
from ..usecases.recompute_metrics import Metrics
from ..shared.utils import fmt_verdict
from ..shared.constants import EXPORT_FONT_PT, WHITE, TEXT


THIN = Border(
    left=Side(style="thin", color="000000"),
    right=Side(style="thin", color="000000"),
    top=Side(style="thin", color="000000"),
    bottom=Side(style="thin", color="000000"),
)


def load_xlsx_matrix(path: str) -> list[list[str]]:
    wb = load_workbook(path, data_only=True, read_only=True)
    try:
        ws = wb[wb.sheetnames[0]]
        rows = []
        max_used = 0
        for row in ws.iter_rows(values_only=True):
            line = ["" if v is None else str(v) for v in row]
            # подрезаем правые пустые
            last = len(line) - 1
            while last >= 0 and str(line[last]).strip() == "":
                last -= 1
            used = last + 1
            rows.append(line[:used])
            max_used = max(max_used, used)
    finally:
        wb.close()
    # хвостовые пустые строки не нужны
    while rows and not rows[-1]:
        rows.pop()
    return [r + [""] * (max_used - len(r)) for r in rows]


def _put(ws, r: int, c: int, value, bg: str, fg: str):
    cell = ws.cell(row=r, column=c, value=value)
    cell.alignment = Alignment(horizontal="center", vertical="center")
    cell.fill = PatternFill(fill_type="solid", start_color=bg, end_color=bg)
    cell.font = Font(name="Arial", size=EXPORT_FONT_PT, color=fg)
    cell.border = THIN
    return cell


def save_results_xlsx(path: str, metrics: Metrics):
    wb = Workbook(); ws = wb.active; ws.title = "Reports"
    width = max((len(a.report) for a in metrics.assessments), default=0)
    for i, a in enumerate(metrics.assessments):
        r = i + 1
        dropped = set(a.dropped)
        bg, fg = decide_colors(CellState(a.verdict, is_info=True))
        _put(ws, r, 1, fmt_verdict(a.verdict), bg, fg)
        for c, level in enumerate(a.report):
            bg, fg = decide_colors(CellState(a.verdict, is_dropped=c in dropped))
            _put(ws, r, c + 2, level, bg, fg)
    total_row = len(metrics.assessments) + 2
    _put(ws, total_row, 1, f"Безопасных: {metrics.passed} из {metrics.total}", WHITE, TEXT)
    _put(ws, total_row, 2, f"допуск {metrics.tolerance}", WHITE, TEXT)
    ws.column_dimensions[get_column_letter(1)].width = 26
    for c in range(2, width + 2):
        ws.column_dimensions[get_column_letter(c)].width = 8
    wb.save(path)
