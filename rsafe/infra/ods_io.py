from odf.opendocument import OpenDocumentSpreadsheet, load
from odf.style import Style, TableCellProperties, TextProperties
from odf.table import Table, TableRow, TableCell
from odf.text import P

from ..domain.types import Verdict
from ..domain.palette import CellState, decide_colors
from ..usecases.recompute_metrics import Metrics
from ..shared.utils import fmt_verdict
from ..shared.constants import EXPORT_FONT_PT


def _extract_text(cell: TableCell) -> str:
    parts = []
    for p in cell.getElementsByType(P):
        for node in getattr(p, 'childNodes', []):
            data = getattr(node, 'data', None)
            if data:
                parts.append(str(data))
    text = "".join(parts).strip()
    if not text:
        v = cell.getAttribute('value')
        if v is not None:
            text = str(v)
    return text


def load_ods_matrix(path: str) -> list[list[str]]:
    doc = load(path)
    tables = doc.spreadsheet.getElementsByType(Table)
    if not tables:
        return []
    sheet = tables[0]
    rows = []
    max_cols = 0
    # пустые строки откладываем: LibreOffice дописывает в конец
    # тысячи пустых повторённых строк
    pending_empty = 0
    for row in sheet.getElementsByType(TableRow):
        rrep = int(row.getAttribute('numberrowsrepeated') or 1)
        line = []
        for cell in row.getElementsByType(TableCell):
            crep = int(cell.getAttribute('numbercolumnsrepeated') or 1)
            txt = _extract_text(cell)
            line.extend([txt] * crep)
        # подрезаем правые пустые
        last = len(line) - 1
        while last >= 0 and str(line[last]).strip() == "":
            last -= 1
        line = line[:last + 1]
        if not line:
            pending_empty += rrep
            continue
        rows.extend([] for _ in range(pending_empty))
        pending_empty = 0
        for _ in range(rrep):
            rows.append(list(line))
        max_cols = max(max_cols, len(line))
    return [r + [""] * (max_cols - len(r)) for r in rows]


def _cell_style(doc, cache: dict, bg: str, fg: str) -> Style:
    key = (bg, fg)
    if key not in cache:
        st = Style(name=f"c{bg}{fg}", family="table-cell")
        st.addElement(TableCellProperties(backgroundcolor=f"#{bg}", border="0.5pt solid #000000"))
        st.addElement(TextProperties(color=f"#{fg}", fontsize=f"{EXPORT_FONT_PT}pt"))
        doc.automaticstyles.addElement(st)
        cache[key] = st
    return cache[key]


def _text_cell(text: str, style: Style) -> TableCell:
    tc = TableCell(stylename=style, valuetype="string")
    tc.addElement(P(text=text))
    return tc


def _level_cell(level: int, style: Style) -> TableCell:
    tc = TableCell(stylename=style, valuetype="float", value=str(level))
    tc.addElement(P(text=str(level)))
    return tc


def save_results_ods(path: str, metrics: Metrics):
    doc = OpenDocumentSpreadsheet()
    styles = {}
    table = Table(name="Reports")
    for a in metrics.assessments:
        tr = TableRow()
        dropped = set(a.dropped)
        bg, fg = decide_colors(CellState(a.verdict, is_info=True))
        tr.addElement(_text_cell(fmt_verdict(a.verdict), _cell_style(doc, styles, bg, fg)))
        for c, level in enumerate(a.report):
            bg, fg = decide_colors(CellState(a.verdict, is_dropped=c in dropped))
            tr.addElement(_level_cell(level, _cell_style(doc, styles, bg, fg)))
        table.addElement(tr)
    plain = _cell_style(doc, styles, *decide_colors(CellState(Verdict.SAFE, is_empty=True)))
    table.addElement(TableRow())
    tr = TableRow()
    tr.addElement(_text_cell(f"Безопасных: {metrics.passed} из {metrics.total}", plain))
    tr.addElement(_text_cell(f"допуск {metrics.tolerance}", plain))
    table.addElement(tr)
    doc.spreadsheet.addElement(table)
    doc.save(path)
