import logging

from PyQt5.QtPrintSupport import QPrinter
from PyQt5.QtGui import QPainter
from PyQt5.QtWidgets import QWidget, QTableWidget


logger = logging.getLogger(__name__)


def _content_size(table: QTableWidget):
    vh = table.verticalHeader(); hh = table.horizontalHeader(); fw = table.frameWidth() * 2
    cols = [c for c in range(table.columnCount()) if not table.isColumnHidden(c)]
    w = int(fw + vh.width() + sum(table.columnWidth(c) for c in cols))
    h = int(fw + hh.height() + sum(table.rowHeight(r) for r in range(table.rowCount())))
    return w, h


def print_table_single_page(pdf_path: str, table: QTableWidget):
    if table.rowCount() == 0 or table.columnCount() == 0:
        raise RuntimeError("Таблица пуста")
    content_w, content_h = _content_size(table)

    printer = QPrinter(QPrinter.HighResolution)
    printer.setResolution(300)
    printer.setOutputFormat(QPrinter.PdfFormat)
    printer.setOutputFileName(pdf_path)
    printer.setPaperSize(QPrinter.A4)
    printer.setFullPage(True)
    printer.setOrientation(QPrinter.Landscape if content_w >= content_h else QPrinter.Portrait)

    painter = QPainter(printer)
    try:
        target = printer.pageRect(QPrinter.DevicePixel)
        scale = min(target.width() / float(content_w), target.height() / float(content_h))
        view_w = max(1, int(content_w * scale))
        view_h = max(1, int(content_h * scale))
        offset_x = int((target.width() - view_w) / 2)
        offset_y = int((target.height() - view_h) / 2)

        painter.setViewport(offset_x, offset_y, view_w, view_h)
        painter.setWindow(0, 0, content_w, content_h)
        table.render(painter, flags=QWidget.DrawChildren)
    finally:
        painter.end()
    logger.info("table printed to %s", pdf_path)
