from PyQt5.QtWidgets import (
    QWidget, QVBoxLayout, QHBoxLayout, QPushButton, QLabel, QTableWidget,
    QSpinBox, QMessageBox,
)
from PyQt5.QtGui import QFont

from ..shared.constants import UI_FONT_PT, MAX_TOLERANCE_UI
from .table_binder import TableBinder


class MainWindow(QWidget):
    def __init__(self, presenter_cls, tolerance: int = 0):
        super().__init__()
        self.setWindowTitle("Проверка безопасности отчётов")
        f = QFont(self.font()); f.setPointSizeF(UI_FONT_PT); self.setFont(f)
        root = QVBoxLayout(self)
        bar = QHBoxLayout()
        btn_open_txt = QPushButton("Открыть .txt"); btn_open_txt.clicked.connect(self._open_text)
        btn_open_xlsx = QPushButton("Открыть .xlsx"); btn_open_xlsx.clicked.connect(self._open_xlsx)
        btn_open_ods = QPushButton("Открыть .ods"); btn_open_ods.clicked.connect(self._open_ods)
        btn_save_xlsx = QPushButton("Сохранить .xlsx"); btn_save_xlsx.clicked.connect(self._save_xlsx)
        btn_save_ods = QPushButton("Сохранить .ods"); btn_save_ods.clicked.connect(self._save_ods)
        btn_pdf = QPushButton("PDF: таблица"); btn_pdf.clicked.connect(self._save_pdf)
        for b in (btn_open_txt, btn_open_xlsx, btn_open_ods, btn_save_xlsx, btn_save_ods, btn_pdf):
            bar.addWidget(b)
        bar.addStretch(1)
        bar.addWidget(QLabel("Допуск:"))
        self.sb_tol = QSpinBox(); self.sb_tol.setRange(0, MAX_TOLERANCE_UI); self.sb_tol.setValue(tolerance)
        self.sb_tol.valueChanged.connect(self._tolerance_changed)
        bar.addWidget(self.sb_tol)
        root.addLayout(bar)

        self.table = QTableWidget(0, 0, self)
        root.addWidget(self.table, 1)
        self.tol_label = QLabel("")
        self.safe_label = QLabel("Безопасных: 0 из 0")
        root.addWidget(self.tol_label)
        root.addWidget(self.safe_label)

        self.binder = TableBinder(self.table)
        self._presenter = presenter_cls(self, tolerance)

    # API для Presenter
    def show_metrics(self, metrics, tolerance_text: str):
        self.binder.bind_metrics(metrics)
        self.tol_label.setText(tolerance_text)
        self.safe_label.setText(
            f"Безопасных: {metrics.passed} из {metrics.total} (допуск {metrics.tolerance}); "
            f"из них с удалением: {metrics.tolerated}"
        )

    def show_error(self, title: str, text: str):
        QMessageBox.critical(self, title, text)

    def show_info(self, title: str, text: str):
        QMessageBox.information(self, title, text)

    def main_table(self):
        return self.table

    # slots -> presenter
    def _tolerance_changed(self, value: int):
        self._presenter.set_tolerance(value)

    def _open_text(self):
        from .dialogs import ask_open_text
        p = ask_open_text(self)
        if p: self._presenter.open_text(p)

    def _open_xlsx(self):
        from .dialogs import ask_open_xlsx
        p = ask_open_xlsx(self)
        if p: self._presenter.open_xlsx(p)

    def _open_ods(self):
        from .dialogs import ask_open_ods
        p = ask_open_ods(self)
        if p: self._presenter.open_ods(p)

    def _save_pdf(self):
        from .dialogs import ask_save_pdf
        p = ask_save_pdf(self, "reports.pdf")
        if p: self._presenter.export_pdf(p)

    def _save_xlsx(self):
        from .dialogs import ask_save_xlsx
        p = ask_save_xlsx(self, "reports.xlsx")
        if p: self._presenter.save_xlsx(p)

    def _save_ods(self):
        from .dialogs import ask_save_ods
        p = ask_save_ods(self, "reports.ods")
        if p: self._presenter.save_ods(p)
