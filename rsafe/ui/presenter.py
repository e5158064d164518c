import logging
from dataclasses import dataclass
from typing import Optional

from ..domain.types import ReportSet
from ..usecases.load_reports import load_from_lines, load_from_matrix, LoadResult
from ..usecases.update_tolerance import update_tolerance, format_tolerance
from ..usecases.recompute_metrics import Metrics
from ..infra.text_io import read_lines
from ..infra.xlsx_io import load_xlsx_matrix, save_results_xlsx
from ..infra.ods_io import load_ods_matrix, save_results_ods
from ..infra.pdf_print import print_table_single_page


logger = logging.getLogger(__name__)


@dataclass
class Model:
    source: str
    reports: ReportSet
    metrics: Metrics


class Presenter:
    def __init__(self, view, tolerance: int = 0):
        self.view = view
        self.tolerance = tolerance
        self.model: Optional[Model] = None

    # Загрузка
    def open_text(self, path: str):
        self._open(path, lambda: load_from_lines(read_lines(path), self.tolerance))

    def open_xlsx(self, path: str):
        self._open(path, lambda: load_from_matrix(load_xlsx_matrix(path), self.tolerance))

    def open_ods(self, path: str):
        self._open(path, lambda: load_from_matrix(load_ods_matrix(path), self.tolerance))

    def _open(self, path: str, load):
        try:
            res: LoadResult = load()
        except Exception as e:
            logger.exception("failed to open %s", path)
            self.view.show_error("Ошибка", f"Не удалось открыть файл:\n{e}")
            return
        self.model = Model(path, res.reports, res.metrics)
        self.view.show_metrics(self.model.metrics, format_tolerance(self.tolerance))

    # Правка допуска
    def set_tolerance(self, tolerance: int):
        self.tolerance = tolerance
        if self.model is None:
            return
        patch = update_tolerance(self.model.reports, tolerance)
        self.model.metrics = patch.metrics
        logger.info("tolerance set to %d: %d of %d safe",
                    tolerance, patch.metrics.passed, patch.metrics.total)
        self.view.show_metrics(self.model.metrics, patch.display_text)

    # Экспорт
    def export_pdf(self, path: str):
        self._export(path, lambda: print_table_single_page(path, self.view.main_table()))

    def save_xlsx(self, path: str):
        self._export(path, lambda: save_results_xlsx(path, self.model.metrics))

    def save_ods(self, path: str):
        self._export(path, lambda: save_results_ods(path, self.model.metrics))

    def _export(self, path: str, save):
        if self.model is None:
            self.view.show_error("Пусто", "Сначала откройте файл с отчётами.")
            return
        try:
            save()
        except Exception as e:
            logger.exception("failed to save %s", path)
            self.view.show_error("Ошибка", f"Не удалось сохранить файл:\n{e}")
            return
        logger.info("saved %s", path)
        self.view.show_info("Готово", f"Файл сохранён:\n{path}")
