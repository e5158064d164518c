import pytest

pytest.importorskip("PyQt5.QtPrintSupport")

from rsafe.ui.presenter import Presenter  # noqa: E402


class FakeView:
    def __init__(self):
        self.shown = []
        self.errors = []
        self.infos = []

    def show_metrics(self, metrics, tolerance_text):
        self.shown.append((metrics, tolerance_text))

    def show_error(self, title, text):
        self.errors.append((title, text))

    def show_info(self, title, text):
        self.infos.append((title, text))


def test_open_and_change_tolerance(sample_file):
    view = FakeView()
    p = Presenter(view)
    p.open_text(sample_file)
    assert view.shown[-1][0].passed == 2
    p.set_tolerance(1)
    metrics, text = view.shown[-1]
    assert metrics.passed == 4
    assert metrics.tolerated == 2
    assert "1" in text


def test_tolerance_before_open_is_remembered(sample_file):
    view = FakeView()
    p = Presenter(view)
    p.set_tolerance(1)
    assert view.shown == []
    p.open_text(sample_file)
    assert view.shown[-1][0].passed == 4


def test_open_error_is_reported(tmp_path):
    view = FakeView()
    p = Presenter(view)
    p.open_text(str(tmp_path / "missing.txt"))
    assert p.model is None
    assert view.errors and view.errors[0][0] == "Ошибка"


def test_save_without_data(tmp_path):
    view = FakeView()
    Presenter(view).save_xlsx(str(tmp_path / "o.xlsx"))
    assert view.errors[0][0] == "Пусто"


def test_save_xlsx(sample_file, tmp_path):
    view = FakeView()
    p = Presenter(view, tolerance=1)
    p.open_text(sample_file)
    out = tmp_path / "o.xlsx"
    p.save_xlsx(str(out))
    assert out.exists()
    assert view.infos
