import logging

import pytest


SAMPLE = [
    "7 6 4 2 1",
    "1 2 7 8 9",
    "9 7 6 2 1",
    "1 3 2 4 5",
    "8 6 4 4 1",
    "1 3 6 7 9",
]


@pytest.fixture
def sample_lines():
    return list(SAMPLE)


@pytest.fixture
def sample_file(tmp_path):
    p = tmp_path / "puzzle.txt"
    p.write_text("\n".join(SAMPLE) + "\n", encoding="utf-8")
    return str(p)


@pytest.fixture(autouse=True)
def _reset_rsafe_logger():
    yield
    logger = logging.getLogger("rsafe")
    for h in list(logger.handlers):
        logger.removeHandler(h)
        h.close()
