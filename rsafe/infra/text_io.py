import logging
from typing import List


logger = logging.getLogger(__name__)


def read_lines(path: str) -> List[str]:
    # ошибки чтения не глотаем: их показывает вызывающий
    # строки режем только по \n (и \r\n); \v, \f, \u2028 остаются внутри строки
    with open(path, encoding="utf-8", newline="") as f:
        text = f.read()
    lines = text.split("\n")
    if lines[-1] == "":
        lines.pop()
    lines = [line[:-1] if line.endswith("\r") else line for line in lines]
    logger.debug("read %d line(s) from %s", len(lines), path)
    return lines
