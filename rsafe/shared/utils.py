import re
from typing import Optional

from .constants import MAX_LEVEL


_LEVEL_RE = re.compile(r"^\+?[0-9]+$")
_INTEGRAL_FLOAT_RE = re.compile(r"^([0-9]+)\.0+$")


def try_parse_level(token: str) -> Optional[int]:
    if token is None:
        return None
    t = token.strip()
    if not _LEVEL_RE.fullmatch(t):
        return None
    n = int(t)
    if n > MAX_LEVEL:
        return None
    return n


def fmt_level(s) -> str:
    # ячейки таблиц приходят как "7.0" для целых
    if s is None:
        return ""
    t = str(s).strip()
    m = _INTEGRAL_FLOAT_RE.fullmatch(t)
    return m.group(1) if m else t


def fmt_verdict(verdict) -> str:
    return {
        "SAFE": "безопасен",
        "TOLERATED": "безопасен с удалением",
        "UNSAFE": "опасен",
    }.get(verdict.name, verdict.name)
