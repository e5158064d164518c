from dataclasses import dataclass
from enum import Enum, auto
from typing import Iterator, List, Optional, Tuple


class Trend(Enum):
    ASCENDING = auto()
    DESCENDING = auto()


class Verdict(Enum):
    SAFE = auto()
    TOLERATED = auto()  # безопасен только после удалений
    UNSAFE = auto()


@dataclass(frozen=True)
class Report:
    values: Tuple[int, ...] = ()

    def __post_init__(self):
        # списки тоже принимаем, но храним кортеж
        object.__setattr__(self, "values", tuple(self.values))

    def __len__(self) -> int:
        return len(self.values)

    def __iter__(self) -> Iterator[int]:
        return iter(self.values)

    def __getitem__(self, i: int) -> int:
        return self.values[i]

    def select(self, indices: Tuple[int, ...]) -> "Report":
        return Report(tuple(self.values[i] for i in indices))


@dataclass
class Assessment:
    report: Report
    verdict: Verdict
    kept: Optional[Tuple[int, ...]] = None  # индексы безопасной выборки

    @property
    def dropped(self) -> Tuple[int, ...]:
        if self.kept is None:
            return ()
        kept = set(self.kept)
        return tuple(i for i in range(len(self.report)) if i not in kept)


ReportSet = List[Report]
