from dataclasses import dataclass, field
from typing import List

from ..domain.types import Assessment, ReportSet, Verdict
from ..domain.rules import assess


@dataclass
class Metrics:
    total: int
    safe: int
    tolerated: int
    unsafe: int
    tolerance: int
    assessments: List[Assessment] = field(default_factory=list)

    @property
    def passed(self) -> int:
        return self.safe + self.tolerated


def recompute(reports: ReportSet, tolerance: int) -> Metrics:
    assessments = [assess(r, tolerance) for r in reports]
    safe = sum(1 for a in assessments if a.verdict is Verdict.SAFE)
    tolerated = sum(1 for a in assessments if a.verdict is Verdict.TOLERATED)
    unsafe = len(assessments) - safe - tolerated
    return Metrics(len(assessments), safe, tolerated, unsafe, tolerance, assessments)
