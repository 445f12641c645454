from collections import Counter
from dataclasses import dataclass, field
from enum import StrEnum


class PlacementResult(StrEnum):
    PLACED_ON_DIFF = "PLACED_ON_DIFF"
    PLACED_ON_COMMIT = "PLACED_ON_COMMIT"
    SUPPRESSED = "SUPPRESSED"
    FAILED = "FAILED"


@dataclass
class PlacementTally:
    """Per-run counts of placement outcomes, used for the closing log line."""

    counts: Counter[PlacementResult] = field(default_factory=Counter)

    def record(self, result: PlacementResult) -> None:
        self.counts[result] += 1

    def count(self, result: PlacementResult) -> int:
        return self.counts[result]

    @property
    def placed(self) -> int:
        return self.count(PlacementResult.PLACED_ON_DIFF) + self.count(
            PlacementResult.PLACED_ON_COMMIT
        )

    @property
    def total(self) -> int:
        return sum(self.counts.values())

    def as_dict(self) -> dict[str, int]:
        return {result.value: self.count(result) for result in PlacementResult}
