from __future__ import annotations

import sys
from dataclasses import dataclass, field

from gitlab_annotator.core.domain.annotation.value_objects.finding_kind import CommentCategory

UNLIMITED = sys.maxsize


@dataclass
class CommentBudget:
    """Caps the number of inline comments per category.

    Counters only go down, one step per emission attempt, whatever the
    placement outcome turns out to be.
    """

    max_warning_comments: int = UNLIMITED
    max_coverage_comments: int = UNLIMITED
    _remaining: dict[CommentCategory, int] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._remaining = {
            CommentCategory.WARNING: max(self.max_warning_comments, 0),
            CommentCategory.COVERAGE: max(self.max_coverage_comments, 0),
        }

    def allow(self, category: CommentCategory) -> bool:
        return self._remaining[category] > 0

    def consume(self, category: CommentCategory) -> None:
        if self._remaining[category] > 0:
            self._remaining[category] -= 1

    def remaining(self, category: CommentCategory) -> int:
        return self._remaining[category]
