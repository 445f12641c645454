from dataclasses import dataclass

from gitlab_annotator.core.domain.annotation.value_objects.finding_kind import (
    CommentCategory,
    FindingKind,
)


@dataclass(frozen=True)
class Finding:
    """A single grading result anchored to a source location.

    `line_end <= line_start` denotes a single line; column values of 0 mean
    "unset". `path` is already relative to the project working directory.
    """

    kind: FindingKind
    path: str
    line_start: int
    title: str
    message: str
    line_end: int = 0
    column_start: int = 0
    column_end: int = 0
    details: str = ""
    markdown_details: str = ""

    @property
    def category(self) -> CommentCategory:
        return self.kind.category

    @property
    def location(self) -> str:
        return f"{self.path}:{self.line_start}"
