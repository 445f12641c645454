from typing import Any

from gitlab_annotator.core.application.placement.placement_target import PlacementTarget
from gitlab_annotator.core.application.ports import ReviewPort
from gitlab_annotator.core.domain.annotation import Finding, PlacementResult
from gitlab_annotator.core.domain.review import DiffVersion


class DiffPlacementTarget(PlacementTarget):
    """Threaded merge-request discussion anchored at a new-file line of the diff."""

    def __init__(self, review: ReviewPort, mr_iid: int, version: DiffVersion) -> None:
        self._review = review
        self._mr_iid = mr_iid
        self._version = version

    @property
    def placed_result(self) -> PlacementResult:
        return PlacementResult.PLACED_ON_DIFF

    @property
    def head_sha(self) -> str:
        return self._version.head_commit_sha

    def place(self, finding: Finding, body: str) -> None:
        self._review.create_merge_request_discussion(
            self._mr_iid, body, self.build_position(finding)
        )

    def build_position(self, finding: Finding) -> dict[str, Any]:
        return {
            "position_type": "text",
            "base_sha": self._version.base_commit_sha,
            "head_sha": self._version.head_commit_sha,
            "start_sha": self._version.start_commit_sha,
            "new_path": finding.path,
            "old_path": finding.path,
            "new_line": finding.line_start,
        }
