from gitlab_annotator.core.application.placement.placement_target import PlacementTarget
from gitlab_annotator.core.application.ports import ReviewPort
from gitlab_annotator.core.domain.annotation import Finding, PlacementResult


class CommitPlacementTarget(PlacementTarget):
    """Flat commit comment on the new-file line of the finding."""

    def __init__(self, review: ReviewPort, sha: str) -> None:
        self._review = review
        self._sha = sha

    @property
    def placed_result(self) -> PlacementResult:
        return PlacementResult.PLACED_ON_COMMIT

    def place(self, finding: Finding, body: str) -> None:
        self._review.create_commit_comment(
            self._sha, body, path=finding.path, line=finding.line_start
        )
