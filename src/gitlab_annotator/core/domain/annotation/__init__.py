from gitlab_annotator.core.domain.annotation.comment_budget import UNLIMITED, CommentBudget
from gitlab_annotator.core.domain.annotation.finding import Finding
from gitlab_annotator.core.domain.annotation.value_objects.diff_hunk_header import (
    HUNK_MARKER,
    DiffHunkHeader,
)
from gitlab_annotator.core.domain.annotation.value_objects.finding_kind import (
    CommentCategory,
    FindingKind,
)
from gitlab_annotator.core.domain.annotation.value_objects.marker_tag import (
    MARKER_TAG,
    is_owned_body,
    tag_body,
)
from gitlab_annotator.core.domain.annotation.value_objects.placement_result import (
    PlacementResult,
    PlacementTally,
)

__all__ = [
    "HUNK_MARKER",
    "MARKER_TAG",
    "UNLIMITED",
    "CommentBudget",
    "CommentCategory",
    "DiffHunkHeader",
    "Finding",
    "FindingKind",
    "PlacementResult",
    "PlacementTally",
    "is_owned_body",
    "tag_body",
]
