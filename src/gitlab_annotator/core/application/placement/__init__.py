from gitlab_annotator.core.application.placement.annotation_placer import AnnotationPlacer
from gitlab_annotator.core.application.placement.commit_placement_target import (
    CommitPlacementTarget,
)
from gitlab_annotator.core.application.placement.diff_placement_target import (
    DiffPlacementTarget,
)
from gitlab_annotator.core.application.placement.placement_target import PlacementTarget

__all__ = [
    "AnnotationPlacer",
    "CommitPlacementTarget",
    "DiffPlacementTarget",
    "PlacementTarget",
]
