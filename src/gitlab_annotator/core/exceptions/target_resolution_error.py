from __future__ import annotations

from gitlab_annotator.core.exceptions.annotator_error import AnnotatorError


class TargetResolutionError(AnnotatorError):
    """Raised when the merge request or commit to annotate cannot be resolved."""
