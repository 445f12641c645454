from gitlab_annotator.core.domain.review.value_objects.diff_version import DiffVersion
from gitlab_annotator.core.domain.review.value_objects.file_diff import FileDiff
from gitlab_annotator.core.domain.review.value_objects.remote_comment import RemoteComment
from gitlab_annotator.core.domain.review.value_objects.review_target import ReviewTarget

__all__ = ["DiffVersion", "FileDiff", "RemoteComment", "ReviewTarget"]
