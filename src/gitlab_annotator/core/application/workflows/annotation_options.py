from dataclasses import dataclass

from gitlab_annotator.core.domain.annotation import UNLIMITED, CommentBudget


@dataclass(frozen=True)
class AnnotationOptions:
    """Switches and limits for one publishing run, resolved once at startup."""

    link_base: str
    max_warning_comments: int = UNLIMITED
    max_coverage_comments: int = UNLIMITED
    skip_line_comments: bool = False
    skip_commit_comments: bool = False
    skip_warning_description: bool = False
    changed_lines_only: bool = False

    def new_budget(self) -> CommentBudget:
        return CommentBudget(
            max_warning_comments=self.max_warning_comments,
            max_coverage_comments=self.max_coverage_comments,
        )
