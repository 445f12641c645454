from gitlab_annotator.core.application.tools.comment_formatter import (
    format_comment,
    format_finding,
)
from gitlab_annotator.core.application.tools.diff_line_index import (
    ChangedLines,
    modified_lines,
    parse_modified_lines,
)

__all__ = [
    "ChangedLines",
    "format_comment",
    "format_finding",
    "modified_lines",
    "parse_modified_lines",
]
