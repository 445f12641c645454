from __future__ import annotations

from gitlab_annotator.core.exceptions.annotator_error import AnnotatorError


class DiffParseError(AnnotatorError):
    """Raised when a hunk header carries no usable new-file start line.

    A single malformed header invalidates the whole diff batch, so callers
    must read this as "changed lines unknown" rather than "nothing changed".
    """

    def __init__(self, file_path: str, header: str) -> None:
        super().__init__(
            f"Malformed hunk header in '{file_path}': {header!r}",
            context={"file_path": file_path, "header": header},
        )
        self.file_path = file_path
        self.header = header
