"""Pure functions mapping unified diffs to changed new-file line numbers."""

from collections.abc import Iterable

import structlog

from gitlab_annotator.core.domain.annotation import HUNK_MARKER, DiffHunkHeader
from gitlab_annotator.core.exceptions import DiffParseError

logger = structlog.get_logger()

ChangedLines = dict[str, frozenset[int]]


def parse_modified_lines(diffs: Iterable[tuple[str, str]]) -> ChangedLines:
    """Map each file path to the new-file lines its diff adds.

    Raises DiffParseError for the whole batch as soon as any file carries a
    malformed hunk header.
    """
    changed_lines_by_file: ChangedLines = {}
    for file_path, diff_text in diffs:
        changed_lines_by_file[file_path] = _collect_added_lines(file_path, diff_text)
    return changed_lines_by_file


def modified_lines(diffs: Iterable[tuple[str, str]]) -> ChangedLines:
    """Like parse_modified_lines, but an unparseable batch yields an empty mapping."""
    try:
        return parse_modified_lines(diffs)
    except DiffParseError as exc:
        logger.error("Discarding diff batch", file_path=exc.file_path, header=exc.header)
        return {}


def _collect_added_lines(file_path: str, diff_text: str) -> frozenset[int]:
    changed: set[int] = set()
    line_num = 0
    for line in _split_lines(diff_text):
        if line.startswith(HUNK_MARKER):
            line_num = _hunk_start(file_path, line)
        elif line.startswith("+") and not line.startswith("+++"):
            changed.add(line_num)
            line_num += 1
        elif not line.startswith("-"):
            line_num += 1
    return frozenset(changed)


def _hunk_start(file_path: str, line: str) -> int:
    try:
        return DiffHunkHeader.parse(line).new_start
    except ValueError as exc:
        raise DiffParseError(file_path, line) from exc


def _split_lines(diff_text: str) -> list[str]:
    """Split on newlines, dropping trailing empty lines but keeping inner ones."""
    lines = (diff_text or "").split("\n")
    while lines and lines[-1] == "":
        lines.pop()
    return lines
