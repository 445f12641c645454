"""Pure functions rendering findings as marker-tagged Markdown comment bodies."""

import posixpath

from gitlab_annotator.core.domain.annotation import Finding, FindingKind, tag_body

_ICONS = {
    FindingKind.WARNING: "warning",
    FindingKind.NO_COVERAGE: "footprints",
    FindingKind.PARTIAL_COVERAGE: "footprints",
}
_DEFAULT_ICON = "microscope"


def format_comment(
    kind: FindingKind,
    relative_path: str,
    line_start: int,
    line_end: int,
    column_start: int,
    column_end: int,
    title: str,
    message: str,
    details: str,
    link_base: str,
) -> str:
    """Render one comment body: marker, heading with icon, deep link and message."""
    link = _create_link(relative_path, line_start, line_end, column_start, column_end, link_base)
    body = tag_body(f"#### :{get_icon(kind)}: &nbsp; {title}\n\n{link}: {message}")
    if details and details.strip():
        body += f"\n\n{details}"
    return body


def format_finding(finding: Finding, link_base: str, include_details: bool = True) -> str:
    details = (finding.markdown_details or finding.details) if include_details else ""
    return format_comment(
        finding.kind,
        finding.path,
        finding.line_start,
        finding.line_end,
        finding.column_start,
        finding.column_end,
        finding.title,
        finding.message,
        details,
        link_base,
    )


def create_range(prefix: str, start: int, end: int) -> str:
    """`L10`, `L10-L20`, or "" when start is unset (< 1)."""
    if start < 1:
        return ""
    single = f"{prefix}{start}"
    if end <= start:
        return single
    return f"{single}-{prefix}{end}"


def create_lines_and_columns(line_range: str, column_start: int, column_end: int) -> str:
    columns = create_range("C", column_start, column_end)
    if not columns:
        return f"({line_range})"
    return f"({line_range}:{columns})"


def get_icon(kind: FindingKind) -> str:
    return _ICONS.get(kind, _DEFAULT_ICON)


def _create_link(
    relative_path: str,
    line_start: int,
    line_end: int,
    column_start: int,
    column_end: int,
    link_base: str,
) -> str:
    link_name = posixpath.basename(relative_path)
    link_url = f"{link_base}/{relative_path}"
    line_range = create_range("L", line_start, line_end)
    if line_range:
        link_url += f"#{line_range}"
        link_name += create_lines_and_columns(line_range, column_start, column_end)
    return f"[{link_name}]({link_url})"
