import json
from collections.abc import Callable
from pathlib import Path

import structlog
from pydantic import ValidationError

from gitlab_annotator.core.domain.annotation import Finding
from gitlab_annotator.core.exceptions import ConfigurationError
from gitlab_annotator.infrastructure.reports.findings_report_dto import (
    FindingDTO,
    FindingsReportDTO,
)

logger = structlog.get_logger()


def parse_findings(raw: str, relative_path: Callable[[str], str] = str) -> list[Finding]:
    """Parse the grading engine's findings JSON (object with `findings`, or a bare list)."""
    try:
        payload = json.loads(raw)
        if isinstance(payload, list):
            payload = {"findings": payload}
        report = FindingsReportDTO.model_validate(payload)
    except (json.JSONDecodeError, ValidationError) as exc:
        raise ConfigurationError(f"Invalid findings report: {exc}") from exc
    return [_to_finding(dto, relative_path) for dto in report.findings]


def load_findings(path: Path | None, relative_path: Callable[[str], str] = str) -> list[Finding]:
    if path is None:
        logger.info("No findings file configured")
        return []
    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Cannot read findings file {path}: {exc}") from exc
    findings = parse_findings(raw, relative_path)
    logger.info("Findings loaded", file=str(path), findings=len(findings))
    return findings


def load_summary(path: Path | None) -> str:
    if path is None:
        return ""
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Cannot read summary file {path}: {exc}") from exc


def _to_finding(dto: FindingDTO, relative_path: Callable[[str], str]) -> Finding:
    return Finding(
        kind=dto.kind,
        path=relative_path(dto.path),
        line_start=dto.line_start,
        line_end=dto.line_end,
        column_start=dto.column_start,
        column_end=dto.column_end,
        title=dto.title,
        message=dto.message,
        details=dto.details,
        markdown_details=dto.markdown_details,
    )
