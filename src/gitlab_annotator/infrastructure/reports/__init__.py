from gitlab_annotator.infrastructure.reports.findings_report_loader import (
    load_findings,
    load_summary,
    parse_findings,
)

__all__ = ["load_findings", "load_summary", "parse_findings"]
