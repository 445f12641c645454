"""Shared builders for settings and findings used across the test suite."""

from gitlab_annotator.core.domain.annotation import Finding, FindingKind
from gitlab_annotator.infrastructure.configuration.annotator_settings import AnnotatorSettings

GITLAB_URL = "https://gitlab.example.com"
API_URL = f"{GITLAB_URL}/api/v4"
PROJECT_URL = f"{GITLAB_URL}/group/project"
COMMIT_SHA = "0123456789abcdef0123456789abcdef01234567"
LINK_BASE = f"{PROJECT_URL}/blob/{COMMIT_SHA}"

BASE_ENV = {
    "CI_SERVER_URL": GITLAB_URL,
    "GITLAB_TOKEN": "glpat-test-token",
    "CI_PROJECT_ID": "42",
    "CI_COMMIT_SHA": COMMIT_SHA,
    "CI_MERGE_REQUEST_IID": "7",
    "CI_PROJECT_DIR": "/builds/group/project",
    "CI_PROJECT_URL": PROJECT_URL,
    "MAX_WARNING_COMMENTS": "",
    "MAX_COVERAGE_COMMENTS": "",
    "SKIP_LINE_COMMENTS": "",
    "SKIP_COMMIT_COMMENTS": "",
    "SKIP_WARNING_DESCRIPTION": "",
    "CHANGED_LINES_ONLY": "",
    "FINDINGS_FILE": "",
    "SUMMARY_FILE": "",
    "LOG_LEVEL": "DEBUG",
}


def make_settings(**overrides: str) -> AnnotatorSettings:
    """Build settings from environment-style keys, never reading .env."""
    return AnnotatorSettings(_env_file=None, **{**BASE_ENV, **overrides})


def make_finding(
    path: str = "src/App.java",
    line_start: int = 10,
    kind: FindingKind = FindingKind.WARNING,
    **overrides: object,
) -> Finding:
    fields: dict = {
        "kind": kind,
        "path": path,
        "line_start": line_start,
        "title": "Checkstyle: MagicNumber",
        "message": "'42' is a magic number.",
    }
    fields.update(overrides)
    return Finding(**fields)
