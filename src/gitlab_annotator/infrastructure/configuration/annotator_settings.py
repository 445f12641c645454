from pathlib import Path

import structlog
from pydantic import Field, SecretStr, ValidationError, ValidationInfo, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from gitlab_annotator.core.application.workflows import AnnotationOptions
from gitlab_annotator.core.domain.annotation import UNLIMITED
from gitlab_annotator.core.domain.review import ReviewTarget
from gitlab_annotator.core.exceptions import ConfigurationError

logger = structlog.get_logger()


def parse_flag(value: object) -> bool:
    """A flag is set when non-blank and not `false` (case-insensitive)."""
    if isinstance(value, bool):
        return value
    if value is None:
        return False
    text = str(value).strip()
    return bool(text) and text.lower() != "false"


def parse_comment_limit(value: object, key: str = "") -> int:
    """Resolve a comment cap; unset or malformed values mean unlimited, never zero."""
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    text = "" if value is None else str(value).strip()
    if not text:
        logger.info("Comment limit not set", key=key)
        return UNLIMITED
    try:
        return int(text)
    except ValueError:
        logger.error("No valid integer value for comment limit", key=key, value=text)
        return UNLIMITED


class AnnotatorSettings(BaseSettings):
    """Environment-sourced settings of a single annotation run (GitLab CI variables)."""

    # ── GitLab connection ──
    server_url: str = Field(default="", alias="CI_SERVER_URL")
    token: SecretStr | None = Field(default=None, alias="GITLAB_TOKEN")
    project_id: str = Field(default="", alias="CI_PROJECT_ID")
    request_timeout: float = Field(default=10.0, alias="GITLAB_REQUEST_TIMEOUT")

    # ── Review target ──
    commit_sha: str = Field(default="", alias="CI_COMMIT_SHA")
    merge_request_iid: str = Field(default="", alias="CI_MERGE_REQUEST_IID")
    project_dir: str = Field(default="", alias="CI_PROJECT_DIR")
    project_url: str = Field(default="", alias="CI_PROJECT_URL")

    # ── Line comment limits and switches ──
    max_warning_comments: int = Field(default=UNLIMITED, alias="MAX_WARNING_COMMENTS")
    max_coverage_comments: int = Field(default=UNLIMITED, alias="MAX_COVERAGE_COMMENTS")
    skip_line_comments: bool = Field(default=False, alias="SKIP_LINE_COMMENTS")
    skip_commit_comments: bool = Field(default=False, alias="SKIP_COMMIT_COMMENTS")
    skip_warning_description: bool = Field(default=False, alias="SKIP_WARNING_DESCRIPTION")
    changed_lines_only: bool = Field(default=False, alias="CHANGED_LINES_ONLY")

    # ── Inputs from the grading engine ──
    findings_file: Path | None = Field(default=None, alias="FINDINGS_FILE")
    summary_file: Path | None = Field(default=None, alias="SUMMARY_FILE")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @classmethod
    def load(cls, **overrides: object) -> "AnnotatorSettings":
        """Read settings from the environment; invalid values raise ConfigurationError."""
        try:
            return cls(**overrides)
        except ValidationError as exc:
            fields = [".".join(str(part) for part in error["loc"]) for error in exc.errors()]
            raise ConfigurationError(
                f"Invalid configuration: {', '.join(fields)}", context={"invalid": fields}
            ) from exc

    @field_validator("max_warning_comments", "max_coverage_comments", mode="before")
    @classmethod
    def parse_limit(cls, value: object, info: ValidationInfo) -> int:
        alias = cls.model_fields[info.field_name].alias or info.field_name
        return parse_comment_limit(value, alias)

    @field_validator(
        "skip_line_comments",
        "skip_commit_comments",
        "skip_warning_description",
        "changed_lines_only",
        mode="before",
    )
    @classmethod
    def parse_switch(cls, value: object) -> bool:
        return parse_flag(value)

    @field_validator("findings_file", "summary_file", mode="before")
    @classmethod
    def blank_path_is_none(cls, value: object) -> object:
        if isinstance(value, str) and not value.strip():
            return None
        return value

    def validate_required(self) -> None:
        """Fail fast before any remote call when a required CI variable is missing."""
        missing = [
            key
            for key, value in (
                ("CI_SERVER_URL", self.server_url),
                ("GITLAB_TOKEN", self.token.get_secret_value() if self.token else ""),
                ("CI_PROJECT_ID", self.project_id),
                ("CI_COMMIT_SHA", self.commit_sha),
            )
            if not value.strip()
        ]
        if missing:
            raise ConfigurationError(
                f"Missing required configuration: {', '.join(missing)}",
                context={"missing": missing},
            )
        if not self.project_id.strip().isdigit():
            raise ConfigurationError(
                f"CI_PROJECT_ID must be numeric, got {self.project_id!r}",
                context={"project_id": self.project_id},
            )

    @property
    def link_base(self) -> str:
        return f"{self.project_url.rstrip('/')}/blob/{self.commit_sha}"

    def review_target(self) -> ReviewTarget:
        """Merge request when CI_MERGE_REQUEST_IID is numeric, otherwise the commit."""
        iid = self.merge_request_iid.strip()
        return ReviewTarget(
            commit_sha=self.commit_sha.strip(),
            mr_iid=int(iid) if iid.isdigit() else None,
        )

    def relative_path(self, path: str) -> str:
        """Strip the CI working directory prefix from a report path."""
        if not self.project_dir:
            return path
        prefix = self.project_dir.rstrip("/") + "/"
        return path.removeprefix(prefix)

    def annotation_options(self) -> AnnotationOptions:
        return AnnotationOptions(
            link_base=self.link_base,
            max_warning_comments=self.max_warning_comments,
            max_coverage_comments=self.max_coverage_comments,
            skip_line_comments=self.skip_line_comments,
            skip_commit_comments=self.skip_commit_comments,
            skip_warning_description=self.skip_warning_description,
            changed_lines_only=self.changed_lines_only,
        )
