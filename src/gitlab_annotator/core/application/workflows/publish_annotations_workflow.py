"""Deterministic publishing pipeline: Cleanup -> Filter -> Place -> Summarize."""

from collections.abc import Sequence
from dataclasses import dataclass, field

import structlog
from structlog.contextvars import bind_contextvars

from gitlab_annotator.core.application.cleanup import SessionCleanup
from gitlab_annotator.core.application.placement import (
    AnnotationPlacer,
    CommitPlacementTarget,
    DiffPlacementTarget,
    PlacementTarget,
)
from gitlab_annotator.core.application.ports import ReviewPort
from gitlab_annotator.core.application.tools import ChangedLines, parse_modified_lines
from gitlab_annotator.core.application.workflows.annotation_options import AnnotationOptions
from gitlab_annotator.core.domain.annotation import Finding, PlacementTally, tag_body
from gitlab_annotator.core.domain.review import DiffVersion, ReviewTarget
from gitlab_annotator.core.exceptions import DiffParseError, ProviderError, TargetResolutionError

logger = structlog.get_logger()


@dataclass(frozen=True)
class PublishAnnotationsInput:
    target: ReviewTarget
    findings: Sequence[Finding] = field(default_factory=tuple)
    summary: str = ""


class PublishAnnotationsWorkflow:
    """Publishes one run's findings on a merge request or commit.

    All old marker-tagged comments are deleted before the first new comment
    is created.
    """

    def __init__(self, review: ReviewPort, options: AnnotationOptions) -> None:
        self._review = review
        self._options = options
        self._cleanup = SessionCleanup(review)

    def execute(self, request: PublishAnnotationsInput) -> PlacementTally:
        target = request.target
        bind_contextvars(review_target=target.describe(), event_type="workflow.publish_annotations")
        logger.info("Annotation workflow started", findings=len(request.findings))

        self._step_1_cleanup(target)
        findings = self._step_2_filter_changed_lines(target, request.findings)
        tally = self._step_3_place(target, findings)
        self._step_4_publish_summary(target, request.summary)

        logger.info("GitLab annotation has finished", **tally.as_dict())
        return tally

    # ── Step Methods ─────────────────────────────────────────────────

    def _step_1_cleanup(self, target: ReviewTarget) -> None:
        logger.info("Step 1: Deleting old annotation comments")
        deleted = self._cleanup.run(target)
        logger.info("Old annotation comments deleted", deleted=deleted)

    def _step_2_filter_changed_lines(
        self, target: ReviewTarget, findings: Sequence[Finding]
    ) -> list[Finding]:
        if not self._options.changed_lines_only:
            return list(findings)
        logger.info("Step 2: Restricting findings to changed lines")
        changed = self._changed_lines(target)
        if changed is None:
            return list(findings)
        kept = [f for f in findings if f.line_start in changed.get(f.path, frozenset())]
        logger.info("Findings restricted to changed lines", kept=len(kept), total=len(findings))
        return kept

    def _step_3_place(self, target: ReviewTarget, findings: list[Finding]) -> PlacementTally:
        if self._options.skip_line_comments:
            logger.info("Step 3: Skipping line comments")
            return PlacementTally()
        logger.info("Step 3: Placing line comments", findings=len(findings))
        return self._build_placer(target).place_all(findings)

    def _step_4_publish_summary(self, target: ReviewTarget, summary: str) -> None:
        if not summary.strip():
            return
        logger.info("Step 4: Publishing summary comment")
        body = tag_body(summary)
        if target.mr_iid is None:
            self._review.create_commit_comment(target.commit_sha, body)
        else:
            self._review.create_merge_request_note(target.mr_iid, body)

    # ── Helpers ──────────────────────────────────────────────────────

    def _changed_lines(self, target: ReviewTarget) -> ChangedLines | None:
        """Changed lines of the target, or None when they cannot be determined."""
        try:
            if target.mr_iid is None:
                diffs = self._review.get_commit_diffs(target.commit_sha)
            else:
                diffs = self._review.get_merge_request_diffs(target.mr_iid)
        except ProviderError as exc:
            logger.warning("Cannot fetch diff, keeping all findings", error=str(exc))
            return None
        try:
            return parse_modified_lines((d.new_path, d.diff) for d in diffs)
        except DiffParseError as exc:
            logger.warning(
                "Cannot determine changed lines, keeping all findings",
                file_path=exc.file_path,
                header=exc.header,
            )
            return None

    def _build_placer(self, target: ReviewTarget) -> AnnotationPlacer:
        primary, fallback = self._resolve_targets(target)
        return AnnotationPlacer(
            primary=primary,
            fallback=fallback,
            budget=self._options.new_budget(),
            link_base=self._options.link_base,
            include_details=not self._options.skip_warning_description,
        )

    def _resolve_targets(
        self, target: ReviewTarget
    ) -> tuple[PlacementTarget, PlacementTarget | None]:
        if target.mr_iid is None:
            return CommitPlacementTarget(self._review, target.commit_sha), None

        version = self._latest_diff_version(target.mr_iid)
        if version is None:
            logger.info("Diff versions are empty, adding line comments to commit")
            return CommitPlacementTarget(self._review, target.commit_sha), None

        logger.info("Diff versions found, adding line comments to merge request diff")
        primary = DiffPlacementTarget(self._review, target.mr_iid, version)
        if self._options.skip_commit_comments:
            return primary, None
        return primary, CommitPlacementTarget(self._review, version.head_commit_sha)

    def _latest_diff_version(self, mr_iid: int) -> DiffVersion | None:
        try:
            self._ensure_merge_request(mr_iid)
            return self._review.get_latest_diff_version(mr_iid)
        except ProviderError as exc:
            raise TargetResolutionError(
                f"Cannot resolve merge request !{mr_iid}: {exc}", context={"mr_iid": mr_iid}
            ) from exc

    def _ensure_merge_request(self, mr_iid: int) -> None:
        """Existence check only; an unknown merge request raises ProviderError."""
        self._review.get_merge_request(mr_iid)
