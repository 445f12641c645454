"""Unit tests for AnnotationPlacer and placement targets: zero I/O, ports mocked."""

from unittest.mock import MagicMock

import pytest
from factories import COMMIT_SHA, LINK_BASE, make_finding

from gitlab_annotator.core.application.placement import (
    AnnotationPlacer,
    CommitPlacementTarget,
    DiffPlacementTarget,
    PlacementTarget,
)
from gitlab_annotator.core.application.tools import format_finding
from gitlab_annotator.core.domain.annotation import (
    CommentBudget,
    CommentCategory,
    FindingKind,
    PlacementResult,
)
from gitlab_annotator.core.domain.review import DiffVersion
from gitlab_annotator.core.exceptions import ProviderError

VERSION = DiffVersion(base_commit_sha="base", head_commit_sha="head", start_commit_sha="start")


def _rejection() -> ProviderError:
    return ProviderError(provider="GitLab", message="line_code can't be blank", status_code=400)


def _target(result: PlacementResult) -> MagicMock:
    target = MagicMock(spec=PlacementTarget)
    target.placed_result = result
    return target


def _placer(
    primary: MagicMock,
    fallback: MagicMock | None = None,
    budget: CommentBudget | None = None,
    include_details: bool = True,
) -> AnnotationPlacer:
    return AnnotationPlacer(
        primary=primary,
        fallback=fallback,
        budget=budget or CommentBudget(),
        link_base=LINK_BASE,
        include_details=include_details,
    )


# ══════════════════════════════════════════════════════════════
#  Placement targets
# ══════════════════════════════════════════════════════════════


class TestDiffPlacementTarget:
    def test_creates_positioned_discussion(self, review: MagicMock) -> None:
        target = DiffPlacementTarget(review, 7, VERSION)

        target.place(make_finding(path="src/a.py", line_start=12), "body")

        review.create_merge_request_discussion.assert_called_once_with(
            7,
            "body",
            {
                "position_type": "text",
                "base_sha": "base",
                "head_sha": "head",
                "start_sha": "start",
                "new_path": "src/a.py",
                "old_path": "src/a.py",
                "new_line": 12,
            },
        )
        assert target.placed_result is PlacementResult.PLACED_ON_DIFF
        assert target.head_sha == "head"


class TestCommitPlacementTarget:
    def test_creates_line_comment(self, review: MagicMock) -> None:
        target = CommitPlacementTarget(review, COMMIT_SHA)

        target.place(make_finding(path="src/a.py", line_start=12), "body")

        review.create_commit_comment.assert_called_once_with(
            COMMIT_SHA, "body", path="src/a.py", line=12
        )
        assert target.placed_result is PlacementResult.PLACED_ON_COMMIT


# ══════════════════════════════════════════════════════════════
#  Fallback chain
# ══════════════════════════════════════════════════════════════


class TestFallbackChain:
    def test_primary_success_skips_fallback(self) -> None:
        primary = _target(PlacementResult.PLACED_ON_DIFF)
        fallback = _target(PlacementResult.PLACED_ON_COMMIT)

        result = _placer(primary, fallback).place(make_finding())

        assert result is PlacementResult.PLACED_ON_DIFF
        fallback.place.assert_not_called()

    def test_rejected_primary_falls_back_once_with_same_body(self) -> None:
        finding = make_finding(line_start=33)
        primary = _target(PlacementResult.PLACED_ON_DIFF)
        primary.place.side_effect = _rejection()
        fallback = _target(PlacementResult.PLACED_ON_COMMIT)

        result = _placer(primary, fallback).place(finding)

        assert result is PlacementResult.PLACED_ON_COMMIT
        expected_body = format_finding(finding, LINK_BASE)
        primary.place.assert_called_once_with(finding, expected_body)
        fallback.place.assert_called_once_with(finding, expected_body)

    def test_rejected_primary_without_fallback_is_suppressed(self) -> None:
        primary = _target(PlacementResult.PLACED_ON_DIFF)
        primary.place.side_effect = _rejection()

        assert _placer(primary).place(make_finding()) is PlacementResult.SUPPRESSED

    def test_rejected_fallback_is_failed(self) -> None:
        primary = _target(PlacementResult.PLACED_ON_DIFF)
        primary.place.side_effect = _rejection()
        fallback = _target(PlacementResult.PLACED_ON_COMMIT)
        fallback.place.side_effect = _rejection()

        assert _placer(primary, fallback).place(make_finding()) is PlacementResult.FAILED
        fallback.place.assert_called_once()

    def test_failure_does_not_abort_the_loop(self) -> None:
        primary = _target(PlacementResult.PLACED_ON_COMMIT)
        primary.place.side_effect = [_rejection(), None, None]
        findings = [make_finding(line_start=n) for n in (1, 2, 3)]

        tally = _placer(primary).place_all(findings)

        assert primary.place.call_count == 3
        assert tally.count(PlacementResult.SUPPRESSED) == 1
        assert tally.count(PlacementResult.PLACED_ON_COMMIT) == 2

    def test_unexpected_errors_propagate(self) -> None:
        primary = _target(PlacementResult.PLACED_ON_DIFF)
        primary.place.side_effect = RuntimeError("boom")

        with pytest.raises(RuntimeError):
            _placer(primary).place(make_finding())

    def test_details_omitted_when_disabled(self) -> None:
        primary = _target(PlacementResult.PLACED_ON_DIFF)
        finding = make_finding(details="long description")

        _placer(primary, include_details=False).place(finding)

        body = primary.place.call_args.args[1]
        assert "long description" not in body


# ══════════════════════════════════════════════════════════════
#  Quota
# ══════════════════════════════════════════════════════════════


class TestQuota:
    def test_warning_cap(self) -> None:
        primary = _target(PlacementResult.PLACED_ON_DIFF)
        findings = [make_finding(line_start=n) for n in range(1, 6)]

        tally = _placer(primary, budget=CommentBudget(max_warning_comments=2)).place_all(findings)

        assert primary.place.call_count == 2
        assert tally.count(PlacementResult.PLACED_ON_DIFF) == 2
        assert tally.count(PlacementResult.SUPPRESSED) == 3

    def test_mutation_findings_bill_to_coverage(self) -> None:
        primary = _target(PlacementResult.PLACED_ON_DIFF)
        budget = CommentBudget(max_warning_comments=5, max_coverage_comments=1)
        findings = [
            make_finding(kind=FindingKind.NO_COVERAGE, line_start=1),
            make_finding(kind=FindingKind.MUTATION_SURVIVED, line_start=2),
            make_finding(kind=FindingKind.WARNING, line_start=3),
        ]

        tally = _placer(primary, budget=budget).place_all(findings)

        assert tally.placed == 2
        placed_kinds = [c.args[0].kind for c in primary.place.call_args_list]
        assert placed_kinds == [FindingKind.NO_COVERAGE, FindingKind.WARNING]

    def test_quota_consumed_even_when_placement_fails(self) -> None:
        primary = _target(PlacementResult.PLACED_ON_DIFF)
        primary.place.side_effect = _rejection()
        budget = CommentBudget(max_warning_comments=1)

        results = [_placer(primary, budget=budget).place(make_finding()) for _ in range(2)]

        assert results == [PlacementResult.SUPPRESSED, PlacementResult.SUPPRESSED]
        assert primary.place.call_count == 1
        assert budget.remaining(CommentCategory.WARNING) == 0
