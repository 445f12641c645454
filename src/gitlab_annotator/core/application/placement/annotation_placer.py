import logging
from collections.abc import Iterable

from gitlab_annotator.core.application.placement.placement_target import PlacementTarget
from gitlab_annotator.core.application.tools.comment_formatter import format_finding
from gitlab_annotator.core.domain.annotation import (
    CommentBudget,
    Finding,
    PlacementResult,
    PlacementTally,
)
from gitlab_annotator.core.exceptions import ProviderError

logger = logging.getLogger(__name__)


class AnnotationPlacer:
    """Places each finding once: primary target first, then the optional fallback.

    A rejected placement never stops the loop; it is logged and reported as
    SUPPRESSED (no fallback available) or FAILED (fallback rejected too).
    """

    def __init__(
        self,
        primary: PlacementTarget,
        budget: CommentBudget,
        link_base: str,
        fallback: PlacementTarget | None = None,
        include_details: bool = True,
    ) -> None:
        self._primary = primary
        self._fallback = fallback
        self._budget = budget
        self._link_base = link_base
        self._include_details = include_details

    def place_all(self, findings: Iterable[Finding]) -> PlacementTally:
        tally = PlacementTally()
        for finding in findings:
            tally.record(self.place(finding))
        logger.info("[AnnotationPlacer] Placement finished: %s", tally.as_dict())
        return tally

    def place(self, finding: Finding) -> PlacementResult:
        category = finding.category
        if not self._budget.allow(category):
            logger.debug(
                "[AnnotationPlacer] %s quota exhausted, skipping %s", category, finding.location
            )
            return PlacementResult.SUPPRESSED
        self._budget.consume(category)

        body = format_finding(finding, self._link_base, self._include_details)
        try:
            self._primary.place(finding, body)
            return self._primary.placed_result
        except ProviderError as exc:
            logger.warning(
                "[AnnotationPlacer] Can't place comment for %s: %s", finding.location, exc
            )
        return self._place_fallback(finding, body)

    def _place_fallback(self, finding: Finding, body: str) -> PlacementResult:
        if self._fallback is None:
            logger.info("[AnnotationPlacer] No fallback for %s, comment suppressed", finding.location)
            return PlacementResult.SUPPRESSED
        try:
            self._fallback.place(finding, body)
            return self._fallback.placed_result
        except ProviderError as exc:
            logger.warning(
                "[AnnotationPlacer] Can't create fallback comment for %s: %s",
                finding.location,
                exc,
            )
            return PlacementResult.FAILED
