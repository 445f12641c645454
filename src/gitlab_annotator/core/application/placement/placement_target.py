from abc import ABC, abstractmethod

from gitlab_annotator.core.domain.annotation import Finding, PlacementResult


class PlacementTarget(ABC):
    """Where a rendered finding can be attached on the review system."""

    @property
    @abstractmethod
    def placed_result(self) -> PlacementResult:
        """Outcome reported when place() succeeds."""

    @abstractmethod
    def place(self, finding: Finding, body: str) -> None:
        """Attach body at the finding's start line. Raises ProviderError on rejection."""
