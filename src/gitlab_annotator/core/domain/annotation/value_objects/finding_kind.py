from enum import StrEnum


class CommentCategory(StrEnum):
    WARNING = "WARNING"
    COVERAGE = "COVERAGE"


class FindingKind(StrEnum):
    WARNING = "WARNING"
    NO_COVERAGE = "NO_COVERAGE"
    PARTIAL_COVERAGE = "PARTIAL_COVERAGE"
    MUTATION_SURVIVED = "MUTATION_SURVIVED"

    @property
    def category(self) -> CommentCategory:
        """Quota bucket; everything but static-analysis warnings bills to coverage."""
        if self is FindingKind.WARNING:
            return CommentCategory.WARNING
        return CommentCategory.COVERAGE
