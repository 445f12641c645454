from __future__ import annotations

from dataclasses import dataclass

from gitlab_annotator.core.exceptions.annotator_error import AnnotatorError


@dataclass(eq=False)
class ProviderError(AnnotatorError):
    """Raised when the review system rejects or fails a remote call."""

    provider: str
    message: str
    retryable: bool = False
    status_code: int | None = None

    def __post_init__(self) -> None:
        super().__init__(self.message, context={"provider": self.provider})

    def __str__(self) -> str:
        code = f" status={self.status_code}" if self.status_code is not None else ""
        return f"{self.provider}: {self.message}{code}"
