from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ReviewTarget:
    """The review thread being annotated: a merge request, or a bare commit."""

    commit_sha: str
    mr_iid: int | None = None

    @property
    def is_merge_request(self) -> bool:
        return self.mr_iid is not None

    def describe(self) -> str:
        if self.mr_iid is not None:
            return f"!{self.mr_iid}"
        return self.commit_sha[:8]
