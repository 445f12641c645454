from abc import ABC, abstractmethod
from typing import Any

from gitlab_annotator.core.domain.review import DiffVersion, FileDiff, RemoteComment


class ReviewPort(ABC):
    """Review-system operations needed to annotate one project.

    Every method raises ProviderError when the remote call fails.
    """

    # ── Target resolution ──

    @abstractmethod
    def get_merge_request(self, mr_iid: int) -> dict[str, Any]:
        """Fetches the merge request object."""

    @abstractmethod
    def get_latest_diff_version(self, mr_iid: int) -> DiffVersion | None:
        """Returns the most recent diff version, or None if GitLab has none yet."""

    @abstractmethod
    def get_merge_request_diffs(self, mr_iid: int) -> list[FileDiff]:
        pass

    @abstractmethod
    def get_commit_diffs(self, sha: str) -> list[FileDiff]:
        pass

    # ── Cleanup ──

    @abstractmethod
    def list_merge_request_notes(self, mr_iid: int) -> list[RemoteComment]:
        pass

    @abstractmethod
    def list_merge_request_discussion_notes(self, mr_iid: int) -> list[RemoteComment]:
        pass

    @abstractmethod
    def list_commit_discussion_notes(self, sha: str) -> list[RemoteComment]:
        pass

    @abstractmethod
    def delete_merge_request_note(self, mr_iid: int, comment: RemoteComment) -> None:
        pass

    @abstractmethod
    def delete_commit_note(self, sha: str, comment: RemoteComment) -> None:
        pass

    # ── Emission ──

    @abstractmethod
    def create_merge_request_discussion(
        self, mr_iid: int, body: str, position: dict[str, Any]
    ) -> None:
        """Opens a threaded discussion anchored at a diff position."""

    @abstractmethod
    def create_commit_comment(
        self, sha: str, body: str, path: str | None = None, line: int | None = None
    ) -> None:
        """Adds a flat comment to a commit, on a new-file line when path and line are given."""

    @abstractmethod
    def create_merge_request_note(self, mr_iid: int, body: str) -> None:
        pass
