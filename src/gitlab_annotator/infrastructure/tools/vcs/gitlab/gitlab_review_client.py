from typing import Any
from urllib.parse import quote

import structlog
from tenacity import retry, retry_if_exception, stop_after_attempt

from gitlab_annotator.core.application.ports import ReviewPort
from gitlab_annotator.core.domain.review import DiffVersion, FileDiff, RemoteComment
from gitlab_annotator.core.exceptions import ProviderError
from gitlab_annotator.infrastructure.tools.vcs.gitlab.clients.gitlab_http_client import (
    GitLabHttpClient,
)
from gitlab_annotator.infrastructure.tools.vcs.gitlab.mappers.gitlab_response_mapper import (
    discussions_to_remote_comments,
    to_file_diffs,
    to_latest_diff_version,
    to_remote_comments,
)

logger = structlog.get_logger()


def _is_transient(exc: BaseException) -> bool:
    return isinstance(exc, ProviderError) and exc.retryable


# At most one immediate repeat after a transient failure; not a retry loop.
_lookup_once_more = retry(
    retry=retry_if_exception(_is_transient),
    stop=stop_after_attempt(2),
    reraise=True,
)


class GitLabReviewClient(ReviewPort):
    """GitLab REST v4 implementation of the review port for one project."""

    def __init__(self, http_client: GitLabHttpClient, project_id: str) -> None:
        self._http = http_client
        self._project_id = project_id

    # ── Target resolution ──

    @_lookup_once_more
    def get_merge_request(self, mr_iid: int) -> dict[str, Any]:
        logger.info("Fetching merge request", mr_iid=mr_iid, source_system="GitLab")
        data = self._http.get(self._mr_path(mr_iid))
        if not isinstance(data, dict):
            raise ProviderError(
                provider="GitLab", message=f"Unexpected merge request payload for !{mr_iid}"
            )
        return data

    @_lookup_once_more
    def get_latest_diff_version(self, mr_iid: int) -> DiffVersion | None:
        return to_latest_diff_version(self._http.get(f"{self._mr_path(mr_iid)}/versions"))

    def get_merge_request_diffs(self, mr_iid: int) -> list[FileDiff]:
        return to_file_diffs(self._http.get_paginated(f"{self._mr_path(mr_iid)}/diffs"))

    def get_commit_diffs(self, sha: str) -> list[FileDiff]:
        return to_file_diffs(self._http.get_paginated(f"{self._commit_path(sha)}/diff"))

    # ── Cleanup ──

    def list_merge_request_notes(self, mr_iid: int) -> list[RemoteComment]:
        return to_remote_comments(self._http.get_paginated(f"{self._mr_path(mr_iid)}/notes"))

    def list_merge_request_discussion_notes(self, mr_iid: int) -> list[RemoteComment]:
        discussions = self._http.get_paginated(f"{self._mr_path(mr_iid)}/discussions")
        return discussions_to_remote_comments(discussions)

    def list_commit_discussion_notes(self, sha: str) -> list[RemoteComment]:
        discussions = self._http.get_paginated(f"{self._commit_path(sha)}/discussions")
        return discussions_to_remote_comments(discussions)

    def delete_merge_request_note(self, mr_iid: int, comment: RemoteComment) -> None:
        if comment.discussion_id:
            path = f"{self._mr_path(mr_iid)}/discussions/{comment.discussion_id}/notes/{comment.id}"
        else:
            path = f"{self._mr_path(mr_iid)}/notes/{comment.id}"
        self._http.delete(path)

    def delete_commit_note(self, sha: str, comment: RemoteComment) -> None:
        if not comment.discussion_id:
            raise ProviderError(
                provider="GitLab", message=f"Commit note {comment.id} has no discussion id"
            )
        self._http.delete(
            f"{self._commit_path(sha)}/discussions/{comment.discussion_id}/notes/{comment.id}"
        )

    # ── Emission ──

    def create_merge_request_discussion(
        self, mr_iid: int, body: str, position: dict[str, Any]
    ) -> None:
        self._http.post(
            f"{self._mr_path(mr_iid)}/discussions", {"body": body, "position": position}
        )

    def create_commit_comment(
        self, sha: str, body: str, path: str | None = None, line: int | None = None
    ) -> None:
        payload: dict[str, Any] = {"note": body}
        if path is not None and line is not None:
            payload.update({"path": path, "line": line, "line_type": "new"})
        self._http.post(f"{self._commit_path(sha)}/comments", payload)

    def create_merge_request_note(self, mr_iid: int, body: str) -> None:
        logger.info("Creating merge request note", mr_iid=mr_iid, source_system="GitLab")
        self._http.post(f"{self._mr_path(mr_iid)}/notes", {"body": body})

    # ── Paths ──

    def _project_path(self) -> str:
        return f"projects/{quote(str(self._project_id), safe='')}"

    def _mr_path(self, mr_iid: int) -> str:
        return f"{self._project_path()}/merge_requests/{mr_iid}"

    def _commit_path(self, sha: str) -> str:
        return f"{self._project_path()}/repository/commits/{sha}"
