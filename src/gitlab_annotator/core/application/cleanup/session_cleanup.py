import logging

from gitlab_annotator.core.application.ports import ReviewPort
from gitlab_annotator.core.domain.annotation import is_owned_body
from gitlab_annotator.core.domain.review import RemoteComment, ReviewTarget
from gitlab_annotator.core.exceptions import ProviderError

logger = logging.getLogger(__name__)


class SessionCleanup:
    """Deletes comments left on the review thread by earlier runs.

    Listing errors propagate; delete errors are logged and skipped so the
    emission phase always follows.
    """

    def __init__(self, review: ReviewPort) -> None:
        self._review = review

    def run(self, target: ReviewTarget) -> int:
        owned = [c for c in self._list_comments(target) if is_owned_body(c.body)]
        logger.info(
            "[SessionCleanup] Deleting %d old annotation notes on %s", len(owned), target.describe()
        )
        deleted = 0
        for comment in owned:
            if self._delete(target, comment):
                deleted += 1
        return deleted

    def _list_comments(self, target: ReviewTarget) -> list[RemoteComment]:
        if target.mr_iid is None:
            return self._review.list_commit_discussion_notes(target.commit_sha)
        notes = self._review.list_merge_request_notes(target.mr_iid)
        threaded = self._review.list_merge_request_discussion_notes(target.mr_iid)
        return _unique_by_id([*threaded, *notes])

    def _delete(self, target: ReviewTarget, comment: RemoteComment) -> bool:
        try:
            if target.mr_iid is None:
                self._review.delete_commit_note(target.commit_sha, comment)
            else:
                self._review.delete_merge_request_note(target.mr_iid, comment)
            return True
        except ProviderError as exc:
            logger.warning("[SessionCleanup] Can't delete note %s: %s", comment.id, exc)
            return False


def _unique_by_id(comments: list[RemoteComment]) -> list[RemoteComment]:
    """Keep the first occurrence of each note id; discussion entries come first."""
    seen: dict[int, RemoteComment] = {}
    for comment in comments:
        seen.setdefault(comment.id, comment)
    return list(seen.values())
