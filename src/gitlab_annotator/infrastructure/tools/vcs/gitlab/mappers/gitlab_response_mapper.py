"""Pure functions mapping GitLab REST payloads into review domain objects."""

from typing import Any

import structlog

from gitlab_annotator.core.domain.review import DiffVersion, FileDiff, RemoteComment

logger = structlog.get_logger()


def to_latest_diff_version(versions: Any) -> DiffVersion | None:
    """GitLab lists merge request versions newest first."""
    if not isinstance(versions, list) or not versions:
        return None
    latest = versions[0]
    if not isinstance(latest, dict):
        return None
    return DiffVersion(
        base_commit_sha=str(latest.get("base_commit_sha") or ""),
        head_commit_sha=str(latest.get("head_commit_sha") or ""),
        start_commit_sha=str(latest.get("start_commit_sha") or ""),
    )


def to_file_diffs(changes: list[Any]) -> list[FileDiff]:
    diffs: list[FileDiff] = []
    for change in changes:
        if not isinstance(change, dict):
            continue
        path = change.get("new_path") or change.get("old_path")
        if not path:
            logger.warning("Skipping diff entry without path", source_system="GitLab")
            continue
        diffs.append(FileDiff(new_path=str(path), diff=str(change.get("diff") or "")))
    return diffs


def to_remote_comments(notes: list[Any], discussion_id: str | None = None) -> list[RemoteComment]:
    comments: list[RemoteComment] = []
    for note in notes:
        if not isinstance(note, dict) or not isinstance(note.get("id"), int):
            continue
        comments.append(
            RemoteComment(
                id=note["id"],
                body=str(note.get("body") or ""),
                discussion_id=discussion_id,
            )
        )
    return comments


def discussions_to_remote_comments(discussions: list[Any]) -> list[RemoteComment]:
    """Flatten discussion threads into their notes, keeping the thread id."""
    comments: list[RemoteComment] = []
    for discussion in discussions:
        if not isinstance(discussion, dict):
            continue
        discussion_id = discussion.get("id")
        notes = discussion.get("notes") or []
        comments.extend(
            to_remote_comments(notes, str(discussion_id) if discussion_id else None)
        )
    return comments
