from dataclasses import dataclass


@dataclass(frozen=True)
class DiffVersion:
    """Commit triple identifying one merge-request diff version."""

    base_commit_sha: str
    head_commit_sha: str
    start_commit_sha: str
