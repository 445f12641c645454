from dataclasses import dataclass


@dataclass(frozen=True)
class RemoteComment:
    """A note already present on the review thread.

    `discussion_id` is set for notes that belong to a threaded discussion.
    """

    id: int
    body: str
    discussion_id: str | None = None
