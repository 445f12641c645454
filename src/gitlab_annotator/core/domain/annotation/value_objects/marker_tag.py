"""Ownership marker for comments written by this tool.

A comment is owned when its body starts with the marker; nothing else is
recorded between runs.
"""

MARKER_TAG = "<!-- -[autograding-gitlab-action]- -->"


def is_owned_body(body: str | None) -> bool:
    return bool(body) and body.startswith(MARKER_TAG)


def tag_body(body: str) -> str:
    return f"{MARKER_TAG}\n\n{body}"
