from dataclasses import dataclass


@dataclass(frozen=True)
class FileDiff:
    """Unified diff text of one file, addressed by its new path."""

    new_path: str
    diff: str
