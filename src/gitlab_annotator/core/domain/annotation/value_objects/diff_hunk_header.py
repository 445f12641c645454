from __future__ import annotations

from dataclasses import dataclass

HUNK_MARKER = "@@"


@dataclass(frozen=True)
class DiffHunkHeader:
    """New-file coordinates of a unified diff hunk (`@@ -a,b +c,d @@`)."""

    new_start: int
    new_count: int = 1

    def __post_init__(self) -> None:
        if self.new_start < 0:
            raise ValueError(f"Hunk start must be non-negative, got {self.new_start}")

    @classmethod
    def parse(cls, line: str) -> DiffHunkHeader:
        """Parse the new-file range from the third whitespace-separated field.

        Only the start is mandatory: raises ValueError when the field is
        missing or its start is not a non-negative integer. A missing or
        malformed count reads as 1.
        """
        parts = line.split(" ")
        if len(parts) < 3:
            raise ValueError(f"Hunk header has no new-file range: {line!r}")
        range_parts = parts[2][1:].split(",")
        start = _parse_non_negative(range_parts[0])
        count = _parse_count(range_parts[1]) if len(range_parts) > 1 else 1
        return cls(new_start=start, new_count=count)


def _parse_non_negative(raw: str) -> int:
    if not (raw.isascii() and raw.isdigit()):
        raise ValueError(f"Not a non-negative integer: {raw!r}")
    return int(raw)


def _parse_count(raw: str) -> int:
    if raw.isascii() and raw.isdigit():
        return int(raw)
    return 1
