"""SequenceLimits: optional allocation budget for a BlobSequence."""

from __future__ import annotations

from dataclasses import dataclass

from blobseq.errors import InvalidArgumentError


def _optional_limit(value: object, *, field_name: str) -> int | None:
    """Validate an optional non-negative integer limit (rejects booleans)."""
    if value is None:
        return None
    if not isinstance(value, int) or isinstance(value, bool):
        msg = f"{field_name} must be an int or None."
        raise InvalidArgumentError(msg)
    if value < 0:
        msg = f"{field_name} must be >= 0."
        raise InvalidArgumentError(msg)
    return value


@dataclass(frozen=True, slots=True)
class SequenceLimits:
    """Upper bounds on what a sequence may hold. ``None`` means unbounded."""

    max_entries: int | None = None
    max_bytes: int | None = None

    def __post_init__(self) -> None:
        """Reject negative or non-integer limits."""
        _optional_limit(self.max_entries, field_name="max_entries")
        _optional_limit(self.max_bytes, field_name="max_bytes")

    @property
    def unbounded(self) -> bool:
        """Return whether neither limit is set."""
        return self.max_entries is None and self.max_bytes is None

    def refusal_reason(self, *, count: int, total_bytes: int, incoming: int) -> str | None:
        """Return why appending ``incoming`` bytes would break the budget, or ``None``."""
        if self.max_entries is not None and count + 1 > self.max_entries:
            return f"max_entries={self.max_entries} reached"
        if self.max_bytes is not None and total_bytes + incoming > self.max_bytes:
            return f"max_bytes={self.max_bytes} exceeded ({total_bytes} stored)"
        return None
