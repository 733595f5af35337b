"""Handle-style functions over BlobSequence.

Each function takes the sequence handle as its first argument and rejects an
absent (``None``) handle with ``InvalidArgumentError``, so callers that pass
handles around can use one uniform call contract.
"""

from __future__ import annotations

from blobseq.config import SequenceLimits
from blobseq.errors import InvalidArgumentError
from blobseq.sequence import BlobSequence
from blobseq.types import BlobView


def _require_handle(sequence: BlobSequence | None) -> BlobSequence:
    if sequence is None:
        msg = "sequence handle must not be None."
        raise InvalidArgumentError(msg)
    if not isinstance(sequence, BlobSequence):
        msg = f"sequence must be a BlobSequence; got {type(sequence).__name__}."
        raise InvalidArgumentError(msg)
    return sequence


def create(limits: SequenceLimits | None = None) -> BlobSequence:
    """Create a new, empty sequence."""
    return BlobSequence.create(limits)


def insert(
    sequence: BlobSequence | None,
    data: object,
    length: int | None = None,
) -> int:
    """Append a copy of ``data`` (or its first ``length`` bytes); return its position."""
    return _require_handle(sequence).insert(data, length)


def get(sequence: BlobSequence | None, position: int) -> BlobView:
    """Return a borrowed view of the entry at ``position``."""
    return _require_handle(sequence).get(position)


def length(sequence: BlobSequence | None) -> int:
    """Return the number of entries in ``sequence``."""
    return _require_handle(sequence).length()


def destroy(sequence: BlobSequence | None) -> None:
    """Release every entry and invalidate the handle."""
    _require_handle(sequence).destroy()
