"""BlobSequence: append-only, position-addressed container of owned byte blobs."""

from __future__ import annotations

import logging
import operator
from typing import TYPE_CHECKING

from blobseq.config import SequenceLimits
from blobseq.errors import AllocationError, InvalidArgumentError, OutOfRangeError
from blobseq.types import BlobView, Entry

if TYPE_CHECKING:
    from types import TracebackType

logger = logging.getLogger(__name__)


def _copy_bytes(view: memoryview, length: int) -> bytes:
    """Copy the first ``length`` bytes of ``view`` into a new ``bytes`` object."""
    with view[:length] as chunk:
        return chunk.tobytes()


def _open_byte_view(data: object) -> memoryview:
    """Validate insert input and open a flat unsigned-byte view over it.

    The caller owns the returned view and must release it; any intermediate
    view is released here.
    """
    if data is None:
        msg = "data must not be None."
        raise InvalidArgumentError(msg)
    if isinstance(data, str):
        msg = "data must be bytes-like, not str; encode it first."
        raise InvalidArgumentError(msg)
    try:
        view = memoryview(data)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        msg = f"data must be bytes-like; got {type(data).__name__}."
        raise InvalidArgumentError(msg) from exc
    if view.format == "B" and view.ndim == 1:
        return view
    with view:
        try:
            return view.cast("B")
        except (TypeError, ValueError) as exc:
            msg = "data must be a contiguous buffer."
            raise InvalidArgumentError(msg) from exc


def _resolve_length(length: object, available: int) -> int:
    """Validate the requested copy length against the bytes available."""
    if length is None:
        length = available
    if not isinstance(length, int) or isinstance(length, bool):
        msg = f"length must be an int or None; got {type(length).__name__}."
        raise InvalidArgumentError(msg)
    if length <= 0:
        msg = f"length must be > 0; got {length}."
        raise InvalidArgumentError(msg)
    if length > available:
        msg = f"length {length} exceeds the {available} bytes supplied."
        raise InvalidArgumentError(msg)
    return length


class BlobSequence:
    """Ordered, append-only sequence of owned byte blobs.

    Every insert deep-copies the caller's bytes, so the caller may reuse its
    buffer as soon as the call returns. ``get`` hands back a borrowed
    :class:`BlobView` aliasing the stored copy. Failed calls never leave a
    partial entry behind.

    Not thread-safe: callers sharing one instance must serialize access.
    """

    __slots__ = ("_closed", "_entries", "_limits", "_total_bytes")

    def __init__(self, limits: SequenceLimits | None = None) -> None:
        """Initialize an empty sequence with an optional allocation budget."""
        if limits is not None and not isinstance(limits, SequenceLimits):
            msg = f"limits must be a SequenceLimits or None; got {type(limits).__name__}."
            raise InvalidArgumentError(msg)
        self._entries: list[Entry] = []
        self._total_bytes = 0
        self._limits = limits if limits is not None else SequenceLimits()
        self._closed = False

    @classmethod
    def create(cls, limits: SequenceLimits | None = None) -> BlobSequence:
        """Create a new, empty sequence.

        Raises ``AllocationError`` if the container itself cannot be allocated.
        """
        try:
            sequence = cls(limits)
        except MemoryError as exc:
            raise AllocationError(0, "sequence storage unavailable") from exc
        logger.debug("Created blob sequence (limits=%s)", sequence._limits)
        return sequence

    @property
    def closed(self) -> bool:
        """Return whether ``destroy`` has been called."""
        return self._closed

    @property
    def limits(self) -> SequenceLimits:
        """Return the allocation budget this sequence enforces."""
        return self._limits

    @property
    def total_bytes(self) -> int:
        """Return the sum of all stored entry lengths."""
        self._ensure_open()
        return self._total_bytes

    def _ensure_open(self) -> None:
        if self._closed:
            msg = "sequence has been destroyed."
            raise InvalidArgumentError(msg)

    def insert(self, data: object, length: int | None = None) -> int:
        """Append a copy of ``data`` and return the new entry's position.

        ``length`` defaults to the full size of ``data``; when given, only the
        first ``length`` bytes are copied. The sequence is left unchanged if
        any validation or allocation step fails, and ``data`` is no longer
        exported once the call returns or raises.
        """
        self._ensure_open()
        with _open_byte_view(data) as view:
            length = _resolve_length(length, view.nbytes)

            reason = self._limits.refusal_reason(
                count=len(self._entries),
                total_bytes=self._total_bytes,
                incoming=length,
            )
            if reason is not None:
                logger.warning("Refused insert of %d bytes: %s", length, reason)
                raise AllocationError(length, reason)

            try:
                entry = Entry(data=_copy_bytes(view, length))
                self._entries.append(entry)
            except MemoryError as exc:
                logger.warning("Refused insert of %d bytes: out of memory", length)
                raise AllocationError(length, "out of memory") from exc

        self._total_bytes += entry.length
        return len(self._entries) - 1

    def get(self, position: int) -> BlobView:
        """Return a borrowed view of the entry at zero-based ``position``.

        Any integer-like position (one implementing ``__index__``) is accepted;
        ``bool`` is not.
        """
        self._ensure_open()
        if isinstance(position, bool):
            msg = "position must be an int; got bool."
            raise InvalidArgumentError(msg)
        try:
            index = operator.index(position)
        except TypeError as exc:
            msg = f"position must be an int; got {type(position).__name__}."
            raise InvalidArgumentError(msg) from exc
        count = len(self._entries)
        if index < 0 or index >= count:
            raise OutOfRangeError(index, count)
        return self._entries[index].view()

    def length(self) -> int:
        """Return the number of stored entries."""
        self._ensure_open()
        return len(self._entries)

    def destroy(self) -> None:
        """Release every entry and invalidate this handle."""
        self._ensure_open()
        count = len(self._entries)
        self._entries.clear()
        self._total_bytes = 0
        self._closed = True
        logger.debug("Destroyed blob sequence with %d entries", count)

    def __len__(self) -> int:
        return self.length()

    def __enter__(self) -> BlobSequence:
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if not self._closed:
            self.destroy()

    def __repr__(self) -> str:
        if self._closed:
            return f"{type(self).__name__}(<destroyed>)"
        return f"{type(self).__name__}(entries={len(self._entries)}, total_bytes={self._total_bytes})"
