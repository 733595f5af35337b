"""Core data types: Entry and BlobView."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Entry:
    """The sequence's owned copy of one inserted blob."""

    data: bytes

    @property
    def length(self) -> int:
        """Exact byte length supplied at insertion."""
        return len(self.data)

    def view(self) -> BlobView:
        """Return a borrowed, read-only view over the stored bytes."""
        return BlobView(data=memoryview(self.data), length=len(self.data))


@dataclass(frozen=True, slots=True, eq=False)
class BlobView:
    """Borrowed view of a stored blob: read-only buffer plus its length.

    The view aliases the sequence's storage and never copies it. Use
    ``tobytes()`` when the caller needs to keep the content past the
    sequence's lifetime.
    """

    data: memoryview
    length: int

    def tobytes(self) -> bytes:
        """Copy the viewed bytes out into a new ``bytes`` object."""
        return self.data.tobytes()

    def __bytes__(self) -> bytes:
        return self.tobytes()

    def __len__(self) -> int:
        return self.length

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BlobView):
            return self.length == other.length and self.data == other.data
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self.data == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]
