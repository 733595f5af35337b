"""Typed errors for blobseq."""

from enum import Enum


class ErrorCode(str, Enum):
    """Closed set of failure kinds reported by sequence operations."""

    INVALID_ARGUMENT = "invalid_argument"
    OUT_OF_RANGE = "out_of_range"
    ALLOCATION_ERROR = "allocation_error"


class BlobSequenceError(Exception):
    """Base exception for all blobseq errors."""

    code: ErrorCode


class InvalidArgumentError(BlobSequenceError, ValueError):
    """Raised when a handle is absent or closed, or insert input is rejected."""

    code = ErrorCode.INVALID_ARGUMENT


class OutOfRangeError(BlobSequenceError, IndexError):
    """Raised when a position is not within ``[0, count)``."""

    code = ErrorCode.OUT_OF_RANGE

    def __init__(self, position: int, count: int) -> None:
        """Initialize with the requested position and the current count."""
        self.position = position
        self.count = count
        super().__init__(f"Position {position} out of range for sequence of length {count}")


class AllocationError(BlobSequenceError, MemoryError):
    """Raised when storage for a sequence or an entry cannot be obtained."""

    code = ErrorCode.ALLOCATION_ERROR

    def __init__(self, requested: int, reason: str | None = None) -> None:
        """Initialize with the number of bytes requested and an optional reason."""
        self.requested = requested
        self.reason = reason
        message = f"Could not allocate {requested} bytes"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(message)
