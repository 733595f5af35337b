"""blobseq: ordered, append-only container of owned byte blobs."""

import logging

from blobseq.api import create, destroy, get, insert, length
from blobseq.config import SequenceLimits
from blobseq.errors import (
    AllocationError,
    BlobSequenceError,
    ErrorCode,
    InvalidArgumentError,
    OutOfRangeError,
)
from blobseq.sequence import BlobSequence
from blobseq.types import BlobView, Entry

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "AllocationError",
    "BlobSequence",
    "BlobSequenceError",
    "BlobView",
    "Entry",
    "ErrorCode",
    "InvalidArgumentError",
    "OutOfRangeError",
    "SequenceLimits",
    "create",
    "destroy",
    "get",
    "insert",
    "length",
]
