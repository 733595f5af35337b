"""BlobSequence basics: insert, positional get, limits, and teardown."""

import blobseq
from blobseq import AllocationError, BlobSequence, OutOfRangeError, SequenceLimits

# ---- Method API ----
# The sequence copies every blob; the caller's buffer can be reused right away.

with BlobSequence.create() as seq:
    buffer = bytearray(b"ab")
    seq.insert(buffer)
    buffer[:] = b"zz"
    seq.insert(b"\x00\x01\x00\xff")
    print(f"[BlobSequence] length = {len(seq)}, total_bytes = {seq.total_bytes}")
    for position in range(len(seq)):
        view = seq.get(position)
        print(f"  get({position}) = {view.tobytes()!r} (length={view.length})")
    try:
        seq.get(len(seq))
    except OutOfRangeError as exc:
        print(f"  get({len(seq)}) -> {exc.code.value}: {exc}")

# ---- Handle API ----
# Same contract as free functions taking the sequence handle first.

handle = blobseq.create(SequenceLimits(max_bytes=4))
blobseq.insert(handle, b"cde", 3)
try:
    blobseq.insert(handle, b"fgh")
except AllocationError as exc:
    print(f"\n[handle] insert refused -> {exc.code.value}: {exc}")
print(f"  length() = {blobseq.length(handle)}")
blobseq.destroy(handle)
print(f"  closed after destroy() = {handle.closed}")
