"""Tests for Entry and BlobView."""

import pytest

from blobseq.types import BlobView, Entry


def test_entry_length_matches_data() -> None:
    entry = Entry(data=b"\x00\x01\x00\xff")
    assert entry.length == 4


def test_entry_view_aliases_storage() -> None:
    entry = Entry(data=b"abc")
    view = entry.view()
    assert view.length == 3
    assert view.data.readonly is True
    assert view.data.obj is entry.data


def test_view_is_read_only() -> None:
    view = Entry(data=b"abc").view()
    with pytest.raises(TypeError):
        view.data[0] = 0x7A


def test_view_conversions() -> None:
    view = Entry(data=b"cde").view()
    assert len(view) == 3
    assert bytes(view) == b"cde"
    assert view.tobytes() == b"cde"


def test_view_equality() -> None:
    view = Entry(data=b"ab").view()
    assert view == b"ab"
    assert view == bytearray(b"ab")
    assert view == Entry(data=b"ab").view()
    assert view != b"abc"
    assert view != "ab"


def test_view_is_unhashable() -> None:
    view = BlobView(data=memoryview(b"ab"), length=2)
    with pytest.raises(TypeError):
        hash(view)
