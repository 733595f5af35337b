"""Tests for package-level exports, version, and logger setup."""

import logging
import re

import blobseq


def test_version_is_a_release_string() -> None:
    assert re.fullmatch(r"\d+\.\d+\.\d+", blobseq.__version__)


def test_package_logger_has_null_handler() -> None:
    handlers = logging.getLogger("blobseq").handlers
    assert any(isinstance(handler, logging.NullHandler) for handler in handlers)


def test_public_names_are_exported() -> None:
    for name in blobseq.__all__:
        assert hasattr(blobseq, name)


def test_handle_functions_share_the_method_contract() -> None:
    handle = blobseq.create()
    position = blobseq.insert(handle, b"abc")
    assert handle.get(position) == blobseq.get(handle, position)
    assert len(handle) == blobseq.length(handle)
