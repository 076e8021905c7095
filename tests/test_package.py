"""Tests for the public package surface and diagnostics."""

import string_helper
from string_helper.diagnostics import CollectingObserver, DiagnosticEvent


def test_all_exports_resolve():
    for name in string_helper.__all__:
        assert hasattr(string_helper, name), name

def test_error_hierarchy():
    assert issubclass(string_helper.DumpDecodeError, string_helper.DumpCodecError)
    assert issubclass(string_helper.DumpEncodeError, string_helper.DumpCodecError)
    assert issubclass(string_helper.DumpCodecError, string_helper.StringHelperError)

def test_decode_error_offset_in_message():
    err = string_helper.DumpDecodeError("bad", 3)
    assert err.offset == 3
    assert str(err) == "bad (at byte 3)"
    assert string_helper.DumpDecodeError("bad").offset is None

def test_collecting_observer():
    observer = CollectingObserver()
    observer(DiagnosticEvent(source="x", message="hello"))
    assert observer.events[0].category == "stringHelper"
    observer.clear()
    assert observer.events == []
