"""Tests for CLI helpers: _fmt_inline, _fmt_inspect, _process_line, main."""

import io
import sys

from string_helper.cli import _fmt_inline, _fmt_inspect, _process_line, main
from string_helper.values import DArray, DBool, DEntry, DFloat, DInt, DObject, DString, Null


# ---------------------------------------------------------------------------
# _fmt_inline
# ---------------------------------------------------------------------------

def test_fmt_inline_scalars():
    assert _fmt_inline(Null) == "null"
    assert _fmt_inline(DBool(True)) == "true"
    assert _fmt_inline(DInt(5)) == "5"
    assert _fmt_inline(DFloat(1.5)) == "1.5"
    assert _fmt_inline(DString("abc")) == '"abc"'

def test_fmt_inline_array():
    arr = DArray([DEntry("0", DString("abc")), DEntry("1", DInt(5))])
    assert _fmt_inline(arr) == '[0: "abc", 1: 5]'

def test_fmt_inline_object():
    assert _fmt_inline(DObject("Foo", [DEntry("a", Null)])) == "Foo(1)"


# ---------------------------------------------------------------------------
# _fmt_inspect
# ---------------------------------------------------------------------------

def test_fmt_inspect_empty_array():
    assert _fmt_inspect(DArray()) == "DArray {}"

def test_fmt_inspect_object():
    obj = DObject("Dog", [DEntry("name", DString("Rex")), DEntry("\0*\0age", DInt(3))])
    out = _fmt_inspect(obj)
    assert out.startswith("DObject(Dog) {")
    assert 'name    : "Rex"' in out
    assert "\\0*\\0age: 3" in out

def test_fmt_inspect_scalar():
    assert _fmt_inspect(DString("hi")) == '"hi"'


# ---------------------------------------------------------------------------
# _process_line
# ---------------------------------------------------------------------------

def test_process_line_quit():
    assert _process_line(":q", io.StringIO()) is False
    assert _process_line(":quit", io.StringIO()) is False

def test_process_line_blank():
    buf = io.StringIO()
    assert _process_line("   ", buf) is True
    assert buf.getvalue() == ""

def test_process_line_encode():
    buf = io.StringIO()
    _process_line("e NULL", buf)
    assert buf.getvalue() == "N;\n"

def test_process_line_encode_single_line_dump():
    buf = io.StringIO()
    _process_line('e array(1) {[0]=>string(3) "abc"}', buf)
    assert buf.getvalue() == 'a:1:{i:0;s:3:"abc";}\n'

def test_process_line_decode():
    buf = io.StringIO()
    _process_line("d a:1:{i:0;i:5;}", buf)
    assert buf.getvalue() == "DArray {\n  0: 5\n}\n"

def test_process_line_multibyte_decode():
    buf = io.StringIO()
    _process_line('m s:4:"café";', buf)
    assert buf.getvalue() == '"café"\n'

def test_process_line_decode_error(capsys):
    buf = io.StringIO()
    assert _process_line("d garbage", buf) is True
    assert buf.getvalue() == ""
    assert "Error" in capsys.readouterr().err

def test_process_line_unknown_command(capsys):
    _process_line("x something", io.StringIO())
    assert "Unknown command" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# Batch encoding via ?<< (file)
# ---------------------------------------------------------------------------

def test_batch_file(tmp_path):
    dump_file = tmp_path / "dump.txt"
    dump_file.write_text(
        "array(2) {\n"
        '  ["name"]=>\n'
        '  string(8) "山田太郎"\n'
        '  ["age"]=>\n'
        "  int(36)\n"
        "}\n",
        encoding="utf-8",
    )
    buf = io.StringIO()
    _process_line(f"?<< {dump_file}", buf)
    assert buf.getvalue() == 'a:2:{s:4:"name";s:12:"山田太郎";s:3:"age";i:36;}\n'

def test_batch_missing_file(tmp_path, capsys):
    _process_line(f"?<< {tmp_path / 'missing.txt'}", io.StringIO())
    assert "Error reading" in capsys.readouterr().err


# ---------------------------------------------------------------------------
# Entrypoint smoke test
# ---------------------------------------------------------------------------

def test_main_exits_on_eof():
    old_stdin = sys.stdin
    sys.stdin = io.StringIO("")
    try:
        main()
    finally:
        sys.stdin = old_stdin

def test_main_runs_commands(capsys):
    old_stdin = sys.stdin
    sys.stdin = io.StringIO("e int(7)\n:q\ne NULL\n")
    try:
        main()
    finally:
        sys.stdin = old_stdin
    out = capsys.readouterr().out
    assert "i:7;" in out
    assert "N;" not in out
