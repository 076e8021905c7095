"""Interactive dump shell.

Provides the ``string-helper-dump`` CLI entry point via ``main()``.
"""

from __future__ import annotations

import logging
import sys
from typing import IO

from .dump_codec import decode, decode_multibyte, encode_strict
from .errors import DumpCodecError
from .values import DArray, DBool, DFloat, DInt, DObject, DString, DumpValue, _Null

logger = logging.getLogger(__name__)

BANNER = "dump shell  (:q to quit  |  e <dump>  d <tagged|dump>  m <tagged>  ?<< <file>)"


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def _fmt_inline(value: DumpValue) -> str:
    """Format a single value for compact one-line display."""
    if isinstance(value, _Null):
        return "null"
    if isinstance(value, DBool):
        return str(value.value).lower()
    if isinstance(value, (DInt, DFloat)):
        return str(value.value)
    if isinstance(value, DString):
        return f'"{value.value}"'
    if isinstance(value, DArray):
        return "[" + ", ".join(f"{e.key}: {_fmt_inline(e.value)}" for e in value.entries) + "]"
    if isinstance(value, DObject):
        return f"{value.class_name}({value.count})"
    return repr(value)


def _fmt_inspect(value: DumpValue) -> str:
    """Pretty-print a value, one entry per line for containers."""
    if isinstance(value, (DArray, DObject)):
        head = "DArray" if isinstance(value, DArray) else f"DObject({value.class_name})"
        if not value.entries:
            return f"{head} {{}}"
        keys = [e.key.replace("\0", "\\0") for e in value.entries]
        width = max(len(k) for k in keys)
        lines = [f"{head} {{"]
        for key, entry in zip(keys, value.entries):
            lines.append(f"  {key:<{width}}: {_fmt_inline(entry.value)}")
        lines.append("}")
        return "\n".join(lines)
    return _fmt_inline(value)


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def _encode_text(text: str, dest: IO[str]) -> None:
    try:
        print(encode_strict(text), file=dest)
    except DumpCodecError as exc:
        logger.debug("encode failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)


def _decode_text(text: str, dest: IO[str], multibyte: bool = False) -> None:
    try:
        value = decode_multibyte(text) if multibyte else decode(text)
    except DumpCodecError as exc:
        logger.debug("decode failed", exc_info=True)
        print(f"Error: {exc}", file=sys.stderr)
        return
    print(_fmt_inspect(value), file=dest)


def _process_line(line: str, dest: IO[str]) -> bool:
    """Process one input line.  Returns False when the session should end."""
    line = line.strip()
    if not line:
        return True

    if line in (":q", ":quit"):
        return False

    if line.startswith("e "):
        _encode_text(line[2:].strip(), dest)
        return True

    if line.startswith("d "):
        _decode_text(line[2:].strip(), dest)
        return True

    if line.startswith("m "):
        _decode_text(line[2:].strip(), dest, multibyte=True)
        return True

    # A file holds one multi-line dump
    if line.startswith("?<< "):
        filepath = line[4:].strip()
        try:
            with open(filepath, encoding="utf-8") as fh:
                content = fh.read()
        except OSError as exc:
            print(f"Error reading '{filepath}': {exc}", file=sys.stderr)
            return True
        _encode_text(content, dest)
        return True

    print(f"Unknown command: {line}", file=sys.stderr)
    return True


# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

def main() -> None:
    """Interactive dump shell (``string-helper-dump`` / ``python -m string_helper.cli``)."""
    print(BANNER)

    while True:
        try:
            line = input("dump> ")
        except EOFError:
            print()
            break
        except KeyboardInterrupt:
            print()
            continue

        if not _process_line(line, sys.stdout):
            break


if __name__ == "__main__":
    main()
