"""Dump codec: structural debug dumps <-> compact tagged-length text.

A structural dump is the block notation written by a debug-inspection
facility, one construct per line::

    array(2) {
      [0]=>
      string(3) "abc"
      [1]=>
      int(5)
    }

Tagged-length text is the compact form ``a:2:{i:0;s:3:"abc";i:1;i:5;}``.

Encoding is a fixed chain of text-to-text stages (see ``ENCODE_STAGES``).
Each stage consumes the token vocabulary left behind by the previous one, so
the order cannot change.
"""

from __future__ import annotations

import itertools
import math
import re
from collections.abc import Callable, Iterator

from .errors import DumpDecodeError, DumpEncodeError
from .values import (
    DArray,
    DBool,
    DEntry,
    DFloat,
    DInt,
    DObject,
    DString,
    DumpValue,
    Null,
    _Null,
)


_TRIM_CHARS = " \t\n\r\0\x0b"

_KEY_MARKER_RE = re.compile(r"(\[.*?\]=>)")
_TOKEN_START_RE = re.compile(r"(string\(|int\(|float\(|bool\(|array\(|NULL|object\(|})")

_TAGGED_RE = re.compile(r"N;|[bidsaO]:")
_INT_KEY_RE = re.compile(r"0|-?[1-9]\d*")


def _string_token(content: str) -> str:
    """``s:<bytes>:"<content>"`` with the length measured in UTF-8 bytes."""
    return f's:{len(content.encode("utf-8"))}:"{content}"'


# ---------------------------------------------------------------------------
# Segmentation
# ---------------------------------------------------------------------------

def segment(raw: str) -> str:
    """Split a single-line dump into one construct per line.

    Input that already contains a newline is returned unchanged.
    """
    if "\n" in raw:
        return raw
    text = _KEY_MARKER_RE.sub(r"\n\1", raw)
    text = _TOKEN_START_RE.sub(r"\n\1", text)
    return text.strip(_TRIM_CHARS)


# ---------------------------------------------------------------------------
# Stage 1: primitive tags + line joining
# ---------------------------------------------------------------------------

_PRIMITIVE_RULES: list[tuple[re.Pattern[str], Callable[[re.Match[str]], str]]] = [
    (re.compile(r"NULL"), lambda m: "N"),
    (re.compile(r"array\((\d+)\)\s*\{"), lambda m: f"a:{m[1]}:{{"),
    (re.compile(r'string\((\d+)\)\s*"(.*)"'), lambda m: _string_token(m[2])),
    (re.compile(r"int\((-?\d+)\)"), lambda m: f"i:{m[1]}"),
    (re.compile(r"bool\(true\)"), lambda m: "b:1"),
    (re.compile(r"bool\(false\)"), lambda m: "b:0"),
    (re.compile(r"float\(([-+.\w]+)\)"), lambda m: f"d:{m[1]}"),
    (re.compile(r"\[(-?\d+)\]\s*=>"), lambda m: f"i:{m[1]}"),
]

# Handled by the later stages.
_DEFERRED_LINES = [
    re.compile(r'\[".*\]\s*=>'),
    re.compile(r"object\(.*\)\s*\{"),
    re.compile(r"\}"),
]


def _tag_line(line: str, lineno: int) -> str:
    for pattern, replace in _PRIMITIVE_RULES:
        m = pattern.fullmatch(line)
        if m:
            return replace(m)
    if any(p.fullmatch(line) for p in _DEFERRED_LINES):
        return line
    raise DumpEncodeError(f"unrecognized dump construct on line {lineno}: {line!r}")


def tag_primitives(text: str) -> str:
    """Map scalar, array and integer-key lines to tags, then join with ``;``."""
    tagged: list[str] = []
    for lineno, line in enumerate(text.splitlines(), 1):
        line = line.strip()
        if line:
            tagged.append(_tag_line(line, lineno))
    return ";".join(tagged)


# ---------------------------------------------------------------------------
# Stage 2: string member keys
# ---------------------------------------------------------------------------

_STRING_KEY_RE = re.compile(
    r'\s*\["(.*?)"(?::"(.*?)")?(?::(protected|private))?\]\s*=>'
)
_RESIDUAL_KEY_RE = re.compile(r'(?:^|;)\["')


def _mangle_key(m: re.Match[str]) -> str:
    name, owner, visibility = m.group(1, 2, 3)
    if visibility == "protected":
        name = f"\0*\0{name}"
    elif visibility == "private":
        name = f"\0{owner or ''}\0{name}"
    return _string_token(name)


def tag_string_keys(text: str) -> str:
    """Replace ``["key"]=>`` markers with length-prefixed string keys."""
    tagged = _STRING_KEY_RE.sub(_mangle_key, text)
    m = _RESIDUAL_KEY_RE.search(tagged)
    if m:
        raise DumpEncodeError(f"malformed member key at offset {m.start()}")
    return tagged


# ---------------------------------------------------------------------------
# Stage 3: object headers
# ---------------------------------------------------------------------------

# The trailing ";" comes from the line joining in stage 1.
_OBJECT_HEADER_RE = re.compile(r"object\((.*?)\).*?\((\d+)\)\s*\{\s*;")
_RESIDUAL_OBJECT_RE = re.compile(r"(?:^|;)object\(")


def tag_object_headers(text: str) -> str:
    """Replace ``object(Name)#id (n) {`` headers with ``O:len:"Name":n:{``."""
    tagged = _OBJECT_HEADER_RE.sub(
        lambda m: f'O:{len(m[1].encode("utf-8"))}:"{m[1]}":{m[2]}:{{', text
    )
    m = _RESIDUAL_OBJECT_RE.search(tagged)
    if m:
        raise DumpEncodeError(f"malformed object header at offset {m.start()}")
    return tagged


# ---------------------------------------------------------------------------
# Stage 4: delimiter clean-up
# ---------------------------------------------------------------------------

def finalize(text: str) -> str:
    """Drop separators next to braces and terminate a bare scalar."""
    text = text.replace("};", "}").replace("{;", "{")
    if text and not text.endswith(("}", ";")):
        text += ";"
    return text


ENCODE_STAGES: tuple[Callable[[str], str], ...] = (
    tag_primitives,
    tag_string_keys,
    tag_object_headers,
    finalize,
)


def encode_strict(dump_text: str) -> str:
    """Encode a structural dump, raising ``DumpEncodeError`` on bad input."""
    text = segment(dump_text)
    for stage in ENCODE_STAGES:
        text = stage(text)
    return text


def encode(dump_text: str) -> str:
    """Encode a structural dump into tagged-length text.

    Returns ``""`` when the dump is malformed. Callers that need to tell a
    failure from empty input should use ``encode_strict``.
    """
    try:
        return encode_strict(dump_text)
    except DumpEncodeError:
        return ""


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

_INT_RE = re.compile(rb"[-+]?\d+")
_FLOAT_RE = re.compile(rb"[-+]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][-+]?\d+)?")
_FLOAT_SPECIALS = {b"INF": math.inf, b"-INF": -math.inf, b"NAN": math.nan}

# Deepest array or object nesting the decoder accepts.
MAX_DEPTH = 256


class _Parser:
    """Single forward pass over UTF-8 encoded tagged-length text."""

    def __init__(self, data: bytes) -> None:
        self.data = data
        self.pos = 0
        self.depth = 0

    def parse(self) -> DumpValue:
        value = self._value()
        if self.pos != len(self.data):
            raise DumpDecodeError("trailing data after value", self.pos)
        return value

    # -- Low-level readers ----------------------------------------------

    def _peek(self) -> bytes:
        return self.data[self.pos:self.pos + 1]

    def _expect(self, token: bytes) -> None:
        end = self.pos + len(token)
        if self.data[self.pos:end] != token:
            raise DumpDecodeError(f"expected {token.decode()!r}", self.pos)
        self.pos = end

    def _read_until(self, delimiter: bytes) -> bytes:
        end = self.data.find(delimiter, self.pos)
        if end < 0:
            raise DumpDecodeError(f"missing {delimiter.decode()!r}", self.pos)
        chunk = self.data[self.pos:end]
        self.pos = end + len(delimiter)
        return chunk

    def _read_int(self, delimiter: bytes) -> int:
        start = self.pos
        raw = self._read_until(delimiter)
        if not _INT_RE.fullmatch(raw):
            raise DumpDecodeError(f"invalid integer {raw!r}", start)
        return int(raw)

    def _read_count(self, delimiter: bytes) -> int:
        start = self.pos
        count = self._read_int(delimiter)
        if count < 0:
            raise DumpDecodeError(f"negative length {count}", start)
        return count

    def _read_float(self) -> float:
        start = self.pos
        raw = self._read_until(b";")
        if raw in _FLOAT_SPECIALS:
            return _FLOAT_SPECIALS[raw]
        if not _FLOAT_RE.fullmatch(raw):
            raise DumpDecodeError(f"invalid float {raw!r}", start)
        return float(raw)

    def _quoted(self, length: int) -> str:
        self._expect(b'"')
        start = self.pos
        end = start + length
        if end > len(self.data):
            raise DumpDecodeError(
                f"string length {length} exceeds remaining input", start
            )
        self.pos = end
        self._expect(b'"')
        try:
            return self.data[start:end].decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DumpDecodeError(f"invalid UTF-8 in string: {exc.reason}", start) from exc

    # -- Grammar ----------------------------------------------------------

    def _string(self) -> str:
        self._expect(b"s:")
        text = self._quoted(self._read_count(b":"))
        self._expect(b";")
        return text

    def _key(self) -> str:
        tag = self._peek()
        if tag == b"i":
            self._expect(b"i:")
            return str(self._read_int(b";"))
        if tag == b"s":
            return self._string()
        raise DumpDecodeError(f"invalid key tag {tag!r}", self.pos)

    def _entries(self, count: int) -> list[DEntry]:
        self._expect(b"{")
        self.depth += 1
        if self.depth > MAX_DEPTH:
            raise DumpDecodeError(f"nesting too deep (limit {MAX_DEPTH})", self.pos)
        entries: list[DEntry] = []
        for _ in range(count):
            if self._peek() == b"}":
                raise DumpDecodeError(
                    f"container holds fewer than its declared {count} entries", self.pos
                )
            key = self._key()
            entries.append(DEntry(key, self._value()))
        if self._peek() != b"}":
            raise DumpDecodeError(
                f"container holds more than its declared {count} entries", self.pos
            )
        self.pos += 1
        self.depth -= 1
        return entries

    def _value(self) -> DumpValue:
        tag = self._peek()
        if tag == b"N":
            self._expect(b"N;")
            return Null
        if tag == b"b":
            self._expect(b"b:")
            start = self.pos
            raw = self._read_until(b";")
            if raw not in (b"0", b"1"):
                raise DumpDecodeError(f"invalid boolean {raw!r}", start)
            return DBool(raw == b"1")
        if tag == b"i":
            self._expect(b"i:")
            return DInt(self._read_int(b";"))
        if tag == b"d":
            self._expect(b"d:")
            return DFloat(self._read_float())
        if tag == b"s":
            return DString(self._string())
        if tag == b"a":
            self._expect(b"a:")
            return DArray(self._entries(self._read_count(b":")))
        if tag == b"O":
            self._expect(b"O:")
            class_name = self._quoted(self._read_count(b":"))
            self._expect(b":")
            return DObject(class_name, self._entries(self._read_count(b":")))
        if not tag:
            raise DumpDecodeError("unexpected end of input", self.pos)
        raise DumpDecodeError(f"unknown type tag {tag!r}", self.pos)


def decode(text: str) -> DumpValue:
    """Decode tagged-length text (or a structural dump) into a DumpValue.

    Structural dumps are segmented and encoded first. Malformed input of
    either kind raises ``DumpDecodeError``.
    """
    text = text.strip()
    if not _TAGGED_RE.match(text):
        try:
            text = encode_strict(text)
        except DumpEncodeError as exc:
            raise DumpDecodeError(f"not a valid structural dump: {exc}") from exc
    return _Parser(text.encode("utf-8")).parse()


_STRING_VALUE_RE = re.compile(r's:\d+:"(.*?)";', re.S)
_ESCAPED_PROTECTED = "\\0*\\0"


def decode_multibyte(text: str) -> DumpValue:
    """Decode tagged-length text whose string lengths may be wrong.

    Every ``s:<n>:"...";`` length is recomputed from the UTF-8 byte length
    of its content, which repairs producers that counted characters
    instead of bytes.
    """
    text = text.strip().replace(_ESCAPED_PROTECTED, "\0*\0")
    text = _STRING_VALUE_RE.sub(lambda m: _string_token(m[1]) + ";", text)
    return _Parser(text.encode("utf-8")).parse()


# ---------------------------------------------------------------------------
# Rendering back to a structural dump
# ---------------------------------------------------------------------------

def _format_float(value: float) -> str:
    if math.isnan(value):
        return "NAN"
    if math.isinf(value):
        return "INF" if value > 0 else "-INF"
    return repr(value)


def _format_key(key: str) -> str:
    if _INT_KEY_RE.fullmatch(key):
        return f"[{key}]=>"
    if key.startswith("\0*\0"):
        return f'["{key[3:]}":protected]=>'
    if key.startswith("\0") and "\0" in key[1:]:
        owner, name = key[1:].split("\0", 1)
        return f'["{name}":"{owner}":private]=>'
    return f'["{key}"]=>'


def _dump_into(value: DumpValue, lines: list[str], depth: int, ids: Iterator[int]) -> None:
    pad = "  " * depth
    if isinstance(value, _Null):
        lines.append(f"{pad}NULL")
    elif isinstance(value, DBool):
        lines.append(f"{pad}bool({'true' if value.value else 'false'})")
    elif isinstance(value, DInt):
        lines.append(f"{pad}int({value.value})")
    elif isinstance(value, DFloat):
        lines.append(f"{pad}float({_format_float(value.value)})")
    elif isinstance(value, DString):
        lines.append(f'{pad}string({value.length}) "{value.value}"')
    elif isinstance(value, (DArray, DObject)):
        if isinstance(value, DArray):
            lines.append(f"{pad}array({len(value.entries)}) {{")
        else:
            lines.append(f"{pad}object({value.class_name})#{next(ids)} ({value.count}) {{")
        for entry in value.entries:
            lines.append(f"{pad}  {_format_key(entry.key)}")
            _dump_into(entry.value, lines, depth + 1, ids)
        lines.append(f"{pad}}}")
    else:
        raise TypeError(f"not a dump value: {value!r}")


def dump(value: DumpValue) -> str:
    """Render *value* in the structural block notation."""
    lines: list[str] = []
    _dump_into(value, lines, 0, itertools.count(1))
    return "\n".join(lines)
