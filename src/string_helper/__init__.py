"""string_helper: string utilities and a debug-dump codec."""

from .case import get_path_from_camel_case, lower_first_and_last, to_camel_case
from .compare import compare_values
from .diagnostics import CollectingObserver, DiagnosticEvent
from .dump_codec import decode, decode_multibyte, dump, encode, encode_strict, segment
from .encoding import (
    format_json_compatible,
    is_base64_encoded_string,
    is_hexadecimal_hash,
    is_utf8,
    url_safe_b64_decode,
    url_safe_b64_encode,
)
from .errors import DumpCodecError, DumpDecodeError, DumpEncodeError, StringHelperError
from .formatting import (
    compress_html,
    count_items_in_csv,
    explode_trimmed,
    format_bytes,
    reduce_char_repetitions,
    to_alpha,
    translate,
    translate_plural,
)
from .random_string import get_random_letter, get_random_string
from .search import (
    contains_any_of,
    ends_with,
    get_string_between,
    replace_first,
    replace_last,
    starts_with,
    str_pos_consecutive,
    str_pos_multiple,
)
from .transliterate import replace_special_characters, special_chars_to_ascii, umlauts_to_ascii
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
    to_native,
)
from .wrapping import remove_all_after, remove_all_before, remove_all_between, unwrap, wrap

__all__ = [
    "segment",
    "encode",
    "encode_strict",
    "decode",
    "decode_multibyte",
    "dump",
    "Null",
    "DBool",
    "DInt",
    "DFloat",
    "DString",
    "DEntry",
    "DArray",
    "DObject",
    "DumpValue",
    "to_native",
    "StringHelperError",
    "DumpCodecError",
    "DumpEncodeError",
    "DumpDecodeError",
    "DiagnosticEvent",
    "CollectingObserver",
    "str_pos_consecutive",
    "str_pos_multiple",
    "get_string_between",
    "starts_with",
    "ends_with",
    "contains_any_of",
    "replace_first",
    "replace_last",
    "wrap",
    "unwrap",
    "remove_all_before",
    "remove_all_after",
    "remove_all_between",
    "to_camel_case",
    "get_path_from_camel_case",
    "lower_first_and_last",
    "get_random_string",
    "get_random_letter",
    "url_safe_b64_encode",
    "url_safe_b64_decode",
    "is_utf8",
    "is_base64_encoded_string",
    "is_hexadecimal_hash",
    "format_json_compatible",
    "compare_values",
    "format_bytes",
    "count_items_in_csv",
    "explode_trimmed",
    "compress_html",
    "reduce_char_repetitions",
    "to_alpha",
    "translate",
    "translate_plural",
    "umlauts_to_ascii",
    "replace_special_characters",
    "special_chars_to_ascii",
]
