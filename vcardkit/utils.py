from __future__ import annotations

import re
from collections.abc import Iterable

from vobject.icalendar import stringToTextValues

CRLF = "\r\n"

_LINE_BREAK_RE = re.compile(r"[\r\n]")
_CONTROL_RE = re.compile(r"[\x00-\x1f\x7f]")

PREF_TYPE = "pref"


def escape_text(s: object) -> str:
    """Escape text for vCard value context according to RFC 6350 basics.

    Escapes backslashes, commas, semicolons, and newlines. Removes stray CR.
    """
    if s is None:
        return ""
    value = str(s)
    return (
        value.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\r\n", "\\n")
        .replace("\n", "\\n")
        .replace("\r", "")
    )


def uri_value(s: object) -> str:
    """URI values are written as-is; a URI cannot span lines."""
    if s is None:
        return ""
    return _LINE_BREAK_RE.sub("", str(s))


def has_control_chars(s: str) -> bool:
    return _CONTROL_RE.search(s) is not None


def unescape_text(value: str) -> str:
    """Undo :func:`escape_text` for a single, unstructured value."""
    return stringToTextValues(value or "", listSeparator=None)[0]


def split_segments(value: str) -> list[str]:
    """Split a structured value on unescaped semicolons.

    Commas are left escaped so each segment can be split again with
    :func:`split_list`. Trailing empty segments are dropped.
    """
    return stringToTextValues(value or "", listSeparator=";", charList=";")


def split_list(segment: str) -> list[str]:
    """Split one segment on unescaped commas, dropping empty items."""
    return [v for v in stringToTextValues(segment or "") if v]


def join_list(values: Iterable[str]) -> str:
    return ",".join(escape_text(v) for v in values)


def split_types(val: object) -> list[str]:
    if not val:
        return []
    if isinstance(val, str):
        parts = [p.strip() for p in val.split(",") if p.strip()]
    elif isinstance(val, list):
        parts = []
        for x in val:
            parts.extend([p.strip() for p in str(x).split(",") if p.strip()])
    else:
        parts = [str(val).strip()]
    return [p.lower() for p in parts]


def extract_types_from_params(params: Iterable[tuple[str, str]]) -> list[str]:
    types: list[str] = []
    for key, value in params:
        if key.upper() == "TYPE":
            types.extend(t for t in split_types(value) if t != PREF_TYPE)
    return types


def is_preferred(params: Iterable[tuple[str, str]]) -> bool:
    """True when any PREF parameter carries a truthy value (not empty, not 0).

    The vCard 2.1/3.0 spelling, ``TYPE=pref`` or a bare ``PREF``, counts too.
    """
    for key, value in params:
        if key.upper() == "PREF" and str(value).strip() not in ("", "0"):
            return True
        if key.upper() == "TYPE" and PREF_TYPE in split_types(value):
            return True
    return False


__all__ = [
    "CRLF",
    "escape_text",
    "uri_value",
    "has_control_chars",
    "unescape_text",
    "split_segments",
    "split_list",
    "join_list",
    "split_types",
    "extract_types_from_params",
    "is_preferred",
]
