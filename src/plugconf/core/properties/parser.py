"""Parser for line-oriented ``.properties`` text.

Supports ``key=value``, ``key:value`` and ``key value`` entries, ``#`` and
``!`` comment lines, backslash line continuations and the usual escapes
(``\\t``, ``\\n``, ``\\uXXXX`` ...). Later keys overwrite earlier ones.
"""
from __future__ import annotations

import re
from pathlib import Path
from typing import Dict, Iterator, List, Tuple, Union

from plugconf.core.constants import DEFAULT_PROPERTIES_ENCODING
from plugconf.core.exceptions import ReadFailureError

PropertySet = Dict[str, str]

_LINE_BREAK = re.compile(r"\r\n|\r|\n")
_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_COMMENT_MARKERS = "#!"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_HEX_DIGITS = frozenset("0123456789abcdefABCDEF")


def _continues(line: str) -> bool:
    """A line continues when it ends in an odd number of backslashes."""
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _logical_lines(text: str) -> Iterator[str]:
    physical: List[str] = _LINE_BREAK.split(text)
    i = 0
    while i < len(physical):
        line = physical[i].lstrip(_WHITESPACE)
        i += 1
        if not line or line[0] in _COMMENT_MARKERS:
            continue
        parts: List[str] = []
        while _continues(line):
            parts.append(line[:-1])
            if i >= len(physical):
                line = ""
                break
            line = physical[i].lstrip(_WHITESPACE)
            i += 1
        parts.append(line)
        yield "".join(parts)


def _unescape(raw: str) -> str:
    if "\\" not in raw:
        return raw
    out: List[str] = []
    i, n = 0, len(raw)
    while i < n:
        c = raw[i]
        i += 1
        if c != "\\":
            out.append(c)
            continue
        if i >= n:
            break
        c = raw[i]
        i += 1
        if c == "u":
            digits = raw[i:i + 4]
            if len(digits) < 4 or not _HEX_DIGITS.issuperset(digits):
                raise ValueError(f"Malformed \\uxxxx encoding: '\\u{digits}'")
            out.append(chr(int(digits, 16)))
            i += 4
        else:
            out.append(_ESCAPES.get(c, c))
    return "".join(out)


def _split_entry(line: str) -> Tuple[str, str]:
    n = len(line)
    key_len = 0
    value_start = n
    has_separator = False
    preceding_backslash = False
    while key_len < n:
        c = line[key_len]
        if not preceding_backslash and c in _SEPARATORS:
            value_start = key_len + 1
            has_separator = True
            break
        if not preceding_backslash and c in _WHITESPACE:
            value_start = key_len + 1
            break
        preceding_backslash = c == "\\" and not preceding_backslash
        key_len += 1

    while value_start < n:
        c = line[value_start]
        if c not in _WHITESPACE:
            if has_separator or c not in _SEPARATORS:
                break
            has_separator = True
        value_start += 1

    return _unescape(line[:key_len]), _unescape(line[value_start:])


def parse_properties(text: str) -> PropertySet:
    """Parse ``.properties`` text into a key -> value mapping.

    Raises:
        ValueError: On a malformed ``\\uXXXX`` escape.
    """
    properties: PropertySet = {}
    for line in _logical_lines(text):
        key, value = _split_entry(line)
        properties[key] = value
    return properties


def read_text_file(path: Union[str, Path], encoding: str = "utf-8") -> str:
    """Read a whole text file.

    Raises:
        ReadFailureError: If the file cannot be opened or decoded.
    """
    source = str(path)
    try:
        with open(path, "r", encoding=encoding, newline="") as f:
            return f.read()
    except (OSError, ValueError, LookupError) as exc:
        raise ReadFailureError(
            f"Failed to read {source}: {exc}",
            resource=source,
            context={"cause": f"{exc.__class__.__name__}: {exc}"},
        ) from exc


def read_properties_file(path: Union[str, Path], encoding: str = DEFAULT_PROPERTIES_ENCODING) -> PropertySet:
    """Read and parse a ``.properties`` file.

    Raises:
        ReadFailureError: If the file cannot be read, decoded or parsed.
    """
    text = read_text_file(path, encoding=encoding)
    try:
        return parse_properties(text)
    except ValueError as exc:
        raise ReadFailureError(
            f"Failed to parse {path}: {exc}",
            resource=str(path),
            context={"cause": f"{exc.__class__.__name__}: {exc}"},
        ) from exc


__all__ = ["PropertySet", "parse_properties", "read_text_file", "read_properties_file"]
