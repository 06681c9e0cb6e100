from __future__ import annotations

import logging
import os
import re
from pathlib import Path
from typing import Iterable, Iterator, Tuple

from contracts.errors import MissingFileError, PathLike
from contracts.schemas import RawProperties

logger = logging.getLogger(__name__)

# Wrapper properties are written by java.util.Properties.store(), which emits ISO-8859-1.
PROPERTIES_ENCODING = "latin-1"

_WHITESPACE = " \t\f"
_SEPARATORS = "=:"
_ESCAPES = {"t": "\t", "n": "\n", "r": "\r", "f": "\f"}
_LINE_BREAK = re.compile(r"\r\n|\r|\n")


def _ends_with_continuation(line: str) -> bool:
    trailing = len(line) - len(line.rstrip("\\"))
    return trailing % 2 == 1


def _logical_lines(natural_lines: Iterable[str]) -> Iterator[str]:
    pending: list[str] = []
    for raw in natural_lines:
        line = raw.lstrip(_WHITESPACE)
        if not pending:
            if not line or line[0] in "#!":
                continue
        if _ends_with_continuation(line):
            pending.append(line[:-1])
            continue
        pending.append(line)
        yield "".join(pending)
        pending = []
    if pending:
        yield "".join(pending)


def _unescape(text: str) -> str:
    out: list[str] = []
    i = 0
    while i < len(text):
        c = text[i]
        i += 1
        if c != "\\" or i >= len(text):
            out.append(c)
            continue
        c = text[i]
        i += 1
        if c == "u":
            digits = text[i : i + 4]
            if len(digits) != 4 or any(d not in "0123456789abcdefABCDEF" for d in digits):
                raise ValueError(f"Malformed \\uxxxx encoding: \\u{digits}")
            out.append(chr(int(digits, 16)))
            i += 4
        else:
            out.append(_ESCAPES.get(c, c))
    return "".join(out)


def _split_entry(line: str) -> Tuple[str, str]:
    key_end = len(line)
    value_start = len(line)
    has_separator = False
    escaped = False
    for idx, c in enumerate(line):
        if escaped:
            escaped = False
            continue
        if c == "\\":
            escaped = True
            continue
        if c in _SEPARATORS or c in _WHITESPACE:
            key_end = idx
            has_separator = c in _SEPARATORS
            value_start = idx + 1
            break

    while value_start < len(line):
        c = line[value_start]
        if c not in _WHITESPACE:
            if has_separator or c not in _SEPARATORS:
                break
            has_separator = True
        value_start += 1

    return _unescape(line[:key_end]), _unescape(line[value_start:])


def parse_properties(text: str) -> RawProperties:
    properties: RawProperties = {}
    for line in _logical_lines(_LINE_BREAK.split(text)):
        key, value = _split_entry(line)
        properties[key] = value
    return properties


def load_properties(path: PathLike) -> RawProperties:
    """Read a properties file verbatim; a missing file raises MissingFileError."""
    file = Path(os.fspath(path))
    if not file.is_file():
        raise MissingFileError(path)
    properties = parse_properties(file.read_text(encoding=PROPERTIES_ENCODING))
    logger.debug("loaded %d properties from %s", len(properties), file)
    return properties
