"""Percent-encoding of URL sections with the double-backslash escape."""

from __future__ import annotations

from urllib.parse import quote

from core.templates.models import is_unsafe

ESCAPE_MARK = "\\\\"


def escape_section(text: str, unsafe_chars: frozenset[str]) -> str:
    """Percent-encode unsafe characters of text.

    A character preceded by two backslashes is emitted as is. The two
    backslashes themselves never reach the output.
    """

    chunks = text.split(ESCAPE_MARK)
    while chunks and chunks[-1] == "":
        chunks.pop()
    if not chunks:
        return ""

    parts = [percent_encode(chunks[0], unsafe_chars)]
    for chunk in chunks[1:]:
        parts.append(chunk[:1])
        parts.append(percent_encode(chunk[1:], unsafe_chars))
    return "".join(parts)


def percent_encode(text: str, unsafe_chars: frozenset[str]) -> str:
    """Replace unsafe characters with upper-case %XX of their UTF-8 bytes.

    Undecodable command line bytes (lone surrogates) are encoded as the raw byte.
    """

    return "".join(_encode_char(char) if is_unsafe(char, unsafe_chars) else char for char in text)


def _encode_char(char: str) -> str:
    encoded = quote(char, safe="", errors="surrogateescape")
    if encoded == char:
        # quote never touches unreserved characters such as "~".
        encoded = f"%{ord(char):02X}"
    return encoded
