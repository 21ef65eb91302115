# topmark:header:start
#
#   project      : Implementor
#   file         : encoding.py
#   file_relpath : src/implementor/codegen/encoding.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Encoding normalization for generated source text.

Generated units are written as UTF-8, but every character at or above U+0080
that occurs inside a string literal or a comment is replaced by its escape
sequence (``\\uXXXX``, or ``\\UXXXXXXXX`` outside the Basic Multilingual Plane),
so that literal text survives any downstream tool that misreads the encoding.
Identifiers are left untouched: Python identifiers may legitimately be
non-ASCII and have no escape form.

Raw string literals are left as they are, since an escape sequence would change
their value. Text that does not tokenize is escaped everywhere.
"""

from __future__ import annotations

import io
import tokenize
from typing import TYPE_CHECKING, Final

from implementor.config.logging import get_logger

if TYPE_CHECKING:
    from implementor.config.logging import ImplementorLogger

logger: ImplementorLogger = get_logger(__name__)

_LITERAL_TOKENS: Final[frozenset[int]] = frozenset(
    t
    for t in (
        tokenize.STRING,
        tokenize.COMMENT,
        getattr(tokenize, "FSTRING_MIDDLE", None),  # Python 3.12+
    )
    if t is not None
)

_BMP_LIMIT: Final[int] = 0xFFFF


def escape_char(char: str) -> str:
    """Return the escape sequence of a single non-ASCII character.

    Args:
        char (str): A single character.

    Returns:
        str: ``\\uXXXX`` (upper-case hex) or ``\\UXXXXXXXX`` above the BMP.
    """
    code_point = ord(char)
    if code_point > _BMP_LIMIT:
        return f"\\U{code_point:08X}"
    return f"\\u{code_point:04X}"


def escape_all(text: str) -> str:
    """Escape every non-ASCII character of ``text``."""
    return "".join(char if char.isascii() else escape_char(char) for char in text)


def normalize(text: str) -> str:
    """Escape non-ASCII characters inside string literals and comments.

    Args:
        text (str): Python source text.

    Returns:
        str: The normalized text. Pure ASCII input is returned unchanged.
    """
    if text.isascii():
        return text
    try:
        spans = literal_spans(text)
    except (tokenize.TokenError, SyntaxError) as exc:
        logger.debug("Source does not tokenize (%s); escaping all non-ASCII text", exc)
        return escape_all(text)

    parts: list[str] = []
    cursor = 0
    for start, end in spans:
        parts.append(text[cursor:start])
        parts.append(escape_all(text[start:end]))
        cursor = end
    parts.append(text[cursor:])
    return "".join(parts)


def literal_spans(text: str) -> list[tuple[int, int]]:
    """Return the ``(start, end)`` offsets of every escapable token in ``text``.

    Token positions are located by scanning forward for each non-blank token's
    text, which keeps offsets in characters on every interpreter version.

    Raises:
        tokenize.TokenError: If ``text`` is not complete Python source.
        SyntaxError: If ``text`` contains an invalid token.
    """
    spans: list[tuple[int, int]] = []
    cursor = 0
    for token in tokenize.generate_tokens(io.StringIO(text).readline):
        if not token.string or token.string.isspace():
            continue
        start = text.find(token.string, cursor)
        if start < 0:
            raise tokenize.TokenError(f"Token {token.string!r} not found", token.start)
        cursor = start + len(token.string)
        if token.type in _LITERAL_TOKENS and not _is_raw(token):
            spans.append((start, cursor))
    return spans


def _is_raw(token: tokenize.TokenInfo) -> bool:
    if token.type != tokenize.STRING:
        return False
    quote = min(i for i in (token.string.find('"'), token.string.find("'")) if i >= 0)
    return "r" in token.string[:quote].lower()
