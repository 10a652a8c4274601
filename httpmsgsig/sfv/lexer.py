"""Character scanner, size limits and primitive parsers for structured field values."""

from __future__ import annotations

import base64
import binascii
import string
import unicodedata
from dataclasses import dataclass
from typing import Optional

from .values import Token

_ALPHA = frozenset(string.ascii_letters)
_DIGITS = frozenset(string.digits)
_TOKEN_CHARS = _ALPHA | _DIGITS | frozenset("_-.:%*/")
_BASE64_CHARS = _ALPHA | _DIGITS | frozenset("+/=")
_MAX_INTEGER_DIGITS = 15


@dataclass(frozen=True)
class Limits:
    """Size limits applied while parsing; zero disables a limit."""

    max_input_length: int = 0
    max_string_length: int = 0
    max_byte_sequence_length: int = 0
    max_dictionary_members: int = 0
    max_inner_list_members: int = 0
    max_parameters: int = 0
    max_token_length: int = 0


def default_limits() -> Limits:
    """Return limits suited to untrusted header values."""
    return Limits(
        max_input_length=65536,
        max_string_length=8192,
        max_byte_sequence_length=16384,
        max_dictionary_members=128,
        max_inner_list_members=128,
        max_parameters=64,
        max_token_length=256,
    )


def no_limits() -> Limits:
    """Return limits with every check disabled."""
    return Limits()


_ESCAPES = {
    '"': '\\"',
    "\\": "\\\\",
    "\a": "\\a",
    "\b": "\\b",
    "\f": "\\f",
    "\n": "\\n",
    "\r": "\\r",
    "\t": "\\t",
    "\v": "\\v",
}


def _quote(text: str) -> str:
    """Quote text as a double-quoted literal with escapes for unprintable characters."""
    parts = []
    for char in text:
        if char in _ESCAPES:
            parts.append(_ESCAPES[char])
        elif char == " " or (char.isprintable() and unicodedata.category(char)[0] != "Z"):
            parts.append(char)
        elif ord(char) < 0x80:
            parts.append(f"\\x{ord(char):02x}")
        elif ord(char) <= 0xFFFF:
            parts.append(f"\\u{ord(char):04x}")
        else:
            parts.append(f"\\U{ord(char):08x}")
    return '"' + "".join(parts) + '"'


class ParseError(ValueError):
    """A structured field could not be parsed."""

    def __init__(self, offset: int, message: str, context: str = "") -> None:
        self.offset = offset
        self.message = message
        self.context = context
        super().__init__(str(self))

    def __str__(self) -> str:
        return f"parse error at offset {self.offset}: {self.message} (near: {_quote(self.context)})"


def _decode_base64(text: str) -> bytes:
    try:
        return base64.b64decode(text, validate=True)
    except binascii.Error:
        if "=" in text or len(text) % 4 == 1:
            raise
        return base64.b64decode(text + "=" * (-len(text) % 4), validate=True)


class Scanner:
    """Reads a structured field value one character at a time."""

    def __init__(self, data: str, limits: Optional[Limits] = None) -> None:
        self.data = data
        self.offset = 0
        self.limits = default_limits() if limits is None else limits

    def peek(self) -> str:
        """Return the current character, or an empty string at the end."""
        if self.offset >= len(self.data):
            return ""
        return self.data[self.offset]

    def consume(self, expected: str) -> bool:
        """Advance past the current character if it equals ``expected``."""
        if self.peek() == expected and expected:
            self.offset += 1
            return True
        return False

    def skip_ows(self) -> None:
        """Skip spaces and horizontal tabs."""
        while self.peek() in (" ", "\t") and not self.at_eof():
            self.offset += 1

    def skip_sp(self) -> None:
        """Skip spaces only."""
        while not self.at_eof() and self.data[self.offset] == " ":
            self.offset += 1

    def at_eof(self) -> bool:
        """Return True when no input is left."""
        return self.offset >= len(self.data)

    def context(self) -> str:
        """Return up to 40 characters of input around the current offset."""
        start = max(0, self.offset - 20)
        end = min(len(self.data), self.offset + 20)
        snippet = self.data[start:end]
        if start > 0:
            snippet = "..." + snippet
        if end < len(self.data):
            snippet += "..."
        return snippet

    def error(self, message: str) -> ParseError:
        """Build a ParseError located at the current offset."""
        return ParseError(self.offset, message, self.context())

    def check_input_length(self) -> None:
        """Raise ParseError if the whole input exceeds the length limit."""
        size = len(self.data.encode("utf-8"))
        limit = self.limits.max_input_length
        if limit > 0 and size > limit:
            raise self.error(f"input length {size} exceeds limit {limit}")

    def parse_boolean(self) -> bool:
        """Parse ``?0`` or ``?1``."""
        if not self.consume("?"):
            raise self.error("expected '?' at start of boolean")
        char = self.peek()
        if char == "1":
            self.offset += 1
            return True
        if char == "0":
            self.offset += 1
            return False
        raise self.error("expected '0' or '1' after '?'")

    def parse_integer(self) -> int:
        """Parse an optionally negative integer of at most 15 digits."""
        start = self.offset
        self.consume("-")
        digit_start = self.offset
        while not self.at_eof() and self.data[self.offset] in _DIGITS:
            self.offset += 1
        if self.offset == digit_start:
            raise self.error("expected digit in integer")
        if self.offset - digit_start > _MAX_INTEGER_DIGITS:
            raise self.error("integer exceeds 15 digit limit")
        return int(self.data[start:self.offset])

    def parse_string(self) -> str:
        """Parse a quoted string, resolving ``\\"`` and ``\\\\`` escapes."""
        if not self.consume('"'):
            raise self.error("expected '\"' at start of string")
        start = self.offset
        has_escapes = False
        limit = self.limits.max_string_length
        while True:
            if self.at_eof():
                raise self.error("unexpected EOF in string (missing closing quote)")
            char = self.data[self.offset]
            if char == '"':
                raw = self.data[start:self.offset]
                self.offset += 1
                return self._decode_string(raw) if has_escapes else raw
            if char == "\\":
                has_escapes = True
                self.offset += 1
                if self.at_eof():
                    raise self.error("unexpected EOF after backslash")
            elif not 0x20 <= ord(char) <= 0x7E:
                raise self.error("invalid character in string (must be printable ASCII)")
            self.offset += 1
            length = self.offset - start
            if limit > 0 and length > limit:
                raise self.error(f"string length {length} exceeds limit {limit}")

    def _decode_string(self, raw: str) -> str:
        out = []
        limit = self.limits.max_string_length
        chars = iter(raw)
        for char in chars:
            if char == "\\":
                escaped = next(chars, None)
                if escaped is None:
                    raise self.error("unexpected end of string after backslash")
                if escaped not in ('"', "\\"):
                    raise self.error("invalid escape sequence")
                out.append(escaped)
            else:
                out.append(char)
            if limit > 0 and len(out) > limit:
                raise self.error(f"string length {len(out)} exceeds limit {limit}")
        return "".join(out)

    def parse_token(self) -> Token:
        """Parse a token starting with a letter or ``*``."""
        start = self.offset
        if self.at_eof():
            raise self.error("expected token, got EOF")
        first = self.data[self.offset]
        if first not in _ALPHA and first != "*":
            raise self.error("token must start with letter or *")
        self.offset += 1
        while not self.at_eof() and self.data[self.offset] in _TOKEN_CHARS:
            self.offset += 1
        length = self.offset - start
        limit = self.limits.max_token_length
        if limit > 0 and length > limit:
            raise self.error(f"token length {length} exceeds limit {limit}")
        return Token(self.data[start:self.offset])

    def parse_byte_sequence(self) -> bytes:
        """Parse a colon-delimited base64 byte sequence."""
        if not self.consume(":"):
            raise self.error("expected ':' at start of byte sequence")
        start = self.offset
        while not self.at_eof():
            char = self.data[self.offset]
            if char == ":":
                break
            if char not in _BASE64_CHARS:
                raise self.error("invalid character in byte sequence")
            self.offset += 1
        if self.at_eof():
            raise self.error("expected closing ':' for byte sequence")
        encoded = self.data[start:self.offset]
        self.offset += 1
        try:
            decoded = _decode_base64(encoded)
        except (binascii.Error, ValueError) as exc:
            raise self.error(f"invalid base64 in byte sequence: {exc}") from exc
        limit = self.limits.max_byte_sequence_length
        if limit > 0 and len(decoded) > limit:
            raise self.error(f"byte sequence length {len(decoded)} exceeds limit {limit}")
        return decoded