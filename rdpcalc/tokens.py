"""Tokens and the stream that reads them from text."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1


class CalculatorError(RuntimeError):
    """Raised for any error while reading or evaluating an expression."""


class Kind(str, Enum):
    """Kinds of token that are not a single operator character."""

    NUMBER = "8"
    QUIT = "q"
    PRINT = ";"
    NAME = "a"
    LET = "L"
    HELP = "?"
    SIN = "s"
    COS = "c"
    SQRT = "@"
    POW = "#"


SYMBOLS = frozenset("(){}!+-*/%=,~&|^")
DIGITS = frozenset("0123456789")
KEYWORDS = {
    "let": Kind.LET,
    "sqrt": Kind.SQRT,
    "pow": Kind.POW,
    "sin": Kind.SIN,
    "cos": Kind.COS,
    "quit": Kind.QUIT,
    "help": Kind.HELP,
}

_SELF_KINDS = {";": Kind.PRINT, "q": Kind.QUIT, "?": Kind.HELP}
_NUMBER = re.compile(r"(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")


def _is_alpha(ch: str) -> bool:
    return ch.isascii() and ch.isalpha()


def _is_word_char(ch: str) -> bool:
    return ch.isascii() and (ch.isalnum() or ch == "_")


@dataclass(frozen=True)
class Token:
    """A token: its kind, and a value for numbers or a name for names."""

    kind: str
    value: float = 0.0
    name: str = ""


class TokenStream:
    """Reads tokens from a string, with room to put one token back."""

    def __init__(self, text: str) -> None:
        self.text = text
        self.pos = 0
        self._buffer: Token | None = None

    def next_char(self) -> str:
        """Return the next raw character, or an empty string at the end."""
        if self.pos >= len(self.text):
            return ""
        ch = self.text[self.pos]
        self.pos += 1
        return ch

    def unread_char(self) -> None:
        """Step back over the last character read."""
        if self.pos > 0:
            self.pos -= 1

    def putback(self, token: Token) -> None:
        """Store ``token`` so that the next ``get`` returns it."""
        self._buffer = token

    def ignore(self, kind: str) -> None:
        """Discard input up to and including the character ``kind``."""
        buffered, self._buffer = self._buffer, None
        if buffered is not None and buffered.kind == kind:
            return
        while ch := self.next_char():
            if ch == kind and not ch.isspace():
                return

    def get(self) -> Token:
        """Read and return the next token."""
        if self._buffer is not None:
            token, self._buffer = self._buffer, None
            return token

        ch = self.next_char()
        while ch.isspace() and ch != "\n":
            ch = self.next_char()

        if not ch:
            raise CalculatorError("Bad token--")
        if ch == "\n":
            return Token(Kind.PRINT)
        if ch in _SELF_KINDS:
            return Token(_SELF_KINDS[ch])
        if ch in SYMBOLS:
            return Token(ch)
        if ch == "." or ch in DIGITS:
            self.unread_char()
            match = _NUMBER.match(self.text, self.pos)
            if match is None:
                raise CalculatorError("Bad token--")
            self.pos = match.end()
            return Token(Kind.NUMBER, float(match.group()))
        if _is_alpha(ch):
            start = self.pos - 1
            while self.pos < len(self.text) and _is_word_char(self.text[self.pos]):
                self.pos += 1
            word = self.text[start:self.pos]
            keyword = KEYWORDS.get(word)
            if keyword is not None:
                return Token(keyword)
            return Token(Kind.NAME, name=word)
        raise CalculatorError("Bad token--")


def narrow_int(value: float) -> int:
    """Convert ``value`` to an int, raising if anything would be lost."""
    try:
        result = int(value)
    except (OverflowError, ValueError):
        raise CalculatorError("info loss") from None
    if result != value or not INT_MIN <= result <= INT_MAX:
        raise CalculatorError("info loss")
    return result