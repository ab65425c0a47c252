"""Morse code transcoding.

Text is stored and exchanged as Morse signal patterns: each character becomes
a short run of dits (``.``) and dahs (``-``), characters are separated by a
single space and words by ``/``.

The transcoding is deliberately lossy:

* input is upper-cased, so case is not preserved;
* characters outside the table encode to the placeholder ``?``;
* tokens that are not known codes decode to the placeholder ``#``.

``?`` is not itself a valid code, so ``decode(encode("é")) == "#"``.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator, Mapping
from types import MappingProxyType
from typing import Final

WORD_SEPARATOR: Final[str] = "/"
UNKNOWN_CHARACTER: Final[str] = "?"
UNKNOWN_TOKEN: Final[str] = "#"

_WHITESPACE = re.compile(r"\s+")
# Dits, dahs, word separators, the unknown-character placeholder and whitespace.
_SIGNAL_PATTERN = re.compile(r"[.\-/?\s]*")

# Character -> code, in display order.
_DEFAULT_CODES: Final[tuple[tuple[str, str], ...]] = (
    ("A", ".-"), ("B", "-..."), ("C", "-.-."), ("D", "-.."), ("E", "."),
    ("F", "..-."), ("G", "--."), ("H", "...."), ("I", ".."), ("J", ".---"),
    ("K", "-.-"), ("L", ".-.."), ("M", "--"), ("N", "-."), ("O", "---"),
    ("P", ".--."), ("Q", "--.-"), ("R", ".-."), ("S", "..."), ("T", "-"),
    ("U", "..-"), ("V", "...-"), ("W", ".--"), ("X", "-..-"), ("Y", "-.--"),
    ("Z", "--.."),
    ("0", "-----"), ("1", ".----"), ("2", "..---"), ("3", "...--"),
    ("4", "....-"), ("5", "....."), ("6", "-...."), ("7", "--..."),
    ("8", "---.."), ("9", "----."),
    (" ", WORD_SEPARATOR),
    (",", "--..--"), (".", ".-.-.-"), ("?", "..--.."), ("!", "-.-.--"),
    (":", "---..."), ("'", ".----."), ('"', ".-..-."), ("-", "-....-"),
    ("/", "-..-."), ("(", "-.--."), (")", "-.--.-"),
)


class MorseTable:
    """Immutable bidirectional character/code table.

    Construction fails with ``ValueError`` when two characters share a code or
    a character appears twice, so every defined character decodes back to
    itself.
    """

    def __init__(self, codes: Iterable[tuple[str, str]]) -> None:
        by_char: dict[str, str] = {}
        by_code: dict[str, str] = {}
        for char, code in codes:
            if len(char) != 1:
                raise ValueError(f"Table keys must be single characters, got {char!r}")
            if char != char.upper():
                raise ValueError(f"Table keys must be upper-case, got {char!r}")
            if code != WORD_SEPARATOR and (not code or set(code) - {".", "-"}):
                raise ValueError(f"Invalid code {code!r} for {char!r}")
            if char in by_char:
                raise ValueError(f"Duplicate character {char!r} in Morse table")
            if code in by_code:
                raise ValueError(
                    f"Code {code!r} is shared by {by_code[code]!r} and {char!r}"
                )
            by_char[char] = code
            by_code[code] = char

        self._by_char: Mapping[str, str] = MappingProxyType(by_char)
        self._by_code: Mapping[str, str] = MappingProxyType(by_code)

    def __len__(self) -> int:
        return len(self._by_char)

    def __iter__(self) -> Iterator[tuple[str, str]]:
        return iter(self._by_char.items())

    def __contains__(self, char: object) -> bool:
        return char in self._by_char

    def code_for(self, char: str) -> str | None:
        """Return the code for an upper-case character, or None."""
        return self._by_char.get(char)

    def char_for(self, code: str) -> str | None:
        """Return the character for a code, or None."""
        return self._by_code.get(code)

    def encode(self, text: str) -> str:
        """Encode text into space-separated signal patterns."""
        return " ".join(
            self._by_char.get(char, UNKNOWN_CHARACTER) for char in text.upper()
        )

    def decode(self, pattern: str) -> str:
        """Decode whitespace-separated signal patterns into upper-case text."""
        stripped = pattern.strip()
        if not stripped:
            return ""

        out: list[str] = []
        for token in _WHITESPACE.split(stripped):
            if token == WORD_SEPARATOR:
                out.append(" ")
                continue
            out.append(self._by_code.get(token, UNKNOWN_TOKEN))
        return "".join(out)


MORSE_TABLE: Final[MorseTable] = MorseTable(_DEFAULT_CODES)


def is_signal_pattern(value: str) -> bool:
    """Return True if ``value`` only holds characters ``encode`` can emit."""
    return _SIGNAL_PATTERN.fullmatch(value) is not None


def encode(text: str) -> str:
    """Encode ``text`` with the default table."""
    return MORSE_TABLE.encode(text)


def decode(pattern: str) -> str:
    """Decode ``pattern`` with the default table."""
    return MORSE_TABLE.decode(pattern)
