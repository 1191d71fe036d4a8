"""Token definitions for the lexer.

This module defines the `TokenKind` enum for all token kinds recognized by
the tokenizer, a small immutable `Token` dataclass holding a kind and the raw
lexeme, and the static lookup tables (keywords and symbols) the tokenizer
classifies text against. Tokens are produced one at a time by the tokenizer
and consumed immediately by the parser.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping


class TokenKind(Enum):
    UNKNOWN = auto()

    IDENTIFIER = auto()

    # Keywords
    FN = auto()
    MUT = auto()
    IF = auto()
    ELSE = auto()

    # Literals
    INTEGER = auto()
    FLOAT = auto()
    STRING = auto()

    # Brackets and punctuation
    LEFT_CURLY = auto()
    RIGHT_CURLY = auto()
    LEFT_PAREN = auto()
    RIGHT_PAREN = auto()
    LEFT_BRACKET = auto()
    RIGHT_BRACKET = auto()
    DOT = auto()
    COMMA = auto()
    COLON = auto()
    SEMI = auto()

    # Assignment
    DECL_ASSIGN = auto()
    ASSIGN = auto()

    # Arithmetic operators
    PLUS = auto()
    MINUS = auto()
    TIMES = auto()
    DIVIDED_BY = auto()

    # Comparison and logical operators
    EQUALS = auto()
    NOT = auto()
    NOT_EQUALS = auto()
    GREATER_THAN = auto()
    GREATER_OR_EQUALS = auto()
    LOWER_THAN = auto()
    LOWER_OR_EQUALS = auto()
    OR = auto()
    AND = auto()

    # Bitwise operators
    BIT_AND = auto()
    BIT_OR = auto()
    BIT_XOR = auto()
    BIT_NOT = auto()

    def __str__(self) -> str:
        return self.name


KEYWORDS: Mapping[str, TokenKind] = MappingProxyType(
    {
        "fn": TokenKind.FN,
        "mut": TokenKind.MUT,
        "if": TokenKind.IF,
        "else": TokenKind.ELSE,
    }
)

# Single-character spellings. `:` `=` `>` `<` `!` `&` `|` may be widened to a
# two-character form listed in WIDENED_SYMBOLS.
SYMBOLS: Mapping[str, TokenKind] = MappingProxyType(
    {
        "{": TokenKind.LEFT_CURLY,
        "}": TokenKind.RIGHT_CURLY,
        "(": TokenKind.LEFT_PAREN,
        ")": TokenKind.RIGHT_PAREN,
        "[": TokenKind.LEFT_BRACKET,
        "]": TokenKind.RIGHT_BRACKET,
        ".": TokenKind.DOT,
        ",": TokenKind.COMMA,
        ":": TokenKind.COLON,
        ";": TokenKind.SEMI,
        "=": TokenKind.ASSIGN,
        "+": TokenKind.PLUS,
        "-": TokenKind.MINUS,
        "*": TokenKind.TIMES,
        "/": TokenKind.DIVIDED_BY,
        "!": TokenKind.NOT,
        ">": TokenKind.GREATER_THAN,
        "<": TokenKind.LOWER_THAN,
        "&": TokenKind.BIT_AND,
        "|": TokenKind.BIT_OR,
        "^": TokenKind.BIT_XOR,
        "~": TokenKind.BIT_NOT,
    }
)

WIDENED_SYMBOLS: Mapping[str, TokenKind] = MappingProxyType(
    {
        ":=": TokenKind.DECL_ASSIGN,
        "==": TokenKind.EQUALS,
        "!=": TokenKind.NOT_EQUALS,
        ">=": TokenKind.GREATER_OR_EQUALS,
        "<=": TokenKind.LOWER_OR_EQUALS,
        "&&": TokenKind.AND,
        "||": TokenKind.OR,
    }
)

# Canonical source spelling of every keyword and symbol kind.
SPELLINGS: Mapping[TokenKind, str] = MappingProxyType(
    {kind: text for table in (KEYWORDS, SYMBOLS, WIDENED_SYMBOLS) for text, kind in table.items()}
)


@dataclass(frozen=True)
class Token:
    kind: TokenKind
    text: str
    # Source position of the first character (1-based). Informational only.
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    def __repr__(self) -> str:
        return f"Token({self.kind}, {repr(self.text)})"

    @property
    def location(self) -> str:
        return f"line {self.line}, column {self.column}"

    def describe(self) -> str:
        """Human-readable summary used in error messages."""
        if self.kind == TokenKind.UNKNOWN:
            return f"unrecognized input {self.text!r} at {self.location}"
        return f"{self.kind} {self.text!r} at {self.location}"
