"""
Tokenizer for the `ez` language.

Overview:
- This module implements a small hand-written, pull-based lexical analyzer.
    Each call to `Tokenizer.tokenize()` scans exactly one token from the
    source text and returns it, or returns `None` once the input is exhausted
    (and keeps returning `None` afterwards).
- It recognizes number literals, identifiers and the keywords `fn`, `mut`,
    `if`, `else`, double-quoted strings, and the punctuation/operator symbols
    listed in `tokens.SYMBOLS`, widening `:` `=` `!` `<` `>` `&` `|` to their
    two-character forms (`:=`, `==`, `!=`, `<=`, `>=`, `&&`, `||`).

Examples:
    Input:  'f := fn() { x := 1; }'
    Tokens: IDENTIFIER('f'), DECL_ASSIGN(':='), FN('fn'), LEFT_PAREN('('), ...

Implementation notes:
- The tokenizer never fails. Unterminated strings and unrecognized characters
    come back as `UNKNOWN` tokens carrying the offending text and position;
    the parser rejects them wherever a specific kind is required.
- Number runs are not validated: `1.2.3` is a single `FLOAT` token and the
    parser reports it when converting the literal.
- Identifiers continue over ASCII letters and digits only. An underscore is
    accepted as the first character but ends the run anywhere else, so
    `my_var` scans as `my` followed by `_var`.
"""

from __future__ import annotations
from typing import Iterator, List, Optional
from tokens import KEYWORDS, SYMBOLS, WIDENED_SYMBOLS, Token, TokenKind


def _is_digit(c: Optional[str]) -> bool:
    return c is not None and "0" <= c <= "9"


def _is_letter(c: Optional[str]) -> bool:
    return c is not None and ("a" <= c <= "z" or "A" <= c <= "Z")


def _is_alnum(c: Optional[str]) -> bool:
    return _is_letter(c) or _is_digit(c)


def _is_number_char(c: Optional[str]) -> bool:
    return _is_digit(c) or c == "."


class Tokenizer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1
        self.current_char = self.text[self.pos] if self.text else None

    def __iter__(self) -> Iterator[Token]:
        while True:
            token = self.tokenize()
            if token is None:
                return
            yield token

    def advance(self) -> None:
        """Advance to next character."""
        if self.current_char is None:
            return

        if self.current_char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        self.pos += 1
        if self.pos < len(self.text):
            self.current_char = self.text[self.pos]
        else:
            self.current_char = None

    def peek_char(self) -> Optional[str]:
        """Look at next character without consuming it."""
        next_pos = self.pos + 1
        if next_pos < len(self.text):
            return self.text[next_pos]
        return None

    def skip_whitespace(self) -> None:
        while self.current_char is not None and self.current_char.isspace():
            self.advance()

    def starts_number(self) -> bool:
        # A lone `.` is the DOT symbol; it only opens a number when another
        # number character follows.
        if _is_digit(self.current_char):
            return True
        return self.current_char == "." and _is_number_char(self.peek_char())

    def number(self, line: int, column: int) -> Token:
        """Scan a maximal run of digits and dots."""
        result = []
        kind = TokenKind.INTEGER

        while _is_number_char(self.current_char):
            if self.current_char == ".":
                kind = TokenKind.FLOAT
            result.append(self.current_char)
            self.advance()

        return Token(kind, "".join(result), line, column)

    def identifier(self, line: int, column: int) -> Token:
        """Scan an identifier and map it to a keyword kind if it is one."""
        result = [self.current_char]
        self.advance()

        while _is_alnum(self.current_char):
            result.append(self.current_char)
            self.advance()

        text = "".join(result)
        return Token(KEYWORDS.get(text, TokenKind.IDENTIFIER), text, line, column)

    def string(self, line: int, column: int) -> Token:
        """Scan a double-quoted string literal (no escape sequences)."""
        result = []
        self.advance()  # Consume opening '"'

        while self.current_char is not None and self.current_char != '"':
            result.append(self.current_char)
            self.advance()

        if self.current_char is None:
            # Unterminated: hand back what was read so far.
            return Token(TokenKind.UNKNOWN, "".join(result), line, column)

        self.advance()  # Consume closing '"'
        return Token(TokenKind.STRING, "".join(result), line, column)

    def symbol(self, line: int, column: int) -> Token:
        """Scan a one- or two-character operator/punctuation symbol."""
        first = self.current_char
        widened = first + (self.peek_char() or "")
        if widened in WIDENED_SYMBOLS:
            self.advance()
            self.advance()
            return Token(WIDENED_SYMBOLS[widened], widened, line, column)

        self.advance()
        return Token(SYMBOLS[first], first, line, column)

    def unknown(self, line: int, column: int) -> Token:
        """Collect an unrecognized run up to the next whitespace."""
        result = []
        while self.current_char is not None and not self.current_char.isspace():
            result.append(self.current_char)
            self.advance()
        return Token(TokenKind.UNKNOWN, "".join(result), line, column)

    def tokenize(self) -> Optional[Token]:
        """Return the next token, or None at end of input."""
        self.skip_whitespace()
        if self.current_char is None:
            return None

        line, column = self.line, self.column
        c = self.current_char

        if self.starts_number():
            return self.number(line, column)

        if _is_letter(c) or c == "_":
            return self.identifier(line, column)

        if c == '"':
            return self.string(line, column)

        if c in SYMBOLS:
            return self.symbol(line, column)

        return self.unknown(line, column)

    def tokenize_all(self) -> List[Token]:
        """Return all remaining tokens from the input string."""
        return list(self)
