"""Parse errors.

Every error carries the offending token (or None) so callers can report its
kind, text and position. All of them derive from the built-in `SyntaxError`,
which is what the rest of the toolchain catches for bad input.

`NoMoreTokens` is not a defect: it is raised when `Parser.parse()` is called
at the end of the input and is the normal way a parse loop terminates.
"""

from __future__ import annotations
from typing import Optional
from tokens import Token


class ParseError(SyntaxError):
    def __init__(self, message: str, token: Optional[Token] = None):
        super().__init__(message)
        self.token = token


class NoMoreTokens(ParseError):
    def __init__(self) -> None:
        super().__init__("No more tokens")


class MissingTokenAfter(ParseError):
    def __init__(self, token: Token):
        super().__init__(f"Input ended after {token.describe()}", token)


class UnexpectedToken(ParseError):
    def __init__(self, token: Token, expected: Optional[str] = None):
        message = f"Unexpected {token.describe()}"
        if expected:
            message += f", expected {expected}"
        super().__init__(message, token)


class InvalidNumber(ParseError):
    def __init__(self, token: Token):
        super().__init__(f"Invalid number literal {token.text!r} at {token.location}", token)
