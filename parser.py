"""
Parser for the `ez` language.

Overview and approach:
- This parser is a small, hand-written recursive-descent parser. It owns a
    `Tokenizer` and pulls tokens from it one at a time, keeping at most one
    buffered lookahead token in `self.current`. There is no backtracking.
- Each call to `parse()` returns one top-level expression. Callers loop until
    `NoMoreTokens` is raised, which signals the normal end of the input
    (`parse_program()` does exactly that).

Grammar (informal):
    expr        := IDENTIFIER ':=' value
    value       := number ';' | STRING ';' | function
    function    := 'fn' <anything up to '{'> '{' expr* '}'

Key points:
- Declarations whose value is a function literal are not followed by `;`.
- Parameter lists and return-type annotations between `fn` and `{` are
    skipped token by token, not parsed; every function gets an empty
    parameter list and a `void` return type.
- Numbers are converted with `float()`. Runs the tokenizer accepts but that
    are not valid floats (e.g. `1.2.3`) raise `InvalidNumber`.
- The first error aborts the parse. Errors carry the offending token; see
    `errors.py`.

Examples:
    - `x := 5;`                  -> DeclarationNode('x', NumberNode(5.0))
    - `f := fn() { y := "s"; }`  -> DeclarationNode('f', FunctionNode(body=[...]))
"""

from __future__ import annotations
from typing import List, Optional
from ast_nodes import *
from basetypes import VOID
from errors import InvalidNumber, MissingTokenAfter, NoMoreTokens, UnexpectedToken
from lexer import Tokenizer
from tokens import Token, TokenKind


class Parser:
    def __init__(self, text: str):
        self.tokenizer = Tokenizer(text)
        self.current: Optional[Token] = None
        # Last token pulled from the tokenizer; reported when input runs out.
        self.previous: Optional[Token] = None

    def advance(self) -> Optional[Token]:
        """Pull the next token into `current`."""
        self.current = self.tokenizer.tokenize()
        if self.current is not None:
            self.previous = self.current
        return self.current

    def peek(self) -> Optional[Token]:
        """Return the buffered token, pulling one if nothing is buffered."""
        if self.current is None:
            return self.advance()
        return self.current

    def consume(self) -> Token:
        """Take the buffered token, leaving nothing buffered."""
        token = self.current
        self.current = None
        return token

    def expect_next(self, after: Token) -> Token:
        """Pull the next token; the input must not end after `after`."""
        token = self.advance()
        if token is None:
            raise MissingTokenAfter(after)
        return token

    def parse(self) -> ASTNode:
        """Parse one top-level expression."""
        token = self.peek()
        if token is None:
            raise NoMoreTokens()

        match token.kind:
            case TokenKind.IDENTIFIER:
                return self.parse_identifier()
            case _:
                raise UnexpectedToken(token, "an identifier")

    def parse_identifier(self) -> DeclarationNode:
        """Parse a declaration: IDENTIFIER ':=' value"""
        ident = self.consume()

        assign = self.expect_next(ident)
        if assign.kind != TokenKind.DECL_ASSIGN:
            raise UnexpectedToken(assign, "':='")
        self.consume()

        self.expect_next(assign)
        value = self.parse_value()

        # Function literals end with their closing brace.
        if not isinstance(value, FunctionNode):
            semi = self.peek()
            if semi is None:
                raise MissingTokenAfter(self.previous)
            if semi.kind != TokenKind.SEMI:
                raise UnexpectedToken(semi, "';'")
            self.consume()

        return DeclarationNode(
            identifier=ident.text, value=value, line=ident.line, column=ident.column
        )

    def parse_value(self) -> ValueNode:
        """Parse the right-hand side of a declaration."""
        token = self.peek()
        if token is None:
            raise MissingTokenAfter(self.previous)

        match token.kind:
            case TokenKind.INTEGER | TokenKind.FLOAT:
                try:
                    number = float(token.text)
                except ValueError:
                    raise InvalidNumber(token) from None
                self.consume()
                return NumberNode(value=number, line=token.line, column=token.column)

            case TokenKind.STRING:
                self.consume()
                return StringNode(value=token.text, line=token.line, column=token.column)

            case TokenKind.FN:
                return self.parse_function()

            case _:
                raise UnexpectedToken(token, "a value")

    def parse_function(self) -> FunctionNode:
        """Parse a function literal: 'fn' ... '{' expr* '}'"""
        fn_token = self.consume()

        # Parameter list and return type are not parsed yet; skip to the body.
        token = fn_token
        while token.kind != TokenKind.LEFT_CURLY:
            token = self.expect_next(token)
        self.consume()

        body: List[ASTNode] = []
        while True:
            token = self.peek()
            if token is None:
                raise MissingTokenAfter(self.previous)
            if token.kind == TokenKind.RIGHT_CURLY:
                self.consume()
                break
            body.append(self.parse())

        return FunctionNode(
            params=[],
            return_type=VOID,
            body=body,
            line=fn_token.line,
            column=fn_token.column,
        )

    def parse_program(self) -> List[ASTNode]:
        """Parse every top-level expression up to the end of the input."""
        statements: List[ASTNode] = []

        while True:
            try:
                statements.append(self.parse())
            except NoMoreTokens:
                break

        return statements
