from lexer import Tokenizer
from parser import Parser


def lex(text: str):
    """Return a list of tokens for the given source text."""
    return Tokenizer(text).tokenize_all()


def kinds(text: str):
    """Return just the token kinds for the given source text."""
    return [t.kind for t in lex(text)]


def parse_one(text: str):
    """Parse the first top-level expression of a source text."""
    return Parser(text).parse()


def parse_text(text: str):
    """Convenience: parse a source text into its list of top-level expressions."""
    return Parser(text).parse_program()
