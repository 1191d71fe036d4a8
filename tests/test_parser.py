import pytest
from ast_nodes import *
from basetypes import VOID
from errors import InvalidNumber, MissingTokenAfter, NoMoreTokens, ParseError, UnexpectedToken
from parser import Parser
from tokens import Token, TokenKind
from tests.utils import parse_one, parse_text


def test_parser_parses_number_declaration():
    parser = Parser("x := 5;")
    assert parser.parse() == DeclarationNode(identifier="x", value=NumberNode(value=5.0))
    with pytest.raises(NoMoreTokens):
        parser.parse()


def test_parser_parses_float_and_string_values():
    assert parse_text('ratio := 0.25; name := "ez";') == [
        DeclarationNode(identifier="ratio", value=NumberNode(value=0.25)),
        DeclarationNode(identifier="name", value=StringNode(value="ez")),
    ]


def test_parser_parses_function_with_body():
    ast = parse_one("f := fn() { x := 1; }")
    assert ast == DeclarationNode(
        identifier="f",
        value=FunctionNode(
            params=[],
            return_type=VOID,
            body=[DeclarationNode(identifier="x", value=NumberNode(value=1.0))],
        ),
    )


def test_function_declaration_needs_no_semicolon():
    assert parse_text("f := fn() {} g := 2;") == [
        DeclarationNode(identifier="f", value=FunctionNode()),
        DeclarationNode(identifier="g", value=NumberNode(value=2.0)),
    ]


def test_parameter_list_and_return_type_are_skipped():
    ast = parse_one("add := fn(a: number, b: number) -> number { }")
    assert isinstance(ast.value, FunctionNode)
    assert ast.value.params == []
    assert ast.value.return_type == VOID
    assert ast.value.body == []


def test_nested_functions_keep_following_declarations():
    ast = parse_text("g := fn() { h := fn() { } y := 2; } z := 3;")
    assert [d.identifier for d in ast] == ["g", "z"]
    g_body = ast[0].value.body
    assert [d.identifier for d in g_body] == ["h", "y"]
    assert g_body[0].value == FunctionNode()
    assert g_body[1].value == NumberNode(value=2.0)


def test_parse_program_on_empty_input():
    assert parse_text("") == []
    assert parse_text("   \n ") == []


def test_missing_value_is_unexpected_semicolon():
    with pytest.raises(UnexpectedToken) as exc:
        parse_one("x := ;")
    assert exc.value.token == Token(TokenKind.SEMI, ";")


def test_lone_identifier_is_missing_token_after_it():
    with pytest.raises(MissingTokenAfter) as exc:
        parse_one("x")
    assert exc.value.token == Token(TokenKind.IDENTIFIER, "x")


def test_input_ending_after_decl_assign():
    with pytest.raises(MissingTokenAfter) as exc:
        parse_one("x :=")
    assert exc.value.token == Token(TokenKind.DECL_ASSIGN, ":=")


def test_missing_semicolon_at_end_of_input():
    with pytest.raises(MissingTokenAfter) as exc:
        parse_one("x := 5")
    assert exc.value.token == Token(TokenKind.INTEGER, "5")


def test_wrong_token_instead_of_semicolon():
    with pytest.raises(UnexpectedToken) as exc:
        parse_one("x := 5 6;")
    assert exc.value.token == Token(TokenKind.INTEGER, "6")


def test_plain_assign_is_rejected():
    with pytest.raises(UnexpectedToken) as exc:
        parse_one("x = 5;")
    assert exc.value.token == Token(TokenKind.ASSIGN, "=")


@pytest.mark.parametrize("src, token", [
    ("5;", Token(TokenKind.INTEGER, "5")),
    ("fn := 1;", Token(TokenKind.FN, "fn")),
    ("; x := 1;", Token(TokenKind.SEMI, ";")),
])
def test_top_level_must_start_with_identifier(src, token):
    with pytest.raises(UnexpectedToken) as exc:
        parse_one(src)
    assert exc.value.token == token


def test_malformed_number_is_invalid_number():
    with pytest.raises(InvalidNumber) as exc:
        parse_one("x := 1.2.3;")
    assert exc.value.token == Token(TokenKind.FLOAT, "1.2.3")


def test_unterminated_string_reported_with_text_and_position():
    with pytest.raises(UnexpectedToken) as exc:
        parse_one('s := "abc')
    token = exc.value.token
    assert token == Token(TokenKind.UNKNOWN, "abc")
    assert (token.line, token.column) == (1, 6)
    assert "unrecognized input 'abc'" in str(exc.value)
    assert "line 1, column 6" in str(exc.value)


def test_unclosed_function_body():
    with pytest.raises(MissingTokenAfter) as exc:
        parse_one("f := fn() {")
    assert exc.value.token == Token(TokenKind.LEFT_CURLY, "{")

    with pytest.raises(MissingTokenAfter) as exc:
        parse_one("f := fn() { x := 1;")
    assert exc.value.token == Token(TokenKind.SEMI, ";")


def test_function_without_body():
    with pytest.raises(MissingTokenAfter) as exc:
        parse_one("f := fn(a)")
    assert exc.value.token == Token(TokenKind.RIGHT_PAREN, ")")


def test_error_in_function_body_propagates():
    with pytest.raises(UnexpectedToken) as exc:
        parse_one("f := fn() { x := ; }")
    assert exc.value.token.kind == TokenKind.SEMI


def test_first_error_stops_parse_program():
    with pytest.raises(UnexpectedToken):
        parse_text("x := 1;; y := 2;")


def test_parse_errors_are_syntax_errors():
    for cls in (NoMoreTokens, MissingTokenAfter, UnexpectedToken, InvalidNumber):
        assert issubclass(cls, ParseError)
        assert issubclass(cls, SyntaxError)


def test_nodes_record_source_positions():
    ast = parse_one("\n  x := 5;")
    assert (ast.line, ast.column) == (2, 3)
    assert (ast.value.line, ast.value.column) == (2, 8)
