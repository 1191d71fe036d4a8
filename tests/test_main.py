import json
import os

import main
from ast_nodes import DeclarationNode
from main import lex, parse_text, process_program
from tokens import TokenKind

EXAMPLES = os.path.join(os.path.dirname(os.path.dirname(__file__)), "examples")


def test_lex_returns_all_tokens():
    assert [t.kind for t in lex("x := 5;")] == [
        TokenKind.IDENTIFIER,
        TokenKind.DECL_ASSIGN,
        TokenKind.INTEGER,
        TokenKind.SEMI,
    ]


def test_parse_text_returns_top_level_declarations():
    ast = parse_text("a := 1; b := fn() { c := 2; }")
    assert all(isinstance(d, DeclarationNode) for d in ast)
    assert [d.identifier for d in ast] == ["a", "b"]


def test_process_program_prints_tokens_and_ast(capsys):
    assert process_program("x := 5;", print_tokens=True) is True
    out = capsys.readouterr().out
    assert "Tokens (4):" in out
    assert "Token(DECL_ASSIGN, ':=')" in out
    assert "Declaration(x)" in out


def test_process_program_reports_syntax_errors(capsys):
    assert process_program("x := ;") is False
    out = capsys.readouterr().out
    assert out.startswith("Syntax Error: Unexpected SEMI ';'")


def test_process_program_dumps_json(tmp_path, capsys):
    path = tmp_path / "ast.json"
    assert process_program("x := 5;", print_ast=False, dump_ast_path=str(path))
    data = json.loads(path.read_text(encoding="utf-8"))
    assert data["program"][0]["identifier"] == "x"
    assert "Wrote AST JSON" in capsys.readouterr().out


def test_process_program_renders_visualization(monkeypatch, tmp_path):
    calls = []

    def fake_render(nodes, out_path, fmt="svg", include_positions=False):
        calls.append((len(nodes), out_path, fmt))
        return f"{out_path}.{fmt}"

    monkeypatch.setattr(main, "write_and_render", fake_render)
    out_path = str(tmp_path / "ast")
    assert process_program("a := 1; b := 2;", print_ast=False, viz_path=out_path, viz_format="png")
    assert calls == [(2, out_path, "png")]


def test_main_runs_example_file(capsys):
    assert main.main(["--file", os.path.join(EXAMPLES, "basic.ez")]) == 0
    out = capsys.readouterr().out
    assert "Declaration(main)" in out
    assert "Declaration(nested)" in out


def test_main_fails_on_missing_file(tmp_path, capsys):
    assert main.main(["--file", str(tmp_path / "missing.ez")]) == 1
    assert "Failed to read file" in capsys.readouterr().out


def test_main_fails_on_bad_source(tmp_path):
    path = tmp_path / "bad.ez"
    path.write_text("x := 1.2.3;", encoding="utf-8")
    assert main.main(["-f", str(path), "--no-ast"]) == 1
