from __future__ import annotations
from typing import List, Optional
import json
import sys
import traceback
from lexer import Tokenizer
from tokens import Token
from ast_nodes import ASTNode
from parser import Parser
from pretty_printer import PrettyPrinter
from ast_json import program_to_json
from ast_viz import write_and_render


def lex(text: str) -> List[Token]:
    """Tokenize input string."""
    return Tokenizer(text).tokenize_all()


def parse_text(text: str) -> List[ASTNode]:
    """Parse input string into its top-level expressions."""
    return Parser(text).parse_program()


def process_program(
    text: str,
    *,
    print_tokens: bool = False,
    print_ast: bool = True,
    dump_ast_path: Optional[str] = None,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
    viz_positions: bool = False,
) -> bool:
    """Process a single program: lex, parse and optionally print/export stages.

    Returns True when the whole input parsed. Flags control which parts are
    printed or written.
    """
    try:
        if print_tokens:
            tokens = lex(text)
            print(f"Tokens ({len(tokens)}):")
            for i, token in enumerate(tokens[:50]):
                print(f"  {i:3}: {token}")
            if len(tokens) > 50:
                print(f"  ... and {len(tokens) - 50} more")

        ast = parse_text(text)
        if print_ast:
            print("\nAST:")
            print(PrettyPrinter.print_program(ast))

        if dump_ast_path:
            try:
                with open(dump_ast_path, "w", encoding="utf-8") as fh:
                    json.dump(program_to_json(ast), fh, indent=2)
                print(f"Wrote AST JSON to {dump_ast_path}")
            except OSError as e:
                print(f"Failed to write AST JSON to {dump_ast_path}: {e}")

        # Optionally render visualization via Graphviz
        if viz_path:
            try:
                rendered = write_and_render(
                    ast, viz_path, fmt=viz_format, include_positions=viz_positions
                )
                print(f"Wrote AST visualization to {rendered}")
            except Exception as e:
                print(f"Failed to render AST visualization to {viz_path}: {e}")

        return True

    except SyntaxError as e:
        print(f"Syntax Error: {e}")
    except Exception as e:
        print(f"Unexpected error: {e}")
        traceback.print_exc()
    return False


def interactive_mode(print_tokens: bool = False, print_ast: bool = True) -> None:
    """Run interactive REPL reading programs from stdin."""
    print("\nInteractive Mode (type 'quit' to exit)")
    print("=" * 80)

    while True:
        try:
            text = input("\nEnter declarations: ").strip()
            if text.lower() in ("quit", "exit", "q"):
                print("Goodbye!")
                break

            if not text:
                continue

            process_program(text, print_tokens=print_tokens, print_ast=print_ast)

        except (KeyboardInterrupt, EOFError):
            print("\n\nExiting...")
            break


def main(argv: Optional[List[str]] = None) -> int:
    import argparse

    parser = argparse.ArgumentParser(
        description="Tokenize and parse an ez source file or interactive input"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--file", "-f", dest="file", help="Path to source file to process"
    )
    group.add_argument(
        "--interactive",
        "-i",
        dest="interactive",
        action="store_true",
        help="Start interactive REPL mode",
    )
    # printing/verbosity options
    parser.add_argument(
        "--print-tokens", dest="print_tokens", action="store_true", help="Print tokens"
    )
    parser.add_argument(
        "--no-ast", dest="print_ast", action="store_false", help="Do not print AST"
    )
    parser.set_defaults(print_tokens=False, print_ast=True)
    parser.add_argument(
        "--dump-ast", dest="dump_ast", help="Path to write the AST as JSON"
    )
    parser.add_argument(
        "--viz-ast",
        dest="viz_ast",
        help="Path (without extension) to write Graphviz visualization of the AST",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )
    parser.add_argument(
        "--viz-positions",
        dest="viz_positions",
        action="store_true",
        help="Include line:column positions in the AST visualization",
    )

    args = parser.parse_args(argv)

    if args.interactive:
        interactive_mode(print_tokens=args.print_tokens, print_ast=args.print_ast)
        return 0

    if args.file:
        try:
            with open(args.file, "r", encoding="utf-8") as fh:
                text = fh.read()
        except OSError as e:
            print(f"Failed to read file {args.file}: {e}")
            return 1

        ok = process_program(
            text,
            print_tokens=args.print_tokens,
            print_ast=args.print_ast,
            dump_ast_path=args.dump_ast,
            viz_path=args.viz_ast,
            viz_format=args.viz_format,
            viz_positions=args.viz_positions,
        )
        return 0 if ok else 1

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
