"""Pretty-printer for the AST.

Provides `PrettyPrinter.print_ast(node, indent, prefix)` which renders an
AST into a readable multi-line string, and `PrettyPrinter.print_surface(node)`
which renders a compact one-line, source-like form. The printer is intended
for debugging, tests and the driver's output rather than for producing final
source code.

Examples:
    PrettyPrinter.print_ast(declaration_node)
    PrettyPrinter.print_program(parser.parse_program())
"""

from __future__ import annotations
from typing import Sequence
from ast_nodes import *
from tokens import SPELLINGS


class PrettyPrinter:
    @staticmethod
    def print_program(nodes: Sequence[ASTNode]) -> str:
        """Pretty print a list of top-level expressions."""
        lines = ["Program"]
        for i, node in enumerate(nodes):
            lines.append(PrettyPrinter.print_ast(node, 4, f"expr[{i}]: "))
        return "\n".join(lines)

    @staticmethod
    def print_ast(node: ASTNode, indent: int = 0, prefix: str = "") -> str:
        """Pretty print AST and return as string."""
        lines = []
        indent_str = " " * indent

        if not isinstance(node, ASTNode):
            lines.append(f"{indent_str}{prefix}{node}")
            return "\n".join(lines)

        match node:
            case NumberNode(value=v):
                lines.append(f"{indent_str}{prefix}Number({v})")

            case StringNode(value=v):
                lines.append(f"{indent_str}{prefix}String({v!r})")

            case FunctionNode(params=params, return_type=rt, body=body):
                args = ", ".join(str(p) for p in params)
                lines.append(f"{indent_str}{prefix}Function(params=[{args}] -> {rt})")
                for i, expr in enumerate(body):
                    lines.append(PrettyPrinter.print_ast(expr, indent + 4, f"body[{i}]: "))

            case DeclarationNode(identifier=name, value=value):
                lines.append(f"{indent_str}{prefix}Declaration({name})")
                lines.append(PrettyPrinter.print_ast(value, indent + 2, "value: "))

            case BinaryOpNode(left=left, operator=op, right=right):
                lines.append(f"{indent_str}{prefix}BinaryOp({op})")
                lines.append(PrettyPrinter.print_ast(left, indent + 2, "left: "))
                lines.append(PrettyPrinter.print_ast(right, indent + 2, "right: "))

            case BlockNode(body=body):
                lines.append(f"{indent_str}{prefix}Block")
                for i, expr in enumerate(body):
                    lines.append(PrettyPrinter.print_ast(expr, indent + 4, f"expr[{i}]: "))

            case _:
                lines.append(f"{indent_str}{prefix}Unknown node type: {type(node)}")

        return "\n".join(line for line in lines if line)

    @staticmethod
    def print_surface(node: ASTNode) -> str:
        """Return a compact, surface-syntax-like one-line representation of an AST node.

        Function bodies are elided (`fn() {...}`), so the result stays short
        enough for graph labels.
        """
        if node is None:
            return ""

        def _p(n: ASTNode) -> str:
            return PrettyPrinter.print_surface(n) if isinstance(n, ASTNode) else str(n)

        match node:
            case NumberNode(value=v):
                return f"{v:g}"
            case StringNode(value=v):
                return f'"{v}"'
            case FunctionNode(params=params, body=body):
                args = ", ".join(p.identifier for p in params)
                return f"fn({args}) {{...}}" if body else f"fn({args}) {{}}"
            case DeclarationNode(identifier=name, value=value):
                return f"{name} := {_p(value)}"
            case BinaryOpNode(left=l, operator=op, right=r):
                return f"{_p(l)} {SPELLINGS.get(op, str(op))} {_p(r)}"
            case BlockNode():
                return "{...}"
            case _:
                s = PrettyPrinter.print_ast(node)
                return " ".join(line.strip() for line in s.splitlines())
