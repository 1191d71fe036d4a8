"""Graphviz visualization helpers for the AST.

Provides `render_ast_dot(nodes)` which returns a `graphviz.Digraph` object
(not rendered) for a list of top-level expressions. Optionally
`write_and_render` can write the file to disk.

Layout: every AST node becomes one graph node rendered as an HTML-like table
(node kind in bold, payload underneath); edges point from a parent to its
children and are labeled with the field they hang off (`value`, `body[0]`,
`left`, ...). Each top-level declaration is grouped into its own cluster.
"""

from typing import List, Optional, Sequence, Tuple
import html
import re
from ast_nodes import *
from graphviz import Digraph
from pretty_printer import PrettyPrinter


def _children(node: ASTNode) -> List[Tuple[str, ASTNode]]:
    """Return (edge label, child) pairs in source order."""
    match node:
        case DeclarationNode(value=value):
            return [("value", value)]
        case FunctionNode(body=body) | BlockNode(body=body):
            return [(f"body[{i}]", e) for i, e in enumerate(body)]
        case BinaryOpNode(left=left, right=right):
            return [("left", left), ("right", right)]
        case _:
            return []


def _node_detail(node: ASTNode) -> str:
    match node:
        case DeclarationNode(identifier=name):
            return name
        case FunctionNode(params=params, return_type=rt):
            args = ", ".join(str(p) for p in params)
            return f"({args}) -> {rt}"
        case NumberNode() | StringNode():
            return PrettyPrinter.print_surface(node)
        case BinaryOpNode(operator=op):
            return str(op)
        case _:
            return ""


def _node_html(node: ASTNode, include_positions: bool) -> str:
    title = html.escape(node.type.name.replace("_", " ").title())
    rows = [f"<TR><TD><B>{title}</B></TD></TR>"]
    detail = _node_detail(node)
    if detail:
        rows.append(
            f'<TR><TD><FONT POINT-SIZE="10">{html.escape(detail)}</FONT></TD></TR>'
        )
    if include_positions and node.line:
        rows.append(
            f'<TR><TD><FONT POINT-SIZE="8">{node.line}:{node.column}</FONT></TD></TR>'
        )
    return f'<<TABLE BORDER="0" CELLBORDER="1" CELLSPACING="0">{"".join(rows)}</TABLE>>'


def render_ast_dot(
    nodes: Sequence[ASTNode], include_positions: bool = False
) -> Digraph:
    """Return a graphviz.Digraph for the given top-level expressions.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="TB")

    counter = 0

    def _emit(graph: Digraph, node: ASTNode) -> str:
        nonlocal counter
        node_id = f"n{counter}"
        counter += 1
        graph.node(node_id, label=_node_html(node, include_positions), shape="plaintext")
        for edge_label, child in _children(node):
            child_id = _emit(graph, child)
            graph.edge(node_id, child_id, label=edge_label)
        return node_id

    for i, node in enumerate(nodes):
        name = node.identifier if isinstance(node, DeclarationNode) else str(i)
        cluster_name = f"cluster_{i}_{re.sub(r'[^0-9A-Za-z_]', '_', name)}"
        with dot.subgraph(name=cluster_name) as c:
            c.attr(label=f"{i}: {name}")
            c.attr(style="rounded")
            _emit(c, node)

    return dot


def write_and_render(
    nodes: Sequence[ASTNode],
    out_path: str,
    fmt: str = "svg",
    include_positions: bool = False,
) -> Optional[str]:
    """Write and render the AST to the given path (without extension).

    Example: write_and_render(nodes, 'out/ast', fmt='png') will create out/ast.png
    (requires Graphviz). Returns the path of the rendered file."""
    dot = render_ast_dot(nodes, include_positions=include_positions)
    dot.format = fmt
    # Note: render will append extension automatically
    return dot.render(out_path, cleanup=True)
