"""Convert AST nodes into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a nested structure
of dicts/lists/primitives describing the AST node, and `program_to_json`
for the list of top-level expressions returned by `Parser.parse_program()`.
It encodes the node type and key fields plus the source position.
"""

from typing import Any, Dict, List, Optional, Sequence
from ast_nodes import *
from basetypes import BaseType, Param, TypeKind


def type_to_json(basetype: Optional[BaseType]) -> Any:
    if basetype is None:
        return None
    data: Dict[str, Any] = {"kind": str(basetype.kind)}
    if basetype.kind == TypeKind.FUNCTION:
        data["params"] = [param_to_json(p) for p in basetype.params]
        data["return_type"] = type_to_json(basetype.return_type)
    return data


def param_to_json(param: Param) -> Dict[str, Any]:
    return {"identifier": param.identifier, "basetype": type_to_json(param.basetype)}


def ast_to_json(node: Optional[ASTNode]) -> Any:
    if node is None:
        return None

    t = node.type
    position = {"line": node.line, "column": node.column}
    # values
    if t == NodeType.NUMBER and isinstance(node, NumberNode):
        return {"node_type": "Number", "value": node.value, **position}
    if t == NodeType.STRING and isinstance(node, StringNode):
        return {"node_type": "String", "value": node.value, **position}
    if t == NodeType.FUNCTION and isinstance(node, FunctionNode):
        return {
            "node_type": "Function",
            "params": [param_to_json(p) for p in node.params],
            "return_type": type_to_json(node.return_type),
            "body": [ast_to_json(e) for e in node.body],
            **position,
        }
    # expressions
    if t == NodeType.DECLARATION and isinstance(node, DeclarationNode):
        return {
            "node_type": "Declaration",
            "identifier": node.identifier,
            "value": ast_to_json(node.value),
            **position,
        }
    if t == NodeType.BINARY_OP and isinstance(node, BinaryOpNode):
        return {
            "node_type": "BinaryOp",
            "operator": str(node.operator),
            "left": ast_to_json(node.left),
            "right": ast_to_json(node.right),
            **position,
        }
    if t == NodeType.BLOCK and isinstance(node, BlockNode):
        return {
            "node_type": "Block",
            "body": [ast_to_json(e) for e in node.body],
            **position,
        }

    raise TypeError(f"Cannot serialize AST node {node!r}")


def program_to_json(nodes: Sequence[ASTNode]) -> Dict[str, List[Any]]:
    return {"program": [ast_to_json(n) for n in nodes]}
