"""AST node definitions for the `ez` language.

This module defines the AST node dataclasses built by the parser. Each node
is a dataclass carrying its children and payload (identifier names, literal
values, operators). The `NodeType` enum identifies node kinds and is exposed
as the class-level `type` attribute, which the pretty-printer, the JSON
exporter and the Graphviz renderer dispatch on.

Conventions:
- All AST node dataclasses inherit from `ASTNode`, which records the optional
    source `line`/`column` of the token the node started at. Positions are
    keyword-only and never take part in equality, so two trees compare equal
    when their structure and payloads match.
- Value nodes (the right-hand side of a declaration) inherit from
    `ValueNode`.
- The AST is a strict tree: every child belongs to exactly one parent.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import ClassVar, List
from basetypes import VOID, BaseType, Param
from tokens import TokenKind


class NodeType(Enum):
    BINARY_OP = auto()
    DECLARATION = auto()
    BLOCK = auto()
    NUMBER = auto()
    STRING = auto()
    FUNCTION = auto()

    def __str__(self) -> str:
        return self.name


# Base AST Node
@dataclass
class ASTNode:
    type: ClassVar[NodeType]
    line: int = field(default=0, compare=False, repr=False, kw_only=True)
    column: int = field(default=0, compare=False, repr=False, kw_only=True)


# Value Nodes
@dataclass
class ValueNode(ASTNode):
    pass


@dataclass
class NumberNode(ValueNode):
    type: ClassVar[NodeType] = NodeType.NUMBER
    value: float = 0.0


@dataclass
class StringNode(ValueNode):
    type: ClassVar[NodeType] = NodeType.STRING
    value: str = ""


@dataclass
class FunctionNode(ValueNode):
    type: ClassVar[NodeType] = NodeType.FUNCTION
    params: List[Param] = field(default_factory=list)
    return_type: BaseType = VOID
    body: List[ASTNode] = field(default_factory=list)


# Expression Nodes
@dataclass
class BinaryOpNode(ASTNode):
    # Not produced by the parser yet; the grammar has no binary expressions.
    type: ClassVar[NodeType] = NodeType.BINARY_OP
    left: ASTNode = field(default_factory=NumberNode)
    right: ASTNode = field(default_factory=NumberNode)
    operator: TokenKind = TokenKind.PLUS


@dataclass
class DeclarationNode(ASTNode):
    type: ClassVar[NodeType] = NodeType.DECLARATION
    identifier: str = ""
    value: ValueNode = field(default_factory=NumberNode)


@dataclass
class BlockNode(ASTNode):
    type: ClassVar[NodeType] = NodeType.BLOCK
    body: List[ASTNode] = field(default_factory=list)
