"""AST node definitions for the class-based toy language.

This module defines the concrete AST node dataclasses built by the parser.
Each node is a frozen dataclass carrying exactly the information its
production needs (a class name, a parameter's name and type, child nodes).
The `NodeType` enum identifies node kinds and is used by the printers.

Conventions:
- All AST node dataclasses inherit from `ASTNode` which records the node
    kind (`NodeType`) and optional source `line`/`column` information.
    Positions do not take part in node equality, so two parses of the same
    text compare equal.
- Child sequences are tuples; a node is complete once constructed and is
    never mutated afterwards. Trees are built strictly bottom-up.
- The textual `"Kind: value"` labels of the outline dump live in
    `pretty_printer.py`, not here.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Tuple


class NodeType(Enum):
    PROGRAM = auto()
    CLASS_DECL = auto()
    VAR_DECL = auto()
    CONSTRUCTOR_CALL = auto()
    METHOD_DECL = auto()
    CONSTRUCTOR_DECL = auto()
    PARAMETER = auto()
    BLOCK = auto()
    RETURN_STMT = auto()
    IF_STMT = auto()
    WHILE_STMT = auto()
    ASSIGNMENT = auto()
    METHOD_CALL = auto()
    FUNC_CALL = auto()
    SUPER_METHOD_CALL = auto()
    IDENTIFIER = auto()
    NAME = auto()
    INT_LITERAL = auto()
    BOOL_LITERAL = auto()
    NULL_LITERAL = auto()

    def __str__(self) -> str:
        return self.name


# Base AST Node
@dataclass(frozen=True)
class ASTNode:
    type: NodeType
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)


# Expression Nodes
@dataclass(frozen=True)
class IntLiteralNode(ASTNode):
    type: NodeType = NodeType.INT_LITERAL
    # Digits exactly as scanned, leading zeros included.
    value: str = "0"


@dataclass(frozen=True)
class BoolLiteralNode(ASTNode):
    type: NodeType = NodeType.BOOL_LITERAL
    value: bool = False


@dataclass(frozen=True)
class NullLiteralNode(ASTNode):
    """Stands in for the omitted initializer of `var x is`."""

    type: NodeType = NodeType.NULL_LITERAL


@dataclass(frozen=True)
class NameNode(ASTNode):
    """A bare name used as a value, e.g. the `y` in `x := y`."""

    type: NodeType = NodeType.NAME
    name: str = ""
    is_loop_var: bool = False


@dataclass(frozen=True)
class IdentifierNode(ASTNode):
    """A name in receiver or assignment-target position."""

    type: NodeType = NodeType.IDENTIFIER
    name: str = ""
    is_loop_var: bool = False


@dataclass(frozen=True)
class MethodCallNode(ASTNode):
    type: NodeType = NodeType.METHOD_CALL
    receiver: ASTNode = field(default_factory=IdentifierNode)
    method_name: str = ""
    arguments: Tuple[ASTNode, ...] = ()
    # False for a member reference written without parentheses (`a.size`).
    is_call: bool = True


@dataclass(frozen=True)
class FunctionCallNode(ASTNode):
    """A call written without a receiver, e.g. `print(x)`."""

    type: NodeType = NodeType.FUNC_CALL
    function: IdentifierNode = field(default_factory=IdentifierNode)
    arguments: Tuple[ASTNode, ...] = ()


@dataclass(frozen=True)
class SuperMethodCallNode(ASTNode):
    type: NodeType = NodeType.SUPER_METHOD_CALL
    receiver: IdentifierNode = field(default_factory=IdentifierNode)
    method_name: str = ""


@dataclass(frozen=True)
class ConstructorCallNode(ASTNode):
    type: NodeType = NodeType.CONSTRUCTOR_CALL
    class_name: str = ""
    arguments: Tuple[ASTNode, ...] = ()


@dataclass(frozen=True)
class AssignmentNode(ASTNode):
    type: NodeType = NodeType.ASSIGNMENT
    target: ASTNode = field(default_factory=IdentifierNode)
    value: ASTNode = field(default_factory=NullLiteralNode)


# Statement Nodes
@dataclass(frozen=True)
class BlockNode(ASTNode):
    type: NodeType = NodeType.BLOCK
    statements: Tuple[ASTNode, ...] = ()


@dataclass(frozen=True)
class ReturnStatementNode(ASTNode):
    type: NodeType = NodeType.RETURN_STMT
    expression: ASTNode = field(default_factory=NullLiteralNode)


@dataclass(frozen=True)
class IfStatementNode(ASTNode):
    type: NodeType = NodeType.IF_STMT
    condition: ASTNode = field(default_factory=BoolLiteralNode)
    then_block: BlockNode = field(default_factory=BlockNode)
    else_block: Optional[BlockNode] = None


@dataclass(frozen=True)
class WhileStatementNode(ASTNode):
    type: NodeType = NodeType.WHILE_STMT
    condition: ASTNode = field(default_factory=BoolLiteralNode)
    body: BlockNode = field(default_factory=BlockNode)


# Declaration Nodes
@dataclass(frozen=True)
class VariableDeclarationNode(ASTNode):
    """`var x : T[G](args)` or `var x is expr`.

    A typed declaration sets `var_type` (and optionally `generic_type` and
    `constructor_call`); an initializer declaration sets `initializer`,
    which is a `NullLiteralNode` when the expression was omitted.
    """

    type: NodeType = NodeType.VAR_DECL
    name: str = ""
    var_type: Optional[str] = None
    generic_type: Optional[str] = None
    constructor_call: Optional[ConstructorCallNode] = None
    initializer: Optional[ASTNode] = None


@dataclass(frozen=True)
class ParameterNode(ASTNode):
    type: NodeType = NodeType.PARAMETER
    name: str = ""
    param_type: str = ""


@dataclass(frozen=True)
class MethodDeclarationNode(ASTNode):
    type: NodeType = NodeType.METHOD_DECL
    name: str = ""
    # None when the parameter list was omitted entirely, () for `()`.
    parameters: Optional[Tuple[ParameterNode, ...]] = None
    return_type: Optional[str] = None
    body: BlockNode = field(default_factory=BlockNode)


@dataclass(frozen=True)
class ConstructorDeclarationNode(ASTNode):
    type: NodeType = NodeType.CONSTRUCTOR_DECL
    parameters: Optional[Tuple[ParameterNode, ...]] = None
    body: BlockNode = field(default_factory=BlockNode)


@dataclass(frozen=True)
class ClassDeclarationNode(ASTNode):
    type: NodeType = NodeType.CLASS_DECL
    name: str = ""
    generic_type: Optional[str] = None
    base_class: Optional[str] = None
    members: Tuple[ASTNode, ...] = ()


# Program Node
@dataclass(frozen=True)
class ProgramNode(ASTNode):
    type: NodeType = NodeType.PROGRAM
    declarations: Tuple[ASTNode, ...] = ()
