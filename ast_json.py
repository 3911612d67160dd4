"""Convert AST nodes into JSON-serializable structures.

This module provides `ast_to_json(node)` which returns a nested structure
of dicts/lists/primitives describing the AST node. It encodes the node type,
its payload fields and its source position, and is what the driver writes
for `--dump-json`.
"""

from typing import Any, Dict, Optional
from ast_nodes import *


def _params_to_json(params) -> Optional[list]:
    if params is None:
        return None
    return [{"name": p.name, "type": p.param_type} for p in params]


def ast_to_json(node: Optional[ASTNode]) -> Any:
    if node is None:
        return None

    data: Dict[str, Any]
    match node:
        case IntLiteralNode(value=v):
            data = {"node_type": "IntLiteral", "value": v}
        case BoolLiteralNode(value=v):
            data = {"node_type": "BoolLiteral", "value": v}
        case NullLiteralNode():
            data = {"node_type": "Null"}
        case NameNode(name=n, is_loop_var=lv):
            data = {"node_type": "Name", "name": n, "is_loop_var": lv}
        case IdentifierNode(name=n, is_loop_var=lv):
            data = {"node_type": "Identifier", "name": n, "is_loop_var": lv}
        case MethodCallNode():
            data = {
                "node_type": "MethodCall",
                "method": node.method_name,
                "receiver": ast_to_json(node.receiver),
                "arguments": [ast_to_json(a) for a in node.arguments],
                "is_call": node.is_call,
            }
        case FunctionCallNode(function=func, arguments=args):
            data = {
                "node_type": "FunctionCall",
                "function": ast_to_json(func),
                "arguments": [ast_to_json(a) for a in args],
            }
        case SuperMethodCallNode(receiver=recv, method_name=m):
            data = {
                "node_type": "SuperMethodCall",
                "method": m,
                "receiver": ast_to_json(recv),
            }
        case ConstructorCallNode(class_name=c, arguments=args):
            data = {
                "node_type": "ConstructorCall",
                "class_name": c,
                "arguments": [ast_to_json(a) for a in args],
            }
        case AssignmentNode(target=t, value=v):
            data = {
                "node_type": "Assignment",
                "target": ast_to_json(t),
                "value": ast_to_json(v),
            }
        case BlockNode(statements=stmts):
            data = {"node_type": "Block", "statements": [ast_to_json(s) for s in stmts]}
        case ReturnStatementNode(expression=expr):
            data = {"node_type": "Return", "expression": ast_to_json(expr)}
        case IfStatementNode():
            data = {
                "node_type": "If",
                "condition": ast_to_json(node.condition),
                "then": ast_to_json(node.then_block),
                "else": ast_to_json(node.else_block),
            }
        case WhileStatementNode(condition=cond, body=body):
            data = {
                "node_type": "While",
                "condition": ast_to_json(cond),
                "body": ast_to_json(body),
            }
        case VariableDeclarationNode():
            data = {
                "node_type": "VarDecl",
                "name": node.name,
                "var_type": node.var_type,
                "generic_type": node.generic_type,
                "constructor_call": ast_to_json(node.constructor_call),
                "initializer": ast_to_json(node.initializer),
            }
        case ParameterNode(name=n, param_type=t):
            data = {"node_type": "Parameter", "name": n, "type": t}
        case MethodDeclarationNode():
            data = {
                "node_type": "MethodDecl",
                "name": node.name,
                "parameters": _params_to_json(node.parameters),
                "return_type": node.return_type,
                "body": ast_to_json(node.body),
            }
        case ConstructorDeclarationNode(parameters=params, body=body):
            data = {
                "node_type": "ConstructorDecl",
                "parameters": _params_to_json(params),
                "body": ast_to_json(body),
            }
        case ClassDeclarationNode():
            data = {
                "node_type": "ClassDecl",
                "name": node.name,
                "generic_type": node.generic_type,
                "base_class": node.base_class,
                "members": [ast_to_json(m) for m in node.members],
            }
        case ProgramNode(declarations=decls):
            data = {
                "node_type": "Program",
                "declarations": [ast_to_json(d) for d in decls],
            }
        case _:
            raise TypeError(f"Cannot serialize node of type {type(node)}")

    data["line"] = node.line
    data["column"] = node.column
    return data
