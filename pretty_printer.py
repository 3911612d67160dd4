"""Pretty-printers for tokens and the AST.

Provides:
- `PrettyPrinter.print_tokens(tokens)`: one `KIND('lexeme')` line per token.
- `PrettyPrinter.outline(node)`: the generic `(label, children)` view of a
    node, where labels such as `ClassDeclaration: Point` combine the node
    kind with its payload. Both the indented dump and the Graphviz renderer
    walk this view.
- `PrettyPrinter.print_ast(node)`: the indented outline, two spaces per
    nesting level, depth-first in child order.
- `PrettyPrinter.print_surface(node)`: source text that parses back to the
    same tree.

Examples:
    PrettyPrinter.print_ast(program_node)
"""

from __future__ import annotations
from typing import List, Tuple
from ast_nodes import *
from tokens import Token

Outline = Tuple[str, Tuple["Outline", ...]]


def _leaf(label: str) -> Outline:
    return (label, ())


class PrettyPrinter:
    @staticmethod
    def print_tokens(tokens: List[Token]) -> str:
        return "\n".join(str(token) for token in tokens)

    @staticmethod
    def _parameters_outline(parameters: Tuple[ParameterNode, ...]) -> Outline:
        return (
            "Parameters",
            tuple(PrettyPrinter.outline(p) for p in parameters),
        )

    @staticmethod
    def outline(node: ASTNode) -> Outline:
        """Return the `(label, children)` view of `node`."""
        o = PrettyPrinter.outline

        match node:
            case ProgramNode(declarations=decls):
                return ("Program", tuple(o(d) for d in decls))

            case ClassDeclarationNode(
                name=name, generic_type=generic, base_class=base, members=members
            ):
                children: List[Outline] = []
                if generic is not None:
                    children.append(_leaf(f"GenericType: {generic}"))
                if base is not None:
                    children.append(_leaf(f"Extends: {base}"))
                children.extend(o(m) for m in members)
                return (f"ClassDeclaration: {name}", tuple(children))

            case VariableDeclarationNode(name=name, var_type=vtype, initializer=init):
                children = [_leaf(f"ID: {name}")]
                if vtype is not None:
                    children.append(_leaf(f"Type: {vtype}"))
                    if node.generic_type is not None:
                        children.append(_leaf(f"GenericType: {node.generic_type}"))
                    if node.constructor_call is not None:
                        children.append(o(node.constructor_call))
                elif init is not None:
                    children.append(o(init))
                return ("VariableDeclaration", tuple(children))

            case ConstructorCallNode(class_name=name, arguments=args):
                return (f"ConstructorCall: {name}", tuple(o(a) for a in args))

            case MethodDeclarationNode(
                name=name, parameters=params, return_type=rtype, body=body
            ):
                children = []
                if params is not None:
                    children.append(PrettyPrinter._parameters_outline(params))
                if rtype is not None:
                    children.append(_leaf(f"ReturnType: {rtype}"))
                children.append(o(body))
                return (f"MethodDeclaration: {name}", tuple(children))

            case ConstructorDeclarationNode(parameters=params, body=body):
                children = []
                if params is not None:
                    children.append(PrettyPrinter._parameters_outline(params))
                children.append(o(body))
                return ("ConstructorDeclaration", tuple(children))

            case ParameterNode(name=name, param_type=ptype):
                return _leaf(f"Parameter: {name} : {ptype}")

            case BlockNode(statements=stmts):
                return ("Block", tuple(o(s) for s in stmts))

            case ReturnStatementNode(expression=expr):
                return ("ReturnStatement", (o(expr),))

            case IfStatementNode(condition=cond, then_block=then_b, else_block=else_b):
                children = [o(cond), o(then_b)]
                if else_b is not None:
                    children.append(o(else_b))
                return ("IfStatement", tuple(children))

            case WhileStatementNode(condition=cond, body=body):
                return ("WhileStatement", (o(cond), o(body)))

            case AssignmentNode(target=target, value=value):
                return ("Assignment", (o(target), o(value)))

            case MethodCallNode(receiver=recv, method_name=name, arguments=args):
                return (f"MethodCall: {name}", (o(recv),) + tuple(o(a) for a in args))

            # A receiver-less call keeps the callee as its first child.
            case FunctionCallNode(function=func, arguments=args):
                return (
                    f"MethodCall: {func.name}",
                    (o(func),) + tuple(o(a) for a in args),
                )

            case SuperMethodCallNode(receiver=recv, method_name=name):
                return (f"SuperMethodCall: {name}", (o(recv),))

            case IdentifierNode(name=name):
                return _leaf(f"ID: {name}")

            case NameNode(name=name):
                return _leaf(f"Expression: {name}")

            case IntLiteralNode(value=v):
                return _leaf(f"Expression: {v}")

            case BoolLiteralNode(value=v):
                return _leaf(f"Expression: {'true' if v else 'false'}")

            case NullLiteralNode():
                return _leaf("Expression: null")

            case _:
                raise TypeError(f"Unknown node type: {type(node)}")

    @staticmethod
    def print_ast(node: ASTNode, indent: int = 0) -> str:
        """Pretty print AST and return as string."""
        lines: List[str] = []

        def walk(entry: Outline, depth: int) -> None:
            label, children = entry
            lines.append("  " * depth + label)
            for child in children:
                walk(child, depth + 1)

        walk(PrettyPrinter.outline(node), indent)
        return "\n".join(lines)

    @staticmethod
    def print_surface(node: ASTNode, indent: int = 0) -> str:
        """Return source text for `node`; statements are indented by nesting."""
        pad = "  " * indent

        def _p(n: ASTNode) -> str:
            return PrettyPrinter.print_surface(n)

        def _args(args: Tuple[ASTNode, ...]) -> str:
            return "(" + ", ".join(_p(a) for a in args) + ")"

        def _params(params) -> str:
            if params is None:
                return ""
            return "(" + ", ".join(f"{p.name} : {p.param_type}" for p in params) + ")"

        def _body(block: BlockNode) -> List[str]:
            return [PrettyPrinter.print_surface(s, indent + 1) for s in block.statements]

        match node:
            case ProgramNode(declarations=decls):
                return "\n".join(PrettyPrinter.print_surface(d, indent) for d in decls)

            case ClassDeclarationNode(
                name=name, generic_type=generic, base_class=base, members=members
            ):
                header = f"{pad}class {name}"
                if generic is not None:
                    header += f"[{generic}]"
                if base is not None:
                    header += f" extends {base}"
                lines = [header + " is"]
                lines.extend(PrettyPrinter.print_surface(m, indent + 1) for m in members)
                lines.append(f"{pad}end")
                return "\n".join(lines)

            case VariableDeclarationNode(name=name, var_type=vtype, initializer=init):
                if vtype is not None:
                    text = f"{pad}var {name} : {vtype}"
                    if node.generic_type is not None:
                        text += f"[{node.generic_type}]"
                    if node.constructor_call is not None:
                        text += _args(node.constructor_call.arguments)
                    return text
                if init is None or isinstance(init, NullLiteralNode):
                    return f"{pad}var {name} is"
                return f"{pad}var {name} is {_p(init)}"

            case MethodDeclarationNode(
                name=name, parameters=params, return_type=rtype, body=body
            ):
                header = f"{pad}method {name}{_params(params)}"
                if rtype is not None:
                    header += f" : {rtype}"
                return "\n".join([header + " is", *_body(body), f"{pad}end"])

            case ConstructorDeclarationNode(parameters=params, body=body):
                header = f"{pad}this{_params(params)} is"
                return "\n".join([header, *_body(body), f"{pad}end"])

            case BlockNode(statements=stmts):
                return "\n".join(PrettyPrinter.print_surface(s, indent) for s in stmts)

            case ReturnStatementNode(expression=expr):
                return f"{pad}return {_p(expr)}"

            case IfStatementNode(condition=cond, then_block=then_b, else_block=else_b):
                lines = [f"{pad}if {_p(cond)} then", *_body(then_b)]
                if else_b is not None:
                    lines.append(f"{pad}else")
                    lines.extend(_body(else_b))
                lines.append(f"{pad}end")
                return "\n".join(lines)

            case WhileStatementNode(condition=cond, body=body):
                return "\n".join(
                    [f"{pad}while {_p(cond)} loop", *_body(body), f"{pad}end"]
                )

            case AssignmentNode(target=target, value=value):
                return f"{pad}{_p(target)} := {_p(value)}"

            case MethodCallNode(
                receiver=recv, method_name=name, arguments=args, is_call=is_call
            ):
                text = f"{pad}{_p(recv)}.{name}"
                return text + _args(args) if is_call else text

            case FunctionCallNode(function=func, arguments=args):
                return f"{pad}{func.name}{_args(args)}"

            case SuperMethodCallNode(receiver=recv, method_name=name):
                return f"{pad}{recv.name} super {name}"

            case IdentifierNode(name=name) | NameNode(name=name):
                return f"{pad}{name}"

            case IntLiteralNode(value=v):
                return f"{pad}{v}"

            case BoolLiteralNode(value=v):
                return f"{pad}{'true' if v else 'false'}"

            case NullLiteralNode():
                return ""

            case _:
                s = PrettyPrinter.print_ast(node)
                return " ".join(line.strip() for line in s.splitlines())
