"""
Parser for the class-based toy language.

Overview and approach:
- This parser is a hand-written predictive recursive-descent parser with a
    single token of lookahead. Every grammar production has one `parse_*`
    method; the token under the cursor alone decides which production
    applies, so the parser never backtracks.

Key points:
- Primitives:
    - `peek()` returns the token under the cursor and raises `SyntaxError`
        at end of input.
    - `check(*kinds)` tests the lookahead without consuming it and is safe
        at end of input; it is used wherever a construct is optional.
    - `expect(*kinds)` consumes the lookahead if it is one of `kinds`,
        otherwise raises `SyntaxError` naming what was expected and found.

- Declarations:
    - `class Name[Generic] extends Base is member* end`, where a member is
        a variable, method, constructor (`this`) or nested class.
    - `var x : Type[Generic](args)` declares a typed variable, `var x is
        expr` an initialized one. The token after the name picks the form.

- Dot chains:
    - `a.b.c(1)` is folded left to right: each `.name` wraps the node built
        so far as its receiver, and becomes a call when `(` follows.
    - `a super m` restarts the chain as a super call on the base name.

- Expressions are deliberately narrow: a name (optionally followed by a
    dot chain or an argument list), an integer or a boolean literal. The
    arithmetic tokens produced by the lexer are never consumed here.

Examples:
    - `x.foo(1, 2)` -> MethodCall(foo, receiver=ID x, args=[1, 2])
    - `var p : Point(1, 2)` -> VariableDeclaration(p, Point, ConstructorCall)

Notes:
- The parser is fail-fast: the first unexpected token raises and no partial
    tree is returned. Its only state is the cursor of one token list, so
    separate documents may be parsed by separate instances in parallel.
"""

from __future__ import annotations
from typing import List, Tuple
from tokens import Token, TokenType
from ast_nodes import *


NAME_TOKENS = (TokenType.ID, TokenType.LOOP_VAR)
INITIALIZER_TOKENS = NAME_TOKENS + (TokenType.BOOLEAN_LITERAL, TokenType.INT_LITERAL)


def _where(token: Token) -> str:
    return f"line {token.line}, column {token.column}"


class Parser:
    def __init__(self, tokens: List[Token]):
        self.tokens = tokens
        self.pos = 0

    def at_end(self) -> bool:
        return self.pos >= len(self.tokens)

    def peek(self) -> Token:
        """Return next token without consuming it."""
        if self.at_end():
            raise SyntaxError("Unexpected end of input")
        return self.tokens[self.pos]

    def check(self, *token_types: TokenType) -> bool:
        """Check if the next token is one of `token_types` without consuming it."""
        return not self.at_end() and self.tokens[self.pos].type in token_types

    def expect(self, *expected_types: TokenType) -> Token:
        """Expect and consume a token of one of the given types."""
        token = self.peek()
        if token.type in expected_types:
            self.pos += 1
            return token

        expected = ", ".join(str(t) for t in expected_types)
        raise SyntaxError(
            f"Expected [{expected}] but found {token.type} at {_where(token)}"
        )

    @staticmethod
    def _identifier(token: Token) -> IdentifierNode:
        return IdentifierNode(
            name=token.lexeme,
            is_loop_var=token.type == TokenType.LOOP_VAR,
            line=token.line,
            column=token.column,
        )

    def parse_program(self) -> ProgramNode:
        """Parse a complete program: (class declaration | statement)*"""
        declarations: List[ASTNode] = []

        while not self.at_end():
            if self.check(TokenType.CLASS):
                declarations.append(self.parse_class_declaration())
            else:
                declarations.append(self.parse_statement())

        return ProgramNode(declarations=tuple(declarations), line=1, column=1)

    def parse(self) -> ProgramNode:
        return self.parse_program()

    def parse_class_declaration(self) -> ClassDeclarationNode:
        """Parse `class Name ([Generic])? (extends Base)? is member* end`."""
        keyword = self.expect(TokenType.CLASS)
        name = self.expect(TokenType.ID).lexeme

        generic_type = None
        if self.check(TokenType.LBRACKET):
            self.expect(TokenType.LBRACKET)
            generic_type = self.expect(TokenType.ID).lexeme
            self.expect(TokenType.RBRACKET)

        base_class = None
        if self.check(TokenType.EXTENDS):
            self.expect(TokenType.EXTENDS)
            base_class = self.expect(TokenType.ID).lexeme

        self.expect(TokenType.IS)
        members: List[ASTNode] = []
        while self.peek().type != TokenType.END:
            members.append(self.parse_member_declaration())
        self.expect(TokenType.END)

        return ClassDeclarationNode(
            name=name,
            generic_type=generic_type,
            base_class=base_class,
            members=tuple(members),
            line=keyword.line,
            column=keyword.column,
        )

    def parse_member_declaration(self) -> ASTNode:
        token = self.peek()
        match token.type:
            case TokenType.VAR:
                return self.parse_variable_declaration()
            case TokenType.METHOD:
                return self.parse_method_declaration()
            case TokenType.THIS:
                return self.parse_constructor_declaration()
            case TokenType.CLASS:
                return self.parse_class_declaration()
            case _:
                raise SyntaxError(
                    f"Unexpected token in class body: {token} at {_where(token)}"
                )

    def parse_variable_declaration(self) -> VariableDeclarationNode:
        """Parse `var x : Type ([G])? ((args))?` or `var x is expr?`."""
        keyword = self.expect(TokenType.VAR)
        name = self.expect(*NAME_TOKENS).lexeme

        token = self.peek()
        match token.type:
            case TokenType.COLON:
                self.expect(TokenType.COLON)
                type_token = self.expect(TokenType.ID)

                generic_type = None
                if self.check(TokenType.LBRACKET):
                    self.expect(TokenType.LBRACKET)
                    generic_type = self.expect(TokenType.ID).lexeme
                    self.expect(TokenType.RBRACKET)

                constructor_call = None
                if self.check(TokenType.LPAREN):
                    constructor_call = ConstructorCallNode(
                        class_name=type_token.lexeme,
                        arguments=self.parse_arguments(),
                        line=type_token.line,
                        column=type_token.column,
                    )

                return VariableDeclarationNode(
                    name=name,
                    var_type=type_token.lexeme,
                    generic_type=generic_type,
                    constructor_call=constructor_call,
                    line=keyword.line,
                    column=keyword.column,
                )

            case TokenType.IS:
                is_token = self.expect(TokenType.IS)
                if self.check(*INITIALIZER_TOKENS):
                    initializer = self.parse_expression()
                else:
                    initializer = NullLiteralNode(
                        line=is_token.line, column=is_token.column
                    )
                return VariableDeclarationNode(
                    name=name,
                    initializer=initializer,
                    line=keyword.line,
                    column=keyword.column,
                )

            case _:
                raise SyntaxError(
                    f"Unexpected token in variable declaration: {token} "
                    f"at {_where(token)}"
                )

    def parse_method_declaration(self) -> MethodDeclarationNode:
        """Parse `method name (params)? (: Type)? is block end`."""
        keyword = self.expect(TokenType.METHOD)
        name = self.expect(TokenType.ID).lexeme

        parameters = None
        if self.check(TokenType.LPAREN):
            parameters = self.parse_parameters()

        return_type = None
        if self.check(TokenType.COLON):
            self.expect(TokenType.COLON)
            return_type = self.expect(TokenType.ID).lexeme

        self.expect(TokenType.IS)
        body = self.parse_block()
        self.expect(TokenType.END)

        return MethodDeclarationNode(
            name=name,
            parameters=parameters,
            return_type=return_type,
            body=body,
            line=keyword.line,
            column=keyword.column,
        )

    def parse_constructor_declaration(self) -> ConstructorDeclarationNode:
        """Parse `this (params)? is block end`."""
        keyword = self.expect(TokenType.THIS)

        parameters = None
        if self.check(TokenType.LPAREN):
            parameters = self.parse_parameters()

        self.expect(TokenType.IS)
        body = self.parse_block()
        self.expect(TokenType.END)

        return ConstructorDeclarationNode(
            parameters=parameters,
            body=body,
            line=keyword.line,
            column=keyword.column,
        )

    def parse_parameters(self) -> Tuple[ParameterNode, ...]:
        """Parse `( (name : Type (, name : Type)*)? )`."""
        self.expect(TokenType.LPAREN)
        parameters: List[ParameterNode] = []

        if not self.check(TokenType.RPAREN):
            parameters.append(self.parse_parameter())
            while self.check(TokenType.COMMA):
                self.expect(TokenType.COMMA)
                parameters.append(self.parse_parameter())

        self.expect(TokenType.RPAREN)
        return tuple(parameters)

    def parse_parameter(self) -> ParameterNode:
        name = self.expect(TokenType.ID)
        self.expect(TokenType.COLON)
        param_type = self.expect(TokenType.ID).lexeme
        return ParameterNode(
            name=name.lexeme,
            param_type=param_type,
            line=name.line,
            column=name.column,
        )

    def parse_arguments(self) -> Tuple[ASTNode, ...]:
        """Parse a parenthesized argument list: `( (expr (, expr)*)? )`."""
        self.expect(TokenType.LPAREN)
        arguments: List[ASTNode] = []

        if not self.check(TokenType.RPAREN):
            arguments.append(self.parse_expression())
            while self.check(TokenType.COMMA):
                self.expect(TokenType.COMMA)
                arguments.append(self.parse_expression())

        self.expect(TokenType.RPAREN)
        return tuple(arguments)

    def parse_block(self) -> BlockNode:
        """Parse statements up to, but not including, `end` or `else`."""
        start = self.peek()
        statements: List[ASTNode] = []

        while self.peek().type not in (TokenType.END, TokenType.ELSE):
            if self.check(TokenType.RETURN):
                statements.append(self.parse_return_statement())
            else:
                statements.append(self.parse_statement())

        return BlockNode(
            statements=tuple(statements), line=start.line, column=start.column
        )

    def parse_return_statement(self) -> ReturnStatementNode:
        keyword = self.expect(TokenType.RETURN)
        return ReturnStatementNode(
            expression=self.parse_expression(),
            line=keyword.line,
            column=keyword.column,
        )

    def parse_statement(self) -> ASTNode:
        """Parse a statement."""
        token = self.peek()
        match token.type:
            case TokenType.VAR:
                return self.parse_variable_declaration()
            case TokenType.WHILE:
                return self.parse_while_statement()
            case TokenType.IF:
                return self.parse_if_statement()
            case TokenType.ID | TokenType.LOOP_VAR:
                return self.parse_assignment_or_call()
            case _:
                raise SyntaxError(f"Unexpected token: {token} at {_where(token)}")

    def parse_if_statement(self) -> IfStatementNode:
        """Parse `if expr then block (else block)? end`."""
        keyword = self.expect(TokenType.IF)
        condition = self.parse_expression()
        self.expect(TokenType.THEN)
        then_block = self.parse_block()

        else_block = None
        if self.check(TokenType.ELSE):
            self.expect(TokenType.ELSE)
            else_block = self.parse_block()

        self.expect(TokenType.END)
        return IfStatementNode(
            condition=condition,
            then_block=then_block,
            else_block=else_block,
            line=keyword.line,
            column=keyword.column,
        )

    def parse_while_statement(self) -> WhileStatementNode:
        """Parse `while expr loop block end`."""
        keyword = self.expect(TokenType.WHILE)
        condition = self.parse_expression()
        self.expect(TokenType.LOOP)
        body = self.parse_block()
        self.expect(TokenType.END)
        return WhileStatementNode(
            condition=condition, body=body, line=keyword.line, column=keyword.column
        )

    def parse_assignment_or_call(self) -> ASTNode:
        """Parse `name dot-chain (:= expr)?`."""
        name = self.expect(*NAME_TOKENS)
        left = self.parse_dot_chain(name)

        if self.check(TokenType.ASSIGN):
            self.expect(TokenType.ASSIGN)
            right = self.parse_expression()
            return AssignmentNode(
                target=left, value=right, line=name.line, column=name.column
            )

        return left

    def parse_dot_chain(self, base: Token) -> ASTNode:
        """Fold `.member`, `.member(args)` and `super member` steps onto `base`."""
        node: ASTNode = self._identifier(base)

        while self.check(TokenType.DOT, TokenType.SUPER):
            if self.check(TokenType.SUPER):
                # A super step drops everything chained so far.
                self.expect(TokenType.SUPER)
                method = self.expect(TokenType.ID)
                node = SuperMethodCallNode(
                    receiver=self._identifier(base),
                    method_name=method.lexeme,
                    line=method.line,
                    column=method.column,
                )
                continue

            self.expect(TokenType.DOT)
            method = self.expect(TokenType.ID)
            if self.check(TokenType.LPAREN):
                node = MethodCallNode(
                    receiver=node,
                    method_name=method.lexeme,
                    arguments=self.parse_arguments(),
                    line=method.line,
                    column=method.column,
                )
            else:
                node = MethodCallNode(
                    receiver=node,
                    method_name=method.lexeme,
                    is_call=False,
                    line=method.line,
                    column=method.column,
                )

        return node

    def parse_expression(self) -> ASTNode:
        """Parse a name, call, dot chain, integer or boolean literal."""
        token = self.peek()

        match token.type:
            case TokenType.ID | TokenType.LOOP_VAR:
                self.expect(*NAME_TOKENS)
                if self.check(TokenType.DOT, TokenType.SUPER):
                    return self.parse_dot_chain(token)
                if self.check(TokenType.LPAREN):
                    return FunctionCallNode(
                        function=self._identifier(token),
                        arguments=self.parse_arguments(),
                        line=token.line,
                        column=token.column,
                    )
                return NameNode(
                    name=token.lexeme,
                    is_loop_var=token.type == TokenType.LOOP_VAR,
                    line=token.line,
                    column=token.column,
                )

            case TokenType.INT_LITERAL:
                self.expect(TokenType.INT_LITERAL)
                return IntLiteralNode(
                    value=token.lexeme, line=token.line, column=token.column
                )

            case TokenType.BOOLEAN_LITERAL:
                self.expect(TokenType.BOOLEAN_LITERAL)
                return BoolLiteralNode(
                    value=token.lexeme == "true", line=token.line, column=token.column
                )

            case _:
                raise SyntaxError(
                    f"Unexpected token in expression: {token} at {_where(token)}"
                )
