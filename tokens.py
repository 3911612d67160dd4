"""Token definitions for the lexer.

This module defines the `TokenType` enum for all token kinds recognized by
the lexer and a small immutable `Token` dataclass that holds a token kind and
the lexeme it was scanned from. Tokens are the atomic units produced by the
lexer and consumed by the parser.
"""

from __future__ import annotations
from enum import Enum, auto
from dataclasses import dataclass, field


class TokenType(Enum):
    # Keywords
    VAR = auto()
    CLASS = auto()
    IS = auto()
    END = auto()
    METHOD = auto()
    THIS = auto()
    IF = auto()
    THEN = auto()
    ELSE = auto()
    WHILE = auto()
    LOOP = auto()
    RETURN = auto()
    EXTENDS = auto()
    SUPER = auto()

    # Names and literals
    ID = auto()
    LOOP_VAR = auto()
    INT_LITERAL = auto()
    BOOLEAN_LITERAL = auto()

    # Assignment
    ASSIGN = auto()

    # Punctuation
    COLON = auto()
    DOT = auto()
    COMMA = auto()

    # Arithmetic operators (scanned, never parsed)
    PLUS = auto()
    MINUS = auto()
    MULT = auto()
    DIV = auto()

    # Parentheses and brackets
    LPAREN = auto()
    RPAREN = auto()
    LBRACKET = auto()
    RBRACKET = auto()

    def __str__(self) -> str:
        return self.name


KEYWORDS = {
    "var": TokenType.VAR,
    "class": TokenType.CLASS,
    "is": TokenType.IS,
    "end": TokenType.END,
    "method": TokenType.METHOD,
    "this": TokenType.THIS,
    "if": TokenType.IF,
    "then": TokenType.THEN,
    "else": TokenType.ELSE,
    "while": TokenType.WHILE,
    "loop": TokenType.LOOP,
    "return": TokenType.RETURN,
    "extends": TokenType.EXTENDS,
    "super": TokenType.SUPER,
}

BOOLEAN_WORDS = ("true", "false")

LOOP_VAR_PREFIX = "l_"

SYMBOLS = {
    ":": TokenType.COLON,
    ".": TokenType.DOT,
    "+": TokenType.PLUS,
    "-": TokenType.MINUS,
    "*": TokenType.MULT,
    "/": TokenType.DIV,
    "(": TokenType.LPAREN,
    ")": TokenType.RPAREN,
    "[": TokenType.LBRACKET,
    "]": TokenType.RBRACKET,
    ",": TokenType.COMMA,
}


@dataclass(frozen=True)
class Token:
    type: TokenType
    lexeme: str
    # Position of the first character; not part of token identity.
    line: int = field(default=0, compare=False)
    column: int = field(default=0, compare=False)

    def __str__(self) -> str:
        return f"{self.type}('{self.lexeme}')"

    def __repr__(self) -> str:
        return f"Token({self.type}, {repr(self.lexeme)})"
