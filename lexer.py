"""
Lexer for the class-based toy language.

Overview:
- This module implements a small hand-written lexical analyzer (scanner) that
    transforms an input source string into a list of `Token` objects defined
    in `tokens.py`.
- It recognizes keywords (e.g. `class`, `method`, `is`, `end`, `while`),
    boolean literals, identifiers and loop variables (identifiers prefixed
    with `l_`), unsigned integer literals, the `:=` assignment operator and
    single-character punctuation, and skips whitespace and single-line
    comments starting with `//`.

Examples:
    Input:  "x := 5"
    Tokens: [ID('x'), ASSIGN(':='), INT_LITERAL('5')]

Implementation notes:
- The lexer is a simple stateful scanner using `self.pos` and
    `self.current_char`; it never backtracks.
- Words are scanned first and then classified: keyword, boolean literal,
    loop variable, plain identifier, in that order.
- No end-of-file token is appended: an input holding only whitespace and
    comments produces an empty list.
"""

from __future__ import annotations
from typing import Optional, List
from tokens import (
    Token,
    TokenType,
    KEYWORDS,
    BOOLEAN_WORDS,
    LOOP_VAR_PREFIX,
    SYMBOLS,
)


class LexicalError(SyntaxError):
    """Raised when the cursor sits on a character no rule recognizes."""

    def __init__(self, char: str, pos: int, line: int, column: int):
        self.char = char
        self.pos = pos
        self.line = line
        self.column = column
        super().__init__(
            f"Lexical error at line {line}, column {column}: "
            f"Unexpected character {char!r}"
        )


class Lexer:
    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.line = 1
        self.column = 1
        self.current_char = self.text[self.pos] if self.text else None

    def advance(self) -> None:
        """Advance to next character."""
        # Newlines reset the column and increment the line number.
        if self.current_char == "\n":
            self.line += 1
            self.column = 1
        else:
            self.column += 1

        self.pos += 1
        if self.pos < len(self.text):
            self.current_char = self.text[self.pos]
        else:
            self.current_char = None

    def peek_char(self) -> Optional[str]:
        """Look at next character without consuming it."""
        next_pos = self.pos + 1
        if next_pos < len(self.text):
            return self.text[next_pos]
        return None

    def skip_whitespace(self) -> None:
        while self.current_char is not None and self.current_char.isspace():
            self.advance()

    def skip_comment(self) -> None:
        """Skip a `//` comment up to, but not including, the newline."""
        while self.current_char is not None and self.current_char != "\n":
            self.advance()

    def integer(self) -> str:
        """Scan the maximal run of decimal digits."""
        result = []
        while self.current_char is not None and self.current_char.isdecimal():
            result.append(self.current_char)
            self.advance()
        return "".join(result)

    def word(self) -> str:
        """Scan an identifier-shaped word: a letter, then letters, digits or `_`."""
        result = [self.current_char]
        self.advance()

        while self.current_char is not None and (
            self.current_char.isalpha()
            or self.current_char.isdecimal()
            or self.current_char == "_"
        ):
            result.append(self.current_char)
            self.advance()

        return "".join(result)

    @staticmethod
    def classify(word: str) -> TokenType:
        if word in KEYWORDS:
            return KEYWORDS[word]
        if word in BOOLEAN_WORDS:
            return TokenType.BOOLEAN_LITERAL
        if word.startswith(LOOP_VAR_PREFIX):
            return TokenType.LOOP_VAR
        return TokenType.ID

    def get_next_token(self) -> Optional[Token]:
        """Return the next token, or None once the input is exhausted."""
        while self.current_char is not None:
            if self.current_char.isspace():
                self.skip_whitespace()
                continue

            line, column = self.line, self.column

            if self.current_char.isdecimal():
                return Token(TokenType.INT_LITERAL, self.integer(), line, column)

            if self.current_char.isalpha():
                word = self.word()
                return Token(self.classify(word), word, line, column)

            if self.current_char == "/" and self.peek_char() == "/":
                self.skip_comment()
                continue

            # `:=` is checked before the single `:` symbol.
            if self.current_char == ":" and self.peek_char() == "=":
                self.advance()
                self.advance()
                return Token(TokenType.ASSIGN, ":=", line, column)

            symbol = self.current_char
            if symbol in SYMBOLS:
                self.advance()
                return Token(SYMBOLS[symbol], symbol, line, column)

            raise LexicalError(symbol, self.pos, line, column)

        return None

    def tokenize(self) -> List[Token]:
        """Return all tokens from the input string."""
        tokens: List[Token] = []
        while True:
            token = self.get_next_token()
            if token is None:
                break
            tokens.append(token)
        return tokens
