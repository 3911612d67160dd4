from lexer import Lexer
from parser import Parser
from pretty_printer import PrettyPrinter


def lex(text: str):
    """Return a list of tokens for the given source text."""
    return Lexer(text).tokenize()


def parse_tokens(tokens):
    """Parse a list of tokens into a Program node."""
    return Parser(tokens).parse_program()


def parse_text(text: str):
    """Convenience: lex+parse a source text into an AST."""
    return Parser(Lexer(text).tokenize()).parse_program()


def outline(text: str) -> str:
    """Lex, parse and return the indented outline dump."""
    return PrettyPrinter.print_ast(parse_text(text))
