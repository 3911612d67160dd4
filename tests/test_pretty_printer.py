from main import lex
from pretty_printer import PrettyPrinter
from tests.utils import parse_text


def test_print_tokens_one_token_per_line():
    text = PrettyPrinter.print_tokens(lex("var x is 1"))
    assert text.splitlines() == [
        "VAR('var')",
        "ID('x')",
        "IS('is')",
        "INT_LITERAL('1')",
    ]


def test_outline_of_class_declaration():
    ast = parse_text("class Box[T] extends Base is var v : T end")
    label, children = PrettyPrinter.outline(ast.declarations[0])
    assert label == "ClassDeclaration: Box"
    assert [c[0] for c in children] == [
        "GenericType: T",
        "Extends: Base",
        "VariableDeclaration",
    ]


def test_print_ast_indents_two_spaces_per_level():
    text = PrettyPrinter.print_ast(parse_text("class A is method m is return 1 end end"))
    assert text.splitlines() == [
        "Program",
        "  ClassDeclaration: A",
        "    MethodDeclaration: m",
        "      Block",
        "        ReturnStatement",
        "          Expression: 1",
    ]


def test_constructor_with_empty_parameter_list_prints_parameters_group():
    text = PrettyPrinter.print_ast(parse_text("class A is this() is end end"))
    assert "      Parameters" in text.splitlines()


def test_print_surface_for_statements():
    ast = parse_text("if a.ready then x := f(1, b) else c super reset end")
    assert PrettyPrinter.print_surface(ast) == (
        "if a.ready then\n"
        "  x := f(1, b)\n"
        "else\n"
        "  c super reset\n"
        "end"
    )
