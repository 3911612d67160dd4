import dataclasses
import pytest
from main import lex, parse_tokens
from ast_nodes import *
from pretty_printer import PrettyPrinter

PROGRAM = """
// Shapes
class Shape is
    var name : String
    method area : Int is
        return 0
    end
end

class Square extends Shape is
    var side is 1
    var cache is
    this(s : Int) is
        side := s
        parent super init
    end
    method area : Int is
        return side.Mult(side)
    end
end

var l_i is 0
var sq : Square(4)
while l_i.Less(3) loop
    if sq.area().Greater(10) then
        sq.grow(true)
    else
        l_i := l_i.Plus(1)
    end
end
"""


def _walk(node):
    """Yield every ASTNode reachable from `node`."""
    yield node
    for f in dataclasses.fields(node):
        value = getattr(node, f.name)
        items = value if isinstance(value, tuple) else (value,)
        for item in items:
            if isinstance(item, ASTNode):
                yield from _walk(item)


def test_nodes_are_immutable():
    ast = parse_tokens(lex(PROGRAM))
    with pytest.raises(dataclasses.FrozenInstanceError):
        ast.declarations = ()
    cls = ast.declarations[0]
    with pytest.raises(dataclasses.FrozenInstanceError):
        cls.name = "Other"


def test_child_sequences_are_tuples_and_nodes_are_not_shared():
    ast = parse_tokens(lex(PROGRAM))
    seen = set()
    for node in _walk(ast):
        assert id(node) not in seen
        seen.add(id(node))
        for f in dataclasses.fields(node):
            assert not isinstance(getattr(node, f.name), list)


def test_surface_printer_output_parses_back_to_the_same_tree():
    ast = parse_tokens(lex(PROGRAM))
    regenerated = PrettyPrinter.print_surface(ast)
    assert parse_tokens(lex(regenerated)) == ast


def test_same_text_parses_to_equal_trees_and_equal_outlines():
    first = parse_tokens(lex(PROGRAM))
    second = parse_tokens(lex(PROGRAM))
    assert first == second
    assert PrettyPrinter.print_ast(first) == PrettyPrinter.print_ast(second)


def test_every_node_has_a_position():
    ast = parse_tokens(lex(PROGRAM))
    for node in _walk(ast):
        assert node.line >= 1
        assert node.column >= 1
