"""Tests for ast_viz: ensure a Digraph is produced with one box per outline entry."""

from ast_viz import render_ast_dot
from tests.utils import parse_text


def test_ast_viz_dot_source():
    ast = parse_text("class A is var x : Int end")
    dot = render_ast_dot(ast, title="sample")
    src = dot.source
    assert "ClassDeclaration" in src
    assert "VariableDeclaration" in src
    assert "n0 -> n1" in src
    assert "sample" in src


def test_ast_viz_escapes_labels():
    dot = render_ast_dot(parse_text("class A is method m(a : Int) is end end"))
    # "Parameter: a : Int" is split into a bold kind and its value.
    assert "<B>Parameter</B><BR/>a : Int" in dot.source
