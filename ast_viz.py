"""Graphviz visualization helpers for the AST.

Provides `render_ast_dot(node)` which returns a `graphviz.Digraph` object
(not rendered). `write_and_render` writes and renders the file to disk.

Layout: every outline entry (see `PrettyPrinter.outline`) becomes one box
labelled like the text dump; edges run from parent to child, and child order
is kept left to right.
"""

from typing import Optional
import html
from graphviz import Digraph
from ast_nodes import ASTNode
from pretty_printer import PrettyPrinter, Outline


def _node_html(label: str) -> str:
    kind, sep, value = label.partition(": ")
    escaped = html.escape(kind)
    if sep:
        escaped = f"<B>{escaped}</B><BR/>{html.escape(value)}"
    return f'<<FONT POINT-SIZE="10">{escaped}</FONT>>'


def render_ast_dot(node: ASTNode, title: Optional[str] = None) -> Digraph:
    """Return a graphviz.Digraph for the given AST.

    The caller may call `dot.source` to inspect the dot text, or call
    `dot.render(filename, format=...)` to write files (requires Graphviz installed).
    """
    dot = Digraph(format="svg")
    dot.attr("graph", rankdir="TB", ordering="out")
    dot.attr("node", shape="box", style="rounded")
    if title:
        dot.attr(label=title, labelloc="t")

    counter = 0

    def emit(entry: Outline) -> str:
        nonlocal counter
        label, children = entry
        node_id = f"n{counter}"
        counter += 1
        dot.node(node_id, label=_node_html(label))
        for child in children:
            dot.edge(node_id, emit(child))
        return node_id

    emit(PrettyPrinter.outline(node))
    return dot


def write_and_render(
    node: ASTNode,
    out_path: str,
    fmt: str = "svg",
    title: Optional[str] = None,
) -> None:
    """Write and render the AST to the given path (without extension).

    Example: write_and_render(ast, 'out/ast', fmt='png') will create out/ast.png
    (requires Graphviz)."""
    dot = render_ast_dot(node, title=title)
    dot.format = fmt
    # Note: render will append extension automatically
    dot.render(out_path, cleanup=True)
