from __future__ import annotations
import argparse
import json
import os
import sys
from pathlib import Path
from typing import Dict, List, Optional

from lexer import Lexer
from tokens import Token
from ast_nodes import ProgramNode
from parser import Parser
from pretty_printer import PrettyPrinter
from ast_json import ast_to_json
from ast_viz import write_and_render


def lex(text: str) -> List[Token]:
    """Tokenize input string."""
    lexer = Lexer(text)
    return lexer.tokenize()


def parse_tokens(tokens: List[Token]) -> ProgramNode:
    """Parse tokens into AST."""
    parser = Parser(tokens)
    return parser.parse_program()


def parse_text(text: str) -> ProgramNode:
    return parse_tokens(lex(text))


def write_tokens(tokens: List[Token], path: str) -> None:
    """Write the token dump, one `KIND('lexeme')` per line."""
    with open(path, "w", encoding="utf-8") as fh:
        for token in tokens:
            fh.write(f"{token}\n")


def write_ast(ast: ProgramNode, path: str) -> None:
    """Write the indented AST outline."""
    with open(path, "w", encoding="utf-8") as fh:
        fh.write(PrettyPrinter.print_ast(ast) + "\n")


def process_program(
    text: str,
    *,
    print_tokens: bool = False,
    print_ast: bool = True,
    tokens_path: Optional[str] = None,
    ast_path: Optional[str] = None,
    dump_json_path: Optional[str] = None,
    viz_path: Optional[str] = None,
    viz_format: str = "svg",
    title: Optional[str] = None,
) -> Optional[ProgramNode]:
    """Process a single program: lex, parse and optionally print or save stages.

    Returns the AST, or None when the program failed to lex or parse.
    """
    try:
        tokens = lex(text)
        if print_tokens:
            print(f"Tokens ({len(tokens)}):")
            for i, token in enumerate(tokens):
                print(f"  {i:3}: {token}")
        if tokens_path:
            write_tokens(tokens, tokens_path)

        ast = parse_tokens(tokens)
    except SyntaxError as e:
        print(f"Syntax Error: {e}")
        return None

    if print_ast:
        heading = f"Abstract Syntax Tree for {title}:" if title else "AST:"
        print(f"\n{heading}")
        print(PrettyPrinter.print_ast(ast))

    if ast_path:
        write_ast(ast, ast_path)

    if dump_json_path:
        try:
            with open(dump_json_path, "w", encoding="utf-8") as fh:
                json.dump(ast_to_json(ast), fh, indent=2)
            print(f"Wrote AST JSON to {dump_json_path}")
        except OSError as e:
            print(f"Failed to write AST JSON to {dump_json_path}: {e}")

    # Rendering needs the Graphviz binaries; a missing install only loses the image.
    if viz_path:
        try:
            write_and_render(ast, viz_path, fmt=viz_format, title=title)
            print(f"Wrote AST visualization to {viz_path}.{viz_format}")
        except Exception as e:
            print(f"Failed to render AST visualization to {viz_path}: {e}")

    return ast


def process_directory(
    in_dir: str,
    out_dir: str = "results",
    *,
    pattern: str = "*.txt",
    print_tokens: bool = False,
    print_ast: bool = True,
) -> Dict[str, bool]:
    """Parse every file matching `pattern` in `in_dir`, independently.

    For each input `<stem>.txt` the token dump is written to
    `<out_dir>/tokens<stem>.txt` and the outline to `<out_dir>/ast<stem>.txt`.
    A failing file is reported and skipped. Returns file name -> success.
    """
    os.makedirs(out_dir, exist_ok=True)
    results: Dict[str, bool] = {}

    for entry in sorted(Path(in_dir).glob(pattern)):
        try:
            text = entry.read_text(encoding="utf-8")
        except (UnicodeDecodeError, OSError) as e:
            print(f"Failed to read file {entry.name}: {e}")
            print(f"✗ {entry.name}")
            results[entry.name] = False
            continue

        ast = process_program(
            text,
            print_tokens=print_tokens,
            print_ast=print_ast,
            tokens_path=os.path.join(out_dir, f"tokens{entry.stem}.txt"),
            ast_path=os.path.join(out_dir, f"ast{entry.stem}.txt"),
            title=entry.name,
        )
        if ast is None:
            print(f"✗ {entry.name}")
        results[entry.name] = ast is not None

    ok = sum(1 for passed in results.values() if passed)
    print(f"\nParsed {ok}/{len(results)} files from {in_dir}")
    return results


def interactive_mode(print_tokens: bool = False, print_ast: bool = True) -> None:
    """Run interactive REPL reading one program per line from stdin."""
    print("\nInteractive Parser Mode (type 'quit' to exit)")
    print("=" * 80)

    while True:
        try:
            text = input("\nEnter program: ").strip()
            if text.lower() in ("quit", "exit", "q"):
                print("Goodbye!")
                break

            if not text:
                continue

            process_program(text, print_tokens=print_tokens, print_ast=print_ast)

        except (KeyboardInterrupt, EOFError):
            print("\n\nExiting...")
            break


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Tokenize and parse programs from a file, a directory or stdin"
    )
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--file", "-f", dest="file", help="Path to source file to process"
    )
    group.add_argument(
        "--dir",
        "-d",
        dest="dir",
        help="Directory of *.txt sources to process one by one",
    )
    group.add_argument(
        "--interactive",
        "-i",
        dest="interactive",
        action="store_true",
        help="Start interactive REPL mode",
    )
    parser.add_argument(
        "--out-dir",
        dest="out_dir",
        default="results",
        help="Where --dir writes token and AST dumps (default: results)",
    )
    parser.add_argument(
        "--print-tokens", dest="print_tokens", action="store_true", help="Print tokens"
    )
    parser.add_argument(
        "--no-ast", dest="print_ast", action="store_false", help="Do not print AST"
    )
    parser.add_argument(
        "--dump-tokens", dest="dump_tokens", help="Path to write the token dump"
    )
    parser.add_argument(
        "--dump-ast", dest="dump_ast", help="Path to write the AST outline"
    )
    parser.add_argument("--dump-json", dest="dump_json", help="Path to write AST JSON")
    parser.add_argument(
        "--viz-ast",
        dest="viz_ast",
        help="Path (without extension) to write Graphviz visualization of the AST",
    )
    parser.add_argument(
        "--viz-format",
        dest="viz_format",
        default="svg",
        help="Format for Graphviz output (svg, png, pdf, etc)",
    )
    parser.set_defaults(print_tokens=False, print_ast=True)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_arg_parser()
    args = parser.parse_args(argv)

    if args.interactive:
        interactive_mode(print_tokens=args.print_tokens, print_ast=args.print_ast)
        return 0

    if args.dir:
        results = process_directory(
            args.dir,
            args.out_dir,
            print_tokens=args.print_tokens,
            print_ast=args.print_ast,
        )
        return 0 if all(results.values()) else 1

    if args.file:
        try:
            with open(args.file, "r", encoding="utf-8") as fh:
                text = fh.read()
        except (UnicodeDecodeError, OSError) as e:
            print(f"Failed to read file {args.file}: {e}")
            return 1

        ast = process_program(
            text,
            print_tokens=args.print_tokens,
            print_ast=args.print_ast,
            tokens_path=args.dump_tokens,
            ast_path=args.dump_ast,
            dump_json_path=args.dump_json,
            viz_path=args.viz_ast,
            viz_format=args.viz_format,
            title=os.path.basename(args.file),
        )
        return 0 if ast is not None else 1

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
