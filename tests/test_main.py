import json
from main import main, process_program, process_directory, write_tokens


def test_process_program_returns_ast_and_prints_outline(capsys):
    ast = process_program("class A is end")
    assert ast is not None
    out = capsys.readouterr().out
    assert "Program\n  ClassDeclaration: A" in out


def test_process_program_reports_syntax_errors(capsys):
    assert process_program("var x") is None
    assert "Syntax Error: Unexpected end of input" in capsys.readouterr().out


def test_process_program_reports_lexical_errors(capsys):
    assert process_program("x := 1;") is None
    assert "Lexical error at line 1, column 7" in capsys.readouterr().out


def test_process_directory_writes_dumps_and_continues_after_failure(tmp_path, capsys):
    src = tmp_path / "src"
    src.mkdir()
    (src / "1.txt").write_text("class A is var x : Int end\n", encoding="utf-8")
    (src / "2.txt").write_text("var x\n", encoding="utf-8")
    (src / "3.txt").write_text("x := 5\n", encoding="utf-8")
    out = tmp_path / "results"

    results = process_directory(str(src), str(out), print_ast=False)

    assert results == {"1.txt": True, "2.txt": False, "3.txt": True}
    assert (out / "ast1.txt").read_text(encoding="utf-8") == (
        "Program\n"
        "  ClassDeclaration: A\n"
        "    VariableDeclaration\n"
        "      ID: x\n"
        "      Type: Int\n"
    )
    assert not (out / "ast2.txt").exists()
    assert (out / "tokens3.txt").read_text(encoding="utf-8") == (
        "ID('x')\nASSIGN(':=')\nINT_LITERAL('5')\n"
    )
    assert "Parsed 2/3 files" in capsys.readouterr().out


def test_write_tokens_of_empty_program(tmp_path):
    path = tmp_path / "tokens.txt"
    write_tokens([], str(path))
    assert path.read_text(encoding="utf-8") == ""


def test_main_file_mode_with_json_dump(tmp_path):
    source = tmp_path / "prog.txt"
    source.write_text("x.foo(1, 2)\n", encoding="utf-8")
    json_path = tmp_path / "ast.json"

    code = main(["--file", str(source), "--no-ast", "--dump-json", str(json_path)])

    assert code == 0
    data = json.loads(json_path.read_text(encoding="utf-8"))
    call = data["declarations"][0]
    assert call["node_type"] == "MethodCall"
    assert call["method"] == "foo"
    assert [a["value"] for a in call["arguments"]] == ["1", "2"]


def test_main_returns_failure_for_bad_file(tmp_path):
    source = tmp_path / "bad.txt"
    source.write_text("class is end", encoding="utf-8")
    assert main(["-f", str(source)]) == 1
    assert main(["-f", str(tmp_path / "missing.txt")]) == 1


def test_process_directory_skips_undecodable_file(tmp_path, capsys):
    src = tmp_path / "src"
    src.mkdir()
    (src / "1.txt").write_bytes(b"x := \xff\xfe")
    (src / "2.txt").write_text("x := 5\n", encoding="utf-8")
    out = tmp_path / "results"

    results = process_directory(str(src), str(out), print_ast=False)

    assert results == {"1.txt": False, "2.txt": True}
    assert (out / "ast2.txt").exists()
    assert not (out / "ast1.txt").exists()
    printed = capsys.readouterr().out
    assert "Failed to read file 1.txt" in printed
    assert "Parsed 1/2 files" in printed


def test_main_returns_failure_for_undecodable_file(tmp_path):
    source = tmp_path / "latin1.txt"
    source.write_bytes(b"x := \xff")
    assert main(["-f", str(source)]) == 1


def test_process_program_handles_very_long_integer_literal(capsys):
    digits = "9" * 5000
    ast = process_program("x := " + digits, print_ast=False)
    assert ast is not None
    assert ast.declarations[0].value.value == digits
