from cttlex.cli import main
from cttlex.lexer import tokenize


def test_prints_each_token_on_its_own_line(tmp_path, capsys):
    source = "var x: int;\nx = 1;\n"
    path = tmp_path / "prog.ctt"
    path.write_text(source, encoding="utf-8")

    assert main([str(path)]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [str(token) for token in tokenize(source)]
    assert out[0] == "[VAR,var,1]"
    assert out[-1].startswith("[END_OF_FILE,,")


def test_empty_file_prints_only_end_of_file(tmp_path, capsys):
    path = tmp_path / "empty.ctt"
    path.write_text("", encoding="utf-8")

    assert main([str(path)]) == 0
    assert capsys.readouterr().out == "[END_OF_FILE,,1]\n"


def test_missing_file_reports_error(tmp_path, capsys):
    missing = tmp_path / "absent.ctt"
    assert main([str(missing)]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert str(missing) in captured.err