import builtins

import pytest

from lispy.__main__ import main
from lispy.interpreter import Interpreter
from lispy.repl import BANNER, eval_line, run_repl


@pytest.fixture(autouse=True)
def _history_in_tmp(tmp_path, monkeypatch):
    monkeypatch.setenv("LISPY_HISTORY_FILE", str(tmp_path / "history"))


def _feed(monkeypatch, lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr(builtins, "input", fake_input)


def test_eval_line(interp):
    assert eval_line(interp, "+ 1 2") == "3"
    assert eval_line(interp, "head {}") == "Error: Function 'head' passed {}!"
    assert eval_line(interp, "(+ 1").startswith("Parse error: ")


def test_repl_session(monkeypatch, capsys):
    _feed(monkeypatch, ["def {x} 5", "", "* x 2", "{1 2}", "tail {}"])
    run_repl(Interpreter(prelude=None))
    out = capsys.readouterr().out.splitlines()
    assert out[:2] == BANNER.splitlines()
    assert out[2:6] == ["()", "10", "{1 2}", "Error: Function 'tail' passed {}!"]


def test_main_eval_expressions(capsys):
    assert main(["--no-prelude", "-e", "+ 1 2", "-e", "list 1 2"]) == 0
    assert capsys.readouterr().out.splitlines() == ["3", "{1 2}"]


def test_main_with_prelude(capsys):
    assert main(["-e", "curry + {1 2 3}"]) == 0
    assert capsys.readouterr().out.strip() == "6"


def test_main_loads_scripts(tmp_path, capsys):
    script = tmp_path / "prog.lspy"
    script.write_text("(def {x} 41)\n", encoding="utf-8")
    assert main(["--no-prelude", str(script), "-e", "+ x 1"]) == 0
    assert capsys.readouterr().out.strip() == "42"


def test_main_reports_script_errors(tmp_path, capsys):
    script = tmp_path / "bad.lspy"
    script.write_text("(def {x} 1)\n(head {})\n", encoding="utf-8")
    assert main(["--no-prelude", str(script)]) == 1
    assert capsys.readouterr().out.strip() == "Error: Function 'head' passed {}!"


def test_main_missing_script(tmp_path, capsys):
    assert main(["--no-prelude", str(tmp_path / "nope.lspy")]) == 1
    assert "Could not load" in capsys.readouterr().err


def test_main_interactive(monkeypatch, capsys):
    _feed(monkeypatch, ["len {1 2 3}"])
    assert main(["--no-prelude", "-i"]) == 0
    assert "3" in capsys.readouterr().out.splitlines()


def test_unknown_log_level_falls_back(monkeypatch, capsys):
    from lispy.config import get_log_level

    monkeypatch.setenv("LISPY_LOG_LEVEL", "verbose")
    assert get_log_level() == "WARNING"
    assert main(["--no-prelude", "-e", "+ 1 1"]) == 0
    assert capsys.readouterr().out.strip() == "2"
    monkeypatch.setenv("LISPY_LOG_LEVEL", "debug")
    assert get_log_level() == "DEBUG"
