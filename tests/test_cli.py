import io

import pytest

from pcpdemos.cli import DEMOS, help_text, main


def _run(monkeypatch, capsys, text):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    code = main([])
    return code, capsys.readouterr().out


def test_help_text_lists_every_demo():
    lines = help_text().splitlines()
    assert lines[0] == "Available demos:"
    assert lines[1:] == [f"- {name}" for name in DEMOS]
    assert set(DEMOS) == {"language", "advent", "stacks", "routines", "bank", "weather"}


def test_exit_says_goodbye(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "exit\n")
    assert code == 0
    assert out.startswith("Hello! What program do you want to run?\n" + help_text())
    assert out.endswith("Goodbye!\n")


def test_input_is_trimmed_and_lowercased(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "  EXIT  \n")
    assert code == 0
    assert out.endswith("Goodbye!\n")


def test_unknown_demo_is_reported(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "nothing\nexit\n")
    assert "Unknown demo. Type 'help' to see available demos." in out


def test_help_prints_list_again(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "help\nexit\n")
    assert out.count(help_text()) == 2


def test_runs_stacks_demo(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "Stacks\nexit\n")
    assert "Running demo: stacks\n\n" in out
    assert "The size is 1\nThe datastructures is empty\nThe stack is empty\n" in out
    assert "\nDone.\n" in out


def test_runs_advent_demo(monkeypatch, capsys):
    _, out = _run(monkeypatch, capsys, "advent\nexit\n")
    assert "Running demo: advent" in out
    assert "The slice is " in out


def test_end_of_input_stops(monkeypatch, capsys):
    code, out = _run(monkeypatch, capsys, "")
    assert code == 0
    assert out.endswith("Goodbye!\n")


def test_rejects_unexpected_arguments():
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2