import os
import tempfile

import pytest

import main


@pytest.fixture
def no_terminal(monkeypatch):
    calls = []
    monkeypatch.setattr(main.curses, "wrapper", lambda fn: calls.append(fn))
    monkeypatch.setattr(main, "_setup_logging", lambda cfg: None)
    return calls


def test_version_flag(capsys):
    assert main.main(["-v"]) == 0
    assert capsys.readouterr().out.strip() == main.__version__


def test_help_flag(capsys):
    assert main.main(["-h"]) == 0
    assert "Usage" in capsys.readouterr().out


def test_malformed_data_file_aborts_before_curses(no_terminal, capsys):
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "transactions.json")
        with open(path, "w", encoding="utf-8") as f:
            f.write("[]")
        assert main.main([path]) == 1
    assert no_terminal == []
    assert "Load failed" in capsys.readouterr().err


def test_fresh_data_file_starts_session(no_terminal):
    with tempfile.TemporaryDirectory() as tmp:
        path = os.path.join(tmp, "transactions.json")
        assert main.main([path]) == 0
        assert os.path.exists(path)
    assert len(no_terminal) == 1
