import importlib

import pytest
from perfect_hash_store import const
from perfect_hash_store.examples import simple


@pytest.mark.parametrize("value, expected", [("0", False), ("off", False), ("No", False),
                                             ("1", True), ("yes", True), ("", True)])
def test_checked_from_environment(monkeypatch, value, expected):
    monkeypatch.setenv("PERFECT_HASH_STORE_CHECKED", value)
    try:
        importlib.reload(const)
        assert const.CHECKED is expected
    finally:
        monkeypatch.delenv("PERFECT_HASH_STORE_CHECKED")
        importlib.reload(const)

def test_example_output(monkeypatch, capsys):
    monkeypatch.setattr(simple, "setup_logging", lambda level: None)
    simple.main([])
    out = capsys.readouterr().out.splitlines()
    assert out == ["Hello World!", "[(3, 7)]"]

def test_example_custom_edges(monkeypatch, capsys):
    monkeypatch.setattr(simple, "setup_logging", lambda level: None)
    simple.main(["--pairs", "5", "--edge", "4", "1", "--edge", "1", "0"])
    assert capsys.readouterr().out.splitlines()[1] == "[(0, 1), (1, 4)]"
