import json
import logging

import pytest

from dbident import cli


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch):
    # Keep pytest's own log capture handlers on the root logger.
    monkeypatch.setattr(cli, "setup_logging", lambda **kwargs: None)


def test_main_prints_canonical_names(capsys):
    assert cli.main(["Customer Orders", "_1a"]) == 0

    out = capsys.readouterr().out
    assert out.splitlines() == ["customer orders", "_1a"]


def test_main_invalid_name_exits_1_and_logs(capsys, caplog):
    with caplog.at_level(logging.WARNING, logger="dbident.cli"):
        assert cli.main(["ok", "1bad"]) == 1

    assert capsys.readouterr().out.splitlines() == ["ok"]
    assert any("1bad" in r.getMessage() for r in caplog.records)
    assert caplog.records[0].reason == "leading_char"


def test_main_json_report(capsys):
    assert cli.main(["--json", "Hello World", "bad.name"]) == 1

    payload = json.loads(capsys.readouterr().out)
    assert payload["ok"] is False
    assert payload["results"] == [
        {"raw": "Hello World", "valid": True, "identifier": "hello world", "reason": None, "position": None},
        {"raw": "bad.name", "valid": False, "identifier": None, "reason": "invalid_char", "position": 3},
    ]


def test_main_requires_a_name():
    with pytest.raises(SystemExit) as excinfo:
        cli.main([])
    assert excinfo.value.code == 2
