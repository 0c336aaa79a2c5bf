from blockworld import config
from blockworld.logutil import log


def test_log_format(monkeypatch, capsys):
    monkeypatch.setattr(config, "LOG_ENABLED", True)
    monkeypatch.setattr(config, "LOG_COLOR", False)
    log("STREAM", "hello")
    log("STREAM", "careful", level="WARN")
    assert capsys.readouterr().out.splitlines() == ["[INFO STREAM] hello", "[WARN STREAM] careful"]


def test_log_color_for_warnings(monkeypatch, capsys):
    monkeypatch.setattr(config, "LOG_ENABLED", True)
    monkeypatch.setattr(config, "LOG_COLOR", True)
    monkeypatch.delenv("NO_COLOR", raising=False)
    log("X", "bad", level="ERROR")
    assert capsys.readouterr().out.startswith("\x1b[31m[ERROR X] bad")


def test_log_disabled(capsys):
    log("X", "quiet")
    assert capsys.readouterr().out == ""
