import logging

from minilisp import config
from minilisp.interpreter.repl import Shell
from minilisp.runtime_context import Runtime


def test_defaults(monkeypatch):
    for var in ("MINILISP_MAX_DEPTH", "MINILISP_PROMPT", "MINILISP_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    assert config.get_max_depth() == 100
    assert config.get_prompt() == ">>> "
    assert config.get_log_level() == logging.WARNING


def test_max_depth_from_env(monkeypatch):
    monkeypatch.setenv("MINILISP_MAX_DEPTH", "7")
    assert config.get_max_depth() == 7
    assert Runtime().max_depth == 7
    assert Runtime(max_depth=3).max_depth == 3


def test_invalid_max_depth_falls_back(monkeypatch):
    monkeypatch.setenv("MINILISP_MAX_DEPTH", "lots")
    assert config.get_max_depth() == 100
    monkeypatch.setenv("MINILISP_MAX_DEPTH", "-4")
    assert config.get_max_depth() == 100


def test_prompt_from_env(monkeypatch):
    monkeypatch.setenv("MINILISP_PROMPT", "lisp> ")
    assert config.get_prompt() == "lisp> "
    assert Shell().prompt == "lisp> "


def test_log_level_from_env(monkeypatch):
    monkeypatch.setenv("MINILISP_LOG_LEVEL", "debug")
    assert config.get_log_level() == logging.DEBUG
    monkeypatch.setenv("MINILISP_LOG_LEVEL", "chatty")
    assert config.get_log_level() == logging.WARNING
