"""Tests for provider selection and the companion session manager."""

import pytest

from sidepane.config import TerminalConfig
from sidepane.terminal import ProcessProvider, TerminalManager, TmuxProvider, select_provider
from sidepane.terminal.manager import SELECTION_STORE_ENV


def test_auto_prefers_tmux(monkeypatch):
    monkeypatch.setenv("TMUX", "/tmp/tmux-1000/default,1,0")
    assert isinstance(select_provider(TerminalConfig()), TmuxProvider)


def test_auto_falls_back_to_process(monkeypatch):
    monkeypatch.delenv("TMUX", raising=False)
    assert isinstance(select_provider(TerminalConfig()), ProcessProvider)


def test_explicit_tmux_outside_tmux_warns(monkeypatch, caplog):
    monkeypatch.delenv("TMUX", raising=False)
    provider = select_provider(TerminalConfig(provider="tmux"))
    assert isinstance(provider, ProcessProvider)
    assert "not running inside tmux" in caplog.text


def test_explicit_process_inside_tmux(monkeypatch):
    monkeypatch.setenv("TMUX", "/tmp/tmux-1000/default,1,0")
    assert isinstance(select_provider(TerminalConfig(provider="process")), ProcessProvider)


def test_selected_provider_is_set_up(monkeypatch):
    monkeypatch.setenv("TMUX", "/tmp/tmux-1000/default,1,0")
    config = TerminalConfig(pane_size="50%")
    assert select_provider(config).config is config


def test_command_with_args():
    manager = TerminalManager(TerminalConfig(command="claude", args=["--model", "a b"]), provider=TmuxProvider())
    assert manager.command == "claude --model 'a b'"


def test_command_quotes_executable_path():
    manager = TerminalManager(TerminalConfig(command="/opt/My Tools/claude"), provider=TmuxProvider())
    assert manager.command == "'/opt/My Tools/claude'"

    manager = TerminalManager(
        TerminalConfig(command="/opt/My Tools/claude", args=["--resume"]), provider=TmuxProvider()
    )
    assert manager.command == "'/opt/My Tools/claude' --resume"


def test_build_env_layers(tmp_path):
    store = tmp_path / "selections.json"
    config = TerminalConfig(env={"FOO": "bar", "KEEP": "1"})
    manager = TerminalManager(config, provider=TmuxProvider(), selection_store=store)
    env = manager.build_env({"FOO": "override"})
    assert env == {"FOO": "override", "KEEP": "1", SELECTION_STORE_ENV: str(store)}


def test_manager_drives_tmux_session(tmux):
    manager = TerminalManager(TerminalConfig(env={"FOO": "bar"}, cwd="/work"), provider=TmuxProvider())

    assert manager.open() is True
    split = tmux.commands("split-window")[0]
    assert "FOO=bar" in split
    assert split[-1] == "claude"

    status = manager.status()
    assert status == {"provider": "tmux", "open": True, "command": "claude", "handle": None, "pane": "%1"}

    manager.focus_toggle()
    assert manager.status()["open"] is False

    manager.toggle()
    assert manager.status()["pane"] == "%2"
    manager.close()
    assert tmux.panes == ["%0"]


@pytest.mark.parametrize("focus", [True, False])
def test_manager_open_respects_focus(tmux, focus):
    manager = TerminalManager(TerminalConfig(cwd="/work"), provider=TmuxProvider())
    manager.open(focus=focus)
    assert tmux.current == ("%1" if focus else "%0")
