"""Shared fixtures: an in-memory tmux server standing in for the real one."""

import subprocess

import pytest

from sidepane.tmux import core


class FakeTmux:
    """Answers the tmux commands sidepane issues and records every argv.

    Panes can be closed out of band with close() and focus moved with
    focus() to simulate what a user does behind our back.
    """

    def __init__(self):
        self.panes: list[str] = ["%0"]
        self.current: str | None = "%0"
        self.calls: list[list[str]] = []
        self.failures: dict[str, tuple[int, str, str]] = {}
        self._next_id = 1

    def __call__(self, cmd, capture_output=True, text=True):
        cmd = list(cmd)
        self.calls.append(cmd)
        assert cmd[0] == "tmux"
        sub = cmd[1]

        if sub in self.failures:
            code, out, err = self.failures[sub]
            return subprocess.CompletedProcess(cmd, code, out, err)

        if sub == "display-message":
            out = f"{self.current}\n" if self.current else ""
            return subprocess.CompletedProcess(cmd, 0, out, "")

        if sub == "list-panes":
            return subprocess.CompletedProcess(cmd, 0, "".join(f"{p}\n" for p in self.panes), "")

        if sub == "split-window":
            pane_id = f"%{self._next_id}"
            self._next_id += 1
            self.panes.append(pane_id)
            self.current = pane_id
            return subprocess.CompletedProcess(cmd, 0, f"{pane_id}\n", "")

        target = cmd[cmd.index("-t") + 1]
        if target not in self.panes:
            return subprocess.CompletedProcess(cmd, 1, "", f"can't find pane: {target}\n")

        if sub == "select-pane":
            self.current = target
        elif sub == "kill-pane":
            self.close(target)
        return subprocess.CompletedProcess(cmd, 0, "", "")

    def close(self, pane_id: str) -> None:
        self.panes.remove(pane_id)
        if self.current == pane_id:
            self.current = self.panes[0] if self.panes else None

    def focus(self, pane_id: str) -> None:
        self.current = pane_id

    def commands(self, sub: str) -> list[list[str]]:
        return [c for c in self.calls if c[1] == sub]

    def targeted(self, sub: str, pane_id: str) -> list[list[str]]:
        return [c for c in self.commands(sub) if c[c.index("-t") + 1] == pane_id]


@pytest.fixture
def tmux(monkeypatch):
    fake = FakeTmux()
    monkeypatch.setenv("TMUX", "/tmp/tmux-1000/default,1234,0")
    monkeypatch.setattr(core.subprocess, "run", fake)
    return fake
