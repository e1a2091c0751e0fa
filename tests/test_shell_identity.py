"""
Tests for shell classification.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from shellbridge.shell_identity import (
    ShellIdentity,
    ShellKind,
    ShellSignals,
    classify_shell,
    detect_shell,
)


def test_posix_shells_from_shell_path():
    assert classify_shell(ShellSignals(shell="/bin/bash")).kind is ShellKind.BASH
    assert classify_shell(ShellSignals(shell="/usr/bin/zsh")).kind is ShellKind.ZSH
    assert classify_shell(ShellSignals(shell="/usr/local/bin/fish")).kind is ShellKind.FISH


def test_unknown_shell_keeps_raw_value():
    identity = classify_shell(ShellSignals(shell="/bin/tcsh"))
    assert identity == ShellIdentity.unknown("/bin/tcsh")
    assert identity.raw == "/bin/tcsh"


def test_windows_shells():
    assert classify_shell(ShellSignals(ps_module_path="C:\\Modules")).kind is ShellKind.POWERSHELL
    assert classify_shell(ShellSignals(comspec="C:\\Windows\\system32\\cmd.exe")).kind is ShellKind.CMD


def test_shell_signal_takes_precedence():
    signals = ShellSignals(shell="/bin/bash", ps_module_path="x", comspec="y")
    assert classify_shell(signals).kind is ShellKind.BASH
    assert classify_shell(ShellSignals(ps_module_path="x", comspec="y")).kind is ShellKind.POWERSHELL


def test_no_signals():
    assert classify_shell(ShellSignals()) == ShellIdentity.unknown("unknown")


def test_is_posix():
    assert ShellIdentity(ShellKind.BASH).is_posix
    assert ShellIdentity(ShellKind.ZSH).is_posix
    assert not ShellIdentity(ShellKind.FISH).is_posix
    assert not ShellIdentity(ShellKind.POWERSHELL).is_posix
    assert not ShellIdentity(ShellKind.CMD).is_posix


def test_is_windows():
    assert ShellIdentity(ShellKind.POWERSHELL).is_windows
    assert ShellIdentity(ShellKind.CMD).is_windows
    assert not ShellIdentity(ShellKind.BASH).is_windows
    assert not ShellIdentity(ShellKind.ZSH).is_windows


def test_detect_shell_from_mapping():
    assert detect_shell({"SHELL": "/bin/zsh"}).kind is ShellKind.ZSH
    assert detect_shell({"PSModulePath": "C:\\Modules"}).kind is ShellKind.POWERSHELL
    assert detect_shell({}) == ShellIdentity.unknown("unknown")


def test_detect_shell_reads_environment(monkeypatch):
    monkeypatch.setenv("SHELL", "/bin/bash")
    assert detect_shell().kind is ShellKind.BASH


def test_str():
    assert str(ShellIdentity(ShellKind.POWERSHELL)) == "powershell"
    assert str(ShellIdentity.unknown("/bin/tcsh")) == "unknown (/bin/tcsh)"
