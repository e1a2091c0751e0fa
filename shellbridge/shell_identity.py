"""
Shell identification for shellbridge.

Classifies the user's shell from three environment signals:

  SHELL          POSIX login shell path (bash, zsh, fish, ...)
  PSModulePath   set whenever PowerShell is the host
  COMSPEC        Windows command processor

The POSIX signal wins when present, then PowerShell, then cmd.
"""

import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional


class ShellKind(Enum):
    """Recognised shell families."""
    BASH = "bash"
    ZSH = "zsh"
    FISH = "fish"
    POWERSHELL = "powershell"
    CMD = "cmd"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class ShellSignals:
    """The environment lookups shell classification depends on."""

    shell: Optional[str] = None
    ps_module_path: Optional[str] = None
    comspec: Optional[str] = None

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "ShellSignals":
        env = os.environ if environ is None else environ
        return cls(
            shell=env.get("SHELL"),
            ps_module_path=env.get("PSModulePath"),
            comspec=env.get("COMSPEC"),
        )


@dataclass(frozen=True)
class ShellIdentity:
    """A classified shell; ``raw`` carries the unrecognised value for UNKNOWN."""

    kind: ShellKind
    raw: Optional[str] = None

    @classmethod
    def unknown(cls, raw: str) -> "ShellIdentity":
        return cls(ShellKind.UNKNOWN, raw)

    @property
    def is_posix(self) -> bool:
        """True for POSIX-compatible shells (fish is not one)."""
        return self.kind in (ShellKind.BASH, ShellKind.ZSH)

    @property
    def is_windows(self) -> bool:
        """True for shells native to Windows."""
        return self.kind in (ShellKind.POWERSHELL, ShellKind.CMD)

    def __str__(self) -> str:
        if self.kind is ShellKind.UNKNOWN:
            return f"unknown ({self.raw})"
        return self.kind.value


def classify_shell(signals: ShellSignals) -> ShellIdentity:
    """
    Classify a shell from its environment signals.

    Args:
        signals: SHELL / PSModulePath / COMSPEC lookups

    Returns:
        The matching ShellIdentity. An unrecognised SHELL value is kept
        verbatim in an UNKNOWN identity; no signal at all yields
        ``UNKNOWN("unknown")``.
    """
    if signals.shell is not None:
        shell = signals.shell
        if "bash" in shell:
            return ShellIdentity(ShellKind.BASH)
        if "zsh" in shell:
            return ShellIdentity(ShellKind.ZSH)
        if "fish" in shell:
            return ShellIdentity(ShellKind.FISH)
        return ShellIdentity.unknown(shell)

    if signals.ps_module_path is not None:
        return ShellIdentity(ShellKind.POWERSHELL)
    if signals.comspec is not None:
        return ShellIdentity(ShellKind.CMD)
    return ShellIdentity.unknown("unknown")


def detect_shell(environ: Optional[Mapping[str, str]] = None) -> ShellIdentity:
    """Classify the shell of the current process (or of *environ*)."""
    return classify_shell(ShellSignals.from_environ(environ))
