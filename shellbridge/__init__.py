"""
shellbridge - translate single command lines between bash and PowerShell.

  echo $HOME        <->  Write-Output $env:HOME
  echo $? $$        <->  Write-Output $LASTEXITCODE $PID
  cmd 2>/dev/null   ->   cmd 2>$null

Translation is purely syntactic: nothing is executed and no variable is
ever resolved.
"""

__version__ = "0.1.0"

from shellbridge.bash import escape, extract_variable_references, is_valid_var_name, tokenize
from shellbridge.dollar import convert_dollar_signs
from shellbridge.powershell import forward_translate, from_bash, reverse_translate, to_bash
from shellbridge.quoting import replace_outside_quotes
from shellbridge.shell_identity import (
    ShellIdentity,
    ShellKind,
    ShellSignals,
    classify_shell,
    detect_shell,
)

__all__ = [
    "ShellIdentity",
    "ShellKind",
    "ShellSignals",
    "classify_shell",
    "convert_dollar_signs",
    "detect_shell",
    "escape",
    "extract_variable_references",
    "forward_translate",
    "from_bash",
    "is_valid_var_name",
    "replace_outside_quotes",
    "reverse_translate",
    "tokenize",
    "to_bash",
]
