"""
Bash <-> PowerShell equivalence tables.

One bidirectional command table is the source of truth; the forward map
and the (smaller) reverse replacement list are both derived from it so
the two directions cannot drift apart.
"""

from types import MappingProxyType
from typing import Mapping, NamedTuple, Tuple


class CommandEquivalent(NamedTuple):
    """A bash command name and the PowerShell text that replaces it."""
    bash: str
    powershell: str
    reversible: bool = False


# ===================================================================
# PowerShell spellings used by the dollar-sign rewrite
# ===================================================================

ENV_PREFIX = "$env:"
LAST_EXIT_CODE = "$LASTEXITCODE"
PROCESS_ID = "$PID"
ARGUMENT_LIST = "$args"
ARGUMENT_COUNT = "$args.Count"
INVOCATION_NAME = "$MyInvocation.MyCommand.Name"
BACKGROUND_JOB_PLACEHOLDER = "<# $! not supported #>"
PIPELINE_VARIABLE = "$_"


# ===================================================================
# Commands
# ===================================================================

COMMAND_TABLE: Tuple[CommandEquivalent, ...] = (
    CommandEquivalent("echo",     "Write-Output",                          reversible=True),
    CommandEquivalent("cat",      "Get-Content",                           reversible=True),
    CommandEquivalent("ls",       "Get-ChildItem",                         reversible=True),
    CommandEquivalent("cp",       "Copy-Item",                             reversible=True),
    CommandEquivalent("mv",       "Move-Item",                             reversible=True),
    CommandEquivalent("rm",       "Remove-Item",                           reversible=True),
    CommandEquivalent("mkdir",    "New-Item -ItemType Directory -Path"),
    CommandEquivalent("rmdir",    "Remove-Item -Recurse"),
    CommandEquivalent("pwd",      "Get-Location",                          reversible=True),
    CommandEquivalent("cd",       "Set-Location",                          reversible=True),
    CommandEquivalent("grep",     "Select-String"),
    CommandEquivalent("find",     "Get-ChildItem -Recurse"),
    CommandEquivalent("sort",     "Sort-Object"),
    CommandEquivalent("head",     "Select-Object -First"),
    CommandEquivalent("tail",     "Select-Object -Last"),
    CommandEquivalent("wc",       "Measure-Object"),
    CommandEquivalent("touch",    "New-Item -ItemType File -Path"),
    CommandEquivalent("chmod",    "# chmod not applicable on Windows"),
    CommandEquivalent("chown",    "# chown not applicable on Windows"),
    CommandEquivalent("which",    "Get-Command"),
    CommandEquivalent("whoami",   "$env:USERNAME"),
    CommandEquivalent("hostname", "$env:COMPUTERNAME"),
    CommandEquivalent("date",     "Get-Date"),
    CommandEquivalent("sleep",    "Start-Sleep -Seconds"),
    CommandEquivalent("kill",     "Stop-Process -Id"),
    CommandEquivalent("ps",       "Get-Process"),
    CommandEquivalent("env",      "Get-ChildItem Env:"),
    CommandEquivalent("export",   "$env:"),
    CommandEquivalent("unset",    "Remove-Item Env:"),
    CommandEquivalent("curl",     "Invoke-WebRequest"),
    CommandEquivalent("wget",     "Invoke-WebRequest -OutFile"),
    CommandEquivalent("tar",      "Expand-Archive"),
    CommandEquivalent("zip",      "Compress-Archive"),
    CommandEquivalent("unzip",    "Expand-Archive"),
    CommandEquivalent("diff",     "Compare-Object"),
    CommandEquivalent("tee",      "Tee-Object"),
    CommandEquivalent("true",     "$true"),
    CommandEquivalent("false",    "$false"),
    CommandEquivalent("test",     "Test-Path"),
)

BASH_TO_POWERSHELL: Mapping[str, str] = MappingProxyType(
    {entry.bash: entry.powershell for entry in COMMAND_TABLE}
)


# ===================================================================
# Control operators
# ===================================================================

# PowerShell 7+ accepts && and || natively, so they map to themselves.
OPERATOR_TABLE: Tuple[Tuple[str, str], ...] = (
    ("&&", "&&"),
    ("||", "||"),
    ("|", "|"),
    (">", ">"),
    (">>", ">>"),
    ("2>&1", "*>&1"),
    ("/dev/null", "$null"),
)

BASH_OPERATORS_TO_POWERSHELL: Mapping[str, str] = MappingProxyType(dict(OPERATOR_TABLE))


def rewritten_operators() -> Tuple[Tuple[str, str], ...]:
    """
    Operator pairs whose spelling differs between the dialects.

    Longest bash spelling first, so the replacement order is fixed.
    """
    pairs = [
        (bash_op, ps_op) for bash_op, ps_op in OPERATOR_TABLE
        if bash_op != "|" and bash_op != ps_op
    ]
    return tuple(sorted(pairs, key=lambda pair: len(pair[0]), reverse=True))


# ===================================================================
# Reverse direction
# ===================================================================

SPECIAL_VARIABLES: Tuple[Tuple[str, str], ...] = (
    (LAST_EXIT_CODE, "$?"),
    (PROCESS_ID, "$$"),
)

# Applied in order: reversible commands first, then special variables.
POWERSHELL_TO_BASH: Tuple[Tuple[str, str], ...] = tuple(
    (entry.powershell, entry.bash) for entry in COMMAND_TABLE if entry.reversible
) + SPECIAL_VARIABLES
