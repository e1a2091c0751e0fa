"""
Bash <-> PowerShell command-line translation.

``from_bash`` runs three independent passes over a line:

  1. the leading command name (echo -> Write-Output, ...)
  2. control operators outside quotes (2>&1 -> *>&1, /dev/null -> $null)
  3. dollar-sign expressions ($HOME -> $env:HOME, $? -> $LASTEXITCODE, ...)

Text inserted by one pass is never re-read as syntax by a later one, so
``> /dev/null`` becomes ``> $null`` and not ``> $env:null``.

``to_bash`` undoes the variable prefix and a subset of the command
names. It is not an exact inverse: ``to_bash(from_bash(s)) == s`` does
not hold in general.
"""

import logging
from typing import List

from shellbridge.bash import is_name_char, tokenize
from shellbridge.dollar import convert_segments
from shellbridge.quoting import (
    Segment,
    TranslationState,
    join_segments,
    replace_outside_quotes,
    replace_segments,
)
from shellbridge.tables import (
    BASH_TO_POWERSHELL,
    ENV_PREFIX,
    POWERSHELL_TO_BASH,
    rewritten_operators,
)


logger = logging.getLogger(__name__)


# ===================================================================
# bash -> PowerShell
# ===================================================================

def _translate_command_name(bash_cmd: str) -> List[Segment]:
    tokens = tokenize(bash_cmd)
    if not tokens:
        return [(bash_cmd, False)]

    first_token = tokens[0]
    # /usr/bin/echo -> echo
    cmd_name = first_token.rsplit("/", 1)[-1]
    ps_cmd = BASH_TO_POWERSHELL.get(cmd_name)
    if ps_cmd is None:
        return [(bash_cmd, False)]

    logger.debug("command %r -> %r", first_token, ps_cmd)
    start = bash_cmd.find(first_token)
    end = start + len(first_token)
    segments: List[Segment] = []
    if start:
        segments.append((bash_cmd[:start], False))
    segments.append((ps_cmd, True))
    if end < len(bash_cmd):
        segments.append((bash_cmd[end:], False))
    return segments


def from_bash(bash_cmd: str) -> str:
    """
    Convert a bash command line to its PowerShell equivalent.

    Args:
        bash_cmd: A single bash command line

    Returns:
        The PowerShell command line. Quoted text keeps its operators,
        single-quoted text keeps its dollar signs.

    Examples:
        >>> from_bash("echo $HOME")
        'Write-Output $env:HOME'
        >>> from_bash("echo $?")
        'Write-Output $LASTEXITCODE'
    """
    segments = _translate_command_name(bash_cmd)

    for bash_op, ps_op in rewritten_operators():
        segments = replace_segments(segments, bash_op, ps_op)

    segments = convert_segments(segments)
    result = join_segments(segments)
    if result != bash_cmd:
        logger.debug("from_bash: %r -> %r", bash_cmd, result)
    return result


# ===================================================================
# PowerShell -> bash
# ===================================================================

def _strip_env_prefix(ps_cmd: str, respect_quotes: bool) -> str:
    """``$env:HOME`` -> ``$HOME``; the name is the ASCII word after the prefix."""
    out: List[str] = []
    state = TranslationState()
    width = len(ENV_PREFIX)
    length = len(ps_cmd)

    while state.cursor < length:
        ch = ps_cmd[state.cursor]
        if respect_quotes and state.toggle(ch):
            out.append(ch)
            state.cursor += 1
            continue

        if not (respect_quotes and state.quoted) and ps_cmd.startswith(ENV_PREFIX, state.cursor):
            out.append("$")
            state.cursor += width
            while state.cursor < length and is_name_char(ps_cmd[state.cursor]):
                out.append(ps_cmd[state.cursor])
                state.cursor += 1
            continue

        out.append(ch)
        state.cursor += 1

    return "".join(out)


def to_bash(ps_cmd: str, respect_quotes: bool = False) -> str:
    """
    Convert a PowerShell command line back to bash.

    Args:
        ps_cmd: A single PowerShell command line
        respect_quotes: Leave quoted spans untouched. Off by default, in
            which case names are replaced everywhere, quoted or not.

    Returns:
        The bash command line.
    """
    result = _strip_env_prefix(ps_cmd, respect_quotes)

    for ps_name, bash_name in POWERSHELL_TO_BASH:
        if respect_quotes:
            result = replace_outside_quotes(result, ps_name, bash_name)
        else:
            result = result.replace(ps_name, bash_name)

    if result != ps_cmd:
        logger.debug("to_bash: %r -> %r", ps_cmd, result)
    return result


forward_translate = from_bash
reverse_translate = to_bash
