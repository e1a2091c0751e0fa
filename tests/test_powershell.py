"""
Tests for bash <-> PowerShell translation.
"""

import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from shellbridge import forward_translate, reverse_translate
from shellbridge.powershell import from_bash, to_bash
from shellbridge.tables import POWERSHELL_TO_BASH


# ===== from_bash =====

def test_from_bash_simple_echo():
    assert from_bash("echo hello") == "Write-Output hello"


def test_from_bash_env_var():
    assert from_bash("echo $HOME") == "Write-Output $env:HOME"


def test_from_bash_multiple_env_vars():
    assert from_bash("echo $HOME $PATH $USER") == "Write-Output $env:HOME $env:PATH $env:USER"


def test_from_bash_subshell_preserved():
    result = from_bash("echo $(whoami)")
    assert "$(" in result
    assert "$env:(" not in result


def test_from_bash_special_variables():
    assert from_bash("echo $?") == "Write-Output $LASTEXITCODE"
    assert from_bash("echo $$") == "Write-Output $PID"


def test_from_bash_bang_not_pid():
    result = from_bash("echo $!")
    assert "<# $! not supported #>" in result
    assert "$PID" not in result


def test_from_bash_positional():
    result = from_bash("echo $1")
    assert "$env:1" not in result
    assert result == "Write-Output $args[0]"


def test_from_bash_brace_variable():
    assert "$env:HOME" in from_bash("echo ${HOME}")


def test_from_bash_trailing_dollar():
    assert "cost$" in from_bash("echo cost$")


def test_from_bash_dollar_in_single_quotes():
    result = from_bash("echo '$HOME'")
    assert "'$HOME'" in result
    assert "$env:HOME" not in result


def test_from_bash_dollar_underscore():
    for cmd in ["echo $_", "echo $_ foo"]:
        result = from_bash(cmd)
        assert "$_" in result
        assert "$env:_" not in result


def test_from_bash_complex_command():
    result = from_bash("echo $HOME $(date) $? '$$'")
    assert result == "Write-Output $env:HOME $(date) $LASTEXITCODE '$$'"


def test_from_bash_and_operator_preserved():
    result = from_bash("mkdir foo && cd foo")
    assert "&&" in result
    assert "; cd" not in result
    assert result == "New-Item -ItemType Directory -Path foo && cd foo"


def test_from_bash_or_operator_preserved():
    assert "||" in from_bash("cmd1 || cmd2")


def test_from_bash_operators_inside_quotes_untouched():
    assert "\"a && b\"" in from_bash("echo \"a && b\"")
    assert "'2>&1'" in from_bash("echo '2>&1'")
    assert "\"/dev/null\"" in from_bash("echo \"/dev/null\"")


def test_from_bash_rewrites_operators():
    assert from_bash("make 2>&1") == "make *>&1"
    assert from_bash("make 2>/dev/null") == "make 2>$null"


def test_from_bash_inserted_text_not_reinterpreted():
    """Text produced by the command and operator passes is final."""
    assert from_bash("ls > /dev/null") == "Get-ChildItem > $null"
    assert from_bash("whoami") == "$env:USERNAME"
    assert from_bash("true && echo ok") == "$true && echo ok"


def test_from_bash_operator_inside_braced_default():
    """A rewritten operator in a ${...} default does not split the variable."""
    assert from_bash("echo ${HOME:-/dev/null}") == "Write-Output $env:HOME"
    assert from_bash("echo ${LOG:-2>&1}") == "Write-Output $env:LOG"
    assert from_bash("cat ${F:-/dev/null} > /dev/null") == "Get-Content $env:F > $null"


def test_from_bash_strips_command_path():
    assert from_bash("/usr/bin/echo hi") == "Write-Output hi"


def test_from_bash_first_occurrence_only():
    assert from_bash("echo echo") == "Write-Output echo"
    assert from_bash("sudo ls") == "sudo ls"


def test_from_bash_pass_through():
    """Lines without commands, operators or dollars come back unchanged."""
    for cmd in ["git status --short", "python -m pytest -q", "npm run build", "", "   "]:
        assert from_bash(cmd) == cmd


# ===== to_bash =====

def test_to_bash_env_var():
    assert to_bash("Write-Output $env:HOME") == "echo $HOME"


def test_to_bash_special_variables():
    assert to_bash("$LASTEXITCODE") == "$?"
    assert to_bash("$PID") == "$$"


def test_to_bash_inverse_pairs():
    for ps_name, bash_name in POWERSHELL_TO_BASH:
        assert to_bash(f"{ps_name} x") == f"{bash_name} x"


def test_to_bash_large_input():
    large = "$env:HOME " * 500
    result = to_bash(large)
    assert result == "$HOME " * 500
    assert "$env:" not in result


def test_to_bash_unicode_safe():
    assert to_bash("Write-Output $env:HOME \U0001F600") == "echo $HOME \U0001F600"
    assert to_bash("$env:HOMEé") == "$HOMEé"


def test_to_bash_ignores_quotes_by_default():
    assert to_bash("Write-Output 'Get-Content $env:X'") == "echo 'cat $X'"


def test_to_bash_respect_quotes():
    result = to_bash("Write-Output 'Get-Content $env:X' $env:Y", respect_quotes=True)
    assert result == "echo 'Get-Content $env:X' $Y"


def test_to_bash_empty():
    assert to_bash("") == ""


# ===== round trips =====

def test_listed_pairs_round_trip():
    assert reverse_translate(forward_translate("echo $HOME")) == "echo $HOME"
    assert reverse_translate(forward_translate("cd $TMP")) == "cd $TMP"


def test_round_trip_is_not_general():
    """Only the listed inverse pairs come back; grep does not."""
    assert forward_translate("grep x") == "Select-String x"
    assert reverse_translate("Select-String x") == "Select-String x"
