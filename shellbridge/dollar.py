"""
Context-aware rewrite of bash ``$`` expressions into PowerShell.

A single ``$`` can mean a command substitution, a braced or plain
variable, one of bash's special parameters, or nothing at all. The
scanner below walks the line once, tracks quoting, and decides from the
character after each ``$``:

  $(        kept as-is (PowerShell subexpression)
  ${NAME}   $env:NAME, expansion suffix dropped
  $?        $LASTEXITCODE
  $$        $PID
  $!        inert comment, PowerShell has no equivalent
  $#        $args.Count
  $@ $*     $args
  $0        $MyInvocation.MyCommand.Name
  $1..$9    $args[0]..$args[8]
  $_        kept as-is when not followed by a name character
  $NAME     $env:NAME
  $         anything else is a literal dollar

Inside single quotes nothing is rewritten; inside double quotes the same
rules apply because bash expands there too.
"""

from typing import Iterable, List

from shellbridge.bash import base_name, is_name_char, is_name_start, is_valid_var_name
from shellbridge.quoting import Segment, TranslationState, append_segment, join_segments
from shellbridge.tables import (
    ARGUMENT_COUNT,
    ARGUMENT_LIST,
    BACKGROUND_JOB_PLACEHOLDER,
    ENV_PREFIX,
    INVOCATION_NAME,
    LAST_EXIT_CODE,
    PIPELINE_VARIABLE,
    PROCESS_ID,
)


_SINGLE_CHAR_PARAMETERS = {
    "?": LAST_EXIT_CODE,
    "$": PROCESS_ID,
    "!": BACKGROUND_JOB_PLACEHOLDER,
    "#": ARGUMENT_COUNT,
    "@": ARGUMENT_LIST,
    "*": ARGUMENT_LIST,
}


def _positional(digit: str) -> str:
    if digit == "0":
        return INVOCATION_NAME
    return f"{ARGUMENT_LIST}[{int(digit) - 1}]"


def _source_end(generated: List[bool], start: int) -> int:
    """End of the run of source characters beginning at *start*."""
    end = start
    while end < len(generated) and not generated[end]:
        end += 1
    return end


def _convert_dollar(text: str, generated: List[bool], state: TranslationState,
                    out: List[Segment]) -> None:
    """
    Rewrite the ``$`` at ``state.cursor`` into *out* and advance past it.

    Lookahead stops at generated text, except for the ``}`` closing a
    ``${``, which may lie beyond an operator rewritten inside the braces.
    Only called outside single quotes.
    """
    i = state.cursor
    length = _source_end(generated, i)

    if i + 1 >= length:
        # trailing $
        append_segment(out, "$", False)
        state.cursor += 1
        return

    nxt = text[i + 1]

    if nxt == "(":
        append_segment(out, "$", False)
        state.cursor += 1
        return

    if nxt == "{":
        close = text.find("}", i + 2)
        if close == -1:
            append_segment(out, "$", False)
            state.cursor += 1
            return
        braced = text[i + 2:close]
        name = base_name(braced)
        if is_valid_var_name(name):
            append_segment(out, ENV_PREFIX + name, False)
        else:
            append_segment(out, "${" + braced + "}", False)
        state.cursor = close + 1
        return

    if nxt in _SINGLE_CHAR_PARAMETERS:
        append_segment(out, _SINGLE_CHAR_PARAMETERS[nxt], False)
        state.cursor += 2
        return

    if nxt.isascii() and nxt.isdigit():
        append_segment(out, _positional(nxt), False)
        state.cursor += 2
        return

    if nxt == "_" and (i + 2 >= length or not text[i + 2].isalnum()):
        append_segment(out, PIPELINE_VARIABLE, False)
        state.cursor += 2
        return

    if is_name_start(nxt):
        end = i + 1
        while end < length and is_name_char(text[end]):
            end += 1
        append_segment(out, ENV_PREFIX + text[i + 1:end], False)
        state.cursor = end
        return

    append_segment(out, "$", False)
    state.cursor += 1


def convert_segments(segments: Iterable[Segment]) -> List[Segment]:
    """
    Run the dollar-sign rewrite over the source segments of a line.

    Generated text is copied verbatim and never toggles quote state. A
    ``$`` directly before generated text is literal.
    """
    segments = list(segments)
    text = join_segments(segments)
    generated = [gen for piece, gen in segments for _ in piece]

    result: List[Segment] = []
    state = TranslationState()
    length = len(text)

    while state.cursor < length:
        ch = text[state.cursor]
        if generated[state.cursor]:
            append_segment(result, ch, True)
            state.cursor += 1
        elif state.toggle(ch):
            append_segment(result, ch, False)
            state.cursor += 1
        elif ch == "$" and not state.in_single_quote:
            _convert_dollar(text, generated, state, result)
        else:
            append_segment(result, ch, False)
            state.cursor += 1

    return result


def convert_dollar_signs(text: str) -> str:
    """Rewrite every ``$`` expression in *text* for PowerShell."""
    return join_segments(convert_segments([(text, False)]))
