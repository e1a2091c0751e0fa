"""
Syntax highlighting for shellbridge input and translations.

  Flags   (-m, --verbose, -Path)   grey
  Strings ("...", '...')           green
  Variables ($VAR, $env:VAR)       yellow
  Cmdlets (Write-Output)           cyan
  Pipes & operators (|, &&)        cyan
  Numbers, /dev/null               purple
  Subexpressions ($( ... ))        pink
  Comments (#..., <# ... #>)       dark grey / italic

Uses Pygments for lexing; the interactive session renders through
prompt_toolkit, one-shot output through a 256-colour terminal formatter.
"""

import re

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexer import RegexLexer, default, include
from pygments.token import (
    Token,
    Comment,
    Keyword,
    String,
    Name,
    Number,
    Operator,
    Punctuation,
)
from pygments.style import Style as PygmentsStyle

from shellbridge.tables import BASH_TO_POWERSHELL


BASH = "bash"
POWERSHELL = "powershell"


# ---------------------------------------------------------------------------
# Lexers, tuned for single command lines
# ---------------------------------------------------------------------------

def _command_names_pattern() -> str:
    names = sorted(BASH_TO_POWERSHELL, key=len, reverse=True)
    return r"(?:%s)(?=[\s;|&)]|$)" % "|".join(re.escape(name) for name in names)


class ShellLexer(RegexLexer):
    """
    Lexer for bash command lines typed into the translator.

    Commands the translator knows are highlighted wherever a command may
    start: at the beginning of the line, after ``|``, ``&&``, ``||`` or
    ``;``, and inside ``$( ... )``. Operators it rewrites (``2>&1``,
    ``/dev/null``) come out as single tokens.
    """

    name = "ShellInput"
    aliases = ["shellinput"]

    tokens = {
        # command position
        "root": [
            (r"\s+", Token.Text),
            (_command_names_pattern(), Name.Builtin, "args"),
            default("args"),
        ],
        "args": [
            (r"\|\||&&|\||;|&(?!>)", Operator, "#pop"),
            (r"\)", Token.Text),
            include("words"),
        ],
        "subexpr": [
            (r"\s+", Token.Text),
            (_command_names_pattern(), Name.Builtin, "subargs"),
            default("subargs"),
        ],
        "subargs": [
            (r"\)", String.Interpol, "#pop:2"),
            (r"\|\||&&|\||;|&(?!>)", Operator, "#pop"),
            include("words"),
        ],
        "words": [
            (r"#.*$", Comment.Single),

            (r'"(?:\\.|[^"\\])*"', String.Double),
            (r"'[^']*'", String.Single),
            (r"`[^`]*`", String.Backtick),

            (r"\$\(", String.Interpol, "subexpr"),
            (r"\$\{[^}]+\}", Name.Variable),
            (r"\$[A-Za-z_]\w*", Name.Variable),
            (r"\$[?$!#@*0-9]", Name.Variable),

            (r"--[A-Za-z0-9][\w-]*", Name.Tag),
            (r"(?<=\s)-[A-Za-z0-9]+", Name.Tag),

            # fd duplication before plain redirection
            (r"[12]?>&[12]", Operator),
            (r"&>|[12]?>{1,2}|<", Operator),
            (r"/dev/null(?![\w/.-])", Keyword.Constant),

            (r"\b\d+\b", Number.Integer),

            (r"[^\s|;&<>()$'\"`]+", Token.Text),
            (r"\s+", Token.Text),
            (r".", Token.Text),
        ],
    }


class PowerShellInputLexer(RegexLexer):
    """Lexer for PowerShell command lines produced by the translator."""

    name = "PowerShellInput"
    aliases = ["powershellinput"]

    tokens = {
        "root": [
            (r"<#.*?#>", Comment.Multiline),
            (r"#.*$", Comment.Single),

            (r'"(?:`.|[^"`])*"', String.Double),
            (r"'[^']*'", String.Single),

            (r"\$env:\w+", Name.Variable),
            (r"\$[A-Za-z_][\w.]*(\[\d+\])?", Name.Variable),

            # Verb-Noun cmdlets
            (r"\b[A-Z][a-z]+-[A-Z][A-Za-z]+\b", Name.Builtin),

            (r"(?<=\s)-[A-Za-z][\w]*", Name.Tag),

            (r"\|{1,2}", Operator),
            (r"&&", Operator),
            (r"[*12]?>{1,2}(&1)?", Operator),
            (r";", Punctuation),

            (r"\b\d+\b", Number.Integer),

            (r"\S+", Token.Text),
            (r"\s+", Token.Text),
        ],
    }


LEXERS = {
    BASH: ShellLexer,
    POWERSHELL: PowerShellInputLexer,
}


# ---------------------------------------------------------------------------
# Colour palette (Monokai-inspired)
# ---------------------------------------------------------------------------

class ShellbridgeStyle(PygmentsStyle):
    """Pygments colour theme for command highlighting."""

    default_style = ""
    styles = {
        Token.Text:        "",
        Comment.Single:    "#6a6a6a italic",
        Comment.Multiline: "#6a6a6a italic",
        String.Double:     "#a6e22e",
        String.Single:     "#a6e22e",
        String.Backtick:   "#a6e22e",
        String.Interpol:   "#f92672",
        Name.Variable:     "#e6db74",
        Name.Builtin:      "#66d9ef",
        Name.Tag:          "#888888",
        Keyword.Constant:  "#ae81ff",
        Operator:          "#66d9ef",
        Punctuation:       "#66d9ef",
        Number.Integer:    "#ae81ff",
    }


# Prompt segment styles for the interactive session
PROMPT_STYLE = {
    "prompt-name":  "#00d7d7 bold",
    "prompt-sep":   "#888888",
    "prompt-mode":  "#ffffff",
    "prompt-arrow": "#6a6a6a",
}


def highlight_command(command: str, dialect: str) -> str:
    """
    Colour *command* for a 256-colour terminal.

    Args:
        command: A single command line
        dialect: ``"bash"`` or ``"powershell"``

    Returns:
        The command wrapped in ANSI escapes, without a trailing newline.
    """
    lexer_cls = LEXERS.get(dialect)
    if lexer_cls is None:
        raise ValueError(f"Unknown dialect: {dialect}. Supported: 'bash', 'powershell'")
    rendered = highlight(command, lexer_cls(), Terminal256Formatter(style=ShellbridgeStyle))
    return rendered.rstrip("\n")
