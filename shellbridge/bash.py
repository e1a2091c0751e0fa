"""
Bash-side helpers: tokenizing, quoting and variable-reference scanning.

These work on a single command line. Nothing here evaluates anything;
variables are found, never resolved.
"""

from typing import List


# Parameter-expansion operators that end the name inside ${...}
EXPANSION_OPERATORS = ":-+="


def is_name_char(ch: str) -> bool:
    """Return True if *ch* may appear in a bash variable name."""
    return ch == "_" or (ch.isascii() and ch.isalnum())


def is_name_start(ch: str) -> bool:
    """Return True if *ch* may begin a bash variable name."""
    return ch == "_" or (ch.isascii() and ch.isalpha())


def is_valid_var_name(name: str) -> bool:
    """
    Check whether *name* is a valid variable identifier.

    ``HOME``, ``_private`` and ``var123`` are valid; ``123var``,
    ``var-name`` and the empty string are not.
    """
    if not name:
        return False
    first = name[0]
    if not first.isalpha() and first != "_":
        return False
    return all(ch.isalnum() or ch == "_" for ch in name)


def base_name(braced: str) -> str:
    """Strip any expansion operator suffix: ``HOME:-/root`` -> ``HOME``."""
    for i, ch in enumerate(braced):
        if ch in EXPANSION_OPERATORS:
            return braced[:i]
    return braced


def escape(s: str) -> str:
    """Single-quote *s* for bash: ``it's`` -> ``'it'\\''s'``."""
    return "'" + s.replace("'", "'\\''") + "'"


def tokenize(cmd: str) -> List[str]:
    """
    Split *cmd* on unquoted whitespace.

    Quote characters stay in the token so callers can tell it was quoted.
    A backslash outside single quotes escapes the next character; both are
    kept. Unbalanced quotes never fail, the partial token is returned.
    """
    tokens: List[str] = []
    current: List[str] = []
    in_single_quote = False
    in_double_quote = False
    escape_next = False

    for ch in cmd:
        if escape_next:
            current.append(ch)
            escape_next = False
            continue

        if ch == "\\" and not in_single_quote:
            escape_next = True
            current.append(ch)
            continue

        if ch == "'" and not in_double_quote:
            in_single_quote = not in_single_quote
            current.append(ch)
            continue

        if ch == '"' and not in_single_quote:
            in_double_quote = not in_double_quote
            current.append(ch)
            continue

        if ch.isspace() and not in_single_quote and not in_double_quote:
            if current:
                tokens.append("".join(current))
                current = []
            continue

        current.append(ch)

    if current:
        tokens.append("".join(current))

    return tokens


def extract_variable_references(cmd: str) -> List[str]:
    """
    List the variables *cmd* references as ``$NAME`` or ``${NAME...}``.

    Names come back in the order they appear, duplicates included.
    Special parameters (``$?``, ``$1``, ...) and invalid names such as
    ``${123abc}`` are skipped.
    """
    names: List[str] = []
    length = len(cmd)
    i = 0

    while i < length:
        if cmd[i] == "$" and i + 1 < length:
            nxt = cmd[i + 1]
            if nxt == "{":
                close = cmd.find("}", i + 2)
                if close != -1:
                    name = base_name(cmd[i + 2:close])
                    if is_valid_var_name(name):
                        names.append(name)
                    i = close + 1
                    continue
            elif is_name_start(nxt):
                end = i + 1
                while end < length and is_name_char(cmd[end]):
                    end += 1
                name = cmd[i + 1:end]
                if is_valid_var_name(name):
                    names.append(name)
                i = end
                continue
        i += 1

    return names
