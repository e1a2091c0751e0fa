"""
Command lookups against the equivalence table, with fuzzy suggestions
for names the table does not know.
"""

from typing import List, Optional

from thefuzz import fuzz

from shellbridge.tables import COMMAND_TABLE, CommandEquivalent


def _ps_command_name(powershell: str) -> str:
    # "Select-Object -First" -> "select-object"
    return powershell.split()[0].lower() if powershell.strip() else ""


def lookup(name: str) -> List[CommandEquivalent]:
    """
    Find table entries for *name* in either dialect.

    Bash names match exactly; PowerShell cmdlets match case-insensitively
    on the cmdlet itself, so ``get-childitem`` finds both ``ls`` and
    ``find``.
    """
    name = name.strip()
    if not name:
        return []
    matches = [entry for entry in COMMAND_TABLE if entry.bash == name]
    if matches:
        return matches
    lowered = name.lower()
    return [entry for entry in COMMAND_TABLE if _ps_command_name(entry.powershell) == lowered]


def suggest(name: str, threshold: int = 70) -> Optional[str]:
    """
    Find the closest known command name using fuzzy matching.

    Args:
        name: Unknown command name
        threshold: Minimum similarity score (0-100)

    Returns:
        Best matching bash or PowerShell name, or None
    """
    query = name.lower().strip()
    if not query:
        return None

    best_match = None
    best_score = threshold
    for entry in COMMAND_TABLE:
        candidates = [entry.bash]
        cmdlet = entry.powershell.split()[0] if entry.powershell.strip() else ""
        if cmdlet[:1].isalpha():
            candidates.append(cmdlet)
        for candidate in candidates:
            score = fuzz.ratio(query, candidate.lower())
            if score > best_score:
                best_score = score
                best_match = candidate

    return best_match
