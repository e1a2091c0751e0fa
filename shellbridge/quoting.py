"""
Quote tracking shared by the rewrite passes.

A command line moves through the translator as a list of segments. Each
segment is ``(text, generated)``: ``generated`` marks text a previous pass
inserted, which later passes copy through untouched and which never
changes quote state.
"""

from dataclasses import dataclass
from typing import Iterable, List, Tuple


Segment = Tuple[str, bool]


@dataclass
class TranslationState:
    """Scanner position and quote state; at most one quote flag is set."""

    in_single_quote: bool = False
    in_double_quote: bool = False
    cursor: int = 0

    @property
    def quoted(self) -> bool:
        return self.in_single_quote or self.in_double_quote

    def toggle(self, ch: str) -> bool:
        """Flip quote state if *ch* opens or closes a span; return True if it did."""
        if ch == "'" and not self.in_double_quote:
            self.in_single_quote = not self.in_single_quote
            return True
        if ch == '"' and not self.in_single_quote:
            self.in_double_quote = not self.in_double_quote
            return True
        return False


def join_segments(segments: Iterable[Segment]) -> str:
    return "".join(text for text, _ in segments)


def append_segment(segments: List[Segment], text: str, generated: bool) -> None:
    """Append *text*, merging with the previous segment of the same kind."""
    if not text:
        return
    if segments and segments[-1][1] == generated:
        segments[-1] = (segments[-1][0] + text, generated)
    else:
        segments.append((text, generated))


def replace_segments(segments: Iterable[Segment], old: str, new: str) -> List[Segment]:
    """
    Replace *old* with *new* wherever it starts outside quotes.

    Matches are found left to right without overlap; after a match the
    scan continues ``len(old)`` characters further on in the source.
    Replacements are emitted as generated segments.
    """
    result: List[Segment] = []
    if not old:
        for text, generated in segments:
            append_segment(result, text, generated)
        return result

    state = TranslationState()
    width = len(old)

    for text, generated in segments:
        if generated:
            append_segment(result, text, True)
            continue

        buf: List[str] = []
        state.cursor = 0
        length = len(text)
        while state.cursor < length:
            ch = text[state.cursor]
            if state.toggle(ch):
                buf.append(ch)
                state.cursor += 1
                continue

            if not state.quoted and text.startswith(old, state.cursor):
                append_segment(result, "".join(buf), False)
                buf = []
                append_segment(result, new, True)
                state.cursor += width
                continue

            buf.append(ch)
            state.cursor += 1
        append_segment(result, "".join(buf), False)

    return result


def replace_outside_quotes(text: str, old: str, new: str) -> str:
    """
    Replace occurrences of *old* with *new* only outside quoted strings.

    ``"a && b"`` and ``'2>&1'`` are never touched.
    """
    return join_segments(replace_segments([(text, False)], old, new))
