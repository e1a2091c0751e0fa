"""
Interactive translation session.

Each line typed at the prompt is translated in the current direction and
printed. ``:ps`` and ``:bash`` switch direction, ``exit`` leaves.
"""

import logging
import sys
from pathlib import Path
from typing import Callable, List, Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.lexers import PygmentsLexer
from prompt_toolkit.styles import merge_styles, Style as PTStyle
from prompt_toolkit.styles.pygments import style_from_pygments_cls

from shellbridge.config import Config, TO_BASH, TO_POWERSHELL
from shellbridge.highlighting import (
    BASH,
    POWERSHELL,
    PROMPT_STYLE,
    PowerShellInputLexer,
    ShellLexer,
    ShellbridgeStyle,
    highlight_command,
)
from shellbridge.powershell import from_bash, to_bash


logger = logging.getLogger(__name__)

EXIT_COMMANDS = ("exit", "quit")
DIRECTION_COMMANDS = {
    ":ps": TO_POWERSHELL,
    ":powershell": TO_POWERSHELL,
    ":bash": TO_BASH,
}


class TranslationHistory:
    """Lines translated in past sessions, persisted under the config directory."""

    def __init__(self, max_size: int = 1000, history_file: Optional[Path] = None):
        self.history: List[str] = []
        self.max_size = max_size
        self.history_file = history_file

        if self.history_file:
            self._load_from_file()

    def _load_from_file(self):
        """Load history lines from the on-disk file."""
        if not self.history_file.exists():
            return
        try:
            with open(self.history_file, "r", encoding="utf-8") as f:
                lines = [line.rstrip("\n") for line in f if line.strip()]
        except OSError as e:
            logger.warning("Could not read history file %s: %s", self.history_file, e)
            return
        # Keep only the last max_size entries
        self.history = lines[-self.max_size:]

    def _append_to_file(self, line: str):
        if not self.history_file:
            return
        try:
            self.history_file.parent.mkdir(parents=True, exist_ok=True)
            with open(self.history_file, "a", encoding="utf-8") as f:
                f.write(line + "\n")
            self._trim_file()
        except OSError as e:
            logger.warning("Could not write history file %s: %s", self.history_file, e)

    def _trim_file(self):
        """Cut the file back to max_size lines once it holds twice that."""
        with open(self.history_file, "r", encoding="utf-8") as f:
            lines = f.readlines()
        if len(lines) > self.max_size * 2:
            with open(self.history_file, "w", encoding="utf-8") as f:
                f.writelines(lines[-self.max_size:])

    def add(self, line: str):
        """Add a line to history (memory + disk)."""
        self.history.append(line)
        if len(self.history) > self.max_size:
            self.history.pop(0)
        self._append_to_file(line)

    def to_prompt_history(self) -> InMemoryHistory:
        """Seed a prompt_toolkit history so arrow-up recalls earlier sessions."""
        pt_history = InMemoryHistory()
        for line in self.history:
            pt_history.store_string(line)
        return pt_history


class TranslatorSession:
    """Read-translate-print loop over single command lines."""

    def __init__(self, config: Config, color: Optional[bool] = None,
                 output: Callable[[str], None] = print):
        self.config = config
        self.direction = config.direction()
        self.respect_quotes = bool(config.get("reverse_respect_quotes", False))
        self.color = bool(config.get("color", True)) if color is None else color
        self.output = output
        self.running = True
        self.history = TranslationHistory(
            max_size=config.history_size(),
            history_file=config.history_file,
        )

    # ------------------------------------------------------------------
    # Line handling
    # ------------------------------------------------------------------
    def translate(self, line: str) -> str:
        """Translate *line* in the current direction."""
        if self.direction == TO_BASH:
            return to_bash(line, respect_quotes=self.respect_quotes)
        return from_bash(line)

    def render(self, translated: str) -> str:
        if not self.color:
            return translated
        dialect = BASH if self.direction == TO_BASH else POWERSHELL
        return highlight_command(translated, dialect)

    def handle_input(self, user_input: str):
        """Process one line of input."""
        line = user_input.strip()
        if not line:
            return

        if line.lower() in EXIT_COMMANDS:
            self.running = False
            return

        if line.lower() in DIRECTION_COMMANDS:
            self.direction = DIRECTION_COMMANDS[line.lower()]
            logger.debug("direction switched to %s", self.direction)
            self.output(f"[mode] {self.direction}")
            return

        self.history.add(line)
        self.output(self.render(self.translate(line)))

    # ------------------------------------------------------------------
    # Prompt
    # ------------------------------------------------------------------
    def _create_prompt_session(self) -> PromptSession:
        """Build a PromptSession highlighting input in the source dialect."""
        style = merge_styles([
            style_from_pygments_cls(ShellbridgeStyle),
            PTStyle.from_dict(PROMPT_STYLE),
        ])
        return PromptSession(
            lexer=PygmentsLexer(ShellLexer),
            style=style,
            history=self.history.to_prompt_history(),
        )

    def _prompt_message(self):
        source = "bash" if self.direction == TO_POWERSHELL else "ps"
        return [
            ("class:prompt-name", "shellbridge"),
            ("class:prompt-sep", ":"),
            ("class:prompt-mode", source),
            ("", " "),
            ("class:prompt-arrow", "> "),
        ]

    def run(self):
        """Main session loop."""
        # Piped input: no prompt, no highlighting of the input line
        session = self._create_prompt_session() if sys.stdin.isatty() else None

        while self.running:
            try:
                if session is not None:
                    lexer = PygmentsLexer(
                        ShellLexer if self.direction == TO_POWERSHELL else PowerShellInputLexer
                    )
                    user_input = session.prompt(self._prompt_message(), lexer=lexer)
                else:
                    user_input = input()
                self.handle_input(user_input)
            except KeyboardInterrupt:
                self.output("\nGoodbye!")
                break
            except EOFError:
                break
            except Exception as e:
                self.output(f"[Error] {e}")
                logger.debug("session error", exc_info=True)
