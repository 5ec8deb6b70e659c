"""
Console Renderer - Textausgabe wie eine Playground-Seite

DUCK TYPING BEISPIEL:
Diese Klasse hat das gleiche Interface wie PygameRenderer:
- render_demo(principle, result)
- handle_input() -> dict
- cleanup()

Keine gemeinsame Basisklasse nötig!
"""
import sys
from typing import Any, Dict, Optional, TextIO

from principles.core.playground import format_result


class ConsoleRenderer:
    """Writes each demo as a markdown-ish page to a text stream."""

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def _write(self, line: str = "") -> None:
        self.stream.write(line + "\n")

    def render_demo(self, principle: Any, result: Any) -> None:
        """Render one principle page.

        Gleiches Interface wie PygameRenderer - Duck Typing!
        """
        self._write(f"# {principle.emoji} {principle.title}")
        self._write()
        self._write(f"{principle.statement} (read more: {principle.read_more})")
        self._write()
        for step in result.steps:
            if step.note:
                self._write(f"> ⚠ {step.note}")
            self._write(f"{step.expression}  // {format_result(step.result)}")
        self._write()

    def handle_input(self) -> Dict[str, Any]:
        """Console never waits: always move on to the next page."""
        return {'quit': False, 'next': True}

    def cleanup(self) -> None:
        self.stream.flush()
