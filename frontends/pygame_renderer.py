"""
Pygame Renderer - Zeigt jede Demo als Seite in einem Fenster

DUCK TYPING BEISPIEL:
Gleiches Interface wie ConsoleRenderer:
- render_demo(principle, result)
- handle_input() -> dict
- cleanup()
"""
import pygame
from typing import Any, Dict, List, Tuple

from principles.config import (
    SCREEN_WIDTH, SCREEN_HEIGHT, FPS, FONT_SIZE, LINE_HEIGHT, MARGIN,
    COLOR_BG, COLOR_TITLE, COLOR_TEXT, COLOR_RESULT, COLOR_HINT,
)
from principles.core.playground import format_result


class PygameRenderer:
    """Draws the demo page as plain text lines.

    Seiten wechseln mit SPACE/Pfeil rechts, ESC beendet.
    """

    def __init__(self, width: int = SCREEN_WIDTH, height: int = SCREEN_HEIGHT):
        pygame.init()
        pygame.display.set_caption("OOD Principles")

        self.width = width
        self.height = height

        self.screen = pygame.display.set_mode((width, height))
        self.clock = pygame.time.Clock()
        self.font = pygame.font.Font(None, FONT_SIZE)
        self.title_font = pygame.font.Font(None, FONT_SIZE + 12)

    def page_lines(self, principle: Any, result: Any) -> List[Tuple[str, tuple]]:
        """Build (text, color) lines for one page."""
        lines = [
            (principle.statement, COLOR_TEXT),
            ("", COLOR_TEXT),
        ]
        for step in result.steps:
            if step.note:
                lines.append((f"! {step.note}", COLOR_HINT))
            lines.append((step.expression, COLOR_TEXT))
            lines.append((f"    {format_result(step.result)}", COLOR_RESULT))
        return lines

    def render_demo(self, principle: Any, result: Any) -> None:
        """Render one principle page.

        Gleiches Interface wie ConsoleRenderer - Duck Typing!
        """
        self.screen.fill(COLOR_BG)

        # Emoji glyphs are not in the default font
        title = self.title_font.render(principle.title, True, COLOR_TITLE)
        self.screen.blit(title, (MARGIN, MARGIN))

        y = MARGIN + LINE_HEIGHT * 2
        for text, color in self.page_lines(principle, result):
            surface = self.font.render(text, True, color)
            self.screen.blit(surface, (MARGIN, y))
            y += LINE_HEIGHT

        hint = "SPACE: Next | ESC: Quit"
        hint_surface = self.font.render(hint, True, COLOR_HINT)
        self.screen.blit(hint_surface, (MARGIN, self.height - MARGIN))

        pygame.display.flip()
        self.clock.tick(FPS)

    def handle_input(self) -> Dict[str, Any]:
        """Process pygame events and return input state."""
        result = {'quit': False, 'next': False}

        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                result['quit'] = True
            elif event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    result['quit'] = True
                elif event.key in (pygame.K_SPACE, pygame.K_RIGHT, pygame.K_RETURN):
                    result['next'] = True

        self.clock.tick(FPS)
        return result

    def cleanup(self) -> None:
        pygame.quit()
