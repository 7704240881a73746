from __future__ import annotations
from typing import Dict, List, Optional, Set

from dropfour.config import CLEAR_SCREEN, COLS, ROWS
from dropfour.game.players import Player
from dropfour.game.state import Outcome
from dropfour.types import Cell, Coord, Token
from dropfour.ui.colors import BOLD, DIM, FG_CYAN, FG_GRAY, REVERSE, RESET, c, token_color


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


class TextRenderSink:
    """
    Terminal view of a game. Keeps its own copy of the grid, built only from
    placement notifications.
    """

    def __init__(self, width: int = COLS, height: int = ROWS, status: str = "") -> None:
        self.width = width
        self.height = height
        self.grid: List[List[Cell]] = [[None] * width for _ in range(height)]
        self.status = status
        self.highlight: Set[Coord] = set()
        self._glyphs: Dict[Token, str] = {}

    def _piece(self, cell: Cell) -> str:
        if cell is None:
            return c("·", FG_GRAY)
        glyph = self._glyphs.setdefault(cell, (str(cell)[:1] or "?").upper())
        return c(glyph, token_color(cell))

    def lines(self) -> List[str]:
        out = [c("CONNECT 4", BOLD), c(self.status, FG_CYAN) if self.status else ""]
        out.append(c("   " + " ".join(str(i + 1) for i in range(self.width)), DIM))
        for r, row in enumerate(self.grid):
            parts = []
            for col, cell in enumerate(row):
                p = self._piece(cell)
                if (r, col) in self.highlight:
                    p = f"{REVERSE}{p}{RESET}"
                parts.append(p)
            out.append(" | " + " ".join(parts) + " |")
        out.append(c("   " + "—" * (2 * self.width - 1), DIM))
        out.append(c(f"   Enter 1-{self.width} to drop. Enter q to quit.", DIM))
        return out

    def render(self, status: Optional[str] = None) -> None:
        if status is not None:
            self.status = status
        clear_screen()
        print("\n".join(self.lines()))

    def on_place(self, row: int, column: int, player: Player) -> None:
        self.grid[row][column] = player.token
        self.render(f"{player.label} dropped in column {column + 1}")

    def on_game_end(self, outcome: Outcome) -> None:
        self.highlight = set(outcome.line)
        self.render(outcome.message)
