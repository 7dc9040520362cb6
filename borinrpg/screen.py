"""Screens the game draws on: a curses terminal and an in-memory recorder."""

from __future__ import annotations

import abc
import enum
from collections.abc import Iterable


class Color(enum.IntEnum):
    """Colour pairs used by the game, numbered as they are registered."""

    GREEN = 1
    YELLOW = 2
    CYAN = 3
    MAGENTA = 4
    RED = 5
    BLUE = 6


class Screen(abc.ABC):
    """Where the game writes its text and reads the player's keys."""

    @abc.abstractmethod
    def put(self, text: str, row: int, col: int, color: Color | None = None) -> None:
        """Write text starting at the given row and column."""

    @abc.abstractmethod
    def write(self, text: str, color: Color | None = None) -> None:
        """Write text at the current cursor position."""

    @abc.abstractmethod
    def clear(self) -> None:
        """Blank the screen."""

    def refresh(self) -> None:
        """Make pending output visible; screens without buffering need nothing."""

    @abc.abstractmethod
    def getkey(self) -> str:
        """Wait for one key press and return it."""

    @abc.abstractmethod
    def readline(self, prompt: str, row: int, col: int) -> str:
        """Show a prompt at a position and return the line typed in reply."""


class CursesScreen(Screen):
    """A screen backed by a curses window."""

    def __init__(self, stdscr) -> None:
        import curses

        self._curses = curses
        self._stdscr = stdscr
        curses.start_color()
        for color in Color:
            curses.init_pair(
                int(color), getattr(curses, f"COLOR_{color.name}"), curses.COLOR_BLACK
            )
        try:
            curses.curs_set(0)
        except curses.error:
            pass

    def _attr(self, color: Color | None) -> int:
        return self._curses.color_pair(int(color)) if color is not None else 0

    def put(self, text: str, row: int, col: int, color: Color | None = None) -> None:
        try:
            self._stdscr.addstr(row, col, text, self._attr(color))
        except self._curses.error:
            pass

    def write(self, text: str, color: Color | None = None) -> None:
        try:
            self._stdscr.addstr(text, self._attr(color))
        except self._curses.error:
            pass

    def clear(self) -> None:
        self._stdscr.clear()

    def refresh(self) -> None:
        self._stdscr.refresh()

    def getkey(self) -> str:
        code = self._stdscr.getch()
        return chr(code) if 0 <= code < 256 else ""

    def readline(self, prompt: str, row: int, col: int) -> str:
        self.put(prompt, row, col)
        self._curses.echo()
        try:
            raw = self._stdscr.getstr()
        finally:
            self._curses.noecho()
        return raw.decode(errors="replace")


class MemoryScreen(Screen):
    """A screen that records its output and replays scripted input."""

    def __init__(self, keys: Iterable[str] = (), lines: Iterable[str] = ()) -> None:
        self._keys = iter(keys)
        self._lines = iter(lines)
        self.entries: list[tuple[str, Color | None]] = []
        self.clears = 0

    def put(self, text: str, row: int, col: int, color: Color | None = None) -> None:
        self.entries.append((text, color))

    def write(self, text: str, color: Color | None = None) -> None:
        self.entries.append((text, color))

    def clear(self) -> None:
        self.clears += 1

    def getkey(self) -> str:
        try:
            return next(self._keys)
        except StopIteration:
            raise EOFError("no more keys to read") from None

    def readline(self, prompt: str, row: int, col: int) -> str:
        self.put(prompt, row, col)
        try:
            line = next(self._lines)
        except StopIteration:
            raise EOFError("no more lines to read") from None
        line = line.rstrip("\n")
        self.entries.append((line + "\n", None))
        return line

    def transcript(self) -> str:
        """Return everything written so far, clears notwithstanding."""
        return "".join(text for text, _ in self.entries)