"""Full-screen terminal front end that walks the configuration pages."""

from __future__ import annotations

import curses
import unicodedata
from collections.abc import Sequence
from typing import Any

from .app import App, Flow
from .ui import Page, page_for

_ENTER_KEYS = frozenset({10, 13, curses.KEY_ENTER, ord(" ")})
_HIGHLIGHT = ">> "
_COLUMN_SPACING = 1


def handle_key(app: App, key: int) -> bool:
    """Apply one key press to the app; return False once the interface should close."""
    if key == curses.KEY_DOWN:
        app.next()
    elif key == curses.KEY_UP:
        app.previous()
    elif key in _ENTER_KEYS:
        if app.enter() is Flow.BREAK:
            return app.pop_route() is not None
    return True


def _char_width(char: str) -> int:
    if unicodedata.combining(char):
        return 0
    return 2 if unicodedata.east_asian_width(char) in ("W", "F") else 1


def _fit(text: str, width: int) -> str:
    """Cut ``text`` to ``width`` terminal cells and pad it to exactly that width."""
    kept = []
    used = 0
    for char in text:
        char_width = _char_width(char)
        if used + char_width > width:
            break
        kept.append(char)
        used += char_width
    return "".join(kept) + " " * (width - used)


def _column_widths(widths: Sequence[tuple[str, int]], available: int) -> list[int]:
    fixed = sum(size for _, size in widths)
    spare = max(0, available - fixed - _COLUMN_SPACING * max(len(widths) - 1, 0))
    result = []
    for kind, size in widths:
        if kind == "min":
            result.append(size + spare)
            spare = 0
        else:
            result.append(size)
    return result


def _format_row(cells: Sequence[str], columns: Sequence[int]) -> str:
    return (" " * _COLUMN_SPACING).join(
        _fit(cell, width) for cell, width in zip(cells, columns)
    )


def _put(screen: Any, y: int, x: int, text: str, attr: int = curses.A_NORMAL) -> None:
    height, width = screen.getmaxyx()
    if not 0 <= y < height or not 0 <= x < width:
        return
    try:
        screen.addnstr(y, x, text, width - x, attr)
    except curses.error:
        # Writing into the bottom-right cell moves the cursor off screen.
        pass


def _draw(screen: Any, page: Page, app: App) -> None:
    height, width = screen.getmaxyx()
    locale = app.locale
    inner = max(width - 2, 0)
    screen.erase()

    _put(screen, 0, 0, "╭" + "─" * inner + "╮")
    for y in range(1, height - 1):
        _put(screen, y, 0, "│")
        _put(screen, y, width - 1, "│")
    if height > 1:
        _put(screen, height - 1, 0, "╰" + "─" * inner + "╯")
    _put(screen, 0, 1, page.title_text(locale))

    columns = _column_widths(page.widths, inner - len(_HIGHLIGHT))
    blank_prefix = " " * len(_HIGHLIGHT)
    y = 1
    _put(screen, y, 1, blank_prefix + _format_row(page.header_cells(locale), columns), curses.A_BOLD)

    selected = app.current_route().selected
    for index, row in enumerate(page.rows(locale)):
        cell_lines = [cell.split("\n") for cell in row]
        row_height = max((len(lines) for lines in cell_lines), default=1)
        is_selected = index == selected
        attr = curses.A_REVERSE if is_selected else curses.A_NORMAL
        for line_no in range(row_height):
            y += 1
            if y >= height - 1:
                break
            prefix = _HIGHLIGHT if is_selected and line_no == 0 else blank_prefix
            cells = [lines[line_no] if line_no < len(lines) else "" for lines in cell_lines]
            _put(screen, y, 1, prefix + _format_row(cells, columns), attr)
    screen.refresh()


def run_app(screen: Any, app: App) -> None:
    """Draw the current page and react to keys until the home page is left."""
    while True:
        page = page_for(app)
        page.install(app)
        _draw(screen, page, app)
        if not handle_key(app, screen.getch()):
            return


def _session(screen: Any, app: App) -> None:
    try:
        curses.curs_set(0)
    except curses.error:
        pass
    run_app(screen, app)


def terminal_main(app: App) -> None:
    """Run the interface on the real terminal, restoring it afterwards."""
    try:
        curses.wrapper(_session, app)
    except (OSError, curses.error) as err:
        print(repr(err))