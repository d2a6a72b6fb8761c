"""curses front end: paint frames, translate key codes, run the loop."""
from __future__ import annotations
import curses
import logging
from typing import Any, Optional

from fitness_tracker.app import FitnessApp
from fitness_tracker.state import Key, KeyInput
from fitness_tracker.ui.frames import Line, Style, build_frame

log = logging.getLogger(__name__)

ESC = 27
TAB = 9

_NAMED_KEYS = {
    curses.KEY_UP: Key.up,
    curses.KEY_DOWN: Key.down,
    curses.KEY_ENTER: Key.enter,
    ord("\n"): Key.enter,
    ord("\r"): Key.enter,
    ESC: Key.esc,
    TAB: Key.tab,
    curses.KEY_BACKSPACE: Key.backspace,
    127: Key.backspace,
    8: Key.backspace,
}

# colour pair numbers, initialised in setup_colors
_PAIRS = {
    Style.title: 1,
    Style.heading: 2,
    Style.value: 3,
    Style.highlight: 4,
    Style.status: 5,
    Style.help: 6,
}

def translate_key(code: int) -> Optional[KeyInput]:
    """Map a curses getch() code to a Key or a printable character."""
    if code in _NAMED_KEYS:
        return _NAMED_KEYS[code]
    if 32 <= code < 127:
        return chr(code)
    return None

def setup_colors() -> None:
    curses.start_color()
    curses.use_default_colors()
    curses.init_pair(1, curses.COLOR_CYAN, -1)     # Title
    curses.init_pair(2, curses.COLOR_WHITE, -1)    # Headings
    curses.init_pair(3, curses.COLOR_GREEN, -1)    # Values
    curses.init_pair(4, curses.COLOR_YELLOW, -1)   # Cursor line
    curses.init_pair(5, curses.COLOR_YELLOW, -1)   # Status
    curses.init_pair(6, curses.COLOR_BLUE, -1)     # Help bar

def attr_for(style: Style) -> int:
    if style is Style.normal:
        return curses.A_NORMAL
    attr = curses.color_pair(_PAIRS[style])
    if style in (Style.title, Style.heading, Style.value, Style.highlight):
        attr |= curses.A_BOLD
    return attr

def paint(stdscr: Any, lines: list[Line]) -> None:
    stdscr.erase()
    max_y, max_x = stdscr.getmaxyx()
    for y, line in enumerate(lines[: max_y]):
        try:
            stdscr.addnstr(y, 0, line.text, max_x - 1, attr_for(line.style))
        except curses.error:
            # writing into the bottom-right cell raises; the text is drawn anyway
            pass
    stdscr.refresh()

def run_loop(stdscr: Any, app: FitnessApp) -> None:
    """Render, wait for one key, apply it; until the app asks to quit."""
    while True:
        paint(stdscr, build_frame(app))
        key = translate_key(stdscr.getch())
        if key is None:
            continue
        if app.handle_input(key):
            log.info("quit requested")
            return

def run(stdscr: Any, app: FitnessApp) -> None:
    """curses.wrapper target: terminal setup, then the loop."""
    try:
        curses.curs_set(0)
    except curses.error:
        log.debug("terminal cannot hide the cursor")
    stdscr.keypad(True)
    curses.set_escdelay(25)
    if curses.has_colors():
        setup_colors()
    run_loop(stdscr, app)
