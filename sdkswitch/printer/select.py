"""An interactive, paged and filterable list of key/value choices."""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Callable, Optional, Union

import blessed

logger = logging.getLogger(__name__)

_GREEN = "\x1b[92m"
_RESET = "\x1b[39m"
FOOTER = "Press ↑/↓ to select and press ←/→ to page, and press Enter to confirm\n"


def _green(text: str) -> str:
    return f"{_GREEN}{text}{_RESET}"


@dataclass(frozen=True)
class KV:
    """One choice: ``key`` identifies it, ``value`` is what is shown."""

    key: str
    value: str


class Key(Enum):
    """Navigation keys understood by the selector."""

    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    ENTER = auto()
    BACKSPACE = auto()
    CTRL_C = auto()


SourceFunc = Callable[[int, int, list[KV]], list[KV]]


def _fuzzy_match(source: str, target: str) -> bool:
    """Whether every character of ``source`` occurs in ``target`` in order."""
    remaining = iter(target)
    return all(char in remaining for char in source)


def _levenshtein(a: str, b: str) -> int:
    previous = list(range(len(b) + 1))
    for i, char_a in enumerate(a, start=1):
        current = [i]
        for j, char_b in enumerate(b, start=1):
            current.append(
                min(previous[j] + 1, current[j - 1] + 1, previous[j - 1] + (char_a != char_b))
            )
        previous = current
    return previous[-1]


@dataclass
class PageKVSelect:
    """A selector that shows one page of choices at a time."""

    source_func: SourceFunc
    size: int = 10
    options: list[KV] = field(default_factory=list)
    highlight_options: set[str] = field(default_factory=set)
    disabled_options: set[str] = field(default_factory=set)
    filterable: bool = False
    top_text: str = ""
    index: int = field(default=0, init=False)
    page: int = field(default=0, init=False)
    search_text: str = field(default="", init=False)
    search_options: list[KV] = field(default_factory=list, init=False)
    page_options: list[KV] = field(default_factory=list, init=False)
    result: Optional[KV] = field(default=None, init=False)
    is_empty: bool = field(default=False, init=False)

    def change_index(self, value: int) -> None:
        """Move the cursor by ``value``, wrapping around the page."""
        self.index += value
        if self.index < 0:
            self.index = len(self.page_options) - 1
        if self.index > len(self.page_options) - 1:
            self.index = 0

    def search(self) -> None:
        """Filter the options by the fuzzy search text, best matches first."""
        by_value = {kv.value: kv for kv in self.options}
        needle = self.search_text.casefold()
        ranked = [
            (kv.value, _levenshtein(needle, kv.value.casefold()))
            for kv in self.options
            if _fuzzy_match(needle, kv.value.casefold())
        ]
        if self.search_text:
            ranked.sort(key=lambda item: (self.search_text not in item[0], item[1]))
        self.search_options = [by_value[value] for value, _ in ranked]

    def load_page_data(self, page: int) -> None:
        """Fetch page ``page`` of the current search results."""
        options = self.source_func(page, self.size, self.search_options)
        self.index = 0
        if options:
            self.page_options = list(options)
        if not self.search_options:
            self.page_options = []
        self.is_empty = (page + 1) * self.size >= len(self.search_options)

    def render(self) -> str:
        """Return the text shown for the current state."""
        if self.filterable:
            content = f"{self.top_text} {_green('[type to search]')}: {self.search_text}\n"
        else:
            content = f"{self.top_text}:\n"
        if not self.page_options and self.search_options:
            return "No data\n"
        if self.page_options and 0 <= self.index < len(self.page_options):
            self.result = self.page_options[self.index]
        for position, option in enumerate(self.page_options):
            value = option.value
            if option.key in self.highlight_options:
                value = _green(value)
            if position == self.index:
                content += f"{_green('-> ')} {value}\n"
            else:
                content += f"   {value}\n"
        return content + FOOTER

    def _restart_search(self) -> None:
        self.index = 0
        self.page = 0
        self.search()
        self.load_page_data(self.page)

    def handle_key(self, key: Union[Key, str]) -> bool:
        """Apply one key press; return True when the selection is finished."""
        if isinstance(key, str):
            if self.filterable:
                self.search_text += key
                self._restart_search()
            return False
        if key is Key.BACKSPACE:
            self.search_text = self.search_text[:-1]
            self._restart_search()
        elif key is Key.CTRL_C:
            self.result = None
            logger.info("Ctrl+C pressed, program stopped.")
            return True
        elif key is Key.DOWN:
            self.change_index(1)
        elif key is Key.UP:
            self.change_index(-1)
        elif key is Key.LEFT:
            if self.page > 0:
                self.page -= 1
                self.load_page_data(self.page)
        elif key is Key.RIGHT:
            if not self.is_empty:
                self.page += 1
                self.load_page_data(self.page)
        elif key is Key.ENTER:
            if 0 <= self.index < len(self.page_options):
                self.result = self.page_options[self.index]
                if self.result.key in self.disabled_options:
                    return False
            else:
                self.result = None
                logger.info("No search, program stopped.")
            return True
        return False

    @staticmethod
    def _translate(term: blessed.Terminal, keystroke) -> Optional[Union[Key, str]]:
        if keystroke.is_sequence:
            return {
                term.KEY_UP: Key.UP,
                term.KEY_DOWN: Key.DOWN,
                term.KEY_LEFT: Key.LEFT,
                term.KEY_RIGHT: Key.RIGHT,
                term.KEY_ENTER: Key.ENTER,
                term.KEY_BACKSPACE: Key.BACKSPACE,
                term.KEY_DELETE: Key.BACKSPACE,
            }.get(keystroke.code)
        text = str(keystroke)
        if text in ("\r", "\n"):
            return Key.ENTER
        if text == "\x03":
            return Key.CTRL_C
        if text in ("\x7f", "\x08"):
            return Key.BACKSPACE
        if text and text.isprintable():
            return text
        return None

    def _draw(self, term: blessed.Terminal, previous_lines: int) -> int:
        out = sys.stdout
        if previous_lines:
            out.write("\r" + term.move_up(previous_lines) + term.clear_eos)
        content = self.render()
        out.write(content)
        out.flush()
        return content.count("\n")

    def show(self) -> Optional[KV]:
        """Run the selector on the terminal and return the chosen entry, or None."""
        term = blessed.Terminal()
        self.search()
        self.page = 0
        self.load_page_data(self.page)
        lines = self._draw(term, 0)
        with term.cbreak(), term.hidden_cursor():
            while True:
                try:
                    key = self._translate(term, term.inkey())
                except KeyboardInterrupt:
                    key = Key.CTRL_C
                if key is None:
                    continue
                stop = self.handle_key(key)
                lines = self._draw(term, lines)
                if stop:
                    break
        return self.result