"""Code view - renders chunk text coloured by typing progress"""

from typing import FrozenSet

from rich.text import Text
from textual.widgets import Static


STYLE_PENDING = "dim"
STYLE_CORRECT = "green"
STYLE_ERROR = "bold red"
STYLE_CURSOR = "reverse"
STYLE_LINE_NUMBER = "dim cyan"
STYLE_LINE_NUMBER_ACTIVE = "bold cyan"
NEWLINE_MARK = "↵"


def render_code(
    content: str,
    cursor: int,
    error_positions: FrozenSet[int],
    start_line: int = 1,
    show_line_numbers: bool = True,
    tab_size: int = 2,
) -> Text:
    """Build a styled Text for the chunk at the given typing position"""
    text = Text(no_wrap=True)
    lines = content.split("\n")
    width = len(str(start_line + len(lines) - 1))
    index = 0

    for line_no, line in enumerate(lines):
        line_end = index + len(line)
        if show_line_numbers:
            is_active = index <= cursor <= line_end
            style = STYLE_LINE_NUMBER_ACTIVE if is_active else STYLE_LINE_NUMBER
            text.append(f"{start_line + line_no:>{width}} ", style=style)

        for char in line:
            shown = " " * tab_size if char == "\t" else char
            text.append(shown, style=_char_style(index, cursor, error_positions))
            index += 1

        if line_no < len(lines) - 1:
            # The newline itself is typed, so give it a visible mark
            text.append(NEWLINE_MARK, style=_char_style(index, cursor, error_positions))
            text.append("\n")
            index += 1

    return text


def cursor_line(content: str, cursor: int) -> int:
    """0-based line number holding the cursor"""
    return content.count("\n", 0, cursor)


def _char_style(index: int, cursor: int, error_positions: FrozenSet[int]) -> str:
    if index < cursor:
        return STYLE_ERROR if index in error_positions else STYLE_CORRECT
    if index == cursor:
        return STYLE_CURSOR
    return STYLE_PENDING


class CodeView(Static):
    """Static widget showing the chunk being typed"""

    def show(
        self,
        content: str,
        cursor: int,
        error_positions: FrozenSet[int],
        start_line: int = 1,
        show_line_numbers: bool = True,
        tab_size: int = 2,
    ) -> None:
        self.update(
            render_code(content, cursor, error_positions, start_line, show_line_numbers, tab_size)
        )
