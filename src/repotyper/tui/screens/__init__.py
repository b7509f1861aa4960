"""TUI screens for RepoTyper"""

from repotyper.tui.screens.file_picker import FilePickerScreen
from repotyper.tui.screens.practice import PracticeScreen

__all__ = ["FilePickerScreen", "PracticeScreen"]
