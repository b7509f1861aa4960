"""Main Textual application for RepoTyper"""

from textual.app import App
from textual.binding import Binding

from repotyper.models.config import TypingSettings
from repotyper.models.project import Project
from repotyper.tui.screens.file_picker import FilePickerScreen


class RepoTyperApp(App):
    """Main RepoTyper TUI application"""

    TITLE = "RepoTyper - Typing practice on your own code"
    ENABLE_COMMAND_PALETTE = False
    CSS = """
    Screen {
        background: $surface;
    }

    #header {
        padding: 1 2;
    }

    #help {
        padding: 0 2;
        color: $text-muted;
    }

    #file-list {
        margin: 1 2;
        height: 1fr;
    }

    Footer {
        background: $surface-darken-1;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit"),
    ]

    def __init__(self, project: Project, settings: TypingSettings):
        super().__init__()
        self.project = project
        self.settings = settings

    def on_mount(self) -> None:
        """Start with the file picker"""
        self.push_screen(FilePickerScreen(self.project, self.settings))

    def action_quit(self) -> None:
        """Quit the application"""
        self.exit()
