"""File picker screen - Select a source file to practice on"""

from textual.app import ComposeResult
from textual.binding import Binding
from textual.screen import Screen
from textual.widgets import Static, Footer, ListView, ListItem, Label

from repotyper.models.config import TypingSettings
from repotyper.models.project import Project, SourceFile
from repotyper.tui.screens.practice import PracticeScreen


class FileListItem(ListItem):
    """A list item representing a source file"""

    def __init__(self, source_file: SourceFile):
        super().__init__()
        self.source_file = source_file

    def compose(self) -> ComposeResult:
        completed, total = self.source_file.get_progress()
        if self.source_file.is_completed:
            indicator = "[green]✓[/]"
        elif completed:
            indicator = "[cyan]●[/]"
        else:
            indicator = " "

        yield Label(
            f"{indicator} [bold]{self.source_file.path}[/bold]\n"
            f"  [dim]{self.source_file.language}  •  {completed}/{total} section(s)[/dim]"
        )


class FilePickerScreen(Screen):
    """Screen for selecting a file to type"""

    BINDINGS = [
        Binding("enter", "select_file", "Select"),
        Binding("q", "quit", "Quit"),
        Binding("r", "refresh", "Refresh"),
    ]

    def __init__(self, project: Project, settings: TypingSettings):
        super().__init__()
        self.project = project
        self.settings = settings

    def compose(self) -> ComposeResult:
        yield Static(
            f"[bold]RepoTyper - {self.project.name}[/bold]\n"
            f"[dim]Folder: {self.project.root}[/dim]",
            id="header",
        )
        yield Static(
            "[dim]↑/↓[/] navigate  [dim]Enter[/] select  [dim]q[/] quit  "
            "[cyan]●[/] = in progress  [green]✓[/] = completed",
            id="help",
        )
        yield ListView(id="file-list")
        yield Footer()

    def on_mount(self) -> None:
        """Load files on mount"""
        self._refresh_file_list()
        file_list = self.query_one("#file-list", ListView)
        file_list.focus()

    def on_screen_resume(self) -> None:
        """Show progress made on the practice screen"""
        self._refresh_file_list()

    def _refresh_file_list(self) -> None:
        """Refresh the file list"""
        file_list = self.query_one("#file-list", ListView)
        file_list.clear()

        if not self.project.files:
            file_list.append(
                ListItem(Label("[yellow]No source files found in folder[/yellow]"))
            )
            return

        for source_file in self.project.files:
            file_list.append(FileListItem(source_file))

    def action_refresh(self) -> None:
        """Refresh the file list"""
        self._refresh_file_list()
        self.notify("Refreshed file list")

    def action_select_file(self) -> None:
        """Open the highlighted file"""
        file_list = self.query_one("#file-list", ListView)
        item = file_list.highlighted_child
        if isinstance(item, FileListItem):
            self._open(item.source_file)

    def action_quit(self) -> None:
        """Quit the application"""
        self.app.exit()

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        """Handle double-click / enter on list item"""
        if isinstance(event.item, FileListItem):
            self._open(event.item.source_file)

    def _open(self, source_file: SourceFile) -> None:
        self.app.push_screen(PracticeScreen(source_file, self.settings))
