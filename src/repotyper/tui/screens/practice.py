"""Practice screen - type through a file chunk by chunk"""

from functools import partial

from textual import events
from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.screen import Screen
from textual.widgets import Static, Footer

from repotyper.core.session import Key, PracticeController
from repotyper.models.chunk import Chunk
from repotyper.models.config import TypingSettings
from repotyper.models.project import SourceFile
from repotyper.models.session import SpecialKey
from repotyper.tui.widgets import CodeView, StatsHud
from repotyper.tui.widgets.code_view import cursor_line


AUTO_ADVANCE_DELAY = 1.5
STATS_REFRESH_INTERVAL = 0.5
MODIFIER_PREFIXES = ("ctrl+", "alt+", "meta+", "super+", "hyper+")


class PracticeScreen(Screen):
    """Screen for typing a file's chunks.

    Controls:
    - Any printable key, Tab, Enter: type
    - Ctrl+R: Restart the chunk
    - Ctrl+N / Ctrl+P: Next / previous chunk
    - Ctrl+E: Toggle stop-on-error
    - Escape: Back to file list
    """

    CSS = """
    #file-header {
        padding: 0 2;
        background: $primary;
        color: $text;
        text-style: bold;
    }

    #chunk-bar {
        padding: 0 2;
        background: $surface-darken-1;
    }

    #insight {
        padding: 0 2;
        color: $text-muted;
    }

    #stats {
        padding: 0 2;
        border-bottom: solid $secondary;
    }

    #banner {
        padding: 1 2;
        background: $success 20%;
        text-align: center;
    }

    #code-container {
        height: 1fr;
        margin: 1 2;
    }

    .hidden {
        display: none;
    }
    """

    BINDINGS = [
        Binding("tab", "type_tab", "Tab", show=False, priority=True),
        Binding("enter", "type_enter", "Enter", show=False, priority=True),
        Binding("ctrl+r", "reset", "Restart"),
        Binding("ctrl+n", "next_chunk", "Next"),
        Binding("ctrl+p", "prev_chunk", "Previous"),
        Binding("ctrl+e", "toggle_stop", "Stop on error"),
        Binding("escape", "back", "Back"),
    ]

    def __init__(self, source_file: SourceFile, settings: TypingSettings):
        super().__init__()
        self.source_file = source_file
        self.settings = settings
        self.controller = PracticeController(
            source_file,
            settings,
            on_chunk_complete=self._on_chunk_complete,
        )

    def compose(self) -> ComposeResult:
        yield Static(
            f"{self.source_file.path}  [dim]{self.source_file.language}[/dim]",
            id="file-header",
        )
        yield Static(id="chunk-bar")
        yield Static(id="insight")
        yield StatsHud(id="stats")
        yield Static(id="banner", classes="hidden")
        with VerticalScroll(id="code-container"):
            yield CodeView(id="code")
        yield Footer()

    def on_mount(self) -> None:
        self._refresh_all()
        self.set_interval(STATS_REFRESH_INTERVAL, self._refresh_stats)

    # Input

    def on_key(self, event: events.Key) -> None:
        """Route printable characters to the session"""
        if not event.is_printable or event.character is None:
            return
        if event.key.startswith(MODIFIER_PREFIXES):
            return
        event.stop()
        event.prevent_default()
        self._type(event.character)

    def action_type_tab(self) -> None:
        self._type(SpecialKey.TAB)

    def action_type_enter(self) -> None:
        session = self.controller.session
        if session is not None and session.is_complete and self.controller.has_next_chunk:
            self.action_next_chunk()
            return
        self._type(SpecialKey.ENTER)

    def _type(self, key: Key) -> None:
        session = self.controller.session
        if session is None or session.is_complete:
            return
        self.controller.press(key)
        self._refresh_code()
        self._refresh_stats()

    # Actions

    def action_reset(self) -> None:
        self.controller.reset()
        self._refresh_all()

    def action_next_chunk(self) -> None:
        if self.controller.next_chunk():
            self._refresh_all()

    def action_prev_chunk(self) -> None:
        if self.controller.prev_chunk():
            self._refresh_all()

    def action_toggle_stop(self) -> None:
        enabled = self.controller.toggle_stop_on_error()
        self.notify(f"Stop on error {'enabled' if enabled else 'disabled'}")
        self._refresh_stats()

    def action_back(self) -> None:
        self.app.pop_screen()

    # Completion

    def _on_chunk_complete(self, source_file: SourceFile, chunk: Chunk) -> None:
        stats = self.controller.statistics()
        heading = "Section Complete!" if self.controller.has_next_chunk else "File Complete!"
        hint = ""
        if self.controller.has_next_chunk:
            hint = "\n[dim]Enter or Ctrl+N for the next section[/dim]"
            if self.settings.auto_advance:
                self.set_timer(
                    AUTO_ADVANCE_DELAY,
                    partial(self._auto_advance, self.controller.chunk_index),
                )

        banner = self.query_one("#banner", Static)
        banner.update(
            f"[bold]{heading}[/bold]\n"
            f"WPM {stats.wpm}  •  Accuracy {stats.accuracy}%  •  Time {stats.elapsed_display}"
            f"{hint}"
        )
        banner.remove_class("hidden")
        self._refresh_chunk_bar()

    def _auto_advance(self, chunk_index: int) -> None:
        if self.controller.chunk_index != chunk_index:
            return
        session = self.controller.session
        if session is not None and session.is_complete:
            self.action_next_chunk()

    # Rendering

    def _refresh_all(self) -> None:
        self.query_one("#banner", Static).add_class("hidden")
        self._refresh_chunk_bar()
        self._refresh_insight()
        self._refresh_code()
        self._refresh_stats()

    def _refresh_chunk_bar(self) -> None:
        chunk_bar = self.query_one("#chunk-bar", Static)
        parts = []
        for i, chunk in enumerate(self.source_file.chunks):
            done = "✓ " if chunk.id in self.source_file.completed_chunks else ""
            if i == self.controller.chunk_index:
                parts.append(f"[reverse bold]{done}{chunk.title}[/]")
            elif done:
                parts.append(f"[green]{done}{chunk.title}[/green]")
            else:
                parts.append(f"[dim]{chunk.title}[/dim]")
        position = f"{self.controller.chunk_index + 1} / {self.controller.chunk_count}"
        chunk_bar.update("  ".join(parts) + f"    [bold]{position}[/bold]")

    def _refresh_insight(self) -> None:
        chunk = self.controller.chunk
        insight = self.query_one("#insight", Static)
        if chunk is None:
            insight.update("[yellow]Nothing to type in this file[/yellow]")
            return
        insight.update(
            f"[bold]{chunk.title}[/bold]  "
            f"[dim]Lines {chunk.start_line}-{chunk.end_line} ({chunk.line_count})[/dim]\n"
            f"{chunk.description}"
        )

    def _refresh_code(self) -> None:
        session = self.controller.session
        code = self.query_one("#code", CodeView)
        if session is None:
            code.update("")
            return
        state = session.state
        code.show(
            session.content,
            state.cursor,
            state.error_positions,
            start_line=session.chunk.start_line,
            show_line_numbers=self.settings.show_line_numbers,
            tab_size=self.settings.tab_size,
        )
        container = self.query_one("#code-container", VerticalScroll)
        line = cursor_line(session.content, state.cursor)
        container.scroll_to(y=max(0, line - container.size.height // 2), animate=False)

    def _refresh_stats(self) -> None:
        self.query_one("#stats", StatsHud).show(
            self.controller.statistics(), self.settings.stop_on_error
        )
