"""Statistics HUD - live WPM, accuracy, time and progress"""

from textual.widgets import Static

from repotyper.models.session import Statistics


def accuracy_color(accuracy: int) -> str:
    if accuracy >= 95:
        return "green"
    if accuracy >= 80:
        return "yellow"
    return "red"


def format_stats(stats: Statistics, stop_on_error: bool) -> str:
    """Render statistics as console markup"""
    color = accuracy_color(stats.accuracy)
    stop = "[green]on[/]" if stop_on_error else "[dim]off[/dim]"
    return (
        f"[bold]WPM[/bold] {stats.wpm}  •  "
        f"[bold]Accuracy[/bold] [{color}]{stats.accuracy}%[/]  •  "
        f"[bold]Time[/bold] {stats.elapsed_display}  •  "
        f"[bold]Typed[/bold] {stats.typed_chars}/{stats.total_chars} ({stats.progress}%)  •  "
        f"[dim]Stop on error:[/dim] {stop}"
    )


class StatsHud(Static):
    """One-line statistics bar"""

    def show(self, stats: Statistics, stop_on_error: bool) -> None:
        self.update(format_stats(stats, stop_on_error))
