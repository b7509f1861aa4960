"""Custom widgets for RepoTyper TUI"""

from repotyper.tui.widgets.code_view import CodeView
from repotyper.tui.widgets.stats_hud import StatsHud

__all__ = ["CodeView", "StatsHud"]
