"""Standalone Textual application hosting the utilities dashboard.

// [LAW:locality-or-seam] Thin shell: the dashboard widget owns all behavior;
//   this app only supplies key bindings, header/footer and the close hook.
"""

from typing import Optional

from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

import studio_utilities.catalog
import studio_utilities.launcher
from studio_utilities.tui.dashboard import UtilitiesDashboard


class StudioUtilitiesApp(App):
    """TUI application for browsing and launching studio utilities."""

    TITLE = "Studio Utilities"

    BINDINGS = [
        Binding("1", "select_category(0)", "All", show=False),
        Binding("2", "select_category(1)", "Data", show=False),
        Binding("3", "select_category(2)", "Assets", show=False),
        Binding("4", "select_category(3)", "Content", show=False),
        Binding("5", "select_category(4)", "Optimization", show=False),
        Binding("q", "quit", "Quit"),
    ]

    def __init__(
        self,
        registry: Optional[studio_utilities.catalog.CatalogRegistry] = None,
        launcher: Optional[studio_utilities.launcher.Launcher] = None,
        initial_category: str = studio_utilities.catalog.ALL_CATEGORY,
        studio_url: Optional[str] = None,
        help_links: Optional[dict[str, str]] = None,
    ):
        super().__init__()
        self._catalog = (
            registry if registry is not None else studio_utilities.catalog.build_default_registry()
        )
        self._tool_launcher = launcher
        self._initial_category = initial_category
        self._studio_url = studio_url
        self._help_links = help_links

    def compose(self) -> ComposeResult:
        yield Header()
        yield UtilitiesDashboard(
            self._catalog,
            self._tool_launcher,
            on_close=self.exit,
            initial_category=self._initial_category,
            studio_url=self._studio_url,
            help_links=self._help_links,
            id="dashboard",
        )
        yield Footer()

    def _get_dashboard(self) -> UtilitiesDashboard:
        return self.query_one("#dashboard", UtilitiesDashboard)

    def action_select_category(self, index: int) -> None:
        self._get_dashboard().select_category_index(index)
