"""Utilities dashboard widget: category overview, filter chips, tool cards.

// [LAW:one-source-of-truth] Visibility of cards is derived from the
//   FilterController on every selection; the widget keeps no second copy.
// [LAW:locality-or-seam] Launching goes through the injected Launcher only.
"""

import logging
from typing import Callable, Optional

from rich.text import Text
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.widgets import Button, Static

import studio_utilities.catalog
import studio_utilities.category_stats
import studio_utilities.filter_state
import studio_utilities.launcher
import studio_utilities.settings
import studio_utilities.tui.panel_renderers
from studio_utilities.errors import InvalidStateError, UnknownToolError
from studio_utilities.tui.chip import CategoryChip

logger = logging.getLogger(__name__)

# icon, title, settings key
_HELP_BUTTONS = (
    ("📖", "Documentation", "docs_url"),
    ("💡", "Get Support", "support_url"),
    ("🐛", "Report Issue", "issues_url"),
)


class LaunchButton(Button):
    """Button bound to one catalog entry."""

    def __init__(self, label: str, tool_id: str, **kwargs):
        super().__init__(label, **kwargs)
        self.tool_id = tool_id


class HelpButton(Button):
    def __init__(self, icon: str, title: str, link_key: str, **kwargs):
        super().__init__(f"{icon} {title}", **kwargs)
        self.help_title = title
        self.link_key = link_key


class ToolCard(Vertical):
    """One utility: icon, status badge, name, description, Open Tool button.

    The button is disabled unless the tool is available.
    """

    DEFAULT_CSS = """
    ToolCard {
        height: auto;
        padding: 0 1;
        margin-bottom: 1;
        border: round $primary-muted;
    }

    ToolCard LaunchButton {
        margin-top: 1;
    }
    """

    def __init__(self, tool: studio_utilities.catalog.ToolDescriptor, **kwargs):
        super().__init__(**kwargs)
        self.tool = tool

    def compose(self) -> ComposeResult:
        yield Static(
            studio_utilities.tui.panel_renderers.render_tool_card(self.tool),
            classes="tool-card-body",
        )
        yield LaunchButton(
            "Open Tool",
            self.tool.id,
            variant="primary",
            disabled=not self.tool.is_available,
        )


class UtilitiesDashboard(VerticalScroll):
    """Browse utilities by category and launch them.

    Every argument is optional so a host can mount the bare class; defaults
    come from the shipped catalog and the settings file.
    """

    DEFAULT_CSS = """
    UtilitiesDashboard {
        padding: 1 2;
    }

    UtilitiesDashboard .section {
        height: auto;
        padding: 1;
        margin-bottom: 1;
        border: solid $panel-lighten-2;
    }

    UtilitiesDashboard #dashboard-header {
        height: auto;
        margin-bottom: 1;
    }

    UtilitiesDashboard #dashboard-title {
        width: 1fr;
        text-style: bold;
    }

    UtilitiesDashboard Horizontal {
        height: auto;
    }

    UtilitiesDashboard #quick-actions Button, UtilitiesDashboard #help-links Button {
        margin-right: 1;
    }
    """

    def __init__(
        self,
        registry: Optional[studio_utilities.catalog.CatalogRegistry] = None,
        launcher: Optional[studio_utilities.launcher.Launcher] = None,
        *,
        on_close: Optional[Callable[[], None]] = None,
        initial_category: str = studio_utilities.catalog.ALL_CATEGORY,
        studio_url: Optional[str] = None,
        help_links: Optional[dict[str, str]] = None,
        **kwargs,
    ):
        super().__init__(**kwargs)
        self._catalog = (
            registry if registry is not None else studio_utilities.catalog.build_default_registry()
        )
        self._tool_launcher = launcher
        self._studio_url = studio_url
        self._help_links = help_links
        self._close_callback = on_close
        self.results_heading = Text("")
        # [LAW:no-shared-mutable-globals] One controller per dashboard instance.
        self.filter_controller = studio_utilities.filter_state.FilterController(
            self._catalog, initial=initial_category
        )

    # ─── Composition ─────────────────────────────────────────────────

    def compose(self) -> ComposeResult:
        renderers = studio_utilities.tui.panel_renderers
        stats = studio_utilities.category_stats.category_stats(self._catalog)

        with Horizontal(id="dashboard-header"):
            yield Static("Studio Utilities Dashboard", id="dashboard-title")
            if self._close_callback is not None:
                yield Button("Close", id="close-dashboard", variant="default")

        yield Static(renderers.render_category_stats(stats), id="category-stats", classes="section")

        with Vertical(id="category-filter", classes="section"):
            yield Static(renderers.render_section_title("Filter by Category"))
            with Horizontal(id="category-chips"):
                for category in self._catalog.categories():
                    yield CategoryChip(
                        category.id,
                        f"{category.icon} {category.name}",
                        selected=category.id == self.filter_controller.selected_category,
                        id=f"chip-{category.id}",
                    )

        with Vertical(id="tool-list", classes="section"):
            yield Static("", id="results-heading")
            for tool in self._catalog.list():
                yield ToolCard(tool, id=f"card-{tool.id}")
            yield Static(
                renderers.render_empty_state(studio_utilities.filter_state.EMPTY_STATE_MESSAGE),
                id="empty-state",
            )

        with Vertical(id="quick-actions-section", classes="section"):
            yield Static(renderers.render_section_title("Quick Actions"))
            with Horizontal(id="quick-actions"):
                for action in self._catalog.quick_actions():
                    yield LaunchButton(action.label, action.tool_id)

        with Vertical(id="help-section", classes="section"):
            yield Static(renderers.render_help_text())
            with Horizontal(id="help-links"):
                for icon, title, key in _HELP_BUTTONS:
                    yield HelpButton(icon, title, key, id=f"help-{key.replace('_', '-')}")

    def on_mount(self) -> None:
        if self._tool_launcher is None:
            studio_url = self._studio_url or studio_utilities.settings.load_studio_url()
            self._tool_launcher = studio_utilities.launcher.Launcher(
                self._catalog,
                studio_utilities.launcher.AppOpener(self.app, studio_url),
                base_path=studio_utilities.settings.load_desk_path(),
            )
        if self._help_links is None:
            self._help_links = studio_utilities.settings.load_help_links()
        self._refresh_view()

    # ─── Filtering ───────────────────────────────────────────────────

    def select_category(self, category_id: str) -> bool:
        accepted = self.filter_controller.select_category(category_id)
        if accepted:
            self._refresh_view()
        return accepted

    def select_category_index(self, index: int) -> bool:
        ids = self._catalog.category_ids()
        if not 0 <= index < len(ids):
            return False
        return self.select_category(ids[index])

    def _refresh_view(self) -> None:
        """Sync chips, cards, heading and empty state to the filter."""
        selected = self.filter_controller.selected_category
        visible_ids = {tool.id for tool in self.filter_controller.visible()}

        for chip in self.query(CategoryChip):
            chip.set_selected(chip.category_id == selected)
        for card in self.query(ToolCard):
            card.display = card.tool.id in visible_ids

        self.results_heading = studio_utilities.tui.panel_renderers.render_results_heading(
            self.filter_controller.heading(), len(visible_ids)
        )
        self.query_one("#results-heading", Static).update(self.results_heading)
        self.query_one("#empty-state", Static).display = not visible_ids

    def on_category_chip_selected(self, message: CategoryChip.Selected) -> None:
        message.stop()
        self.select_category(message.category_id)

    # ─── Launching ───────────────────────────────────────────────────

    def launch_tool(self, tool_id: str) -> bool:
        """Dispatch a launch and surface rejections as notifications."""
        try:
            self._tool_launcher.launch(tool_id)
        except (UnknownToolError, InvalidStateError) as e:
            logger.warning("launch rejected: %s", e)
            self.app.notify(str(e), title="Cannot open tool", severity="error")
            return False
        tool = self._catalog.get(tool_id)
        self.app.notify(f"Opening {tool.name}", severity="information")
        return True

    def on_button_pressed(self, event: Button.Pressed) -> None:
        button = event.button
        if isinstance(button, LaunchButton):
            event.stop()
            self.launch_tool(button.tool_id)
        elif isinstance(button, HelpButton):
            event.stop()
            self._open_help(button)
        elif button.id == "close-dashboard" and self._close_callback is not None:
            event.stop()
            self._close_callback()

    def _open_help(self, button: HelpButton) -> None:
        url = (self._help_links or {}).get(button.link_key, "")
        if not url:
            self.app.notify(f"{button.help_title} link is not configured", severity="warning")
            return
        self.app.open_url(url, new_tab=True)
