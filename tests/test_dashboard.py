"""Dashboard tests using the Textual in-process harness."""

import pytest

from studio_utilities.launcher import Launcher
from studio_utilities.tui.dashboard import LaunchButton
from tests.harness import (
    click_and_settle,
    get_dashboard,
    heading_text,
    is_empty_state_visible,
    press_and_settle,
    run_app,
    selected_chip_ids,
    visible_card_ids,
)

pytestmark = pytest.mark.textual


async def test_initial_view_shows_whole_catalog(registry):
    async with run_app() as (pilot, app):
        assert visible_card_ids(app) == [tool.id for tool in registry.list()]
        assert selected_chip_ids(app) == ["all"]
        assert heading_text(app) == "All Utilities (12 tools)"
        assert not is_empty_state_visible(app)


async def test_number_keys_select_categories():
    async with run_app() as (pilot, app):
        await press_and_settle(pilot, "5")
        assert visible_card_ids(app) == ["convert-references", "convert-ids-to-slugs"]
        assert selected_chip_ids(app) == ["optimization"]
        assert heading_text(app) == "Optimization (2 tools)"

        await press_and_settle(pilot, "1")
        assert len(visible_card_ids(app)) == 12


async def test_clicking_chip_filters():
    async with run_app() as (pilot, app):
        await click_and_settle(pilot, "#chip-assets")
        assert visible_card_ids(app) == [
            "delete-unused-assets",
            "font-data-extractor",
            "font-management-suite",
        ]
        assert get_dashboard(app).filter_controller.selected_category == "assets"


async def test_unknown_category_keeps_selection():
    async with run_app(initial_category="data") as (pilot, app):
        dashboard = get_dashboard(app)
        assert dashboard.select_category("bogus") is False
        assert selected_chip_ids(app) == ["data"]
        assert visible_card_ids(app) == ["bulk-data-operations", "export-data"]


async def test_empty_category_shows_empty_state(mixed_status_registry):
    async with run_app(registry=mixed_status_registry) as (pilot, app):
        await press_and_settle(pilot, "5")
        assert visible_card_ids(app) == []
        assert is_empty_state_visible(app)
        assert heading_text(app) == "Optimization (0 tools)"


async def test_open_button_disabled_for_unavailable_tools(mixed_status_registry, opener):
    launcher = Launcher(mixed_status_registry, opener)
    async with run_app(registry=mixed_status_registry, launcher=launcher) as (pilot, app):
        buttons = {b.tool_id: b.disabled for b in app.query("ToolCard LaunchButton")}
        assert buttons == {"alpha": False, "beta": True, "gamma": True}


async def test_open_tool_button_launches(registry, opener):
    launcher = Launcher(registry, opener)
    async with run_app(launcher=launcher) as (pilot, app):
        button = app.query_one("#card-export-data LaunchButton", LaunchButton)
        button.press()
        await pilot.pause()
        assert opener.paths == ["/desk/export-data"]


async def test_quick_action_launches(registry, opener):
    launcher = Launcher(registry, opener)
    async with run_app(launcher=launcher) as (pilot, app):
        quick = [b for b in app.query("#quick-actions LaunchButton")]
        assert [b.tool_id for b in quick][:2] == ["search-and-delete", "bulk-data-operations"]
        quick[0].press()
        await pilot.pause()
        assert opener.paths == ["/desk/search-and-delete"]


async def test_rejected_launch_notifies_instead_of_crashing(mixed_status_registry, opener):
    launcher = Launcher(mixed_status_registry, opener)
    async with run_app(registry=mixed_status_registry, launcher=launcher) as (pilot, app):
        assert get_dashboard(app).launch_tool("beta") is False
        assert get_dashboard(app).launch_tool("bogus") is False
        await pilot.pause()
        assert app.is_running
        assert opener.paths == []


async def test_help_link_opens_configured_url(monkeypatch):
    opened = []
    async with run_app(help_links={"docs_url": "https://docs.test"}) as (pilot, app):
        monkeypatch.setattr(app, "open_url", lambda url, new_tab=True: opened.append(url))
        app.query_one("#help-docs-url").press()
        await pilot.pause()
        app.query_one("#help-support-url").press()
        await pilot.pause()
        assert opened == ["https://docs.test"]


async def test_close_button_exits_app():
    async with run_app() as (pilot, app):
        app.query_one("#close-dashboard").press()
        await pilot.pause()
        assert app.return_code == 0


async def test_dashboards_have_independent_filters(registry):
    async with run_app() as (_pilot, app):
        get_dashboard(app).select_category("content")
    async with run_app() as (_pilot, app):
        assert get_dashboard(app).filter_controller.selected_category == "all"
