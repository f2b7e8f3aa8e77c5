"""CLI entry point for studio-utilities."""

import argparse
import logging
import sys

from rich.console import Console

import studio_utilities.catalog
import studio_utilities.category_stats
import studio_utilities.filter_state
import studio_utilities.io.logging_setup
import studio_utilities.launcher
import studio_utilities.settings
import studio_utilities.tui.panel_renderers
from studio_utilities.errors import InvalidStateError, UnknownToolError
from studio_utilities.tui.app import StudioUtilitiesApp

logger = logging.getLogger(__name__)

EXIT_LAUNCH_FAILED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="studio-utilities",
        description="Browse and launch content studio utilities",
    )
    parser.add_argument(
        "--category",
        type=str,
        default=studio_utilities.catalog.ALL_CATEGORY,
        help="Initial category filter: all, data, assets, content, optimization (default: all)",
    )
    parser.add_argument(
        "--list",
        dest="list_tools",
        action="store_true",
        default=False,
        help="Print the (filtered) catalog and exit.",
    )
    parser.add_argument(
        "--open",
        dest="open_tool",
        type=str,
        default=None,
        metavar="TOOL_ID",
        help="Open one utility in the browser and exit.",
    )
    parser.add_argument(
        "--studio-url",
        type=str,
        default=None,
        help="Studio base URL (default: settings file, env STUDIO_UTILITIES_URL, "
        "or {})".format(studio_utilities.settings.DEFAULT_STUDIO_URL),
    )
    return parser


def _print_catalog(console: Console, controller) -> None:
    stats = studio_utilities.category_stats.category_stats(controller.registry)
    console.print(
        studio_utilities.tui.panel_renderers.render_catalog_table(
            controller.visible(), controller.heading(), stats
        )
    )
    if controller.is_empty():
        console.print(studio_utilities.filter_state.EMPTY_STATE_MESSAGE)


def _open_tool(console: Console, registry, tool_id: str, studio_url: str) -> int:
    launcher = studio_utilities.launcher.Launcher(
        registry,
        studio_utilities.launcher.BrowserOpener(studio_url),
        base_path=studio_utilities.settings.load_desk_path(),
    )
    try:
        launcher.launch(tool_id)
    except (UnknownToolError, InvalidStateError) as e:
        console.print(f"[red]Cannot open tool:[/] {e}")
        return EXIT_LAUNCH_FAILED
    target = studio_utilities.launcher.join_url(studio_url, launcher.target_for(tool_id))
    console.print(f"Opening [bold]{tool_id}[/] at {target}")
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    interactive = not (args.list_tools or args.open_tool)
    runtime = studio_utilities.io.logging_setup.configure(console=not interactive)
    logger.debug("logging to %s at %s", runtime.file_path, runtime.level_name)

    registry = studio_utilities.catalog.build_default_registry()
    studio_url = args.studio_url or studio_utilities.settings.load_studio_url()
    console = Console()

    controller = studio_utilities.filter_state.FilterController(registry)
    if not controller.select_category(args.category):
        logger.warning("unknown category %r, showing all utilities", args.category)
        if interactive:
            console.print(f"[yellow]Unknown category {args.category!r}, showing all utilities[/]")

    if args.open_tool:
        return _open_tool(console, registry, args.open_tool, studio_url)

    if args.list_tools:
        _print_catalog(console, controller)
        return 0

    app = StudioUtilitiesApp(
        registry=registry,
        initial_category=controller.selected_category,
        studio_url=studio_url,
    )
    app.run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
