"""Panel rendering logic - pure functions for building display text.

Widgets hold state and call into here; nothing in this module touches Textual,
so every renderer can be asserted on directly in tests.
"""

from rich.table import Table
from rich.text import Text

import studio_utilities.category_stats
from studio_utilities.catalog import ToolDescriptor

# [LAW:dataflow-not-control-flow] Badge colors keyed by tone, not branches.
_TONE_STYLES: dict[str, str] = {
    "positive": "bold green",
    "caution": "bold yellow",
    "critical": "bold red",
    "default": "dim",
}

HELP_TEXT = (
    "The Studio Utilities collection provides tools for managing your studio content. "
    "Each utility is designed to handle specific administrative tasks efficiently and safely."
)


def render_section_title(title: str) -> Text:
    return Text(title, style="bold")


def render_category_stats(stats) -> Text:
    """Render the 'Utility Categories' overview: one line per concrete category.

    Args:
        stats: sequence of CategoryStat, already in display order
    """
    text = Text()
    text.append("Utility Categories\n", style="bold")
    for index, stat in enumerate(stats):
        if index:
            text.append("\n")
        text.append(f"{stat.category.icon} ")
        text.append(stat.category.name, style="bold")
        text.append("  ")
        text.append(stat.label, style="dim")
    return text


def render_status_badge(status: str) -> Text:
    tone = studio_utilities.category_stats.status_tone(status)
    label = studio_utilities.category_stats.status_label(status)
    return Text(f"[{label}]", style=_TONE_STYLES.get(tone, _TONE_STYLES["default"]))


def render_tool_card(tool: ToolDescriptor) -> Text:
    """Icon + status badge on the first line, name, then description."""
    text = Text()
    text.append(f"{tool.icon}  ")
    text.append_text(render_status_badge(tool.status))
    text.append("\n")
    text.append(tool.name, style="bold")
    text.append("\n")
    text.append(tool.description, style="dim")
    return text


def render_results_heading(heading: str, count: int) -> Text:
    text = Text()
    text.append(heading, style="bold")
    text.append(f" ({count} tools)", style="dim")
    return text


def render_empty_state(message: str) -> Text:
    return Text(message, style="dim italic", justify="center")


def render_help_text() -> Text:
    text = Text()
    text.append("Help & Documentation\n", style="bold")
    text.append(HELP_TEXT, style="dim")
    return text


def render_catalog_table(tools, heading: str, stats):
    """Rich Table for the non-interactive ``--list`` output."""
    table = Table(title=f"{heading} ({len(tools)} tools)", show_lines=False)
    table.add_column("ID", style="cyan", no_wrap=True)
    table.add_column("Name", style="bold")
    table.add_column("Category")
    table.add_column("Status")
    table.add_column("Description", style="dim")
    for tool in tools:
        table.add_row(
            tool.id,
            f"{tool.icon} {tool.name}",
            tool.category,
            render_status_badge(tool.status),
            tool.description,
        )
    caption = Text()
    for index, stat in enumerate(stats):
        if index:
            caption.append("  ")
        caption.append(f"{stat.category.name}: {stat.count}")
    table.caption = caption
    return table
