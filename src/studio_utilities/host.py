"""Entry point the host studio calls to mount the dashboard.

The host invokes StudioUtilities() (or its alias Utilities) at startup and
mounts ``component`` inside its own navigation shell.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

from studio_utilities.tui.dashboard import UtilitiesDashboard

TOOL_NAME = "utilities"
TOOL_TITLE = "Studio Utilities"
TOOL_ICON = "🛠️"


@dataclass(frozen=True)
class HostTool:
    """Descriptor record handed to the host: name, title, icon factory, component."""

    name: str
    title: str
    icon: Callable[[], str]
    component: type

    def as_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "title": self.title,
            "icon": self.icon,
            "component": self.component,
        }


def _icon() -> str:
    return TOOL_ICON


def StudioUtilities() -> HostTool:  # noqa: N802
    return HostTool(name=TOOL_NAME, title=TOOL_TITLE, icon=_icon, component=UtilitiesDashboard)


Utilities = StudioUtilities
StudioUtilitiesComponent = UtilitiesDashboard


def entry_points() -> dict[str, Any]:
    """Names this project contributes to the aggregated namespace."""
    return {
        "StudioUtilities": StudioUtilities,
        "Utilities": Utilities,
        "StudioUtilitiesComponent": StudioUtilitiesComponent,
    }
