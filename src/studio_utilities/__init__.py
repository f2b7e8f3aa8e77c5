"""Studio utilities dashboard: catalog, category filter and launcher.

The full aggregated namespace, sibling utility packages included, lives in
``studio_utilities.bundle``.
"""

from studio_utilities.host import (
    HostTool,
    StudioUtilities,
    StudioUtilitiesComponent,
    Utilities,
)

__all__ = [
    "HostTool",
    "StudioUtilities",
    "StudioUtilitiesComponent",
    "Utilities",
]
