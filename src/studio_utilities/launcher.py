"""Launch dispatch: tool id -> studio path -> fire-and-forget open.

// [LAW:locality-or-seam] The open primitive is injected; the launcher never
//   knows whether it is talking to a browser, a Textual app or a test double.
// [LAW:single-enforcer] launch() is the sole place the availability rule is
//   checked; the dashboard disabling buttons is presentation only.
"""

from __future__ import annotations

import logging
import threading
import webbrowser
from typing import Callable

from studio_utilities.catalog import CatalogRegistry
from studio_utilities.errors import InvalidStateError, UnknownToolError

logger = logging.getLogger(__name__)

DEFAULT_BASE_PATH = "/desk"

Opener = Callable[[str], None]


def join_url(base_url: str, path: str) -> str:
    """Join a studio base URL and an absolute desk path without doubling slashes."""
    base = str(base_url or "").rstrip("/")
    if not base:
        return path
    return base + "/" + path.lstrip("/")


class Launcher:
    """Resolves tool ids to navigation targets and hands them to an opener."""

    def __init__(
        self,
        registry: CatalogRegistry,
        opener: Opener,
        base_path: str = DEFAULT_BASE_PATH,
    ) -> None:
        self._registry = registry
        self._opener = opener
        self._base_path = base_path.rstrip("/")

    @property
    def base_path(self) -> str:
        return self._base_path

    def target_for(self, tool_id: str) -> str:
        """Navigation path for ``tool_id``. Pure, independent of the tool's status."""
        return f"{self._base_path}/{tool_id}"

    def launch(self, tool_id: str) -> None:
        """Open ``tool_id`` in a new execution context.

        Raises UnknownToolError for ids outside the catalog and
        InvalidStateError for tools that are not available. Nothing is
        reported back once the opener has been called.
        """
        tool = self._registry.get(tool_id)
        if tool is None:
            raise UnknownToolError(tool_id)
        if not tool.is_available:
            raise InvalidStateError(tool_id, tool.status)
        target = self.target_for(tool_id)
        logger.info("launching %s -> %s", tool_id, target)
        self._opener(target)


class BrowserOpener:
    """Opens desk paths in a new browser tab on a daemon thread.

    webbrowser can block while it spawns the browser process, so the call is
    handed off and never joined.
    """

    def __init__(self, studio_url: str, new_tab: bool = True) -> None:
        self.studio_url = studio_url
        self.new_tab = new_tab

    def __call__(self, path: str) -> None:
        url = join_url(self.studio_url, path)
        thread = threading.Thread(
            target=self._open,
            args=(url,),
            name="studio-utilities-open",
            daemon=True,
        )
        thread.start()

    def _open(self, url: str) -> None:
        try:
            opened = webbrowser.open(url, new=2 if self.new_tab else 1)
        except webbrowser.Error as e:
            logger.warning("could not open %s: %s", url, e)
            return
        if not opened:
            logger.warning("no browser available to open %s", url)


class AppOpener:
    """Routes desk paths through a Textual app's ``open_url``."""

    def __init__(self, app, studio_url: str) -> None:
        self._app = app
        self.studio_url = studio_url

    def __call__(self, path: str) -> None:
        self._app.open_url(join_url(self.studio_url, path), new_tab=True)
