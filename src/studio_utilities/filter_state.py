"""Category filter state machine for one dashboard instance.

// [LAW:one-source-of-truth] selected_category is the only state; the visible
//   set is always derived from (catalog, selected_category).
"""

from __future__ import annotations

import logging

from studio_utilities.catalog import ALL_CATEGORY, CatalogRegistry, ToolDescriptor

logger = logging.getLogger(__name__)

EMPTY_STATE_MESSAGE = "No utilities found in this category."


class FilterController:
    """Holds the selected category and exposes the visible subset of the catalog.

    States are the registry's category ids. The initial state is ``all`` and
    there is no terminal state. Unknown ids are rejected without raising and
    leave the selection untouched.
    """

    def __init__(self, registry: CatalogRegistry, initial: str = ALL_CATEGORY) -> None:
        self._registry = registry
        self._selected = ALL_CATEGORY
        self.select_category(initial)

    @property
    def selected_category(self) -> str:
        return self._selected

    @property
    def registry(self) -> CatalogRegistry:
        return self._registry

    def select_category(self, category_id: str) -> bool:
        """Switch the filter bucket. Returns False when ``category_id`` is unknown."""
        if category_id not in self._registry.category_ids():
            logger.debug("ignoring unknown category %r (kept %r)", category_id, self._selected)
            return False
        self._selected = category_id
        return True

    def visible(self) -> tuple[ToolDescriptor, ...]:
        return self._registry.tools_in(self._selected)

    def is_empty(self) -> bool:
        return not self.visible()

    def heading(self) -> str:
        return self._registry.category_name(self._selected)
