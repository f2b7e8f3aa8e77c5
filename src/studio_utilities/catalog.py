"""Utility catalog: tool and category descriptors plus the immutable registry.

// [LAW:one-source-of-truth] Tool metadata, category buckets and quick actions
//   are declared here and nowhere else.
// [LAW:no-shared-mutable-globals] The registry is built by a pure factory and
//   injected; consumers never reach for a module-level instance.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from typing import Literal

from studio_utilities.errors import DuplicateToolError, InvalidDescriptorError


ToolCategory = Literal["data", "assets", "content", "optimization"]
ToolStatus = Literal["available", "coming-soon", "deprecated"]

ALL_CATEGORY = "all"
TOOL_CATEGORIES: tuple[str, ...] = ("data", "assets", "content", "optimization")
TOOL_STATUSES: tuple[str, ...] = ("available", "coming-soon", "deprecated")
STATUS_AVAILABLE = "available"


@dataclass(frozen=True)
class ToolDescriptor:
    """One administrative utility as shown on the dashboard."""

    id: str
    name: str
    description: str
    icon: str
    category: ToolCategory
    status: ToolStatus = "available"

    def __post_init__(self) -> None:
        if not self.id:
            raise InvalidDescriptorError("tool id must be a non-empty string")
        if self.category not in TOOL_CATEGORIES:
            raise InvalidDescriptorError(
                f"tool {self.id!r} has unknown category {self.category!r}"
            )
        if self.status not in TOOL_STATUSES:
            raise InvalidDescriptorError(
                f"tool {self.id!r} has unknown status {self.status!r}"
            )

    @property
    def is_available(self) -> bool:
        return self.status == STATUS_AVAILABLE


@dataclass(frozen=True)
class CategoryDescriptor:
    """One filter bucket. ``all`` is the synthetic no-filter bucket."""

    id: str
    name: str
    icon: str


@dataclass(frozen=True)
class QuickAction:
    """Shortcut button that launches one catalog entry."""

    tool_id: str
    label: str


_DEFAULT_TOOLS: tuple[ToolDescriptor, ...] = (
    ToolDescriptor(
        id="search-and-delete",
        name="Search & Delete",
        description="Find and remove documents with advanced search capabilities",
        icon="🔍",
        category="content",
    ),
    ToolDescriptor(
        id="bulk-data-operations",
        name="Bulk Data Operations",
        description="Perform batch operations on multiple documents at once",
        icon="📊",
        category="data",
    ),
    ToolDescriptor(
        id="delete-unused-assets",
        name="Delete Unused Assets",
        description="Clean up unreferenced assets to free up storage space",
        icon="🗑️",
        category="assets",
    ),
    ToolDescriptor(
        id="export-data",
        name="Export Data",
        description="Export your studio data in various formats",
        icon="📤",
        category="data",
    ),
    ToolDescriptor(
        id="convert-references",
        name="Convert References",
        description="Convert strong references to weak references",
        icon="🔗",
        category="optimization",
    ),
    ToolDescriptor(
        id="convert-ids-to-slugs",
        name="Convert IDs to Slugs",
        description="Transform document IDs into SEO-friendly slugs",
        icon="🌐",
        category="optimization",
    ),
    ToolDescriptor(
        id="duplicate-and-rename",
        name="Duplicate & Rename",
        description="Duplicate documents and rename them efficiently",
        icon="📋",
        category="content",
    ),
    ToolDescriptor(
        id="font-data-extractor",
        name="Font Data Extractor",
        description="Extract metadata and information from font files",
        icon="📁",
        category="assets",
    ),
    ToolDescriptor(
        id="advanced-reference-array",
        name="Advanced Reference Array",
        description="Enhanced reference array input with advanced features",
        icon="🔗",
        category="content",
    ),
    ToolDescriptor(
        id="font-management-suite",
        name="Font Management Suite",
        description="Upload and manage font files with metadata extraction",
        icon="🎨",
        category="assets",
    ),
    ToolDescriptor(
        id="enhanced-commerce",
        name="Enhanced Commerce",
        description="Advanced e-commerce schemas with renewal support",
        icon="🛒",
        category="content",
    ),
    ToolDescriptor(
        id="renewals-authorization",
        name="Renewals Authorization",
        description="Manage renewal orders and cart processing",
        icon="🔄",
        category="content",
    ),
)

# [LAW:one-source-of-truth] Display order of filter buckets; "all" leads.
_DEFAULT_CATEGORIES: tuple[CategoryDescriptor, ...] = (
    CategoryDescriptor(ALL_CATEGORY, "All Utilities", "🛠️"),
    CategoryDescriptor("data", "Data Operations", "📊"),
    CategoryDescriptor("assets", "Asset Management", "🗂️"),
    CategoryDescriptor("content", "Content Tools", "📝"),
    CategoryDescriptor("optimization", "Optimization", "⚡"),
)

_DEFAULT_QUICK_ACTIONS: tuple[QuickAction, ...] = (
    QuickAction("search-and-delete", "🔍 Search & Delete"),
    QuickAction("bulk-data-operations", "📊 Bulk Operations"),
    QuickAction("delete-unused-assets", "🗑️ Clean Assets"),
    QuickAction("export-data", "📤 Export Data"),
    QuickAction("renewals-authorization", "🔄 Renewals"),
    QuickAction("enhanced-commerce", "🛒 Commerce"),
)


class CatalogRegistry:
    """Immutable, ordered catalog of tools with the fixed category list.

    Built once and shared read-only; no method mutates it, so any number of
    dashboards can hold the same instance.
    """

    def __init__(
        self,
        tools: Iterable[ToolDescriptor],
        categories: Iterable[CategoryDescriptor] = _DEFAULT_CATEGORIES,
        quick_actions: Iterable[QuickAction] = (),
    ) -> None:
        self._tools: tuple[ToolDescriptor, ...] = tuple(tools)
        self._categories: tuple[CategoryDescriptor, ...] = tuple(categories)
        self._quick_actions: tuple[QuickAction, ...] = tuple(quick_actions)
        self._by_id: dict[str, ToolDescriptor] = {}
        for tool in self._tools:
            if tool.id in self._by_id:
                raise DuplicateToolError(tool.id)
            self._by_id[tool.id] = tool
        _validate_categories(self._categories)
        buckets = {category.id for category in self._categories}
        for tool in self._tools:
            if tool.category not in buckets:
                raise InvalidDescriptorError(
                    f"tool {tool.id!r} is in category {tool.category!r}, which has no bucket"
                )
        for action in self._quick_actions:
            if action.tool_id not in self._by_id:
                raise DuplicateToolError(action.tool_id, "quick action references unknown tool")

    def list(self) -> tuple[ToolDescriptor, ...]:
        return self._tools

    def categories(self) -> tuple[CategoryDescriptor, ...]:
        return self._categories

    def category_ids(self) -> tuple[str, ...]:
        return tuple(category.id for category in self._categories)

    def quick_actions(self) -> tuple[QuickAction, ...]:
        return self._quick_actions

    def get(self, tool_id: str) -> ToolDescriptor | None:
        return self._by_id.get(tool_id)

    def category_name(self, category_id: str) -> str:
        for category in self._categories:
            if category.id == category_id:
                return category.name
        return category_id

    def tools_in(self, category_id: str) -> tuple[ToolDescriptor, ...]:
        """Tools whose category is ``category_id``; the whole catalog for ``all``.

        // [LAW:single-enforcer] Filtering and counting both go through here so
        // count_for() and FilterController.visible() cannot disagree.
        """
        if category_id == ALL_CATEGORY:
            return self._tools
        return tuple(tool for tool in self._tools if tool.category == category_id)

    def count_for(self, category_id: str) -> int:
        """Number of tools in a concrete category. Zero for ``all`` and unknown ids."""
        if category_id == ALL_CATEGORY or category_id not in self.category_ids():
            return 0
        return len(self.tools_in(category_id))

    def __len__(self) -> int:
        return len(self._tools)

    def __contains__(self, tool_id: object) -> bool:
        return tool_id in self._by_id


def _validate_categories(categories: tuple[CategoryDescriptor, ...]) -> None:
    ids = [category.id for category in categories]
    if not ids or ids[0] != ALL_CATEGORY:
        raise InvalidDescriptorError("category list must start with the 'all' bucket")
    if len(ids) != len(set(ids)):
        raise InvalidDescriptorError(f"duplicate category ids in {ids}")
    unknown = [cid for cid in ids[1:] if cid not in TOOL_CATEGORIES]
    if unknown:
        raise InvalidDescriptorError(f"unknown category ids: {unknown}")


def build_default_registry() -> CatalogRegistry:
    """Return the shipped catalog. Pure; every call builds an equal registry."""
    return CatalogRegistry(
        _DEFAULT_TOOLS,
        categories=_DEFAULT_CATEGORIES,
        quick_actions=_DEFAULT_QUICK_ACTIONS,
    )
