"""Per-category counts and status presentation values for the dashboard.

Pure derivations over a CatalogRegistry; nothing here holds state.
"""

from __future__ import annotations

from dataclasses import dataclass

from studio_utilities.catalog import ALL_CATEGORY, CatalogRegistry, CategoryDescriptor


@dataclass(frozen=True)
class CategoryStat:
    category: CategoryDescriptor
    count: int

    @property
    def label(self) -> str:
        return f"{self.count} tools"


# [LAW:dataflow-not-control-flow] Badge tone is a table lookup.
_STATUS_TONES: dict[str, str] = {
    "available": "positive",
    "coming-soon": "caution",
    "deprecated": "critical",
}


def category_stats(registry: CatalogRegistry) -> tuple[CategoryStat, ...]:
    """Counts for every concrete category in display order (``all`` excluded)."""
    return tuple(
        CategoryStat(category=category, count=registry.count_for(category.id))
        for category in registry.categories()
        if category.id != ALL_CATEGORY
    )


def total_count(stats: tuple[CategoryStat, ...]) -> int:
    return sum(stat.count for stat in stats)


def status_tone(status: str) -> str:
    return _STATUS_TONES.get(status, "default")


def status_label(status: str) -> str:
    return status.replace("-", " ")
