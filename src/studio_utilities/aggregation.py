"""Load-time composition of sibling utility packages into one export namespace.

// [LAW:one-source-of-truth] The sibling package list is declared once here
//   (settings may override it, never extend it silently).
// [LAW:single-enforcer] compose_exports() is the only place names are merged,
//   and it refuses to shadow.

Each sibling package exposes a conventional module-level surface: ``__all__``
when present, otherwise every public attribute. Surfaces are kept per package
and merged into one flat mapping; two different objects under one name raise
DuplicateExportError instead of the later one winning.
"""

from __future__ import annotations

import importlib
import logging
import types
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Callable

from studio_utilities.errors import DuplicateExportError, DuplicatePackageError, PackageLoadError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PackageSource:
    package_id: str
    module_name: str


# Declaration order is merge order.
DEFAULT_PACKAGES: tuple[PackageSource, ...] = (
    PackageSource("search-and-delete", "studio_search_and_delete"),
    PackageSource("delete-unused-assets", "studio_delete_unused_assets"),
    PackageSource("bulk-data-operations", "studio_bulk_data_operations"),
    PackageSource("font-data-extractor", "studio_font_data_extractor"),
    PackageSource("export-data", "studio_export_data"),
    PackageSource("convert-references", "studio_convert_references"),
    PackageSource("convert-ids-to-slugs", "studio_convert_ids_to_slugs"),
    PackageSource("duplicate-and-rename", "studio_duplicate_and_rename"),
)


@dataclass(frozen=True)
class ExportNamespace:
    """Merged export surface plus the per-package tables it was built from."""

    packages: Mapping[str, Mapping[str, Any]]
    exports: Mapping[str, Any]
    owners: Mapping[str, str]

    def __getitem__(self, name: str) -> Any:
        return self.exports[name]

    def __contains__(self, name: object) -> bool:
        return name in self.exports

    def names(self) -> tuple[str, ...]:
        return tuple(sorted(self.exports))

    def owner_of(self, name: str) -> str:
        return self.owners[name]

    def package(self, package_id: str) -> Mapping[str, Any]:
        return self.packages[package_id]


def public_surface(module: types.ModuleType) -> dict[str, Any]:
    """Names ``from module import *`` would bind."""
    names = getattr(module, "__all__", None)
    if names is None:
        names = [name for name in vars(module) if not name.startswith("_")]
    return {name: getattr(module, name) for name in names}


def parse_package_sources(raw: object) -> tuple[PackageSource, ...]:
    """Build sources from a settings value: a list of ``[package_id, module_name]`` pairs.

    Anything malformed yields the default list.
    """
    if not isinstance(raw, (list, tuple)) or not raw:
        return DEFAULT_PACKAGES
    sources: list[PackageSource] = []
    for item in raw:
        if not isinstance(item, (list, tuple)) or len(item) != 2:
            logger.warning("ignoring utility_packages override: bad entry %r", item)
            return DEFAULT_PACKAGES
        package_id, module_name = (str(part or "").strip() for part in item)
        if not package_id or not module_name:
            logger.warning("ignoring utility_packages override: bad entry %r", item)
            return DEFAULT_PACKAGES
        sources.append(PackageSource(package_id, module_name))
    return tuple(sources)


def load_surfaces(
    sources: Sequence[PackageSource],
    importer: Callable[[str], types.ModuleType] = importlib.import_module,
) -> list[tuple[str, dict[str, Any]]]:
    """Import every source in order. Any failure aborts the whole load."""
    surfaces: list[tuple[str, dict[str, Any]]] = []
    for source in sources:
        try:
            module = importer(source.module_name)
        except ImportError as e:
            raise PackageLoadError(source.package_id, source.module_name, str(e)) from e
        surface = public_surface(module)
        logger.debug("loaded %d exports from %s", len(surface), source.module_name)
        surfaces.append((source.package_id, surface))
    return surfaces


def compose_exports(surfaces: Iterable[tuple[str, Mapping[str, Any]]]) -> ExportNamespace:
    """Merge ``(owner, {name: obj})`` tables in order, failing on any collision.

    Re-exporting the very same object from two owners is not a collision.
    """
    packages: dict[str, Mapping[str, Any]] = {}
    exports: dict[str, Any] = {}
    owners: dict[str, str] = {}
    for owner, surface in surfaces:
        if owner in packages:
            raise DuplicatePackageError(owner)
        packages[owner] = types.MappingProxyType(dict(surface))
        for name, value in surface.items():
            if name in exports and exports[name] is not value:
                raise DuplicateExportError(name, owners[name], owner)
            exports.setdefault(name, value)
            owners.setdefault(name, owner)
    return ExportNamespace(
        packages=types.MappingProxyType(packages),
        exports=types.MappingProxyType(exports),
        owners=types.MappingProxyType(owners),
    )


def build_namespace(
    entry_points: Mapping[str, Any],
    sources: Sequence[PackageSource] = DEFAULT_PACKAGES,
    importer: Callable[[str], types.ModuleType] = importlib.import_module,
    owner: str = "studio-utilities",
    reserved: Iterable[str] = (),
) -> ExportNamespace:
    """Dashboard entry points first, then every sibling package in declaration order.

    ``reserved`` names belong to the host module itself; any source exporting
    one raises DuplicateExportError instead of being shadowed.
    """
    surfaces = [(owner, dict(entry_points))]
    surfaces.extend(load_surfaces(sources, importer=importer))
    namespace = compose_exports(surfaces)
    for name in reserved:
        if name in namespace.exports:
            raise DuplicateExportError(name, owner, namespace.owner_of(name))
    logger.info(
        "aggregated %d exports from %d packages", len(namespace.exports), len(namespace.packages)
    )
    return namespace
