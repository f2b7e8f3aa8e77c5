"""Aggregation: per-package tables, merged namespace, loud collisions."""

import types

import pytest

from studio_utilities.aggregation import (
    DEFAULT_PACKAGES,
    PackageSource,
    build_namespace,
    compose_exports,
    load_surfaces,
    parse_package_sources,
    public_surface,
)
from studio_utilities.errors import (
    DuplicateExportError,
    DuplicatePackageError,
    PackageLoadError,
    StudioUtilitiesError,
)


def _module(name, all_names=None, **attrs):
    module = types.ModuleType(name)
    for key, value in attrs.items():
        setattr(module, key, value)
    if all_names is not None:
        module.__all__ = list(all_names)
    return module


def _importer(modules):
    def _import(name):
        try:
            return modules[name]
        except KeyError:
            raise ModuleNotFoundError(f"No module named {name!r}", name=name) from None

    return _import


def search_tool():
    return "search"


def export_tool():
    return "export"


class TestPublicSurface:
    def test_respects_dunder_all(self):
        module = _module("pkg", all_names=["a"], a=1, b=2)
        assert public_surface(module) == {"a": 1}

    def test_skips_private_names_without_dunder_all(self):
        module = _module("pkg", a=1, _hidden=2)
        surface = public_surface(module)
        assert surface["a"] == 1
        assert "_hidden" not in surface


class TestCompose:
    def test_merges_disjoint_surfaces_and_keeps_per_package_tables(self):
        namespace = compose_exports(
            [
                ("search-and-delete", {"SearchTool": search_tool}),
                ("export-data", {"ExportTool": export_tool}),
            ]
        )
        assert namespace["SearchTool"] is search_tool
        assert namespace.owner_of("ExportTool") == "export-data"
        assert dict(namespace.package("search-and-delete")) == {"SearchTool": search_tool}
        assert namespace.names() == ("ExportTool", "SearchTool")

    def test_collision_fails_loudly(self):
        with pytest.raises(DuplicateExportError) as excinfo:
            compose_exports(
                [
                    ("search-and-delete", {"Tool": search_tool}),
                    ("export-data", {"Tool": export_tool}),
                ]
            )
        error = excinfo.value
        assert error.name == "Tool"
        assert error.first_owner == "search-and-delete"
        assert error.second_owner == "export-data"

    def test_same_object_from_two_packages_is_not_a_collision(self):
        namespace = compose_exports([("a", {"shared": search_tool}), ("b", {"shared": search_tool})])
        assert namespace["shared"] is search_tool
        assert namespace.owner_of("shared") == "a"

    def test_duplicate_package_id_rejected(self):
        with pytest.raises(DuplicatePackageError) as excinfo:
            compose_exports([("a", {}), ("a", {})])
        assert excinfo.value.package_id == "a"
        assert isinstance(excinfo.value, StudioUtilitiesError)

    def test_namespace_is_read_only(self):
        namespace = compose_exports([("a", {"x": 1})])
        with pytest.raises(TypeError):
            namespace.exports["y"] = 2


class TestLoading:
    def test_missing_package_fails_whole_load(self):
        sources = [PackageSource("a", "mod_a"), PackageSource("b", "mod_b")]
        with pytest.raises(PackageLoadError) as excinfo:
            load_surfaces(sources, importer=_importer({"mod_a": _module("mod_a", x=1)}))
        assert excinfo.value.package_id == "b"
        assert isinstance(excinfo.value, ImportError)

    def test_build_namespace_puts_entry_points_first(self):
        modules = {
            source.module_name: _module(source.module_name, **{f"{source.module_name}_api": index})
            for index, source in enumerate(DEFAULT_PACKAGES)
        }
        namespace = build_namespace({"StudioUtilities": search_tool}, importer=_importer(modules))
        assert list(namespace.packages)[0] == "studio-utilities"
        assert list(namespace.packages)[1:] == [s.package_id for s in DEFAULT_PACKAGES]
        assert namespace["StudioUtilities"] is search_tool
        assert namespace["studio_export_data_api"] == 4

    def test_sibling_shadowing_an_entry_point_fails(self):
        modules = {"mod_a": _module("mod_a", StudioUtilities=export_tool)}
        with pytest.raises(DuplicateExportError):
            build_namespace(
                {"StudioUtilities": search_tool},
                sources=[PackageSource("a", "mod_a")],
                importer=_importer(modules),
            )

    def test_sibling_claiming_a_reserved_name_fails(self):
        modules = {"mod_a": _module("mod_a", get_namespace=export_tool)}
        with pytest.raises(DuplicateExportError) as excinfo:
            build_namespace(
                {"StudioUtilities": search_tool},
                sources=[PackageSource("a", "mod_a")],
                importer=_importer(modules),
                reserved=("get_namespace",),
            )
        assert excinfo.value.name == "get_namespace"
        assert excinfo.value.second_owner == "a"


class TestPackageSources:
    def test_eight_default_packages(self):
        assert len(DEFAULT_PACKAGES) == 8
        assert len({s.package_id for s in DEFAULT_PACKAGES}) == 8

    def test_parse_override(self):
        assert parse_package_sources([["a", "mod_a"]]) == (PackageSource("a", "mod_a"),)

    @pytest.mark.parametrize("raw", [None, [], "mod_a", [["a"]], [["", "mod"]], [["a", "mod"], 3]])
    def test_malformed_override_uses_defaults(self, raw):
        assert parse_package_sources(raw) == DEFAULT_PACKAGES
