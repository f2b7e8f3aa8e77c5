"""Aggregated namespace: dashboard entry points plus every sibling utility package.

Importing this module imports all configured sibling packages. A missing
package raises PackageLoadError and a name exported by two packages, or one
that would replace a name this module defines, raises DuplicateExportError,
so the namespace either loads whole or not at all.

    from studio_utilities.bundle import StudioUtilities, <any sibling export>
"""

import studio_utilities.aggregation as _aggregation
import studio_utilities.host as _host
import studio_utilities.settings as _settings


def get_namespace() -> _aggregation.ExportNamespace:
    """Per-package export tables alongside the merged view."""
    return _NAMESPACE


_NAMESPACE = _aggregation.build_namespace(
    _host.entry_points(),
    sources=_settings.load_utility_packages(),
    reserved=(*globals(), "_NAMESPACE"),
)

globals().update(_NAMESPACE.exports)

__all__ = list(_NAMESPACE.names())
