"""Error taxonomy for studio-utilities.

// [LAW:one-source-of-truth] Every exception the core raises is declared here.

Invalid category selection and empty filter results are deliberately absent:
the first is recovered inside FilterController, the second is a displayable
state, not a failure.
"""

from __future__ import annotations


class StudioUtilitiesError(Exception):
    """Base class for all studio-utilities errors."""


class InvalidDescriptorError(StudioUtilitiesError, ValueError):
    """A tool or category descriptor carries a value outside its enumeration."""


class DuplicateToolError(StudioUtilitiesError, ValueError):
    """Two catalog entries share an id, or a reference points at no entry."""

    def __init__(self, tool_id: str, detail: str = "duplicate tool id") -> None:
        self.tool_id = tool_id
        super().__init__(f"{detail}: {tool_id!r}")


class UnknownToolError(StudioUtilitiesError, LookupError):
    """Launch requested for an id that is not in the catalog."""

    def __init__(self, tool_id: str) -> None:
        self.tool_id = tool_id
        super().__init__(f"unknown tool id: {tool_id!r}")


class InvalidStateError(StudioUtilitiesError):
    """Launch requested for a tool whose status is not ``available``."""

    def __init__(self, tool_id: str, status: str) -> None:
        self.tool_id = tool_id
        self.status = status
        super().__init__(f"tool {tool_id!r} cannot be launched while {status}")


class DuplicateExportError(StudioUtilitiesError):
    """Two aggregated sources export different objects under one name."""

    def __init__(self, name: str, first_owner: str, second_owner: str) -> None:
        self.name = name
        self.first_owner = first_owner
        self.second_owner = second_owner
        super().__init__(
            "export {!r} from {!r} collides with the one from {!r}".format(
                name, second_owner, first_owner
            )
        )


class DuplicatePackageError(StudioUtilitiesError, ValueError):
    """Two aggregated sources were declared under the same package id."""

    def __init__(self, package_id: str) -> None:
        self.package_id = package_id
        super().__init__(f"duplicate package id: {package_id!r}")


class PackageLoadError(StudioUtilitiesError, ImportError):
    """A sibling utility package could not be imported."""

    def __init__(self, package_id: str, module_name: str, reason: str) -> None:
        self.package_id = package_id
        self.module_name = module_name
        super().__init__(
            f"utility package {package_id!r} ({module_name}) failed to load: {reason}",
            name=module_name,
        )
