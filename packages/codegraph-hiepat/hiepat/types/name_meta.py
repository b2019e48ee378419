"""Resolved name identity.

A ``NameMeta`` identifies a top-level name the way the front end resolves it:
by package, defining module and occurrence name. Two names are the same
entity only if all three agree.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class NameMeta:
    """Package- and module-qualified name."""

    name: str
    module_name: str
    package: str

    @property
    def qualified_name(self) -> str:
        return f"{self.module_name}.{self.name}"

    def __str__(self) -> str:
        return f"{self.package}/{self.qualified_name}"


def base_name(name: str, module_name: str = "GHC.Base") -> NameMeta:
    """Name defined in the ``base`` package."""
    return NameMeta(name=name, module_name=module_name, package="base")


def text_name(module_name: str, name: str) -> NameMeta:
    """Name defined in the ``text`` package."""
    return NameMeta(name=name, module_name=module_name, package="text")
