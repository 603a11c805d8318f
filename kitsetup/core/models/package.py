"""
Package models — identifiers, specifiers and the accumulated selection.

Known package identifiers form a closed enum. Anything the operator
selects is parsed into a ``PackageSpecifier`` at the boundary; looking
up its ``package`` yields the enum member or ``None`` for identifiers
the setup knows nothing about.
"""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class Package(StrEnum):
    """Every package the setup command knows how to offer or configure."""

    FILAMENT = "filament/filament"
    MOONSHINE = "moonshine/moonshine"
    L5_SWAGGER = "darkaonline/l5-swagger"
    LARAVEL_DATA = "spatie/laravel-data"
    API_RESPONDER = "pepperfm/api-responder-for-laravel"
    TELEGRAPH = "defstudio/telegraph"
    RAY = "spatie/laravel-ray"
    MEDIALIBRARY = "spatie/laravel-medialibrary"
    PERMISSION = "spatie/laravel-permission"

    @classmethod
    def lookup(cls, name: str) -> Package | None:
        """Exact match on the bare identifier, ``None`` when unknown."""
        try:
            return cls(name)
        except ValueError:
            return None


class PackageSpecifier(BaseModel):
    """A package identifier plus an optional version constraint."""

    model_config = ConfigDict(frozen=True)

    name: str
    constraint: str | None = None

    @classmethod
    def parse(cls, raw: str) -> PackageSpecifier:
        """Parse ``vendor/name`` or ``vendor/name:constraint``.

        Surrounding whitespace is dropped from both halves; an empty
        constraint is treated as no constraint.
        """
        name, sep, constraint = raw.strip().partition(":")
        constraint = constraint.strip()
        return cls(name=name.strip(), constraint=constraint if sep and constraint else None)

    @property
    def package(self) -> Package | None:
        return Package.lookup(self.name)

    def __str__(self) -> str:
        if self.constraint:
            return f"{self.name}:{self.constraint}"
        return self.name


class Selection(BaseModel):
    """The packages chosen during one run, split into runtime and dev.

    Immutable: ``add_runtime`` / ``add_dev`` return an updated copy.
    An identifier already present in either list is never added again,
    so the two lists are disjoint and duplicate-free.
    """

    model_config = ConfigDict(frozen=True)

    runtime: tuple[PackageSpecifier, ...] = ()
    dev: tuple[PackageSpecifier, ...] = ()

    def __contains__(self, name: object) -> bool:
        if isinstance(name, PackageSpecifier):
            name = name.name
        return any(spec.name == name for spec in self.all())

    @property
    def is_empty(self) -> bool:
        return not self.runtime and not self.dev

    def all(self) -> tuple[PackageSpecifier, ...]:
        """Runtime specifiers followed by dev specifiers, in selection order."""
        return self.runtime + self.dev

    def add_runtime(self, spec: PackageSpecifier | str) -> Selection:
        spec = _coerce(spec)
        if not spec.name or spec in self:
            return self
        return self.model_copy(update={"runtime": self.runtime + (spec,)})

    def add_dev(self, spec: PackageSpecifier | str) -> Selection:
        spec = _coerce(spec)
        if not spec.name or spec in self:
            return self
        return self.model_copy(update={"dev": self.dev + (spec,)})

    def to_dict(self) -> dict:
        return {
            "runtime": [str(s) for s in self.runtime],
            "dev": [str(s) for s in self.dev],
        }


def _coerce(spec: PackageSpecifier | str) -> PackageSpecifier:
    if isinstance(spec, PackageSpecifier):
        return spec
    return PackageSpecifier.parse(spec)
