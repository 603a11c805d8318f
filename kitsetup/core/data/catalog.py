"""
Static catalog — prompt options and post-install directives.

Pure data, no logic. Option mappings are ``specifier → label`` and keep
insertion order, which is the order the operator sees them in.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from kitsetup.core.models.package import Package


@dataclass(frozen=True)
class Directive:
    """One artisan command to run after a package is installed.

    ``container_args`` are appended only when the command goes through
    the container wrapper.
    """

    args: tuple[str, ...]
    container_args: tuple[str, ...] = ()

    def argv(self, containerized: bool = False) -> list[str]:
        if containerized:
            return [*self.args, *self.container_args]
        return list(self.args)


# ── Prompt options ──────────────────────────────────────────────

ADMIN_PANEL_OPTIONS: Mapping[str, str] = MappingProxyType({
    "filament/filament:^4.0": "✨ Filament v4 — Panel builder (admin panel)",
    "moonshine/moonshine": "🌙 Moonshine — admin panel",
})
ADMIN_PANEL_DEFAULT = "filament/filament:^4.0"

# Always installed when the API gate is accepted, ahead of the helper choice.
API_DOCS_PACKAGE = Package.L5_SWAGGER.value

API_HELPER_OPTIONS: Mapping[str, str] = MappingProxyType({
    "spatie/laravel-data": "📦 Laravel Data — data objects / DTOs",
    "pepperfm/api-responder-for-laravel": "📦 API Responder — lightweight response helpers",
})
API_HELPER_DEFAULT = "spatie/laravel-data"

EXTRA_OPTIONS: Mapping[str, str] = MappingProxyType({
    "defstudio/telegraph": "🤖 Telegram Bot Integration (Telegraph)",
    "spatie/laravel-ray": "🛠 Ray Debugger (requires license) [dev]",
    "spatie/laravel-medialibrary": "🖼  Spatie MediaLibrary (file uploads)",
    "spatie/laravel-permission": "🔐 Spatie Permissions (roles & permissions)",
})

# Extras that belong in require-dev rather than require.
DEV_ONLY: frozenset[Package] = frozenset({Package.RAY})


# ── Post-install directives ─────────────────────────────────────

DIRECTIVES: Mapping[Package, tuple[Directive, ...]] = MappingProxyType({
    Package.MOONSHINE: (
        Directive(("moonshine:install",)),
    ),
    Package.FILAMENT: (
        Directive(("filament:install", "--panels")),
    ),
    Package.L5_SWAGGER: (
        Directive(("vendor:publish", "--provider=L5Swagger\\L5SwaggerServiceProvider")),
        Directive(("l5-swagger:generate",)),
    ),
    Package.TELEGRAPH: (
        Directive(("vendor:publish", "--tag=telegraph-migrations")),
        Directive(("migrate",)),
    ),
    Package.RAY: (
        Directive(("ray:publish-config",), container_args=("--docker",)),
    ),
    Package.MEDIALIBRARY: (
        Directive((
            "vendor:publish",
            "--provider=Spatie\\MediaLibrary\\MediaLibraryServiceProvider",
            "--tag=medialibrary-migrations",
        )),
        Directive(("migrate",)),
    ),
    Package.PERMISSION: (
        Directive(("vendor:publish", "--provider=Spatie\\Permission\\PermissionServiceProvider")),
        Directive(("optimize:clear",)),
        Directive(("migrate",)),
    ),
})

# Offered once the admin panel's own directives have run.
ADMIN_USER_PACKAGE = Package.FILAMENT
ADMIN_USER_DIRECTIVE = Directive(("make:filament-user",))
