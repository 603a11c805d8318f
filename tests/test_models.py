"""
Tests for domain models — specifiers, selection, receipts, settings.
"""

import pytest
from pydantic import ValidationError

from kitsetup.core.models import (
    Action,
    Package,
    PackageSpecifier,
    Receipt,
    Selection,
    SetupSettings,
)


class TestPackageSpecifier:
    def test_parse_with_constraint(self):
        spec = PackageSpecifier.parse("filament/filament:^4.0")
        assert spec.name == "filament/filament"
        assert spec.constraint == "^4.0"
        assert str(spec) == "filament/filament:^4.0"

    def test_parse_without_constraint(self):
        spec = PackageSpecifier.parse("moonshine/moonshine")
        assert spec.constraint is None
        assert str(spec) == "moonshine/moonshine"

    def test_parse_trims_whitespace(self):
        spec = PackageSpecifier.parse("  spatie/laravel-data : ^4 ")
        assert spec.name == "spatie/laravel-data"
        assert spec.constraint == "^4"

    def test_empty_constraint_dropped(self):
        assert PackageSpecifier.parse("spatie/laravel-ray:").constraint is None

    def test_known_package_resolves(self):
        assert PackageSpecifier.parse("filament/filament:^4.0").package is Package.FILAMENT

    def test_unknown_package_is_none(self):
        assert PackageSpecifier.parse("acme/unknown:1.0").package is None

    def test_frozen(self):
        spec = PackageSpecifier.parse("a/b")
        with pytest.raises(ValidationError):
            spec.name = "c/d"


class TestPackage:
    def test_lookup_exact_match_only(self):
        assert Package.lookup("spatie/laravel-permission") is Package.PERMISSION
        assert Package.lookup("spatie/laravel-permission:^6") is None
        assert Package.lookup("Spatie/Laravel-Permission") is None


class TestSelection:
    def test_empty(self):
        assert Selection().is_empty
        assert Selection().all() == ()

    def test_add_returns_copy(self):
        original = Selection()
        updated = original.add_runtime("a/b")
        assert original.is_empty
        assert [str(s) for s in updated.runtime] == ["a/b"]

    def test_order_preserved(self):
        sel = Selection().add_runtime("c/c").add_runtime("a/a").add_dev("b/b")
        assert [s.name for s in sel.all()] == ["c/c", "a/a", "b/b"]

    def test_duplicate_ignored(self):
        sel = Selection().add_runtime("a/b:^1").add_runtime("a/b:^2")
        assert [str(s) for s in sel.runtime] == ["a/b:^1"]

    def test_lists_stay_disjoint(self):
        sel = Selection().add_runtime("a/b").add_dev("a/b")
        assert sel.dev == ()
        sel = Selection().add_dev("x/y").add_runtime("x/y:^1")
        assert sel.runtime == ()

    def test_blank_ignored(self):
        assert Selection().add_runtime("   ").is_empty

    def test_contains(self):
        sel = Selection().add_runtime("filament/filament:^4.0")
        assert "filament/filament" in sel
        assert PackageSpecifier.parse("filament/filament") in sel
        assert "moonshine/moonshine" not in sel

    def test_to_dict(self):
        sel = Selection().add_runtime("a/a:^1").add_dev("b/b")
        assert sel.to_dict() == {"runtime": ["a/a:^1"], "dev": ["b/b"]}


class TestReceipt:
    def test_success(self):
        r = Receipt.success(adapter="shell", action_id="x", output="done")
        assert r.ok and not r.failed
        assert r.output == "done"

    def test_failure(self):
        r = Receipt.failure(adapter="shell", action_id="x", error="boom")
        assert r.failed and not r.ok
        assert r.error == "boom"

    def test_skip(self):
        r = Receipt.skip(adapter="shell", action_id="x", reason="dry")
        assert r.status == "skipped"
        assert not r.ok and not r.failed


class TestAction:
    def test_command_line(self):
        action = Action(id="a", argv=["composer", "require", "a/b"])
        assert action.command_line == "composer require a/b"
        assert action.timeout == 600


class TestSetupSettings:
    def test_defaults(self):
        s = SetupSettings()
        assert s.composer == "composer"
        assert s.php == "php"
        assert s.timeout == 600
        assert s.with_all_dependencies is True
        assert s.no_interaction is False
        assert s.post_install is True
        assert s.env_file == ".env"
        assert s.env_template == ".env.example"

    def test_timeout_must_be_positive(self):
        with pytest.raises(ValidationError):
            SetupSettings(timeout=0)
