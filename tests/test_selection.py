"""
Tests for the selection collector — gates, routing and ordering.
"""

import itertools

import pytest

from kitsetup.core.data.catalog import (
    ADMIN_PANEL_OPTIONS,
    API_HELPER_OPTIONS,
    EXTRA_OPTIONS,
)
from kitsetup.core.models.package import Selection
from kitsetup.core.services.selection import (
    ask_admin_panel,
    ask_api_support,
    ask_extras,
    collect_selection,
)

DECLINE_ALL = {
    "use an Admin Panel": False,
    "used as an API": False,
    "additional features": [],
}


def _names(specs) -> list[str]:
    return [str(s) for s in specs]


class TestAdminPanel:
    def test_declined_asks_nothing_else(self, scripted):
        prompter = scripted({"use an Admin Panel": False})
        sel = ask_admin_panel(Selection(), prompter)
        assert sel.is_empty
        assert prompter.asked == ["Will this app use an Admin Panel?"]
        assert "Skipping Admin Panel" in prompter.transcript

    def test_default_is_filament_v4(self, scripted):
        sel = ask_admin_panel(Selection(), scripted())
        assert _names(sel.runtime) == ["filament/filament:^4.0"]

    def test_moonshine(self, scripted):
        prompter = scripted({"Which Admin Panel": "moonshine/moonshine"})
        sel = ask_admin_panel(Selection(), prompter)
        assert _names(sel.runtime) == ["moonshine/moonshine"]


class TestApiSupport:
    def test_declined_by_default(self, scripted):
        prompter = scripted()
        sel = ask_api_support(Selection(), prompter)
        assert sel.is_empty
        assert len(prompter.asked) == 1

    def test_docs_package_then_helper(self, scripted):
        prompter = scripted({"used as an API": True, "API helper": "pepperfm/api-responder-for-laravel"})
        sel = ask_api_support(Selection(), prompter)
        assert _names(sel.runtime) == [
            "darkaonline/l5-swagger",
            "pepperfm/api-responder-for-laravel",
        ]
        assert "L5 Swagger" in prompter.transcript

    def test_helper_defaults_to_laravel_data(self, scripted):
        sel = ask_api_support(Selection(), scripted({"used as an API": True}))
        assert _names(sel.runtime) == ["darkaonline/l5-swagger", "spatie/laravel-data"]


class TestExtras:
    def test_ray_routes_to_dev(self, scripted):
        prompter = scripted({"additional features": list(EXTRA_OPTIONS)})
        sel = ask_extras(Selection(), prompter)
        assert _names(sel.dev) == ["spatie/laravel-ray"]
        assert _names(sel.runtime) == [
            "defstudio/telegraph",
            "spatie/laravel-medialibrary",
            "spatie/laravel-permission",
        ]

    def test_none_selected(self, scripted):
        assert ask_extras(Selection(), scripted()).is_empty


class TestCollectSelection:
    def test_admin_api_no_extras(self, scripted):
        """Admin panel A, API yes, DTO B, no extras → [A, l5-swagger, B], no dev."""
        prompter = scripted({
            "use an Admin Panel": True,
            "Which Admin Panel": "moonshine/moonshine",
            "used as an API": True,
            "API helper": "spatie/laravel-data",
            "additional features": [],
        })
        sel = collect_selection(prompter)
        assert _names(sel.runtime) == [
            "moonshine/moonshine",
            "darkaonline/l5-swagger",
            "spatie/laravel-data",
        ]
        assert sel.dev == ()

    def test_decline_everything(self, scripted):
        sel = collect_selection(scripted(DECLINE_ALL))
        assert sel.is_empty

    def test_declined_admin_gate_yields_no_admin_packages(self, scripted):
        prompter = scripted({**DECLINE_ALL, "additional features": list(EXTRA_OPTIONS)})
        sel = collect_selection(prompter)
        admin = {k.partition(":")[0] for k in ADMIN_PANEL_OPTIONS}
        assert not any(s.name in admin for s in sel.all())
        assert not any("Which Admin Panel" in q for q in prompter.asked)

    def test_steps_run_in_order(self, scripted):
        prompter = scripted(DECLINE_ALL)
        collect_selection(prompter)
        assert prompter.asked == [
            "Will this app use an Admin Panel?",
            "Will this app be used as an API?",
            "Select additional features to install",
        ]

    def test_custom_steps(self, scripted):
        sel = collect_selection(scripted(), steps=[lambda s, p: s.add_dev("acme/tool")])
        assert _names(sel.dev) == ["acme/tool"]

    @pytest.mark.parametrize(
        "admin,api,extras",
        list(itertools.product(
            [None, *ADMIN_PANEL_OPTIONS],
            [None, *API_HELPER_OPTIONS],
            [[], ["spatie/laravel-ray"], list(EXTRA_OPTIONS)],
        )),
    )
    def test_runtime_and_dev_never_overlap(self, scripted, admin, api, extras):
        prompter = scripted({
            "use an Admin Panel": admin is not None,
            "Which Admin Panel": admin,
            "used as an API": api is not None,
            "API helper": api,
            "additional features": extras,
        })
        sel = collect_selection(prompter)
        runtime = {s.name for s in sel.runtime}
        dev = {s.name for s in sel.dev}
        assert not runtime & dev
        assert len(runtime) == len(sel.runtime)
        if api is not None:
            names = [s.name for s in sel.runtime]
            docs = names.index("darkaonline/l5-swagger")
            assert names[docs + 1] == api
