"""
Selection collector — asks which optional packages to install.

Each step takes the selection so far and returns an updated copy; the
steps run in a fixed order and nothing here touches the outside world
beyond the prompter.
"""

from __future__ import annotations

import logging
from functools import reduce
from typing import Callable, Sequence

from kitsetup.core.data.catalog import (
    ADMIN_PANEL_DEFAULT,
    ADMIN_PANEL_OPTIONS,
    API_DOCS_PACKAGE,
    API_HELPER_DEFAULT,
    API_HELPER_OPTIONS,
    DEV_ONLY,
    EXTRA_OPTIONS,
)
from kitsetup.core.models.package import PackageSpecifier, Selection
from kitsetup.core.services.prompting import Prompter

logger = logging.getLogger(__name__)

Step = Callable[[Selection, Prompter], Selection]


def ask_admin_panel(selection: Selection, prompter: Prompter) -> Selection:
    if not prompter.confirm("Will this app use an Admin Panel?", default=True):
        prompter.note("⚠️ Skipping Admin Panel installation.")
        return selection

    choice = prompter.select(
        "Which Admin Panel would you like to install?",
        ADMIN_PANEL_OPTIONS,
        default=ADMIN_PANEL_DEFAULT,
    )
    return selection.add_runtime(choice)


def ask_api_support(selection: Selection, prompter: Prompter) -> Selection:
    """API gate: the docs package goes in first, then one helper package."""
    if not prompter.confirm("Will this app be used as an API?", default=False):
        prompter.note("⚠️ Skipping API support installation.")
        return selection

    prompter.info("API support: installing Swagger UI (L5 Swagger) for documentation.")
    selection = selection.add_runtime(API_DOCS_PACKAGE)

    choice = prompter.select(
        "Which additional API helper package would you like to install?",
        API_HELPER_OPTIONS,
        default=API_HELPER_DEFAULT,
    )
    return selection.add_runtime(choice)


def ask_extras(selection: Selection, prompter: Prompter) -> Selection:
    chosen = prompter.multiselect("Select additional features to install", EXTRA_OPTIONS)

    for raw in chosen:
        spec = PackageSpecifier.parse(raw)
        if spec.package in DEV_ONLY:
            selection = selection.add_dev(spec)
        else:
            selection = selection.add_runtime(spec)

    return selection


STEPS: tuple[Step, ...] = (ask_admin_panel, ask_api_support, ask_extras)


def collect_selection(
    prompter: Prompter,
    steps: Sequence[Step] = STEPS,
    initial: Selection | None = None,
) -> Selection:
    """Run every step in order and return the final selection."""
    selection = reduce(lambda acc, step: step(acc, prompter), steps, initial or Selection())
    logger.info(
        "Selected %d runtime and %d dev package(s)",
        len(selection.runtime),
        len(selection.dev),
    )
    return selection
