"""
Domain models — Pydantic types for the setup command.

All models are re-exported here for convenient access:

    from kitsetup.core.models import Action, Receipt, Package, Selection
"""

from kitsetup.core.models.action import Action, Receipt
from kitsetup.core.models.package import Package, PackageSpecifier, Selection
from kitsetup.core.models.settings import SetupSettings

__all__ = [
    # action.py
    "Action",
    "Receipt",
    # package.py
    "Package",
    "PackageSpecifier",
    "Selection",
    # settings.py
    "SetupSettings",
]
