"""
Static data for the setup command.

Everything here is read-only and defined once at import time; see
``kitsetup.core.data.catalog``.
"""
