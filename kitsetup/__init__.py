"""Interactive setup command for the Laravel starter kit."""

__version__ = "0.1.0"
