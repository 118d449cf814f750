"""Domain Catcher - watches domain names and registers them once they become free."""

__version__ = "0.1.0"
