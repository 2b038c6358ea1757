"""Sheet-driven challenge importer for truinlag."""

__version__ = "0.1.0"
