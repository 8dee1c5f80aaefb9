"""Generate Go struct definitions from MySQL table metadata."""

__version__ = "0.1.0"
