"""Product API: create/list products backed by MongoDB."""

__version__ = "0.1.0"
