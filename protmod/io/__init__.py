"""Readers for modification catalogs."""

from .catalog import (
    CatalogEntry,
    iter_catalog_entries,
    parse_entry,
    register_catalog,
    register_entry,
)

__all__ = [
    "CatalogEntry",
    "iter_catalog_entries",
    "parse_entry",
    "register_catalog",
    "register_entry",
]
