"""Bundled modification catalogs."""
