"""Locale settings and translation catalogs."""
