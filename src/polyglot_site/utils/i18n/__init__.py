"""gettext catalog compilation tooling."""
