"""Pal storage core: catalogs, validation, store mutation, schema reconciliation."""
