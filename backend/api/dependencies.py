"""Shared dependencies for API routes."""

from services.scoring.catalog import RequirementCatalog, get_catalog


def get_requirement_catalog() -> RequirementCatalog:
    return get_catalog()
