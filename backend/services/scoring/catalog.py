"""Immutable requirement catalog built once from ``catalog_data``."""

import logging

from pydantic import TypeAdapter

from models.schemas.requirement_spec import RequirementSpec, VisaDefinition
from services.scoring.catalog_data import (
    CATALOG_VERSION,
    DEFAULT_DESCRIPTION,
    DEFAULT_PASSING_SCORE,
    DEFAULT_REQUIREMENTS,
    VISA_TABLE,
)

logger = logging.getLogger(__name__)

_requirements_adapter = TypeAdapter(tuple[RequirementSpec, ...])


def _key(name: str) -> str:
    return " ".join(name.split()).casefold()


class RequirementCatalog:
    """Read-only mapping of (country, visa type) to ``VisaDefinition``.

    Lookups try the canonical name first, then a whitespace-trimmed,
    case-insensitive match.
    """

    def __init__(self, table: dict[str, dict[str, dict]], version: str = CATALOG_VERSION):
        self.version = version
        entries: dict[str, dict[str, VisaDefinition]] = {}
        for country, visas in table.items():
            entries[country] = {
                visa_type: VisaDefinition(country=country, visa_type=visa_type, **entry)
                for visa_type, entry in visas.items()
            }
        self._entries = entries
        self._country_keys = {_key(c): c for c in entries}
        self._visa_keys = {
            country: {_key(v): v for v in visas} for country, visas in entries.items()
        }
        logger.info(
            "Requirement catalog %s loaded: %d countries, %d visa types",
            version, len(entries), sum(len(v) for v in entries.values()),
        )

    def canonical_country(self, country: str) -> str | None:
        if country in self._entries:
            return country
        return self._country_keys.get(_key(country))

    def lookup(self, country: str, visa_type: str) -> VisaDefinition | None:
        canonical = self.canonical_country(country)
        if canonical is None:
            return None
        visas = self._entries[canonical]
        if visa_type in visas:
            return visas[visa_type]
        name = self._visa_keys[canonical].get(_key(visa_type))
        return visas[name] if name else None

    def list_countries(self) -> list[str]:
        return list(self._entries)

    def list_visa_types(self, country: str) -> list[str]:
        canonical = self.canonical_country(country)
        if canonical is None:
            return []
        return list(self._entries[canonical])

    def __len__(self) -> int:
        return sum(len(v) for v in self._entries.values())


def default_definition(country: str, visa_type: str) -> VisaDefinition:
    return VisaDefinition(
        country=country,
        visa_type=visa_type,
        description=DEFAULT_DESCRIPTION,
        requirements=_requirements_adapter.validate_python(DEFAULT_REQUIREMENTS),
        passing_score=DEFAULT_PASSING_SCORE,
    )


def resolve(
    definition: VisaDefinition | None, country: str, visa_type: str
) -> tuple[VisaDefinition, bool]:
    """Return the definition to score against and whether defaults were used.

    Builds a fresh default definition on a miss; the catalog itself is never
    modified.
    """
    if definition is not None:
        return definition, False
    return default_definition(country, visa_type), True


_catalog: RequirementCatalog | None = None


def get_catalog() -> RequirementCatalog:
    global _catalog
    if _catalog is None:
        _catalog = RequirementCatalog(VISA_TABLE)
    return _catalog
