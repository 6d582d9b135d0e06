"""Static SRD catalog and the validated store that serves it.

Exports:
    CatalogStore: Immutable, validated lookup tables.
    get_catalog: Get the bundled SRD catalog singleton.
    clear_catalog_cache: Force the catalog to be rebuilt.
    PreparedSpellFormula: Parsed prepared-spell formula.
"""

from __future__ import annotations

from dnd_creator.catalog.formula import PreparedSpellFormula
from dnd_creator.catalog.store import CatalogStore, clear_catalog_cache, get_catalog


__all__ = [
    "CatalogStore",
    "PreparedSpellFormula",
    "get_catalog",
    "clear_catalog_cache",
]
