"""
Casing pipe catalog with manufacturer-certified ratings.

Read-only collaborator of the calculation core: it supplies geometry,
grade and rated values, and is never mutated.
"""

from casingcalc.catalog.models import CatalogPipe, Manufacturer
from casingcalc.catalog.data import GOST_CASINGS, RUSSIAN_PIPES
from casingcalc.catalog.lookup import (
    find_by_specs,
    find_by_diameter,
    find_by_params,
    by_manufacturer,
    manufacturers,
    available_diameters,
    available_grades,
)

__all__ = [
    "CatalogPipe",
    "Manufacturer",
    "RUSSIAN_PIPES",
    "GOST_CASINGS",
    "find_by_specs",
    "find_by_diameter",
    "find_by_params",
    "by_manufacturer",
    "manufacturers",
    "available_diameters",
    "available_grades",
]
