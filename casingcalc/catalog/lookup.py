"""
Read-only lookups over the pipe catalog.

All lookups take the catalog as an optional argument so callers can pass
their own tuple of CatalogPipe. The default is the bundled mill range,
except find_by_params, which searches the GOST weight table.
Tolerances are strict: |a - b| < tol.
"""

from typing import Iterable, Optional, Union

from casingcalc.catalog.data import GOST_CASINGS, RUSSIAN_PIPES
from casingcalc.catalog.models import CatalogPipe, Manufacturer
from casingcalc.models.inputs import SteelGrade

SPECS_TOLERANCE_MM = 0.1
DIAMETER_TOLERANCE_MM = 0.5
WEIGHT_TOLERANCE_KG_M = 1.0


def find_by_specs(
    outer_diameter_mm: float,
    wall_thickness_mm: float,
    catalog: Iterable[CatalogPipe] = RUSSIAN_PIPES,
) -> Optional[CatalogPipe]:
    """First pipe matching OD and wall thickness within 0.1 mm, or None."""
    for pipe in catalog:
        if (abs(pipe.outer_diameter_mm - outer_diameter_mm) < SPECS_TOLERANCE_MM
                and abs(pipe.wall_thickness_mm - wall_thickness_mm) < SPECS_TOLERANCE_MM):
            return pipe
    return None


def find_by_diameter(
    outer_diameter_mm: float,
    catalog: Iterable[CatalogPipe] = RUSSIAN_PIPES,
) -> list[CatalogPipe]:
    """All pipes within 0.5 mm of an outer diameter."""
    return [
        pipe for pipe in catalog
        if abs(pipe.outer_diameter_mm - outer_diameter_mm) < DIAMETER_TOLERANCE_MM
    ]


def find_by_params(
    outer_diameter_mm: float,
    weight_kg_m: float,
    manufacturer: Optional[Union[Manufacturer, str]] = None,
    catalog: Iterable[CatalogPipe] = GOST_CASINGS,
) -> list[CatalogPipe]:
    """
    Pipes matching OD (0.5 mm) and linear weight (1.0 kg/m), optionally by mill.

    Searches the GOST weight table by default.
    """
    mill = Manufacturer.from_tag(manufacturer) if manufacturer is not None else None
    return [
        pipe for pipe in find_by_diameter(outer_diameter_mm, catalog)
        if abs(pipe.weight_kg_m - weight_kg_m) < WEIGHT_TOLERANCE_KG_M
        and (mill is None or pipe.manufacturer is mill)
    ]


def by_manufacturer(
    manufacturer: Union[Manufacturer, str],
    catalog: Iterable[CatalogPipe] = RUSSIAN_PIPES,
) -> list[CatalogPipe]:
    mill = Manufacturer.from_tag(manufacturer)
    return [pipe for pipe in catalog if pipe.manufacturer is mill]


def manufacturers(catalog: Iterable[CatalogPipe] = RUSSIAN_PIPES) -> list[Manufacturer]:
    """Mills present in the catalog, in first-seen order."""
    return list(dict.fromkeys(pipe.manufacturer for pipe in catalog))


def available_diameters(catalog: Iterable[CatalogPipe] = RUSSIAN_PIPES) -> list[float]:
    """Distinct outer diameters, ascending."""
    return sorted({pipe.outer_diameter_mm for pipe in catalog})


def available_grades(catalog: Iterable[CatalogPipe] = RUSSIAN_PIPES) -> list[SteelGrade]:
    """Distinct grades in first-seen order."""
    return list(dict.fromkeys(pipe.grade for pipe in catalog))
