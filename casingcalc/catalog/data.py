"""
Casing pipes from Russian mill catalogs (OTTM, BTS, TMK).

RUSSIAN_PIPES is the mill range by size; GOST_CASINGS is the GOST R 51753
weight table, looked up by diameter and linear weight.

Static reference data; the container is a tuple and the rows are frozen.
"""

from casingcalc.catalog.models import CatalogPipe, Manufacturer
from casingcalc.models.inputs import SteelGrade

_OTTM = Manufacturer.OTTM
_BTS = Manufacturer.BTS
_TMK = Manufacturer.TMK

_D = SteelGrade.GOST_D
_E = SteelGrade.GOST_E
_K = SteelGrade.GOST_K
_L = SteelGrade.GOST_L


def _pipe(manufacturer, od, wt, grade, weight, id_, yield_, tensile, connection,
          collapse, burst, tension, drift) -> CatalogPipe:
    return CatalogPipe(
        manufacturer=manufacturer,
        outer_diameter_mm=od,
        wall_thickness_mm=wt,
        grade=grade,
        weight_kg_m=weight,
        inner_diameter_mm=id_,
        yield_strength_mpa=yield_,
        tensile_strength_mpa=tensile,
        connection=connection,
        rated_collapse_mpa=collapse,
        rated_burst_mpa=burst,
        rated_tension_kn=tension,
        drift_mm=drift,
    )


# Columns: mill, OD mm, WT mm, grade, kg/m, ID mm, yield MPa, tensile MPa,
# connection, collapse MPa, burst MPa, tension kN, drift mm
RUSSIAN_PIPES: tuple[CatalogPipe, ...] = (
    # OTTM
    _pipe(_OTTM, 114.3, 6.35, _D, 17.05, 101.6, 379, 517, "ОТТМ-Buttress", 19.3, 44.8, 645, 96.8),
    _pipe(_OTTM, 127.0, 7.72, _D, 23.2, 111.56, 379, 517, "ОТТМ-Buttress", 21.4, 46.5, 880, 106.4),
    _pipe(_OTTM, 139.7, 7.72, _D, 25.5, 124.26, 379, 517, "ОТТМ-Buttress", 17.9, 42.4, 965, 119.1),
    _pipe(_OTTM, 168.3, 8.94, _E, 35.7, 150.42, 517, 655, "ОТТМ-Premium", 22.1, 56.2, 1850, 145.4),
    _pipe(_OTTM, 177.8, 10.36, _E, 43.5, 157.08, 517, 655, "ОТТМ-Premium", 27.6, 60.5, 2250, 151.4),
    # BTS
    _pipe(_BTS, 114.3, 6.35, _D, 17.0, 101.6, 379, 517, "БТС-Buttress", 19.5, 45.0, 640, 96.8),
    _pipe(_BTS, 127.0, 9.19, _K, 27.4, 108.62, 655, 758, "БТС-Premium", 38.6, 82.1, 1800, 103.2),
    _pipe(_BTS, 139.7, 10.54, _K, 34.7, 118.62, 655, 758, "БТС-Premium", 42.8, 87.4, 2275, 113.0),
    _pipe(_BTS, 168.3, 10.59, _E, 42.2, 147.12, 517, 655, "БТС-Buttress", 28.6, 66.7, 2185, 141.3),
    _pipe(_BTS, 177.8, 11.51, _K, 48.3, 154.78, 655, 758, "БТС-Premium", 43.1, 92.1, 3165, 148.8),
    # TMK
    _pipe(_TMK, 114.3, 6.35, _D, 17.1, 101.6, 379, 517, "TMK-Premium", 19.7, 45.5, 650, 96.8),
    _pipe(_TMK, 127.0, 7.72, _E, 23.3, 111.56, 517, 655, "TMK-Premium", 29.2, 63.5, 1205, 106.4),
    _pipe(_TMK, 139.7, 9.17, _K, 30.2, 121.36, 655, 758, "TMK-Ultra", 37.9, 82.7, 1980, 115.9),
    _pipe(_TMK, 168.3, 9.52, _E, 37.9, 149.26, 517, 655, "TMK-Premium", 24.1, 58.9, 1960, 143.8),
    _pipe(_TMK, 177.8, 10.36, _K, 43.6, 157.08, 655, 758, "TMK-Ultra", 36.8, 85.9, 2850, 151.4),
    _pipe(_TMK, 219.1, 10.16, _E, 52.6, 198.78, 517, 655, "TMK-Premium", 17.6, 48.3, 2700, 193.7),
    _pipe(_TMK, 244.5, 11.99, _K, 69.4, 220.52, 655, 758, "TMK-Ultra", 24.8, 66.2, 4545, 214.9),
    _pipe(_TMK, 273.1, 12.19, _D, 78.8, 248.72, 379, 517, "TMK-Buttress", 11.4, 36.4, 2960, 243.8),
    # Large diameters
    _pipe(_OTTM, 219.1, 12.7, _K, 65.9, 193.7, 655, 758, "ОТТМ-Ultra", 31.7, 75.9, 4315, 187.7),
    _pipe(_OTTM, 244.5, 10.03, _E, 58.0, 224.44, 517, 655, "ОТТМ-Premium", 15.2, 42.6, 2995, 219.1),
    _pipe(_BTS, 219.1, 10.16, _D, 52.7, 198.78, 379, 517, "БТС-Buttress", 13.0, 35.4, 1995, 193.7),
    _pipe(_BTS, 244.5, 13.84, _K, 80.1, 216.82, 655, 758, "БТС-Ultra", 31.0, 74.3, 5555, 210.3),
    _pipe(_BTS, 273.1, 13.06, _E, 84.4, 246.98, 517, 655, "БТС-Premium", 15.5, 48.9, 4365, 241.3),
)

# Minimum yield / tensile for the GOST weight table, by grade (MPa)
_STRENGTHS = {_D: (379, 517), _E: (517, 655), _K: (655, 758), _L: (758, 862)}


def _gost(manufacturer, od, weight, wt, id_, grade, connection, drift, collapse, burst, tension) -> CatalogPipe:
    yield_, tensile = _STRENGTHS[grade]
    return _pipe(manufacturer, od, wt, grade, weight, id_, yield_, tensile, connection,
                 collapse, burst, tension, drift)


# Columns: mill, OD mm, kg/m, WT mm, ID mm, grade, connection, drift mm,
# collapse MPa, burst MPa, tension kN
GOST_CASINGS: tuple[CatalogPipe, ...] = (
    # 177.8 mm (7in)
    _gost(_OTTM, 177.8, 29.5, 7.52, 162.76, _D, "ОТТМ-Buttress", 156.2, 26.3, 41.8, 1587),
    _gost(_OTTM, 177.8, 35.3, 9.19, 159.42, _K, "ОТТМ-Buttress", 153.9, 34.6, 54.2, 2072),
    _gost(_OTTM, 177.8, 38.7, 10.16, 157.48, _E, "ОТТМ-Premium", 152.0, 41.2, 64.8, 2587),
    _gost(_BTS, 177.8, 29.5, 7.52, 162.76, _D, "БТС-Premium", 156.2, 27.1, 42.5, 1620),
    _gost(_BTS, 177.8, 35.3, 9.19, 159.42, _K, "БТС-Premium", 153.9, 35.8, 55.6, 2145),
    _gost(_BTS, 177.8, 42.1, 11.51, 154.78, _E, "БТС-Ultra", 149.4, 48.9, 78.3, 3124),
    _gost(_TMK, 177.8, 29.5, 7.52, 162.76, _D, "ТМК UP-Premium", 156.2, 26.8, 42.1, 1605),
    _gost(_TMK, 177.8, 35.3, 9.19, 159.42, _K, "ТМК-Premium", 153.9, 35.2, 54.9, 2108),
    _gost(_TMK, 177.8, 38.7, 10.16, 157.48, _L, "ТМК-Ultra", 152.0, 43.5, 68.7, 2856),
    # 244.5 mm (9-5/8in)
    _gost(_OTTM, 244.5, 53.5, 10.03, 224.44, _D, "ОТТМ-Buttress", 218.7, 20.8, 32.4, 2145),
    _gost(_OTTM, 244.5, 60.3, 11.43, 221.64, _K, "ОТТМ-Premium", 216.1, 25.6, 39.8, 2687),
    _gost(_OTTM, 244.5, 73.2, 13.84, 216.82, _E, "ОТТМ-Premium", 211.3, 34.2, 53.6, 3658),
    _gost(_BTS, 244.5, 53.5, 10.03, 224.44, _D, "БТС-Premium", 218.7, 21.4, 33.1, 2178),
    _gost(_BTS, 244.5, 60.3, 11.43, 221.64, _K, "БТС-Premium", 216.1, 26.5, 41.2, 2789),
    _gost(_BTS, 244.5, 73.2, 13.84, 216.82, _L, "БТС-Ultra", 211.3, 37.8, 59.4, 4256),
    _gost(_TMK, 244.5, 53.5, 10.03, 224.44, _D, "ТМК UP-Premium", 218.7, 21.1, 32.8, 2162),
    _gost(_TMK, 244.5, 60.3, 11.43, 221.64, _K, "ТМК-Premium", 216.1, 26.0, 40.3, 2738),
    _gost(_TMK, 244.5, 67.5, 12.7, 219.1, _E, "ТМК-Ultra", 213.6, 31.5, 49.2, 3412),
    # 298.5 mm (11-3/4in)
    _gost(_OTTM, 298.5, 74.2, 11.13, 276.24, _D, "ОТТМ-Buttress", 270.5, 16.8, 29.4, 2456),
    _gost(_OTTM, 298.5, 83.5, 12.57, 273.36, _K, "ОТТМ-Premium", 267.7, 20.7, 35.8, 3124),
    _gost(_BTS, 298.5, 74.2, 11.13, 276.24, _D, "БТС-Premium", 270.5, 17.3, 30.1, 2512),
    _gost(_BTS, 298.5, 83.5, 12.57, 273.36, _E, "БТС-Ultra", 267.7, 22.8, 39.5, 3658),
    _gost(_TMK, 298.5, 74.2, 11.13, 276.24, _D, "ТМК UP-Premium", 270.5, 17.0, 29.7, 2484),
    _gost(_TMK, 298.5, 83.5, 12.57, 273.36, _K, "ТМК-Premium", 267.7, 21.2, 36.8, 3287),
)
