"""
Steel grade lookup.

API 5CT grades H-40 through P-110 plus the GOST letter grades used by
Russian mills, mapped onto the nearest API yield. The strength table lives
with SteelGrade in casingcalc.models.inputs and is never modified at
runtime.
"""

from typing import Union

from casingcalc.models.inputs import SteelGrade


def get_grade(tag: Union[SteelGrade, str]) -> SteelGrade:
    """
    Resolve a grade tag.

    Accepts a SteelGrade, its value ("N-80", "Д") or a Latin GOST letter.

    Raises:
        UnknownEnumerationError: If the tag is not a known grade
    """
    return SteelGrade.from_tag(tag)


def list_grades() -> list[dict[str, object]]:
    """Grade table as plain rows, for display."""
    return [
        {
            "grade": grade.value,
            "yield_psi": grade.yield_psi,
            "tensile_psi": grade.tensile_psi,
            "yield_mpa": round(grade.yield_mpa, 1),
            "tensile_mpa": round(grade.tensile_mpa, 1),
        }
        for grade in SteelGrade
    ]
