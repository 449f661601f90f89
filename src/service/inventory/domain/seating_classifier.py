"""
Seating Classifier

An event is reserved-seating when any one of these signals is present:
1. explicit seating type `reserved` (event or venue)
2. layout type `seating_chart` (event or venue)
3. a layout reference (event or venue)
4. a venue section snapshot that carries row data

The signals are independent and none of them is authoritative, so a single
positive signal is enough.
"""

from typing import Any, Mapping

from src.service.inventory.domain.enum.inventory_enum import SeatingType


def _venue(document: Mapping[str, Any]) -> Mapping[str, Any]:
    venue = document.get('venue')
    return venue if isinstance(venue, Mapping) else {}


def has_reserved_flag(document: Mapping[str, Any]) -> bool:
    return 'reserved' in (document.get('seatingType'), _venue(document).get('seatingType'))


def has_seating_chart_layout_type(document: Mapping[str, Any]) -> bool:
    return 'seating_chart' in (document.get('layoutType'), _venue(document).get('layoutType'))


def has_layout_reference(document: Mapping[str, Any]) -> bool:
    return bool(document.get('layoutId') or _venue(document).get('layoutId'))


def has_sections_with_rows(document: Mapping[str, Any]) -> bool:
    sections = _venue(document).get('availableSections')
    if not isinstance(sections, list):
        return False
    return any(
        isinstance(section, Mapping)
        and isinstance(section.get('rows'), list)
        and len(section['rows']) > 0
        for section in sections
    )


def classify_seating(document: Mapping[str, Any]) -> SeatingType:
    if (
        has_reserved_flag(document)
        or has_seating_chart_layout_type(document)
        or has_layout_reference(document)
        or has_sections_with_rows(document)
    ):
        return SeatingType.RESERVED
    return SeatingType.GENERAL
