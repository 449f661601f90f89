from typing import Any


def build_seat_id(*, section_id: Any, row: Any, seat_number: Any) -> str:
    """Seat ids are `{section}-{row}-{seat}` everywhere inventory is keyed by seat."""
    return f'{section_id}-{row}-{seat_number}'


def is_full_seat_id(value: Any) -> bool:
    return isinstance(value, str) and '-' in value
