"""
Pure functions over collection snapshots.

Reducers return a new list and never mutate their inputs; projections
are recomputed from the current snapshot on every call.
"""

from collections.abc import Collection, Sequence
from typing import Protocol, TypeVar

from pinmap.schemas.pin import PinResponse


class HasId(Protocol):
    id: str


T = TypeVar("T", bound=HasId)

SORT_KEYS = {
    "title": lambda pin: pin.title.casefold(),
    "mainTag": lambda pin: pin.main_tag.casefold(),
    "createdAt": lambda pin: pin.created_at,
    "updatedAt": lambda pin: pin.updated_at,
}


def append(items: Sequence[T], item: T) -> list[T]:
    return [*items, item]


def replace_by_id(items: Sequence[T], item: T) -> list[T]:
    return [item if existing.id == item.id else existing for existing in items]


def remove_by_id(items: Sequence[T], item_id: str) -> list[T]:
    return [existing for existing in items if existing.id != item_id]


def filtered_pins(pins: Sequence[PinResponse], filter_tags: Collection[str]) -> list[PinResponse]:
    """
    Pins matching the active tag filter.

    An empty filter matches everything. Otherwise a pin matches when its
    main tag is in the filter or any supporting tag is.
    """
    if not filter_tags:
        return list(pins)

    wanted = set(filter_tags)
    return [
        pin
        for pin in pins
        if pin.main_tag in wanted or not wanted.isdisjoint(pin.supporting_tags)
    ]


def selected_pin(pins: Sequence[PinResponse], selected_id: str | None) -> PinResponse | None:
    if selected_id is None:
        return None
    return next((pin for pin in pins if pin.id == selected_id), None)


def sort_pins(pins: Sequence[PinResponse], field: str, descending: bool = False) -> list[PinResponse]:
    """
    Order pins for the list view.

    Raises:
        ValueError: If ``field`` is not one of the sortable fields
    """
    try:
        key = SORT_KEYS[field]
    except KeyError:
        raise ValueError(f"Cannot sort pins by {field!r}") from None
    return sorted(pins, key=key, reverse=descending)
