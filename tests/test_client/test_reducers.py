"""
Tests for the pure client-side reducers and projections.
"""

from datetime import datetime, timedelta, timezone

import pytest

from pinmap.client.reducers import (
    append,
    filtered_pins,
    remove_by_id,
    replace_by_id,
    selected_pin,
    sort_pins,
)
from pinmap.schemas.pin import PinResponse

T0 = datetime(2024, 3, 1, tzinfo=timezone.utc)


def make_pin(pin_id: str, title: str, main_tag: str, supporting=(), age_days: int = 0) -> PinResponse:
    created = T0 - timedelta(days=age_days)
    return PinResponse(
        id=pin_id,
        title=title,
        position=(52.0, 19.0),
        main_tag=main_tag,
        supporting_tags=list(supporting),
        content=[],
        created_at=created,
        updated_at=created,
    )


@pytest.fixture
def pins() -> list[PinResponse]:
    return [
        make_pin("a", "Park", "environment", ["health"], age_days=2),
        make_pin("b", "clinic", "health", age_days=1),
        make_pin("c", "Library", "education", ["culture"], age_days=3),
    ]


def test_append_returns_new_list(pins):
    extra = make_pin("d", "Bridge", "infrastructure")

    result = append(pins, extra)

    assert [pin.id for pin in result] == ["a", "b", "c", "d"]
    assert len(pins) == 3


def test_replace_by_id_keeps_position(pins):
    renamed = pins[1].model_copy(update={"title": "Clinic"})

    result = replace_by_id(pins, renamed)

    assert [pin.id for pin in result] == ["a", "b", "c"]
    assert result[1].title == "Clinic"
    assert pins[1].title == "clinic"


def test_replace_by_id_unknown_is_noop(pins):
    result = replace_by_id(pins, make_pin("zzz", "Ghost", "culture"))

    assert result == pins


def test_remove_by_id(pins):
    assert [pin.id for pin in remove_by_id(pins, "b")] == ["a", "c"]
    assert remove_by_id(pins, "missing") == pins


def test_filtered_pins_empty_filter_matches_all(pins):
    assert filtered_pins(pins, frozenset()) == pins


def test_filtered_pins_matches_main_or_supporting(pins):
    result = filtered_pins(pins, {"health"})

    assert [pin.id for pin in result] == ["a", "b"]


def test_filtered_pins_any_of_several_tags(pins):
    result = filtered_pins(pins, {"culture", "infrastructure"})

    assert [pin.id for pin in result] == ["c"]


def test_selected_pin(pins):
    assert selected_pin(pins, "c").title == "Library"
    assert selected_pin(pins, None) is None
    assert selected_pin(pins, "gone") is None


def test_sort_pins_by_title_ignores_case(pins):
    assert [pin.title for pin in sort_pins(pins, "title")] == ["clinic", "Library", "Park"]


def test_sort_pins_by_created_at_descending(pins):
    assert [pin.id for pin in sort_pins(pins, "createdAt", descending=True)] == ["b", "a", "c"]


def test_sort_pins_unknown_field(pins):
    with pytest.raises(ValueError):
        sort_pins(pins, "position")
