"""
Tests for the pending add-stadium draft.
"""

import pytest

from core.domain.models import Arena, StadiumCreate
from core.services.stadium_form import StadiumForm, missing_fields


FENWAY_ARENA = Arena(team="Boston Red Sox", city="Boston, MA", league="MLB",
                     division="American League East", lat=42.3467, lng=-71.0972)


class TestStadiumForm:
    def test_apply_arena_copies_fields(self):
        form = StadiumForm(name="old").apply_arena(FENWAY_ARENA)

        assert form.name == "Boston Red Sox"
        assert form.city == "Boston, MA"
        assert form.sport == "MLB"
        assert (form.lat, form.lng) == (42.3467, -71.0972)

    def test_with_field_strips(self):
        form = StadiumForm().with_field("city", "  Chicago, IL ")
        assert form.city == "Chicago, IL"

    def test_with_field_keeps_other_fields(self):
        form = StadiumForm().apply_arena(FENWAY_ARENA).with_field("name", "Fenway Park")
        assert form.name == "Fenway Park"
        assert form.lat == 42.3467

    def test_with_unknown_field(self):
        with pytest.raises(ValueError):
            StadiumForm().with_field("lat", "1.0")

    def test_validate_requires_all_fields(self):
        ok, error = StadiumForm(name="Fenway Park", city="Boston").validate_fields()
        assert not ok
        assert error == "Please fill in all fields"

    def test_validate_whitespace_only(self):
        ok, _ = StadiumForm(name="Fenway", city="   ", sport="Baseball").validate_fields()
        assert not ok

    def test_validate_too_long(self):
        ok, error = StadiumForm(name="x" * 101, city="Boston", sport="Baseball").validate_fields()
        assert not ok
        assert error.startswith("Name")

    def test_validate_ok(self):
        assert StadiumForm(name="Fenway", city="Boston", sport="Baseball").validate_fields() == (True, "")

    def test_to_create_marks_visited(self):
        draft = StadiumForm().apply_arena(FENWAY_ARENA).to_create()

        assert isinstance(draft, StadiumCreate)
        assert draft.visited is True
        assert draft.name == "Boston Red Sox"

    def test_round_trips_through_fsm_data(self):
        form = StadiumForm().apply_arena(FENWAY_ARENA)
        assert StadiumForm(**form.model_dump()) == form


class TestMissingFields:
    def test_lists_blank_fields(self):
        draft = StadiumCreate(name="Fenway", city="", sport=" ")
        assert missing_fields(draft) == ["city", "sport"]

    def test_none_missing(self):
        assert missing_fields(StadiumCreate(name="a", city="b", sport="c")) == []
