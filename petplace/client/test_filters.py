# petplace/client/test_filters.py
import pytest

from petplace.client.filters import FilterDialog, FilterState


def test_double_toggle_restores_selection():
    dialog = FilterDialog(on_apply=lambda state: None)
    dialog.toggle_amenity("parking")
    before = list(dialog.selection.amenities)

    dialog.toggle_amenity("wifi")
    dialog.toggle_amenity("wifi")

    assert dialog.selection.amenities == before


def test_facets_are_independent():
    dialog = FilterDialog(on_apply=lambda state: None)
    dialog.toggle_amenity("outdoor")
    dialog.toggle_pet_size("SMALL")
    dialog.toggle_place_type("CAFE")

    assert dialog.selection == FilterState(amenities=["outdoor"], pet_sizes=["SMALL"], place_types=["CAFE"])
    assert dialog.is_selected('pet_sizes', "SMALL")
    assert not dialog.is_selected('amenities', "SMALL")


def test_apply_hands_snapshot_to_caller_and_closes():
    received = []
    dialog = FilterDialog(on_apply=received.append)
    dialog.open()
    dialog.toggle_pet_size("BIG")

    applied = dialog.apply()
    dialog.toggle_pet_size("MEDIUM")

    assert received == [applied]
    assert applied.pet_sizes == ["BIG"]
    assert applied.to_dict() == {"amenities": [], "petSizes": ["BIG"], "placeTypes": []}
    assert not dialog.is_open


def test_reset_clears_all_sets():
    dialog = FilterDialog(on_apply=lambda state: None)
    dialog.toggle_amenity("water")
    dialog.toggle_pet_size("SMALL")
    dialog.reset()
    assert dialog.selection == FilterState()


def test_open_starts_a_fresh_session():
    dialog = FilterDialog(on_apply=lambda state: None)
    dialog.toggle_amenity("grooming")
    dialog.open()
    assert dialog.selection == FilterState()


def test_unknown_facet_is_rejected():
    dialog = FilterDialog(on_apply=lambda state: None)
    with pytest.raises(ValueError):
        dialog.toggle('colors', 'red')
