# petplace/models/test_models.py
from datetime import date, datetime, timezone

import pytest

from petplace.models.pet import Pet, PetGender, PetSize
from petplace.models.place import Place


def test_pet_from_dict_converts_stored_strings():
    pet = Pet.from_dict({
        'pet_id': 'p1', 'user_id': 'u1', 'name': '보리',
        'gender': 'MALE', 'size': 'BIG',
        'birth_date': datetime(2021, 3, 4, tzinfo=timezone.utc),
        'age': None,
    })
    assert pet.gender is PetGender.MALE
    assert pet.size is PetSize.BIG
    assert pet.birth_date == date(2021, 3, 4)
    assert pet.age == 0


def test_pet_from_dict_unknown_gender_falls_back_to_unknown():
    pet = Pet.from_dict({'pet_id': 'p1', 'user_id': 'u1', 'name': '보리', 'gender': 'NEUTERED', 'size': 'SMALL'})
    assert pet.gender is PetGender.UNKNOWN


def test_pet_from_dict_rejects_unknown_size():
    with pytest.raises(ValueError):
        Pet.from_dict({'pet_id': 'p1', 'user_id': 'u1', 'name': '보리', 'gender': 'MALE', 'size': 'HUGE'})


def test_pet_update_info_replaces_everything_but_owner():
    pet = Pet('p1', 'u1', '보리', PetGender.MALE, PetSize.BIG, date(2020, 1, 1), 4, 20.5, '산책 좋아함', '진돗개', None)
    pet.update_info('콩', PetGender.FEMALE, PetSize.SMALL, None, 1, None, None, None, None)

    assert pet.to_dict() == {
        'pet_id': 'p1', 'user_id': 'u1', 'name': '콩', 'gender': 'FEMALE', 'size': 'SMALL',
        'birth_date': None, 'age': 1, 'weight': None, 'special_notes': None, 'breed': None, 'photo_url': None,
    }


def test_place_avg_rating():
    assert Place('x', 'n', 'a').avg_rating == 0.0
    assert Place('x', 'n', 'a', review_count=3, rating_sum=13).avg_rating == 4.3


def test_place_from_dict_ignores_unknown_keys():
    place = Place.from_dict({'place_id': 'x', 'name': 'n', 'address': 'a', 'photos': None, 'legacy_field': 1})
    assert place.photos == []
    assert place.review_count == 0
