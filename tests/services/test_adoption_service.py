"""Adoption service — one adoption per IP enforced in a single statement."""

import pytest

from petadoption.core.errors import AlreadyAdoptedError
from petadoption.models.pet import Pet
from petadoption.services.adoption import adopt_pet, has_adopted, unadopt_pet


async def test_adopt_records_name_and_ip(test_db):
    assert await adopt_pet(test_db, 2, "Ann", "1.2.3.4") is True

    pet = await test_db.get(Pet, 2)
    await test_db.refresh(pet)
    assert (pet.adopted_by, pet.adopter_ip) == ("Ann", "1.2.3.4")
    assert await has_adopted(test_db, "1.2.3.4") is True


async def test_second_adoption_from_same_ip_rejected(test_db):
    await adopt_pet(test_db, 1, "Ann", "1.2.3.4")
    with pytest.raises(AlreadyAdoptedError):
        await adopt_pet(test_db, 2, "Ann", "1.2.3.4")

    pet = await test_db.get(Pet, 2)
    await test_db.refresh(pet)
    assert pet.adopted_by is None


async def test_unknown_pet_is_not_adopted(test_db):
    assert await adopt_pet(test_db, 999, "Ann", "1.2.3.4") is False
    assert await has_adopted(test_db, "1.2.3.4") is False


async def test_unadopt_frees_ip(test_db):
    await adopt_pet(test_db, 1, "Ann", "1.2.3.4")
    assert await unadopt_pet(test_db, 1) == 1
    assert await has_adopted(test_db, "1.2.3.4") is False


async def test_unadopt_unknown_pet_returns_zero(test_db):
    assert await unadopt_pet(test_db, 999) == 0
