import pytest

from penguinroom.clothes import Clothes
from penguinroom.constants import ClothingType

WEARABLE = [
    ClothingType.HEAD,
    ClothingType.FACE,
    ClothingType.NECK,
    ClothingType.BODY,
    ClothingType.HAND,
    ClothingType.FEET,
    ClothingType.PIN,
    ClothingType.BACKGROUND,
]


@pytest.mark.parametrize("slot", WEARABLE)
def test_new_clothes_are_empty(slot):
    assert Clothes().item_for(slot) == 0


@pytest.mark.parametrize("slot", WEARABLE)
def test_wear_round_trip(slot):
    clothes = Clothes()
    assert clothes.wear(slot, 403) == 403
    assert clothes.item_for(slot) == 403


def test_slots_are_independent():
    clothes = Clothes()
    clothes.wear(ClothingType.HEAD, 403)
    clothes.wear(ClothingType.PIN, 106)
    assert clothes.item_for(ClothingType.PIN) == 106
    assert clothes.item_for(ClothingType.HEAD) == 403
    assert clothes.item_for(ClothingType.BACKGROUND) == 0


def test_wear_accepts_plain_int_slot():
    clothes = Clothes()
    clothes.wear(int(ClothingType.FEET), 212)
    assert clothes.feet == 212


def test_ids_wrap_to_sixteen_bits():
    clothes = Clothes()
    assert clothes.wear(ClothingType.HEAD, 32768) == -32768
    assert clothes.item_for(ClothingType.HEAD) == -32768


@pytest.mark.parametrize("slot", [ClothingType.COLOR, ClothingType.AWARD, 99])
def test_unknown_slot_raises(slot):
    with pytest.raises(ValueError):
        Clothes().wear(slot, 1)
    with pytest.raises(ValueError):
        Clothes().item_for(slot)