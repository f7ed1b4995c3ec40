import dataclasses

import pytest

from exdrill.drills.structs import (
    ColorClassic,
    ColorTuple,
    Package,
    UnitLike,
    create_order_template,
)


def test_classic_structs():
    green = ColorClassic(red=0, green=255, blue=0)
    assert green.red == 0
    assert green.green == 255
    assert green.blue == 0


def test_tuple_structs():
    green = ColorTuple(0, 255, 0)
    assert green[0] == 0
    assert green[1] == 255
    assert green[2] == 0


def test_unit_structs():
    message = f"{UnitLike()!r}s are fun!"
    assert message == "UnitLikes are fun!"
    assert UnitLike() == UnitLike()


def test_your_order():
    template = create_order_template()
    your_order = dataclasses.replace(template, name="Hacker in Python", count=1)
    assert your_order.name == "Hacker in Python"
    assert your_order.year == template.year
    assert your_order.made_by_phone == template.made_by_phone
    assert your_order.made_by_mobile == template.made_by_mobile
    assert your_order.made_by_email == template.made_by_email
    assert your_order.item_number == template.item_number
    assert your_order.count == 1


def test_template_values():
    template = create_order_template()
    assert template.name == "Bob"
    assert template.year == 2019
    assert template.made_by_email is True
    assert template.item_number == 123
    assert template.count == 0


def test_fail_creating_weightless_package():
    with pytest.raises(ValueError, match="weightless"):
        Package("Spain", "Austria", -2210)


def test_fail_creating_zero_weight_package():
    with pytest.raises(ValueError):
        Package("Spain", "Austria", 0)


def test_create_international_package():
    package = Package("Spain", "Russia", 1200)
    assert package.is_international() is True


def test_create_local_package():
    package = Package("Canada", "Canada", 1200)
    assert package.is_international() is False


def test_calculate_transport_fees():
    package = Package("Spain", "Spain", 1500)
    assert package.get_fees(3) == 4500