import dataclasses

import pytest

from rustlings.solutions.structs import (
    ColorClassicStruct,
    ColorTupleStruct,
    Package,
    UnitLikeStruct,
    create_order_template,
)


def test_classic_c_structs():
    green = ColorClassicStruct(red=0, green=255, blue=0)
    assert green.red == 0
    assert green.green == 255
    assert green.blue == 0


def test_tuple_structs():
    green = ColorTupleStruct(0, 255, 0)
    assert green[0] == 0
    assert green[1] == 255
    assert green[2] == 0


def test_unit_structs():
    unit_like_struct = UnitLikeStruct()
    message = f"{unit_like_struct!r}s are fun!"
    assert message == "UnitLikeStructs are fun!"


def test_your_order():
    order_template = create_order_template()
    your_order = dataclasses.replace(order_template, name="Hacker in Rust", count=1)
    assert your_order.name == "Hacker in Rust"
    assert your_order.year == order_template.year
    assert your_order.made_by_phone == order_template.made_by_phone
    assert your_order.made_by_mobile == order_template.made_by_mobile
    assert your_order.made_by_email == order_template.made_by_email
    assert your_order.item_number == order_template.item_number
    assert your_order.count == 1


def test_order_template_values():
    template = create_order_template()
    assert (template.name, template.year, template.item_number, template.count) == (
        "Bob",
        2019,
        123,
        0,
    )
    assert template.made_by_email is True


def test_fail_creating_weightless_package():
    with pytest.raises(ValueError):
        Package("Spain", "Austria", 5)


def test_create_international_package():
    package = Package("Spain", "Russia", 1200)
    assert package.is_international() is True


def test_create_local_package():
    package = Package("Canada", "Canada", 1200)
    assert package.is_international() is False


def test_calculate_transport_fees():
    cents_per_gram = 3
    package = Package("Spain", "Spain", 1500)
    assert package.get_fees(cents_per_gram) == 4500
    assert package.get_fees(cents_per_gram * 2) == 9000