from decimal import Decimal

import pytest
from pydantic import ValidationError

from quickbite.core.exceptions import collect_field_errors
from quickbite.schemas.menu_item import MenuItemCreate, MenuItemUpdate


def _payload(**overrides) -> dict:
    data = {"name": "Caesar Salad", "price": 8.99, "category": "Appetizer"}
    data.update(overrides)
    return data


def test_create_applies_boundary_defaults():
    item = MenuItemCreate(**_payload())

    assert item.description == ""
    assert item.dietary_tag == "None"
    assert item.price == Decimal("8.99")


def test_update_accepts_camel_case_alias():
    item = MenuItemUpdate(**_payload(dietaryTag="Vegan"))

    assert item.dietary_tag == "Vegan"


@pytest.mark.parametrize(
    "overrides, field, message",
    [
        ({"name": "   "}, "name", "Name is required"),
        ({"category": "\t"}, "category", "Category is required"),
    ],
)
def test_whitespace_only_required_text_is_rejected(overrides, field, message):
    with pytest.raises(ValidationError) as exc_info:
        MenuItemCreate(**_payload(**overrides))

    errors = collect_field_errors(exc_info.value.errors())
    assert [e.field for e in errors] == [field]
    assert message in errors[0].message


def test_surrounding_whitespace_is_kept_for_the_service_to_trim():
    item = MenuItemCreate(**_payload(name="  Caesar Salad "))

    assert item.name == "  Caesar Salad "


@pytest.mark.parametrize("price", [0, 0.001, 999.991, 1000, -0.01])
def test_price_outside_range_or_precision_is_rejected(price):
    with pytest.raises(ValidationError):
        MenuItemCreate(**_payload(price=price))


def test_collect_field_errors_strips_request_section():
    errors = [
        {"loc": ("body", "price"), "msg": "Input should be greater than or equal to 0.01"},
        {"loc": ("path", "menu_item_id"), "msg": "Input should be a valid integer"},
        {"loc": ("body", "items", 0, "name"), "msg": "Field required"},
    ]

    field_errors = collect_field_errors(errors)

    assert [(e.field, e.message) for e in field_errors] == [
        ("price", "Input should be greater than or equal to 0.01"),
        ("menu_item_id", "Input should be a valid integer"),
        ("items.0.name", "Field required"),
    ]


def test_collect_field_errors_reports_whole_body_errors():
    field_errors = collect_field_errors([{"loc": ("body",), "msg": "Field required"}])

    assert field_errors[0].field == "body"


def test_collect_field_errors_from_schema_validation():
    with pytest.raises(ValidationError) as exc_info:
        MenuItemCreate(name="", price=0, category="")

    fields = {e.field for e in collect_field_errors(exc_info.value.errors())}
    assert fields == {"name", "price", "category"}
