"""Tests for checkout payload validation."""

import pytest
from storefront.errors import (
    INVALID_ADDRESS_MESSAGE,
    INVALID_ITEMS_MESSAGE,
    INVALID_USER_ID_MESSAGE,
    InvalidOrder,
)
from storefront.order.validation import (
    product_id_of,
    quantity_of,
    validate_address,
    validate_order_items,
    validate_user_id,
)


class TestValidateAddress:
    def test_camel_case_keys(self, address):
        result = validate_address(address)
        assert result.first_name == "Ada"
        assert result.zip_code == "12345"
        assert result.phone_number == "701234567"

    def test_snake_case_keys(self):
        result = validate_address(
            {
                "first_name": "Ada",
                "last_name": "Lovelace",
                "email": "ada@example.com",
                "street": "12 Analytical Way",
                "city": "London",
                "zip_code": "12345",
                "phone_number": "+44 70 123 4567",
            }
        )
        assert result.city == "London"

    @pytest.mark.parametrize("missing", ["firstName", "lastName", "email", "street", "city", "zipCode", "phoneNumber"])
    def test_missing_field_rejected(self, address, missing):
        del address[missing]
        with pytest.raises(InvalidOrder) as exc:
            validate_address(address)
        assert exc.value.message == INVALID_ADDRESS_MESSAGE
        assert exc.value.status_code == 400

    def test_blank_name_rejected(self, address):
        address["firstName"] = "   "
        with pytest.raises(InvalidOrder):
            validate_address(address)

    def test_bad_email_rejected(self, address):
        address["email"] = "not-an-email"
        with pytest.raises(InvalidOrder):
            validate_address(address)

    def test_non_dict_rejected(self):
        with pytest.raises(InvalidOrder):
            validate_address("12 Analytical Way, London")


class TestValidateOrderItems:
    def test_normalizes_items(self):
        items = validate_order_items([{"_id": "p1", "quantity": 2, "price": 10}])
        assert items == [{"product_id": "p1", "quantity": 2, "price": 10.0}]

    def test_product_id_alias(self):
        items = validate_order_items([{"product_id": "p1", "quantity": 1, "price": 1.5}])
        assert items[0]["product_id"] == "p1"

    @pytest.mark.parametrize(
        "items",
        [
            [],
            None,
            {"_id": "p1"},
            [{"quantity": 1, "price": 1}],
            [{"_id": "p1", "quantity": 0, "price": 1}],
            [{"_id": "p1", "quantity": 1.5, "price": 1}],
            [{"_id": "p1", "quantity": "2", "price": 1}],
            [{"_id": "p1", "quantity": 1, "price": -1}],
            [{"_id": "p1", "quantity": 1, "price": float("inf")}],
            [{"_id": "p1", "quantity": 1, "price": float("nan")}],
            [{"_id": "p1", "quantity": 1}],
            ["p1"],
        ],
    )
    def test_invalid_items_rejected(self, items):
        with pytest.raises(InvalidOrder) as exc:
            validate_order_items(items)
        assert exc.value.message == INVALID_ITEMS_MESSAGE


class TestValidateUserId:
    def test_valid(self):
        assert validate_user_id("user-001") == "user-001"

    @pytest.mark.parametrize("user_id", [None, "", 42, "user 001", "x" * 65])
    def test_invalid(self, user_id):
        with pytest.raises(InvalidOrder) as exc:
            validate_user_id(user_id)
        assert exc.value.message == INVALID_USER_ID_MESSAGE


class TestLineReferences:
    def test_product_id_of(self):
        assert product_id_of({"_id": "p1"}) == "p1"
        assert product_id_of({"_id": ""}) is None
        assert product_id_of("p1") is None

    def test_quantity_of_ignores_booleans(self):
        assert quantity_of({"quantity": 3}) == 3
        assert quantity_of({"quantity": True}) is None
