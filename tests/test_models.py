"""Unit tests for the product records and their wire mapping."""

import json

import pytest

from objetos.models import Product, ProductData, format_product


class TestWireMapping:
    def test_to_dict_uses_wire_names(self, laptop):
        assert laptop.to_dict() == {
            "name": "Laptop A",
            "data": {"year": 2022, "price": 999.99, "CPU model": "i7", "hard disk size": "512 GB"},
        }

    def test_uncreated_product_has_no_id_key(self, laptop):
        assert "id" not in laptop.to_dict()

    def test_partial_data_serializes_only_present_keys(self):
        assert ProductData(cpu_model="14-Core CPU").to_dict() == {"CPU model": "14-Core CPU"}

    def test_round_trip_through_json(self, laptop):
        laptop.id = "ff80818"
        back = Product.from_dict(json.loads(json.dumps(laptop.to_dict())))
        assert back == laptop

    def test_from_dict_ignores_key_casing(self, laptop):
        laptop.id = "7"
        shouted = {
            "ID": "7",
            "Name": "Laptop A",
            "DATA": {"Year": 2022, "PRICE": 999.99, "cpu MODEL": "i7", "Hard disk size": "512 GB"},
        }
        assert Product.from_dict(shouted) == laptop

    def test_from_dict_tolerates_missing_or_null_data(self):
        assert Product.from_dict({"id": "2", "name": "Phone", "data": None}).data is None
        assert Product.from_dict({"id": "2", "name": "Phone"}).data is None

    def test_from_dict_partial_attributes(self):
        p = Product.from_dict({"id": "3", "name": "Tablet", "data": {"color": "Blue", "price": "419"}})
        assert p.data == ProductData(price=419.0)

    def test_numeric_id_becomes_string(self):
        assert Product.from_dict({"id": 5, "name": "x"}).id == "5"


class TestFormatProduct:
    def test_prints_every_field(self, laptop):
        laptop.id = "abc"
        assert format_product(laptop).splitlines() == [
            "ID: abc",
            "Name: Laptop A",
            "Year: 2022",
            "Price: 999.99",
            "CPU: i7",
            "Disk: 512 GB",
        ]

    def test_missing_attributes_print_empty(self):
        lines = format_product(Product(id="2", name="Phone")).splitlines()
        assert lines[2:] == ["Year: ", "Price: ", "CPU: ", "Disk: "]

    def test_none_product_does_not_raise(self):
        assert format_product(None).startswith("ID: ")

    def test_whole_prices_have_no_trailing_zero(self):
        p = Product(name="x", data=ProductData(price=1099.0))
        assert "Price: 1099" in format_product(p).splitlines()


class TestNonFiniteValues:
    def test_overflowing_year_is_dropped(self):
        p = Product.from_dict({"name": "x", "data": {"year": float("inf"), "price": 10}})
        assert p.data == ProductData(price=10.0)

    def test_huge_integer_year_is_dropped(self):
        assert Product.from_dict({"name": "x", "data": {"year": 10**400}}).data.year is None

    @pytest.mark.parametrize("price", [float("nan"), float("inf"), "NaN", "-Infinity"])
    def test_non_finite_price_is_dropped(self, price):
        p = Product.from_dict({"name": "x", "data": {"price": price}})
        assert p.data.price is None
        json.dumps(p.to_dict(), allow_nan=False)
