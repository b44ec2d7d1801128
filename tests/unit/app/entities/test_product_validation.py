"""Tests for the product field rules and request shapes."""

import pytest
from pydantic import ValidationError

from src.catalog.core.exceptions import FieldViolation, ProductValidationError
from src.catalog.entities.service.product import (
    ProductCategory,
    ProductCreate,
    ProductInventoryStatus,
    ProductPatch,
)
from src.catalog.entities.service.product.validation import (
    ensure_valid,
    validate_product_create,
    validate_product_patch,
)


def fields_of(violations: list[FieldViolation]) -> dict[str, str]:
    return ProductValidationError(violations).as_dict()


class TestCreateRules:
    def test_valid_body_passes(self, widget_payload):
        assert validate_product_create(ProductCreate.model_validate(widget_payload)) == []

    def test_empty_body_reports_every_required_field(self):
        errors = fields_of(validate_product_create(ProductCreate()))

        assert errors == {
            "code": "Product code is required",
            "name": "Product name is required",
            "description": "Description is required",
            "price": "Price is required",
            "quantity": "Quantity is required",
            "inventoryStatus": "Inventory Status is required",
            "category": "Category is required",
        }

    def test_null_counts_as_missing(self, widget_payload):
        widget_payload["description"] = None

        errors = fields_of(
            validate_product_create(ProductCreate.model_validate(widget_payload))
        )

        assert errors == {"description": "Description is required"}

    @pytest.mark.parametrize("name", ["", "   "])
    def test_blank_name(self, widget_payload, name):
        widget_payload["name"] = name

        errors = fields_of(
            validate_product_create(ProductCreate.model_validate(widget_payload))
        )

        assert errors == {"name": "Product name is required"}

    @pytest.mark.parametrize("price", [0, -1])
    def test_price_must_be_positive(self, widget_payload, price):
        widget_payload["price"] = price

        errors = fields_of(
            validate_product_create(ProductCreate.model_validate(widget_payload))
        )

        assert errors == {"price": "Price must be greater than 0"}

    def test_quantity_zero_is_allowed(self, widget_payload):
        widget_payload["quantity"] = 0

        assert validate_product_create(ProductCreate.model_validate(widget_payload)) == []

    def test_negative_quantity(self, widget_payload):
        widget_payload["quantity"] = -1

        errors = fields_of(
            validate_product_create(ProductCreate.model_validate(widget_payload))
        )

        assert errors == {"quantity": "Quantity must be greater or equal to 0"}

    @pytest.mark.parametrize("rating,ok", [(0, True), (5, True), (-0.1, False), (5.1, False)])
    def test_rating_bounds(self, widget_payload, rating, ok):
        widget_payload["rating"] = rating

        violations = validate_product_create(ProductCreate.model_validate(widget_payload))

        if ok:
            assert violations == []
        else:
            assert fields_of(violations) == {"rating": "Rating must be between 0 and 5"}


class TestPatchRules:
    def test_empty_patch_passes(self):
        assert validate_product_patch(ProductPatch()) == []

    def test_only_supplied_fields_are_checked(self):
        assert validate_product_patch(ProductPatch(quantity=3)) == []

    def test_supplied_fields_must_satisfy_constraints(self):
        errors = fields_of(validate_product_patch(ProductPatch(price=0, name=" ")))

        assert errors == {
            "name": "Product name is required",
            "price": "Price must be greater than 0",
        }


class TestEnsureValid:
    def test_no_violations(self):
        ensure_valid([])

    def test_raises_with_violations(self):
        violations = [FieldViolation("price", "Price must be greater than 0")]

        with pytest.raises(ProductValidationError) as exc_info:
            ensure_valid(violations)

        assert exc_info.value.as_dict() == {"price": "Price must be greater than 0"}

    def test_first_violation_per_field_wins(self):
        error = ProductValidationError(
            [FieldViolation("name", "first"), FieldViolation("name", "second")]
        )

        assert error.as_dict() == {"name": "first"}


class TestPayloadShapes:
    def test_camel_case_and_snake_case_are_accepted(self):
        camel = ProductPatch.model_validate({"inventoryStatus": "LOWSTOCK"})
        snake = ProductPatch.model_validate({"inventory_status": "LOWSTOCK"})

        assert camel.inventory_status is ProductInventoryStatus.LOWSTOCK
        assert snake.inventory_status is ProductInventoryStatus.LOWSTOCK

    def test_unknown_fields_are_ignored(self):
        patch = ProductPatch.model_validate({"id": 42, "name": "New"})

        assert patch.model_dump(exclude_none=True) == {"name": "New"}

    def test_unknown_enum_literal_is_rejected(self):
        with pytest.raises(ValidationError):
            ProductCreate.model_validate({"category": "BOGUS"})

    def test_to_entity(self, widget_payload):
        product = ProductCreate.model_validate(widget_payload).to_entity()

        assert product.id is None
        assert product.category is ProductCategory.CLOTHING
        assert product.image is None


@pytest.mark.parametrize(
    "body",
    [
        {"price": float("inf")},
        {"price": float("nan")},
        {"rating": float("-inf")},
        {"price": True},
        {"quantity": False},
        {"quantity": "5"},
    ],
)
def test_numbers_are_not_coerced(body):
    with pytest.raises(ValidationError):
        ProductPatch.model_validate(body)
