import pytest
from pydantic import BaseModel, Field, ValidationError

from validation_kit import ValidationResult, validate_not_null
from validation_kit.pydantic import from_pydantic_error, validate_model

# --- Test Models ---


class Address(BaseModel):
    city: str = Field(..., min_length=2)


class Customer(BaseModel):
    name: str = Field(..., min_length=3)
    age: int = Field(..., gt=0)
    address: Address


# --- Tests ---


def test_validate_model_success() -> None:
    result = validate_model(
        Customer, {"name": "Alice", "age": 30, "address": {"city": "Berlin"}}
    )

    assert result.is_valid
    assert result.errors == ()


def test_validate_model_failure_lists_every_error() -> None:
    result = validate_model(Customer, {"name": "Al", "age": -5, "address": {"city": ""}})

    assert not result.is_valid
    assert len(result.errors) == 3
    assert result.errors[0].startswith("name ")
    assert result.errors[1].startswith("age ")
    assert result.errors[2].startswith("address.city ")


def test_from_pydantic_error() -> None:
    with pytest.raises(ValidationError) as exc_info:
        Customer.model_validate({"name": "Alice", "age": 3})

    result = from_pydantic_error(exc_info.value)

    assert result.errors == ("address Field required",)


def test_pydantic_results_merge_with_validators() -> None:
    result = ValidationResult.of(
        validate_not_null(None, "tenant"),
        validate_model(Customer, {"name": "Alice", "age": 0, "address": {"city": "Rome"}}),
    )

    assert result.errors[0] == "tenant should not be null"
    assert result.errors[1].startswith("age ")
