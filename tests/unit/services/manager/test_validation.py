"""Tests for order input validation policy."""

import pytest

from orderflow.services.manager import OrderValidator, ValidationError


class TestPermissivePolicy:
    @pytest.mark.parametrize(
        "price,quantity,address,target",
        [
            (-1.0, 2, "1 Road", "inv.pdf"),
            (1.0, -2, "1 Road", "inv.pdf"),
            (1.0, 2, "", "inv.pdf"),
            (1.0, 2, "1 Road", ""),
        ],
    )
    def test_accepts_everything(self, price, quantity, address, target) -> None:
        OrderValidator().validate(price, quantity, address, target)


class TestStrictPolicy:
    def test_accepts_valid_input(self) -> None:
        OrderValidator("strict").validate(10.0, 2, "123 Main St", "order_123.pdf")

    def test_accepts_zero_amounts(self) -> None:
        OrderValidator("strict").validate(0.0, 0, "123 Main St", "order_123.pdf")

    def test_negative_price(self) -> None:
        with pytest.raises(ValidationError, match="Invalid price -1.0: must not be negative"):
            OrderValidator("strict").validate(-1.0, 2, "123 Main St", "order_123.pdf")

    def test_negative_quantity(self) -> None:
        with pytest.raises(ValidationError, match="Invalid quantity -3: must not be negative"):
            OrderValidator("strict").validate(1.0, -3, "123 Main St", "order_123.pdf")

    @pytest.mark.parametrize("address", ["", "   ", "\t"])
    def test_blank_address(self, address) -> None:
        with pytest.raises(ValidationError, match="address"):
            OrderValidator("strict").validate(1.0, 1, address, "order_123.pdf")

    def test_empty_invoice_target(self) -> None:
        with pytest.raises(ValidationError, match="invoice_target"):
            OrderValidator("strict").validate(1.0, 1, "123 Main St", "")

    def test_price_checked_first(self) -> None:
        with pytest.raises(ValidationError) as exc_info:
            OrderValidator("strict").validate(-1.0, -1, "", "")

        assert exc_info.value.field == "price"
        assert exc_info.value.value == -1.0

    def test_is_value_error(self) -> None:
        with pytest.raises(ValueError):
            OrderValidator("strict").validate(-1.0, 1, "a", "b")


def test_unknown_policy() -> None:
    with pytest.raises(ValueError, match="Unknown validation policy"):
        OrderValidator("lenient")  # type: ignore[arg-type]
