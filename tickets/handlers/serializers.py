"""Serializers translating between plain data and domain models.

Input serializers validate the catalog seed and purchase requests.
Output serializers render cart, checkout and purchase results.
"""

from decimal import Decimal

from rest_framework import serializers

from tickets.domain import (
    TICKET_KINDS,
    Capacity,
    DiscountPercent,
    Money,
    TicketType,
    TicketTypeId,
)


class TicketTypeSeedSerializer(serializers.Serializer):
    """Validates one row of catalog seed data."""

    id = serializers.IntegerField(min_value=1)
    label = serializers.CharField(max_length=100)
    base_price = serializers.DecimalField(
        max_digits=10, decimal_places=2, min_value=Decimal("0")
    )
    discount_percent = serializers.DecimalField(
        max_digits=5,
        decimal_places=2,
        min_value=Decimal("0"),
        max_value=Decimal("100"),
        default=Decimal("0"),
    )
    quantity = serializers.IntegerField(min_value=0)
    kind = serializers.ChoiceField(choices=sorted(TICKET_KINDS), default="standard")


def build_ticket_type(data: dict) -> TicketType:
    """Build a TicketType from validated seed data."""
    return TicketType(
        id=TicketTypeId(data["id"]),
        label=data["label"],
        base_price=Money(data["base_price"]),
        discount=DiscountPercent(data["discount_percent"]),
        quantity=Capacity(data["quantity"]),
        kind=TICKET_KINDS[data["kind"]],
    )


def parse_catalog(rows: list[dict]) -> list[TicketType]:
    """Validate seed rows and return ticket types in the same order.

    Raises:
        rest_framework.exceptions.ValidationError: If any row is invalid
            or two rows share an ID.
    """
    serializer = TicketTypeSeedSerializer(data=rows, many=True)
    serializer.is_valid(raise_exception=True)
    ids = [row["id"] for row in serializer.validated_data]
    if len(ids) != len(set(ids)):
        raise serializers.ValidationError({"id": "Ticket type IDs must be unique."})
    return [build_ticket_type(row) for row in serializer.validated_data]


class PurchaseRequestSerializer(serializers.Serializer):
    """Validates a request to buy one ticket."""

    ticket_type_id = serializers.IntegerField(min_value=1)
    discount_code = serializers.CharField(
        max_length=32, required=False, allow_blank=True, allow_null=True, default=None
    )


class PurchaseResultSerializer(serializers.Serializer):
    ticket_type_id = serializers.IntegerField(source="ticket_type_id.value")
    final_price = serializers.DecimalField(
        max_digits=10, decimal_places=2, source="final_price.amount"
    )
    remaining_quantity = serializers.IntegerField(source="remaining_quantity.value")


class CartItemSerializer(serializers.Serializer):
    ticket_type_id = serializers.IntegerField(source="ticket_type_id.value")
    label = serializers.CharField()
    price = serializers.DecimalField(
        max_digits=10, decimal_places=2, source="price.amount"
    )
    discount = serializers.DecimalField(
        max_digits=5, decimal_places=2, source="discount.value"
    )
    quantity = serializers.IntegerField()


class CheckoutReceiptSerializer(serializers.Serializer):
    items = CartItemSerializer(many=True)
    subtotal = serializers.DecimalField(
        max_digits=10, decimal_places=2, source="subtotal.amount"
    )
    savings = serializers.DecimalField(
        max_digits=10, decimal_places=2, source="savings.amount"
    )
    total = serializers.DecimalField(
        max_digits=10, decimal_places=2, source="total.amount"
    )
