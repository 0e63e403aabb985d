"""Orders and order modification requests."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from .enums import OrderId, OrderType, Price, Quantity, Side


class OrderError(Exception):
    """Raised when an order is asked to do something it cannot."""


@dataclass(eq=False)
class Order:
    """A single order; compared by identity, as the book shares it."""

    order_type: OrderType
    order_id: OrderId
    side: Side
    price: Price
    initial_quantity: Quantity
    remaining_quantity: Quantity = field(init=False)

    def __post_init__(self) -> None:
        self.remaining_quantity = self.initial_quantity

    @classmethod
    def market(cls, order_id: OrderId, side: Side, quantity: Quantity) -> Order:
        """Create a market order, which has no price until it is placed."""
        return cls(OrderType.MARKET, order_id, side, math.nan, quantity)

    @property
    def filled_quantity(self) -> Quantity:
        return self.initial_quantity - self.remaining_quantity

    @property
    def is_filled(self) -> bool:
        return self.remaining_quantity == 0

    def fill(self, quantity: Quantity) -> None:
        """Reduce the remaining quantity by ``quantity``."""
        if quantity > self.remaining_quantity:
            raise OrderError(
                f"Order ({self.order_id}) cannot be filled for more than remaining quantity."
            )
        self.remaining_quantity -= quantity

    def to_good_till_cancel(self, price: Price) -> None:
        """Give a market order a price and turn it into a good-till-cancel order."""
        if self.order_type is not OrderType.MARKET:
            raise OrderError(f"Order ({self.order_id}) cannot have price adjusted.")
        if not math.isfinite(price):
            raise OrderError(f"Order ({self.order_id}) price must be tradable.")
        self.price = price
        self.order_type = OrderType.GOOD_TILL_CANCEL


@dataclass(frozen=True)
class OrderModify:
    """A request to replace an existing order with new terms."""

    order_id: OrderId
    side: Side
    price: Price
    quantity: Quantity

    def to_order(self, order_type: OrderType) -> Order:
        return Order(order_type, self.order_id, self.side, self.price, self.quantity)