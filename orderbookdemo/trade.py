"""Records of matched trades."""

from dataclasses import dataclass

from .enums import OrderId, Price, Quantity


@dataclass(frozen=True)
class TradeInfo:
    """One side of a trade."""

    order_id: OrderId
    price: Price
    quantity: Quantity
    initial_quantity: Quantity
    match_engine_time: int  # nanoseconds spent matching this trade


@dataclass(frozen=True)
class Trade:
    """A match between a bid and an ask."""

    bid_trade: TradeInfo
    ask_trade: TradeInfo