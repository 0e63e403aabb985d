"""A price-time priority limit order book."""

from __future__ import annotations

import time
from dataclasses import dataclass

from sortedcontainers import SortedDict

from .enums import OrderId, OrderType, Price, Quantity, Side
from .order import Order, OrderModify
from .trade import Trade, TradeInfo

# A price level: orders keyed by id, kept in arrival order.
_Level = dict


@dataclass(frozen=True)
class LevelInfo:
    """Aggregated remaining quantity at one price."""

    price: Price
    quantity: Quantity


@dataclass(frozen=True)
class OrderbookLevelInfos:
    """Snapshot of the book: bids best first, asks best first."""

    bids: tuple[LevelInfo, ...]
    asks: tuple[LevelInfo, ...]


class Orderbook:
    """Matches incoming orders against resting ones by price, then time."""

    def __init__(self) -> None:
        # Both keyed by ascending price: best bid is last, best ask is first.
        self._bids: SortedDict = SortedDict()
        self._asks: SortedDict = SortedDict()
        self._orders: dict[OrderId, Order] = {}

    def __len__(self) -> int:
        return len(self._orders)

    def __contains__(self, order_id: object) -> bool:
        return order_id in self._orders

    def _side_levels(self, side: Side) -> SortedDict:
        return self._bids if side is Side.BUY else self._asks

    def add_order(self, order: Order) -> list[Trade]:
        """Place an order and return the trades it caused."""
        if order.order_id in self._orders:
            return []

        if order.order_type is OrderType.MARKET:
            if order.side is Side.BUY and self._asks:
                worst_ask, _ = self._asks.peekitem(-1)
                order.to_good_till_cancel(worst_ask)
            elif order.side is Side.SELL and self._bids:
                worst_bid, _ = self._bids.peekitem(0)
                order.to_good_till_cancel(worst_bid)
            else:
                return []

        levels = self._side_levels(order.side)
        levels.setdefault(order.price, _Level())[order.order_id] = order
        self._orders[order.order_id] = order
        return self._match_orders()

    def cancel_order(self, order_id: OrderId) -> None:
        """Remove a resting order; unknown ids are ignored."""
        order = self._orders.pop(order_id, None)
        if order is None:
            return
        levels = self._side_levels(order.side)
        level = levels[order.price]
        del level[order_id]
        if not level:
            del levels[order.price]

    def modify_order(self, modify: OrderModify) -> list[Trade]:
        """Replace a resting order with new terms, keeping its type."""
        existing = self._orders.get(modify.order_id)
        if existing is None:
            return []
        order_type = existing.order_type
        self.cancel_order(modify.order_id)
        return self.add_order(modify.to_order(order_type))

    def _match_orders(self) -> list[Trade]:
        trades: list[Trade] = []
        while self._bids and self._asks:
            bid_price, bids = self._bids.peekitem(-1)
            ask_price, asks = self._asks.peekitem(0)
            if bid_price < ask_price:
                break

            while bids and asks:
                start = time.perf_counter_ns()
                bid = next(iter(bids.values()))
                ask = next(iter(asks.values()))

                # The order that was resting first sets the price.
                trade_price = ask.price if bid.order_id > ask.order_id else bid.price
                trade_quantity = min(bid.remaining_quantity, ask.remaining_quantity)

                bid.fill(trade_quantity)
                ask.fill(trade_quantity)
                elapsed = time.perf_counter_ns() - start

                trades.append(
                    Trade(
                        TradeInfo(bid.order_id, trade_price, trade_quantity,
                                  bid.initial_quantity, elapsed),
                        TradeInfo(ask.order_id, trade_price, trade_quantity,
                                  ask.initial_quantity, elapsed),
                    )
                )

                if bid.is_filled:
                    del bids[bid.order_id]
                    del self._orders[bid.order_id]
                if ask.is_filled:
                    del asks[ask.order_id]
                    del self._orders[ask.order_id]

            if not bids:
                del self._bids[bid_price]
            if not asks:
                del self._asks[ask_price]

        return trades

    def level_infos(self) -> OrderbookLevelInfos:
        """Aggregate remaining quantity per price level."""

        def info(price: Price, level: _Level) -> LevelInfo:
            return LevelInfo(price, sum(o.remaining_quantity for o in level.values()))

        bids = tuple(info(price, level) for price, level in reversed(self._bids.items()))
        asks = tuple(info(price, level) for price, level in self._asks.items())
        return OrderbookLevelInfos(bids, asks)