import dataclasses

import pytest

from orderbookdemo.trade import Trade, TradeInfo


def make_trade():
    bid = TradeInfo(1, 100.0, 5, 10, 42)
    ask = TradeInfo(2, 100.0, 5, 5, 42)
    return Trade(bid, ask)


def test_trade_holds_both_sides():
    trade = make_trade()
    assert trade.bid_trade.order_id == 1
    assert trade.ask_trade.order_id == 2
    assert trade.bid_trade.initial_quantity == 10
    assert trade.ask_trade.match_engine_time == 42


def test_trade_equality_by_value():
    first = Trade(TradeInfo(1, 100.0, 5, 10, 42), TradeInfo(2, 100.0, 5, 5, 42))
    second = Trade(TradeInfo(1, 100.0, 5, 10, 42), TradeInfo(2, 100.0, 5, 5, 42))
    other = Trade(TradeInfo(1, 100.0, 4, 10, 42), TradeInfo(2, 100.0, 4, 5, 42))
    assert first == second
    assert (first == other) is False


def test_trade_info_is_immutable():
    info = TradeInfo(1, 100.0, 5, 10, 0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        info.quantity = 6  # type: ignore[misc]
    assert info.quantity == 5


def test_trade_is_immutable():
    trade = make_trade()
    with pytest.raises(dataclasses.FrozenInstanceError):
        trade.bid_trade = trade.ask_trade  # type: ignore[misc]
    assert trade.bid_trade.order_id == 1