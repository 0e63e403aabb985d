import io
import random

import pytest

from orderbookdemo.enums import OrderType, Side
from orderbookdemo.order import Order
from orderbookdemo.orderbook import LevelInfo, Orderbook
from orderbookdemo.terminal import Terminal, main


def make_terminal(text="", orderbook=None, seed=1):
    out = io.StringIO()
    terminal = Terminal(
        orderbook=orderbook,
        stdin=io.StringIO(text),
        stdout=out,
        rng=random.Random(seed),
        clear_command=None,
    )
    return terminal, out


def test_populate_orderbook_crossing_level_trades_away():
    terminal, _ = make_terminal()
    terminal.populate_orderbook()
    infos = terminal.orderbook.level_infos()
    assert [level.price for level in infos.bids] == [float(100 - i) for i in range(1, 10)]
    assert [level.price for level in infos.asks] == [float(100 + i) for i in range(1, 10)]
    assert terminal.next_order_id == 21
    assert len(terminal.orderbook) == 18


def test_populate_orderbook_quantities_in_range():
    terminal, _ = make_terminal(seed=7)
    terminal.populate_orderbook()
    infos = terminal.orderbook.level_infos()
    for i, level in enumerate(infos.bids, start=1):
        assert 10 <= level.quantity <= 10 + i * 5
    for i, level in enumerate(infos.asks, start=1):
        assert 10 <= level.quantity <= 10 + i * 5


def test_menu_selection_reads_number():
    terminal, out = make_terminal("4\n")
    assert terminal.menu_selection() == 4
    assert "=== MAIN MENU ===" in out.getvalue()


def test_menu_selection_rejects_non_numeric():
    terminal, out = make_terminal("abc more\n3\n")
    assert terminal.menu_selection() == 3
    assert out.getvalue().count("Invalid input. Please enter a number.") == 1


def test_menu_selection_raises_at_end_of_input():
    terminal, _ = make_terminal("")
    with pytest.raises(EOFError):
        terminal.menu_selection()


def test_place_good_till_cancel_order():
    terminal, _ = make_terminal("2\n1\n50\n5\n")
    trades = terminal.place_order()
    assert trades == []
    assert 1 in terminal.orderbook
    assert terminal.next_order_id == 2
    order = terminal.personal_orders[1]
    assert order.side is Side.BUY
    assert order.price == 50.0
    assert order.initial_quantity == 5


def test_place_order_ignores_unknown_type_choice():
    terminal, _ = make_terminal("9\n2\n2\n60\n3\n")
    terminal.place_order()
    order = terminal.personal_orders[1]
    assert order.order_type is OrderType.GOOD_TILL_CANCEL
    assert order.side is Side.SELL


def test_place_market_order_into_empty_book_does_not_rest():
    terminal, _ = make_terminal("1\n1\n5\n")
    trades = terminal.place_order()
    assert trades == []
    assert 1 not in terminal.orderbook
    assert terminal.personal_orders[1].order_type is OrderType.MARKET


def test_place_crossing_order_trades():
    book = Orderbook()
    book.add_order(Order(OrderType.GOOD_TILL_CANCEL, 100, Side.SELL, 100.0, 10))
    terminal, _ = make_terminal("2\n1\n100\n4\n", orderbook=book)
    trades = terminal.place_order()
    assert len(trades) == 1
    assert trades[0].bid_trade.order_id == 1
    assert trades[0].ask_trade.order_id == 100
    assert trades[0].bid_trade.quantity == 4
    assert terminal.personal_orders[1].is_filled
    assert book.level_infos().asks == (LevelInfo(100.0, 6),)


def test_cancel_order_removes_from_book_and_personal():
    terminal, _ = make_terminal("2\n1\n50\n5\n1\n")
    terminal.place_order()
    terminal.cancel_order()
    assert 1 not in terminal.orderbook
    assert terminal.personal_orders == {}


def test_cancel_unknown_order_changes_nothing():
    terminal, _ = make_terminal("2\n1\n50\n5\n42\n")
    terminal.place_order()
    terminal.cancel_order()
    assert 1 in terminal.orderbook
    assert list(terminal.personal_orders) == [1]


def test_modify_order_replaces_terms():
    terminal, _ = make_terminal("2\n1\n50\n5\n1\n2\n60\n3\n")
    terminal.place_order()
    trades = terminal.modify_order()
    assert trades == []
    infos = terminal.orderbook.level_infos()
    assert infos.bids == ()
    assert infos.asks == (LevelInfo(60.0, 3),)
    order = terminal.personal_orders[1]
    assert order.side is Side.SELL
    assert order.order_type is OrderType.GOOD_TILL_CANCEL


def test_modify_unknown_order_returns_no_trades():
    terminal, _ = make_terminal("2\n1\n50\n5\n8\n")
    terminal.place_order()
    assert terminal.modify_order() == []
    assert terminal.personal_orders[1].price == 50.0


def test_print_orderbook_shows_spread_and_levels():
    book = Orderbook()
    book.add_order(Order(OrderType.GOOD_TILL_CANCEL, 1, Side.BUY, 99.0, 30))
    book.add_order(Order(OrderType.GOOD_TILL_CANCEL, 2, Side.SELL, 101.0, 20))
    terminal, out = make_terminal(orderbook=book)
    terminal.print_orderbook()
    text = out.getvalue()
    assert "[Spread: $2.00]" in text
    assert "###" in text
    assert text.index("101.00") < text.index("99.00")


def test_print_personal_orders_lists_each_order():
    terminal, out = make_terminal("2\n2\n75\n5\n")
    terminal.place_order()
    terminal.print_personal_orders()
    text = out.getvalue()
    assert "SELL" in text
    assert "false" in text
    assert " 75 |" in text


def test_print_trades_format():
    book = Orderbook()
    book.add_order(Order(OrderType.GOOD_TILL_CANCEL, 1, Side.SELL, 100.0, 4))
    trades = book.add_order(Order(OrderType.GOOD_TILL_CANCEL, 2, Side.BUY, 100.0, 4))
    terminal, out = make_terminal()
    terminal.print_trades(trades)
    text = out.getvalue()
    assert "Order[2] -- [4/4 filled @ $100]" in text
    assert "Order[1] -- [4/4 filled @ $100]" in text


def test_run_exits_on_seven():
    terminal, out = make_terminal("7\n")
    assert terminal.run() == 0
    assert len(terminal.orderbook) == 18
    assert "Orderbook Demo" in out.getvalue()


def test_run_toggles_trades_and_reports_unknown_selection():
    terminal, out = make_terminal("5\n9\n7\n")
    assert terminal.run() == 0
    text = out.getvalue()
    assert terminal.show_trades is True
    assert "Selection not found" in text
    assert "\nTrades\n" in text


def test_run_ends_at_end_of_input():
    terminal, _ = make_terminal("6\n")
    assert terminal.run() == 0
    assert terminal.show_orders is True


def test_main_runs_session(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("7\n"))
    assert main(["--no-clear", "--seed", "3"]) == 0
    assert "MAIN MENU" in capsys.readouterr().out