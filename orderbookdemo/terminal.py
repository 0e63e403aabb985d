"""Interactive text front end for the order book."""

from __future__ import annotations

import argparse
import math
import os
import random
import subprocess
import sys
from collections import deque
from typing import Callable, TextIO, TypeVar

from .enums import OrderId, OrderType, Price, Quantity, Side
from .order import Order, OrderModify
from .orderbook import LevelInfo, Orderbook
from .trade import Trade, TradeInfo

T = TypeVar("T")

RED = "\033[1;31m"
GREEN = "\033[1;32m"
RESET = "\033[0m"

DEFAULT_CLEAR_COMMAND = "cls" if os.name == "nt" else "clear"

_INVALID_INPUT = "Invalid input. Please enter a number.\n"


def _format_number(value: float) -> str:
    """Shortest form of a number: whole values lose their fractional part."""
    if math.isnan(value):
        return "nan"
    if math.isinf(value):
        return "inf" if value > 0 else "-inf"
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


def _parse_int(token: str) -> int:
    return int(token)


def _parse_unsigned(token: str) -> int:
    value = int(token)
    if value < 0:
        raise ValueError(f"negative value: {token}")
    return value


def _parse_price(token: str) -> Price:
    value = float(token)
    if not math.isfinite(value):
        raise ValueError(f"not a finite price: {token}")
    return value


class Terminal:
    """Menu-driven session that places, modifies and cancels orders."""

    def __init__(
        self,
        orderbook: Orderbook | None = None,
        stdin: TextIO | None = None,
        stdout: TextIO | None = None,
        rng: random.Random | None = None,
        clear_command: str | None = DEFAULT_CLEAR_COMMAND,
    ) -> None:
        self.orderbook = orderbook if orderbook is not None else Orderbook()
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self._rng = rng if rng is not None else random.Random()
        self.clear_command = clear_command
        self.next_order_id: OrderId = 1
        self.personal_orders: dict[OrderId, Order] = {}
        self.trades: list[Trade] = []
        self.show_trades = False
        self.show_orders = False
        self._pending: deque[str] = deque()

    # ----- input -------------------------------------------------------

    def _write(self, text: str) -> None:
        self._out.write(text)

    def _read_token(self) -> str:
        while not self._pending:
            self._out.flush()
            line = self._in.readline()
            if not line:
                raise EOFError("input exhausted")
            self._pending.extend(line.split())
        return self._pending.popleft()

    def _read_value(self, parse: Callable[[str], T]) -> T | None:
        """Read one value; report bad input and return None."""
        token = self._read_token()
        try:
            return parse(token)
        except ValueError:
            self._pending.clear()
            self._write(_INVALID_INPUT)
            return None

    def _ask(self, header: str, prompt: str, parse: Callable[[str], T]) -> T:
        while True:
            self._write(f"\n=== {header} ===\n{prompt}")
            value = self._read_value(parse)
            if value is not None:
                return value

    def _choose(self, header: str, options: dict[int, T]) -> T:
        while True:
            self._write(f"\n=== {header} ===\n")
            for number, option in options.items():
                label = option.name.title().replace("_", "") if isinstance(option, (OrderType, Side)) else str(option)
                self._write(f"{number}. {label}\n")
            self._write(f"Enter your choice (1-{len(options)}): ")
            choice = self._read_value(_parse_int)
            if choice in options:
                return options[choice]

    def _get_order_type(self) -> OrderType:
        self.clear_screen()
        self.print_title()
        return self._choose(
            "ORDERTYPE", {1: OrderType.MARKET, 2: OrderType.GOOD_TILL_CANCEL}
        )

    def _get_side(self) -> Side:
        return self._choose("SIDE", {1: Side.BUY, 2: Side.SELL})

    def _get_price(self) -> Price:
        return self._ask("PRICE", "Enter your price: $", _parse_price)

    def _get_quantity(self) -> Quantity:
        return self._ask("Quantity", "Enter your quantity: ", _parse_unsigned)

    def _get_order_id(self) -> OrderId:
        return self._ask("Order ID", "Enter the Order ID: ", _parse_unsigned)

    # ----- screens -----------------------------------------------------

    def print_title(self) -> None:
        self._write("Orderbook Demo\n\n")

    def menu_selection(self) -> int:
        """Show the main menu and return the number entered."""
        while True:
            self._write(
                "\n=== MAIN MENU ===\n"
                "1. Add Order\n"
                "2. Cancel Order\n"
                "3. Modify Order\n"
                "4. Populate Orderbook\n"
                "5. Print Trades (Toggle)\n"
                "6. Print Orders (Toggle)\n"
                "7. Exit\n"
                "Enter your choice (1-7): "
            )
            choice = self._read_value(_parse_int)
            if choice is not None:
                return choice

    def print_trades(self, trades: list[Trade]) -> None:
        self._write("\nTrades\n" + "=" * 80 + "\n")
        for trade in trades:
            for info in (trade.bid_trade, trade.ask_trade):
                self._write(self._trade_line(info))
        self._write("=" * 80 + "\n")

    @staticmethod
    def _trade_line(info: TradeInfo) -> str:
        return (
            f"Order[{info.order_id}] -- [{info.quantity}/{info.initial_quantity} "
            f"filled @ ${_format_number(info.price)}] -- "
            f"[{info.match_engine_time}ns :matchEngineTime]\n"
        )

    @staticmethod
    def _level_line(info: LevelInfo, colour: str) -> str:
        bar = "#" * (info.quantity * 10 // 100)
        return f"{info.quantity:>10} |$ {info.price:>8.2f} | {colour}{bar}{RESET}\n"

    def print_orderbook(self) -> None:
        infos = self.orderbook.level_infos()
        spread = 0.0
        if infos.bids and infos.asks:
            spread = infos.asks[0].price - infos.bids[0].price

        self._write("Orderbook\n" + "=" * 40 + "\n")
        self._write(f"\n{'Amount':>10} |$ {'Price':>8} | {'Quantity':>10}\n")
        self._write("_" * 40 + "\n")
        self._write("\nAsks\n")
        for info in reversed(infos.asks):
            self._write(self._level_line(info, RED))
        self._write(f"\n[Spread: ${spread:.2f}]\n\n")
        for info in infos.bids:
            self._write(self._level_line(info, GREEN))
        self._write("Bids\n" + "=" * 40 + "\n")

    def print_personal_orders(self) -> None:
        self._write("\nOrders\n" + "=" * 85 + "\n")
        self._write(
            f"\n{'Order ID':>8} | {'Side':>6} |$ {'Price':>6} | {'IsFilled':>8} | "
            f"{'Initial Quantity':>20} | {'Remaining Quantity':>20}\n"
        )
        self._write("-" * 85 + "\n")
        for order_id, order in self.personal_orders.items():
            if order.side is Side.SELL:
                colour, side = RED, "SELL"
            else:
                colour, side = GREEN, "BUY"
            self._write(
                f"{order_id:>8} | {colour}{side:>6}{RESET} |$ "
                f"{_format_number(order.price):>6} | "
                f"{_format_bool(order.is_filled):>8} | "
                f"{order.initial_quantity:>20} | {order.remaining_quantity:>20}\n"
            )
        self._write("=" * 85 + "\n")

    def clear_screen(self) -> None:
        if self.clear_command:
            subprocess.run(self.clear_command, shell=True, check=False)

    # ----- actions -----------------------------------------------------

    def populate_orderbook(self) -> None:
        """Seed the book with ten bid and ten ask levels around 100."""
        starting_price = 100.0
        for i in range(10):
            for side, price in (
                (Side.BUY, starting_price - i),
                (Side.SELL, starting_price + i),
            ):
                quantity = self._rng.randint(10, 10 + i * 5)
                self.orderbook.add_order(
                    Order(OrderType.GOOD_TILL_CANCEL, self.next_order_id, side, price, quantity)
                )
                self.next_order_id += 1

    def place_order(self) -> list[Trade]:
        self._write("\n=== Place Order ===\n")
        order_type = self._get_order_type()
        order_id = self.next_order_id
        if order_type is OrderType.MARKET:
            order = Order.market(order_id, self._get_side(), self._get_quantity())
        else:
            side = self._get_side()
            price = self._get_price()
            quantity = self._get_quantity()
            order = Order(order_type, order_id, side, price, quantity)

        trades = self.orderbook.add_order(order)
        self.personal_orders.setdefault(order_id, order)
        self.next_order_id += 1
        self.clear_screen()
        return trades

    def modify_order(self) -> list[Trade]:
        self.print_personal_orders()
        self._write("\n=== Modify Order ===\n")
        order_id = self._get_order_id()
        existing = self.personal_orders.get(order_id)
        if existing is None:
            self.clear_screen()
            return []

        side = self._get_side()
        price = self._get_price()
        quantity = self._get_quantity()
        modify = OrderModify(order_id, side, price, quantity)

        trades = self.orderbook.modify_order(modify)
        self.personal_orders[order_id] = modify.to_order(existing.order_type)
        self.clear_screen()
        return trades

    def cancel_order(self) -> None:
        self.print_personal_orders()
        self._write("\n=== Cancel Order ===\n")
        order_id = self._get_order_id()
        if order_id not in self.personal_orders:
            self.clear_screen()
            return
        self.orderbook.cancel_order(order_id)
        del self.personal_orders[order_id]
        self.clear_screen()

    def run(self) -> int:
        """Main loop; returns the exit status."""
        self.populate_orderbook()
        self.clear_screen()
        try:
            while True:
                self.print_title()
                self.print_orderbook()
                if self.show_trades:
                    self.print_trades(self.trades)
                if self.show_orders:
                    self.print_personal_orders()

                choice = self.menu_selection()
                if choice == 1:
                    self.clear_screen()
                    self.trades = self.place_order()
                elif choice == 2:
                    self.clear_screen()
                    self.cancel_order()
                elif choice == 3:
                    self.clear_screen()
                    self.trades = self.modify_order()
                elif choice == 4:
                    self.populate_orderbook()
                    self.clear_screen()
                elif choice == 5:
                    self.show_trades = not self.show_trades
                    self.clear_screen()
                elif choice == 6:
                    self.show_orders = not self.show_orders
                    self.clear_screen()
                elif choice == 7:
                    return 0
                else:
                    self.clear_screen()
                    self._write("Selection not found\n")
        except EOFError:
            return 0


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Interactive order book demo.")
    parser.add_argument("--seed", type=int, default=None, help="seed for generated orders")
    parser.add_argument("--no-clear", action="store_true", help="do not clear the screen")
    args = parser.parse_args(argv)
    terminal = Terminal(
        rng=random.Random(args.seed),
        clear_command=None if args.no_clear else DEFAULT_CLEAR_COMMAND,
    )
    return terminal.run()


if __name__ == "__main__":
    sys.exit(main())