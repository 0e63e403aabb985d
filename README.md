# orderbookdemo

A small limit order book with price-time priority matching, plus an
interactive terminal that lets you place, modify and cancel orders and
watch the book change.

## Installing

```
pip install .
```

## The terminal

```
orderbookdemo
orderbookdemo --seed 42
orderbookdemo --no-clear
```

Options:

- `--seed N`: seed the random quantities of the generated resting orders,
  so a session can be repeated.
- `--no-clear`: never clear the screen. Without it the screen is cleared
  by running `cls` on Windows and `clear` elsewhere.

When it starts, the book is filled with ten bid levels from 100 down to 91
and ten ask levels from 100 up to 109. Quantities are random: level `i`
(counting from 0) gets between 10 and `10 + 5*i`. The main menu offers:

1. Add Order: Market or GoodTillCancel, buy or sell, then price (GoodTillCancel only) and quantity
2. Cancel Order: one of your own orders, chosen by id
3. Modify Order: new side, price and quantity for one of your orders; the order keeps its type
4. Populate Orderbook: add another round of random resting orders
5. Print Trades (Toggle): show the trades from your last add or modify
6. Print Orders (Toggle): show the orders you have placed
7. Exit

Asks are drawn in red and bids in green. Each level has a bar with one `#`
for every 10 units of quantity. The spread between the best ask and the
best bid is shown between the two sides. Input that is not a number is
reported and asked for again. The session also ends when input runs out.

Order ids are handed out in sequence from 1. The generated orders use them
too.

## Using the book from Python

```python
from orderbookdemo.enums import OrderType, Side
from orderbookdemo.order import Order, OrderModify
from orderbookdemo.orderbook import Orderbook

book = Orderbook()
book.add_order(Order(OrderType.GOOD_TILL_CANCEL, 1, Side.SELL, 101.0, 10))
trades = book.add_order(Order(OrderType.GOOD_TILL_CANCEL, 2, Side.BUY, 101.0, 4))

for trade in trades:
    print(trade.bid_trade.order_id, trade.ask_trade.order_id, trade.bid_trade.quantity)

levels = book.level_infos()
print(levels.asks)  # remaining ask levels, best price first
print(len(book), 1 in book)

book.modify_order(OrderModify(1, Side.SELL, 102.0, 6))
book.cancel_order(1)
```

The modules:

- `orderbookdemo.enums`: `OrderType` (`MARKET`, `GOOD_TILL_CANCEL`,
  `FILL_AND_KILL`, `FILL_OR_KILL`) and `Side` (`BUY`, `SELL`).
- `orderbookdemo.order`: `Order` with `Order.market(order_id, side, quantity)`,
  `fill`, `to_good_till_cancel`, and the `filled_quantity` and `is_filled`
  properties. `OrderModify.to_order(order_type)` builds a new `Order`.
  `OrderError` is raised on invalid requests.
- `orderbookdemo.trade`: `TradeInfo` and `Trade`, with one `TradeInfo`
  for the bid and one for the ask. `match_engine_time` is the matching time
  in nanoseconds.
- `orderbookdemo.orderbook`: `Orderbook`, `LevelInfo` and
  `OrderbookLevelInfos`. Bids are listed best (highest) first and asks best
  (lowest) first.
- `orderbookdemo.terminal`: `Terminal` and `main`. A `Terminal` can be
  given its own book, input and output streams, random generator, and
  clear command (`None` for no clearing).

How it behaves:

- A market buy takes the highest ask price and a market sell takes the
  lowest bid price. The order then rests as a GoodTillCancel order, so it
  can sweep every level. When the opposite side is empty, the order is
  dropped and no trades are returned.
- Adding an order whose id is already in the book does nothing.
- Cancelling or modifying an id that is not in the book does nothing.
- A trade goes at the price of the order with the lower id, which is the
  one that was resting first.
- Filling an order beyond what remains raises `OrderError`. So does
  repricing an order that is not a market order, or giving it a price that
  is not finite.

## What it does not do

- `FILL_AND_KILL` and `FILL_OR_KILL` exist as order types, but the book
  gives them no special handling. They rest and match like GoodTillCancel
  orders, and the terminal does not offer them.
- Nothing is saved. The book, your orders and the trades live only for one
  session.
- The terminal's list of your orders is not updated when those orders
  trade. It shows each order as it was when you placed or modified it.

## Tests

```
pip install ".[test]"
pytest
```