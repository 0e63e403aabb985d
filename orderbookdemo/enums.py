"""Order types, sides and the numeric aliases shared by the order book."""

from enum import Enum, auto

Price = float
Quantity = int
OrderId = int


class OrderType(Enum):
    """How an order behaves when it reaches the book."""

    MARKET = auto()
    GOOD_TILL_CANCEL = auto()
    FILL_AND_KILL = auto()
    FILL_OR_KILL = auto()


class Side(Enum):
    """Which side of the book an order rests on."""

    BUY = auto()
    SELL = auto()