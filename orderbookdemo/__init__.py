"""A price-time priority limit order book with an interactive terminal."""

__version__ = "0.1.0"
__all__ = ["enums", "order", "trade", "orderbook", "terminal"]