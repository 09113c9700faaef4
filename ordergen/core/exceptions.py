"""Exceptions raised by the order generator."""


class OrderGenError(Exception):
    """Base class for order generator errors."""


class CatalogError(OrderGenError):
    """Raised when a catalog file cannot be parsed."""


class TransportError(OrderGenError):
    """Raised when the WebSocket connection cannot be established."""
