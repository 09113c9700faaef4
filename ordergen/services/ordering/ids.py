"""Order identifier strategies."""
import itertools
import uuid
from abc import ABC, abstractmethod
from enum import Enum
from typing import Union

# Placeholder id used when every order shares one identifier
PLACEHOLDER_ORDER_ID = 3


class IdMode(str, Enum):
    """How order identifiers are produced."""

    FIXED = "fixed"  # Constant placeholder id
    COUNTER = "counter"  # Monotonically increasing per process
    UUID = "uuid"  # Globally unique token

    def __str__(self) -> str:
        """Return the string value of the mode."""
        return self.value


class OrderIdStrategy(ABC):
    """Produces the identifier for each new order."""

    @abstractmethod
    def next_id(self) -> Union[int, str]:
        """Return the identifier for the next order."""
        pass


class FixedIdStrategy(OrderIdStrategy):
    """Every order gets the same placeholder id."""

    def __init__(self, order_id: Union[int, str] = PLACEHOLDER_ORDER_ID):
        self.order_id = order_id

    def next_id(self) -> Union[int, str]:
        return self.order_id


class CounterIdStrategy(OrderIdStrategy):
    """Monotonically increasing integer ids, unique for the process lifetime."""

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)

    def next_id(self) -> int:
        return next(self._counter)


class UuidIdStrategy(OrderIdStrategy):
    """Globally unique string ids."""

    def next_id(self) -> str:
        return f"ORD-{uuid.uuid4().hex[:12].upper()}"


def create_id_strategy(mode: IdMode) -> OrderIdStrategy:
    """Build the id strategy for a configured id mode."""
    strategies = {
        IdMode.FIXED: FixedIdStrategy,
        IdMode.COUNTER: CounterIdStrategy,
        IdMode.UUID: UuidIdStrategy,
    }
    return strategies[IdMode(mode)]()
