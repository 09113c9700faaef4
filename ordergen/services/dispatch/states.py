"""Dispatch loop states and operator commands."""
from enum import Enum


class DispatchState(str, Enum):
    """States of the dispatch loop."""

    WAITING_FOR_INPUT = "waiting_for_input"  # Idle until the operator asks for orders
    AUTO_SENDING = "auto_sending"  # Sending orders on a randomized interval
    EXITING = "exiting"  # Terminal, the loop stops

    def __str__(self) -> str:
        """Return the string value of the state."""
        return self.value


class Command(str, Enum):
    """Commands the operator can issue to the dispatch loop."""

    SEND_ONE = "send_one"  # Send a single order right away
    TOGGLE_AUTO = "toggle_auto"  # Switch auto-generation on or off
    QUIT = "quit"  # Stop the loop

    def __str__(self) -> str:
        """Return the string value of the command."""
        return self.value
